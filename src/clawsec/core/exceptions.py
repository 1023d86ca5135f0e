# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for clawsec."""


class ClawsecError(Exception):
    """Base exception for all clawsec errors."""


class ConfigurationError(ClawsecError):
    """Invalid or missing configuration."""


class FindingsLoadError(ClawsecError):
    """Failed to read a findings document."""
