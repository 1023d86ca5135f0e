# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration helpers."""

from clawsec.ci.exit_codes import CIExitCode, risk_level_to_exit_code

__all__ = ["CIExitCode", "risk_level_to_exit_code"]
