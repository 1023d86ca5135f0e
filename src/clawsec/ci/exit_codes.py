# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0 - SECURE: no findings
    1 - CRITICAL/HIGH: overall risk demands urgent remediation
    2 - ERROR: audit could not complete (bad input or configuration)
    3 - MEDIUM/LOW: findings present but below the urgent threshold
"""

from __future__ import annotations

from enum import IntEnum


class CIExitCode(IntEnum):
    """Exit codes used by clawsec in CI mode."""

    SECURE = 0
    URGENT = 1
    AUDIT_ERROR = 2
    ADVISORY = 3


# Map risk level strings to exit codes
_RISK_LEVEL_MAP: dict[str, CIExitCode] = {
    "SECURE": CIExitCode.SECURE,
    "CRITICAL": CIExitCode.URGENT,
    "HIGH": CIExitCode.URGENT,
    "MEDIUM": CIExitCode.ADVISORY,
    "LOW": CIExitCode.ADVISORY,
}


def risk_level_to_exit_code(level: str) -> CIExitCode:
    """Convert an overall risk level to a CI exit code.

    Args:
        level: One of SECURE, LOW, MEDIUM, HIGH, CRITICAL.

    Returns:
        The corresponding CIExitCode.

    Raises:
        ValueError: If the risk level is not recognized.
    """
    normalized = str(level).upper().strip()
    if normalized not in _RISK_LEVEL_MAP:
        msg = f"Unknown risk level: {level!r}. Expected one of: {', '.join(_RISK_LEVEL_MAP)}"
        raise ValueError(msg)
    return _RISK_LEVEL_MAP[normalized]
