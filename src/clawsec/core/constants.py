# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fixed labels shared by the scoring components."""

from enum import StrEnum


class Severity(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Likelihood(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class RiskLevel(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    SECURE = "SECURE"


class Confidence(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PriorityLevel(StrEnum):
    P0 = "P0"
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"


class Complexity(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Prerequisite(StrEnum):
    NONE = "NONE"
    LOCAL = "LOCAL"
    AUTH = "AUTH"
    ADMIN = "ADMIN"


class ImpactLevel(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class ScanType(StrEnum):
    CONFIG = "config"
    VULNERABILITY = "vulnerability"
    COMPLIANCE = "compliance"
    CREDENTIAL = "credential"
    PERMISSIONS = "permissions"


# Highest first.
SEVERITY_ORDER: list[Severity] = [
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
]

LIKELIHOOD_RANK: dict[Likelihood, int] = {
    Likelihood.HIGH: 3,
    Likelihood.MEDIUM: 2,
    Likelihood.LOW: 1,
}

PRIORITY_ORDER: list[PriorityLevel] = [
    PriorityLevel.P0,
    PriorityLevel.P1,
    PriorityLevel.P2,
    PriorityLevel.P3,
]
