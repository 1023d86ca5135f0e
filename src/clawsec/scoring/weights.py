# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Injectable weight tables for the risk and priority calculators.

Every scoring function takes a ``weights`` argument defaulting to
:data:`DEFAULT_WEIGHTS`; alternative regimes are built with
``DEFAULT_WEIGHTS.model_copy(update=...)`` or loaded from YAML with
:func:`load_weights`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clawsec.core.constants import (
    Complexity,
    ImpactLevel,
    Likelihood,
    Prerequisite,
    PriorityLevel,
    RiskLevel,
    ScanType,
    Severity,
)
from clawsec.core.exceptions import ConfigurationError

logger = logging.getLogger("clawsec.scoring.weights")


def _cia_table() -> dict[ImpactLevel, int]:
    return {
        ImpactLevel.CRITICAL: 10,
        ImpactLevel.HIGH: 7,
        ImpactLevel.MEDIUM: 4,
        ImpactLevel.LOW: 2,
    }


class RiskWeights(BaseModel):
    """Weights for the aggregate 0-100 risk score."""

    model_config = ConfigDict(frozen=True)

    severity: dict[Severity, float] = Field(
        default_factory=lambda: {
            Severity.CRITICAL: 25,
            Severity.HIGH: 15,
            Severity.MEDIUM: 8,
            Severity.LOW: 3,
        }
    )
    # Each repeat within a severity tier counts tier_decay^i of the first.
    tier_decay: float = 0.85
    # Beyond global_decay_after findings the whole score decays per finding.
    global_decay: float = 0.95
    global_decay_after: int = 3

    credential_exposure: float = 1.5
    public_exposure: float = 1.4
    weak_configuration: float = 1.2
    high_likelihood: float = 1.3
    medium_likelihood: float = 1.0
    high_likelihood_ratio: float = 0.5
    medium_likelihood_ratio: float = 0.25

    thresholds: dict[RiskLevel, int] = Field(
        default_factory=lambda: {
            RiskLevel.CRITICAL: 90,
            RiskLevel.HIGH: 70,
            RiskLevel.MEDIUM: 40,
            RiskLevel.LOW: 1,
        }
    )
    confidence_high: float = 0.7
    confidence_medium: float = 0.4

    scan_type: dict[ScanType, float] = Field(
        default_factory=lambda: {
            ScanType.CONFIG: 1.0,
            ScanType.VULNERABILITY: 1.2,
            ScanType.COMPLIANCE: 0.9,
            ScanType.CREDENTIAL: 1.5,
            ScanType.PERMISSIONS: 1.1,
        }
    )


class PriorityWeights(BaseModel):
    """Weights for the per-finding 0-100 priority score."""

    model_config = ConfigDict(frozen=True)

    severity: dict[Severity, int] = Field(
        default_factory=lambda: {
            Severity.CRITICAL: 40,
            Severity.HIGH: 30,
            Severity.MEDIUM: 20,
            Severity.LOW: 10,
        }
    )
    missing_severity: int = 10

    likelihood: dict[Likelihood, int] = Field(
        default_factory=lambda: {
            Likelihood.HIGH: 30,
            Likelihood.MEDIUM: 20,
            Likelihood.LOW: 10,
        }
    )
    complexity: dict[Complexity, int] = Field(
        default_factory=lambda: {
            Complexity.LOW: 15,
            Complexity.MEDIUM: 10,
            Complexity.HIGH: 5,
        }
    )
    prerequisites: dict[Prerequisite, int] = Field(
        default_factory=lambda: {
            Prerequisite.NONE: 10,
            Prerequisite.LOCAL: 5,
            Prerequisite.AUTH: 3,
            Prerequisite.ADMIN: 1,
        }
    )

    confidentiality: dict[ImpactLevel, int] = Field(default_factory=_cia_table)
    integrity: dict[ImpactLevel, int] = Field(default_factory=_cia_table)
    availability: dict[ImpactLevel, int] = Field(default_factory=_cia_table)

    credential_exposure: int = 20
    public_exposure: int = 15
    weak_credentials: int = 15
    enables_chaining: int = 10
    no_quick_fix: int = -5
    quick_fix_max_steps: int = 5

    thresholds: dict[PriorityLevel, int] = Field(
        default_factory=lambda: {
            PriorityLevel.P0: 90,
            PriorityLevel.P1: 70,
            PriorityLevel.P2: 50,
        }
    )


class ScoringWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    risk: RiskWeights = Field(default_factory=RiskWeights)
    priority: PriorityWeights = Field(default_factory=PriorityWeights)


DEFAULT_WEIGHTS = ScoringWeights()


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def weights_from_mapping(overrides: dict[str, Any]) -> ScoringWeights:
    """Apply partial *overrides* on top of the default weights."""
    base = DEFAULT_WEIGHTS.model_dump(mode="json")
    try:
        return ScoringWeights.model_validate(_deep_merge(base, overrides))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid weight overrides: {exc}") from exc


def load_weights(path: str | Path) -> ScoringWeights:
    """Load weight overrides from a YAML file.

    Raises:
        ConfigurationError: If the file cannot be read or does not describe
            valid weights.
    """
    weights_path = Path(path)
    try:
        raw = yaml.safe_load(weights_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read weights file {weights_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in weights file {weights_path}: {exc}") from exc

    if raw is None:
        return DEFAULT_WEIGHTS
    if not isinstance(raw, dict):
        msg = f"Weights file {weights_path} must contain a mapping, got {type(raw).__name__}"
        raise ConfigurationError(msg)

    weights = weights_from_mapping(raw)
    logger.info("Loaded scoring weight overrides from %s", weights_path)
    return weights
