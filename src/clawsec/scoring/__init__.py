# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Risk scoring, classification and prioritization."""

from clawsec.scoring.classify import Classification, classify
from clawsec.scoring.priority import calculate_priority, prioritize_findings, score_to_priority_level
from clawsec.scoring.risk import (
    calculate_risk_score,
    calculate_score_by_type,
    normalize_legacy_risk_level,
    risk_level_to_score_range,
    score_to_risk_level,
)
from clawsec.scoring.weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights

__all__ = [
    "DEFAULT_WEIGHTS",
    "Classification",
    "ScoringWeights",
    "calculate_priority",
    "calculate_risk_score",
    "calculate_score_by_type",
    "classify",
    "load_weights",
    "normalize_legacy_risk_level",
    "prioritize_findings",
    "risk_level_to_score_range",
    "score_to_priority_level",
    "score_to_risk_level",
]
