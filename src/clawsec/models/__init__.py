# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for clawsec."""

from clawsec.models.finding import Finding, Remediation, ensure_findings
from clawsec.models.priority import (
    PrioritizedSet,
    PriorityResult,
    RankedFinding,
    Recommendation,
    RecommendationTask,
    TimeToFix,
)
from clawsec.models.score import AppliedFactor, ScoreBreakdown, ScoreResult, SeverityDistribution

__all__ = [
    "AppliedFactor",
    "Finding",
    "PrioritizedSet",
    "PriorityResult",
    "RankedFinding",
    "Recommendation",
    "RecommendationTask",
    "Remediation",
    "ScoreBreakdown",
    "ScoreResult",
    "SeverityDistribution",
    "TimeToFix",
    "ensure_findings",
]
