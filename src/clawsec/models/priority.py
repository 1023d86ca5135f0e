# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Priority and recommendation models."""

from __future__ import annotations

from pydantic import Field

from clawsec.core.constants import (
    Complexity,
    ImpactLevel,
    Likelihood,
    Prerequisite,
    PriorityLevel,
)
from clawsec.models.base import ReportModel
from clawsec.models.finding import Finding


class TimeToFix(ReportModel):
    """Remediation window for a priority level."""

    deadline: str = Field(description="ISO-8601 timestamp: evaluation time + level offset")
    duration: str
    unit: str
    urgency: str
    action: str


class PriorityBreakdown(ReportModel):
    severity: int
    exploitability: int
    impact: int
    boosters: int
    total: int
    normalized: int


class ExploitabilityComponents(ReportModel):
    likelihood: Likelihood
    complexity: Complexity
    prerequisites: Prerequisite


class ImpactComponents(ReportModel):
    confidentiality: ImpactLevel
    integrity: ImpactLevel
    availability: ImpactLevel


class PriorityComponents(ReportModel):
    exploitability: ExploitabilityComponents
    impact: ImpactComponents


class PriorityResult(ReportModel):
    """Priority analysis of a single finding."""

    score: int = Field(ge=0, le=100)
    level: PriorityLevel
    time_to_fix: TimeToFix
    breakdown: PriorityBreakdown
    components: PriorityComponents
    reasoning: str


class RankedFinding(Finding):
    """A finding annotated with its priority."""

    priority: PriorityResult


class RecommendationTask(ReportModel):
    order: int
    title: str
    deadline: str
    steps: list[str] = Field(default_factory=list)
    reasoning: str


class Recommendation(ReportModel):
    priority: PriorityLevel
    action: str
    tasks: list[RecommendationTask] = Field(default_factory=list)


def _empty_counts() -> dict[PriorityLevel, int]:
    return {level: 0 for level in PriorityLevel}


def _empty_groups() -> dict[PriorityLevel, list[RankedFinding]]:
    return {level: [] for level in PriorityLevel}


class PrioritySummary(ReportModel):
    total: int = 0
    by_priority: dict[PriorityLevel, int] = Field(default_factory=_empty_counts)
    recommendations: list[Recommendation] = Field(default_factory=list)


class PrioritizedSet(ReportModel):
    """All findings ranked by priority, grouped into P0-P3."""

    rankings: list[RankedFinding] = Field(default_factory=list)
    summary: PrioritySummary = Field(default_factory=PrioritySummary)
    grouped: dict[PriorityLevel, list[RankedFinding]] = Field(default_factory=_empty_groups)
