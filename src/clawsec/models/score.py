# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Risk score result models."""

from __future__ import annotations

from pydantic import Field

from clawsec.core.constants import Confidence, RiskLevel, ScanType
from clawsec.models.base import ReportModel


class SeverityDistribution(ReportModel):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium + self.low


class AppliedFactor(ReportModel):
    """A context multiplier that was applied to the score."""

    name: str
    multiplier: float
    description: str


class ScoreBreakdown(ReportModel):
    base_score: int = 0
    context_multiplier: float = 1.0
    adjusted_score: int = 0
    final_score: int = 0
    findings_count: int = 0
    severity_distribution: SeverityDistribution = Field(default_factory=SeverityDistribution)
    applied_factors: list[AppliedFactor] = Field(default_factory=list)
    scan_type: ScanType | None = None
    type_multiplier: float | None = None
    original_score: int | None = None


class ScoreResult(ReportModel):
    """Normalized 0-100 risk score for a set of findings."""

    score: int = Field(ge=0, le=100)
    level: RiskLevel
    confidence: Confidence
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
