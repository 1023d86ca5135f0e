# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Aggregate risk score: findings -> bounded 0-100 score and risk level.

Algorithm
---------
1. Per severity tier, the i-th finding (0-based) contributes
   ``weight * tier_decay**i`` to the base score.
2. The base score is multiplied by context multipliers (credential exposure,
   public exposure, weak configuration, share of HIGH-likelihood findings).
3. Beyond ``global_decay_after`` findings the adjusted score is multiplied by
   ``global_decay**(n - global_decay_after)``.
4. The result is clamped to [0, 100] and rounded half-up.

Levels partition the integer range: >=90 CRITICAL, >=70 HIGH, >=40 MEDIUM,
>=1 LOW, otherwise SECURE.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from clawsec.core.constants import Confidence, Likelihood, RiskLevel, ScanType, Severity
from clawsec.models.finding import Finding, ensure_findings
from clawsec.models.score import AppliedFactor, ScoreBreakdown, ScoreResult, SeverityDistribution
from clawsec.scoring.classify import (
    indicates_credential_exposure,
    indicates_public_exposure,
    indicates_weak_configuration,
)
from clawsec.scoring.weights import DEFAULT_WEIGHTS, RiskWeights, ScoringWeights

logger = logging.getLogger("clawsec.scoring.risk")

FindingsInput = Iterable[Finding | Mapping[str, Any]] | None


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_by_severity(findings: list[Finding]) -> SeverityDistribution:
    counts = {severity: 0 for severity in Severity}
    for finding in findings:
        if finding.severity is not None:
            counts[finding.severity] += 1
    return SeverityDistribution(
        critical=counts[Severity.CRITICAL],
        high=counts[Severity.HIGH],
        medium=counts[Severity.MEDIUM],
        low=counts[Severity.LOW],
    )


def calculate_base_score(distribution: SeverityDistribution, weights: RiskWeights) -> float:
    counts = {
        Severity.CRITICAL: distribution.critical,
        Severity.HIGH: distribution.high,
        Severity.MEDIUM: distribution.medium,
        Severity.LOW: distribution.low,
    }
    score = 0.0
    for severity, count in counts.items():
        weight = weights.severity.get(severity, 0)
        for i in range(count):
            score += weight * weights.tier_decay**i
    return score


def _high_likelihood_ratio(findings: list[Finding]) -> float:
    high = sum(1 for f in findings if f.likelihood == Likelihood.HIGH)
    return high / len(findings)


def _applied_factors(findings: list[Finding], weights: RiskWeights) -> list[AppliedFactor]:
    """Every multiplier that changes the score, in application order."""
    factors: list[AppliedFactor] = []

    if any(indicates_credential_exposure(f) for f in findings):
        factors.append(
            AppliedFactor(
                name="Credential Exposure",
                multiplier=weights.credential_exposure,
                description="Hardcoded credentials significantly increase risk",
            )
        )
    if any(indicates_public_exposure(f) for f in findings):
        factors.append(
            AppliedFactor(
                name="Public Exposure",
                multiplier=weights.public_exposure,
                description="Services exposed to internet increase attack surface",
            )
        )
    if any(indicates_weak_configuration(f) for f in findings):
        factors.append(
            AppliedFactor(
                name="Weak Configuration",
                multiplier=weights.weak_configuration,
                description="Weak security settings make exploitation easier",
            )
        )

    ratio = _high_likelihood_ratio(findings)
    if ratio > weights.high_likelihood_ratio:
        factors.append(
            AppliedFactor(
                name="High Likelihood",
                multiplier=weights.high_likelihood,
                description="Multiple findings have high probability of exploitation",
            )
        )
    elif ratio > weights.medium_likelihood_ratio and weights.medium_likelihood != 1.0:
        factors.append(
            AppliedFactor(
                name="Moderate Likelihood",
                multiplier=weights.medium_likelihood,
                description="A significant share of findings are likely to be exploited",
            )
        )
    return factors


def _diminishing_factor(findings_count: int, weights: RiskWeights) -> float:
    excess = max(0, findings_count - weights.global_decay_after)
    return weights.global_decay**excess


def calculate_confidence(findings: list[Finding], weights: RiskWeights) -> Confidence:
    """Blend of evidence coverage and share of high-confidence findings."""
    if not findings:
        return Confidence.HIGH
    total = len(findings)
    with_evidence = sum(1 for f in findings if f.evidence)
    high_confidence = sum(
        1
        for f in findings
        if (f.confidence or "").lower() == "high" or f.likelihood == Likelihood.HIGH
    )
    combined = (with_evidence / total + high_confidence / total) / 2
    if combined >= weights.confidence_high:
        return Confidence.HIGH
    if combined >= weights.confidence_medium:
        return Confidence.MEDIUM
    return Confidence.LOW


def score_to_risk_level(score: int, weights: ScoringWeights = DEFAULT_WEIGHTS) -> RiskLevel:
    """Map a 0-100 score to its risk level."""
    thresholds = weights.risk.thresholds
    for level in (RiskLevel.CRITICAL, RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW):
        if score >= thresholds[level]:
            return level
    return RiskLevel.SECURE


def risk_level_to_score_range(level: str, weights: ScoringWeights = DEFAULT_WEIGHTS) -> tuple[int, int]:
    """Inclusive score range covered by *level*; (0, 100) if unknown."""
    thresholds = weights.risk.thresholds
    normalized = level.strip().upper()
    ranges = {
        RiskLevel.CRITICAL: (thresholds[RiskLevel.CRITICAL], 100),
        RiskLevel.HIGH: (thresholds[RiskLevel.HIGH], thresholds[RiskLevel.CRITICAL] - 1),
        RiskLevel.MEDIUM: (thresholds[RiskLevel.MEDIUM], thresholds[RiskLevel.HIGH] - 1),
        RiskLevel.LOW: (thresholds[RiskLevel.LOW], thresholds[RiskLevel.MEDIUM] - 1),
        RiskLevel.SECURE: (0, 0),
    }
    if normalized not in RiskLevel.__members__:
        return (0, 100)
    return ranges[RiskLevel(normalized)]


def normalize_legacy_risk_level(
    level: str,
    finding_count: int = 0,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Convert a legacy level label into a representative 0-100 score.

    Starts at the mid-point of the level's range and moves up by at most half
    the range as the finding count grows.
    """
    low, high = risk_level_to_score_range(level, weights)
    score = (low + high) / 2
    if finding_count > 0:
        score += (high - low) * min(finding_count / 10, 0.5)
    return min(high, round_half_up(score))


def _empty_result(scan_type: ScanType | None) -> ScoreResult:
    return ScoreResult(
        score=0,
        level=RiskLevel.SECURE,
        confidence=Confidence.HIGH,
        breakdown=ScoreBreakdown(scan_type=scan_type),
    )


def calculate_risk_score(
    findings: FindingsInput,
    *,
    scan_type: ScanType | None = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ScoreResult:
    """Compute the aggregate risk score for *findings*.

    ``scan_type`` is recorded in the breakdown only; use
    :func:`calculate_score_by_type` to apply a scan-type multiplier.
    """
    items = ensure_findings(findings)
    if not items:
        return _empty_result(scan_type)

    risk_weights = weights.risk
    distribution = count_by_severity(items)
    base_score = calculate_base_score(distribution, risk_weights)

    factors = _applied_factors(items, risk_weights)
    context_multiplier = 1.0
    for factor in factors:
        context_multiplier *= factor.multiplier

    adjusted_score = base_score * context_multiplier
    if len(items) > risk_weights.global_decay_after:
        decay = _diminishing_factor(len(items), risk_weights)
        adjusted_score *= decay
        factors.append(
            AppliedFactor(
                name="Diminishing Returns",
                multiplier=decay,
                description="Score adjusted to prevent inflation from many minor issues",
            )
        )

    final_score = min(100, max(0, round_half_up(adjusted_score)))
    level = score_to_risk_level(final_score, weights)
    confidence = calculate_confidence(items, risk_weights)

    logger.debug(
        "Risk score: base=%.2f multiplier=%.2f adjusted=%.2f final=%d level=%s",
        base_score,
        context_multiplier,
        adjusted_score,
        final_score,
        level,
    )

    return ScoreResult(
        score=final_score,
        level=level,
        confidence=confidence,
        breakdown=ScoreBreakdown(
            base_score=round_half_up(base_score),
            context_multiplier=round_half_up(context_multiplier * 100) / 100,
            adjusted_score=round_half_up(adjusted_score),
            final_score=final_score,
            findings_count=len(items),
            severity_distribution=distribution,
            applied_factors=factors,
            scan_type=scan_type,
        ),
    )


def calculate_score_by_type(
    findings: FindingsInput,
    scan_type: ScanType | str = ScanType.CONFIG,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> ScoreResult:
    """Risk score scaled by the multiplier of the given scan type.

    Unknown scan types use a multiplier of 1.0.
    """
    try:
        resolved = ScanType(scan_type)
    except ValueError:
        resolved = None
    multiplier = weights.risk.scan_type.get(resolved, 1.0) if resolved else 1.0

    base = calculate_risk_score(findings, scan_type=resolved, weights=weights)
    adjusted = min(100, max(0, round_half_up(base.score * multiplier)))
    breakdown = base.breakdown.model_copy(
        update={"type_multiplier": multiplier, "original_score": base.score}
    )
    return base.model_copy(
        update={
            "score": adjusted,
            "level": score_to_risk_level(adjusted, weights),
            "breakdown": breakdown,
        }
    )
