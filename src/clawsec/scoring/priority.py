# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-finding priority scoring, P0-P3 ranking and remediation plans.

priority = severity + exploitability + impact + boosters, clamped to [0, 100]

* exploitability = likelihood + inferred complexity + inferred prerequisites
* impact = inferred confidentiality + integrity + availability
* boosters = credential exposure, public exposure, weak credentials,
  attack chaining, minus a penalty when no quick fix exists
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from clawsec.core.constants import PRIORITY_ORDER, PriorityLevel
from clawsec.models.finding import Finding, ensure_findings
from clawsec.models.priority import (
    ExploitabilityComponents,
    ImpactComponents,
    PrioritizedSet,
    PriorityBreakdown,
    PriorityComponents,
    PriorityResult,
    PrioritySummary,
    RankedFinding,
    Recommendation,
    RecommendationTask,
    TimeToFix,
)
from clawsec.scoring.classify import Classification, classify
from clawsec.scoring.weights import DEFAULT_WEIGHTS, PriorityWeights, ScoringWeights

logger = logging.getLogger("clawsec.scoring.priority")

Clock = Callable[[], datetime]

HIGH_EXPLOITABILITY_MIN = 50
HIGH_IMPACT_MIN = 25


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class _Window:
    action: str
    duration: str
    unit: str
    urgency: str
    offset: timedelta
    task_deadline: str
    recommendation: str


WINDOWS: dict[PriorityLevel, _Window] = {
    PriorityLevel.P0: _Window(
        "Fix immediately", "Within hours", "hours", "CRITICAL",
        timedelta(hours=24), "Within hours", "IMMEDIATE ACTION REQUIRED",
    ),
    PriorityLevel.P1: _Window(
        "Fix urgently", "Within 1-3 days", "days", "HIGH",
        timedelta(days=3), "Within 1-3 days", "URGENT REMEDIATION",
    ),
    PriorityLevel.P2: _Window(
        "Fix soon", "Within 1-2 weeks", "weeks", "MEDIUM",
        timedelta(days=14), "Within 1-2 weeks", "SCHEDULE REMEDIATION",
    ),
    PriorityLevel.P3: _Window(
        "Fix eventually", "Backlog (schedule within month)", "months", "LOW",
        timedelta(days=30), "Within 1 month", "BACKLOG ITEMS",
    ),
}


def score_to_priority_level(score: int, weights: ScoringWeights = DEFAULT_WEIGHTS) -> PriorityLevel:
    thresholds = weights.priority.thresholds
    for level in (PriorityLevel.P0, PriorityLevel.P1, PriorityLevel.P2):
        if score >= thresholds[level]:
            return level
    return PriorityLevel.P3


def time_to_fix(level: PriorityLevel, now: datetime) -> TimeToFix:
    window = WINDOWS[level]
    return TimeToFix(
        deadline=(now + window.offset).isoformat(),
        duration=window.duration,
        unit=window.unit,
        urgency=window.urgency,
        action=window.action,
    )


def _exploitability_score(c: Classification, weights: PriorityWeights) -> int:
    return (
        weights.likelihood[c.likelihood]
        + weights.complexity[c.complexity]
        + weights.prerequisites[c.prerequisites]
    )


def _impact_score(c: Classification, weights: PriorityWeights) -> int:
    return (
        weights.confidentiality[c.confidentiality]
        + weights.integrity[c.integrity]
        + weights.availability[c.availability]
    )


def _booster_score(c: Classification, weights: PriorityWeights) -> int:
    score = 0
    if c.credential_exposure:
        score += weights.credential_exposure
    if c.public_exposure:
        score += weights.public_exposure
    if c.weak_credentials:
        score += weights.weak_credentials
    if c.enables_chaining:
        score += weights.enables_chaining
    if c.no_quick_fix:
        score += weights.no_quick_fix
    return score


def booster_reasons(c: Classification) -> list[str]:
    reasons = []
    if c.credential_exposure:
        reasons.append("credential exposure")
    if c.public_exposure:
        reasons.append("public exposure")
    if c.weak_credentials:
        reasons.append("weak security controls")
    if c.enables_chaining:
        reasons.append("enables attack chaining")
    return reasons


def build_reasoning(finding: Finding, breakdown: PriorityBreakdown, c: Classification) -> str:
    """Human-readable justification assembled from the score components."""
    reasons = [f"{finding.severity_label} severity baseline (+{breakdown.severity} points)"]

    if breakdown.exploitability >= HIGH_EXPLOITABILITY_MIN:
        reasons.append(
            f"High exploitability: {c.likelihood} likelihood (+{breakdown.exploitability} points)"
        )
    else:
        reasons.append(f"Moderate exploitability (+{breakdown.exploitability} points)")

    if breakdown.impact >= HIGH_IMPACT_MIN:
        reasons.append(
            "High business impact: affects confidentiality/integrity/availability "
            f"(+{breakdown.impact} points)"
        )

    if breakdown.boosters > 0:
        fired = booster_reasons(c)
        if fired:
            reasons.append(f"Priority boosters: {', '.join(fired)} (+{breakdown.boosters} points)")

    return "; ".join(reasons)


def _priority_at(finding: Finding, weights: ScoringWeights, now: datetime) -> PriorityResult:
    pw = weights.priority
    c = classify(finding, pw)

    severity = pw.severity.get(finding.severity, pw.missing_severity)
    exploitability = _exploitability_score(c, pw)
    impact = _impact_score(c, pw)
    boosters = _booster_score(c, pw)

    total = severity + exploitability + impact + boosters
    normalized = min(100, max(0, total))
    level = score_to_priority_level(normalized, weights)

    breakdown = PriorityBreakdown(
        severity=severity,
        exploitability=exploitability,
        impact=impact,
        boosters=boosters,
        total=total,
        normalized=normalized,
    )
    return PriorityResult(
        score=normalized,
        level=level,
        time_to_fix=time_to_fix(level, now),
        breakdown=breakdown,
        components=PriorityComponents(
            exploitability=ExploitabilityComponents(
                likelihood=c.likelihood,
                complexity=c.complexity,
                prerequisites=c.prerequisites,
            ),
            impact=ImpactComponents(
                confidentiality=c.confidentiality,
                integrity=c.integrity,
                availability=c.availability,
            ),
        ),
        reasoning=build_reasoning(finding, breakdown, c),
    )


def calculate_priority(
    finding: Finding | Mapping[str, Any],
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    clock: Clock | None = None,
) -> PriorityResult:
    """Compute the priority of a single finding.

    The deadline in ``time_to_fix`` is derived from ``clock()``; pass a fixed
    clock for reproducible output.
    """
    item = finding if isinstance(finding, Finding) else Finding.model_validate(dict(finding))
    now = (clock or utc_now)()
    return _priority_at(item, weights, now)


def _build_recommendations(
    grouped: dict[PriorityLevel, list[RankedFinding]],
) -> list[Recommendation]:
    recommendations: list[Recommendation] = []
    for level in PRIORITY_ORDER:
        ranked = grouped[level]
        if not ranked:
            continue
        window = WINDOWS[level]
        recommendations.append(
            Recommendation(
                priority=level,
                action=window.recommendation,
                tasks=[
                    RecommendationTask(
                        order=i,
                        title=f.title,
                        deadline=window.task_deadline,
                        steps=f.remediation_steps(),
                        reasoning=f.priority.reasoning,
                    )
                    for i, f in enumerate(ranked, start=1)
                ],
            )
        )
    return recommendations


def prioritize_findings(
    findings: Iterable[Finding | Mapping[str, Any]] | None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    clock: Clock | None = None,
) -> PrioritizedSet:
    """Rank *findings* by priority and build the remediation plan.

    Ties keep their input order.  The clock is read once for the whole set.
    """
    items = ensure_findings(findings)
    if not items:
        return PrioritizedSet()

    now = (clock or utc_now)()
    annotated = [
        RankedFinding(**{**f.model_dump(), "priority": _priority_at(f, weights, now)})
        for f in items
    ]
    # sorted() is stable, so equal scores preserve input order.
    rankings = sorted(annotated, key=lambda f: -f.priority.score)

    grouped: dict[PriorityLevel, list[RankedFinding]] = {level: [] for level in PRIORITY_ORDER}
    for ranked in rankings:
        grouped[ranked.priority.level].append(ranked)

    logger.debug(
        "Prioritized %d findings: %s",
        len(rankings),
        ", ".join(f"{level}={len(grouped[level])}" for level in PRIORITY_ORDER),
    )

    return PrioritizedSet(
        rankings=rankings,
        summary=PrioritySummary(
            total=len(items),
            by_priority={level: len(grouped[level]) for level in PRIORITY_ORDER},
            recommendations=_build_recommendations(grouped),
        ),
        grouped=grouped,
    )
