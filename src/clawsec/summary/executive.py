# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Executive summary: a short technical narrative over the scored findings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from clawsec.core.constants import LIKELIHOOD_RANK, SEVERITY_ORDER, Confidence, RiskLevel, Severity
from clawsec.core.threats import get_threat_profile
from clawsec.models.finding import Finding, ensure_findings
from clawsec.models.score import ScoreResult
from clawsec.scoring.risk import calculate_risk_score, count_by_severity

logger = logging.getLogger("clawsec.summary.executive")

MAX_EVIDENCE_ITEMS = 3

SEVERITY_EMOJI: dict[Severity, str] = {
    Severity.CRITICAL: "🚨",
    Severity.HIGH: "⚠️",
    Severity.MEDIUM: "⚡",
    Severity.LOW: "ℹ️",
}

_SEVERITY_RANK: dict[Severity, int] = {
    severity: len(SEVERITY_ORDER) - i for i, severity in enumerate(SEVERITY_ORDER)
}


@dataclass(frozen=True)
class RiskLevelProfile:
    label: str
    cvss_band: str
    sla: str


RISK_LEVEL_PROFILES: dict[RiskLevel, RiskLevelProfile] = {
    RiskLevel.CRITICAL: RiskLevelProfile("Critical", "9.0-10.0", "within 24 hours"),
    RiskLevel.HIGH: RiskLevelProfile("High", "7.0-8.9", "within 1 week"),
    RiskLevel.MEDIUM: RiskLevelProfile("Medium", "4.0-6.9", "within 1 month"),
    RiskLevel.LOW: RiskLevelProfile("Low", "0.1-3.9", "within 3 months"),
    RiskLevel.SECURE: RiskLevelProfile("None", "0.0", "no action required"),
}

ALL_CLEAR_SUMMARY = (
    "Technical assessment found no security findings; the configuration "
    "meets the audited baseline."
)
ALL_CLEAR_BULLETS = [
    "✅ Gateway authentication, binding and rate limiting pass all configuration checks",
    "✅ No hardcoded credentials or tokens detected in the configuration",
    "✅ Tool execution and session storage settings follow the hardened baseline",
    "📊 Re-run the audit after every configuration change to keep this posture",
]


class ExecutiveSummary(BaseModel):
    summary: str
    bullets: list[str] = Field(default_factory=list)
    risk_level: RiskLevel
    confidence: Confidence
    risk_score: int = 0
    cvss_band: str = RISK_LEVEL_PROFILES[RiskLevel.SECURE].cvss_band
    sla: str = RISK_LEVEL_PROFILES[RiskLevel.SECURE].sla
    total_issues: int = 0
    critical_issues: int = 0
    high_issues: int = 0
    medium_issues: int = 0
    low_issues: int = 0


def sort_by_urgency(findings: list[Finding]) -> list[Finding]:
    """Severity desc, then likelihood desc; input order breaks ties."""
    return sorted(
        findings,
        key=lambda f: (
            -_SEVERITY_RANK.get(f.severity, 0),
            -LIKELIHOOD_RANK[f.effective_likelihood],
        ),
    )


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_evidence(evidence: Mapping[str, Any]) -> str:
    """``k=v`` pairs for up to three scalar evidence entries."""
    pairs = [
        f"{key}={_format_value(value)}"
        for key, value in evidence.items()
        if isinstance(value, (str, int, float, bool))
    ]
    return ", ".join(pairs[:MAX_EVIDENCE_ITEMS])


def finding_bullet(finding: Finding) -> str:
    profile = get_threat_profile(finding.threat_id)
    emoji = SEVERITY_EMOJI.get(finding.severity, "•")
    tid = finding.threat_id or "N/A"
    title = finding.title or profile.name
    bullet = (
        f"{emoji} [{tid}] {title} ({finding.severity_label}) — "
        f"{profile.attack_vector}. Impact: {profile.technical_impact}"
    )
    evidence = format_evidence(finding.evidence)
    if evidence:
        bullet += f" (Evidence: {evidence})"
    return bullet


def _sla_for(finding: Finding, fallback: RiskLevelProfile) -> str:
    if finding.severity is None:
        return fallback.sla
    return RISK_LEVEL_PROFILES[RiskLevel(finding.severity.value)].sla


def remediation_bullets(ordered: list[Finding], level_profile: RiskLevelProfile) -> list[str]:
    """Remediation for the top CRITICAL and top HIGH finding, else the top finding."""
    targets = [
        next((f for f in ordered if f.severity == severity), None)
        for severity in (Severity.CRITICAL, Severity.HIGH)
    ]
    chosen = [f for f in targets if f is not None] or ordered[:1]
    bullets = []
    for finding in chosen:
        profile = get_threat_profile(finding.threat_id)
        tid = finding.threat_id or "N/A"
        bullets.append(
            f"🎯 Remediate [{tid}] {_sla_for(finding, level_profile)}: {profile.remediation}."
        )
    return bullets


def summary_statement(findings: list[Finding], score_result: ScoreResult) -> str:
    counts = count_by_severity(findings)
    profile = RISK_LEVEL_PROFILES[score_result.level]
    total = len(findings)
    noun = "finding" if total == 1 else "findings"
    return (
        f"Technical assessment found {total} {noun} "
        f"({counts.critical} critical, {counts.high} high, {counts.medium} medium, {counts.low} low). "
        f"Risk score {score_result.score}/100 ({score_result.level}; "
        f"CVSS-style band {profile.label} {profile.cvss_band}). "
        f"Remediation SLA: {profile.sla}."
    )


def generate_executive_summary(
    findings: Iterable[Finding | Mapping[str, Any]] | None,
    score_result: ScoreResult | None = None,
    *,
    max_bullets: int = 5,
    include_recommendations: bool = True,
) -> ExecutiveSummary:
    """Build the executive summary for *findings*.

    When *score_result* is omitted it is computed with the default weights.
    """
    items = ensure_findings(findings)
    if not items:
        return ExecutiveSummary(
            summary=ALL_CLEAR_SUMMARY,
            bullets=list(ALL_CLEAR_BULLETS),
            risk_level=RiskLevel.SECURE,
            confidence=Confidence.HIGH,
        )

    if score_result is None:
        score_result = calculate_risk_score(items)

    level_profile = RISK_LEVEL_PROFILES[score_result.level]
    ordered = sort_by_urgency(items)
    limit = max(1, max_bullets)

    bullets = [finding_bullet(f) for f in ordered[: limit - 1]]
    if include_recommendations:
        bullets.extend(remediation_bullets(ordered, level_profile))

    counts = count_by_severity(items)
    logger.debug("Executive summary built with %d bullets", min(len(bullets), limit))

    return ExecutiveSummary(
        summary=summary_statement(items, score_result),
        bullets=bullets[:limit],
        risk_level=score_result.level,
        confidence=score_result.confidence,
        risk_score=score_result.score,
        cvss_band=level_profile.cvss_band,
        sla=level_profile.sla,
        total_issues=len(items),
        critical_issues=counts.critical,
        high_issues=counts.high,
        medium_issues=counts.medium,
        low_issues=counts.low,
    )


def generate_executive_summary_brief(
    findings: Iterable[Finding | Mapping[str, Any]] | None,
    score_result: ScoreResult | None = None,
) -> str:
    """One-line notification text for chat or email alerts."""
    items = ensure_findings(findings)
    if score_result is None:
        score_result = calculate_risk_score(items)
    counts = count_by_severity(items)
    brief = (
        f"Security scan: {len(items)} issues found "
        f"(risk: {score_result.level}, {score_result.score}/100).\n"
    )
    if counts.critical:
        brief += f"⚠️ {counts.critical} critical - fix {RISK_LEVEL_PROFILES[RiskLevel.CRITICAL].sla}."
    elif counts.high:
        brief += f"⚠️ {counts.high} high-priority - fix {RISK_LEVEL_PROFILES[RiskLevel.HIGH].sla}."
    else:
        brief += "No critical issues - review recommended."
    return brief
