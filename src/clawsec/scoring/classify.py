# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Heuristic classification of findings.

Exploitability and CIA impact are inferred from a finding's threat id,
title/description/impact text and evidence.  All substring matching happens
here, once per finding; the calculators only consume the resulting
:class:`Classification`.
"""

from __future__ import annotations

from dataclasses import dataclass

from clawsec.core.constants import (
    Complexity,
    ImpactLevel,
    Likelihood,
    Prerequisite,
    Severity,
)
from clawsec.models.finding import Finding
from clawsec.scoring.weights import DEFAULT_WEIGHTS, PriorityWeights

PUBLIC_BIND_ADDRESS = "0.0.0.0"
CREDENTIAL_KEYWORDS = ("credential", "password", "token", "key")


@dataclass(frozen=True)
class Classification:
    """Inferred attack characteristics of a single finding."""

    likelihood: Likelihood
    complexity: Complexity
    prerequisites: Prerequisite
    confidentiality: ImpactLevel
    integrity: ImpactLevel
    availability: ImpactLevel
    credential_exposure: bool
    public_exposure: bool
    weak_credentials: bool
    enables_chaining: bool
    no_quick_fix: bool


def _contains(text: str, *needles: str) -> bool:
    lowered = text.lower()
    return any(needle in lowered for needle in needles)


def _public_bind(finding: Finding) -> bool:
    return finding.evidence.get("bind_address") == PUBLIC_BIND_ADDRESS


def _default_credential(title: str) -> bool:
    return _contains(title, "default") and _contains(title, *CREDENTIAL_KEYWORDS)


# ---------------------------------------------------------------------------
# Aggregate context predicates (risk score multipliers)
# ---------------------------------------------------------------------------


def indicates_credential_exposure(finding: Finding) -> bool:
    return (
        finding.threat_id == "T005"
        or _contains(finding.title, "credential", "secret")
        or _contains(finding.description, "credential", "secret")
    )


def indicates_public_exposure(finding: Finding) -> bool:
    return finding.threat_id == "T002" or _contains(finding.title, "public") or _public_bind(finding)


def indicates_weak_configuration(finding: Finding) -> bool:
    return finding.threat_id == "T001" or _contains(finding.title, "weak", "default")


# ---------------------------------------------------------------------------
# Per-finding inference (priority score)
# ---------------------------------------------------------------------------


def infer_complexity(finding: Finding) -> Complexity:
    if (
        finding.threat_id in ("T001", "T005")
        or _contains(finding.title, "weak")
        or _default_credential(finding.title)
    ):
        return Complexity.LOW
    if finding.threat_id == "T003" or finding.likelihood == Likelihood.LOW:
        return Complexity.HIGH
    return Complexity.MEDIUM


def infer_prerequisites(finding: Finding) -> Prerequisite:
    if finding.threat_id == "T002" or _public_bind(finding) or _contains(finding.title, "public"):
        return Prerequisite.NONE
    if finding.threat_id == "T003":
        return Prerequisite.ADMIN
    return Prerequisite.LOCAL


def infer_confidentiality(finding: Finding) -> ImpactLevel:
    if (
        finding.threat_id in ("T005", "T011")
        or _contains(finding.title, "credential", "token", "secret")
        or _contains(finding.description, "credential", "token", "secret")
    ):
        return ImpactLevel.CRITICAL
    if finding.threat_id == "T004":
        return ImpactLevel.HIGH
    if finding.threat_id == "T002":
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def infer_integrity(finding: Finding) -> ImpactLevel:
    if finding.threat_id == "T003" or _contains(finding.impact, "execution", "compromise"):
        return ImpactLevel.CRITICAL
    if finding.threat_id in ("T001", "T002"):
        return ImpactLevel.HIGH
    return ImpactLevel.MEDIUM


def infer_availability(finding: Finding) -> ImpactLevel:
    if finding.threat_id == "T006" or _contains(finding.impact, "denial", "exhaustion"):
        return ImpactLevel.HIGH
    if finding.severity in (Severity.CRITICAL, Severity.HIGH):
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def lacks_quick_fix(finding: Finding, max_steps: int) -> bool:
    """True when there are no immediate steps, or too many to be quick."""
    immediate = finding.remediation.immediate if finding.remediation else []
    return not immediate or len(immediate) > max_steps


def classify(finding: Finding, weights: PriorityWeights = DEFAULT_WEIGHTS.priority) -> Classification:
    """Run every inference rule once for *finding*."""
    title = finding.title
    return Classification(
        likelihood=finding.effective_likelihood,
        complexity=infer_complexity(finding),
        prerequisites=infer_prerequisites(finding),
        confidentiality=infer_confidentiality(finding),
        integrity=infer_integrity(finding),
        availability=infer_availability(finding),
        credential_exposure=(
            finding.threat_id in ("T005", "T011") or _contains(title, "credential", "secret")
        ),
        public_exposure=(
            finding.threat_id == "T002" or _public_bind(finding) or _contains(title, "public")
        ),
        weak_credentials=(
            finding.threat_id == "T001" or _contains(title, "weak") or _default_credential(title)
        ),
        enables_chaining=finding.threat_id in ("T001", "T003"),
        no_quick_fix=lacks_quick_fix(finding, weights.quick_fix_max_steps),
    )
