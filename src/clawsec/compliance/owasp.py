# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""OWASP Top 10 for LLM Applications (2025) compliance mapping.

Findings are mapped to categories by threat id (via the threat registry),
then by credential pattern name, then to the default category.  The result
is pure aggregation; nothing here affects the risk or priority scores.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from clawsec.core.constants import Severity
from clawsec.core.threats import DEFAULT_OWASP_CATEGORY, THREAT_REGISTRY
from clawsec.models.finding import Finding, ensure_findings
from clawsec.models.score import SeverityDistribution

OWASP_VERSION = "2025"


@dataclass(frozen=True)
class OwaspCategory:
    id: str
    name: str
    description: str
    severity_weight: float
    compliance_priority: int


OWASP_CATEGORIES: dict[str, OwaspCategory] = {
    c.id: c
    for c in (
        OwaspCategory(
            "LLM01", "Prompt Injection",
            "Manipulating LLM inputs to override instructions, extract data, or trigger harmful actions",
            1.0, 1,
        ),
        OwaspCategory(
            "LLM02", "Sensitive Information Disclosure",
            "Exposing private, regulated, or confidential information through LLM outputs or configurations",
            1.0, 2,
        ),
        OwaspCategory(
            "LLM03", "Supply Chain",
            "Risks in third-party, open-source, or upstream LLM components and services",
            0.9, 3,
        ),
        OwaspCategory(
            "LLM04", "Data and Model Poisoning",
            "Malicious or manipulated data corrupting training or fine-tuning processes",
            0.85, 4,
        ),
        OwaspCategory(
            "LLM05", "Improper Output Handling",
            "Passing untrusted LLM outputs directly to downstream systems without validation",
            0.9, 5,
        ),
        OwaspCategory(
            "LLM06", "Excessive Agency",
            "Granting LLMs too much control over sensitive actions or tools",
            0.85, 6,
        ),
        OwaspCategory(
            "LLM07", "System Prompt Leakage",
            "Exposure of hidden instructions or system prompts through adversarial queries",
            0.8, 7,
        ),
        OwaspCategory(
            "LLM08", "Vector and Embedding Weaknesses",
            "Exploiting weaknesses in embeddings or vector databases (RAG systems)",
            0.75, 8,
        ),
        OwaspCategory(
            "LLM09", "Misinformation",
            "Generation or amplification of false or misleading content",
            0.7, 9,
        ),
        OwaspCategory(
            "LLM10", "Unbounded Consumption",
            "Resource exhaustion or uncontrolled cost growth from LLM use",
            0.8, 10,
        ),
    )
}

# Credential pattern name substrings, checked in order.
PATTERN_TO_OWASP: dict[str, tuple[str, ...]] = {
    "aws": ("LLM02",),
    "google": ("LLM02",),
    "azure": ("LLM02",),
    "openai": ("LLM02",),
    "anthropic": ("LLM02",),
    "github": ("LLM02",),
    "slack": ("LLM02",),
    "telegram": ("LLM02", "LLM05"),
    "discord": ("LLM02", "LLM05"),
    "database": ("LLM02",),
    "jwt": ("LLM02",),
    "private_key": ("LLM02",),
    "ssh": ("LLM02",),
    "credit_card": ("LLM02",),
    "ssn": ("LLM02",),
}

STATUS_EMOJI = {
    "compliant": "✅",
    "minor_issues": "ℹ️",
    "issues_found": "⚠️",
    "critical_issues": "🚨",
}

STATUS_LABELS = {
    "compliant": "Compliant",
    "minor_issues": "Minor Issues",
    "issues_found": "Issues Found",
    "critical_issues": "Critical Issues",
}

OVERALL_RISK_EMOJI = {
    "CRITICAL": "🚨",
    "HIGH": "🟠",
    "MEDIUM": "⚠️",
    "LOW": "✅",
}


class CategoryFinding(BaseModel):
    type: str
    severity: Severity | None = None
    file: str | None = None
    line: int | None = None


class CategoryCompliance(BaseModel):
    id: str
    name: str
    description: str
    status: str
    status_emoji: str
    findings_count: int = 0
    severity_breakdown: SeverityDistribution = Field(default_factory=SeverityDistribution)
    findings: list[CategoryFinding] = Field(default_factory=list)


class OwaspCompliance(BaseModel):
    version: str = OWASP_VERSION
    categories: list[CategoryCompliance] = Field(default_factory=list)
    overall_compliance: float
    compliant_categories: int
    total_categories: int
    overall_risk: str
    overall_risk_emoji: str
    total_findings: int
    critical_findings: int
    high_findings: int


def map_threat_to_owasp(threat_id: str | None) -> list[str]:
    """Categories for a registered threat id; empty if unmapped."""
    profile = THREAT_REGISTRY.get(threat_id or "")
    return list(profile.owasp) if profile else []


def map_pattern_to_owasp(pattern_name: str) -> list[str]:
    """Categories for a credential pattern name such as ``AWS Access Key``."""
    lowered = pattern_name.lower()
    for key, categories in PATTERN_TO_OWASP.items():
        if key in lowered:
            return list(categories)
    return [DEFAULT_OWASP_CATEGORY]


def categories_for_finding(finding: Finding) -> list[str]:
    categories = map_threat_to_owasp(finding.threat_id)
    if not categories and finding.type:
        categories = map_pattern_to_owasp(finding.type)
    return categories or [DEFAULT_OWASP_CATEGORY]


def get_owasp_category(category_id: str) -> OwaspCategory | None:
    return OWASP_CATEGORIES.get(category_id)


def get_threats_for_category(category_id: str) -> list[str]:
    return [tid for tid, profile in THREAT_REGISTRY.items() if category_id in profile.owasp]


def _status(breakdown: SeverityDistribution) -> str:
    if breakdown.critical:
        return "critical_issues"
    if breakdown.high or breakdown.medium:
        return "issues_found"
    if breakdown.low:
        return "minor_issues"
    return "compliant"


def generate_owasp_compliance(findings: Iterable[Finding | Mapping[str, Any]] | None) -> OwaspCompliance:
    """Aggregate findings into a per-category OWASP LLM Top 10 view."""
    items = ensure_findings(findings)
    counts = {cat_id: 0 for cat_id in OWASP_CATEGORIES}
    severities = {cat_id: {s: 0 for s in Severity} for cat_id in OWASP_CATEGORIES}
    members: dict[str, list[CategoryFinding]] = {cat_id: [] for cat_id in OWASP_CATEGORIES}

    for finding in items:
        # Missing severity counts as MEDIUM for the breakdown.
        severity = finding.severity or Severity.MEDIUM
        for cat_id in categories_for_finding(finding):
            if cat_id not in OWASP_CATEGORIES:
                continue
            counts[cat_id] += 1
            severities[cat_id][severity] += 1
            members[cat_id].append(
                CategoryFinding(
                    type=finding.type or finding.title,
                    severity=finding.severity,
                    file=finding.file,
                    line=finding.line,
                )
            )

    categories: list[CategoryCompliance] = []
    for cat_id, category in OWASP_CATEGORIES.items():
        sev = severities[cat_id]
        breakdown = SeverityDistribution(
            critical=sev[Severity.CRITICAL],
            high=sev[Severity.HIGH],
            medium=sev[Severity.MEDIUM],
            low=sev[Severity.LOW],
        )
        status = _status(breakdown)
        categories.append(
            CategoryCompliance(
                id=cat_id,
                name=category.name,
                description=category.description,
                status=status,
                status_emoji=STATUS_EMOJI[status],
                findings_count=counts[cat_id],
                severity_breakdown=breakdown,
                findings=members[cat_id],
            )
        )

    # Categories with critical findings first, then OWASP order.
    categories.sort(
        key=lambda c: 0 if c.severity_breakdown.critical else OWASP_CATEGORIES[c.id].compliance_priority
    )

    compliant = sum(1 for c in categories if c.status == "compliant")
    total = len(OWASP_CATEGORIES)
    total_critical = sum(c.severity_breakdown.critical for c in categories)
    total_high = sum(c.severity_breakdown.high for c in categories)

    if total_critical:
        overall_risk = "CRITICAL"
    elif total_high:
        overall_risk = "HIGH"
    elif compliant < total:
        overall_risk = "MEDIUM"
    else:
        overall_risk = "LOW"

    return OwaspCompliance(
        categories=categories,
        overall_compliance=compliant / total,
        compliant_categories=compliant,
        total_categories=total,
        overall_risk=overall_risk,
        overall_risk_emoji=OVERALL_RISK_EMOJI[overall_risk],
        total_findings=len(items),
        critical_findings=total_critical,
        high_findings=total_high,
    )
