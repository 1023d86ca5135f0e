# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Markdown and plain-text renderers for audit results.

Pure templating over the score, priority, summary and compliance models; no
scoring happens here.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from clawsec.compliance.owasp import STATUS_LABELS, OwaspCompliance
from clawsec.core.constants import PriorityLevel
from clawsec.models.priority import PrioritizedSet
from clawsec.models.score import ScoreResult
from clawsec.summary.executive import ExecutiveSummary

if TYPE_CHECKING:
    from clawsec.audit import AuditReport

P2_DISPLAY_LIMIT = 5

RISK_EMOJI = {
    "CRITICAL": "🔴",
    "HIGH": "🟠",
    "MEDIUM": "🟡",
    "LOW": "🟢",
    "SECURE": "✅",
}

_PLAIN_TEXT_STRIP = re.compile(r"[*_#]|🚨|⚠️|⚡|ℹ️|✅|🎯|📊")


def generate_score_summary(score_result: ScoreResult) -> str:
    breakdown = score_result.breakdown
    dist = breakdown.severity_distribution
    lines = [
        f"**Risk Score**: {score_result.score}/100 ({score_result.level})",
        f"**Confidence**: {score_result.confidence.upper()}",
        "",
        "**Score Breakdown**:",
        f"- Base Score: {breakdown.base_score}",
        f"- Context Multiplier: {breakdown.context_multiplier}x",
        f"- Final Score: {breakdown.final_score}",
        "",
        "**Findings Distribution**:",
        f"- Critical: {dist.critical}",
        f"- High: {dist.high}",
        f"- Medium: {dist.medium}",
        f"- Low: {dist.low}",
    ]
    if breakdown.applied_factors:
        lines += ["", "**Risk Factors Applied**:"]
        lines += [
            f"- {factor.name} ({round(factor.multiplier, 4)}x): {factor.description}"
            for factor in breakdown.applied_factors
        ]
    return "\n".join(lines) + "\n"


def _checklist(steps: list[str]) -> str:
    return "".join(f"- [ ] {step}\n" for step in steps) + "\n"


def generate_priority_report(prioritized: PrioritizedSet) -> str:
    """Markdown section listing the prioritized remediation plan."""
    summary = prioritized.summary
    grouped = prioritized.grouped
    by_priority = summary.by_priority

    report = "## 🎯 Prioritized Recommendations\n\n"
    report += (
        "Based on severity, exploitability, and business impact, "
        "here are your prioritized action items:\n\n"
    )
    report += "### Priority Distribution\n\n"
    report += "| Priority | Count | Timeline | Action Required |\n"
    report += "|----------|-------|----------|----------------|\n"
    report += f"| 🔴 P0 (Critical) | {by_priority.get(PriorityLevel.P0, 0)} | Hours | Fix immediately |\n"
    report += f"| 🟠 P1 (High) | {by_priority.get(PriorityLevel.P1, 0)} | 1-3 Days | Fix urgently |\n"
    report += f"| 🟡 P2 (Medium) | {by_priority.get(PriorityLevel.P2, 0)} | 1-2 Weeks | Schedule fix |\n"
    report += f"| 🟢 P3 (Low) | {by_priority.get(PriorityLevel.P3, 0)} | 1 Month | Backlog |\n"
    report += f"| **Total** | **{summary.total}** | - | - |\n\n"

    p0 = grouped.get(PriorityLevel.P0, [])
    if p0:
        report += "### 🚨 P0 - IMMEDIATE ACTION REQUIRED\n\n"
        report += "**Timeline**: Fix within hours\n"
        report += "**Impact**: Critical risk to system security\n\n"
        for i, finding in enumerate(p0, start=1):
            report += f"#### {i}. {finding.title}\n\n"
            report += f"**Priority Score**: {finding.priority.score}/100\n"
            report += (
                f"**Severity**: {finding.severity_label} | "
                f"**Exploitability**: {finding.effective_likelihood}\n"
            )
            report += f"**Why this is P0**: {finding.priority.reasoning}\n\n"
            if finding.remediation and finding.remediation.immediate:
                report += "**Fix now**:\n" + _checklist(finding.remediation.immediate)
        report += "---\n\n"

    p1 = grouped.get(PriorityLevel.P1, [])
    if p1:
        report += "### 🟠 P1 - URGENT REMEDIATION\n\n"
        report += "**Timeline**: Fix within 1-3 days\n"
        report += "**Impact**: High risk requiring prompt attention\n\n"
        for i, finding in enumerate(p1, start=1):
            report += f"#### {i}. {finding.title}\n\n"
            report += f"**Priority Score**: {finding.priority.score}/100\n"
            report += f"**Reasoning**: {finding.priority.reasoning}\n\n"
            steps = finding.remediation_steps()
            if steps:
                report += "**Action steps**:\n" + _checklist(steps)
        report += "---\n\n"

    p2 = grouped.get(PriorityLevel.P2, [])
    if p2:
        report += "### 🟡 P2 - SCHEDULE REMEDIATION\n\n"
        report += "**Timeline**: Fix within 1-2 weeks\n"
        report += "**Impact**: Moderate risk, should be addressed\n\n"
        for i, finding in enumerate(p2[:P2_DISPLAY_LIMIT], start=1):
            report += f"{i}. **{finding.title}** (Score: {finding.priority.score}/100)\n"
            report += f"   - {finding.priority.reasoning}\n\n"
        if len(p2) > P2_DISPLAY_LIMIT:
            report += f"*... and {len(p2) - P2_DISPLAY_LIMIT} more P2 items*\n\n"
        report += "---\n\n"

    p3 = grouped.get(PriorityLevel.P3, [])
    if p3:
        report += "### 🟢 P3 - BACKLOG ITEMS\n\n"
        report += "**Timeline**: Address within 1 month\n"
        report += "**Impact**: Low risk, monitor and plan\n\n"
        report += (
            f"{len(p3)} low-priority items identified. "
            "Review detailed findings below for complete list.\n\n"
        )
        report += "---\n\n"

    return report


def format_executive_summary_markdown(summary: ExecutiveSummary) -> str:
    markdown = "## Executive Summary\n\n"
    markdown += f"{summary.summary}\n\n"
    markdown += "### Key Points\n\n"
    for bullet in summary.bullets:
        markdown += f"{bullet}\n\n"
    return markdown


def format_executive_summary_plain_text(summary: ExecutiveSummary) -> str:
    """Plain-text variant for email: no Markdown markup or emoji."""
    text = f"EXECUTIVE SUMMARY\n{'=' * 50}\n\n"
    text += f"{summary.summary}\n\n"
    text += "KEY POINTS:\n"
    for i, bullet in enumerate(summary.bullets, start=1):
        plain = _PLAIN_TEXT_STRIP.sub("", bullet).strip()
        text += f"{i}. {plain}\n"
    return text


def generate_owasp_checklist_markdown(compliance: OwaspCompliance) -> str:
    markdown = "## 🔒 OWASP LLM Top 10 Compliance\n\n"
    markdown += (
        "**Standard:** OWASP Top 10 for Large Language Model Applications "
        f"({compliance.version})  \n"
    )
    markdown += (
        f"**Overall Compliance:** {compliance.overall_compliance * 100:.0f}% "
        f"({compliance.compliant_categories}/{compliance.total_categories} categories)  \n"
    )
    markdown += (
        f"**Compliance Risk Level:** {compliance.overall_risk_emoji} "
        f"**{compliance.overall_risk}**\n\n"
    )
    markdown += "| Category | Status | Findings | Critical | High | Medium | Low |\n"
    markdown += "|----------|--------|----------|----------|------|--------|-----|\n"
    for cat in compliance.categories:
        sev = cat.severity_breakdown
        markdown += (
            f"| {cat.id}: {cat.name} | {cat.status_emoji} {STATUS_LABELS[cat.status]} | "
            f"{cat.findings_count} | {sev.critical} | {sev.high} | {sev.medium} | {sev.low} |\n"
        )

    markdown += "\n### Compliance Status Legend\n\n"
    markdown += "- ✅ **Compliant**: No findings detected for this category\n"
    markdown += "- ℹ️ **Minor Issues**: Low-severity findings only\n"
    markdown += "- ⚠️ **Issues Found**: Medium or high severity findings present\n"
    markdown += "- 🚨 **Critical Issues**: Critical severity findings require immediate attention\n\n"

    critical = [c for c in compliance.categories if c.severity_breakdown.critical]
    if critical:
        markdown += "### 🚨 Critical OWASP Categories Requiring Immediate Action\n\n"
        for cat in critical:
            markdown += f"#### {cat.id}: {cat.name}\n\n"
            markdown += f"**Critical Findings:** {cat.severity_breakdown.critical}  \n"
            markdown += f"**Description:** {cat.description}\n\n"
            examples = [f for f in cat.findings if f.severity == "CRITICAL"][:3]
            if examples:
                markdown += "**Examples:**\n"
                for f in examples:
                    location = f" ({f.file})" if f.file else ""
                    markdown += f"- {f.type}{location}\n"
                markdown += "\n"
    return markdown


def render_audit_report(report: AuditReport, generated_at: datetime | None = None) -> str:
    """Full Markdown audit report."""
    score = report.score
    md = "# Agent Configuration Security Audit\n\n"
    if generated_at is not None:
        md += f"**Generated**: {generated_at.isoformat()}\n"
    md += f"**Findings**: {score.breakdown.findings_count}\n\n---\n\n"
    md += format_executive_summary_markdown(report.executive_summary)
    md += (
        f"**Risk Score**: **{score.score}/100** | **Overall Risk**: "
        f"{RISK_EMOJI.get(score.level, '')} **{score.level}** ({score.confidence} confidence)\n\n"
    )
    md += "---\n\n## Risk Score\n\n"
    md += generate_score_summary(score) + "\n---\n\n"
    md += generate_priority_report(report.prioritized)
    md += generate_owasp_checklist_markdown(report.owasp)
    return md
