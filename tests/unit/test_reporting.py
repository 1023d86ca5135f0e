# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the Markdown and plain-text report renderers."""

from __future__ import annotations

from datetime import UTC, datetime

from clawsec.audit import load_findings, run_audit
from clawsec.compliance.owasp import generate_owasp_compliance
from clawsec.core.config import Settings
from clawsec.reporting.markdown import (
    format_executive_summary_markdown,
    format_executive_summary_plain_text,
    generate_owasp_checklist_markdown,
    generate_priority_report,
    generate_score_summary,
    render_audit_report,
)
from clawsec.scoring.priority import prioritize_findings
from clawsec.scoring.risk import calculate_risk_score
from clawsec.summary.executive import generate_executive_summary


def _report(findings_file, fixed_clock):
    return run_audit(load_findings(findings_file), settings=Settings(), clock=fixed_clock)


class TestScoreSummary:
    def test_exposed_secret(self, exposed_secret):
        text = generate_score_summary(calculate_risk_score([exposed_secret]))
        assert "**Risk Score**: 49/100 (MEDIUM)" in text
        assert "**Confidence**: HIGH" in text
        assert "- Base Score: 25" in text
        assert "- Context Multiplier: 1.95x" in text
        assert "- Critical: 1" in text
        assert "- Credential Exposure (1.5x): Hardcoded credentials significantly increase risk" in text

    def test_no_factors_section_when_empty(self):
        text = generate_score_summary(calculate_risk_score([]))
        assert "Risk Factors Applied" not in text


class TestPriorityReport:
    def test_sections(self, findings_file, fixed_clock):
        report = generate_priority_report(
            prioritize_findings(load_findings(findings_file), clock=fixed_clock)
        )
        assert "| 🔴 P0 (Critical) | 1 | Hours | Fix immediately |" in report
        assert "| 🟡 P2 (Medium) | 0 | 1-2 Weeks | Schedule fix |" in report
        assert "| **Total** | **3** | - | - |" in report
        assert "### 🚨 P0 - IMMEDIATE ACTION REQUIRED" in report
        assert "#### 1. Hardcoded API key in configuration" in report
        assert "**Severity**: CRITICAL | **Exploitability**: HIGH" in report
        assert "- [ ] Rotate the exposed key" in report
        assert "### 🟠 P1 - URGENT REMEDIATION" in report
        assert "- [ ] Bind the gateway to 127.0.0.1" in report
        assert "### 🟡 P2" not in report
        assert "1 low-priority items identified." in report

    def test_p2_list_is_truncated(self, fixed_clock):
        # 20 + 35 + 8 - 5 = 58 -> P2
        findings = [{"severity": "MEDIUM", "title": f"Issue {i}"} for i in range(7)]
        report = generate_priority_report(prioritize_findings(findings, clock=fixed_clock))
        assert "5. **Issue 4** (Score: 58/100)" in report
        assert "Issue 5" not in report
        assert "*... and 2 more P2 items*" in report

    def test_empty(self):
        report = generate_priority_report(prioritize_findings([]))
        assert "| **Total** | **0** | - | - |" in report
        assert "P0 - IMMEDIATE" not in report


class TestExecutiveSummaryFormats:
    def test_markdown(self, exposed_secret):
        text = format_executive_summary_markdown(generate_executive_summary([exposed_secret]))
        assert text.startswith("## Executive Summary\n\n")
        assert "### Key Points" in text
        assert "🎯 Remediate [T005]" in text

    def test_plain_text_strips_markup(self, exposed_secret):
        text = format_executive_summary_plain_text(generate_executive_summary([exposed_secret]))
        assert text.startswith("EXECUTIVE SUMMARY\n" + "=" * 50)
        assert "🚨" not in text
        assert "🎯" not in text
        assert "1. [T005] Hardcoded API key in configuration (CRITICAL)" in text
        assert "2. Remediate [T005] within 24 hours" in text


class TestOwaspChecklist:
    def test_fixture(self, findings_file):
        text = generate_owasp_checklist_markdown(
            generate_owasp_compliance(load_findings(findings_file))
        )
        assert "**Overall Compliance:** 60% (6/10 categories)" in text
        assert "**Compliance Risk Level:** 🚨 **CRITICAL**" in text
        assert "| LLM05: Improper Output Handling | 🚨 Critical Issues | 1 | 1 | 0 | 0 | 0 |" in text
        assert "#### LLM05: Improper Output Handling" in text
        assert "- Hardcoded API key in configuration" in text

    def test_compliant(self):
        text = generate_owasp_checklist_markdown(generate_owasp_compliance([]))
        assert "100% (10/10 categories)" in text
        assert "Critical OWASP Categories" not in text


class TestAuditReport:
    def test_full_report(self, findings_file, fixed_clock):
        text = render_audit_report(
            _report(findings_file, fixed_clock),
            generated_at=datetime(2026, 1, 15, 12, 0, tzinfo=UTC),
        )
        assert text.startswith("# Agent Configuration Security Audit\n\n")
        assert "**Generated**: 2026-01-15T12:00:00+00:00" in text
        assert "**Findings**: 3" in text
        assert "**Risk Score**: **76/100** | **Overall Risk**: 🟠 **HIGH** (medium confidence)" in text
        sections = ["## Executive Summary", "## Risk Score", "## 🎯 Prioritized", "## 🔒 OWASP"]
        positions = [text.index(s) for s in sections]
        assert positions == sorted(positions)
