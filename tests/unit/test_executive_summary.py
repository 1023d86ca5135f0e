# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the executive summary generator."""

from __future__ import annotations

from clawsec.audit import load_findings
from clawsec.core.constants import Confidence, RiskLevel
from clawsec.models.finding import Finding
from clawsec.summary.executive import (
    ALL_CLEAR_BULLETS,
    ALL_CLEAR_SUMMARY,
    finding_bullet,
    format_evidence,
    generate_executive_summary,
    generate_executive_summary_brief,
    sort_by_urgency,
)

SECRET_BULLET = (
    "🚨 [T005] Hardcoded API key in configuration (CRITICAL) — "
    "Harvest hardcoded API keys and tokens from the configuration file or its git history. "
    "Impact: unauthorized use of third-party accounts and services "
    "(Evidence: pattern=Anthropic API Key, file=config.yml)"
)
SECRET_REMEDIATION = (
    "🎯 Remediate [T005] within 24 hours: "
    "Move secrets to environment variables and rotate every exposed credential."
)


class TestAllClear:
    def test_empty_findings(self):
        summary = generate_executive_summary([])
        assert summary.summary == ALL_CLEAR_SUMMARY
        assert summary.bullets == ALL_CLEAR_BULLETS
        assert summary.risk_level == RiskLevel.SECURE
        assert summary.confidence == Confidence.HIGH
        assert summary.total_issues == 0


class TestSummaryStatement:
    def test_fixture_findings(self, findings_file):
        summary = generate_executive_summary(load_findings(findings_file))
        assert summary.summary == (
            "Technical assessment found 3 findings (1 critical, 0 high, 1 medium, 1 low). "
            "Risk score 76/100 (HIGH; CVSS-style band High 7.0-8.9). "
            "Remediation SLA: within 1 week."
        )
        assert summary.risk_score == 76
        assert summary.cvss_band == "7.0-8.9"
        assert summary.sla == "within 1 week"
        assert summary.critical_issues == 1
        assert summary.medium_issues == 1
        assert summary.low_issues == 1

    def test_singular_noun(self, exposed_secret):
        summary = generate_executive_summary([exposed_secret])
        assert summary.summary.startswith("Technical assessment found 1 finding (1 critical")
        assert "Risk score 49/100 (MEDIUM; CVSS-style band Medium 4.0-6.9)" in summary.summary


class TestBullets:
    def test_finding_bullet_format(self, exposed_secret):
        assert finding_bullet(Finding(**exposed_secret)) == SECRET_BULLET

    def test_unmapped_finding_uses_fallback_text(self):
        bullet = finding_bullet(Finding(severity="LOW", title="Verbose logging enabled"))
        assert bullet.startswith("ℹ️ [N/A] Verbose logging enabled (LOW) — ")
        assert "Impact: weakened security posture of the agent runtime" in bullet

    def test_missing_severity_bullet(self):
        bullet = finding_bullet(Finding(threat_id="T006"))
        assert bullet.startswith("• [T006] No Rate Limiting (UNKNOWN)")

    def test_fixture_bullets(self, findings_file):
        summary = generate_executive_summary(load_findings(findings_file))
        assert len(summary.bullets) == 4
        assert summary.bullets[0] == SECRET_BULLET
        assert summary.bullets[1].startswith("⚡ [T002] Gateway bound to public interface (MEDIUM)")
        assert summary.bullets[1].endswith("(Evidence: bind_address=0.0.0.0, port=18789)")
        assert summary.bullets[3] == SECRET_REMEDIATION

    def test_max_bullets_truncates(self, findings_file):
        findings = load_findings(findings_file)
        summary = generate_executive_summary(findings, max_bullets=2)
        assert summary.bullets == [SECRET_BULLET, SECRET_REMEDIATION]

        summary = generate_executive_summary(findings, max_bullets=1)
        assert summary.bullets == [SECRET_REMEDIATION]

    def test_without_recommendations(self, findings_file):
        summary = generate_executive_summary(
            load_findings(findings_file), include_recommendations=False
        )
        assert len(summary.bullets) == 3
        assert not any(b.startswith("🎯") for b in summary.bullets)

    def test_remediation_targets_top_critical_and_high(self):
        findings = [
            {"threat_id": "T006", "severity": "HIGH", "title": "No rate limit"},
            {"threat_id": "T001", "severity": "CRITICAL", "title": "Weak token"},
            {"threat_id": "T008", "severity": "HIGH", "title": "Default port"},
        ]
        bullets = generate_executive_summary(findings).bullets
        remediations = [b for b in bullets if b.startswith("🎯")]
        assert remediations == [
            "🎯 Remediate [T001] within 24 hours: Generate a random 32-byte gateway token "
            "(openssl rand -hex 32) and restart the gateway.",
            "🎯 Remediate [T006] within 1 week: Configure gateway rate limiting with a "
            "per-client request budget.",
        ]

    def test_remediation_falls_back_to_top_finding(self):
        findings = [{"threat_id": "T008", "severity": "LOW", "title": "Default port"}]
        bullets = generate_executive_summary(findings).bullets
        assert bullets[-1] == (
            "🎯 Remediate [T008] within 3 months: "
            "Move the gateway to a non-default port or behind a reverse proxy."
        )


class TestHelpers:
    def test_sort_by_urgency(self):
        findings = [
            Finding(title="a", severity="LOW", likelihood="HIGH"),
            Finding(title="b", severity="HIGH", likelihood="LOW"),
            Finding(title="c", severity="HIGH", likelihood="HIGH"),
            Finding(title="d"),
        ]
        assert [f.title for f in sort_by_urgency(findings)] == ["c", "b", "a", "d"]

    def test_format_evidence(self):
        evidence = {"a": 1, "nested": {"x": 1}, "b": True, "c": "x", "d": 2.5}
        assert format_evidence(evidence) == "a=1, b=true, c=x"

    def test_brief(self, findings_file):
        brief = generate_executive_summary_brief(load_findings(findings_file))
        assert brief == (
            "Security scan: 3 issues found (risk: HIGH, 76/100).\n"
            "⚠️ 1 critical - fix within 24 hours."
        )

    def test_precomputed_score_is_used(self, exposed_secret):
        from clawsec.scoring.risk import calculate_score_by_type

        score = calculate_score_by_type([exposed_secret], "credential")
        summary = generate_executive_summary([exposed_secret], score)
        assert summary.risk_score == 74
        assert summary.risk_level == RiskLevel.HIGH
