# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for audit reports."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clawsec import __version__
from clawsec.audit import AuditReport
from clawsec.compliance.owasp import STATUS_LABELS
from clawsec.core.constants import PriorityLevel, RiskLevel, Severity

console = Console()

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}

RISK_LEVEL_COLORS = {
    RiskLevel.CRITICAL: "bold red",
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "cyan",
    RiskLevel.SECURE: "bold green",
}

PRIORITY_COLORS = {
    PriorityLevel.P0: "bold red",
    PriorityLevel.P1: "red",
    PriorityLevel.P2: "yellow",
    PriorityLevel.P3: "cyan",
}


def format_audit_report(report: AuditReport, target: Console | None = None) -> None:
    """Print an audit report to the console with Rich formatting."""
    out = target or console
    score = report.score
    out.print()
    out.print(f"[bold]clawsec v{__version__}[/bold] - Agent Configuration Security Audit")
    out.print()

    level_color = RISK_LEVEL_COLORS.get(score.level, "white")
    out.print(
        Panel(
            f"[{level_color}]RISK: {score.level}[/{level_color}]"
            f"  (score: {score.score}/100, confidence: {score.confidence})",
            style=level_color,
        )
    )
    out.print()

    out.print("[bold]Executive Summary[/bold]")
    out.print(report.executive_summary.summary)
    for bullet in report.executive_summary.bullets:
        out.print(f"  {bullet}")
    out.print()

    if report.prioritized.rankings:
        table = Table(title="Prioritized Findings")
        table.add_column("Priority", no_wrap=True)
        table.add_column("Score", justify="right")
        table.add_column("Threat", style="cyan", no_wrap=True)
        table.add_column("Severity")
        table.add_column("Title", style="bold")
        table.add_column("Fix by")

        for finding in report.prioritized.rankings:
            priority = finding.priority
            table.add_row(
                Text(priority.level, style=PRIORITY_COLORS.get(priority.level, "white")),
                str(priority.score),
                finding.threat_id or "-",
                Text(finding.severity_label, style=SEVERITY_COLORS.get(finding.severity, "dim")),
                finding.title or "-",
                priority.time_to_fix.duration,
            )
        out.print(table)
        out.print()

    owasp = report.owasp
    flagged = [cat for cat in owasp.categories if cat.findings_count]
    if flagged:
        owasp_table = Table(title=f"OWASP LLM Top 10 ({owasp.version})")
        owasp_table.add_column("Category", style="cyan")
        owasp_table.add_column("Status")
        owasp_table.add_column("Findings", justify="right")
        for cat in flagged:
            owasp_table.add_row(
                f"{cat.id}: {cat.name}",
                f"{cat.status_emoji} {STATUS_LABELS[cat.status]}",
                str(cat.findings_count),
            )
        out.print(owasp_table)

    out.print(
        f"Compliance: {owasp.compliant_categories}/{owasp.total_categories} categories"
        f" ({owasp.overall_compliance * 100:.0f}%)",
        style="dim",
    )
    out.print()
