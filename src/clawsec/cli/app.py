# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import sys
from datetime import UTC, datetime
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from clawsec.cli.commands import threats
from clawsec.core.constants import ScanType

app = typer.Typer(
    name="clawsec",
    help="Risk scoring and remediation planning for agent configuration audits",
    no_args_is_help=True,
)

app.add_typer(threats.app, name="threats", help="Browse the threat registry and OWASP mapping")


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"
    MARKDOWN = "markdown"


@app.command()
def audit(
    findings_file: Annotated[
        Path, typer.Argument(help="JSON file with a list of findings or a {findings: [...]} report")
    ],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    scan_type: Annotated[
        ScanType | None,
        typer.Option("--scan-type", help="Apply the scan-type score multiplier"),
    ] = None,
    max_bullets: Annotated[
        int | None,
        typer.Option("--max-bullets", min=1, help="Executive summary bullet limit"),
    ] = None,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Enable CI mode with standardized exit codes"),
    ] = False,
) -> None:
    """Score, prioritize and summarize a findings file."""
    from clawsec.audit import load_findings, run_audit
    from clawsec.ci.exit_codes import CIExitCode, risk_level_to_exit_code
    from clawsec.core.config import get_settings
    from clawsec.core.exceptions import ClawsecError
    from clawsec.core.logging import setup_logging

    try:
        settings = get_settings()
        if max_bullets is not None:
            settings = settings.model_copy(update={"summary_max_bullets": max_bullets})
        setup_logging(settings.log_level, settings.log_format)

        findings = load_findings(findings_file)
        report = run_audit(
            findings,
            settings=settings,
            scan_type=scan_type,
        )
    except ClawsecError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(int(CIExitCode.AUDIT_ERROR)) from exc

    if fmt == OutputFormat.CONSOLE:
        from clawsec.cli.formatters.console import format_audit_report
        if output:
            from rich.console import Console

            with output.open("w", encoding="utf-8") as handle:
                format_audit_report(report, Console(file=handle, no_color=True, width=120))
            typer.echo(f"Output written to {output}")
        else:
            format_audit_report(report)
    elif fmt == OutputFormat.JSON:
        from clawsec.cli.formatters.json_fmt import format_json
        _write_output(format_json(report), output)
    elif fmt == OutputFormat.MARKDOWN:
        from clawsec.reporting.markdown import render_audit_report
        _write_output(render_audit_report(report, generated_at=datetime.now(UTC)), output)

    if ci_mode:
        raise typer.Exit(int(risk_level_to_exit_code(report.score.level)))


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")


@app.command()
def version() -> None:
    """Show version information."""
    from clawsec import __version__

    typer.echo(f"clawsec v{__version__}")
