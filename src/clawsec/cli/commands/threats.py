# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Threat registry and OWASP category commands."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from clawsec.compliance.owasp import OWASP_CATEGORIES, OWASP_VERSION, get_threats_for_category
from clawsec.core.threats import THREAT_REGISTRY, get_threat_profile

app = typer.Typer()


@app.command(name="list")
def list_threats() -> None:
    """List the known threat ids and their OWASP mapping."""
    console = Console()
    table = Table(title="Threat Registry")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("OWASP")
    table.add_column("Attack Vector")

    for threat_id in THREAT_REGISTRY:
        profile = get_threat_profile(threat_id)
        table.add_row(
            profile.threat_id,
            profile.name,
            ", ".join(profile.owasp),
            profile.attack_vector,
        )

    console.print(table)


@app.command()
def owasp() -> None:
    """List the OWASP LLM Top 10 categories with their mapped threats."""
    console = Console()
    table = Table(title=f"OWASP Top 10 for LLM Applications ({OWASP_VERSION})")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("Threats")

    for category in sorted(OWASP_CATEGORIES.values(), key=lambda c: c.compliance_priority):
        threats = get_threats_for_category(category.id)
        table.add_row(
            category.id,
            category.name,
            f"{category.severity_weight:.1f}",
            ", ".join(threats) or "-",
        )

    console.print(table)
