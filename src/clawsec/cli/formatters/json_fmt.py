# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

from clawsec.audit import AuditReport


def format_json(report: AuditReport) -> str:
    """Return the audit report as formatted JSON string."""
    return report.to_json(indent=2)

