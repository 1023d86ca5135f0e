# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Report renderers."""

from clawsec.reporting.markdown import (
    format_executive_summary_markdown,
    format_executive_summary_plain_text,
    generate_owasp_checklist_markdown,
    generate_priority_report,
    generate_score_summary,
    render_audit_report,
)

__all__ = [
    "format_executive_summary_markdown",
    "format_executive_summary_plain_text",
    "generate_owasp_checklist_markdown",
    "generate_priority_report",
    "generate_score_summary",
    "render_audit_report",
]
