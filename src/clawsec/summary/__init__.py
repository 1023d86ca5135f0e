# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Executive summary generation."""

from clawsec.summary.executive import (
    ExecutiveSummary,
    generate_executive_summary,
    generate_executive_summary_brief,
)

__all__ = [
    "ExecutiveSummary",
    "generate_executive_summary",
    "generate_executive_summary_brief",
]
