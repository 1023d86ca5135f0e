# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""clawsec - Risk scoring and remediation planning for agent configuration audits."""

__version__ = "0.1.0"

from clawsec.audit import AuditReport, load_findings, run_audit
from clawsec.compliance.owasp import generate_owasp_compliance
from clawsec.models.finding import Finding
from clawsec.scoring.priority import calculate_priority, prioritize_findings
from clawsec.scoring.risk import calculate_risk_score
from clawsec.summary.executive import generate_executive_summary

__all__ = [
    "AuditReport",
    "Finding",
    "__version__",
    "calculate_priority",
    "calculate_risk_score",
    "generate_executive_summary",
    "generate_owasp_compliance",
    "load_findings",
    "prioritize_findings",
    "run_audit",
]
