# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""High-level audit entry point.

Usage::

    from clawsec import load_findings, run_audit

    report = run_audit(load_findings("findings.json"))
    print(report.score.score, report.score.level)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import Field

from clawsec.compliance.owasp import OwaspCompliance, generate_owasp_compliance
from clawsec.core.config import Settings, get_settings
from clawsec.core.constants import ScanType
from clawsec.core.exceptions import FindingsLoadError
from clawsec.models.base import ReportModel
from clawsec.models.finding import Finding, ensure_findings
from clawsec.models.priority import PrioritizedSet
from clawsec.models.score import ScoreResult
from clawsec.scoring.priority import Clock, prioritize_findings
from clawsec.scoring.risk import calculate_risk_score, calculate_score_by_type
from clawsec.scoring.weights import DEFAULT_WEIGHTS, ScoringWeights, load_weights
from clawsec.summary.executive import ExecutiveSummary, generate_executive_summary

logger = logging.getLogger("clawsec.audit")


class AuditReport(ReportModel):
    """Everything computed for one set of findings."""

    findings: list[Finding] = Field(default_factory=list)
    score: ScoreResult
    prioritized: PrioritizedSet
    executive_summary: ExecutiveSummary
    owasp: OwaspCompliance


def _resolve_weights(settings: Settings, weights: ScoringWeights | None) -> ScoringWeights:
    if weights is not None:
        return weights
    if settings.weights_file:
        return load_weights(settings.weights_file)
    return DEFAULT_WEIGHTS


def run_audit(
    findings: Iterable[Finding | Mapping[str, Any]] | None,
    *,
    settings: Settings | None = None,
    weights: ScoringWeights | None = None,
    clock: Clock | None = None,
    scan_type: ScanType | None = None,
) -> AuditReport:
    """Score, prioritize, summarize and map *findings*.

    When a scan type is given (directly or via ``default_scan_type``) the
    score is adjusted with that scan type's multiplier.

    Raises:
        ConfigurationError: If the configured weights file is invalid.
    """
    settings = settings or get_settings()
    resolved = _resolve_weights(settings, weights)
    items = ensure_findings(findings)
    for finding in items:
        if finding.evidence:
            logger.debug(
                "Evidence for %s: %s",
                finding.threat_id or finding.title or "finding",
                json.dumps(finding.evidence, default=str, sort_keys=True),
            )
    effective_type = scan_type or settings.default_scan_type

    if effective_type is not None:
        score = calculate_score_by_type(items, effective_type, weights=resolved)
    else:
        score = calculate_risk_score(items, weights=resolved)

    report = AuditReport(
        findings=items,
        score=score,
        prioritized=prioritize_findings(items, weights=resolved, clock=clock),
        executive_summary=generate_executive_summary(
            items, score, max_bullets=settings.summary_max_bullets
        ),
        owasp=generate_owasp_compliance(items),
    )

    logger.info(
        "Audit complete: %d findings, risk %d/100 (%s), %d critical OWASP findings",
        len(items),
        score.score,
        score.level,
        report.owasp.critical_findings,
    )
    return report


def load_findings(path: str | Path) -> list[Finding]:
    """Read findings from a JSON file.

    The file holds either a list of findings or an object with a
    ``findings`` list (the scanner's report shape).

    Raises:
        FindingsLoadError: If the file cannot be read, is not valid JSON, or
            has neither shape.
    """
    findings_path = Path(path)
    try:
        raw = json.loads(findings_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise FindingsLoadError(f"Cannot read findings file {findings_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FindingsLoadError(f"Invalid JSON in findings file {findings_path}: {exc}") from exc

    if isinstance(raw, dict):
        raw = raw.get("findings")
    if not isinstance(raw, list):
        msg = (
            f"Findings file {findings_path} must contain a list of findings "
            "or an object with a 'findings' list"
        )
        raise FindingsLoadError(msg)

    findings = ensure_findings(raw)
    logger.debug("Loaded %d findings from %s", len(findings), findings_path)
    return findings
