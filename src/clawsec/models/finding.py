# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Security finding models.

Findings arrive from external producers (secret detector, config-rule
checker) as plain JSON objects.  Validation is deliberately lenient: unknown
enum values and missing fields collapse to neutral defaults so that scoring
never fails on a malformed finding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clawsec.core.constants import Likelihood, Severity

logger = logging.getLogger("clawsec.models.finding")


def _coerce_enum(enum_cls: type[Severity] | type[Likelihood], v: object) -> object:
    if isinstance(v, enum_cls):
        return v
    if isinstance(v, str):
        normalized = v.strip().upper()
        if normalized in enum_cls.__members__:
            return enum_cls(normalized)
    return None


def _coerce_steps(v: object) -> list[str]:
    if isinstance(v, str):
        return [v]
    if isinstance(v, (list, tuple)):
        return [str(step) for step in v if step is not None]
    return []


class Remediation(BaseModel):
    """Remediation steps grouped by urgency tier."""

    immediate: list[str] = Field(default_factory=list)
    short_term: list[str] = Field(default_factory=list)
    long_term: list[str] = Field(default_factory=list)

    @field_validator("immediate", "short_term", "long_term", mode="before")
    @classmethod
    def _parse_steps(cls, v: object) -> list[str]:
        return _coerce_steps(v)

    def first_available(self) -> list[str]:
        """Steps from the most urgent non-empty tier."""
        return list(self.immediate or self.short_term or self.long_term)


class Finding(BaseModel):
    """A single detected configuration or credential issue."""

    model_config = ConfigDict(extra="allow")

    threat_id: str = Field(default="", description="Stable identifier, e.g. T005")
    severity: Severity | None = None
    title: str = ""
    description: str = ""
    impact: str = ""
    likelihood: Likelihood | None = None
    evidence: dict[str, Any] = Field(default_factory=dict)
    remediation: Remediation | None = None
    confidence: str | None = None
    type: str | None = Field(default=None, description="Credential pattern name, if any")
    file: str | None = None
    line: int | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _parse_severity(cls, v: object) -> object:
        return _coerce_enum(Severity, v)

    @field_validator("likelihood", mode="before")
    @classmethod
    def _parse_likelihood(cls, v: object) -> object:
        return _coerce_enum(Likelihood, v)

    @field_validator("threat_id", "title", "description", "impact", mode="before")
    @classmethod
    def _parse_text(cls, v: object) -> str:
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("evidence", mode="before")
    @classmethod
    def _parse_evidence(cls, v: object) -> dict[str, Any]:
        return dict(v) if isinstance(v, Mapping) else {}

    @field_validator("remediation", mode="before")
    @classmethod
    def _parse_remediation(cls, v: object) -> object:
        if v is None or isinstance(v, (Remediation, Mapping)):
            return v
        return None

    @field_validator("confidence", "type", "file", mode="before")
    @classmethod
    def _parse_optional_text(cls, v: object) -> str | None:
        if v is None:
            return None
        return v if isinstance(v, str) else str(v)

    @field_validator("line", mode="before")
    @classmethod
    def _parse_line(cls, v: object) -> int | None:
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return None

    @property
    def effective_likelihood(self) -> Likelihood:
        """Likelihood with the MEDIUM default applied."""
        return self.likelihood or Likelihood.MEDIUM

    @property
    def severity_label(self) -> str:
        return self.severity.value if self.severity else "UNKNOWN"

    def remediation_steps(self) -> list[str]:
        if self.remediation is None:
            return []
        return self.remediation.first_available()


def ensure_findings(items: Iterable[Finding | Mapping[str, Any]] | None) -> list[Finding]:
    """Coerce *items* into ``Finding`` objects.

    Entries that are neither ``Finding`` instances nor mappings are skipped.
    """
    findings: list[Finding] = []
    if not items:
        return findings
    for index, item in enumerate(items):
        if isinstance(item, Finding):
            findings.append(item)
        elif isinstance(item, Mapping):
            findings.append(Finding.model_validate(dict(item)))
        else:
            logger.warning("Skipping finding #%d: expected an object, got %s", index, type(item).__name__)
    return findings
