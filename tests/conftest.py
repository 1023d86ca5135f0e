# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock that always returns ``FIXED_NOW``."""
    return lambda: FIXED_NOW


@pytest.fixture
def findings_file() -> Path:
    return FIXTURES_DIR / "findings.json"


@pytest.fixture
def exposed_secret() -> dict:
    """Single CRITICAL, HIGH-likelihood hardcoded secret finding."""
    return {
        "threat_id": "T005",
        "severity": "CRITICAL",
        "title": "Hardcoded API key in configuration",
        "description": "An Anthropic API key is stored in plaintext.",
        "impact": "Attackers can bill usage to the account",
        "likelihood": "HIGH",
        "evidence": {"pattern": "Anthropic API Key", "file": "config.yml"},
        "remediation": {
            "immediate": ["Rotate the exposed key", "Move the key to an environment variable"],
            "short_term": ["Add a pre-commit secret scanner"],
        },
    }


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep CLAWSEC_* variables and stray .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("CLAWSEC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by ``setup_logging`` during a test."""
    yield
    logger = logging.getLogger("clawsec")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
