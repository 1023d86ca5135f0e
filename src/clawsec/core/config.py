# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clawsec.core.constants import ScanType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLAWSEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"  # "json" or "text"

    # Executive summary
    summary_max_bullets: int = 5

    # Scoring
    default_scan_type: ScanType | None = None
    weights_file: str = ""  # YAML file of weight overrides

    @field_validator("log_format", mode="before")
    @classmethod
    def _parse_log_format(cls, v: object) -> str:
        if isinstance(v, str) and v.strip().lower() in ("json", "text"):
            return v.strip().lower()
        return "text"

    @field_validator("summary_max_bullets")
    @classmethod
    def _check_max_bullets(cls, v: int) -> int:
        if v < 1:
            msg = f"summary_max_bullets must be at least 1, got {v}"
            raise ValueError(msg)
        return v


def get_settings() -> Settings:
    return Settings()
