# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Base model for report payloads serialized with camelCase keys."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportModel(BaseModel):
    """Output model: snake_case attributes, camelCase JSON keys.

    Report templates and JSON consumers depend on the camelCase names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
