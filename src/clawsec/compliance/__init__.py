# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Compliance framework mappings."""

from clawsec.compliance.owasp import (
    OWASP_CATEGORIES,
    OwaspCompliance,
    generate_owasp_compliance,
    get_owasp_category,
    get_threats_for_category,
    map_pattern_to_owasp,
    map_threat_to_owasp,
)

__all__ = [
    "OWASP_CATEGORIES",
    "OwaspCompliance",
    "generate_owasp_compliance",
    "get_owasp_category",
    "get_threats_for_category",
    "map_pattern_to_owasp",
    "map_threat_to_owasp",
]
