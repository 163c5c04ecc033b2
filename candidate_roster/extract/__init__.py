# candidate_roster/extract/__init__.py
from __future__ import annotations

from .labels import Classification, LabelKind, LabelRule, classify
from .locator import SectionHeader, district_number, jurisdiction_key, locate_sections
from .normalize import normalize_name
from .sections import parse_section

"""
Pure HTML -> candidate roster extraction.

Public API:
- normalize_name(raw) -> str
- classify(text) -> Classification
- parse_section(header, jurisdiction) -> dict[str, list[str]]
- locate_sections(page, district_based, jurisdiction) -> list[SectionHeader]

Nothing here performs I/O; pages are fetched and parsed by the caller.
"""

__all__ = [
    "Classification",
    "LabelKind",
    "LabelRule",
    "SectionHeader",
    "classify",
    "district_number",
    "jurisdiction_key",
    "locate_sections",
    "normalize_name",
    "parse_section",
]
