# candidate_roster/crawl/__init__.py
from __future__ import annotations

from .chambers import CHAMBERS, HOUSE, SENATE, Chamber
from .jurisdictions import STATE_ABBREVIATIONS, lookup_abbreviation
from .runner import crawl_chamber

__all__ = [
    "CHAMBERS",
    "HOUSE",
    "SENATE",
    "Chamber",
    "STATE_ABBREVIATIONS",
    "lookup_abbreviation",
    "crawl_chamber",
]
