# candidate_roster/extract/locator.py
from __future__ import annotations

import re
from dataclasses import dataclass

from bs4 import Tag

from candidate_roster.exceptions import HeaderNotFound

from .dom import distinct_parents, node_text, select

DISTRICT_MARKER_SELECTOR = '[id^="District_"]'
CANDIDATES_HEADER_SELECTOR = "#Candidates, #Candidates_and_election_results"

# At-large seats have no "District N" heading
DEFAULT_DISTRICT = "1"

_DISTRICT_RE = re.compile(r"^District (\d+)")


@dataclass(frozen=True)
class SectionHeader:
    node: Tag
    district: str | None  # two digits for district-based chambers


def district_number(header_text: str) -> str:
    """'District 12 Candidates' -> '12'; no match -> '01'."""
    m = _DISTRICT_RE.match(header_text.strip())
    return (m.group(1) if m else DEFAULT_DISTRICT).zfill(2)


def jurisdiction_key(abbr: str, district: str | None) -> str:
    return abbr if district is None else f"{abbr}{district}"


def locate_sections(
    page: Tag,
    district_based: bool,
    jurisdiction: str | None = None,
) -> list[SectionHeader]:
    """
    Find the header node(s) that start each candidate section on a page.

    District-based chambers get one header per District_ marker. Otherwise (or
    when a page has no district markers) exactly one Candidates header must
    exist; anything else raises HeaderNotFound.
    """
    if district_based:
        headers = distinct_parents(select(page, DISTRICT_MARKER_SELECTOR))
        if headers:
            return [SectionHeader(h, district_number(node_text(h))) for h in headers]

    headers = distinct_parents(select(page, CANDIDATES_HEADER_SELECTOR))
    if len(headers) != 1:
        raise HeaderNotFound(jurisdiction, found=len(headers))

    district = DEFAULT_DISTRICT.zfill(2) if district_based else None
    return [SectionHeader(headers[0], district)]


__all__ = [
    "SectionHeader",
    "district_number",
    "jurisdiction_key",
    "locate_sections",
    "DISTRICT_MARKER_SELECTOR",
    "CANDIDATES_HEADER_SELECTOR",
]
