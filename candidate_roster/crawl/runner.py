# candidate_roster/crawl/runner.py
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from urllib.parse import urljoin

from bs4 import Tag

from candidate_roster.config import BALLOTPEDIA_BASE_URL
from candidate_roster.exceptions import DuplicateJurisdiction
from candidate_roster.extract.dom import attribute, parse_html, select
from candidate_roster.extract.locator import jurisdiction_key, locate_sections
from candidate_roster.extract.normalize import normalize_name
from candidate_roster.extract.sections import parse_section

from .chambers import Chamber
from .jurisdictions import STATE_ABBREVIATIONS, lookup_abbreviation

log = logging.getLogger(__name__)

# Links to the per-state election pages sit in the index page's infobox
STATE_LINK_SELECTOR = "table.infobox small a"

FetchHtml = Callable[[str], str]
ExtractionResult = dict[str, dict[str, list[str]]]


def state_links(index_page: Tag, index_url: str) -> list[tuple[str, str]]:
    """(state name, absolute URL) pairs in page order."""
    out: list[tuple[str, str]] = []
    for a in select(index_page, STATE_LINK_SELECTOR):
        name = normalize_name(a.get_text())
        href = attribute(a, "href") or ""
        out.append((name, urljoin(index_url, href)))
    return out


def extract_state(
    page: Tag,
    state: str,
    abbr: str,
    chamber: Chamber,
    result: ExtractionResult,
) -> int:
    """Add every section on one state page to ``result``; returns sections added."""
    headers = locate_sections(page, chamber.district_based, state)
    for header in headers:
        key = jurisdiction_key(abbr, header.district)
        if key in result:
            raise DuplicateJurisdiction(key)
        label = state if header.district is None else f"{state}, {key}"
        result[key] = parse_section(header.node, label)
    return len(headers)


def crawl_chamber(
    chamber: Chamber,
    year: int,
    *,
    fetch_html: FetchHtml,
    abbreviations: Mapping[str, str] = STATE_ABBREVIATIONS,
    base_url: str = BALLOTPEDIA_BASE_URL,
) -> ExtractionResult:
    """
    Crawl one chamber's election index and every linked state page.

    Pages are fetched one at a time. Any StructuralError aborts the crawl; the
    seat count is checked before anything is returned.
    """
    index_url = chamber.index_url(year, base_url)
    log.info("Fetching %s index: %s", chamber.name, index_url)
    index_page = parse_html(fetch_html(index_url))

    links = state_links(index_page, index_url)
    chamber.check_links(len(links))

    result: ExtractionResult = {}
    for state, url in links:
        abbr = lookup_abbreviation(state, abbreviations)
        log.info("%s", state)
        page = parse_html(fetch_html(url))
        n = extract_state(page, state, abbr, chamber, result)
        log.debug("%s: %d section(s) from %s", state, n, url)

    chamber.check_seats(len(result))
    log.info("%s: %d jurisdictions extracted", chamber.name, len(result))
    return result


__all__ = ["STATE_LINK_SELECTOR", "state_links", "extract_state", "crawl_chamber"]
