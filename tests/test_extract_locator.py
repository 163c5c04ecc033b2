# tests/test_extract_locator.py
from __future__ import annotations

import pytest

from candidate_roster.exceptions import HeaderNotFound
from candidate_roster.extract.dom import parse_html
from candidate_roster.extract.locator import (
    district_number,
    jurisdiction_key,
    locate_sections,
)

HOUSE_PAGE = """
<html><body>
<h2><span class="mw-headline" id="Candidates">Candidates</span></h2>
<h3><span class="mw-headline" id="District_1">District 1</span></h3>
<p>General election candidates</p><ul><li>A</li></ul>
<h3><span class="mw-headline" id="District_12">District 12 Candidates</span></h3>
<p>General election candidates</p><ul><li>B</li></ul>
</body></html>
"""

AT_LARGE_PAGE = """
<html><body>
<h3><span class="mw-headline" id="District_At-large">At-large district</span></h3>
<p>General election candidates</p><ul><li>C</li></ul>
</body></html>
"""

STATE_PAGE = """
<html><body>
<h2><span class="mw-headline" id="Candidates_and_election_results">Candidates and election
results</span></h2>
<p>General election candidates</p><ul><li>D</li></ul>
</body></html>
"""


class TestDistrictNumber:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("District 12 Candidates", "12"),
            ("District 1", "01"),
            ("  District 7  ", "07"),
            ("At-large district", "01"),
            ("Candidates", "01"),
            ("Congressional District 3", "01"),  # must lead the heading
        ],
    )
    def test_district_number(self, text, expected):
        assert district_number(text) == expected


def test_jurisdiction_key():
    assert jurisdiction_key("TX", "07") == "TX07"
    assert jurisdiction_key("AL", None) == "AL"


class TestDistrictBased:
    def test_one_header_per_district_marker(self):
        headers = locate_sections(parse_html(HOUSE_PAGE), district_based=True)
        assert [h.district for h in headers] == ["01", "12"]
        assert all(h.node.name == "h3" for h in headers)
        assert headers[1].node.get_text().strip() == "District 12 Candidates"

    def test_at_large_marker_defaults_to_district_one(self):
        headers = locate_sections(parse_html(AT_LARGE_PAGE), district_based=True)
        assert len(headers) == 1
        assert headers[0].district == "01"

    def test_falls_back_to_candidates_header(self):
        headers = locate_sections(parse_html(STATE_PAGE), district_based=True)
        assert len(headers) == 1
        assert headers[0].district == "01"
        assert headers[0].node.name == "h2"


class TestStateBased:
    def test_single_candidates_header(self):
        headers = locate_sections(parse_html(STATE_PAGE), district_based=False)
        assert len(headers) == 1
        assert headers[0].district is None
        assert headers[0].node.name == "h2"

    def test_ignores_district_markers(self):
        headers = locate_sections(parse_html(HOUSE_PAGE), district_based=False)
        assert len(headers) == 1
        assert headers[0].node.find(id="Candidates") is not None

    def test_both_ids_under_one_header(self):
        page = parse_html(
            "<h2><span id='Candidates'></span>"
            "<span id='Candidates_and_election_results'>Candidates</span></h2>"
        )
        assert len(locate_sections(page, district_based=False)) == 1

    def test_missing_header(self):
        page = parse_html("<h2><span id='Election_results'>Results</span></h2>")
        with pytest.raises(HeaderNotFound) as ei:
            locate_sections(page, district_based=False, jurisdiction="Georgia")
        assert ei.value.found == 0
        assert "Georgia" in str(ei.value)

    def test_ambiguous_header(self):
        page = parse_html(
            "<h2><span id='Candidates'>Candidates</span></h2>"
            "<h2><span id='Candidates_and_election_results'>Candidates</span></h2>"
        )
        with pytest.raises(HeaderNotFound) as ei:
            locate_sections(page, district_based=False, jurisdiction="Georgia")
        assert ei.value.found == 2
