# candidate_roster/crawl/chambers.py
"""
Chamber definitions: where the index page lives and how many states/seats a
complete crawl must find.

A count is either exact ("== 50") or a lower bound (">= 33"). The Senate only
has a third of its seats up in any year, plus the odd special election, so its
counts are lower bounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from candidate_roster.config import BALLOTPEDIA_BASE_URL
from candidate_roster.exceptions import CountMismatch


@dataclass(frozen=True)
class ExpectedCount:
    value: int
    exact: bool

    def satisfied_by(self, n: int) -> bool:
        return n == self.value if self.exact else n >= self.value

    def __str__(self) -> str:
        return f"{'==' if self.exact else '>='} {self.value}"


@dataclass(frozen=True)
class Chamber:
    name: str
    page_title: str  # e.g. "United_States_Senate_elections"
    district_based: bool
    expected_links: ExpectedCount
    expected_seats: ExpectedCount

    def index_url(self, year: int, base_url: str = BALLOTPEDIA_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}/{self.page_title},_{year}"

    def check_links(self, n: int) -> None:
        if not self.expected_links.satisfied_by(n):
            raise CountMismatch(f"{self.name} state links", n, str(self.expected_links))

    def check_seats(self, n: int) -> None:
        if not self.expected_seats.satisfied_by(n):
            raise CountMismatch(f"{self.name} seats", n, str(self.expected_seats))


SENATE = Chamber(
    name="Senate",
    page_title="United_States_Senate_elections",
    district_based=False,
    expected_links=ExpectedCount(33, exact=False),
    expected_seats=ExpectedCount(33, exact=False),
)

HOUSE = Chamber(
    name="House",
    page_title="United_States_House_of_Representatives_elections",
    district_based=True,
    expected_links=ExpectedCount(50, exact=True),
    expected_seats=ExpectedCount(435, exact=True),
)

CHAMBERS: dict[str, Chamber] = {c.name.lower(): c for c in (SENATE, HOUSE)}


__all__ = ["ExpectedCount", "Chamber", "SENATE", "HOUSE", "CHAMBERS"]
