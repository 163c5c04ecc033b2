# candidate_roster/exceptions.py
"""
Shared exception classes used across the codebase.

Every StructuralError is fatal for the whole run: the crawl aborts rather
than emitting a partial or mis-attributed roster.
"""

from __future__ import annotations


class StructuralError(Exception):
    """
    Raised when a page does not have the shape the extractor expects.

    Carries the jurisdiction (state name, or state + district) that was being
    processed so the failure can be diagnosed without re-running.
    """

    def __init__(self, message: str, jurisdiction: str | None = None) -> None:
        super().__init__(message)
        self.jurisdiction = jurisdiction


class ElectionNotFound(StructuralError):
    """A candidate list or "no candidates" marker appeared before any election label."""

    def __init__(self, jurisdiction: str) -> None:
        super().__init__(f"Election not found ({jurisdiction})", jurisdiction)


class DuplicateElection(StructuralError):
    """The same election label was populated twice within one jurisdiction."""

    def __init__(self, election: str, jurisdiction: str) -> None:
        super().__init__(f"Duplicate election ({election}, {jurisdiction})", jurisdiction)
        self.election = election


class ExpectedWithdrawnList(StructuralError):
    """A "Withdrew" marker was not immediately followed by a list."""

    def __init__(self, jurisdiction: str) -> None:
        super().__init__(f"Expected ul for withdrawn candidates ({jurisdiction})", jurisdiction)


class HeaderNotFound(StructuralError):
    """The Candidates header could not be located exactly once on a page."""

    def __init__(self, jurisdiction: str | None, found: int = 0) -> None:
        super().__init__(
            f"Can't find Candidates header ({jurisdiction}; found {found})", jurisdiction
        )
        self.found = found


class UnknownJurisdiction(StructuralError):
    """A state name from the index page has no known abbreviation."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Unknown state "{name}"', name)
        self.name = name


class CountMismatch(StructuralError):
    """A crawl found the wrong number of index links or seats for its chamber."""

    def __init__(self, what: str, actual: int, expected: str) -> None:
        super().__init__(f"Wrong number of {what}: got {actual}, expected {expected}")
        self.what = what
        self.actual = actual
        self.expected = expected


class DuplicateJurisdiction(StructuralError):
    """Two sections of a crawl produced the same jurisdiction key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate jurisdiction key ({key})", key)
        self.key = key


class FetchError(RuntimeError):
    """Raised when a page could not be fetched with a 2xx response."""

    def __init__(self, url: str, status: int, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: status={status} reason={reason}")
        self.url = url
        self.status = status
        self.reason = reason


__all__ = [
    "StructuralError",
    "ElectionNotFound",
    "DuplicateElection",
    "ExpectedWithdrawnList",
    "HeaderNotFound",
    "UnknownJurisdiction",
    "CountMismatch",
    "DuplicateJurisdiction",
    "FetchError",
]
