# candidate_roster/extract/normalize.py
from __future__ import annotations

NBSP = "\xa0"


def normalize_name(raw: str) -> str:
    """Replace non-breaking spaces with plain spaces and trim the result."""
    return raw.replace(NBSP, " ").strip()


__all__ = ["normalize_name"]
