# tests/test_extract_normalize.py
from __future__ import annotations

import pytest

from candidate_roster.extract.normalize import normalize_name


def test_replaces_nbsp_and_trims():
    assert normalize_name("\xa0Jane\xa0Doe \n") == "Jane Doe"


def test_plain_text_unchanged():
    assert normalize_name("Doug Jones (D)") == "Doug Jones (D)"


def test_empty_and_whitespace_only():
    assert normalize_name("") == ""
    assert normalize_name(" \xa0\t ") == ""


def test_inner_whitespace_kept():
    # only the ends are trimmed; names are otherwise free text
    assert normalize_name("  Mary  Ann\xa0Smith  ") == "Mary  Ann Smith"


@pytest.mark.parametrize(
    "raw",
    ["", "  x  ", "\xa0\xa0Tommy Tuberville\xa0", "General election\xa0candidates", "\n\t"],
)
def test_idempotent(raw):
    once = normalize_name(raw)
    assert normalize_name(once) == once
