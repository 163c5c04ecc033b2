# tests/conftest.py
from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from bs4 import Tag

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from candidate_roster.extract.dom import parse_html  # noqa: E402
from candidate_roster.fetch import throttle  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_throttle():
    # make tests independent
    throttle.clear()
    yield
    throttle.clear()


@pytest.fixture
def section_header() -> Callable[[str], Tag]:
    """
    Build a page whose Candidates header is followed by ``body`` and return the
    header node, ready for parse_section().
    """

    def _make(body: str) -> Tag:
        html = (
            "<html><body><div id='content'>"
            '<h2><span class="mw-headline" id="Candidates">Candidates</span></h2>'
            f"{body}"
            "</div></body></html>"
        )
        page = parse_html(html)
        header = page.find("h2")
        assert isinstance(header, Tag)
        return header

    return _make
