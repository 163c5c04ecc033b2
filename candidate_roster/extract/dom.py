# candidate_roster/extract/dom.py
"""
Thin tree-query helpers over BeautifulSoup.

The extractor only ever reads the parsed tree: select by CSS, step to the next
element sibling, read text and attributes, and test tag names.
"""

from __future__ import annotations

from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

# bs4's builtin parser keeps us free of lxml/html5lib
HTML_PARSER = "html.parser"


def parse_html(html: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(html, HTML_PARSER)


def select(root: Tag, selector: str) -> list[Tag]:
    return list(root.select(selector))


def next_element(node: Tag) -> Tag | None:
    """Next sibling that is an element (text and comments are skipped)."""
    for sib in node.next_siblings:
        if isinstance(sib, Tag):
            return sib
    return None


def node_text(node: Tag) -> str:
    return node.get_text()


def attribute(node: Tag, name: str) -> str | None:
    v = node.get(name)
    if v is None:
        return None
    # multi-valued attributes (class, rel) come back as lists
    if isinstance(v, list):
        return " ".join(v)
    return str(v)


def matches(node: Tag | None, tag_names: Iterable[str]) -> bool:
    if node is None:
        return False
    return (node.name or "").lower() in {t.lower() for t in tag_names}


def distinct_parents(nodes: Iterable[Tag]) -> list[Tag]:
    """Parents of ``nodes`` in document order, each at most once."""
    out: list[Tag] = []
    seen: set[int] = set()
    for n in nodes:
        parent = n.parent
        if not isinstance(parent, Tag) or id(parent) in seen:
            continue
        seen.add(id(parent))
        out.append(parent)
    return out


__all__ = [
    "HTML_PARSER",
    "parse_html",
    "select",
    "next_element",
    "node_text",
    "attribute",
    "matches",
    "distinct_parents",
]
