# candidate_roster/extract/sections.py
"""
Election section parser.

Walks the element siblings that follow a "Candidates" header and rebuilds
{election label: [candidate, ...]} for one jurisdiction.

Transitions (walk state READING unless noted):

  h2/h3                     -> stop (header is not consumed)
  ul                        -> store names under the open election
  text: ELECTION(label)     -> open election = label
  text: NO_CANDIDATES       -> store [] under the open election
  text: WITHDRAWN           -> AWAIT_WITHDRAWN_LIST
  text: IGNORABLE           -> nothing
  text: UNRECOGNIZED        -> warning, nothing
  AWAIT_WITHDRAWN_LIST + ul -> skip the list, back to READING
  AWAIT_WITHDRAWN_LIST + * -> ExpectedWithdrawnList (also at end of siblings)

Storing requires an open election and a label not yet stored; otherwise
ElectionNotFound / DuplicateElection. Any error aborts the whole crawl.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from enum import Enum

from bs4 import Tag

from candidate_roster.exceptions import (
    DuplicateElection,
    ElectionNotFound,
    ExpectedWithdrawnList,
)

from .dom import matches, next_element, node_text
from .labels import DEFAULT_RULES, LabelKind, LabelRule, classify
from .normalize import normalize_name

log = logging.getLogger(__name__)

STOP_TAGS: tuple[str, ...] = ("h2", "h3")
LIST_TAGS: tuple[str, ...] = ("ul",)


class _WalkState(Enum):
    READING = "reading"
    AWAIT_WITHDRAWN_LIST = "await_withdrawn_list"


def _siblings_after(header: Tag) -> Iterator[Tag]:
    node = next_element(header)
    while node is not None:
        yield node
        node = next_element(node)


def _list_names(node: Tag) -> list[str]:
    return [normalize_name(node_text(li)) for li in node.find_all("li")]


def _store(
    sections: dict[str, list[str]],
    election: str | None,
    names: list[str],
    jurisdiction: str,
) -> None:
    if election is None:
        raise ElectionNotFound(jurisdiction)
    if election in sections:
        raise DuplicateElection(election, jurisdiction)
    sections[election] = names


def parse_section(
    header: Tag,
    jurisdiction: str,
    *,
    rules: Sequence[LabelRule] = DEFAULT_RULES,
) -> dict[str, list[str]]:
    """
    Parse the candidate lists that follow ``header``.

    ``jurisdiction`` is only used in log lines and error messages. An empty
    dict is a valid result (no candidates listed yet).
    """
    sections: dict[str, list[str]] = {}
    election: str | None = None
    state = _WalkState.READING

    for node in _siblings_after(header):
        if state is _WalkState.AWAIT_WITHDRAWN_LIST:
            if not matches(node, LIST_TAGS):
                raise ExpectedWithdrawnList(jurisdiction)
            log.debug("Skipping withdrawn candidates (%s)", jurisdiction)
            state = _WalkState.READING
            continue

        if matches(node, STOP_TAGS):
            break

        if matches(node, LIST_TAGS):
            _store(sections, election, _list_names(node), jurisdiction)
            continue

        text = normalize_name(node_text(node))
        hit = classify(text, rules)
        if hit.kind is LabelKind.ELECTION:
            election = hit.label
        elif hit.kind is LabelKind.NO_CANDIDATES:
            _store(sections, election, [], jurisdiction)
        elif hit.kind is LabelKind.WITHDRAWN:
            state = _WalkState.AWAIT_WITHDRAWN_LIST
        elif hit.kind is LabelKind.UNRECOGNIZED:
            log.warning('Unexpected text "%s" (%s)', text, jurisdiction)

    if state is _WalkState.AWAIT_WITHDRAWN_LIST:
        raise ExpectedWithdrawnList(jurisdiction)

    return sections


__all__ = ["parse_section", "STOP_TAGS", "LIST_TAGS"]
