# candidate_roster/extract/labels.py
"""
Election label classifier.

Classifies one normalized block of text found between candidate lists:

  - ELECTION       "General election candidates"  -> label "General election"
  - NO_CANDIDATES  "No Democratic candidate has filed ..."
  - WITHDRAWN      "Withdrew" (the next node lists withdrawn candidates)
  - IGNORABLE      "" or "Note: ..."
  - UNRECOGNIZED   anything else (narrative asides; the caller logs it)

Rules are an ordered tuple and the first match wins. New idioms are added by
extending the tuple (or passing a custom one to classify()), not by editing the
section parser.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum


class LabelKind(str, Enum):
    ELECTION = "election"
    NO_CANDIDATES = "no_candidates"
    WITHDRAWN = "withdrawn"
    IGNORABLE = "ignorable"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Classification:
    kind: LabelKind
    label: str | None = None  # only set for ELECTION


@dataclass(frozen=True)
class LabelRule:
    kind: LabelKind
    patterns: tuple[re.Pattern[str], ...]

    def apply(self, text: str) -> Classification | None:
        for pat in self.patterns:
            m = pat.search(text)
            if m is None:
                continue
            if self.kind is LabelKind.ELECTION:
                return Classification(self.kind, m.group(1))
            return Classification(self.kind)
        return None


def rule(kind: LabelKind, *patterns: str) -> LabelRule:
    return LabelRule(kind, tuple(re.compile(p) for p in patterns))


# Order matters: "General election candidates" is a label, while
# "General election candidates will be added ..." is a no-candidates marker
# (the label pattern is anchored at the end so it does not fire on the latter).
DEFAULT_RULES: tuple[LabelRule, ...] = (
    rule(LabelKind.ELECTION, r"(\w+ \w+|Primary)\s+candidates$"),
    rule(
        LabelKind.NO_CANDIDATES,
        r"^No\s+(?:\w+\s+)?candidate\s+has",
        r"^General election candidates will be added",
    ),
    rule(LabelKind.WITHDRAWN, r"^Withdrew"),
    rule(LabelKind.IGNORABLE, r"\A\Z", r"^Note:"),
)

UNRECOGNIZED = Classification(LabelKind.UNRECOGNIZED)


def classify(text: str, rules: Sequence[LabelRule] = DEFAULT_RULES) -> Classification:
    for r in rules:
        hit = r.apply(text)
        if hit is not None:
            return hit
    return UNRECOGNIZED


__all__ = [
    "LabelKind",
    "Classification",
    "LabelRule",
    "rule",
    "DEFAULT_RULES",
    "UNRECOGNIZED",
    "classify",
]
