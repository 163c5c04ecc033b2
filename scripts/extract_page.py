# scripts/extract_page.py
r"""
Extract the candidate sections from one saved state page.

Handy for checking a page that made the full crawl abort, without hitting the
network again.

Usage:
  python scripts/extract_page.py --html saved/Alabama.html --state Alabama
  python scripts/extract_page.py --html saved/Texas.html --state Texas --house
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from candidate_roster.cli import dump_yaml  # noqa: E402
from candidate_roster.crawl import HOUSE, SENATE, lookup_abbreviation  # noqa: E402
from candidate_roster.crawl.runner import extract_state  # noqa: E402
from candidate_roster.exceptions import StructuralError  # noqa: E402
from candidate_roster.extract.dom import parse_html  # noqa: E402


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract candidate sections from a saved page")
    p.add_argument("--html", required=True, help="Path to the saved HTML page")
    p.add_argument("--state", required=True, help='State name as on the index, e.g. "New York"')
    p.add_argument("--house", action="store_true", help="Treat the page as a House page")
    return p.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    chamber = HOUSE if args.house else SENATE
    page = parse_html(Path(args.html).read_bytes())
    result: dict[str, dict[str, list[str]]] = {}
    try:
        abbr = lookup_abbreviation(args.state)
        extract_state(page, args.state, abbr, chamber, result)
    except StructuralError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    dump_yaml(result, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
