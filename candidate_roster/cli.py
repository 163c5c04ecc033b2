# candidate_roster/cli.py
"""
Candidate roster CLI.

Crawls one chamber's election pages and writes
{jurisdiction: {election: [candidate, ...]}} as YAML.

Usage examples
--------------
# Senate candidates for the configured year, YAML to stdout
python -m candidate_roster.cli

# House candidates for 2022 into a file, with debug logging
python -m candidate_roster.cli --house --year 2022 --out house.yaml -v

Progress and "Unexpected text" diagnostics go to stderr, so stdout stays
clean YAML. A structural problem on any page aborts the run with exit code 1
and nothing is written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

import yaml

from candidate_roster.config import ELECTION_YEAR, LOG_LEVEL
from candidate_roster.crawl import HOUSE, SENATE, crawl_chamber
from candidate_roster.exceptions import FetchError, StructuralError
from candidate_roster.fetch import FetcherClient

log = logging.getLogger("candidate_roster")


def _configure_logging(verbose: bool) -> None:
    if logging.getLogger().handlers:
        return
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def dump_yaml(result: dict[str, Any], out: TextIO) -> None:
    # keep crawl order and candidate order as found on the pages
    yaml.safe_dump(result, out, sort_keys=False, allow_unicode=True, default_flow_style=False)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="candidate-roster",
        description="Extract candidate lists per state/district and election as YAML.",
    )
    ap.add_argument(
        "--house",
        action="store_true",
        help="get House candidates instead of Senate",
    )
    ap.add_argument(
        "--year", type=int, default=ELECTION_YEAR, help=f"election year (default {ELECTION_YEAR})"
    )
    ap.add_argument("-o", "--out", help="write YAML to this file instead of stdout")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    chamber = HOUSE if args.house else SENATE
    try:
        with FetcherClient() as fc:
            result = crawl_chamber(chamber, args.year, fetch_html=fc.fetch_html)
    except (StructuralError, FetchError) as e:
        log.error("%s", e)
        return 1

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            dump_yaml(result, f)
        log.info("Wrote %d jurisdictions -> %s", len(result), out_path)
    else:
        dump_yaml(result, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
