# scripts/scrape_candidates.py
"""
Run the candidate roster crawl from a repo checkout without installing.

Usage:
  python scripts/scrape_candidates.py > senate.yaml
  python scripts/scrape_candidates.py --house --year 2022 --out house.yaml
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the package is importable when running as a script
_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from candidate_roster.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
