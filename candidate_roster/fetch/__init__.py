# candidate_roster/fetch/__init__.py
"""
Tiny fetcher package: politeness throttling and an httpx client.

Crawler-facing API:
  - FetcherClient.fetch_html(url) -> str  (raises FetchError on non-2xx)

Other entry points:
  - FetchResult
  - throttle helpers: wait_for_turn, after_response, penalize, mark_ok
"""

from .client import FetcherClient, FetchResult
from .throttle import (
    after_response,
    mark_ok,
    next_allowed_at,
    penalize,
    wait_for_turn,
)
from .throttle import (
    clear as clear_throttle,
)

__all__ = [
    "FetcherClient",
    "FetchResult",
    "wait_for_turn",
    "after_response",
    "penalize",
    "mark_ok",
    "next_allowed_at",
    "clear_throttle",
]
