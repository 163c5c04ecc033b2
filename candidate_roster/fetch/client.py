# candidate_roster/fetch/client.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx

from candidate_roster.config import (
    FETCH_ACCEPT,
    FETCH_CONNECT_TIMEOUT_S,
    FETCH_MAX_REDIRECTS,
    FETCH_MAX_RETRIES,
    FETCH_READ_TIMEOUT_S,
    FETCH_RETRY_BASE_SECONDS,
    FETCH_USER_AGENT,
)
from candidate_roster.exceptions import FetchError

from . import throttle

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------------------------------
# Results
# --------------------------------------------------------------------------------------------------


@dataclass
class FetchResult:
    status: int
    url: str
    effective_url: str
    content_type: str | None
    body: bytes | None
    reason: str  # "network" | "throttled" | "error:server" | "error:<ExcName>"
    encoding: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.body is not None

    def text(self) -> str:
        if self.body is None:
            return ""
        return self.body.decode(self.encoding or "utf-8", errors="replace")


# --------------------------------------------------------------------------------------------------
# Helpers
# --------------------------------------------------------------------------------------------------


def _host(url: str) -> str:
    return urlsplit(url).netloc.lower()


# --------------------------------------------------------------------------------------------------
# Client
# --------------------------------------------------------------------------------------------------


class FetcherClient:
    """
    Small wrapper around httpx that enforces a per-host politeness gap.

    Flow:
      1) throttle.wait_for_turn(host)
      2) http GET
      3) On 2xx: throttle.after_response(2xx); return body
         On 403/429: throttle.penalize; return throttled
         On >=500 or transport error: retry with exponential backoff
    """

    def __init__(self, *, user_agent: str | None = None) -> None:
        self.user_agent = user_agent or FETCH_USER_AGENT
        self._client = httpx.Client(
            headers={"User-Agent": self.user_agent, "Accept": FETCH_ACCEPT},
            timeout=httpx.Timeout(FETCH_READ_TIMEOUT_S, connect=FETCH_CONNECT_TIMEOUT_S),
            follow_redirects=True,
            max_redirects=FETCH_MAX_REDIRECTS,
        )

    # ---- core fetch ------------------------------------------------------------------

    def fetch(self, url: str) -> FetchResult:
        host = _host(url)
        throttle.wait_for_turn(host)
        return self._do_request_with_retries(url, host)

    def fetch_html(self, url: str) -> str:
        """Return the decoded page, or raise FetchError for anything but a 2xx."""
        res = self.fetch(url)
        if not res.ok:
            raise FetchError(url, res.status, res.reason)
        return res.text()

    # ----------------------------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------------------------

    def _do_request_with_retries(self, url: str, host: str) -> FetchResult:
        attempt = 0
        while True:
            try:
                resp = self._client.get(url)
            except httpx.RequestError as exc:
                status = 599
                throttle.after_response(host, status)
                if attempt >= FETCH_MAX_RETRIES:
                    return FetchResult(
                        status=status,
                        url=url,
                        effective_url=url,
                        content_type=None,
                        body=None,
                        reason=f"error:{type(exc).__name__}",
                    )
                log.warning("Fetch %s failed (%s); retrying", url, type(exc).__name__)
                self._sleep_retry(attempt)
                attempt += 1
                continue

            status = int(resp.status_code)

            if 200 <= status < 300:
                throttle.after_response(host, status)
                return FetchResult(
                    status=status,
                    url=url,
                    effective_url=str(resp.url),
                    content_type=resp.headers.get("Content-Type"),
                    body=resp.content or b"",
                    reason="network",
                    encoding=resp.encoding,
                )

            if status in (403, 429):
                throttle.penalize(host)
                return FetchResult(
                    status=status,
                    url=url,
                    effective_url=str(resp.url),
                    content_type=resp.headers.get("Content-Type"),
                    body=None,
                    reason="throttled",
                )

            if status >= 500:
                throttle.after_response(host, status)
                if attempt >= FETCH_MAX_RETRIES:
                    return FetchResult(
                        status=status,
                        url=url,
                        effective_url=str(resp.url),
                        content_type=resp.headers.get("Content-Type"),
                        body=None,
                        reason="error:server",
                    )
                log.warning("Fetch %s returned %d; retrying", url, status)
                self._sleep_retry(attempt)
                attempt += 1
                continue

            # Other statuses (3xx after redirects / 4xx non-throttle)
            throttle.after_response(host, status)
            return FetchResult(
                status=status,
                url=url,
                effective_url=str(resp.url),
                content_type=resp.headers.get("Content-Type"),
                body=None,
                reason="network",
            )

    def _sleep_retry(self, attempt: int) -> None:
        # tests can monkeypatch time.sleep
        time.sleep(FETCH_RETRY_BASE_SECONDS * (2**attempt))

    # ----------------------------------------------------------------------------------
    # Context manager
    # ----------------------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> FetcherClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["FetcherClient", "FetchResult"]
