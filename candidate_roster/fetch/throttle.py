# candidate_roster/fetch/throttle.py
from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from candidate_roster.config import (
    THROTTLE_BASE_BACKOFF_SECONDS,
    THROTTLE_DEFAULT_MIN_GAP_SECONDS,
    THROTTLE_MAX_BACKOFF_SECONDS,
)

# --------------------------------------------------------------------------------------
# Configuration (env-overridable via candidate_roster.config)
# --------------------------------------------------------------------------------------

BASE_BACKOFF_S = THROTTLE_BASE_BACKOFF_SECONDS
MAX_BACKOFF_S = THROTTLE_MAX_BACKOFF_SECONDS
DEFAULT_MIN_GAP_S = THROTTLE_DEFAULT_MIN_GAP_SECONDS

# --------------------------------------------------------------------------------------
# State
# --------------------------------------------------------------------------------------


@dataclass
class _HostState:
    next_allowed_at: float = 0.0  # monotonic seconds when host can be hit again
    strikes: int = 0  # consecutive 403/429 counter


_MEMO: dict[str, _HostState] = {}
_LOCKS: dict[str, threading.Lock] = {}
_GLOBAL_LOCK = threading.Lock()


def _now() -> float:
    return time.monotonic()


def _sleep(dt: float) -> None:
    time.sleep(dt)


def _host_lock(host: str) -> threading.Lock:
    host = host.strip().lower()
    with _GLOBAL_LOCK:
        lk = _LOCKS.get(host)
        if lk is None:
            lk = threading.Lock()
            _LOCKS[host] = lk
        return lk


def _state(host: str) -> _HostState:
    host = host.strip().lower()
    st = _MEMO.get(host)
    if st is None:
        st = _HostState()
        _MEMO[host] = st
    return st


# --------------------------------------------------------------------------------------
# Core API
# --------------------------------------------------------------------------------------


def wait_for_turn(host: str) -> float:
    """
    Block (sleep) until this host is eligible to be hit.
    Returns the number of seconds slept (0 if no wait).
    """
    host = host.strip().lower()
    with _host_lock(host):
        st = _state(host)
        now = _now()
        if st.next_allowed_at <= now:
            return 0.0
        dt = st.next_allowed_at - now
        _sleep(dt)
        return dt


def mark_ok(host: str, gap_s: float | None = None) -> float:
    """
    Record a successful response and schedule the next allowed time.
    Returns the gap that was scheduled.
    """
    host = host.strip().lower()
    delay = DEFAULT_MIN_GAP_S if gap_s is None else max(0.0, float(gap_s))
    with _host_lock(host):
        st = _state(host)
        st.strikes = 0
        now = _now()
        # Never move next_allowed backwards
        st.next_allowed_at = max(st.next_allowed_at, now) + delay
        return delay


def penalize(host: str) -> float:
    """
    Record a 429/403. Backoff = min(MAX_BACKOFF_S, BASE_BACKOFF_S * 2**strikes).
    Returns the cool-off seconds that were scheduled.
    """
    host = host.strip().lower()
    with _host_lock(host):
        st = _state(host)
        st.strikes += 1
        backoff = min(MAX_BACKOFF_S, BASE_BACKOFF_S * (2**st.strikes))
        now = _now()
        st.next_allowed_at = max(st.next_allowed_at, now) + backoff
        return backoff


def after_response(host: str, status: int) -> float:
    """Update throttling state from an HTTP status; returns the delay applied."""
    if int(status) in (403, 429):
        return penalize(host)
    if 200 <= int(status) <= 299:
        return mark_ok(host)
    # Other statuses keep the strike count but still space out the next hit.
    host = host.strip().lower()
    with _host_lock(host):
        st = _state(host)
        st.next_allowed_at = max(st.next_allowed_at, _now()) + DEFAULT_MIN_GAP_S
    return DEFAULT_MIN_GAP_S


# --------------------------------------------------------------------------------------
# Introspection / test helpers
# --------------------------------------------------------------------------------------


def next_allowed_at(host: str) -> float:
    host = host.strip().lower()
    with _host_lock(host):
        return _state(host).next_allowed_at


def strikes(host: str) -> int:
    host = host.strip().lower()
    with _host_lock(host):
        return _state(host).strikes


def clear(host: str | None = None) -> None:
    """Clear throttling state (all hosts or a single host)."""
    if host is None:
        with _GLOBAL_LOCK:
            _MEMO.clear()
            _LOCKS.clear()
        return
    host = host.strip().lower()
    with _host_lock(host):
        _MEMO.pop(host, None)
        _LOCKS.pop(host, None)
