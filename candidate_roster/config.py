# candidate_roster/config.py
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def _getenv_int(name: str, default: int) -> int:
    v = os.getenv(name, str(default)).strip()
    try:
        return int(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be an integer; got {v!r}") from err


def _getenv_float(name: str, default: float) -> float:
    v = os.getenv(name, str(default)).strip()
    try:
        return float(v)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be a number; got {v!r}") from err


def _getenv_str(name: str, default: str) -> str:
    return os.getenv(name, default).strip()


# Load .env from project root if present
ROOT = Path(__file__).resolve().parents[1]
load_dotenv(ROOT / ".env", override=False)

# ---- Bot identity ----
BOT_NAME = "CandidateRosterBot"
CONTACT_URL = "https://github.com/candidate-roster/candidate-roster"


def _getenv_user_agent(env_var: str, default: str) -> str:
    """
    Read a user-agent from the environment, but ensure our bot name is present.
    """
    ua = os.getenv(env_var, default).strip()
    if BOT_NAME not in ua:
        ua = f"{BOT_NAME} {ua}"
    return ua


# -------------------------------
# Source pages
# -------------------------------
ELECTION_YEAR: int = _getenv_int("ELECTION_YEAR", 2020)
BALLOTPEDIA_BASE_URL: str = _getenv_str("BALLOTPEDIA_BASE_URL", "https://ballotpedia.org").rstrip(
    "/"
)

# -------------------------------
# Fetch config (constants, env-overridable)
# -------------------------------
FETCH_USER_AGENT: str = _getenv_user_agent(
    "FETCH_USER_AGENT",
    f"{BOT_NAME}/0.1 (+{CONTACT_URL})",
)
FETCH_ACCEPT: str = _getenv_str("FETCH_ACCEPT", "text/html, */*")
FETCH_CONNECT_TIMEOUT_S: float = _getenv_float("FETCH_CONNECT_TIMEOUT_S", 5.0)
FETCH_READ_TIMEOUT_S: float = _getenv_float("FETCH_READ_TIMEOUT_S", 15.0)
FETCH_MAX_REDIRECTS: int = _getenv_int("FETCH_MAX_REDIRECTS", 5)
# Retry policy for transport errors and 5xx
FETCH_MAX_RETRIES: int = _getenv_int("FETCH_MAX_RETRIES", 2)
FETCH_RETRY_BASE_SECONDS: float = _getenv_float("FETCH_RETRY_BASE_SECONDS", 0.5)

# -------------------------------
# Politeness throttle
# -------------------------------
# Base backoff (first 429/403 cool-off will be 2 * base)
THROTTLE_BASE_BACKOFF_SECONDS: float = _getenv_float("THROTTLE_BASE_BACKOFF_SECONDS", 3.0)
THROTTLE_MAX_BACKOFF_SECONDS: float = _getenv_float("THROTTLE_MAX_BACKOFF_SECONDS", 60.0)
THROTTLE_DEFAULT_MIN_GAP_SECONDS: float = _getenv_float("THROTTLE_DEFAULT_MIN_GAP_SECONDS", 1.0)

# -------------------------------
# Logging
# -------------------------------
LOG_LEVEL: str = _getenv_str("LOG_LEVEL", "INFO").upper()
