# tests/test_fetch_client.py
from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from candidate_roster.exceptions import FetchError
from candidate_roster.fetch import client as client_mod
from candidate_roster.fetch import throttle

URL = "https://ballotpedia.test/United_States_Senate_elections,_2020"
HOST = "ballotpedia.test"


@pytest.fixture(autouse=True)
def _no_sleep(monkeypatch):
    slept: list[float] = []
    monkeypatch.setattr("time.sleep", lambda dt: slept.append(float(dt)))
    return slept


@respx.mock
def test_fetch_html_returns_text():
    route = respx.get(URL).mock(
        return_value=Response(200, text="<h2>Candidates</h2>", headers={"Content-Type": "text/html"})
    )

    with client_mod.FetcherClient() as fc:
        html = fc.fetch_html(URL)

    assert html == "<h2>Candidates</h2>"
    assert route.call_count == 1
    assert "CandidateRosterBot" in route.calls.last.request.headers["User-Agent"]


@respx.mock
def test_nbsp_survives_decoding():
    respx.get(URL).mock(
        return_value=Response(
            200,
            content="<li>Jane\xa0Doe</li>".encode(),
            headers={"Content-Type": "text/html; charset=utf-8"},
        )
    )
    with client_mod.FetcherClient() as fc:
        assert fc.fetch_html(URL) == "<li>Jane\xa0Doe</li>"


@respx.mock
def test_retries_5xx_then_succeeds(_no_sleep):
    route = respx.get(URL).mock(side_effect=[Response(503), Response(200, text="ok")])

    with client_mod.FetcherClient() as fc:
        res = fc.fetch(URL)

    assert res.status == 200
    assert res.reason == "network"
    assert route.call_count == 2
    # one exponential backoff sleep (base * 2**0)
    assert client_mod.FETCH_RETRY_BASE_SECONDS in _no_sleep


@respx.mock
def test_gives_up_after_max_retries(monkeypatch):
    monkeypatch.setattr(client_mod, "FETCH_MAX_RETRIES", 2)
    route = respx.get(URL).mock(return_value=Response(500))

    with client_mod.FetcherClient() as fc:
        with pytest.raises(FetchError) as ei:
            fc.fetch_html(URL)

    assert route.call_count == 3
    assert ei.value.status == 500
    assert ei.value.reason == "error:server"


@respx.mock
def test_transport_error_is_retried_then_reported(monkeypatch):
    monkeypatch.setattr(client_mod, "FETCH_MAX_RETRIES", 1)
    route = respx.get(URL).mock(side_effect=httpx.ConnectError("boom"))

    with client_mod.FetcherClient() as fc:
        res = fc.fetch(URL)

    assert route.call_count == 2
    assert res.status == 599
    assert res.reason == "error:ConnectError"
    assert res.ok is False


@respx.mock
def test_not_found_raises_fetch_error():
    respx.get(URL).mock(return_value=Response(404))

    with client_mod.FetcherClient() as fc:
        with pytest.raises(FetchError) as ei:
            fc.fetch_html(URL)

    assert ei.value.status == 404
    assert ei.value.url == URL


@respx.mock
def test_429_penalizes_host_without_retry():
    route = respx.get(URL).mock(return_value=Response(429))

    with client_mod.FetcherClient() as fc:
        res = fc.fetch(URL)

    assert route.call_count == 1
    assert res.reason == "throttled"
    assert res.body is None
    assert throttle.strikes(HOST) == 1
