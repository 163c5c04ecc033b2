# tests/test_cli.py
from __future__ import annotations

import sys

import yaml

from candidate_roster import cli
from candidate_roster.crawl import HOUSE, SENATE
from candidate_roster.exceptions import DuplicateElection, FetchError

RESULT = {
    "TX": {
        "Republican primary": ["Mary Janeé Smith", "John Cornyn"],
        "General election": [],
    },
    "AL": {"General election": ["Tommy Tuberville", "Doug Jones"]},
}


def _stub_crawl(calls, result=RESULT, error=None):
    def _crawl(chamber, year, *, fetch_html):
        calls.append((chamber, year))
        if error is not None:
            raise error
        return result

    return _crawl


def test_writes_yaml_to_stdout(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(cli, "crawl_chamber", _stub_crawl(calls))

    assert cli.main(["--year", "2020"]) == 0

    out = capsys.readouterr().out
    assert yaml.safe_load(out) == RESULT
    # crawl order and candidate order are kept as-is
    assert out.index("TX:") < out.index("AL:")
    assert out.index("Republican primary") < out.index("General election")
    assert "Mary Janeé Smith" in out
    assert calls == [(SENATE, 2020)]


def test_house_flag_selects_house(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(cli, "crawl_chamber", _stub_crawl(calls))

    assert cli.main(["--house", "--year", "2022"]) == 0
    assert calls == [(HOUSE, 2022)]


def test_out_file(monkeypatch, capsys, tmp_path):
    monkeypatch.setattr(cli, "crawl_chamber", _stub_crawl([]))
    target = tmp_path / "out" / "senate.yaml"

    assert cli.main(["--out", str(target)]) == 0

    assert capsys.readouterr().out == ""
    assert yaml.safe_load(target.read_text(encoding="utf-8")) == RESULT


def test_structural_error_exits_nonzero_without_output(monkeypatch, capsys, caplog):
    err = DuplicateElection("Democratic primary", "Utah")
    monkeypatch.setattr(cli, "crawl_chamber", _stub_crawl([], error=err))

    assert cli.main([]) == 1

    assert capsys.readouterr().out == ""
    assert "Duplicate election (Democratic primary, Utah)" in caplog.text


def test_fetch_error_exits_nonzero(monkeypatch, capsys):
    err = FetchError("https://ballotpedia.test/x", 404, "network")
    monkeypatch.setattr(cli, "crawl_chamber", _stub_crawl([], error=err))

    assert cli.main([]) == 1
    assert capsys.readouterr().out == ""


def test_empty_elections_serialize_as_empty_lists(capsys):
    cli.dump_yaml({"AK": {"General election": []}}, sys.stdout)
    assert yaml.safe_load(capsys.readouterr().out) == {"AK": {"General election": []}}
