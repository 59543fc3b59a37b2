"""End-to-end CLI tests executed directly via :func:`altmatch.cli.main`."""

import argparse
import json
from pathlib import Path

import pytest

from altmatch import cli
from altmatch.engine.models import MatchMode


def test_cli_tokens_json(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["tokens", "--pattern", "abc(d|e|f).", "--format", "json"]) == 0
    payload = json.loads(capfd.readouterr().out)
    assert [token["kind"] for token in payload["tokens"]] == ["literal", "alternation", "wildcard"]


def test_cli_tokens_text(capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["tokens", "--pattern", "a.b"])
    out = capfd.readouterr().out
    assert "0: literal 'a'" in out
    assert "1: any character" in out


def test_cli_match_text(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["match", "--pattern", "abc(d|e|f).", "--mode", "greedy", "abcde", "abcge"]) == 0
    out = capfd.readouterr().out
    assert "MATCHED: 3/3 tokens (complete)" in out
    assert "MATCHED: 1/3 tokens (partial)" in out
    assert "2 of 2 candidates matched" in out


def test_cli_match_json_from_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    items = tmp_path / "items.txt"
    items.write_text("abacabacd\nabac\n", encoding="utf-8")
    out_path = tmp_path / "result.json"
    cli.main(
        [
            "match",
            "--pattern",
            "(aba|abac).(aba|abac).",
            "--candidates-file",
            str(items),
            "--complete-only",
            "--format",
            "json",
            "--out",
            str(out_path),
        ]
    )
    payload = json.loads(out_path.read_text(encoding="utf-8"))
    assert payload["mode"] == "exhaustive"
    assert payload["most_tokens_matched"] == 4
    first, second = payload["results"]
    assert [step["text"] for step in first["steps"]] == ["aba", "c", "abac", "d"]
    assert first["hit"] is True
    assert second["hit"] is False
    assert second["length"] == 2


def test_cli_malformed_pattern(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["match", "--pattern", "abc(d|e|f.", "abcde"]) == 1
    assert "unterminated alternation" in capfd.readouterr().err


def test_cli_match_requires_candidates(capfd: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["match", "--pattern", "abc"])
    assert excinfo.value.code == 2
    assert "no candidates given" in capfd.readouterr().err


def test_cli_rejects_unknown_log_level(capfd: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--log-level", "loud", "match", "--pattern", ".", "x"])
    assert excinfo.value.code == 2
    assert "--log-level" in capfd.readouterr().err


def test_cli_log_level_is_case_insensitive(capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--log-level", "error", "match", "--pattern", ".", "x"]) == 0
    assert "MATCHED: 1/1 tokens (complete)" in capfd.readouterr().out


def test_cli_unreadable_candidates_file(tmp_path: Path, capfd: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "candidates.csv"
    bad.write_text("item\nabc\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["match", "--pattern", ".", "--candidates-file", str(bad)])
    assert excinfo.value.code == 2
    assert "cannot read" in capfd.readouterr().err


def test_altmatch_main_entrypoint(capfd: pytest.CaptureFixture[str]) -> None:
    from altmatch import main as altmatch_main

    altmatch_main(["match", "--pattern", ".", "💪"])
    assert "MATCHED: 1/1 tokens (complete)" in capfd.readouterr().out


def test_parse_mode() -> None:
    assert cli._parse_mode("GREEDY") is MatchMode.GREEDY
    with pytest.raises(argparse.ArgumentTypeError):
        cli._parse_mode("fuzzy")
