"""Tests for result rendering."""

from altmatch import MatchMode, MatchOptions, compile_pattern
from altmatch.engine.explain import explain_text, pattern_dict, result_dict, summarize_text, tokens_text


def test_pattern_dict_and_tokens_text(abc_pattern) -> None:
    assert pattern_dict(abc_pattern) == {
        "pattern": "abc(d|e|f).",
        "tokens": [
            {"kind": "literal", "text": "abc"},
            {"kind": "alternation", "options": ["d", "e", "f"]},
            {"kind": "wildcard"},
        ],
    }
    text = tokens_text(abc_pattern)
    assert "PATTERN: abc(d|e|f)." in text
    assert "1: one of (d|e|f)" in text


def test_result_dict_reports_remaining_text(abc_pattern) -> None:
    payload = result_dict("abcge", abc_pattern.match_greedy("abcge"))
    assert payload["candidate"] == "abcge"
    assert payload["remaining"] == "ge"
    assert payload["length"] == 1
    assert payload["complete"] is False


def test_explain_text(abc_pattern) -> None:
    text = explain_text("abcge", abc_pattern.match_greedy("abcge"))
    assert "MATCHED: 1/3 tokens (partial)" in text
    assert "'abc' <- literal 'abc'" in text
    assert "REMAINING: 'ge'" in text
    text = explain_text("abcde", abc_pattern.match_greedy("abcde"))
    assert "MATCHED: 3/3 tokens (complete)" in text
    assert "REMAINING" not in text


def test_summarize_text(abc_pattern) -> None:
    results = [abc_pattern.match_greedy(c) for c in ["abcde", "abcge", "zzz"]]
    options = MatchOptions(mode=MatchMode.GREEDY)
    assert summarize_text(abc_pattern, results, options) == (
        "2 of 3 candidates matched 'abc(d|e|f).' (1 complete, greedy mode). "
        "Most tokens matched: 3 of 3."
    )
    strict = MatchOptions(mode=MatchMode.GREEDY, require_complete=True)
    assert summarize_text(abc_pattern, results, strict).startswith("1 of 3 candidates")
    assert summarize_text(compile_pattern("x"), []) == "No candidates were matched against this pattern."
