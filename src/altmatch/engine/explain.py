"""Human and JSON renderings of match results."""
from __future__ import annotations

from collections.abc import Sequence

from .models import MatchOptions, MatchResult
from .pattern import Pattern
from .tokens import token_to_json


def pattern_dict(pattern: Pattern) -> dict[str, object]:
    return {
        "pattern": pattern.text,
        "tokens": [token_to_json(token) for token in pattern.tokens],
    }


def result_dict(candidate: str, result: MatchResult) -> dict[str, object]:
    payload = result.to_json()
    payload["candidate"] = candidate
    payload["remaining"] = candidate[len(result.matched_text) :]
    return payload


def tokens_text(pattern: Pattern) -> str:
    lines = [f"PATTERN: {pattern.text}", "TOKENS:"]
    for index, token in enumerate(pattern.tokens):
        lines.append(f"  {index}: {token.describe()}")
    return "\n".join(lines)


def explain_text(candidate: str, result: MatchResult) -> str:
    status = "complete" if result.is_complete else "partial"
    lines = [f"CANDIDATE: {candidate}", f"MATCHED: {len(result)}/{result.token_count} tokens ({status})"]
    for step in result:
        lines.append(f"  {step.text!r} <- {step.token.describe()}")
    remaining = candidate[len(result.matched_text) :]
    if remaining:
        lines.append(f"REMAINING: {remaining!r}")
    return "\n".join(lines)


def summarize_text(
    pattern: Pattern, results: Sequence[MatchResult], options: MatchOptions | None = None
) -> str:
    options = options or MatchOptions()
    if not results:
        return "No candidates were matched against this pattern."
    hits = sum(1 for result in results if options.is_hit(result))
    complete = sum(1 for result in results if result.is_complete)
    return (
        f"{hits} of {len(results)} candidates matched {pattern.text!r} "
        f"({complete} complete, {options.mode.value} mode). "
        f"Most tokens matched: {pattern.most_tokens_matched} of {len(pattern)}."
    )
