"""Single-token matching primitives and the greedy matcher."""
from __future__ import annotations

from collections.abc import Iterator, Sequence

from .models import MatchResult, MatchStep
from .tokens import Alternation, Literal, Token, Wildcard

# Each primitive takes the candidate and a cursor offset into it. On success it
# appends one MatchStep and returns the advanced offset; on failure it returns
# None and leaves ``steps`` alone.


def match_literal(token: Literal, candidate: str, pos: int, steps: list[MatchStep]) -> int | None:
    if not candidate.startswith(token.text, pos):
        return None
    end = pos + len(token.text)
    steps.append(MatchStep(token, candidate[pos:end]))
    return end


def match_alternation(token: Alternation, candidate: str, pos: int, steps: list[MatchStep]) -> int | None:
    for option in token.options:
        if candidate.startswith(option, pos):
            end = pos + len(option)
            steps.append(MatchStep(token, candidate[pos:end]))
            return end
    return None


def iter_alternation_choices(
    token: Alternation, index: int, candidate: str, pos: int
) -> Iterator[tuple[int, Alternation, str]]:
    """Yield ``(index, token, option)`` for every option that prefixes the remainder."""
    for option in token.options:
        if candidate.startswith(option, pos):
            yield index, token, option


def match_wildcard(token: Wildcard, candidate: str, pos: int, steps: list[MatchStep]) -> int | None:
    # str indexing is per code point, so multi-byte characters are one unit
    if pos >= len(candidate):
        return None
    steps.append(MatchStep(token, candidate[pos]))
    return pos + 1


def match_token(token: Token, candidate: str, pos: int, steps: list[MatchStep]) -> int | None:
    """Dispatch to the primitive for ``token``; alternations take the first option."""
    if isinstance(token, Literal):
        return match_literal(token, candidate, pos, steps)
    if isinstance(token, Alternation):
        return match_alternation(token, candidate, pos, steps)
    return match_wildcard(token, candidate, pos, steps)


def match_greedy(tokens: Sequence[Token], candidate: str) -> MatchResult:
    """Match tokens left to right without backtracking, stopping at the first failure."""
    steps: list[MatchStep] = []
    pos = 0
    for token in tokens:
        advanced = match_token(token, candidate, pos, steps)
        if advanced is None:
            break
        pos = advanced
    return MatchResult(tuple(steps), len(tokens))
