"""Compiled patterns."""
from __future__ import annotations

from collections.abc import Sequence

from .matcher import match_greedy
from .models import MatchMode, MatchResult
from .search import match_exhaustive
from .tokens import Token


class Pattern:
    """A compiled pattern and the longest match it has produced so far.

    Instances are created by :func:`altmatch.compile`. Matching is not
    synchronised; callers sharing a pattern across threads must lock around it.
    """

    def __init__(self, text: str, tokens: Sequence[Token]) -> None:
        self.text = text
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self._most_tokens_matched = 0

    @property
    def most_tokens_matched(self) -> int:
        """Length of the longest result returned by any match call on this pattern."""
        return self._most_tokens_matched

    def _record(self, result: MatchResult) -> MatchResult:
        if len(result) > self._most_tokens_matched:
            self._most_tokens_matched = len(result)
        return result

    def match_greedy(self, candidate: str) -> MatchResult:
        return self._record(match_greedy(self.tokens, candidate))

    def match_exhaustive(self, candidate: str) -> MatchResult:
        return self._record(match_exhaustive(self.tokens, candidate))

    def match(self, candidate: str, mode: MatchMode | str = MatchMode.EXHAUSTIVE) -> MatchResult:
        if MatchMode(mode) is MatchMode.GREEDY:
            return self.match_greedy(candidate)
        return self.match_exhaustive(candidate)

    def __len__(self) -> int:
        return len(self.tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.text == other.text and self.tokens == other.tokens

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Pattern({self.text!r}, tokens={len(self.tokens)}, most_tokens_matched={self._most_tokens_matched})"
