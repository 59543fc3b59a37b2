"""Data models shared across the altmatch engine."""
from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from .tokens import Token, token_to_json


class MatchMode(str, enum.Enum):
    GREEDY = "greedy"
    EXHAUSTIVE = "exhaustive"


@dataclass(frozen=True)
class MatchOptions:
    """Options for matching a batch of candidates.

    mode: which matcher to run for every candidate
    require_complete: only count results that consumed every token as hits
    """

    mode: MatchMode = MatchMode.EXHAUSTIVE
    require_complete: bool = False

    def is_hit(self, result: MatchResult) -> bool:
        if self.require_complete:
            return result.is_complete
        return len(result) > 0


@dataclass(frozen=True)
class MatchStep:
    """One token together with the part of the candidate it consumed."""

    token: Token
    text: str

    def __iter__(self) -> Iterator[object]:
        yield self.token
        yield self.text


@dataclass(frozen=True)
class MatchResult:
    """Prefix match of a token sequence against a candidate.

    ``len(result)`` is the number of tokens matched; the result is complete when
    every token of the pattern was matched.
    """

    steps: tuple[MatchStep, ...]
    token_count: int

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[MatchStep]:
        return iter(self.steps)

    def __getitem__(self, index: int) -> MatchStep:
        return self.steps[index]

    @property
    def is_complete(self) -> bool:
        return len(self.steps) == self.token_count

    @property
    def matched_text(self) -> str:
        return "".join(step.text for step in self.steps)

    def to_json(self) -> dict[str, object]:
        return {
            "steps": [{"token": token_to_json(step.token), "text": step.text} for step in self.steps],
            "length": len(self.steps),
            "complete": self.is_complete,
            "matched_text": self.matched_text,
        }
