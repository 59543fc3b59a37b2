"""Token model for compiled patterns."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Plain text that must appear verbatim."""

    text: str

    def describe(self) -> str:
        return f"literal {self.text!r}"


@dataclass(frozen=True)
class Alternation:
    """One of several options, written ``(one|two|three)``."""

    options: tuple[str, ...]

    def __post_init__(self) -> None:
        # accept any sequence but keep the stored value immutable
        object.__setattr__(self, "options", tuple(self.options))

    def describe(self) -> str:
        return "one of (" + "|".join(self.options) + ")"


@dataclass(frozen=True)
class Wildcard:
    """Any single character, written ``.``."""

    def describe(self) -> str:
        return "any character"


Token = Union[Literal, Alternation, Wildcard]


def token_kind(token: Token) -> str:
    if isinstance(token, Literal):
        return "literal"
    if isinstance(token, Alternation):
        return "alternation"
    return "wildcard"


def token_to_json(token: Token) -> dict[str, object]:
    payload: dict[str, object] = {"kind": token_kind(token)}
    if isinstance(token, Literal):
        payload["text"] = token.text
    elif isinstance(token, Alternation):
        payload["options"] = list(token.options)
    return payload
