"""Pattern compiler: turns pattern text into a token sequence."""
from __future__ import annotations

import re

from ..logging_config import get_logger
from .pattern import Pattern
from .tokens import Alternation, Literal, Token, Wildcard

logger = get_logger(__name__)

_SPECIAL_RE = re.compile(r"[.(]")
_OPTION_END_RE = re.compile(r"[|)]")


class MalformedPattern(ValueError):
    """Raised when a pattern contains an invalid alternation."""

    def __init__(self, pattern: str, position: int, reason: str) -> None:
        self.pattern = pattern
        self.position = position
        self.reason = reason
        super().__init__(f"{reason} at position {position} in pattern {pattern!r}")


def _parse_alternation(text: str, start: int) -> tuple[Alternation, int]:
    """Parse the options following the ``(`` at ``start - 1``.

    Returns the token and the index just past the closing ``)``.
    """
    options: list[str] = []
    found_pipe = False
    pos = start
    while True:
        end = _OPTION_END_RE.search(text, pos)
        if end is None:
            raise MalformedPattern(text, start - 1, "unterminated alternation")
        option = text[pos : end.start()]
        if not option:
            raise MalformedPattern(text, end.start(), "empty alternation option")
        options.append(option)
        pos = end.end()
        if end.group() == "|":
            found_pipe = True
            continue
        if not found_pipe:
            raise MalformedPattern(text, start - 1, "alternation needs at least two options")
        return Alternation(tuple(options)), pos


def parse_tokens(text: str) -> tuple[Token, ...]:
    """Split pattern text into literal, alternation and wildcard tokens.

    ``.`` matches any single character and ``(a|b|c)`` matches one of the listed
    options; everything else is literal text. There is no escape syntax.
    """
    tokens: list[Token] = []
    pos = 0
    while True:
        special = _SPECIAL_RE.search(text, pos)
        if special is None:
            break
        raw = text[pos : special.start()]
        if raw:
            tokens.append(Literal(raw))
        if special.group() == ".":
            tokens.append(Wildcard())
            pos = special.end()
        else:
            token, pos = _parse_alternation(text, special.end())
            tokens.append(token)

    tail = text[pos:]
    if tail or not tokens:
        tokens.append(Literal(tail))
    return tuple(tokens)


def compile_pattern(text: str) -> Pattern:
    """Compile ``text`` into a :class:`Pattern`."""
    tokens = parse_tokens(text)
    logger.debug("compiled %r into %d tokens", text, len(tokens))
    return Pattern(text, tokens)


def try_compile(text: str) -> Pattern | None:
    """Like :func:`compile_pattern` but return ``None`` for malformed input."""
    try:
        return compile_pattern(text)
    except MalformedPattern as exc:
        logger.debug("rejected pattern: %s", exc)
        return None
