"""altmatch: literal, alternation and wildcard pattern matching."""

from collections.abc import Sequence

from .engine.compiler import MalformedPattern, compile_pattern, parse_tokens, try_compile
from .engine.models import MatchMode, MatchOptions, MatchResult, MatchStep
from .engine.pattern import Pattern
from .engine.tokens import Alternation, Literal, Token, Wildcard

compile = compile_pattern


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`altmatch.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "Alternation",
    "Literal",
    "MalformedPattern",
    "MatchMode",
    "MatchOptions",
    "MatchResult",
    "MatchStep",
    "Pattern",
    "Token",
    "Wildcard",
    "compile",
    "compile_pattern",
    "main",
    "parse_tokens",
    "try_compile",
]
