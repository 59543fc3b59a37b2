"""Command line interface for the altmatch pattern matcher."""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import io
from .engine.compiler import MalformedPattern, compile_pattern
from .engine.explain import explain_text, pattern_dict, result_dict, summarize_text, tokens_text
from .engine.models import MatchMode, MatchOptions
from .logging_config import LOG_LEVELS, get_logger, setup_logging

logger = get_logger(__name__)


def _parse_mode(value: str) -> MatchMode:
    """Parse a match mode string, ensuring valid values."""
    try:
        return MatchMode(value.lower())
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid match mode: {value}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="altmatch", description="Literal/alternation/wildcard pattern matcher")
    parser.add_argument("-V", "--version", action="version", version="altmatch 0.1")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="default: $ALTMATCH_LOG_LEVEL or WARNING",
    )
    parser.add_argument("--log-file")
    sub = parser.add_subparsers(dest="command", required=True)

    tokens = sub.add_parser("tokens", help="show the compiled tokens of a pattern")
    tokens.add_argument("--pattern", required=True)
    tokens.add_argument("--format", choices=["text", "json"], default="text")
    tokens.add_argument("--out", default="-")

    match = sub.add_parser("match", help="match candidates against a pattern")
    match.add_argument("--pattern", required=True)
    match.add_argument("candidates", nargs="*", help="candidate strings")
    match.add_argument("--candidates-file", dest="candidates_file", help="text, JSONL or CSV file of candidates")
    match.add_argument("--mode", type=_parse_mode, default=MatchMode.EXHAUSTIVE)
    match.add_argument(
        "--complete-only",
        dest="require_complete",
        action="store_true",
        default=False,
        help="only count matches that consume every token as hits",
    )
    match.add_argument("--format", choices=["text", "json"], default="text")
    match.add_argument("--out", default="-")
    return parser


def _command_tokens(args: argparse.Namespace) -> None:
    pattern = compile_pattern(args.pattern)
    if args.format == "json":
        io.write_json(pattern_dict(pattern), args.out)
    else:
        io.write_text(tokens_text(pattern) + "\n", args.out)


def _gather_candidates(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[str]:
    candidates = list(args.candidates)
    if args.candidates_file:
        try:
            candidates.extend(io.read_candidates(args.candidates_file))
        except (OSError, ValueError) as exc:
            parser.error(f"match: cannot read {args.candidates_file}: {exc}")
    if not candidates:
        parser.error("match: no candidates given; pass strings or --candidates-file")
    return candidates


def _command_match(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    pattern = compile_pattern(args.pattern)
    options = MatchOptions(mode=args.mode, require_complete=args.require_complete)
    candidates = _gather_candidates(args, parser)
    logger.info("matching %d candidates against %r in %s mode", len(candidates), pattern.text, options.mode.value)
    results = [pattern.match(candidate, options.mode) for candidate in candidates]

    if args.format == "json":
        payload = pattern_dict(pattern)
        payload["mode"] = options.mode.value
        payload["results"] = [
            dict(result_dict(candidate, result), hit=options.is_hit(result))
            for candidate, result in zip(candidates, results)
        ]
        payload["most_tokens_matched"] = pattern.most_tokens_matched
        io.write_json(payload, args.out)
        return
    blocks = [explain_text(candidate, result) for candidate, result in zip(candidates, results)]
    blocks.append(summarize_text(pattern, results, options))
    io.write_text("\n\n".join(blocks) + "\n", args.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    try:
        if args.command == "tokens":
            _command_tokens(args)
        elif args.command == "match":
            _command_match(args, parser)
        else:
            parser.error(f"unknown command {args.command}")
            return 1
    except MalformedPattern as exc:
        sys.stderr.write(f"altmatch: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
