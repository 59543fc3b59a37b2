"""Exhaustive matcher.

Every way of resolving the pattern's alternations is explored depth first, and
the result that matches the most tokens wins. Complete matches beat partial
ones; among equally good results the first one found is kept.

The search runs on an explicit stack instead of recursion, so deep searches are
limited by memory rather than by the interpreter's recursion limit. Two kinds of
frame live on the stack:

* :class:`InputFrame` is pending work: match ``tokens[start:]`` against
  ``candidate[pos:]``. Frames spawned from an alternation carry the option that
  was chosen and the stack index of the :class:`OutputFrame` that waits for them.
* :class:`OutputFrame` holds the prefix an input frame resolved on its own, plus
  the best result reported so far by its children. Children sit above it on the
  stack, so it is popped only after all of them have reported back.

Options are pushed in declaration order and popped last in, first out, so the
last option of an alternation is explored first. This decides which of several
equally good results is returned.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

from ..logging_config import get_logger
from .matcher import iter_alternation_choices, match_token
from .models import MatchResult, MatchStep
from .tokens import Alternation, Token

logger = get_logger(__name__)


@dataclass
class InputFrame:
    start: int
    pos: int
    chosen: MatchStep | None = None
    parent: int | None = None


@dataclass
class OutputFrame:
    steps: list[MatchStep]
    complete: bool
    parent: int | None = None
    # best child result as step chunks, deepest chunk first
    best_chunks: list[list[MatchStep]] = field(default_factory=list)
    best_count: int = 0
    best_complete: bool = False


Frame = Union[InputFrame, OutputFrame]


def _process_input(frame: InputFrame, tokens: Sequence[Token], candidate: str, stack: list[Frame]) -> None:
    steps = [frame.chosen] if frame.chosen is not None else []
    pos = frame.pos
    choices = None
    walked_all = True
    for index in range(frame.start, len(tokens)):
        token = tokens[index]
        if isinstance(token, Alternation):
            choices = iter_alternation_choices(token, index, candidate, pos)
            walked_all = False
            break
        advanced = match_token(token, candidate, pos, steps)
        if advanced is None:
            walked_all = False
            break
        pos = advanced

    output_index = len(stack)
    stack.append(OutputFrame(steps, walked_all, frame.parent))
    if choices is None:
        return
    for index, token, option in choices:
        end = pos + len(option)
        stack.append(InputFrame(index + 1, end, MatchStep(token, candidate[pos:end]), output_index))


def _process_output(frame: OutputFrame, stack: list[Frame]) -> list[MatchStep] | None:
    """Fold the best child into ``frame`` and report it to the parent.

    Returns the final steps once the root frame is reached, otherwise ``None``.
    """
    # the popped frame is discarded, so its chunk list is reused in place
    chunks = frame.best_chunks
    chunks.append(frame.steps)
    count = len(frame.steps) + frame.best_count
    complete = frame.complete or frame.best_complete
    if frame.parent is None:
        return [step for chunk in reversed(chunks) for step in chunk]

    parent = stack[frame.parent]
    assert isinstance(parent, OutputFrame), "parent index must point at an output frame"
    if complete:
        better = not parent.best_complete or count > parent.best_count
    else:
        # a complete result is never displaced by a partial one
        better = not parent.best_complete and count > parent.best_count
    if better:
        parent.best_chunks = chunks
        parent.best_count = count
        parent.best_complete = complete
    return None


def match_exhaustive(tokens: Sequence[Token], candidate: str) -> MatchResult:
    """Return the longest match over all alternation choices."""
    stack: list[Frame] = [InputFrame(0, 0)]
    processed = 0
    peak = 1
    while stack:
        frame = stack.pop()
        processed += 1
        if isinstance(frame, InputFrame):
            _process_input(frame, tokens, candidate, stack)
            peak = max(peak, len(stack))
            continue
        steps = _process_output(frame, stack)
        if steps is not None:
            logger.debug(
                "exhaustive search over %d tokens: %d frames processed, peak stack depth %d",
                len(tokens),
                processed,
                peak,
            )
            return MatchResult(tuple(steps), len(tokens))
    raise RuntimeError("exhaustive search ended without reaching the root frame")
