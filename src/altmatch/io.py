"""Candidate readers and output writers for the altmatch CLI.

Candidate files come in three formats, chosen by extension:

* ``.txt`` (or anything else): one candidate per line
* ``.jsonl`` / ``.json``: one JSON value per line, either a string or an
  object with a ``candidate`` key
* ``.csv``: a ``candidate`` column

Every reader keeps whitespace, so ``" "`` is a candidate like any other.
Only empty values are skipped.
"""
from __future__ import annotations

import csv
import json
import os
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

CANDIDATE_KEY = "candidate"


def _candidates_from_lines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        candidate = line.rstrip("\r\n")
        if candidate:
            yield candidate


def _candidates_from_jsonl(handle: TextIO) -> Iterator[str]:
    for lineno, line in enumerate(handle, start=1):
        if not line.strip():
            continue
        value = json.loads(line)
        if isinstance(value, dict):
            if CANDIDATE_KEY not in value:
                raise ValueError(f"line {lineno}: JSON object has no {CANDIDATE_KEY!r} key")
            value = value[CANDIDATE_KEY]
        candidate = str(value)
        if candidate:
            yield candidate


def _candidates_from_csv(handle: TextIO) -> Iterator[str]:
    reader = csv.DictReader(handle)
    if CANDIDATE_KEY not in (reader.fieldnames or []):
        raise ValueError(f"CSV has no {CANDIDATE_KEY!r} column")
    for row in reader:
        candidate = row[CANDIDATE_KEY]
        if candidate:
            yield candidate


_READERS: dict[str, Callable[[TextIO], Iterator[str]]] = {
    ".json": _candidates_from_jsonl,
    ".jsonl": _candidates_from_jsonl,
    ".csv": _candidates_from_csv,
}


def read_candidates(path: str) -> list[str]:
    """Read candidates from ``path``; ``-`` reads plain lines from stdin."""
    if path == "-":
        return list(_candidates_from_lines(sys.stdin))
    reader = _READERS.get(os.path.splitext(path)[1].lower(), _candidates_from_lines)
    with open(path, encoding="utf-8", newline="") as handle:
        return list(reader(handle))


@contextmanager
def _output(path: str) -> Iterator[TextIO]:
    if path == "-":
        yield sys.stdout
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as handle:
        yield handle


def write_json(obj: object, path: str) -> None:
    with _output(path) as handle:
        json.dump(obj, handle, indent=2, sort_keys=True, ensure_ascii=False)
        handle.write("\n")


def write_text(text: str, path: str) -> None:
    if not text.endswith("\n"):
        text += "\n"
    with _output(path) as handle:
        handle.write(text)
