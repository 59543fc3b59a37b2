"""Test configuration ensuring the local altmatch package is importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def abc_pattern():
    from altmatch import compile_pattern

    return compile_pattern("abc(d|e|f).")


@pytest.fixture
def overlap_pattern():
    from altmatch import compile_pattern

    return compile_pattern("(aba|abac).(aba|abac).")
