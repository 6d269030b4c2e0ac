"""Test configuration ensuring the local package is importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _fresh_logging():
    from ksubsets.logging import reset_logging

    reset_logging()
    yield
    reset_logging()
