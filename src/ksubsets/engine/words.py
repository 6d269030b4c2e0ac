"""Integer words the subset bit tricks are evaluated in.

The successor and predecessor steps depend on two's-complement negation, so
the same formulas are run in one of two explicit configurations:

* fixed-width signed words backed by numpy scalars (``INT32``, ``INT64``),
  where addition, multiplication and negation wrap around silently and a left
  shift can land in the sign bit, exactly like native machine words;
* ``ARBITRARY``, Python's unbounded ``int``, which behaves as an infinitely
  sign-extended two's-complement integer and never overflows.

Division always truncates toward zero in both configurations.
"""
from __future__ import annotations

import contextlib
import functools
from dataclasses import dataclass
from typing import ContextManager, Union

import numpy as np

Value = Union[int, np.signedinteger]


@functools.lru_cache(maxsize=None)
def _limits(dtype: type[np.signedinteger]) -> tuple[int, int]:
    info = np.iinfo(dtype)
    return info.bits, int(info.min)


class WordOverflowError(ValueError):
    """Raised when a subset width leaves less than two bits of headroom in a word."""


@dataclass(frozen=True)
class Word:
    name: str
    dtype: type[np.signedinteger] | None = None

    @property
    def fixed(self) -> bool:
        return self.dtype is not None

    @property
    def bits(self) -> int | None:
        if self.dtype is None:
            return None
        return _limits(self.dtype)[0]

    @property
    def max_subset_width(self) -> int | None:
        """Largest ``n`` whose enumeration stays exact (one bit for sign, one for carry)."""
        bits = self.bits
        return None if bits is None else bits - 2

    def arithmetic(self) -> ContextManager[object]:
        """Context in which wraparound is silent instead of a numpy warning."""
        if self.dtype is None:
            return contextlib.nullcontext()
        return np.errstate(over="ignore")

    def wrap(self, value: Value) -> Value:
        """Reduce ``value`` into this word's range the way a machine register would."""
        if self.dtype is None:
            return int(value)
        if isinstance(value, self.dtype):
            return value
        bits, low = _limits(self.dtype)
        return self.dtype((int(value) - low) % (1 << bits) + low)

    def neg(self, value: Value) -> Value:
        """Two's-complement negation, spelled out as ``~value + 1``."""
        return ~value + 1

    def div(self, a: Value, b: Value) -> Value:
        a, b = int(a), int(b)
        quotient = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            quotient = -quotient
        return self.wrap(quotient)

    def shl(self, value: Value, count: int) -> Value:
        return self.wrap(value) << self.wrap(count)

    def pattern(self, value: Value) -> int:
        """Return the non-negative bit pattern stored in the word."""
        if self.dtype is None:
            return int(value)
        return int(value) & ((1 << self.bits) - 1)

    def to_int(self, value: Value) -> int:
        return int(value)


INT32 = Word("int32", np.int32)
INT64 = Word("int64", np.int64)
ARBITRARY = Word("arbitrary")

WORDS: dict[str, Word] = {word.name: word for word in (INT32, INT64, ARBITRARY)}


def resolve_word(name: str | Word) -> Word:
    if isinstance(name, Word):
        return name
    try:
        return WORDS[name.lower()]
    except KeyError:
        raise ValueError(f"unknown word {name!r}; expected one of {sorted(WORDS)}") from None
