"""Enumerate k-subsets as integers with exactly k bits set (Gosper's Hack).

Subset ``{j, ...}`` of the ordered universe ``0..n-1`` is the integer with bit
``j`` set for every member. Walking from ``2**k - 1`` with :func:`successor`
visits every k-subset in increasing numeric order; :func:`predecessor` walks
the same sequence backwards.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from . import bitset
from .models import InvariantViolation
from .words import ARBITRARY, INT64, Value, Word, WordOverflowError

T = TypeVar("T")


def _next(x: Value, word: Word) -> Value:
    u = x & word.neg(x)
    v = x + u
    return v + (word.div(v ^ x, u) >> 2)


def _prev(y: Value, word: Word) -> Value:
    t = y + 1
    u = t ^ y
    v = t & y
    return v - word.div(v & word.neg(v), u + 1)


def successor(x: int, word: Word = ARBITRARY) -> int:
    """Return the smallest integer above ``x`` with the same number of set bits.

    ``u`` isolates the lowest set bit, adding it carries the lowest run of ones
    into the next zero, and the remaining ones of that run are shifted back to
    the bottom. In a fixed-width word the result wraps like machine arithmetic.
    """
    if x <= 0:
        raise ValueError(f"successor needs a positive value, got {x}")
    with word.arithmetic():
        return word.to_int(_next(word.wrap(x), word))


def predecessor(y: int, word: Word = ARBITRARY) -> int:
    """Return the largest integer below ``y`` with the same number of set bits."""
    if y <= 0:
        raise ValueError(f"predecessor needs a positive value, got {y}")
    with word.arithmetic():
        return word.to_int(_prev(word.wrap(y), word))


def first_subset(k: int) -> int:
    return bitset.low_mask(k)


def last_subset(n: int, k: int) -> int:
    return bitset.low_mask(k) << (n - k)


def check_range(n: int, k: int, word: Word, strict: bool = True) -> None:
    if k < 0 or n < k:
        raise ValueError(f"expected 0 <= k <= n, got n={n}, k={k}")
    limit = word.max_subset_width
    if strict and limit is not None and n > limit:
        raise WordOverflowError(
            f"n={n} exceeds {limit}, the widest subset a {word.bits}-bit word enumerates exactly"
        )


def _check_popcount(x: Value, k: int, word: Word) -> None:
    count = bitset.count_bits(word.pattern(x))
    if count != k:
        raise InvariantViolation(f"{word.to_int(x):#x} has {count} bits set, expected {k}")


def iter_k_subsets(
    n: int,
    k: int,
    word: Word = INT64,
    *,
    strict: bool = True,
    check: bool = True,
) -> Iterator[int]:
    """Yield every integer below ``2**n`` with exactly ``k`` bits set, ascending.

    ``k == 0`` yields the empty set (``0``) once. Otherwise the first value is
    always yielded and stepping stops once the successor reaches ``2**n``,
    with that bound itself computed in ``word``. With ``strict`` disabled a
    fixed-width word may overflow and the sequence is whatever the wrapped
    arithmetic produces. With ``check`` enabled each step verifies the
    popcount, that the successor is larger, and that stepping back recovers
    the current value.
    """
    check_range(n, k, word, strict)
    if k == 0:
        yield 0
        return
    with word.arithmetic():
        limit = word.shl(1, n)
        x = word.wrap(first_subset(k))
    while True:
        if check:
            _check_popcount(x, k, word)
        yield word.to_int(x)
        with word.arithmetic():
            y = _next(x, word)
            if check:
                if not y > x:
                    raise InvariantViolation(
                        f"successor of {word.to_int(x):#x} is {word.to_int(y):#x}, not larger"
                    )
                back = _prev(y, word)
                if back != x:
                    raise InvariantViolation(
                        f"predecessor of {word.to_int(y):#x} is {word.to_int(back):#x}, "
                        f"expected {word.to_int(x):#x}"
                    )
        x = y
        if not x < limit:
            return


def iter_k_subsets_reversed(
    n: int,
    k: int,
    word: Word = INT64,
    *,
    check: bool = True,
) -> Iterator[int]:
    """Yield the same values as :func:`iter_k_subsets`, largest first.

    The width precondition always applies: an overflowed forward walk has no
    meaningful last value to start from.
    """
    check_range(n, k, word)
    if k == 0:
        yield 0
        return
    with word.arithmetic():
        first = word.wrap(first_subset(k))
        x = word.wrap(last_subset(n, k))
    while True:
        if check:
            _check_popcount(x, k, word)
        yield word.to_int(x)
        if x == first:
            return
        with word.arithmetic():
            y = _prev(x, word)
        if check and not y < x:
            raise InvariantViolation(
                f"predecessor of {word.to_int(x):#x} is {word.to_int(y):#x}, not smaller"
            )
        x = y


def count_k_subsets(
    n: int,
    k: int,
    word: Word = INT64,
    *,
    strict: bool = True,
    check: bool = True,
) -> int:
    return sum(1 for _ in iter_k_subsets(n, k, word, strict=strict, check=check))


def subset_items(mask: int, items: Sequence[T]) -> list[T]:
    """Materialize one subset: the items at the positions set in ``mask``."""
    return bitset.select(mask, items)
