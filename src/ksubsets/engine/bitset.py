"""Integer bitset utilities."""
from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def make_bitset(indexes: Iterable[int]) -> int:
    value = 0
    for idx in indexes:
        value |= 1 << idx
    return value


# Optimize bit counting based on Python version (cached at module load time)
if sys.version_info >= (3, 10):
    def count_bits(value: int) -> int:
        """Count the number of set bits using native int.bit_count() (Python 3.10+)."""
        return value.bit_count()
else:
    def count_bits(value: int) -> int:
        """Count the number of set bits using bin().count('1') (Python 3.9)."""
        return bin(value).count('1')


def iter_indexes(value: int) -> Iterable[int]:
    index = 0
    while value:
        if value & 1:
            yield index
        value >>= 1
        index += 1


def lowest_bit(value: int) -> int:
    """Isolate the lowest set bit (zero when no bit is set)."""
    return value & -value


def low_mask(width: int) -> int:
    """Mask with the ``width`` lowest bits set, i.e. ``2**width - 1``."""
    return (1 << width) - 1


def format_bits(value: int, width: int) -> str:
    """Render ``value`` as a binary string, most significant position first."""
    return format(value, f"0{width}b") if width else ""


def select(value: int, items: Sequence[T]) -> list[T]:
    """Return the items whose positions are set in ``value``."""
    if value >> len(items):
        raise ValueError(f"bitset {value:#x} has positions beyond {len(items)} items")
    return [items[idx] for idx in iter_indexes(value)]
