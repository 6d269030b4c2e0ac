"""Tests for :mod:`ksubsets.engine.bitset`."""

import pytest

from ksubsets.engine import bitset


def test_bitset_operations() -> None:
    base = bitset.make_bitset([0, 2, 4])
    assert base == 0b10101
    assert bitset.count_bits(base) == 3
    assert list(bitset.iter_indexes(base)) == [0, 2, 4]
    assert bitset.lowest_bit(base) == 1
    assert bitset.lowest_bit(0b10100) == 0b100
    assert bitset.lowest_bit(0) == 0


def test_low_mask_and_format() -> None:
    assert bitset.low_mask(0) == 0
    assert bitset.low_mask(3) == 0b111
    assert bitset.format_bits(0b101, 5) == "00101"
    assert bitset.format_bits(0, 0) == ""


def test_select_items() -> None:
    items = ["a", "b", "c", "d"]
    assert bitset.select(0b1010, items) == ["b", "d"]
    assert bitset.select(0, items) == []
    with pytest.raises(ValueError):
        bitset.select(0b10000, items)
