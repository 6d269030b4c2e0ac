"""Tests for :mod:`ksubsets.engine.words`."""

import numpy as np
import pytest

from ksubsets.engine.words import ARBITRARY, INT32, INT64, WordOverflowError, resolve_word


def test_word_widths() -> None:
    assert INT64.bits == 64
    assert INT32.bits == 32
    assert ARBITRARY.bits is None
    assert INT64.max_subset_width == 62
    assert INT32.max_subset_width == 30
    assert ARBITRARY.max_subset_width is None
    assert INT64.fixed and not ARBITRARY.fixed


def test_wrap_behaves_like_a_register() -> None:
    assert INT64.wrap(2**63) == -(2**63)
    assert INT64.wrap(2**64 + 5) == 5
    assert INT32.wrap(2**31 - 1) == 2**31 - 1
    assert INT32.wrap(2**31) == -(2**31)
    assert isinstance(INT64.wrap(3), np.int64)
    assert ARBITRARY.wrap(2**80) == 2**80


def test_shift_into_sign_bit() -> None:
    with INT64.arithmetic():
        assert INT64.shl(1, 62) == 2**62
        assert INT64.shl(1, 63) == -(2**63)
    assert ARBITRARY.shl(1, 63) == 2**63


def test_division_truncates_toward_zero() -> None:
    assert INT64.div(7, 2) == 3
    assert INT64.div(-7, 2) == -3
    assert INT64.div(7, -2) == -3
    assert ARBITRARY.div(-7, -2) == 3
    assert INT64.div(-(2**63), -1) == -(2**63)


def test_wraparound_is_silent_inside_arithmetic() -> None:
    top = INT64.wrap(2**63 - 1)
    with INT64.arithmetic():
        assert top + INT64.wrap(1) == -(2**63)
        assert -INT64.wrap(-(2**63)) == -(2**63)


def test_pattern_is_unsigned() -> None:
    assert INT64.pattern(INT64.wrap(-1)) == 2**64 - 1
    assert INT32.pattern(INT32.wrap(-2)) == 2**32 - 2
    assert ARBITRARY.pattern(12) == 12


def test_resolve_word() -> None:
    assert resolve_word("int64") is INT64
    assert resolve_word("INT32") is INT32
    assert resolve_word(ARBITRARY) is ARBITRARY
    with pytest.raises(ValueError):
        resolve_word("int128")


def test_overflow_error_is_value_error() -> None:
    assert issubclass(WordOverflowError, ValueError)


def test_negation_is_complement_plus_one() -> None:
    assert ARBITRARY.neg(12) == -12
    assert ARBITRARY.neg(2**80) == -(2**80)
    assert ARBITRARY.neg(0b10100) & 0b10100 == 0b100
    with INT64.arithmetic():
        assert INT64.neg(INT64.wrap(5)) == -5
        assert INT64.neg(INT64.wrap(-(2**63))) == -(2**63)
        assert isinstance(INT64.neg(INT64.wrap(5)), np.int64)
