"""Tests for :mod:`ksubsets.engine.binomial`."""

import math

import pytest

from ksubsets.engine.binomial import binomial
from ksubsets.engine.words import INT32, INT64


@pytest.mark.parametrize(
    "n, k, expected",
    [(0, 0, 1), (5, 0, 1), (5, 2, 10), (5, 5, 1), (10, 3, 120), (62, 3, 37820), (63, 2, 1953)],
)
def test_binomial(n: int, k: int, expected: int) -> None:
    assert binomial(n, k) == expected
    assert binomial(n, k, INT32) == expected


def test_matches_math_comb() -> None:
    for n in range(21):
        for k in range(n + 1):
            assert binomial(n, k) == math.comb(n, k)
            assert binomial(n, k, INT32) == math.comb(n, k)


def test_exact_beyond_machine_words() -> None:
    assert binomial(100, 50) == math.comb(100, 50)


def test_fixed_width_overflows_silently() -> None:
    # C(40, 20) does not fit in 32 bits, so the wrapped result cannot equal it
    assert binomial(40, 20, INT32) != math.comb(40, 20)
    assert -(2**31) <= binomial(40, 20, INT32) < 2**31
    assert binomial(40, 20, INT64) == math.comb(40, 20)


def test_rejects_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        binomial(3, 4)
    with pytest.raises(ValueError):
        binomial(3, -1)
