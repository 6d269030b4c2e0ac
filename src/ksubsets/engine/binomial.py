"""Binomial coefficients by the falling-factorial product."""
from __future__ import annotations

from .words import ARBITRARY, Word


def binomial(n: int, k: int, word: Word = ARBITRARY) -> int:
    """Compute ``C(n, k)`` as ``prod((n + 1 - i) / i for i in 1..k)``.

    Each partial product ``C(n, i - 1) * (n + 1 - i)`` equals ``C(n, i) * i``,
    so dividing by ``i`` right after the multiply is exact. In a fixed-width
    word the multiply wraps silently once the partial product leaves the word
    and the result is then meaningless, matching native integer arithmetic.
    """
    if k < 0 or n < k:
        raise ValueError(f"expected 0 <= k <= n, got n={n}, k={k}")
    with word.arithmetic():
        result = word.wrap(1)
        for i in range(1, k + 1):
            result = word.div(result * word.wrap(n + 1 - i), i)
    return word.to_int(result)
