"""Cross-check the k-subset enumerator against the binomial oracle."""
from __future__ import annotations

from collections.abc import Iterable

from ..logging import get_logger
from .binomial import binomial
from .gosper import count_k_subsets
from .models import (
    DEFAULT_BOUNDARIES,
    BoundaryResult,
    SweepRecord,
    SweepReport,
    VerificationError,
    VerifyOptions,
)
from .words import INT32, INT64, Word, resolve_word

logger = get_logger(__name__)


def sweep(
    max_n: int = 20,
    word: Word | str = INT64,
    oracle_word: Word | str = INT32,
    *,
    check: bool = True,
) -> SweepReport:
    """Count every ``(n, k)`` with ``0 <= k <= n <= max_n`` both ways.

    Invariant violations raised while enumerating are not caught.
    """
    if max_n < 0:
        raise ValueError(f"max_n must be non-negative, got {max_n}")
    word = resolve_word(word)
    oracle_word = resolve_word(oracle_word)
    report = SweepReport(max_n=max_n, word=word.name, oracle_word=oracle_word.name)
    for n in range(max_n + 1):
        for k in range(n + 1):
            report.records.append(
                SweepRecord(
                    n=n,
                    k=k,
                    expected=binomial(n, k, oracle_word),
                    actual=count_k_subsets(n, k, word, check=check),
                )
            )
        logger.debug("n=%d: checked %d subset sizes", n, n + 1)
    logger.info(
        "checked %d (n, k) pairs up to n=%d, %d mismatches",
        len(report.records),
        max_n,
        len(report.failures),
    )
    return report


def verify(
    max_n: int = 20,
    word: Word | str = INT64,
    oracle_word: Word | str = INT32,
    *,
    check: bool = True,
) -> SweepReport:
    """Run :func:`sweep` and fail on the first count that disagrees."""
    report = sweep(max_n, word, oracle_word, check=check)
    if report.failures:
        record = report.failures[0]
        raise VerificationError(
            f"C({record.n},{record.k}) = {record.expected} "
            f"but enumeration produced {record.actual}"
        )
    return report


def boundary_demonstrations(
    word: Word | str = INT64,
    oracle_word: Word | str = INT32,
    boundaries: Iterable[tuple[int, int, bool]] = DEFAULT_BOUNDARIES,
) -> list[BoundaryResult]:
    """Compare oracle and enumerator at the edge of the word width.

    The width precondition is relaxed here so the overflow can be observed.
    """
    word = resolve_word(word)
    oracle_word = resolve_word(oracle_word)
    results: list[BoundaryResult] = []
    for n, k, expect_match in boundaries:
        result = BoundaryResult(
            n=n,
            k=k,
            expected=binomial(n, k, oracle_word),
            actual=count_k_subsets(n, k, word, strict=False),
            expect_match=expect_match,
        )
        if not result.as_expected:
            logger.warning(
                "boundary (%d,%d) in %s: expected %s, got %s",
                n,
                k,
                word.name,
                "a match" if expect_match else "a mismatch",
                result.describe(),
            )
        results.append(result)
    return results


def run_self_test(options: VerifyOptions | None = None) -> tuple[SweepReport, list[BoundaryResult]]:
    options = options or VerifyOptions()
    report = verify(options.max_n, options.word, options.oracle_word, check=options.check)
    results = boundary_demonstrations(options.word, options.oracle_word, options.boundaries)
    return report, results
