"""Data models shared across the ksubsets engine."""
from __future__ import annotations

from dataclasses import dataclass, field


class InvariantViolation(AssertionError):
    """An enumeration step broke popcount, ordering or the successor round trip."""


class VerificationError(AssertionError):
    """The enumeration count disagreed with the binomial coefficient."""


@dataclass(frozen=True)
class SweepRecord:
    n: int
    k: int
    expected: int
    actual: int

    @property
    def matches(self) -> bool:
        return self.expected == self.actual

    def to_json(self) -> dict[str, object]:
        return {
            "n": self.n,
            "k": self.k,
            "expected": self.expected,
            "actual": self.actual,
            "matches": self.matches,
        }


@dataclass
class SweepReport:
    max_n: int
    word: str
    oracle_word: str
    records: list[SweepRecord] = field(default_factory=list)

    @property
    def failures(self) -> list[SweepRecord]:
        return [record for record in self.records if not record.matches]

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_json(self) -> dict[str, object]:
        return {
            "max_n": self.max_n,
            "word": self.word,
            "oracle_word": self.oracle_word,
            "checked": len(self.records),
            "ok": self.ok,
            "failures": [record.to_json() for record in self.failures],
        }


@dataclass(frozen=True)
class BoundaryResult:
    """Outcome of one word-width boundary demonstration.

    ``expect_match`` records whether the oracle and the enumerator are meant to
    agree at this ``(n, k)``; a mismatch at the overflow boundary is the
    demonstrated behaviour, not a failure.
    """
    n: int
    k: int
    expected: int
    actual: int
    expect_match: bool

    @property
    def matches(self) -> bool:
        return self.expected == self.actual

    @property
    def as_expected(self) -> bool:
        return self.matches == self.expect_match

    def describe(self) -> str:
        relation = "=" if self.matches else "!="
        return f"({self.n},{self.k}): {self.expected} {relation} {self.actual}"

    def to_json(self) -> dict[str, object]:
        return {
            "n": self.n,
            "k": self.k,
            "expected": self.expected,
            "actual": self.actual,
            "matches": self.matches,
            "expect_match": self.expect_match,
        }


DEFAULT_BOUNDARIES: tuple[tuple[int, int, bool], ...] = ((62, 3, True), (63, 2, False))


@dataclass(frozen=True)
class VerifyOptions:
    """Settings for the self-test.

    word: arithmetic the enumerator runs in ("int32" | "int64" | "arbitrary")
    oracle_word: arithmetic the binomial oracle runs in
    check: assert popcount, ordering and round trip at every step
    boundaries: (n, k, expect_match) triples run with the width precondition relaxed
    """
    max_n: int = 20
    word: str = "int64"
    oracle_word: str = "int32"
    check: bool = True
    boundaries: tuple[tuple[int, int, bool], ...] = DEFAULT_BOUNDARIES
