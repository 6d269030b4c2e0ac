"""ksubsets: enumerate fixed-size subsets as bitmasks with Gosper's Hack."""

from collections.abc import Sequence

__version__ = "0.1.0"

from .engine.binomial import binomial
from .engine.gosper import (
    count_k_subsets,
    iter_k_subsets,
    iter_k_subsets_reversed,
    predecessor,
    subset_items,
    successor,
)
from .engine.models import InvariantViolation, VerificationError, VerifyOptions
from .engine.verify import boundary_demonstrations, run_self_test, sweep, verify
from .engine.words import ARBITRARY, INT32, INT64, Word, WordOverflowError


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`ksubsets.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "ARBITRARY",
    "INT32",
    "INT64",
    "InvariantViolation",
    "VerificationError",
    "VerifyOptions",
    "Word",
    "WordOverflowError",
    "binomial",
    "boundary_demonstrations",
    "count_k_subsets",
    "iter_k_subsets",
    "iter_k_subsets_reversed",
    "main",
    "predecessor",
    "run_self_test",
    "subset_items",
    "successor",
    "sweep",
    "verify",
]
