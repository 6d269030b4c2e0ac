"""Command line interface for the ksubsets enumerator."""
from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import __version__, io
from .engine import bitset
from .engine.binomial import binomial
from .engine.gosper import count_k_subsets, iter_k_subsets, iter_k_subsets_reversed, subset_items
from .engine.models import VerifyOptions
from .engine.verify import run_self_test
from .engine.words import WORDS, resolve_word
from .logging import enable_debug_logging


def _non_negative(value: str) -> int:
    """Parse a count argument, rejecting negative values."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ksubsets",
        description="Enumerate k-subsets with Gosper's Hack and verify them against C(n, k)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"ksubsets {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command")
    word_names = sorted(WORDS)

    verify = sub.add_parser("verify", help="run the self-test (default command)")
    verify.add_argument("--max-n", type=_non_negative, default=VerifyOptions.max_n)
    verify.add_argument("--word", choices=word_names, default=VerifyOptions.word)
    verify.add_argument("--oracle-word", choices=word_names, default=VerifyOptions.oracle_word)
    verify.add_argument("--no-check", dest="check", action="store_false", default=True)
    verify.add_argument("--format", choices=["text", "json"], default="text")

    count = sub.add_parser("count", help="count the k-subsets of n items by enumeration")
    count.add_argument("n", type=_non_negative)
    count.add_argument("k", type=_non_negative)
    count.add_argument("--word", choices=word_names, default="int64")
    count.add_argument(
        "--permissive",
        action="store_true",
        default=False,
        help="allow n beyond the word's exact range and report the overflowed count",
    )
    count.add_argument("--no-check", dest="check", action="store_false", default=True)

    binom = sub.add_parser("binomial", help="compute C(n, k)")
    binom.add_argument("n", type=_non_negative)
    binom.add_argument("k", type=_non_negative)
    binom.add_argument("--word", choices=word_names, default="arbitrary")

    listing = sub.add_parser("list", help="list the k-subsets of n items")
    listing.add_argument("n", type=_non_negative)
    listing.add_argument("k", type=_non_negative)
    listing.add_argument("--word", choices=word_names, default="int64")
    listing.add_argument("--reverse", action="store_true", default=False)
    listing.add_argument("--binary", action="store_true", default=False, help="print masks in binary")
    listing.add_argument("--items", help="comma separated names for the n positions")
    listing.add_argument("--format", choices=["text", "json"], default="text")
    listing.add_argument("--out", default="-")
    return parser


def _command_verify(args: argparse.Namespace) -> None:
    options = VerifyOptions(
        max_n=args.max_n,
        word=args.word,
        oracle_word=args.oracle_word,
        check=args.check,
    )
    report, results = run_self_test(options)
    if args.format == "json":
        io.write_json(
            {"sweep": report.to_json(), "boundaries": [result.to_json() for result in results]},
            "-",
        )
        return
    lines = [result.describe() for result in results]
    lines.append("Done")
    io.write_lines(lines, "-")


def _command_count(args: argparse.Namespace) -> None:
    total = count_k_subsets(
        args.n, args.k, resolve_word(args.word), strict=not args.permissive, check=args.check
    )
    io.write_text(f"{total}\n", "-")


def _command_binomial(args: argparse.Namespace) -> None:
    io.write_text(f"{binomial(args.n, args.k, resolve_word(args.word))}\n", "-")


def _command_list(args: argparse.Namespace) -> None:
    items = None
    if args.items is not None:
        items = [name.strip() for name in args.items.split(",")]
        if len(items) != args.n:
            raise ValueError(f"--items names {len(items)} positions, expected {args.n}")
    walk = iter_k_subsets_reversed if args.reverse else iter_k_subsets
    masks = walk(args.n, args.k, resolve_word(args.word))
    if args.format == "json":
        if items is None:
            payload: list[object] = list(masks)
        else:
            payload = [{"mask": mask, "items": subset_items(mask, items)} for mask in masks]
        io.write_json(payload, args.out)
        return
    lines = []
    for mask in masks:
        text = bitset.format_bits(mask, args.n) if args.binary else str(mask)
        if items is not None:
            text = f"{text}\t{' '.join(subset_items(mask, items))}"
        lines.append(text)
    io.write_lines(lines, args.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args([*argv, "verify"])
    if args.verbose:
        enable_debug_logging()
    command = args.command
    try:
        if command == "verify":
            _command_verify(args)
        elif command == "count":
            _command_count(args)
        elif command == "binomial":
            _command_binomial(args)
        elif command == "list":
            _command_list(args)
        else:
            parser.error(f"unknown command {command}")
            return 1
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
