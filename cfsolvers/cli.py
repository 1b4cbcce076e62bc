"""Command line entry point counting palindrome-forming word pairs."""

from __future__ import annotations

import argparse
import sys

from cfsolvers.strings import count_palindrome_pairs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfsolvers",
        description=(
            "Read a count n followed by n lowercase words and print how many "
            "pairs can be rearranged into a palindrome."
        ),
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="file to read; standard input when omitted",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the palindrome pair counter and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            parser.error(f"cannot read {args.input}: {exc}")
    tokens = text.split()
    if not tokens:
        parser.error("input is empty")
    try:
        n = int(tokens[0])
    except ValueError:
        parser.error(f"expected a word count, got {tokens[0]!r}")
    if n < 0:
        parser.error("the word count must not be negative")
    words = tokens[1:1 + n]
    if len(words) < n:
        parser.error(f"expected {n} words, got {len(words)}")
    try:
        total = count_palindrome_pairs(words)
    except ValueError as exc:
        parser.error(str(exc))
    print(total)
    return 0