"""Running totals of the numbers read from input."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterator, Sequence

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def running_sums(text: str) -> Iterator[float]:
    """Yield the running total after each number in *text*.

    Numbers are read one after another, skipping white space, and reading
    stops at the first thing that does not start a number.
    """
    total = 0.0
    pos = 0
    while match := _NUMBER.match(text, pos):
        total += float(match.group(1))
        pos = match.end()
        yield total


def main(argv: Sequence[str] | None = None) -> int:
    """Print a running total for each number on standard input."""
    parser = argparse.ArgumentParser(prog="krrunsum", description="Print running totals.")
    parser.parse_args(argv)
    for total in running_sums(sys.stdin.read()):
        print(f"\t{total:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())