"""Integer powers and a small table of them."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence


def power(base: int, n: int) -> int:
    """Raise *base* to the *n*-th power by repeated multiplication; 0 when n < 0."""
    if n < 0:
        return 0
    p = 1
    for _ in range(n):
        p *= base
    return p


def power2(base: int, n: int) -> int:
    """Raise *base* to the *n*-th power by counting *n* down; 0 when n < 0."""
    if n < 0:
        return 0
    p = 1
    while n > 0:
        p *= base
        n -= 1
    return p


def power_table(rows: int = 10) -> list[tuple[int, int, int]]:
    """Return rows of (i, 2**i, (-3)**i) for i in range(rows)."""
    return [(i, power(2, i), power(-3, i)) for i in range(rows)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the table of powers of 2 and -3."""
    parser = argparse.ArgumentParser(prog="krpower", description="Print powers of 2 and -3.")
    parser.add_argument("--rows", type=int, default=10, help="number of rows (default 10)")
    args = parser.parse_args(argv)
    for i, p2, p3 in power_table(args.rows):
        print(f"{i} {p2} {p3}")
    return 0


if __name__ == "__main__":
    sys.exit(main())