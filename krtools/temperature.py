"""Fahrenheit to Celsius conversion tables."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

LOWER = 0
UPPER = 300
STEP = 20

_STYLES = {
    "int": "{0:d}\t{1:d}",
    "wide": "{0:3d}\t{1:65d}",
    "float": "{0:3.0f} {1:6.1f}",
    "const": "{0:3d} {1:6.1f}",
}


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def celsius_int(fahr: int) -> int:
    """Convert with integer arithmetic, truncating toward zero."""
    return _trunc_div(5 * (fahr - 32), 9)


def celsius(fahr: float) -> float:
    """Convert with floating-point arithmetic."""
    return (5.0 / 9.0) * (fahr - 32.0)


def _fahr_range(lower: int, upper: int, step: int) -> range:
    if step <= 0:
        raise ValueError("step must be positive")
    return range(lower, upper + 1, step)


def integer_table(lower: int = LOWER, upper: int = UPPER, step: int = STEP) -> list[tuple[int, int]]:
    """Return (fahr, celsius) pairs using integer conversion."""
    return [(f, celsius_int(f)) for f in _fahr_range(lower, upper, step)]


def float_table(lower: int = LOWER, upper: int = UPPER, step: int = STEP) -> list[tuple[int, float]]:
    """Return (fahr, celsius) pairs using floating-point conversion."""
    return [(f, celsius(f)) for f in _fahr_range(lower, upper, step)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a Fahrenheit-Celsius table in one of several layouts."""
    parser = argparse.ArgumentParser(prog="krtemp", description="Print a Fahrenheit-Celsius table.")
    parser.add_argument("--style", choices=sorted(_STYLES), default="int")
    parser.add_argument("--lower", type=int, default=LOWER)
    parser.add_argument("--upper", type=int, default=UPPER)
    parser.add_argument("--step", type=int, default=STEP)
    args = parser.parse_args(argv)

    if args.step <= 0:
        parser.error("step must be positive")
    if args.style in ("int", "wide"):
        rows = integer_table(args.lower, args.upper, args.step)
        fmt = _STYLES[args.style]
        for f, c in rows:
            print(fmt.format(f, c))
    elif args.style == "float":
        for f, c in float_table(args.lower, args.upper, args.step):
            print(_STYLES["float"].format(float(f), c))
    else:
        for f, c in float_table(args.lower, args.upper, args.step):
            print(_STYLES["const"].format(f, c))
    return 0


if __name__ == "__main__":
    sys.exit(main())