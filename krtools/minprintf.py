"""A minimal printf supporting %d, %f, %s and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def minformat(fmt: str, *args: Any) -> str:
    """Format *args* by *fmt*; unknown conversions are copied through as written."""
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for c in chars:
        if c != "%":
            out.append(c)
            continue
        spec = next(chars, "")
        if spec == "d":
            out.append("%d" % _next_arg(values))
        elif spec == "f":
            out.append("%f" % _next_arg(values))
        elif spec == "s":
            out.append(str(_next_arg(values)))
        elif spec == "%":
            out.append("%")
        else:
            out.append("%" + spec)
    return "".join(out)


def minprintf(fmt: str, *args: Any) -> None:
    """Format *args* by *fmt* and write the result to standard output."""
    sys.stdout.write(minformat(fmt, *args))