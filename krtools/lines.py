"""Bounded line reading and the longest-line filter."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Iterator, Sequence

MAXLINE = 1000


def read_line(stream: IO[str], limit: int = MAXLINE) -> str:
    """Read one line of at most ``limit - 1`` characters, keeping its newline.

    Returns an empty string at end of input. A line longer than the limit
    is returned in pieces by successive calls.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    chars: list[str] = []
    while len(chars) < limit - 1:
        c = stream.read(1)
        if not c:
            break
        chars.append(c)
        if c == "\n":
            break
    return "".join(chars)


def iter_lines(stream: IO[str], limit: int = MAXLINE) -> Iterator[str]:
    """Yield successive bounded lines until end of input."""
    while line := read_line(stream, limit):
        yield line


def longest_line(stream: IO[str], limit: int = MAXLINE) -> str:
    """Return the first longest line of *stream*, or an empty string if none."""
    longest = ""
    for line in iter_lines(stream, limit):
        if len(line) > len(longest):
            longest = line
    return longest


def main(argv: Sequence[str] | None = None) -> int:
    """Print the longest line of standard input."""
    parser = argparse.ArgumentParser(prog="krlongest", description="Print the longest input line.")
    parser.add_argument("--limit", type=int, default=MAXLINE, help="maximum line buffer size")
    args = parser.parse_args(argv)
    if args.limit < 2:
        parser.error("limit must be at least 2")
    longest = longest_line(sys.stdin, args.limit)
    if longest:
        sys.stdout.write(longest)
    return 0


if __name__ == "__main__":
    sys.exit(main())