"""Stream helpers: whole-stream copy, string output and bounded line input."""

from __future__ import annotations

import sys
from typing import IO, AnyStr

MAXLINE = 1000
_CHUNK = 8192


def filecopy(src: IO[AnyStr], dst: IO[AnyStr]) -> None:
    """Copy everything from *src* to *dst* until end of input."""
    while chunk := src.read(_CHUNK):
        dst.write(chunk)


def fputs(text: str, stream: IO[str]) -> None:
    """Write *text* to *stream*; errors from the stream propagate."""
    stream.write(text)


def getline(stream: IO[str] | None = None, limit: int = MAXLINE) -> str:
    """Read one line of at most ``limit - 1`` characters, keeping its newline.

    Reads standard input when *stream* is None. Returns an empty string at
    end of input.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    if stream is None:
        stream = sys.stdin
    return stream.readline(limit - 1)