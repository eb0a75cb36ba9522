"""Concatenate files to standard output."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Iterable, Sequence

from krtools.fileio import filecopy


class CatError(Exception):
    """Raised when an input file cannot be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"can't open {path}")
        self.path = path


def cat(paths: Iterable[str], out: BinaryIO) -> None:
    """Copy each file in *paths* to *out*, or standard input when there are none.

    Files are copied in order; the first one that cannot be opened stops
    the run with CatError, after the earlier files have been copied.
    """
    paths = list(paths)
    if not paths:
        filecopy(sys.stdin.buffer, out)
        return
    for path in paths:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise CatError(path) from exc
        with handle:
            filecopy(handle, out)


def main(argv: Sequence[str] | None = None) -> int:
    """Concatenate the named files, or standard input, to standard output."""
    parser = argparse.ArgumentParser(prog="krcat", description="Concatenate files.")
    parser.add_argument("files", nargs="*", help="files to copy (default: standard input)")
    args = parser.parse_args(argv)
    prog = parser.prog

    out = sys.stdout.buffer
    try:
        cat(args.files, out)
        out.flush()
    except CatError as exc:
        sys.stderr.write(f"{prog}: {exc}\n")
        return 1
    except OSError:
        sys.stderr.write(f"{prog}: error writing stdout\n")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())