"""Character, line and word counting filters, and a plain stream copy."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import IO, AnyStr, Sequence

_WORD_SEPARATORS = frozenset(" \n\t")
_DIGITS = "0123456789"
_CHUNK = 8192


@dataclass(frozen=True)
class WordCount:
    """Line, word and character totals for a piece of text."""

    lines: int = 0
    words: int = 0
    chars: int = 0


@dataclass(frozen=True)
class CharClasses:
    """Per-digit counts plus white-space and other-character totals."""

    digits: tuple[int, ...] = field(default=(0,) * 10)
    white: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return sum(self.digits) + self.white + self.other


def greeting() -> str:
    """Return the classic greeting line."""
    return "hello, world\n"


def count_chars(text: str) -> int:
    """Return the number of characters in *text*."""
    return len(text)


def count_lines(text: str) -> int:
    """Return the number of newline characters in *text*."""
    return sum(1 for c in text if c == "\n")


def count_words(text: str) -> WordCount:
    """Count lines, words and characters; words are split on space, tab and newline."""
    lines = words = chars = 0
    in_word = False
    for c in text:
        chars += 1
        if c == "\n":
            lines += 1
        if c in _WORD_SEPARATORS:
            in_word = False
        elif not in_word:
            in_word = True
            words += 1
    return WordCount(lines=lines, words=words, chars=chars)


def classify_chars(text: str) -> CharClasses:
    """Count each decimal digit, white space (space, tab, newline) and everything else."""
    digits = [0] * 10
    white = other = 0
    for c in text:
        if c in _DIGITS:
            digits[ord(c) - ord("0")] += 1
        elif c in _WORD_SEPARATORS:
            white += 1
        else:
            other += 1
    return CharClasses(digits=tuple(digits), white=white, other=other)


def format_char_classes(classes: CharClasses) -> str:
    """Render a digit/white/other report line."""
    digits = "".join(f" {n}" for n in classes.digits)
    return f"digits ={digits}, white space = {classes.white}, other = {classes.other}\n"


def format_word_count(counts: WordCount) -> str:
    """Render line, word and character totals on one line."""
    return f"{counts.lines} {counts.words} {counts.chars}\n"


def copy_stream(src: IO[AnyStr], dst: IO[AnyStr]) -> None:
    """Copy everything from *src* to *dst* until end of input."""
    while chunk := src.read(_CHUNK):
        dst.write(chunk)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the counting filters over standard input."""
    parser = argparse.ArgumentParser(
        prog="krcount", description="Simple text counting filters."
    )
    parser.add_argument(
        "mode",
        choices=["hello", "copy", "chars", "lines", "words", "classes"],
        help="what to do with standard input",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    if args.mode == "hello":
        out.write(greeting())
    elif args.mode == "copy":
        copy_stream(sys.stdin, out)
    else:
        text = sys.stdin.read()
        if args.mode == "chars":
            out.write(f"{count_chars(text)}\n")
        elif args.mode == "lines":
            out.write(f"{count_lines(text)}\n")
        elif args.mode == "words":
            out.write(format_word_count(count_words(text)))
        else:
            out.write(format_char_classes(classify_chars(text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())