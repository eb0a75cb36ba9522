"""Counting C keywords with a binary search over a sorted key table."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left
from dataclasses import dataclass
from operator import attrgetter
from typing import IO, Sequence

from krtools.words import iter_words

KEYWORDS = (
    "auto", "break", "case", "char", "const", "continue", "default", "do",
    "double", "else", "enum", "extern", "float", "for", "goto", "if",
    "int", "long", "register", "return", "short", "signed", "sizeof", "static",
    "struct", "switch", "typedef", "union", "unsigned", "void", "volatile", "while",
)

_word_of = attrgetter("word")


@dataclass
class Key:
    """A keyword and the number of times it was seen."""

    word: str
    count: int = 0


def make_keytab() -> list[Key]:
    """Return a fresh, sorted table of C keywords with zero counts."""
    return [Key(word) for word in KEYWORDS]


def binsearch(word: str, table: Sequence[Key]) -> int | None:
    """Return the index of *word* in the sorted *table*, or None."""
    i = bisect_left(table, word, key=_word_of)
    if i < len(table) and table[i].word == word:
        return i
    return None


def binsearch_key(word: str, table: Sequence[Key]) -> Key | None:
    """Return the entry for *word* in the sorted *table*, or None."""
    i = binsearch(word, table)
    return None if i is None else table[i]


def count_keywords(stream: IO[str]) -> list[Key]:
    """Count keyword occurrences among the words of *stream*."""
    table = make_keytab()
    for word in iter_words(stream):
        if word[0].isascii() and word[0].isalpha():
            key = binsearch_key(word, table)
            if key is not None:
                key.count += 1
    return table


def format_counts(table: Sequence[Key]) -> str:
    """Render one line per keyword that was seen at least once."""
    return "".join(f"{k.count:4d} {k.word}\n" for k in table if k.count > 0)


def main(argv: Sequence[str] | None = None) -> int:
    """Count C keywords on standard input."""
    parser = argparse.ArgumentParser(prog="krkeywords", description="Count C keywords in the input.")
    parser.parse_args(argv)
    sys.stdout.write(format_counts(count_keywords(sys.stdin)))
    return 0


if __name__ == "__main__":
    sys.exit(main())