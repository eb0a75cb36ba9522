"""A chained hash table of name/definition pairs."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

HASHSIZE = 101
_UINT_MASK = 0xFFFFFFFF


@dataclass
class Entry:
    """A name and its current definition."""

    name: str
    defn: str


def hash_name(name: str, size: int = HASHSIZE) -> int:
    """Return the bucket index of *name* in a table of *size* buckets."""
    if size < 1:
        raise ValueError("size must be positive")
    hashval = 0
    for b in name.encode("utf-8"):
        signed = b - 256 if b > 127 else b
        hashval = (signed + 31 * hashval) & _UINT_MASK
    return hashval % size


class SymbolTable:
    """Names mapped to definitions, hashed into chained buckets."""

    def __init__(self, size: int = HASHSIZE) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._buckets: list[list[Entry]] = [[] for _ in range(size)]

    def lookup(self, name: str) -> Entry | None:
        """Return the entry for *name*, or None if it is not installed."""
        for entry in self._buckets[hash_name(name, self._size)]:
            if entry.name == name:
                return entry
        return None

    def install(self, name: str, defn: str) -> Entry:
        """Install *name* with *defn*, replacing any earlier definition."""
        entry = self.lookup(name)
        if entry is None:
            entry = Entry(name, defn)
            self._buckets[hash_name(name, self._size)].insert(0, entry)
        else:
            entry.defn = defn
        return entry

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


def main(argv: Sequence[str] | None = None) -> int:
    """Install a few names, update one, and report lookups."""
    parser = argparse.ArgumentParser(prog="krsymtab", description="Symbol table demonstration.")
    parser.parse_args(argv)
    table = SymbolTable()
    table.install("foo", "first definition")
    table.install("bar", "second definition")
    table.install("foo", "updated definition")
    for name in ("foo", "bar", "baz"):
        entry = table.lookup(name)
        if entry is not None:
            print(f"{name} => {entry.defn}")
        else:
            print(f"{name} not found")
    return 0


if __name__ == "__main__":
    sys.exit(main())