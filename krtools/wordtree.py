"""Counting word frequencies in an unbalanced binary search tree."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import IO, Iterator, Sequence

from krtools.words import iter_words


@dataclass
class TreeNode:
    """A distinct word, its count and its two subtrees."""

    word: str
    count: int = 1
    left: TreeNode | None = None
    right: TreeNode | None = None


def addtree(node: TreeNode | None, word: str) -> TreeNode:
    """Add *word* to the tree rooted at *node* and return the root."""
    new = TreeNode(word)
    if node is None:
        return new
    current = node
    while True:
        if word == current.word:
            current.count += 1
            return node
        if word < current.word:
            if current.left is None:
                current.left = new
                return node
            current = current.left
        else:
            if current.right is None:
                current.right = new
                return node
            current = current.right


def walk(node: TreeNode | None) -> Iterator[TreeNode]:
    """Yield the nodes of the tree in word order."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current
        current = current.right


def tree_lines(node: TreeNode | None) -> Iterator[str]:
    """Yield one report line per word, in word order."""
    for n in walk(node):
        yield f"{n.count:4d} {n.word}"


def build_tree(stream: IO[str]) -> TreeNode | None:
    """Build a frequency tree of the words of *stream* that start with a letter."""
    root: TreeNode | None = None
    for word in iter_words(stream):
        if word[0].isascii() and word[0].isalpha():
            root = addtree(root, word)
    return root


def main(argv: Sequence[str] | None = None) -> int:
    """Print word frequencies of standard input in word order."""
    parser = argparse.ArgumentParser(prog="krwordfreq", description="Count word frequencies.")
    parser.parse_args(argv)
    for line in tree_lines(build_tree(sys.stdin)):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())