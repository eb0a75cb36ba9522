"""Reading words from a character stream with a small push-back buffer."""

from __future__ import annotations

from typing import IO, Iterator

MAXWORD = 100
BUFSIZE = 100

_SPACE = frozenset(" \t\n\v\f\r")


class PushbackOverflow(Exception):
    """Raised when more characters are pushed back than the buffer holds."""


def _isalpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _isalnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


class WordReader:
    """Split a text stream into words and single non-letter characters.

    A word starts with an ASCII letter and continues with ASCII letters and
    digits. Any other non-space character is returned on its own.
    """

    def __init__(self, stream: IO[str], bufsize: int = BUFSIZE) -> None:
        if bufsize < 1:
            raise ValueError("bufsize must be positive")
        self._stream = stream
        self._bufsize = bufsize
        self._pushed: list[str] = []

    def getch(self) -> str:
        """Return the next character, or an empty string at end of input."""
        if self._pushed:
            return self._pushed.pop()
        return self._stream.read(1)

    def ungetch(self, c: str) -> None:
        """Push *c* back so that the next getch returns it."""
        if not c:
            return
        if len(self._pushed) >= self._bufsize:
            raise PushbackOverflow("ungetch: too many characters")
        self._pushed.append(c)

    def getword(self, limit: int = MAXWORD) -> str | None:
        """Return the next word or character, or None at end of input.

        A word is cut after *limit* characters; the rest of it comes back
        as the next word.
        """
        if limit < 1:
            raise ValueError("limit must be positive")
        c = self.getch()
        while c and c in _SPACE:
            c = self.getch()
        if not c:
            return None
        if not _isalpha(c):
            return c
        chars = [c]
        for _ in range(limit - 1):
            c = self.getch()
            if not _isalnum(c):
                self.ungetch(c)
                break
            chars.append(c)
        return "".join(chars)

    def __iter__(self) -> Iterator[str]:
        while (word := self.getword()) is not None:
            yield word


def iter_words(stream: IO[str], limit: int = MAXWORD) -> Iterator[str]:
    """Yield successive words and single characters from *stream*."""
    reader = WordReader(stream)
    while (word := reader.getword(limit)) is not None:
        yield word