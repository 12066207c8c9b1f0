"""Splitting strings into tokens on a set of delimiter characters."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class StringTokenizer:
    """Yields the pieces of a string that lie between delimiter characters.

    Consecutive delimiters produce empty tokens, a leading delimiter
    produces an empty first token, and a trailing delimiter produces no
    empty last token. An empty source yields nothing.
    """

    def __init__(self, source: str = "", delims: Iterable[str] = "") -> None:
        self._delims: set[str] = set(delims)
        self.set_source(source)

    def set_source(self, source: str) -> None:
        """Start tokenizing ``source`` from its beginning."""
        self._source = source
        self._pos = 0
        self._tok_end = 0
        #: The delimiter that ended the last token, or "" at end of input.
        self.matched = ""

    def set_delims(self, delims: Iterable[str]) -> None:
        """Replace the delimiter set with the characters of ``delims``."""
        self._delims = set(delims)

    def add_delim(self, delim: str) -> None:
        """Add the characters of ``delim`` to the delimiter set."""
        self._delims.update(delim)

    def remove_delim(self, delim: str) -> None:
        """Remove the characters of ``delim`` from the delimiter set."""
        self._delims.difference_update(delim)

    def next(self) -> str | None:
        """Return the next token, or None when the input is exhausted."""
        source = self._source
        if self._tok_end == len(source):
            return None
        end = next(
            (i for i, ch in enumerate(source[self._pos:], self._pos) if ch in self._delims),
            len(source),
        )
        token = source[self._pos:end]
        if end < len(source):
            self.matched = source[end]
            end += 1
        else:
            self.matched = ""
        self._pos = end
        self._tok_end = end
        return token

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next()
        if token is None:
            raise StopIteration
        return token