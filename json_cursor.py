"""
json_cursor.py - Forward-only character cursor with one-slot lookahead.

The parser never backtracks: every grammar function either consumes
characters from the shared cursor or peeks one ahead.
"""

from typing import Iterator, List, Optional


class Cursor:
    """
    One-slot pushback iterator over the characters of a string.

    ``base`` is added to ``offset`` so a cursor over an excised substring
    still reports positions within the full input.
    """
    def __init__(self, text: str, base: int = 0):
        self._iter: Iterator[str] = iter(text)
        self._buf: List[str] = []
        self._pos = 0
        self._base = base

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._buf:
            ch = self._buf.pop()
        else:
            ch = next(self._iter)
        self._pos += 1
        return ch

    @property
    def offset(self) -> int:
        return self._base + self._pos

    def peek(self) -> Optional[str]:
        if not self._buf:
            try:
                self._buf.append(next(self._iter))
            except StopIteration:
                return None
        return self._buf[-1]

    def at_end(self) -> bool:
        return self.peek() is None

    def skip_whitespace(self) -> Optional[str]:
        """
        Consume whitespace and return the first other character, also
        consumed. Returns None when the stream runs out first.
        """
        for ch in self:
            if not ch.isspace():
                return ch
        return None

    def peek_past_whitespace(self) -> Optional[str]:
        """Consume whitespace and peek at whatever follows it."""
        ch = self.peek()
        while ch is not None and ch.isspace():
            next(self)
            ch = self.peek()
        return ch
