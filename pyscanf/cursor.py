from __future__ import annotations
from collections.abc import Callable

# C isspace() in the POSIX locale
WHITESPACE = b" \t\n\v\f\r"


def isspace(c: int) -> bool:
    return c in WHITESPACE


def isdigit(c: int) -> bool:
    return 0x30 <= c <= 0x39


class InputCursor:
    """
    A forward-only view over a byte string.

    Positions only ever move forward: there is no way to give consumed bytes back, so a reader that fails has to
    decide so before calling any of the consuming methods.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._pos = 0

    def __repr__(self):
        return f"<InputCursor {self._pos}/{len(self._data)}>"

    def is_eof(self) -> bool:
        return self._pos >= len(self._data)

    def tell(self) -> int:
        return self._pos

    def peek(self, offset: int = 0) -> int | None:
        """
        Return the byte `offset` bytes ahead of the current position without consuming it, or None past the end.
        """
        idx = self._pos + offset
        if idx < len(self._data):
            return self._data[idx]
        return None

    def next_is(self, expected) -> bool:
        """
        :param expected:    A byte value, a bytes prefix, or a predicate over a single byte value.
        """
        if isinstance(expected, (bytes, bytearray)):
            return self._data.startswith(expected, self._pos)
        c = self.peek()
        if c is None:
            return False
        if callable(expected):
            return expected(c)
        return c == expected

    def consume_specific(self, expected: int) -> bool:
        """
        Consume one byte if it equals `expected`.

        :return:    True if the byte was consumed, False if it did not match (nothing is consumed then).
        """
        if self.peek() != expected:
            return False
        self._pos += 1
        return True

    def consume_while(self, pred: Callable[[int], bool]) -> bytes:
        start = self._pos
        end = len(self._data)
        while self._pos < end and pred(self._data[self._pos]):
            self._pos += 1
        return self._data[start : self._pos]

    def consume_until(self, stop: int) -> bytes:
        return self.consume_while(lambda c: c != stop)

    def ignore(self, count: int = 1):
        self._pos = min(self._pos + count, len(self._data))

    def ignore_while(self, pred: Callable[[int], bool]):
        self.consume_while(pred)

    def remaining(self, max_width: int | None = None) -> bytes:
        """
        Get a copy of the unconsumed input, cut to at most `max_width` bytes. Consumes nothing.
        """
        if max_width is None:
            return self._data[self._pos :]
        return self._data[self._pos : self._pos + max_width]
