from __future__ import annotations
import logging

from ..cursor import isspace
from ..format_parser import ConversionSpecifier, ScanSet
from ..scan_type import ScanTypeBottom, ScanTypeCharArray
from .reader import Reader

l = logging.getLogger(name=__name__)

# the bytes a %s conversion stops at
STRING_DELIMITERS = b" \t\n\f\r"

_STRING_SET = ScanSet(STRING_DELIMITERS, inverted=True)
_ANY_SET = ScanSet(b"", inverted=True)


class _BoundedMatcher:
    """
    Predicate for InputCursor.consume_while() that accepts members of a scan set, but never more than `max_count`.
    """

    __slots__ = ("count", "max_count", "scan_set")

    def __init__(self, max_count: int | None, scan_set: ScanSet):
        self.count = 0
        self.max_count = max_count
        self.scan_set = scan_set

    def __call__(self, c: int) -> bool:
        if self.max_count is not None and self.count >= self.max_count:
            return False
        self.count += 1
        return c in self.scan_set


class ScanSetReader(Reader):
    """
    %s, %[...] and %c: copy a run of bytes into a character buffer.

    Only %s skips leading whitespace. %c takes every byte and defaults to a width of 1; it is also the only one that
    does not NUL-terminate what it copies. Room in the destination buffer is the caller's business.
    """

    def __init__(self, conversion: ConversionSpecifier, supported: bool = True):
        super().__init__(ScanTypeCharArray() if supported else ScanTypeBottom())
        self.conversion = conversion

    def _width(self, spec) -> int | None:
        if self.conversion is ConversionSpecifier.CHARACTER and spec.width is None:
            return 1
        return spec.width

    def _scan_set(self, spec) -> ScanSet:
        if self.conversion is ConversionSpecifier.STRING:
            return _STRING_SET
        if self.conversion is ConversionSpecifier.USE_SCAN_LIST:
            return spec.scan_set
        return _ANY_SET

    def destination_type(self, spec, arch):
        if not self.supported:
            return self.dest_type
        width = self._width(spec)
        if self.conversion is ConversionSpecifier.CHARACTER:
            return ScanTypeCharArray(width)
        return ScanTypeCharArray(None if width is None else width + 1)

    def read(self, cursor, spec, sink):
        if not self.supported:
            l.debug("%s is not supported", spec)
            return False

        if self.conversion is ConversionSpecifier.STRING:
            cursor.ignore_while(isspace)

        data = cursor.consume_while(_BoundedMatcher(self._width(spec), self._scan_set(spec)))
        if not data:
            return False

        if not spec.suppress:
            terminate = self.conversion is not ConversionSpecifier.CHARACTER
            sink.store_bytes(self.destination_type(spec, sink.arch), data, terminate=terminate)
        return True
