from __future__ import annotations
import logging
from enum import Enum

from ..cursor import isspace
from .reader import Reader
from .strtox import strtol, strtoul, strtod

l = logging.getLogger(name=__name__)


class ReadKind(Enum):
    """
    Base policy of an integer conversion. The value is the base handed to strtol().
    """

    NORMAL = 10
    OCTAL = 8
    HEX = 16
    INFER = 0


class NumericReader(Reader):
    """
    Common flow of every conversion that goes through a numeric text primitive: skip whitespace, cut the remaining
    input to the field width, parse, and advance by exactly what the primitive consumed.
    """

    def _convert(self, nptr: bytes, arch) -> tuple[int | float, int]:
        raise NotImplementedError()

    def read(self, cursor, spec, sink):
        cursor.ignore_while(isspace)

        if not self.supported:
            l.debug("%s is not supported", spec)
            return False

        nptr = cursor.remaining(spec.width)
        if not nptr:
            return False

        value, consumed = self._convert(nptr, sink.arch)
        if consumed == 0:
            l.debug("%s does not match %r", spec, nptr[:16])
            return False

        cursor.ignore(consumed)
        if not spec.suppress:
            sink.store(self.destination_type(spec, sink.arch), value)
        return True


class IntegerReader(NumericReader):
    """
    %d, %i, %o, %u, %x and their length-modified forms.
    """

    def __init__(self, dest_type, kind: ReadKind, wide: bool = False):
        """
        :param dest_type:   Type stored into the output slot.
        :param kind:        Base policy.
        :param wide:        Parse with the long long primitive instead of the long one.
        """
        super().__init__(dest_type)
        self.kind = kind
        self.wide = wide

    def _convert(self, nptr, arch):
        bits = 64 if self.wide else arch.sizeof["long"]
        if self.dest_type.signed:
            return strtol(nptr, self.kind.value, bits)
        return strtoul(nptr, self.kind.value, bits)


class FloatReader(NumericReader):
    """
    %a, %e, %f, %g into a float or, with the l modifier, a double.
    """

    def _convert(self, nptr, arch):
        return strtod(nptr)
