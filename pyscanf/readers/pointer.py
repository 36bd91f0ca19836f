from __future__ import annotations

from .numeric import NumericReader
from .strtox import strtoul


class PointerReader(NumericReader):
    """
    %p: a base 16 number, with or without a 0x prefix, stored as a pointer-sized value.
    """

    def _convert(self, nptr, arch):
        return strtoul(nptr, 16, 64)

    def read(self, cursor, spec, sink):
        # no length modifier applies to %p, and the input is left alone when one is given
        if not self.supported:
            return False
        return super().read(cursor, spec, sink)
