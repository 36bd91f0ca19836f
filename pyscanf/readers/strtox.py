"""
Numeric text primitives with the semantics of C's strtol() family and strtod().

Every primitive takes the text to parse and returns a ``(value, consumed)`` pair. ``consumed`` is the number of bytes
that make up the number, leading whitespace and sign included; a ``consumed`` of 0 means no number was found, the
same condition under which the C functions set ``*endptr = nptr``.
"""

from __future__ import annotations
import math
import re

from ..cursor import isspace
from ..utils.bits import int_range, saturate_int


def _digit_value(c: int) -> int:
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x61 <= c <= 0x7A:
        return c - 0x61 + 10
    if 0x41 <= c <= 0x5A:
        return c - 0x41 + 10
    return 36


def _strtox(nptr: bytes, base: int) -> tuple[int, int, bool]:
    """
    Shared digit scanner.

    :return:    (magnitude, consumed, negative)
    """
    n = len(nptr)
    i = 0
    while i < n and isspace(nptr[i]):
        i += 1

    negative = False
    if i < n and nptr[i] in b"+-":
        negative = nptr[i] == 0x2D
        i += 1

    if (
        base in (0, 16)
        and nptr[i : i + 1] == b"0"
        and nptr[i + 1 : i + 2] in (b"x", b"X")
        and i + 2 < n
        and _digit_value(nptr[i + 2]) < 16
    ):
        i += 2
        base = 16
    elif base == 0:
        base = 8 if nptr[i : i + 1] == b"0" else 10

    start = i
    value = 0
    while i < n:
        d = _digit_value(nptr[i])
        if d >= base:
            break
        value = value * base + d
        i += 1

    if i == start:
        return 0, 0, False
    return value, i, negative


def strtol(nptr: bytes, base: int, bits: int) -> tuple[int, int]:
    """
    Parse a signed integer. Out-of-range values saturate to the range of a `bits`-bit signed integer.

    :param nptr:    The text to parse.
    :param base:    2 to 36, or 0 to infer the base from a 0x or 0 prefix.
    :param bits:    Width of the result type, 32 or 64 for long on the usual architectures.
    """
    magnitude, consumed, negative = _strtox(nptr, base)
    if not consumed:
        return 0, 0
    return saturate_int(-magnitude if negative else magnitude, bits, True), consumed


def strtoul(nptr: bytes, base: int, bits: int) -> tuple[int, int]:
    """
    Parse an unsigned integer. A leading minus sign negates the result modulo 2**bits, and magnitudes that do not fit
    saturate to 2**bits - 1, as strtoul() does.
    """
    magnitude, consumed, negative = _strtox(nptr, base)
    if not consumed:
        return 0, 0
    _, hi = int_range(bits, False)
    if magnitude > hi:
        return hi, consumed
    return (-magnitude & hi) if negative else magnitude, consumed


_SPACE = rb"[ \t\n\x0b\f\r]*"
_HEX_FLOAT_RE = re.compile(
    _SPACE + rb"(?P<num>[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
)
_DEC_FLOAT_RE = re.compile(_SPACE + rb"(?P<num>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_SPECIAL_FLOAT_RE = re.compile(
    _SPACE + rb"(?P<num>(?P<sign>[+-]?)(?:(?P<inf>inf(?:inity)?)|nan(?:\([0-9A-Za-z_]*\))?))", re.IGNORECASE
)


def strtod(nptr: bytes) -> tuple[float, int]:
    """
    Parse a double: decimal and hexadecimal floating constants, infinities and NaNs. Overflow yields a signed
    infinity.
    """
    m = _HEX_FLOAT_RE.match(nptr)
    if m is not None:
        text = m.group("num").decode("ascii")
        try:
            return float.fromhex(text), m.end()
        except OverflowError:
            return (-math.inf if text.startswith("-") else math.inf), m.end()

    m = _DEC_FLOAT_RE.match(nptr)
    if m is not None:
        return float(m.group("num").decode("ascii")), m.end()

    m = _SPECIAL_FLOAT_RE.match(nptr)
    if m is not None:
        value = math.inf if m.group("inf") else math.nan
        if m.group("sign") == b"-":
            value = -value
        return value, m.end()

    return 0.0, 0
