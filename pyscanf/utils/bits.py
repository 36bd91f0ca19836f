from __future__ import annotations


def int_range(bits: int, signed: bool) -> tuple[int, int]:
    """
    The smallest and the largest value of a C integer type that is `bits` wide.
    """
    if bits <= 0:
        raise ValueError("An integer type needs at least one bit")
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


def wrap_int(value: int, bits: int, signed: bool) -> int:
    """
    Convert `value` the way C converts an integer into a narrower or differently signed type: keep the low `bits`
    bits, then read them back as two's complement if the type is signed.

    For example: wrap_int(300, 8, True) -> 44, wrap_int(-1, 16, False) -> 0xffff
    """
    _, hi = int_range(bits, signed)
    value &= (1 << bits) - 1
    if value > hi:
        value -= 1 << bits
    return value


def saturate_int(value: int, bits: int, signed: bool) -> int:
    """
    Clamp `value` into the range of the integer type, as the strto*() family does on overflow.
    """
    lo, hi = int_range(bits, signed)
    return max(lo, min(hi, value))
