"""
Readers for every conversion, and the table that picks one per (conversion, length modifier) pair.
"""

from __future__ import annotations

from ..format_parser import ConversionSpecifier, LengthModifier
from ..scan_type import (
    ScanTypeBottom,
    ScanTypeChar,
    ScanTypeDouble,
    ScanTypeFloat,
    ScanTypeInt,
    ScanTypeIntMax,
    ScanTypeLength,
    ScanTypeLong,
    ScanTypeLongDouble,
    ScanTypeLongLong,
    ScanTypePointer,
    ScanTypePtrDiff,
    ScanTypeShort,
)
from .reader import Reader
from .numeric import ReadKind, NumericReader, IntegerReader, FloatReader
from .scanset import ScanSetReader, STRING_DELIMITERS
from .pointer import PointerReader
from .byte_count import ByteCountReporter


# length modifier -> (destination type class, parse with the long long primitive)
_INTEGER_WIDTHS = {
    LengthModifier.DEFAULT: (ScanTypeInt, False),
    LengthModifier.CHAR: (ScanTypeChar, False),
    LengthModifier.SHORT: (ScanTypeShort, False),
    LengthModifier.LONG: (ScanTypeLong, False),
    LengthModifier.LONG_LONG: (ScanTypeLongLong, True),
    LengthModifier.INT_MAX: (ScanTypeIntMax, False),
    LengthModifier.SIZE: (ScanTypeLength, False),
    LengthModifier.PTR_DIFF: (ScanTypePtrDiff, False),
    # %Ld is taken as a synonym of %lld
    LengthModifier.LONG_DOUBLE: (ScanTypeLongLong, True),
}

# conversion -> (signed, base policy)
_INTEGER_CONVERSIONS = {
    ConversionSpecifier.DECIMAL: (True, ReadKind.NORMAL),
    ConversionSpecifier.INTEGER: (True, ReadKind.INFER),
    ConversionSpecifier.OCTAL: (False, ReadKind.OCTAL),
    ConversionSpecifier.UNSIGNED: (False, ReadKind.NORMAL),
    ConversionSpecifier.HEX: (False, ReadKind.HEX),
}

_FLOAT_WIDTHS = {
    LengthModifier.DEFAULT: ScanTypeFloat,
    LengthModifier.LONG: ScanTypeDouble,
    LengthModifier.LONG_DOUBLE: ScanTypeLongDouble,
}

_MODIFIERS = [m for m in LengthModifier if m is not LengthModifier.NONE]


def _build_readers() -> dict[tuple[ConversionSpecifier, LengthModifier], Reader]:
    readers = {}

    for conversion, (signed, kind) in _INTEGER_CONVERSIONS.items():
        for modifier, (ty, wide) in _INTEGER_WIDTHS.items():
            readers[(conversion, modifier)] = IntegerReader(ty(signed=signed), kind, wide=wide)

    for modifier in _MODIFIERS:
        ty = _FLOAT_WIDTHS.get(modifier, ScanTypeBottom)
        readers[(ConversionSpecifier.FLOATING, modifier)] = FloatReader(ty())

        supported = modifier is LengthModifier.DEFAULT
        for conversion in (
            ConversionSpecifier.STRING,
            ConversionSpecifier.USE_SCAN_LIST,
            ConversionSpecifier.CHARACTER,
        ):
            readers[(conversion, modifier)] = ScanSetReader(conversion, supported=supported)

        readers[(ConversionSpecifier.POINTER, modifier)] = PointerReader(
            ScanTypePointer() if supported else ScanTypeBottom()
        )

        ty, _ = _INTEGER_WIDTHS[modifier]
        readers[(ConversionSpecifier.OUTPUT_NUMBER_OF_BYTES, modifier)] = ByteCountReporter(ty(signed=True))

    return readers


READERS = _build_readers()


def get_reader(spec) -> Reader:
    """
    Look up the reader for a parsed directive.
    """
    return READERS[(spec.conversion, spec.length_modifier)]


def destination_type(spec, arch):
    """
    The type of the output slot `spec` stores into on `arch`.
    """
    return get_reader(spec).destination_type(spec, arch)
