# pylint: disable=wrong-import-position
from __future__ import annotations

__version__ = "1.0.0"

from .utils.formatting import setup_terminal

setup_terminal()
del setup_terminal

# let's set up some bootstrap logging
import logging

logging.getLogger("pyscanf").addHandler(logging.NullHandler())
from .misc.loggers import Loggers

loggers = Loggers()
del Loggers
del logging

from . import options
from .scan_options import ScanOptions, ScanOption
from .errors import (
    ScanfError,
    ScanfValueError,
    ScanfTypeError,
    ScanfFormatError,
    ScanfSinkError,
    ScanfOptionsError,
)
from .scan_type import (
    ScanType,
    ScanTypeBottom,
    ScanTypeNum,
    ScanTypeInt,
    ScanTypeShort,
    ScanTypeLong,
    ScanTypeLongLong,
    ScanTypeChar,
    ScanTypeIntMax,
    ScanTypeLength,
    ScanTypePtrDiff,
    ScanTypePointer,
    ScanTypeFloat,
    ScanTypeDouble,
    ScanTypeLongDouble,
    ScanTypeCharArray,
    arch_from_name,
)
from .cursor import InputCursor
from .format_parser import (
    FormatParser,
    FormatString,
    FormatSpecifier,
    FormatLiteral,
    FormatWhitespace,
    ScanSet,
    ScanState,
    LengthModifier,
    ConversionSpecifier,
)
from .sink import ArgumentSink, OutputSlot
from .interpreter import ScanfInterpreter, scan, interpret
from .adapters import ScanResult, sscanf, fscanf

# now that everything is loaded, aggregate all loggers
loggers.load_all_loggers()

__all__ = (
    "ArgumentSink",
    "ConversionSpecifier",
    "FormatLiteral",
    "FormatParser",
    "FormatSpecifier",
    "FormatString",
    "FormatWhitespace",
    "InputCursor",
    "LengthModifier",
    "OutputSlot",
    "ScanOption",
    "ScanOptions",
    "ScanResult",
    "ScanSet",
    "ScanState",
    "ScanType",
    "ScanTypeBottom",
    "ScanTypeChar",
    "ScanTypeCharArray",
    "ScanTypeDouble",
    "ScanTypeFloat",
    "ScanTypeInt",
    "ScanTypeIntMax",
    "ScanTypeLength",
    "ScanTypeLong",
    "ScanTypeLongDouble",
    "ScanTypeLongLong",
    "ScanTypeNum",
    "ScanTypePointer",
    "ScanTypePtrDiff",
    "ScanTypeShort",
    "ScanfError",
    "ScanfFormatError",
    "ScanfInterpreter",
    "ScanfOptionsError",
    "ScanfSinkError",
    "ScanfTypeError",
    "ScanfValueError",
    "arch_from_name",
    "fscanf",
    "interpret",
    "loggers",
    "options",
    "scan",
    "sscanf",
)
