from __future__ import annotations
import logging
from collections.abc import Iterator
from enum import Enum

from .cursor import InputCursor, isspace, isdigit
from .errors import ScanfFormatError

l = logging.getLogger(name=__name__)


class ScanState(Enum):
    """
    States of the interpreter. The PARSING_* states are walked by FormatParser for every directive.
    """

    SCANNING_LITERAL = "scanning_literal"
    PARSING_FLAGS = "parsing_flags"
    PARSING_WIDTH = "parsing_width"
    PARSING_LENGTH_MODIFIER = "parsing_length_modifier"
    PARSING_SPECIFIER = "parsing_specifier"
    EXECUTING_CONVERSION = "executing_conversion"
    DONE = "done"
    FAILED = "failed"


class LengthModifier(Enum):
    NONE = ""
    DEFAULT = "default"
    CHAR = "hh"
    SHORT = "h"
    LONG = "l"
    LONG_LONG = "ll"
    INT_MAX = "j"
    SIZE = "z"
    PTR_DIFF = "t"
    LONG_DOUBLE = "L"


class ConversionSpecifier(Enum):
    UNSPECIFIED = "unspecified"
    DECIMAL = "d"
    INTEGER = "i"
    OCTAL = "o"
    UNSIGNED = "u"
    HEX = "x"
    FLOATING = "f"
    STRING = "s"
    USE_SCAN_LIST = "["
    CHARACTER = "c"
    POINTER = "p"
    OUTPUT_NUMBER_OF_BYTES = "n"
    INVALID = "invalid"


# two-character modifiers come first so that "hh" is not read as "h"
_LENGTH_MODIFIERS = (
    (b"hh", LengthModifier.CHAR),
    (b"ll", LengthModifier.LONG_LONG),
    (b"h", LengthModifier.SHORT),
    (b"l", LengthModifier.LONG),
    (b"j", LengthModifier.INT_MAX),
    (b"z", LengthModifier.SIZE),
    (b"t", LengthModifier.PTR_DIFF),
    (b"L", LengthModifier.LONG_DOUBLE),
)

_CONVERSIONS = {
    ord("d"): ConversionSpecifier.DECIMAL,
    ord("i"): ConversionSpecifier.INTEGER,
    ord("o"): ConversionSpecifier.OCTAL,
    ord("u"): ConversionSpecifier.UNSIGNED,
    ord("x"): ConversionSpecifier.HEX,
    ord("X"): ConversionSpecifier.HEX,
    ord("a"): ConversionSpecifier.FLOATING,
    ord("e"): ConversionSpecifier.FLOATING,
    ord("f"): ConversionSpecifier.FLOATING,
    ord("g"): ConversionSpecifier.FLOATING,
    ord("s"): ConversionSpecifier.STRING,
    ord("c"): ConversionSpecifier.CHARACTER,
    ord("p"): ConversionSpecifier.POINTER,
    ord("n"): ConversionSpecifier.OUTPUT_NUMBER_OF_BYTES,
}

# shorthands for a wide length modifier plus a character or string conversion
_WIDE_CONVERSIONS = {
    ord("C"): ConversionSpecifier.CHARACTER,
    ord("S"): ConversionSpecifier.STRING,
}


class ScanSet:
    """
    The set of bytes between the brackets of a %[...] directive.
    """

    __slots__ = ("chars", "inverted")

    def __init__(self, chars: bytes, inverted: bool = False):
        self.chars = bytes(chars)
        self.inverted = inverted

    def __contains__(self, c: int) -> bool:
        return self.inverted ^ (c in self.chars)

    def __eq__(self, other):
        return isinstance(other, ScanSet) and self.chars == other.chars and self.inverted == other.inverted

    def __hash__(self):
        return hash((self.chars, self.inverted))

    def __repr__(self):
        return f"<ScanSet {'^' if self.inverted else ''}{self.chars!r}>"


class FormatWhitespace:
    """
    A run of whitespace in a format string. Matches any amount of input whitespace, including none.
    """

    __slots__ = ("string",)

    def __init__(self, string: bytes):
        self.string = string

    def __str__(self):
        return self.string.decode("latin-1")

    def __repr__(self):
        return f"<FormatWhitespace {self.string!r}>"


class FormatLiteral:
    """
    Bytes of a format string that the input has to repeat exactly.
    """

    __slots__ = ("string", "escaped")

    def __init__(self, string: bytes, escaped: bool = False):
        self.string = string
        self.escaped = escaped

    def __str__(self):
        return "%%" if self.escaped else self.string.decode("latin-1")

    def __repr__(self):
        return f"<FormatLiteral {str(self)!r}>"


class FormatSpecifier:
    """
    Describes one conversion directive within a format string.
    """

    __slots__ = ("string", "suppress", "width", "length_modifier", "conversion", "scan_set")

    def __init__(
        self,
        string: bytes,
        suppress: bool = False,
        width: int | None = None,
        length_modifier: LengthModifier = LengthModifier.DEFAULT,
        conversion: ConversionSpecifier = ConversionSpecifier.UNSPECIFIED,
        scan_set: ScanSet | None = None,
    ):
        self.string = string
        self.suppress = suppress
        self.width = width
        self.length_modifier = length_modifier
        self.conversion = conversion
        self.scan_set = scan_set

    @property
    def spec_type(self) -> str:
        return self.conversion.value

    def __str__(self):
        return self.string.decode("latin-1")

    def __repr__(self):
        return f"<FormatSpecifier {str(self)!r}>"

    def __len__(self):
        return len(self.string)


class FormatString:
    """
    A format string broken into its components, which are FormatWhitespace, FormatLiteral or FormatSpecifier objects.
    """

    def __init__(self, components):
        self.components = list(components)

    @property
    def specifiers(self) -> list[FormatSpecifier]:
        return [c for c in self.components if isinstance(c, FormatSpecifier)]

    def __iter__(self):
        return iter(self.components)

    def __len__(self):
        return len(self.components)

    def __repr__(self):
        return "".join(str(comp) for comp in self.components)


class FormatParser:
    """
    Splits a format string into components, one at a time.

    Iterating is lazy on purpose: a malformed directive only raises once the interpreter actually reaches it, so a
    format whose earlier directive already failed to match never raises.
    """

    def __init__(self, fmt: bytes):
        self.fmt = bytes(fmt)
        self._lexer = InputCursor(self.fmt)
        self.state = ScanState.SCANNING_LITERAL

    @classmethod
    def parse(cls, fmt: bytes) -> FormatString:
        """
        Parse the whole format string at once.

        :raises ScanfFormatError:   if any directive has an invalid conversion specifier.
        """
        try:
            fmt_str = FormatString(cls(fmt))
        except ScanfFormatError as ex:
            l.error("%s in format %r", ex, bytes(fmt))
            raise
        l.debug("Fmt: %r", fmt_str)
        return fmt_str

    @classmethod
    def parse_prefix(cls, fmt: bytes) -> FormatString:
        """
        Parse the components that come before the first invalid directive, which are all a scan can get through before
        it has to raise.
        """
        components = []
        try:
            for component in cls(fmt):
                components.append(component)
        except ScanfFormatError as ex:
            l.debug("Fmt prefix ends at %s", ex)
        return FormatString(components)

    def __iter__(self) -> Iterator[FormatWhitespace | FormatLiteral | FormatSpecifier]:
        lexer = self._lexer
        while not lexer.is_eof():
            self.state = ScanState.SCANNING_LITERAL
            if lexer.next_is(isspace):
                yield FormatWhitespace(lexer.consume_while(isspace))
            elif lexer.next_is(b"%%"):
                lexer.ignore(2)
                yield FormatLiteral(b"%", escaped=True)
            elif lexer.next_is(ord("%")):
                yield self._parse_directive()
            else:
                yield FormatLiteral(lexer.consume_while(lambda c: c != 0x25 and not isspace(c)))
        self.state = ScanState.DONE

    def _parse_directive(self) -> FormatSpecifier:
        lexer = self._lexer
        start = lexer.tell()
        lexer.ignore()  # '%'

        spec = FormatSpecifier(b"", length_modifier=LengthModifier.NONE)
        self.state = ScanState.PARSING_FLAGS
        while self.state is not ScanState.EXECUTING_CONVERSION:
            if self.state is ScanState.PARSING_FLAGS:
                spec.suppress = lexer.consume_specific(ord("*"))
                self.state = ScanState.PARSING_WIDTH
            elif self.state is ScanState.PARSING_WIDTH:
                digits = lexer.consume_while(isdigit)
                if digits:
                    spec.width = int(digits)
                self.state = ScanState.PARSING_LENGTH_MODIFIER
            elif self.state is ScanState.PARSING_LENGTH_MODIFIER:
                spec.length_modifier = self._parse_length_modifier()
                self.state = ScanState.PARSING_SPECIFIER
            elif self.state is ScanState.PARSING_SPECIFIER:
                self._parse_specifier(spec)
                self.state = ScanState.EXECUTING_CONVERSION

        spec.string = self.fmt[start : lexer.tell()]
        return spec

    def _parse_length_modifier(self) -> LengthModifier:
        lexer = self._lexer
        for text, modifier in _LENGTH_MODIFIERS:
            if lexer.next_is(text):
                lexer.ignore(len(text))
                return modifier
        return LengthModifier.DEFAULT

    def _parse_specifier(self, spec: FormatSpecifier):
        lexer = self._lexer
        offset = lexer.tell()
        c = lexer.peek()

        if c in _CONVERSIONS:
            lexer.ignore()
            spec.conversion = _CONVERSIONS[c]
        elif c in _WIDE_CONVERSIONS:
            lexer.ignore()
            spec.length_modifier = LengthModifier.LONG
            spec.conversion = _WIDE_CONVERSIONS[c]
        elif c == ord("["):
            lexer.ignore()
            chars = lexer.consume_until(ord("]"))
            lexer.ignore()  # ']', if the set was terminated at all
            inverted = chars.startswith(b"^")
            if inverted:
                chars = chars[1:]
            spec.conversion = ConversionSpecifier.USE_SCAN_LIST
            spec.scan_set = ScanSet(chars, inverted=inverted)
        else:
            lexer.ignore()
            spec.conversion = ConversionSpecifier.INVALID
            bad = b"" if c is None else bytes([c])
            raise ScanfFormatError(bad, offset)
