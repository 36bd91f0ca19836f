from __future__ import annotations

# pylint: disable=missing-class-docstring,no-self-use

import unittest

from pyscanf import (
    ConversionSpecifier,
    FormatLiteral,
    FormatParser,
    FormatSpecifier,
    FormatWhitespace,
    LengthModifier,
    ScanfFormatError,
    ScanSet,
    ScanState,
)


def _specifier(fmt: bytes) -> FormatSpecifier:
    (spec,) = FormatParser.parse(fmt).specifiers
    return spec


class TestFormatParser(unittest.TestCase):
    def test_components(self):
        fmt = FormatParser.parse(b"x=%d,  y=%5s%%")
        kinds = [type(c) for c in fmt]
        assert kinds == [
            FormatLiteral,
            FormatSpecifier,
            FormatLiteral,
            FormatWhitespace,
            FormatLiteral,
            FormatSpecifier,
            FormatLiteral,
        ]
        assert fmt.components[0].string == b"x="
        assert fmt.components[3].string == b"  "
        assert fmt.components[6].escaped
        assert len(fmt.specifiers) == 2

    def test_repr_rebuilds_format(self):
        text = b"%d %*[^,],%lld%%"
        assert repr(FormatParser.parse(text)) == text.decode()

    def test_flags_and_width(self):
        spec = _specifier(b"%*12x")
        assert spec.suppress
        assert spec.width == 12
        assert spec.length_modifier is LengthModifier.DEFAULT
        assert spec.conversion is ConversionSpecifier.HEX
        assert spec.string == b"%*12x"
        assert spec.spec_type == "x"

    def test_no_width(self):
        spec = _specifier(b"%d")
        assert not spec.suppress
        assert spec.width is None

    def test_length_modifiers(self):
        cases = {
            b"%hhd": LengthModifier.CHAR,
            b"%hd": LengthModifier.SHORT,
            b"%ld": LengthModifier.LONG,
            b"%lld": LengthModifier.LONG_LONG,
            b"%jd": LengthModifier.INT_MAX,
            b"%zu": LengthModifier.SIZE,
            b"%td": LengthModifier.PTR_DIFF,
            b"%Lf": LengthModifier.LONG_DOUBLE,
            b"%f": LengthModifier.DEFAULT,
        }
        for fmt, modifier in cases.items():
            assert _specifier(fmt).length_modifier is modifier, fmt

    def test_conversions(self):
        cases = {
            b"%i": ConversionSpecifier.INTEGER,
            b"%o": ConversionSpecifier.OCTAL,
            b"%u": ConversionSpecifier.UNSIGNED,
            b"%X": ConversionSpecifier.HEX,
            b"%a": ConversionSpecifier.FLOATING,
            b"%e": ConversionSpecifier.FLOATING,
            b"%g": ConversionSpecifier.FLOATING,
            b"%s": ConversionSpecifier.STRING,
            b"%c": ConversionSpecifier.CHARACTER,
            b"%p": ConversionSpecifier.POINTER,
            b"%n": ConversionSpecifier.OUTPUT_NUMBER_OF_BYTES,
        }
        for fmt, conversion in cases.items():
            assert _specifier(fmt).conversion is conversion, fmt

    def test_wide_shorthands(self):
        spec = _specifier(b"%S")
        assert spec.conversion is ConversionSpecifier.STRING
        assert spec.length_modifier is LengthModifier.LONG

        spec = _specifier(b"%hC")
        assert spec.conversion is ConversionSpecifier.CHARACTER
        assert spec.length_modifier is LengthModifier.LONG

    def test_scan_set(self):
        spec = _specifier(b"%[abc]")
        assert spec.conversion is ConversionSpecifier.USE_SCAN_LIST
        assert spec.scan_set == ScanSet(b"abc")
        assert ord("b") in spec.scan_set
        assert ord("d") not in spec.scan_set

    def test_inverted_scan_set(self):
        spec = _specifier(b"%3[^ \n]")
        assert spec.width == 3
        assert spec.scan_set.inverted
        assert spec.scan_set.chars == b" \n"
        assert ord("x") in spec.scan_set
        assert ord(" ") not in spec.scan_set

    def test_scan_set_has_no_ranges(self):
        spec = _specifier(b"%[a-c]")
        assert ord("b") not in spec.scan_set
        assert ord("-") in spec.scan_set

    def test_unterminated_scan_set(self):
        spec = _specifier(b"%[abc")
        assert spec.scan_set.chars == b"abc"
        assert spec.string == b"%[abc"

    def test_escaped_percent(self):
        (comp,) = FormatParser.parse(b"%%")
        assert isinstance(comp, FormatLiteral)
        assert comp.string == b"%"
        assert str(comp) == "%%"

    def test_invalid_specifier(self):
        with self.assertRaises(ScanfFormatError) as cm:
            FormatParser.parse(b"ab %5k")
        assert cm.exception.specifier == b"k"
        assert cm.exception.offset == 5

    def test_invalid_uppercase_floats(self):
        for fmt in (b"%A", b"%E", b"%F", b"%G"):
            with self.assertRaises(ScanfFormatError):
                FormatParser.parse(fmt)

    def test_lazy(self):
        parser = FormatParser(b"%d %y")
        it = iter(parser)
        assert isinstance(next(it), FormatSpecifier)
        assert parser.state is ScanState.EXECUTING_CONVERSION
        assert isinstance(next(it), FormatWhitespace)
        with self.assertRaises(ScanfFormatError):
            next(it)

    def test_parse_prefix(self):
        fmt_str = FormatParser.parse_prefix(b"%d %y %s")
        assert len(fmt_str.components) == 2
        assert isinstance(fmt_str.components[0], FormatSpecifier)
        assert isinstance(fmt_str.components[1], FormatWhitespace)

        assert FormatParser.parse_prefix(b"%5k").components == []
        assert len(FormatParser.parse_prefix(b"%x%%").components) == 2

    def test_done(self):
        parser = FormatParser(b"%d")
        assert len(list(parser)) == 1
        assert parser.state is ScanState.DONE


if __name__ == "__main__":
    unittest.main()
