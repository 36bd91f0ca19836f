from __future__ import annotations

# pylint: disable=missing-class-docstring,no-self-use

__package__ = __package__ or "tests"  # pylint:disable=redefined-builtin

import logging
import unittest

from pyscanf import (
    OutputSlot,
    ScanfFormatError,
    ScanOptions,
    ScanTypeCharArray,
    ScanTypeDouble,
    ScanTypeInt,
    ScanTypeLong,
    options as o,
    sscanf,
)

from .common import X86

l = logging.getLogger("pyscanf.tests.sscanf")


class TestSscanf(unittest.TestCase):
    def test_derived_slots(self):
        result = sscanf("12-34", "%d-%d")
        assert result.count == 2
        assert result.values == [12, 34]
        assert result.consumed == 5
        assert len(result.sink) == 2

    def test_derived_slot_types(self):
        result = sscanf(b"7 2.5 word x", b"%ld %lf %s %c")
        types = [slot.type for slot in result.sink]
        assert isinstance(types[0], ScanTypeLong)
        assert isinstance(types[1], ScanTypeDouble)
        assert isinstance(types[2], ScanTypeCharArray) and types[2].length is None
        assert types[3].length == 1
        assert result.values == [7, 2.5, b"word", b"x"]

    def test_suppressed_directives_get_no_slot(self):
        result = sscanf(b"a=1", b"%*[^=]=%d")
        assert len(result.sink) == 1
        assert result.values == [1]

    def test_explicit_slots(self):
        slot = OutputSlot(ScanTypeCharArray(8))
        result = sscanf(b"42 answer", b"%d %s", ScanTypeInt(), slot)
        assert result.count == 2
        assert result.values == [42, b"answer"]
        assert slot.raw == b"answer\x00\x00"

    def test_result_is_a_sequence(self):
        result = sscanf(b"1 2 3", b"%d %d %d")
        assert list(result) == [1, 2, 3]
        assert len(result) == 3
        assert result[1] == 2

    def test_byte_count_in_values(self):
        result = sscanf(b"abc 12", b"abc%n %d")
        assert result.count == 1
        assert result.values == [3, 12]

    def test_arch(self):
        result = sscanf(b"99999999999", b"%ld", arch=X86)
        assert result.values == [2**31 - 1]

        result = sscanf(b"99999999999", b"%ld", arch="X86")
        assert result.values == [2**31 - 1]

        result = sscanf(b"99999999999", b"%ld", options=ScanOptions({"arch": "X86"}))
        assert result.values == [2**31 - 1]

    def test_packed_values(self):
        result = sscanf(b"258", b"%d", arch="X86")
        assert result.sink[0].raw == b"\x02\x01\x00\x00"

    def test_stops_at_nul(self):
        result = sscanf(b"12\x0034", b"%d%d")
        assert result.count == 1
        assert result.consumed == 2

    def test_format_stops_at_nul(self):
        result = sscanf(b"12 34", b"%d\x00 %d", ScanTypeInt(), ScanTypeInt())
        assert result.count == 1

    def test_scan_past_nul(self):
        result = sscanf(b"ab\x00cd", b"%5c", options={o.SCAN_PAST_NUL})
        assert result.count == 1
        assert result.sink[0].raw == b"ab\x00cd"

    def test_encoding(self):
        opts = ScanOptions({"encoding": "latin-1"})
        result = sscanf("caf\xe9", "%s", options=opts)
        assert result.values == [b"caf\xe9"]

    def test_invalid_format(self):
        with self.assertRaises(ScanfFormatError):
            sscanf(b"1", b"%d %q")

    def test_invalid_directive_not_reached(self):
        assert sscanf(b"x", b"%d%y").count == 0
        assert sscanf(b"b", b"a%y").count == 0

        result = sscanf(b"x", b"%d%y")
        assert len(result.sink) == 1
        assert not result.sink[0].written

    def test_invalid_directive_reached(self):
        with self.assertRaises(ScanfFormatError):
            sscanf(b"5", b"%d%y")
        with self.assertRaises(ScanfFormatError):
            sscanf(b"a", b"a%y")

    def test_no_match(self):
        result = sscanf(b"abc", b"%d")
        assert result.count == 0
        assert result.values == []
        assert not result.sink[0].written


if __name__ == "__main__":
    unittest.main()
