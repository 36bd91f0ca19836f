from __future__ import annotations

# pylint: disable=missing-class-docstring,no-self-use

import unittest

from pyscanf import ScanfOptionsError, ScanOptions, options as o


class TestScanOptions(unittest.TestCase):
    def test_registered(self):
        assert o.STRICT_SINK_TYPES in ScanOptions.OPTIONS
        assert o.SCAN_PAST_NUL in ScanOptions.OPTIONS
        assert "arch" in ScanOptions.OPTIONS
        assert "encoding" in ScanOptions.OPTIONS
        assert "DEFAULT_ARCH" not in ScanOptions.OPTIONS

    def test_defaults(self):
        opts = ScanOptions()
        assert o.STRICT_SINK_TYPES not in opts
        assert opts[o.SCAN_PAST_NUL] is False
        assert opts["arch"] == o.DEFAULT_ARCH
        assert opts["encoding"] == "utf-8"

    def test_switches(self):
        opts = ScanOptions({o.STRICT_SINK_TYPES})
        assert o.STRICT_SINK_TYPES in opts
        assert o.SCAN_PAST_NUL not in opts

        opts |= {o.SCAN_PAST_NUL}
        assert o.SCAN_PAST_NUL in opts
        opts -= {o.STRICT_SINK_TYPES}
        assert o.STRICT_SINK_TYPES not in opts

    def test_values(self):
        opts = ScanOptions({"arch": "X86", "encoding": "latin-1"})
        assert opts["arch"] == "X86"
        assert opts["encoding"] == "latin-1"
        assert "arch" not in opts

    def test_copy(self):
        opts = ScanOptions({o.SCAN_PAST_NUL})
        cp = opts.copy()
        cp.discard(o.SCAN_PAST_NUL)
        assert o.SCAN_PAST_NUL in opts
        assert o.SCAN_PAST_NUL not in cp
        assert ScanOptions(opts)[o.SCAN_PAST_NUL] is True

    def test_unknown_option(self):
        with self.assertRaises(ScanfOptionsError):
            ScanOptions({"NO_SUCH_OPTION"})
        assert ScanOptions().get("no_such_option", 5) == 5

    def test_wrong_type(self):
        opts = ScanOptions()
        with self.assertRaises(ScanfOptionsError):
            opts["arch"] = 64
        with self.assertRaises(ScanfOptionsError):
            opts[o.SCAN_PAST_NUL] = 1

    def test_bad_constructor_argument(self):
        with self.assertRaises(ScanfOptionsError):
            ScanOptions(42)

    def test_duplicate_registration(self):
        with self.assertRaises(ScanfOptionsError):
            ScanOptions.register_bool_option(o.SCAN_PAST_NUL)

    def test_tally(self):
        opts = ScanOptions({o.SCAN_PAST_NUL})
        tally = opts.tally()
        assert "SCAN_PAST_NUL: True" in tally
        assert "STRICT_SINK_TYPES" not in tally
        assert "STRICT_SINK_TYPES: False" in opts.tally(exclude_false=False)


if __name__ == "__main__":
    unittest.main()
