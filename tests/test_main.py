from __future__ import annotations

# pylint: disable=missing-class-docstring,no-self-use

import contextlib
import io
import os
import tempfile
import unittest

from pyscanf.__main__ import main, render_value


def _run(*argv):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        rc = main(list(argv))
    return rc, out.getvalue().splitlines()


class TestMain(unittest.TestCase):
    def test_scan(self):
        rc, lines = _run("%d-%d", "12-34")
        assert rc == 0
        assert lines == ["matched: 2", "consumed: 5", "[0] int = 12 (0xc)", "[1] int = 34 (0x22)"]

    def test_strings_and_floats(self):
        rc, lines = _run("%s %lf %d", "ab 1.5 -3")
        assert rc == 0
        assert lines[2:] == ['[0] char[] = "ab"', "[1] double = 1.5", "[2] int = -3"]

    def test_arch(self):
        rc, lines = _run("--arch", "X86", "%ld", "99999999999")
        assert rc == 0
        assert lines[2] == "[0] long = 2147483647 (0x7fffffff)"

    def test_partial_match(self):
        rc, lines = _run("%d %d", "5 x")
        assert rc == 0
        assert lines == ["matched: 1", "consumed: 2", "[0] int = 5 (0x5)"]

    def test_file(self):
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"a\x00b")
            rc, lines = _run("--file", path, "--past-nul", "%3c")
            assert rc == 0
            assert lines[2] == '[0] char[3] = "a"'
        finally:
            os.unlink(path)

    def test_invalid_format(self):
        with self.assertLogs("pyscanf.__main__", level="ERROR"):
            rc, _ = _run("%y", "1")
        assert rc == 2

    def test_missing_file(self):
        with self.assertLogs("pyscanf.__main__", level="ERROR"):
            rc, _ = _run("--file", os.path.join(tempfile.gettempdir(), "pyscanf-no-such-file"), "%d")
        assert rc == 1

    def test_render_value(self):
        assert render_value(b"a\nb") == '"a\\x0ab"'
        assert render_value(-1) == "-1"
        assert render_value(255) == "255 (0xff)"
        assert render_value(0.25) == "0.25"


if __name__ == "__main__":
    unittest.main()
