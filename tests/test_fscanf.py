from __future__ import annotations

# pylint: disable=missing-class-docstring,no-self-use

import io
import os
import tempfile
import unittest

from pyscanf import ScanfFormatError, ScanfValueError, ScanTypeInt, fscanf


class _Unseekable(io.RawIOBase):
    def readable(self):
        return True

    def seekable(self):
        return False


class TestFscanf(unittest.TestCase):
    def test_binary_stream(self):
        stream = io.BytesIO(b"12 34 rest")
        result = fscanf(stream, b"%d %d")
        assert result.values == [12, 34]
        assert result.consumed == 5
        assert stream.read() == b" rest"

    def test_consecutive_calls(self):
        stream = io.BytesIO(b"1 2 3")
        assert fscanf(stream, b"%d").values == [1]
        assert fscanf(stream, b"%d").values == [2]
        assert fscanf(stream, b"%d").values == [3]
        assert fscanf(stream, b"%d").count == 0

    def test_failed_directive_leaves_input(self):
        stream = io.BytesIO(b"  word")
        result = fscanf(stream, b"%d", ScanTypeInt())
        assert result.count == 0
        assert stream.read() == b"word"

    def test_starts_at_current_position(self):
        stream = io.BytesIO(b"skip 77")
        stream.seek(5)
        assert fscanf(stream, b"%d").values == [77]

    def test_text_stream(self):
        stream = io.StringIO("héllo wörld")
        result = fscanf(stream, "%s")
        assert result.values == ["héllo".encode()]
        assert stream.read() == " wörld"

    def test_text_stream_partial_character(self):
        stream = io.StringIO("é!")
        result = fscanf(stream, "%c")
        assert result.count == 1
        assert result.values == [b"\xc3"]
        assert stream.read() == "é!"

    def test_file(self):
        fd, path = tempfile.mkstemp()
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(b"0x10 tail")
            with open(path, "rb") as f:
                assert fscanf(f, b"%x").values == [16]
                assert f.read() == b" tail"
            with open(path, encoding="utf-8") as f:
                assert fscanf(f, "%i").values == [16]
                assert f.read() == " tail"
        finally:
            os.unlink(path)

    def test_invalid_directive_not_reached(self):
        stream = io.BytesIO(b"x")
        assert fscanf(stream, b"%d%y").count == 0
        assert stream.tell() == 0

        stream = io.BytesIO(b"b")
        assert fscanf(stream, b"a%y").count == 0
        assert stream.read() == b"b"

    def test_invalid_directive_reached(self):
        with self.assertRaises(ScanfFormatError):
            fscanf(io.BytesIO(b"5 6"), b"%d%y")

    def test_unseekable(self):
        with self.assertRaises(ScanfValueError):
            fscanf(_Unseekable(), b"%d")


if __name__ == "__main__":
    unittest.main()
