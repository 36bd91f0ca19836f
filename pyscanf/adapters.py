"""
The C-style entry points: sscanf() over an in-memory input and fscanf() over a stream. Both are thin layers that
materialize the input, build an ArgumentSink when the caller did not pass slots, and run the interpreter.
"""

from __future__ import annotations
import logging

from .errors import ScanfValueError
from .interpreter import interpret, make_options, to_bytes
from .options import SCAN_PAST_NUL
from .sink import ArgumentSink

l = logging.getLogger(name=__name__)


class ScanResult:
    """
    What a scanf call produced.

    :ivar count:    Number of stored conversions, the value scanf() returns.
    :ivar values:   Values of every written slot in slot order, %n results included.
    :ivar consumed: Number of input bytes the interpreter consumed.
    :ivar sink:     The sink the values were stored into.
    """

    __slots__ = ("count", "values", "consumed", "sink")

    def __init__(self, count: int, values: list, consumed: int, sink: ArgumentSink):
        self.count = count
        self.values = values
        self.consumed = consumed
        self.sink = sink

    def __repr__(self):
        return f"<ScanResult count={self.count} values={self.values!r} consumed={self.consumed}>"

    def __iter__(self):
        return iter(self.values)

    def __len__(self):
        return len(self.values)

    def __getitem__(self, idx):
        return self.values[idx]


def _make_sink(fmt: bytes, slots, arch, options) -> ArgumentSink:
    if arch is None:
        arch = options["arch"]
    if slots:
        return ArgumentSink(slots, arch=arch)
    # slots past an invalid directive are never reached, and the scan raises only if it gets there
    return ArgumentSink.from_format(fmt, arch=arch, partial=True)


def sscanf(data, fmt, *slots, options=None, arch=None) -> ScanResult:
    """
    Scan an in-memory input.

    Input and format end at their first NUL byte, as C strings do, unless the SCAN_PAST_NUL option is set.

    :param data:    The input, as bytes or str.
    :param fmt:     The format string, as bytes or str.
    :param slots:   OutputSlot or ScanType objects to store into. When none are given, slots are derived from `fmt`.
    :param options: A ScanOptions instance, or a collection of Boolean switches from pyscanf.options.
    :param arch:    An archinfo.Arch or architecture name; defaults to the "arch" option.
    """
    options = make_options(options)
    encoding = options["encoding"]
    data = to_bytes(data, encoding)
    fmt = to_bytes(fmt, encoding)
    if SCAN_PAST_NUL not in options:
        data = data.split(b"\x00", 1)[0]
        fmt = fmt.split(b"\x00", 1)[0]

    sink = _make_sink(fmt, slots, arch, options)
    count, consumed = interpret(data, fmt, sink, options=options)
    return ScanResult(count, sink.values(), consumed, sink)


def fscanf(stream, fmt, *slots, options=None, arch=None) -> ScanResult:
    """
    Scan from a seekable stream, leaving it positioned right after the last consumed byte so that the next read
    starts with the input the format did not use.

    Binary streams are repositioned with seek(). Text streams are rewound and the consumed characters are read again,
    which keeps the position valid for any text stream, io.StringIO and files alike.

    :param stream:  A seekable binary or text stream.
    :raises ScanfValueError:    if the stream is not seekable.
    """
    if not stream.seekable():
        raise ScanfValueError("fscanf() needs a seekable stream to push back unread input")

    options = make_options(options)
    encoding = getattr(stream, "encoding", None) or options["encoding"]
    start = stream.tell()
    raw = stream.read()
    data = to_bytes(raw, encoding)
    fmt = to_bytes(fmt, options["encoding"])

    sink = _make_sink(fmt, slots, arch, options)
    count, consumed = interpret(data, fmt, sink, options=options)

    if isinstance(raw, str):
        # a partially consumed multibyte character is pushed back whole
        chars = len(data[:consumed].decode(encoding, errors="ignore"))
        stream.seek(start)
        stream.read(chars)
    else:
        stream.seek(start + consumed)

    l.debug("fscanf consumed %d of %d bytes", consumed, len(data))
    return ScanResult(count, sink.values(), consumed, sink)
