from __future__ import annotations
import logging

from .cursor import InputCursor, isspace
from .errors import ScanfFormatError, ScanfTypeError
from .format_parser import FormatParser, FormatWhitespace, FormatLiteral, ScanState
from .options import STRICT_SINK_TYPES
from .readers import get_reader
from .scan_options import ScanOptions
from .sink import ArgumentSink

l = logging.getLogger(name=__name__)


def to_bytes(data, encoding: str = "utf-8") -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise ScanfTypeError(f"Expected bytes or str, got {type(data).__name__}")


def make_options(options) -> ScanOptions:
    if isinstance(options, ScanOptions):
        return options
    return ScanOptions(options)


class ScanfInterpreter:
    """
    Runs a format string against an input, writing conversions into an ArgumentSink.

    An interpreter is good for a single run. It owns its cursor and its parser, and nothing of it is meant to outlive
    the call that created it.
    """

    def __init__(self, data: bytes, fmt: bytes, sink: ArgumentSink, options: ScanOptions | None = None):
        self.options = make_options(options)
        self.cursor = InputCursor(data)
        self.parser = FormatParser(fmt)
        self.sink = sink
        self.matched = 0
        self.state = ScanState.SCANNING_LITERAL

    def __repr__(self):
        return f"<ScanfInterpreter {self.state.name} matched={self.matched} at={self.cursor.tell()}>"

    def run(self) -> int:
        """
        Interpret the whole format string.

        :return:    The number of directives whose conversion was stored.
        :raises ScanfFormatError:   if scanning reaches a directive with an invalid conversion specifier.
        """
        with self.sink.strictness(STRICT_SINK_TYPES in self.options):
            try:
                return self._run()
            except ScanfFormatError as ex:
                self.state = ScanState.FAILED
                l.error("%s in format %r", ex, self.parser.fmt)
                raise

    def _run(self) -> int:
        for component in self.parser:
            if isinstance(component, FormatWhitespace):
                self.state = ScanState.SCANNING_LITERAL
                self.cursor.ignore_while(isspace)
            elif isinstance(component, FormatLiteral):
                self.state = ScanState.SCANNING_LITERAL
                if not self._match_literal(component.string):
                    return self._fail("literal %r does not match at offset %d", component, self.cursor.tell())
            else:
                self.state = ScanState.EXECUTING_CONVERSION
                reader = get_reader(component)
                if not reader.read(self.cursor, component, self.sink):
                    return self._fail("%s failed at offset %d", component, self.cursor.tell())
                if reader.counts_match and not component.suppress:
                    self.matched += 1

        self.state = ScanState.DONE
        return self.matched

    def _match_literal(self, string: bytes) -> bool:
        for c in string:
            if not self.cursor.consume_specific(c):
                return False
        return True

    def _fail(self, msg, *args) -> int:
        self.state = ScanState.FAILED
        l.debug("Stopping after %d matches: " + msg, self.matched, *args)
        return self.matched


def interpret(data, fmt, sink: ArgumentSink, options=None) -> tuple[int, int]:
    """
    Scan `data` according to `fmt`.

    :param data:    The input, as bytes or str.
    :param fmt:     The format string, as bytes or str.
    :param sink:    Output slots the conversions are stored into.
    :param options: A ScanOptions instance, or a collection of Boolean switches from pyscanf.options.
    :return:        (number of stored conversions, number of input bytes consumed)
    """
    options = make_options(options)
    encoding = options["encoding"]
    interp = ScanfInterpreter(to_bytes(data, encoding), to_bytes(fmt, encoding), sink, options=options)
    matched = interp.run()
    return matched, interp.cursor.tell()


def scan(data, fmt, sink: ArgumentSink, options=None) -> int:
    """
    Scan `data` according to `fmt`, storing into `sink`, and return the number of stored conversions.
    """
    return interpret(data, fmt, sink, options=options)[0]
