from __future__ import annotations

import argparse
import logging
import sys

import pyscanf
from pyscanf.errors import ScanfError
from pyscanf.utils.formatting import printable_bytes


log = logging.getLogger(__name__)


def render_value(value) -> str:
    if isinstance(value, (bytes, bytearray)):
        return '"' + printable_bytes(value) + '"'
    if isinstance(value, float):
        return repr(value)
    return f"{value} ({value:#x})" if isinstance(value, int) and value >= 0 else str(value)


def read_input(args) -> bytes:
    if args.input is not None:
        return args.input.encode(args.encoding)
    if args.file is not None:
        with open(args.file, "rb") as f:
            return f.read()
    return sys.stdin.buffer.read()


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="pyscanf", description="Run a scanf format string against an input and print what it converts."
    )
    parser.add_argument("format", help="The scanf format string, e.g. '%%d-%%d'.")
    parser.add_argument("input", nargs="?", help="The input text. Read from --file or stdin when omitted.")
    parser.add_argument("--file", help="Read the input from this file instead.", default=None)
    parser.add_argument(
        "--arch",
        help="The architecture that sizes int, long, size_t and pointers (any name archinfo knows).",
        default=pyscanf.options.DEFAULT_ARCH,
    )
    parser.add_argument("--encoding", help="Encoding of the format and input arguments.", default="utf-8")
    parser.add_argument(
        "--past-nul",
        help="Keep scanning past a NUL byte in the input instead of treating it as the end.",
        action="store_true",
        default=False,
    )
    parser.add_argument("-v", "--verbose", help="Log each failing directive.", action="store_true", default=False)
    args = parser.parse_args(argv)

    if args.verbose:
        pyscanf.loggers.setall(logging.DEBUG)

    options = pyscanf.ScanOptions({"arch": args.arch, "encoding": args.encoding})
    if args.past_nul:
        options[pyscanf.options.SCAN_PAST_NUL] = True

    try:
        data = read_input(args)
        result = pyscanf.sscanf(data, args.format, options=options)
    except ScanfError as ex:
        log.error("%s", ex)
        return 2
    except OSError as ex:
        log.error("Cannot read input: %s", ex)
        return 1

    print(f"matched: {result.count}")
    print(f"consumed: {result.consumed}")
    for idx, slot in enumerate(result.sink):
        if not slot.written:
            continue
        print(f"[{idx}] {slot.type!r} = {render_value(slot.value)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
