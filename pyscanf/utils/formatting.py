from __future__ import annotations
import sys
from enum import Enum, unique


if sys.platform == "win32":
    import colorama  # pylint:disable=import-error


ansi_color_enabled: bool = False

clear: str = "\x1b[0m"


@unique
class Color(Enum):
    """
    ANSI foreground colors
    """

    black = 30
    red = 31
    green = 32
    yellow = 33
    blue = 34
    magenta = 35
    cyan = 36
    white = 37


def color(c: Color, bright: bool = False) -> str:
    """
    The escape sequence that switches the terminal to `c`. Reset with `clear`.
    """
    return f"\x1b[{c.value};1m" if bright else f"\x1b[{c.value}m"


def setup_terminal():
    """
    Enable colorized output when both stdout and stderr are terminals. On Windows, colorama translates the escape
    sequences for consoles that do not understand them.
    """
    global ansi_color_enabled  # pylint:disable=global-statement

    isatty = all(hasattr(stream, "isatty") and stream.isatty() for stream in (sys.stdout, sys.stderr))
    if isatty and sys.platform == "win32" and not isinstance(sys.stdout, colorama.ansitowin32.StreamWrapper):
        colorama.just_fix_windows_console()
    ansi_color_enabled = isatty


def printable_bytes(data: bytes) -> str:
    """
    Render `data` for display: printable ASCII is kept as-is, everything else becomes a \\xNN escape.

    :param data:    The bytes to render.
    :return:        A str that can be written to any terminal.
    """
    return "".join(chr(b) if 0x20 <= b < 0x7F else f"\\x{b:02x}" for b in data)
