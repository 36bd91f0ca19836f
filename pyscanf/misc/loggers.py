from __future__ import annotations
import logging
import sys
import zlib

from ..utils import formatting
from ..utils.formatting import Color, color, clear


def _test_runner_active() -> bool:
    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    if spec is not None and spec.name.partition(".")[0] in ("pytest", "unittest"):
        return True
    return "_pytest" in sys.modules


class Loggers:
    """
    Keeps track of the loggers of pyscanf and of the libraries it drives, and owns the handler that prints them.

    Loggers are reachable as attributes with dots replaced by underscores, e.g. ``loggers.pyscanf_sink``.
    """

    __slots__ = (
        "default_level",
        "handler",
        "_loggers",
    )

    IN_SCOPE = ("pyscanf", "archinfo")

    def __init__(self, default_level=logging.WARNING):
        self.default_level = default_level
        self._loggers: dict[str, logging.Logger] = {}
        self.handler = logging.StreamHandler()
        self.handler.setFormatter(CuteFormatter(formatting.ansi_color_enabled))
        self.load_all_loggers()

        # an application that configured logging itself, or a test runner capturing it, keeps its own handlers
        if not logging.root.handlers and not _test_runner_active():
            self.enable_root_logger()
            logging.root.setLevel(self.default_level)

    def load_all_loggers(self):
        """
        Pick up every logger created so far under one of the IN_SCOPE prefixes.
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if isinstance(logger, logging.PlaceHolder):
                continue
            if name.partition(".")[0] in self.IN_SCOPE:
                self._loggers[name] = logger

    def __getattr__(self, k):
        try:
            return self._loggers[k.replace("_", ".")]
        except KeyError:
            raise AttributeError(k) from None

    def __dir__(self):
        return list(super().__dir__()) + list(self._loggers)

    def __iter__(self):
        return iter(self._loggers.values())

    def enable_root_logger(self):
        logging.root.addHandler(self.handler)

    def disable_root_logger(self):
        logging.root.removeHandler(self.handler)

    def setall(self, level):
        """
        Set `level` on every tracked logger.
        """
        for logger in self._loggers.values():
            logger.setLevel(level)


# threshold, color, bright
_LEVEL_COLORS = (
    (logging.CRITICAL, Color.red, True),
    (logging.ERROR, Color.red, False),
    (logging.WARNING, Color.yellow, False),
    (logging.INFO, Color.blue, False),
)


class CuteFormatter(logging.Formatter):
    """
    Formats records as ``LEVEL | logger | message``. With colors on, the level gets a color by severity and the logger
    name one picked from a hash of the name, so that records from one module are easy to follow.
    """

    def __init__(self, should_color: bool):
        super().__init__()
        self._should_color = should_color

    def _column(self, text: str, width: int, prefix: str | None) -> str:
        text = text.ljust(width)
        if self._should_color and prefix is not None:
            return prefix + text + clear
        return text

    @staticmethod
    def _level_color(levelno: int) -> str | None:
        for threshold, c, bright in _LEVEL_COLORS:
            if levelno >= threshold:
                return color(c, bright)
        return None

    @staticmethod
    def _name_color(name: str) -> str | None:
        idx = zlib.adler32(name.encode()) % 7
        if idx == 0:  # black
            return None
        return color(Color(Color.black.value + idx))

    def format(self, record: logging.LogRecord) -> str:
        level = self._column(record.levelname, 8, self._level_color(record.levelno))
        name = self._column(record.name, 24, self._name_color(record.name))
        body = f"{level} | {name} | {record.getMessage()}"
        if record.exc_info:
            body += "\n" + self.formatException(record.exc_info)
        return body
