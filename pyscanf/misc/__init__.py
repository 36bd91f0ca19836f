from __future__ import annotations

from .loggers import Loggers
