from __future__ import annotations

from .bits import int_range, wrap_int, saturate_int
from .formatting import printable_bytes
