# This module contains the scan options.
# All variables with names of all caps will be registered as a Boolean scan option to ScanOptions.

from __future__ import annotations

import os
import string

from .scan_options import ScanOptions

# A slot whose declared type differs from the destination type of the directive writing to it raises ScanfSinkError
# instead of being stored through the slot's own type.
STRICT_SINK_TYPES = "STRICT_SINK_TYPES"

# The string adapter hands the whole input to the interpreter instead of stopping at the first NUL byte.
SCAN_PAST_NUL = "SCAN_PAST_NUL"

#
# Register those variables as Boolean scan options
#

_g = globals().copy()
for k, v in _g.items():
    if all(char in string.ascii_uppercase + "_" + string.digits for char in k) and type(v) is str:
        ScanOptions.register_bool_option(v)

#
# Key-valued options
#

DEFAULT_ARCH = os.environ.get("PYSCANF_ARCH", "AMD64")

ScanOptions.register_option(
    "arch", {str}, default=DEFAULT_ARCH, description="archinfo architecture used to size destination types"
)
ScanOptions.register_option(
    "encoding", {str}, default="utf-8", description="encoding applied to str inputs and format strings"
)
