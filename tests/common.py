from __future__ import annotations
import logging

import archinfo

from pyscanf import ArgumentSink, interpret

l = logging.getLogger("pyscanf.tests.common")

AMD64 = archinfo.ArchAMD64()
X86 = archinfo.ArchX86()


def run_scan(data, fmt, *slot_types, arch=AMD64, options=None):
    """
    Scan with a fresh sink made of `slot_types`.

    :return:    (match count, consumed bytes, sink)
    """
    sink = ArgumentSink(slot_types, arch=arch)
    count, consumed = interpret(data, fmt, sink, options=options)
    l.debug("%r %r -> %d matched, %d consumed", fmt, data, count, consumed)
    return count, consumed, sink
