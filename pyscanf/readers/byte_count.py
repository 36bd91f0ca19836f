from __future__ import annotations

from .reader import Reader


class ByteCountReporter(Reader):
    """
    %n: store how many input bytes have been consumed so far. Reads nothing and is never counted as a match.
    """

    counts_match = False

    def read(self, cursor, spec, sink):
        if not spec.suppress:
            sink.store(self.destination_type(spec, sink.arch), cursor.tell())
        return True
