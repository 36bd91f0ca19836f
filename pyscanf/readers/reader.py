from __future__ import annotations
from typing import TYPE_CHECKING

from ..scan_type import ScanType, ScanTypeBottom

if TYPE_CHECKING:
    from archinfo import Arch
    from ..cursor import InputCursor
    from ..format_parser import FormatSpecifier
    from ..sink import ArgumentSink


class Reader:
    """
    Base class of everything that executes one conversion directive.

    Readers are stateless and shared between calls. `read` returns False, with nothing consumed for the conversion
    itself, when the input at the cursor does not fit the directive; the interpreter then stops.
    """

    # whether a successful, non-suppressed read counts as a match
    counts_match = True

    def __init__(self, dest_type: ScanType):
        self.dest_type = dest_type

    def __repr__(self):
        return f"<{self.__class__.__name__} -> {self.dest_type!r}>"

    @property
    def supported(self) -> bool:
        return not isinstance(self.dest_type, ScanTypeBottom)

    def destination_type(self, spec: FormatSpecifier, arch: Arch) -> ScanType:  # pylint:disable=unused-argument
        """
        The type of the slot this reader stores into for `spec`.
        """
        return self.dest_type.with_arch(arch)

    def read(self, cursor: InputCursor, spec: FormatSpecifier, sink: ArgumentSink) -> bool:
        raise NotImplementedError()
