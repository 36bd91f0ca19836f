from __future__ import annotations
import contextlib
import logging

from .errors import ScanfSinkError
from .format_parser import FormatParser
from .options import DEFAULT_ARCH
from .scan_type import (
    ScanType,
    ScanTypeNum,
    ScanTypeFloat,
    ScanTypeCharArray,
    ScanTypeBottom,
    arch_from_name,
)

l = logging.getLogger(name=__name__)


def _storage_kind(ty: ScanType) -> type:
    for kind in (ScanTypeCharArray, ScanTypeFloat, ScanTypeNum, ScanTypeBottom):
        if isinstance(ty, kind):
            return kind
    return ScanType


class OutputSlot:
    """
    One output location of an ArgumentSink: the Python counterpart of a pointer passed to scanf().

    Scalar slots hold a Python int or float once written. Character slots own a bytearray that conversions copy into,
    exactly as they would into a char buffer; the buffer grows if a conversion writes past its end.
    """

    __slots__ = ("type", "_value", "buffer", "written")

    def __init__(self, ty: ScanType, buffer: bytearray | None = None):
        self.type = ty
        self._value = None
        self.written = False
        if isinstance(ty, ScanTypeCharArray):
            self.buffer = buffer if buffer is not None else bytearray(ty.length or 0)
        else:
            self.buffer = None

    def __repr__(self):
        return f"<OutputSlot {self.type!r} {self.value!r}>"

    @property
    def value(self):
        """
        The stored value. For character slots, the buffer contents up to the first NUL byte.
        """
        if self.buffer is not None:
            return bytes(self.buffer).split(b"\x00", 1)[0]
        return self._value

    @property
    def raw(self) -> bytes:
        """
        The bytes the stored value occupies in memory on the slot's architecture.
        """
        if self.buffer is not None:
            return bytes(self.buffer)
        if not self.written:
            raise ScanfSinkError("Nothing has been stored into this slot")
        return self.type.pack(self._value)

    def store(self, value):
        self._value = self.type.store(value)
        self.written = True

    def store_bytes(self, data: bytes, terminate: bool):
        end = len(data)
        self.buffer[0:end] = data
        if terminate:
            self.buffer[end : end + 1] = b"\x00"
        self.written = True


class ArgumentSink:
    """
    An ordered list of typed output slots, consumed one at a time in directive order.
    """

    def __init__(self, slots=(), arch=None, strict_types: bool = False):
        """
        :param slots:           OutputSlot objects, or ScanType objects to wrap in fresh slots.
        :param arch:            An archinfo.Arch or architecture name that sizes the slot types.
        :param strict_types:    Raise instead of converting when a slot's type differs from what a directive stores.
        """
        self.arch = arch_from_name(arch if arch is not None else DEFAULT_ARCH)
        self.strict_types = strict_types
        self.slots: list[OutputSlot] = []
        for slot in slots:
            if not isinstance(slot, OutputSlot):
                slot = OutputSlot(slot)
            slot.type = slot.type.with_arch(self.arch)
            self.slots.append(slot)
        self._next = 0

    @classmethod
    def from_format(cls, fmt: bytes, arch=None, strict_types: bool = False, partial: bool = False) -> ArgumentSink:
        """
        Build a sink with one slot for every directive of `fmt` that stores something, typed after the directive.

        :param partial: Only derive slots for the directives before the first invalid one instead of raising. A scan
                        that reaches the invalid directive still raises then.
        :raises ScanfFormatError:   if `fmt` has an invalid conversion specifier and `partial` is not set.
        """
        from .readers import destination_type  # pylint:disable=import-outside-toplevel

        fmt_str = FormatParser.parse_prefix(fmt) if partial else FormatParser.parse(fmt)
        sink = cls(arch=arch, strict_types=strict_types)
        for spec in fmt_str.specifiers:
            if spec.suppress:
                continue
            sink.slots.append(OutputSlot(destination_type(spec, sink.arch)))
        return sink

    @contextlib.contextmanager
    def strictness(self, strict: bool):
        """
        Make slot type mismatches raise for the duration of the block when `strict` is set. The sink's own setting is
        restored afterwards.
        """
        old = self.strict_types
        self.strict_types = old or strict
        try:
            yield self
        finally:
            self.strict_types = old

    def __len__(self):
        return len(self.slots)

    def __getitem__(self, idx) -> OutputSlot:
        return self.slots[idx]

    def __iter__(self):
        return iter(self.slots)

    def __repr__(self):
        return f"<ArgumentSink {self._next}/{len(self.slots)} consumed>"

    @property
    def consumed(self) -> int:
        return self._next

    def values(self) -> list:
        """
        The values of all written slots, in slot order.
        """
        return [slot.value for slot in self.slots if slot.written]

    def pop(self, dest_type: ScanType) -> OutputSlot:
        """
        Take the next slot for a directive that stores a `dest_type`.

        :raises ScanfSinkError: if no slot is left, or the slot cannot hold a `dest_type`.
        """
        if self._next >= len(self.slots):
            raise ScanfSinkError(f"No output slot left for a {dest_type!r} (sink has {len(self.slots)} slots)")
        slot = self.slots[self._next]
        self._next += 1

        if not slot.type.compatible_with(dest_type):
            if self.strict_types or _storage_kind(slot.type) is not _storage_kind(dest_type):
                raise ScanfSinkError(f"Slot {self._next - 1} is a {slot.type!r}, cannot store a {dest_type!r} into it")
            l.warning(
                "Slot %d is a %r but receives a %r; storing through the slot type", self._next - 1, slot.type, dest_type
            )
        return slot

    def store(self, dest_type: ScanType, value):
        """
        Store a scalar into the next slot, converted to `dest_type` first and then to the slot's own type.
        """
        self.pop(dest_type).store(dest_type.store(value))

    def store_bytes(self, dest_type: ScanType, data: bytes, terminate: bool = True):
        """
        Copy `data` into the next slot's buffer, followed by a NUL byte if `terminate` is set.
        """
        self.pop(dest_type).store_bytes(data, terminate)
