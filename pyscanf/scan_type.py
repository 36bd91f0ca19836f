from __future__ import annotations
import copy
import logging
import math
import struct

import archinfo
from archinfo import Endness

from .errors import ScanfTypeError, ScanfValueError
from .utils.bits import wrap_int

l = logging.getLogger(name=__name__)


def arch_from_name(arch) -> archinfo.Arch:
    """
    Resolve an architecture given either as an archinfo.Arch instance or as a name such as "AMD64" or "x86".
    """
    if isinstance(arch, archinfo.Arch):
        return arch
    try:
        return archinfo.arch_from_id(arch)
    except archinfo.ArchError as ex:
        raise ScanfValueError(f"Unknown architecture {arch!r}") from ex


class ScanType:
    """
    ScanType describes the C type of a location a conversion stores into.
    """

    _fields = ()
    _arch = None
    _size = None
    _base_name = None

    def __init__(self, label=None):
        """
        :param label: the type label.
        """
        self.label = label

    def __eq__(self, other):
        if type(self) != type(other):  # pylint:disable=unidiomatic-typecheck
            return False

        for attr in self._fields:
            if getattr(self, attr) != getattr(other, attr):
                return False

        return True

    def __hash__(self):
        out = hash(type(self))
        for attr in self._fields:
            out ^= hash(getattr(self, attr))
        return out

    @property
    def size(self):
        """
        The size of the type in bits.
        """
        if self._size is not None:
            return self._size
        return NotImplemented

    @property
    def arch(self):
        return self._arch

    def with_arch(self, arch):
        if arch is None:
            return self
        if self._arch is not None and self._arch == arch:
            return self
        return self._with_arch(arch)

    def _with_arch(self, arch):
        cp = copy.copy(self)
        cp._arch = arch
        return cp

    def compatible_with(self, other: ScanType) -> bool:
        """
        Whether a slot declared with this type can receive a value whose destination type is `other`.
        """
        return self == other

    def store(self, value):
        """
        Convert `value` into what this type can hold, the way an assignment through a C pointer of this type would.
        """
        raise NotImplementedError()

    def pack(self, value) -> bytes:
        """
        Lay `value` out in memory the way the architecture of this type does.
        """
        raise NotImplementedError()

    def _byteorder(self) -> str:
        if self._arch is None:
            raise ValueError("Can't tell my byte order without an arch!")
        return "big" if self._arch.memory_endness == Endness.BE else "little"

    def c_repr(self):
        return self._base_name

    def __repr__(self):
        return self.c_repr() if self._base_name is not None else self.__class__.__name__


class ScanTypeBottom(ScanType):
    """
    The type of a directive that can never be written, such as %Lf.
    """

    _base_name = "bot"

    def store(self, value):
        raise ScanfTypeError("Values cannot be stored into a bottom type")

    def pack(self, value) -> bytes:
        raise ScanfTypeError("Values cannot be stored into a bottom type")


class ScanTypeNum(ScanType):
    """
    ScanTypeNum is an integer type of a fixed number of bits, independent of the architecture.
    """

    _fields = ScanType._fields + ("signed", "size")

    def __init__(self, size, signed=True, label=None):
        """
        :param size:        The size of the integer, in bits
        :param signed:      Whether the integer is signed or not
        :param label:       A label for the type
        """
        super().__init__(label)
        self._size = size
        self.signed = signed

    def c_repr(self):
        return "{}int{}_t".format("" if self.signed else "u", self.size)

    def store(self, value):
        if not isinstance(value, int):
            raise ScanfTypeError(f"unrecognized value type {type(value).__name__} for {self!r}")
        return wrap_int(value, self.size, self.signed)

    def pack(self, value) -> bytes:
        return self.store(value).to_bytes(self.size // 8, self._byteorder(), signed=self.signed)


class ScanTypeInt(ScanTypeNum):
    """
    ScanTypeInt is a type that specifies a signed or unsigned C integer whose width depends on the architecture.
    """

    _fields = ("signed",)
    _base_name = "int"

    def __init__(self, signed=True, label=None):
        """
        :param signed:  True if signed, False if unsigned
        :param label:   The type label
        """
        super().__init__(None, signed=signed, label=label)

    def c_repr(self):
        return self._base_name if self.signed else "unsigned " + self._base_name

    @property
    def size(self):
        if self._arch is None:
            raise ValueError("Can't tell my size without an arch!")
        try:
            return self._arch.sizeof[self._base_name]
        except KeyError:
            raise ValueError(f"Arch {self._arch.name} doesn't have its {self._base_name} type defined!") from None


class ScanTypeShort(ScanTypeInt):
    _base_name = "short"


class ScanTypeLong(ScanTypeInt):
    _base_name = "long"


class ScanTypeLongLong(ScanTypeInt):
    _base_name = "long long"


class ScanTypeChar(ScanTypeInt):
    """
    A single C char used as an integer, as %hhd and %hhn store it.
    """

    _base_name = "char"

    @property
    def size(self):
        return 8


class ScanTypeIntMax(ScanTypeInt):
    _base_name = "intmax_t"

    @property
    def size(self):
        return 64

    def c_repr(self):
        return self._base_name if self.signed else "u" + self._base_name


class ScanTypeLength(ScanTypeInt):
    """
    size_t, or ssize_t when signed.
    """

    _base_name = "size_t"

    @property
    def size(self):
        if self._arch is None:
            raise ValueError("Can't tell my size without an arch!")
        return self._arch.bits

    def c_repr(self):
        return "ssize_t" if self.signed else self._base_name


class ScanTypePtrDiff(ScanTypeLength):
    _base_name = "ptrdiff_t"

    def c_repr(self):
        return self._base_name


class ScanTypePointer(ScanTypeLength):
    """
    A void* as %p stores it.
    """

    _base_name = "void*"

    def __init__(self, label=None):
        super().__init__(signed=False, label=label)

    def c_repr(self):
        return self._base_name


class ScanTypeFloat(ScanType):
    """
    An IEEE 754 single precision float.
    """

    _base_name = "float"
    _size = 32
    _struct_fmt = "f"

    def store(self, value):
        if not isinstance(value, (int, float)):
            raise ScanfTypeError(f"unrecognized value type {type(value).__name__} for {self!r}")
        try:
            return struct.unpack(self._struct_fmt, struct.pack(self._struct_fmt, value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def pack(self, value) -> bytes:
        prefix = ">" if self._byteorder() == "big" else "<"
        return struct.pack(prefix + self._struct_fmt, self.store(value))


class ScanTypeDouble(ScanTypeFloat):
    _base_name = "double"
    _size = 64
    _struct_fmt = "d"


class ScanTypeLongDouble(ScanTypeBottom):
    """
    long double. Nothing is ever stored into one: extended precision parsing is not supported.
    """

    _base_name = "long double"


class ScanTypeCharArray(ScanType):
    """
    A char buffer that string, scan set and character conversions copy into.
    """

    _base_name = "char"

    def __init__(self, length=None, label=None):
        """
        :param length:  Number of bytes in the buffer, or None for a buffer that grows as needed.
        :param label:   The type label.
        """
        super().__init__(label)
        self.length = length

    @property
    def size(self):
        if self.length is None:
            return NotImplemented
        return self.length * 8

    def compatible_with(self, other):
        return isinstance(other, ScanTypeCharArray)

    def store(self, value):
        return bytes(value)

    def pack(self, value) -> bytes:
        return bytes(value)

    def c_repr(self):
        return "char[]" if self.length is None else f"char[{self.length}]"
