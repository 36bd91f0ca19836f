from __future__ import annotations


class ScanfError(Exception):
    pass


class ScanfValueError(ScanfError, ValueError):
    pass


class ScanfTypeError(ScanfError, TypeError):
    pass


class ScanfFormatError(ScanfError):
    """
    Raised when a format string contains a conversion specifier that cannot be interpreted. There is no way to tell
    how many output slots the remaining directives would have consumed, so scanning is never resumed after this.
    """

    def __init__(self, specifier: bytes, offset: int):
        self.specifier = specifier
        self.offset = offset
        super().__init__(f"Invalid conversion specifier {specifier!r} at format offset {offset}")


class ScanfSinkError(ScanfError):
    pass


class ScanfOptionsError(ScanfError):
    pass
