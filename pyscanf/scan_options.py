from __future__ import annotations

from .errors import ScanfOptionsError


_NO_DEFAULT_VALUE = object()


class ScanOption:
    """
    The description of one registered scan option: its name, the types its value may have and its default.
    """

    __slots__ = ("name", "types", "default", "description")

    def __init__(self, name: str, types, default=_NO_DEFAULT_VALUE, description: str | None = None):
        self.name = name
        self.types = tuple(types)
        self.default = default
        self.description = description

        if self.has_default_value:
            self.check(default)

    @property
    def has_default_value(self) -> bool:
        return self.default is not _NO_DEFAULT_VALUE

    @property
    def is_switch(self) -> bool:
        return self.types == (bool,)

    def check(self, value):
        # exact type match, so that 1 is not taken for True
        if type(value) not in self.types:
            raise ScanfOptionsError(
                f"The value {value!r} does not have an acceptable type for scan option '{self.name}'. "
                f"Accepted types are: {', '.join(t.__name__ for t in self.types)}."
            )

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        return isinstance(other, ScanOption) and self.name == other.name and self.types == other.types

    def __repr__(self):
        desc = f": {self.description}" if self.description is not None else ""
        return f"<O {self.name}[{','.join(t.__name__ for t in self.types)}]{desc}>"


class ScanOptions:
    """
    The options of one scan call. Boolean switches are tested with ``in``; every option, switches included, can be
    read and written by name, and reads fall back to the registered default.

    >>> opts = ScanOptions({options.SCAN_PAST_NUL})
    >>> options.SCAN_PAST_NUL in opts, opts["encoding"]
    (True, 'utf-8')
    """

    __slots__ = ("_values",)

    OPTIONS: dict[str, ScanOption] = {}

    def __init__(self, thing=None):
        """
        :param thing:   A collection of switch names to turn on, a dict of option values, another ScanOptions
                        instance to copy, or None.
        """
        self._values = {}
        if isinstance(thing, ScanOptions):
            self._values = dict(thing._values)
        elif isinstance(thing, dict):
            for name, value in thing.items():
                self[name] = value
        elif isinstance(thing, (set, frozenset, list, tuple)):
            self |= thing
        elif thing is not None:
            raise ScanfOptionsError(f"Cannot build scan options from a {type(thing).__name__}")

    @classmethod
    def _describe(cls, name) -> ScanOption:
        try:
            return cls.OPTIONS[name]
        except KeyError:
            raise ScanfOptionsError(f"The scan option '{name}' does not exist.") from None

    def __repr__(self):
        return f"<ScanOptions {self.tally()!r}>"

    def __contains__(self, name):
        return self._values.get(name) is True

    def __getitem__(self, name):
        desc = self._describe(name)
        if name in self._values:
            return self._values[name]
        if not desc.has_default_value:
            raise ScanfOptionsError(f"The scan option '{name}' is not set and has no default value.")
        return desc.default

    def __setitem__(self, name, value):
        self._describe(name).check(value)
        self._values[name] = value

    def __ior__(self, switches):
        for name in switches:
            self[name] = True
        return self

    def __isub__(self, switches):
        for name in switches:
            self[name] = False
        return self

    def get(self, name, default=None):
        try:
            return self[name]
        except ScanfOptionsError:
            return default

    def discard(self, name):
        """
        Forget the value set for `name`, so that reads return the default again.
        """
        self._values.pop(name, None)

    def copy(self) -> ScanOptions:
        return ScanOptions(self)

    def tally(self, exclude_false: bool = True, description: bool = False) -> str:
        """
        One ``name: value`` line per registered option, sorted by name.

        :param exclude_false:   Leave out switches that are off.
        :param description:     Append each option's description.
        """
        lines = []
        for name in sorted(self.OPTIONS):
            desc = self.OPTIONS[name]
            value = self.get(name, "<Unset>")
            if exclude_false and desc.is_switch and value is False:
                continue
            line = f"{name}: {value}"
            if description:
                line += f" | {desc.description}"
            lines.append(line)
        return "\n".join(lines)

    @classmethod
    def register_option(cls, name: str, types, default=_NO_DEFAULT_VALUE, description: str | None = None):
        """
        Register a key-valued scan option.

        :param name:        Name of the option.
        :param types:       A type, or a collection of types, the value may have.
        :param default:     Value returned while the option is unset.
        :param description: What the option does.
        :raises ScanfOptionsError:  if an option of that name exists already.
        """
        if name in cls.OPTIONS:
            raise ScanfOptionsError(f"A scan option named '{name}' has been registered already.")
        if isinstance(types, type):
            types = (types,)
        cls.OPTIONS[name] = ScanOption(name, types, default=default, description=description)

    @classmethod
    def register_bool_option(cls, name: str, description: str | None = None):
        cls.register_option(name, bool, default=False, description=description)
