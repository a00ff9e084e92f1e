"""Named, typed options and ordered collections of them."""

from __future__ import annotations

import enum
from typing import Iterator, Union

OptionValue = Union[bool, int, float, str]


class OptionType(enum.Enum):
    """The kind of value an option holds."""

    BOOL = 1
    INT = 2
    STRING = 3
    FLOAT = 4


class OptionError(RuntimeError):
    """Raised when an option is created, read or written with the wrong type."""


def _value_kind(value: object) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


class Option:
    """A single named value of a fixed :class:`OptionType`."""

    __slots__ = ("name", "type", "_value")

    def __init__(self, name: str, value: OptionValue, type: OptionType) -> None:
        self.name = name
        self.type = type
        if isinstance(value, bool):
            if type is not OptionType.BOOL:
                raise OptionError("calling wrong constructor for Option")
            self._value: OptionValue = value
        elif isinstance(value, int):
            if type is OptionType.STRING:
                raise OptionError("calling wrong constructor for Option")
            if type is OptionType.FLOAT:
                self._value = float(value)
            elif type is OptionType.BOOL:
                self._value = bool(value)
            else:
                self._value = value
        elif isinstance(value, float):
            if type is not OptionType.FLOAT:
                raise OptionError("supplied a float option but with the wrong type")
            self._value = value
        elif isinstance(value, str):
            if type is not OptionType.STRING:
                raise OptionError("supplied a string option but with the wrong type")
            self._value = value
        else:
            raise OptionError(f"unsupported option value for {name}: {value!r}")

    def __repr__(self) -> str:
        return f"Option({self.name!r}, {self._value!r}, {self.type})"

    @property
    def value(self) -> OptionValue:
        """The stored value, in the option's own type."""
        return self._value

    def _reject_read(self, wanted: str, *forbidden: OptionType) -> None:
        if self.type in forbidden:
            raise OptionError(
                f"attempted to get {wanted} but option {self.name} is a "
                f"{self.type.name.lower()}"
            )

    def get_float(self) -> float:
        self._reject_read("float", OptionType.STRING, OptionType.BOOL)
        return float(self._value)

    def get_int(self) -> int:
        self._reject_read("int", OptionType.STRING, OptionType.BOOL)
        return int(self._value)

    def get_string(self) -> str:
        self._reject_read("string", OptionType.INT, OptionType.FLOAT, OptionType.BOOL)
        return str(self._value)

    def get_bool(self) -> bool:
        self._reject_read("bool", OptionType.INT, OptionType.FLOAT, OptionType.STRING)
        return bool(self._value)

    def set_value(self, value: OptionValue) -> None:
        """Store a new value, converting between int and float where allowed."""
        numeric = (OptionType.INT, OptionType.FLOAT)
        if isinstance(value, bool):
            accepted = self.type is OptionType.BOOL
        elif isinstance(value, (int, float)):
            accepted = self.type in numeric
        elif isinstance(value, str):
            accepted = self.type is OptionType.STRING
        else:
            accepted = False
        if not accepted:
            raise OptionError(
                f"attempted to set a {_value_kind(value)} value but option "
                f"{self.name} is a {self.type.name.lower()}"
            )
        if self.type is OptionType.INT:
            self._value = int(value)
        elif self.type is OptionType.FLOAT:
            self._value = float(value)
        else:
            self._value = value

    def type_name(self) -> str:
        return self.type.name


class Options:
    """An ordered collection of options looked up by name."""

    def __init__(self) -> None:
        self._options: list[Option] = []
        self.locked = False

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def lock_option_adding(self) -> None:
        self.locked = True

    def add_option(self, name: str, value: OptionValue, type: OptionType) -> None:
        if self.locked:
            raise OptionError("options are locked you cannot add any new ones")
        self._options.append(Option(name, value, type))

    def _find_option(self, name: str) -> Option:
        for opt in self._options:
            if opt.name == name:
                return opt
        raise OptionError(f"cannot find option with name {name}")

    def get_int(self, name: str) -> int:
        return self._find_option(name).get_int()

    def get_float(self, name: str) -> float:
        return self._find_option(name).get_float()

    def get_string(self, name: str) -> str:
        return self._find_option(name).get_string()

    def get_bool(self, name: str) -> bool:
        return self._find_option(name).get_bool()

    def has_option(self, name: str) -> bool:
        return any(opt.name == name for opt in self._options)

    def set_value(self, name: str, value: OptionValue) -> None:
        self._find_option(name).set_value(value)