"""Options that can be filled from command-line arguments."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from eternakit.option import Option, OptionError, OptionType, OptionValue

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class CommandLineOptionError(RuntimeError):
    """Raised when command-line arguments do not match the declared options."""


class CommandLineOption(Option):
    """An option that also records whether it is required and was supplied."""

    __slots__ = ("required", "filled")

    def __init__(
        self,
        name: str,
        value: OptionValue,
        type: OptionType,
        required: bool = False,
    ) -> None:
        super().__init__(name, value, type)
        self.required = required
        self.filled = False

    @classmethod
    def from_option(cls, opt: Option) -> "CommandLineOption":
        """A fresh, optional, unfilled copy of ``opt``."""
        return cls(opt.name, opt.value, opt.type, False)


def _parse_int(text: str) -> Optional[int]:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _parse_float(text: str) -> Optional[float]:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else None


class CommandLineOptions:
    """An ordered set of command-line options, filled by :meth:`parse_command_line`."""

    def __init__(self) -> None:
        self._options: list[CommandLineOption] = []

    def __iter__(self) -> Iterator[CommandLineOption]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def add_option(
        self,
        name: str,
        value: OptionValue,
        type: OptionType,
        required: bool = False,
    ) -> None:
        if self.has_option(name):
            raise CommandLineOptionError(
                f"cannot add new option {name} it already exists"
            )
        self._options.append(CommandLineOption(name, value, type, required))

    def add_options(self, opts: Iterable[Option]) -> None:
        """Add an optional copy of every option in ``opts``."""
        self._options.extend(CommandLineOption.from_option(opt) for opt in opts)

    def _find_option(self, name: str) -> CommandLineOption:
        for opt in self._options:
            if opt.name == name:
                return opt
        raise CommandLineOptionError(f"unknown command line argument: {name}")

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

    def is_filled(self, name: str) -> bool:
        return self._find_option(name).filled

    def _set_option(self, opt: CommandLineOption, value: str, is_bool: bool) -> None:
        # A repeated option is not an error: the last value given wins.
        opt.filled = True

        if opt.type is OptionType.STRING:
            opt.set_value(value)
        elif opt.type is OptionType.FLOAT:
            number = _parse_float(value)
            if number is None:
                raise CommandLineOptionError(
                    f"{opt.name} is a FLOAT option but cannot successfully convert it float"
                )
            opt.set_value(number)
        elif opt.type is OptionType.INT:
            integer = _parse_int(value)
            if integer is None:
                raise CommandLineOptionError(
                    f"{opt.name} is a INT option but cannot successfully convert it int"
                )
            if not _INT_MIN <= integer <= _INT_MAX:
                raise CommandLineOptionError(
                    f"{opt.name} is a INT option but {value} is out of range"
                )
            opt.set_value(integer)
        elif opt.type is OptionType.BOOL:
            if not is_bool:
                raise CommandLineOptionError(
                    f'{opt.name} is a BOOL option must be supplied like "-bool_option" '
                    "not -bool_option 1"
                )
            opt.set_value(True)

    def parse_command_line(self, argv: Iterable[str]) -> None:
        """Fill options from ``argv``, the arguments after the program name.

        ``-name value`` sets a value; ``-name`` alone switches a BOOL option on.
        Arguments that do not start with ``-`` and do not follow an option
        are ignored.
        """
        args = list(argv)
        following: list[Optional[str]] = [*args[1:], None]
        for arg, nxt in zip(args, following):
            if not arg.startswith("-"):
                continue
            opt = self._find_option(arg[1:])
            if nxt is not None and not nxt.startswith("-"):
                self._set_option(opt, nxt, False)
            else:
                if opt.type is not OptionType.BOOL:
                    raise CommandLineOptionError(
                        f"{opt.name} is a {opt.type_name()} but is set as a BOOL"
                    )
                self._set_option(opt, "1", True)

        for opt in self._options:
            if opt.required and not opt.filled:
                raise CommandLineOptionError(
                    f"{opt.name} is a required option and was not supplied"
                )


__all__ = [
    "CommandLineOption",
    "CommandLineOptionError",
    "CommandLineOptions",
    "OptionError",
]