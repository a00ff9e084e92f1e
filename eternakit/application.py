"""Base class for command-line programs built on typed options."""

from __future__ import annotations

import abc
import sys
from typing import Iterable, Optional

from eternakit.cl_option import CommandLineOptions
from eternakit.command_line_parser import assign_options
from eternakit.option import Option, Options, OptionType, OptionValue


class ApplicationError(RuntimeError):
    """Raised when an application cannot carry out its work."""


class Application(abc.ABC):
    """A program that declares options, reads them from the command line and runs."""

    def __init__(self) -> None:
        self.options = Options()
        self.cl_options = CommandLineOptions()

    @abc.abstractmethod
    def setup_options(self) -> None:
        """Declare the program's options."""

    def parse_command_line(self, argv: Optional[Iterable[str]] = None) -> None:
        """Parse ``argv`` (default: ``sys.argv[1:]``) and copy the values into the options."""
        if argv is None:
            argv = sys.argv[1:]
        self.cl_options.parse_command_line(argv)
        assign_options(self.cl_options, self.options)

    @abc.abstractmethod
    def run(self) -> None:
        """Do the program's work."""

    def add_option(
        self,
        name: str,
        value: OptionValue,
        type: OptionType,
        required: bool = False,
    ) -> None:
        self.options.add_option(name, value, type)
        self.cl_options.add_option(name, value, type, required)

    def add_cl_options(self, opts: Iterable[Option], prefix: str = "") -> None:
        """Expose ``opts`` on the command line, as ``prefix.name`` if a prefix is given."""
        if not prefix:
            self.cl_options.add_options(opts)
            return
        for opt in opts:
            self.cl_options.add_option(f"{prefix}.{opt.name}", opt.value, opt.type, False)

    def get_int_option(self, name: str) -> int:
        return self.options.get_int(name)

    def get_float_option(self, name: str) -> float:
        return self.options.get_float(name)

    def get_string_option(self, name: str) -> str:
        return self.options.get_string(name)

    def get_bool_option(self, name: str) -> bool:
        return self.options.get_bool(name)