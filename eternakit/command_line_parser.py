"""Copying parsed command-line values into an :class:`Options` collection."""

from __future__ import annotations

from eternakit.cl_option import CommandLineOptions
from eternakit.option import Options, OptionType


def assign_options(
    cl_options: CommandLineOptions, options: Options, prefix: str = ""
) -> None:
    """Copy each command-line value into the option of the same name.

    With ``prefix``, a leading ``prefix.`` is removed from a command-line
    option's name before it is matched. Options with no match are skipped.
    """
    for cl_opt in cl_options:
        name = cl_opt.name
        if prefix and name.startswith(prefix):
            name = name[len(prefix) + 1:]

        if not options.has_option(name):
            continue

        if cl_opt.type is OptionType.INT:
            options.set_value(name, cl_opt.get_int())
        elif cl_opt.type is OptionType.FLOAT:
            options.set_value(name, cl_opt.get_float())
        elif cl_opt.type is OptionType.BOOL:
            options.set_value(name, cl_opt.get_bool())
        elif cl_opt.type is OptionType.STRING:
            options.set_value(name, cl_opt.get_string())