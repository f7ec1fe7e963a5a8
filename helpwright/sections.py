"""
Help sections and the default layout.

A section is a callable section(context) -> bool: it writes one block of help
to context.output and reports whether it wrote anything. The builder writes a
blank line after every section that reports output.

Default layout, in order
- synopsis              "Description:" + the command's description
- usage                 "Usage:" + the usage line
- arguments             "Arguments:" + positional arguments, root to target
- options               "Options:" + target options, then inherited ones
- subcommands           "Commands:" + visible child commands
- additional-arguments  only when the command is not strict

SECTIONS maps those names to their renderers so a custom layout can mix
registered names with its own callables.
"""
from types import MappingProxyType

from .resources import getstring
from .symbols import HelpOption


def synopsis(context, /):
    context.builder.write_heading(getstring("description-title"), context.command.descr, context.output)
    return True


def usage(context, /):
    context.builder.write_heading(getstring("usage-title"), context.builder.get_usage(context.command), context.output)
    return True


def arguments(context, /):
    """
    Rows of every visible argument from the root down to the target.

    An argument shared by several commands of the path is listed once.
    """
    seen = set()
    rows = []
    for command in context.command.path:
        for argument in command.arguments:
            if argument.hidden or id(argument) in seen:
                continue
            seen.add(id(argument))
            rows.append(context.builder.get_row(argument, context))

    return _block(context, getstring("arguments-title"), rows)


def options(context, /):
    """
    Rows of the target's visible options, then the visible recursive options
    of each ancestor, nearest first.

    An option attached at several levels is listed once, and an inherited
    help option is dropped when a help option is already listed.
    """
    command = context.command
    shown = [option for option in command.options if not option.hidden]
    seen = set(map(id, shown))
    helped = any(isinstance(option, HelpOption) for option in shown)

    for ancestor in reversed(command.path[:-1]):
        for option in ancestor.options:
            if option.hidden or not option.recursive or id(option) in seen:
                continue
            seen.add(id(option))
            if isinstance(option, HelpOption):
                if helped:
                    continue
                helped = True
            shown.append(option)

    return _block(context, getstring("options-title"), [context.builder.get_row(option, context) for option in shown])


def subcommands(context, /):
    rows = [
        context.builder.get_row(subcommand, context)
        for subcommand in context.command.subcommands
        if not subcommand.hidden
    ]
    return _block(context, getstring("commands-title"), rows)


def additional_arguments(context, /):
    if context.command.strict:
        return False
    context.builder.write_heading(
        getstring("additional-arguments-title"),
        getstring("additional-arguments-description"),
        context.output,
    )
    return True


def _block(context, heading, rows):
    if not rows:
        return False
    context.builder.write_heading(heading, None, context.output)
    context.builder.write_columns(rows, context)
    return True


SECTIONS = MappingProxyType({
    "synopsis": synopsis,
    "usage": usage,
    "arguments": arguments,
    "options": options,
    "subcommands": subcommands,
    "additional-arguments": additional_arguments,
})
"""
Registered sections by name, in default layout order.
"""


def layout(context, /):
    """
    Default section order (the context is unused; every command gets every
    section, and empty ones report no output).
    """
    return tuple(SECTIONS.values())


__all__ = (
    "synopsis",
    "usage",
    "arguments",
    "options",
    "subcommands",
    "additional_arguments",
    "SECTIONS",
    "layout",
)
