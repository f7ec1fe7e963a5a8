"""
Default first-column labels and default-value text.

Labels
- option:   "-v, --verbosity <LEVEL> (REQUIRED)"
- command:  "b, build <target>"
- argument: "<files>..."

Alias lists are ordered by prefix ("", "-", "--", "/") then by body, both
case-insensitively, so short forms come before long ones whatever the
declaration order; a body spelled with several prefixes is shown once, with
its dashed spelling ("-x" beats "/x", "--long" beats "/long").

Placeholders prefer, in order: the symbol's helpname, then its closed set of
values ("<fast|safe>"). Arguments and command labels fall back to the
argument name; an option value with neither shows no placeholder at all.
"""
import enum
from collections.abc import Iterable

from .resources import getstring

_PREFIXES = ("--", "-", "/")


def split_prefix(alias, /):
    """
    Split an alias into (prefix, body): "--verbose" → ("--", "verbose").
    """
    for prefix in _PREFIXES:
        if alias.startswith(prefix) and len(alias) > len(prefix):
            return prefix, alias[len(prefix):]
    return "", alias


def format_aliases(names, /):
    """
    Join aliases for display, ordered and deduplicated by body.
    """
    seen = set()
    shown = []
    for prefix, body in sorted(map(split_prefix, names), key=lambda x: (x[0].casefold(), x[1].casefold())):
        if body in seen:
            continue
        seen.add(body)
        shown.append(prefix + body)
    return ", ".join(shown)


def format_placeholder(argument, /, *, named=True):
    """
    "<helpname>", "<a|b|c>" or "<name>"; without named, None instead of "<name>".
    """
    if argument.helpname:
        return f"<{argument.helpname}>"
    if argument.type is not bool and (completions := argument.completions):
        return f"<{"|".join(completions)}>"
    return f"<{argument.name}>" if named else None


def argument_label(argument, /):
    """
    Placeholder of a positional argument, with "..." when it takes several values.
    """
    return format_placeholder(argument) + ("..." if argument.arity.maximum > 1 else "")


def option_label(option, /):
    label = format_aliases(option.names)
    if option.arity.maximum != 0 and (placeholder := format_placeholder(option.argument, named=False)):
        label += " " + placeholder
    if option.required:
        label += " " + getstring("required-label")
    return label


def command_label(command, /):
    label = format_aliases(command.names)
    for argument in command.arguments:
        if not argument.hidden:
            label += " " + format_placeholder(argument)
    return label


def format_default(value, /):
    """
    Display text of a default value, or None when there is nothing to show.

    - None → None
    - str → as is
    - Enum member → its name
    - other iterables → "|"-joined item texts ([0, 2, 4] → "0|2|4")
    - anything else → str(value)
    """
    match value:
        case None:
            return None
        case enum.Enum():
            return value.name
        case str():
            return value
        case bytes() | bytearray():
            return str(value)
        case Iterable():
            return "|".join(format_default(item) or "" for item in value)
        case _:
            return str(value)


__all__ = (
    "split_prefix",
    "format_aliases",
    "format_placeholder",
    "argument_label",
    "option_label",
    "command_label",
    "format_default",
)
