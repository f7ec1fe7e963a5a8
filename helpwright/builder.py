"""
helpwright help builder: turn a command tree into help text.

What this module provides
- HelpBuilder: the rendering engine. It walks a command's sections (synopsis,
  usage, arguments, options, subcommands, additional arguments), builds one
  row per visible symbol and lays the rows out in wrapped, aligned columns.
- HelpContext: the (builder, command, output) triple handed to every section
  for one write() call.
- Customization: per-symbol overrides of the two columns and of the default
  value text.
- print_help(command, console): render at the console width and print through
  rich.

Quick start
    from helpwright import Argument, Command, HelpBuilder, Option

    tool = Command(
        "tool", "Copies files.",
        Argument("source", "File to copy"),
        Option("--force", "-f", type=bool, descr="Overwrite the target"),
    )
    builder = HelpBuilder(80)
    builder.customize_symbol(tool.options[0], second="Replace existing files")
    print(builder.render(tool))

Rendering is a pure function of (tree, command, width, customizations): the
tree is never modified, and customizations are only read while writing. Misuse
(missing command, symbol or layout; symbols of an unknown kind) raises a
helpwright.faults exception before anything is written.
"""
import io
import logging
import sys
from collections import namedtuple

from rich.console import Console
from rich.text import Text

from . import columns, labels, sections, usage
from .faults import *
from .resources import getstring
from .symbols import Argument, Command, Option, Symbol
from .utils import *
from .wrapping import wrap

logger = logging.getLogger(__name__)


class HelpContext(namedtuple("HelpContext", ("builder", "command", "output"))):
    """
    Everything a section needs for one write() call.

    - builder: the HelpBuilder doing the rendering.
    - command: the command whose help is written.
    - output: text sink (anything with a write(str) method).
    """
    __slots__ = ()


class Customization(namedtuple("Customization", ("first", "second", "default"))):
    """
    Overrides registered for one symbol.

    Each field is None or a callable taking the HelpContext and returning a
    string (or None to fall back to the default rendering).
    """
    __slots__ = ()


def _resolver(object, name, /):
    """
    Normalize a customization argument into None or a context callable.

    Strings become constant callables; Unset and None mean “no override”.
    """
    if object is Unset or object is None:
        return None
    if isinstance(object, str):
        return rename(lambda context: object, name)
    if callable(object):
        return object
    raise InvalidCustomizationError(f"customization {name!r} must be a string or a callable, not {type(object).__name__}")


class HelpBuilder:
    """
    Formats help output describing how to use a command-line tool.

    Parameters
    - max_width: int | Unset
      Column at which output wraps. Missing or non-positive values mean
      “unbounded” (sys.maxsize) so nothing ever wraps.
    """

    def __init__(self, max_width=Unset, /):
        if max_width is not Unset and not isinstance(max_width, int):
            raise TypeError("HelpBuilder max_width must be an integer")
        self._max_width = max_width if max_width is not Unset and max_width > 0 else sys.maxsize
        self._customizations = {}
        self._layout = None

    @property
    def max_width(self):
        return self._max_width

    def __repr__(self):
        return f"help-builder(max_width={self._max_width!r}, customizations={len(self._customizations)})"

    def customize_symbol(self, symbol, /, first=Unset, second=Unset, default=Unset):
        """
        Register overrides for one symbol, replacing earlier ones.

        Parameters
        - first: label shown in the first column.
        - second: description shown in the second column. For options and
          commands a customized description also hides the default value.
        - default: text of the default value. A default registered on an option
          or command wins over one registered on its argument.
        Each may be a string or a callable taking the HelpContext.

        Raises
        - MissingSymbolError: symbol is None.
        """
        if symbol is None:
            raise MissingSymbolError("customize_symbol() requires a symbol")
        if not isinstance(symbol, Symbol):
            raise UnsupportedSymbolError(f"cannot customize {type(symbol).__name__} objects")
        self._customizations[symbol] = Customization(
            _resolver(first, "first"),
            _resolver(second, "second"),
            _resolver(default, "default"),
        )

    def customize_layout(self, layout, /):
        """
        Replace the default section order.

        layout(context) returns the sections to write, in order; each is a
        callable section(context) -> bool or the name of a registered section
        (see helpwright.sections.SECTIONS).

        Raises
        - MissingLayoutError: layout is None.
        """
        if layout is None:
            raise MissingLayoutError("customize_layout() requires a layout callable")
        if not callable(layout):
            raise MissingLayoutError(f"layout must be callable, not {type(layout).__name__}")
        self._layout = layout

    def write(self, command, output, /):
        """
        Write the help of command to output.

        Hidden commands produce no output. Every section that reports output is
        followed by one blank line.

        Raises
        - MissingCommandError: command is None or not a Command.
        """
        if command is None:
            raise MissingCommandError("write() requires a command")
        if not isinstance(command, Command):
            raise MissingCommandError(f"write() requires a command, not {type(command).__name__}")

        if command.hidden:
            logger.debug("skipping help of hidden command %r", command.name)
            return

        context = HelpContext(self, command, output)
        logger.debug("writing help of %r at width %d", command.name, self._max_width)

        for section in self._sections(context):
            written = section(context)
            logger.debug("section %s %s", getattr(section, "__name__", section), "written" if written else "empty")
            if written:
                output.write("\n")

    def render(self, command, /):
        """
        Return the help of command as a string.
        """
        output = io.StringIO()
        self.write(command, output)
        return output.getvalue()

    def _sections(self, context):
        if self._layout is None:
            return sections.layout(context)
        resolved = []
        for section in self._layout(context):
            if isinstance(section, str):
                try:
                    section = sections.SECTIONS[section]
                except KeyError:
                    raise UnknownSectionError(f"no section is registered as {section!r}") from None
            elif not callable(section):
                raise UnknownSectionError(f"sections must be callables or names, not {type(section).__name__}")
            resolved.append(section)
        return resolved

    def get_usage(self, command, /):
        return usage.format_usage(command)

    def write_heading(self, heading, descr, output, /):
        """
        Write a heading line, then descr wrapped and indented under it.

        Blank headings and blank descriptions are skipped.
        """
        if heading and not heading.isspace():
            output.write(heading + "\n")

        if descr and not descr.isspace():
            for line in wrap(descr, max(self._max_width - len(columns.INDENT), 1)):
                output.write(columns.INDENT + line + "\n")

    def write_columns(self, rows, context, /):
        """
        Write rows aligned in two columns at this builder's width.
        """
        columns.write_columns(list(rows), self._max_width, context.output)

    def get_row(self, symbol, context, /):
        """
        Build the help row of an option, command or argument.

        Raises
        - MissingSymbolError: symbol is None.
        - UnsupportedSymbolError: symbol is of another kind.
        """
        if symbol is None:
            raise MissingSymbolError("get_row() requires a symbol")

        customization = self._customizations.get(symbol)

        match symbol:
            case Option() | Command():
                return self._identifier_row(symbol, customization, context)
            case Argument():
                return self._argument_row(symbol, customization, context)
            case _:
                raise UnsupportedSymbolError(f"symbol type {type(symbol).__name__} is not supported")

    def _identifier_row(self, symbol, customization, context):
        first = _invoke(customization, "first", context)
        if first is None:
            first = labels.option_label(symbol) if isinstance(symbol, Option) else labels.command_label(symbol)

        customized = _invoke(customization, "second", context)
        descr = customized if customized is not None else (symbol.descr or "")

        # A customized description replaces the default value as well.
        default = self._identifier_default(symbol, context) if customized is None else ""

        return columns.Row(first, f"{descr} {default}".strip())

    def _argument_row(self, argument, customization, context):
        first = _invoke(customization, "first", context)
        if first is None:
            first = labels.argument_label(argument)

        descr = _invoke(customization, "second", context)
        if descr is None:
            descr = argument.descr or ""

        default = ""
        if argument.has_default and (value := self._argument_default(context.command, argument, True, context)):
            default = f"[{value}]"

        return columns.Row(first, f"{descr} {default}".strip())

    def _identifier_default(self, symbol, context):
        parameters = [symbol.argument] if isinstance(symbol, Option) else symbol.arguments
        candidates = [parameter for parameter in parameters if not parameter.hidden and parameter.has_default]

        contributors = [
            parameter for parameter in candidates if self._argument_default(symbol, parameter, False, context)
        ]
        if not contributors:
            return ""
        if len(contributors) == 1:
            return f"[{self._argument_default(symbol, contributors[0], True, context)}]"
        return "[" + ", ".join(self._argument_default(symbol, parameter, False, context) for parameter in contributors) + "]"

    def _argument_default(self, parent, parameter, single, context):
        """
        "default: value" (single) or "name: value" for parameter, or "".

        Lookup order: default customized on parent, on parameter, then the
        parameter's own default value.
        """
        value = _invoke(self._customizations.get(parent), "default", context)
        if value is None:
            value = _invoke(self._customizations.get(parameter), "default", context)
        if value is None:
            value = labels.format_default(parameter.getdefault()) if parameter.has_default else None

        if not value or value.isspace():
            return ""

        label = getstring("default-value-label") if single else parameter.name
        return f"{label}: {value}"


def _invoke(customization, field, context):
    if customization is None or (function := getattr(customization, field)) is None:
        return None
    return function(context)


def print_help(command, /, console=Unset):
    """
    Print the help of command through a rich console, wrapped at its width.

    Help is plain text: markup and highlighting are disabled so option names
    and brackets come out exactly as rendered.
    """
    console = Console() if console is Unset else console
    text = HelpBuilder(console.width).render(command)
    console.print(Text(text, end=""), markup=False, highlight=False, soft_wrap=True, end="")


__all__ = (
    "HelpContext",
    "Customization",
    "HelpBuilder",
    "print_help",
)
