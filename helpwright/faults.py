"""
helpwright faults (errors) and their rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every misuse of the help
  engine. Codes are grouped by domain so they stay searchable in logs.
- HelpException: base type carrying a message + read-only options (code, title,
  hint) that knows how to render itself through rich.
- getdoc(): optional description lookup for a code from the host application.

All faults are programming errors raised before any help output is written;
there is nothing transient here, so nothing is retried. Every concrete fault
also derives from the closest built-in exception (TypeError, LookupError,
NotImplementedError) so callers that do not know this module can still catch
them idiomatically.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes used by the help engine (stable identifiers).

    grouping
    - invalid arguments (2110x)
      • MISSING_COMMAND, MISSING_SYMBOL, MISSING_LAYOUT, INVALID_CUSTOMIZATION
    - layout (2111x)
      • UNKNOWN_SECTION
    - symbols (2112x)
      • UNSUPPORTED_SYMBOL
    """
    # --- invalid arguments (21xxx) ---
    MISSING_COMMAND         = 21101
    MISSING_SYMBOL          = 21102
    MISSING_LAYOUT          = 21103
    INVALID_CUSTOMIZATION   = 21104

    # --- layout (21xxx) ---
    UNKNOWN_SECTION         = 21111

    # --- symbols (21xxx) ---
    UNSUPPORTED_SYMBOL      = 21121

    def normalize(self):
        """Code as shown to users: the host's __codes__ label if any, else the number."""
        labels = getattr(__import__("__main__"), "__codes__", {})
        return str(labels.get(self, self.value))


class HelpException(Exception):
    """
    Base class of every help-engine fault.

    Class attributes `code`, `title` and `hint` provide defaults; any of them
    may be overridden per instance through keyword options.
    """
    code = Unset
    title = "help fault"
    hint = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = coalesce(message, "")
        self.options = MappingProxyType({
            "code": type(self).code,
            "title": type(self).title,
            "hint": type(self).hint,
        } | options)

    def __rich__(self):
        host = __import__("__main__")
        palette = defaultdict(str, {
            "prog-name": "bold white",
            "code": "bold cyan",
            "error-title": "bold red",
            "error-message": "default",
            "hint-arrow": "dim green",
            "hint": "green",
            "docs": "dim underline cyan",
        })
        palette.update(getattr(host, "__styles__", {}))

        code = self.options["code"]
        title = Text()
        title.append(getattr(host, "__prog__", "helpwright"), palette["prog-name"])
        title.append(" ")
        title.append(code.normalize() if code else "?", palette["code"])
        title.append(": ")
        title.append(self.options["title"].title(), palette["error-title"])

        lines = [Text(self.message, palette["error-message"])]
        if hint := self.options["hint"]:
            lines.append(Text("hint: ", palette["hint-arrow"]) + Text(hint, palette["hint"]))
        if code and (docs := getdoc(code)):
            lines.append(Text(docs, palette["docs"]))
        return Panel(Group(*lines), title=title, title_align="left", border_style="red")


class MissingCommandError(HelpException, TypeError):
    code = FaultCode.MISSING_COMMAND
    title = "missing command"
    hint = "pass the command whose help should be written"


class MissingSymbolError(HelpException, TypeError):
    code = FaultCode.MISSING_SYMBOL
    title = "missing symbol"
    hint = "pass the option, command or argument to describe"


class MissingLayoutError(HelpException, TypeError):
    code = FaultCode.MISSING_LAYOUT
    title = "missing layout"
    hint = "pass a callable returning the sections in display order"


class InvalidCustomizationError(HelpException, TypeError):
    code = FaultCode.INVALID_CUSTOMIZATION
    title = "invalid customization"
    hint = "use a string or a callable taking the help context"


class UnknownSectionError(HelpException, LookupError):
    code = FaultCode.UNKNOWN_SECTION
    title = "unknown section"
    hint = "use one of the names registered in helpwright.sections.SECTIONS or a callable"


class UnsupportedSymbolError(HelpException, NotImplementedError):
    code = FaultCode.UNSUPPORTED_SYMBOL
    title = "unsupported symbol"
    hint = "only options, commands and arguments have help rows"


def getdoc(code, /):
    """
    Documentation the host attached to code through a __docs__ mapping in
    __main__, or None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError(f"getdoc() expects a FaultCode, got {type(code).__name__}")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "FaultCode",
    "HelpException",
    "MissingCommandError",
    "MissingSymbolError",
    "MissingLayoutError",
    "InvalidCustomizationError",
    "UnknownSectionError",
    "UnsupportedSymbolError",
    "getdoc",
)
