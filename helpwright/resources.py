"""
Localized strings used by the help engine.

The engine never hardcodes display text: every heading and fixed token is
fetched by key through getstring(). The host application can replace any of
them by exposing a __strings__ mapping in __main__, the same way it tunes
fault codes (__codes__) and palettes (__styles__).

Keys
- description-title, usage-title, arguments-title, options-title,
  commands-title, additional-arguments-title
- additional-arguments-description
- usage-command, usage-options, usage-additional-arguments
- required-label, default-value-label
- help-option-description, version-option-description
"""
from types import MappingProxyType

STRINGS = MappingProxyType({
    # Section headings
    "description-title": "Description:",
    "usage-title": "Usage:",
    "arguments-title": "Arguments:",
    "options-title": "Options:",
    "commands-title": "Commands:",
    "additional-arguments-title": "Additional Arguments:",
    "additional-arguments-description": "Arguments passed to the application that is being run.",

    # Usage tokens
    "usage-command": "[command]",
    "usage-options": "[options]",
    "usage-additional-arguments": "[<additional arguments>]",

    # Row decorations
    "required-label": "(REQUIRED)",
    "default-value-label": "default",

    # Built-in options
    "help-option-description": "Show help and usage information",
    "version-option-description": "Show version information",
})


def getstring(key, /):
    """
    Return the display string registered under key.

    Lookup order: __main__.__strings__ (host overrides), then the built-in
    table. Unknown keys raise KeyError.
    """
    if not isinstance(key, str):
        raise TypeError("getstring() argument must be a string")
    overrides = getattr(__import__("__main__"), "__strings__", {})
    try:
        return overrides[key]
    except KeyError:
        return STRINGS[key]


__all__ = (
    "STRINGS",
    "getstring",
)
