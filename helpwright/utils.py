"""
Small helpers shared by the symbol and builder modules.

- Unset: the "argument omitted" marker. Symbols accept None as a real default
  value, so omission needs its own falsey singleton.
- coalesce(value, fallback): swap Unset for a fallback, leave everything else.
- rename(...): give generated callables a readable __name__/__qualname__,
  either directly or as a decorator.
- mirror(name): read-only property over self._<name>, handing out frozen
  copies of container values.

    >>> coalesce(Unset, 80)
    80
    >>> coalesce(0, 80)
    0
"""
import builtins
import functools
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Type of the Unset singleton.

    Falsey, prints as "Unset" and cannot be subclassed. Calling UnsetType()
    again hands back the existing instance. Combines with types through "|" so
    isinstance(value, str | Unset) reads naturally.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __init_subclass__(cls, **options):
        raise TypeError(f"cannot subclass {UnsetType.__name__!r}")

    def __union(self, other):
        try:
            return other | UnsetType
        except TypeError:
            return NotImplemented

    __or__ = __ror__ = __union

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"


def coalesce(object, default=None, /):
    """Return default when object is Unset, object otherwise (None included)."""
    if object is Unset:
        return default
    return object


def _relabel(function, name):
    if not builtins.callable(function):
        raise TypeError(f"rename() expects a callable, got {type(function).__name__}")
    if not isinstance(name, str):
        raise TypeError(f"rename() expects a str name, got {type(name).__name__}")
    try:
        function.__name__ = function.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError(f"cannot rename {function!r}") from None
    return function


def rename(*parameters):
    """
    rename(function, name) relabels function and returns it.
    rename(name) returns a decorator doing the same.
    """
    if len(parameters) == 2:
        return _relabel(*parameters)
    if len(parameters) != 1:
        raise TypeError(f"rename() takes 1 or 2 arguments ({len(parameters)} given)")

    name, = parameters
    if not isinstance(name, str):
        raise TypeError(f"rename() expects a str name, got {type(name).__name__}")
    return _relabel(lambda function: _relabel(function, name), "rename")


def _freeze(value):
    # Named tuples keep their type; strings are sequences but already immutable.
    if isinstance(value, (str, bytes)) or hasattr(value, "_fields"):
        return value
    match value:
        case Sequence():
            return tuple(value)
        case Mapping():
            return MappingProxyType(dict(value))
        case Set():
            return frozenset(value)
    return value


def mirror(name, /):
    """Read-only property returning a frozen view of self._<name>."""
    if not isinstance(name, str):
        raise TypeError(f"mirror() expects a str name, got {type(name).__name__}")
    attribute = "_" + name
    return property(rename(lambda self: _freeze(getattr(self, attribute)), name))


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "UnsetType",
    "Unset",
)
