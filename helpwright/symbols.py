r"""
helpwright symbols: the command tree the help engine walks.

Overview
- Arity: (minimum, maximum) count of values, with the usual nargs shorthands.
- Argument: positional, value-bearing symbol.
- Option: named, value-bearing (or presence-only) symbol with aliases.
- HelpOption / VersionOption: built-in options owned by every RootCommand.
- Command: named node owning ordered arguments, options and subcommands.
- RootCommand: Command named after the running executable.

The tree is built once, up front, and is never mutated by rendering. Commands
keep a back-reference to the first command that adopted them (their parent);
arguments may be shared by several commands, options and arguments are leaves.

Metadata (sanitized on construction)
- Shared (all symbols)
  • name: non-empty string. Argument names are free text (they are only ever
    displayed); option and command names cannot contain whitespace.
  • descr: Unset | str. Kept verbatim (tabs and line breaks are meaningful to
    the wrapper); Unset becomes None.
  • hidden: bool (suppresses the symbol from every help block).
- Value-bearing (Argument/Option)
  • type: callable converter; also drives the default arity and the
    enumerated placeholder for Enum types.
  • arity: Unset | Arity | (min, max) | "?" | "*" | "+" | int.
  • default / default_factory: a default value or a zero-argument supplier.
  • choices: iterable of allowed values (duplicates rejected).
  • helpname: Unset | str, the placeholder shown in help.

Quick example
    >>> from helpwright.symbols import Argument, Command, Option
    >>> tool = Command(
    ...     "tool", "Does things.",
    ...     Argument("path", "The input file"),
    ...     Option("--verbosity", "-v", descr="Sets the verbosity"),
    ... )
    >>> tool.arguments[0].name
    'path'
"""
import builtins
import enum
import functools
import operator
import os.path
import re
import sys
import typing
from collections import namedtuple
from collections.abc import Iterable, Set

from .resources import getstring
from .utils import *

_COLLECTIONS = (list, tuple, set, frozenset)


class Arity(namedtuple("Arity", ("minimum", "maximum"))):
    """
    Minimum and maximum number of values a symbol accepts.

    Use Arity.parse() to accept the nargs shorthands:
    - "?" → (0, 1), "*" → (0, unbounded), "+" → (1, unbounded)
    - int n → (n, n)
    - (min, max) pair → as given
    """
    __slots__ = ()

    UNBOUNDED = sys.maxsize

    def __new__(cls, minimum, maximum):
        if not isinstance(minimum, int) or not isinstance(maximum, int):
            raise TypeError("arity bounds must be integers")
        if minimum < 0:
            raise ValueError("arity minimum cannot be negative")
        if maximum < minimum:
            raise ValueError("arity maximum cannot be lower than its minimum")
        return super().__new__(cls, minimum, maximum)

    @classmethod
    def parse(cls, object, /):
        match object:
            case Arity():
                return object
            case "?":
                return cls.ZERO_OR_ONE
            case "*":
                return cls.ZERO_OR_MORE
            case "+":
                return cls.ONE_OR_MORE
            case bool():
                raise TypeError("arity cannot be a boolean")
            case int():
                return cls(object, object)
            case (int() as minimum, int() as maximum):
                return cls(minimum, maximum)
            case str():
                raise ValueError("arity must be one of '?', '*' or '+'")
            case _:
                raise TypeError("arity must be an Arity, a (min, max) pair, an integer or a nargs string")

    def __repr__(self):
        maximum = "*" if self.maximum == self.UNBOUNDED else self.maximum
        return f"arity({self.minimum}, {maximum})"


Arity.ZERO = Arity(0, 0)
Arity.ZERO_OR_ONE = Arity(0, 1)
Arity.EXACTLY_ONE = Arity(1, 1)
Arity.ZERO_OR_MORE = Arity(0, Arity.UNBOUNDED)
Arity.ONE_OR_MORE = Arity(1, Arity.UNBOUNDED)


class SymbolType(type):
    """
    Metaclass giving symbols stable introspection.

    - __typename__ is derived from the class name (camel-case split with
      hyphens), e.g. "root-command".
    - Every name in __introspectable__ becomes a read-only property mirroring
      the private "_{name}" field.
    - __repr__/__rich_repr__ show __displayable__ (or __introspectable__).
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _executable():
    """
    Name of the running program: __main__.__prog__ when the host sets it,
    otherwise the file stem of sys.argv[0].
    """
    if prog := getattr(__import__("__main__"), "__prog__", None):
        return prog
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return os.path.splitext(os.path.basename(argv0))[0] or "python"


def _is_collection(type):
    origin = typing.get_origin(type) or type
    return isinstance(origin, builtins.type) and issubclass(origin, _COLLECTIONS) and not issubclass(origin, str)


def _element(type):
    """
    Item type of a collection annotation (list[Color] → Color), else type itself.
    """
    if _is_collection(type) and (arguments := typing.get_args(type)):
        return arguments[0]
    return type


def _sanitize_metadata(cls, metadata, /, *, spaced):
    """
    Internal: validate the fields every symbol has (name, descr, hidden).

    Raises
    - TypeError: name/descr are not strings.
    - ValueError: name is empty, or contains whitespace when spaced is False.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} name must be a string")
    elif not name.strip():
        raise ValueError(f"{cls.__typename__} name cannot be empty")
    elif not spaced and re.search(r"\s", name):
        raise ValueError(f"{cls.__typename__} name cannot contain whitespace")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = coalesce(descr)


def _sanitize_parametric_metadata(cls, metadata, /, *, arity):
    """
    Internal: validate value-bearing fields and resolve the default arity.

    arity is the fallback used when the caller left 'arity' Unset.
    """
    if not callable(metadata["type"]):
        raise TypeError(f"{cls.__typename__} 'type' must be callable")

    metadata["arity"] = Arity.parse(arity) if metadata["arity"] is Unset else Arity.parse(metadata["arity"])

    if metadata["default_factory"] is not Unset and not callable(metadata["default_factory"]):
        raise TypeError(f"{cls.__typename__} 'default_factory' must be callable")
    if metadata["default"] is not Unset and metadata["default_factory"] is not Unset:
        raise TypeError(f"{cls.__typename__} cannot have both 'default' and 'default_factory'")

    if not isinstance(helpname := metadata["helpname"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'helpname' must be a string")
    elif isinstance(helpname, str) and not (helpname := helpname.strip()):
        raise ValueError(f"{cls.__typename__} 'helpname' cannot be empty")
    metadata["helpname"] = coalesce(helpname)

    if not isinstance(choices := metadata["choices"], Iterable) or isinstance(choices, str):
        raise TypeError(f"{cls.__typename__} 'choices' must be an iterable of values")
    if not isinstance(choices, Set):
        sanitized = []
        for choice in choices:
            if choice in sanitized:
                raise ValueError(f"{cls.__typename__} 'choices' cannot contain duplicates")
            sanitized.append(choice)
        choices = tuple(sanitized)
    metadata["choices"] = tuple(choices)


def _default_arity(type, *, command, defaulted):
    """
    Arity used when none is declared.

    - collections: zero-or-more under a command, one-or-more as option values.
    - bool: exactly one under a command, zero (a flag) as option value.
    - otherwise: zero-or-one when a default exists, else exactly one.
    """
    if _is_collection(type):
        return Arity.ZERO_OR_MORE if command else Arity.ONE_OR_MORE
    if type is bool:
        return Arity.EXACTLY_ONE if command else Arity.ZERO
    if defaulted:
        return Arity.ZERO_OR_ONE
    return Arity.EXACTLY_ONE


class Symbol(metaclass=SymbolType):
    """
    Base of every node in the command tree (Argument, Option, Command).

    Symbols compare and hash by identity: the help engine keys its
    customizations on the symbol object itself.
    """
    __introspectable__ = (
        "name",
        "descr",
        "hidden",
    )


class Argument(Symbol):
    """
    Positional, value-bearing argument.

    Properties
    - name, descr, hidden, type, arity, choices, helpname (read-only).
    - has_default: whether a default value or factory was given.

    Methods
    - getdefault(): the default value (calling the factory each time).
    """
    __introspectable__ = (
        "name",
        "descr",
        "type",
        "arity",
        "choices",
        "helpname",
        "hidden",
    )

    def __new__(
            cls,
            name,
            descr=Unset,
            /,
            *,
            type=str,
            arity=Unset,
            default=Unset,
            default_factory=Unset,
            choices=(),
            helpname=Unset,
            hidden=False,
            _command=True,
    ):
        metadata = {
            "name": name,
            "descr": descr,
            "type": type,
            "arity": arity,
            "default": default,
            "default_factory": default_factory,
            "choices": choices,
            "helpname": helpname,
            "hidden": bool(hidden),
        }
        _sanitize_metadata(cls, metadata, spaced=True)
        _sanitize_parametric_metadata(cls, metadata, arity=_default_arity(
            type,
            command=_command,
            defaulted=default is not Unset or default_factory is not Unset,
        ))

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        return self

    @property
    def has_default(self):
        return self._default is not Unset or self._default_factory is not Unset

    def getdefault(self):
        """
        Return the default value.

        Raises
        - LookupError: the argument has no default.
        """
        if self._default_factory is not Unset:
            return self._default_factory()
        if self._default is not Unset:
            return self._default
        raise LookupError(f"{type(self).__typename__} {self.name!r} has no default value")

    @property
    def completions(self):
        """
        Closed set of accepted values as display strings, sorted; empty when
        the argument is open-ended. Explicit choices win over Enum types.
        """
        if self._choices:
            values = (choice.name if isinstance(choice, enum.Enum) else str(choice) for choice in self._choices)
        elif isinstance(element := _element(self._type), builtins.type) and issubclass(element, enum.Enum):
            values = (member.name for member in element)
        else:
            return ()
        return tuple(sorted(values, key=str.casefold))


class Option(Symbol):
    """
    Named option with one or more aliases (e.g., -v/--verbosity).

    The first name is the primary one; all names are aliases for display. The
    option's value metadata lives on an internal Argument (option.argument),
    which is the option's single parameter when default values are rendered.

    Extra properties
    - names: tuple of every alias, in declaration order.
    - required: mark the option as mandatory in help.
    - recursive: the option applies to every descendant command as well.
    """
    __introspectable__ = (
        "names",
        "descr",
        "required",
        "recursive",
        "hidden",
    )
    __displayable__ = (
        "names",
        "descr",
        "arity",
        "required",
        "recursive",
        "hidden",
    )

    def __new__(
            cls,
            *names,
            descr=Unset,
            type=str,
            arity=Unset,
            default=Unset,
            default_factory=Unset,
            choices=(),
            helpname=Unset,
            required=False,
            recursive=False,
            hidden=False,
    ):
        if not names:
            raise TypeError(f"{cls.__typename__} must specify at least one name")
        unique = []
        for alias in names:
            _sanitize_metadata(cls, {"name": alias, "descr": Unset}, spaced=False)
            if alias in unique:
                raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
            unique.append(alias)

        metadata = {
            "name": names[0],
            "names": tuple(unique),
            "descr": descr,
            "required": bool(required),
            "recursive": bool(recursive),
            "hidden": bool(hidden),
        }
        _sanitize_metadata(cls, metadata, spaced=False)

        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        self._argument = Argument(
            names[0].lstrip("-/") or names[0],
            type=type,
            arity=arity,
            default=default,
            default_factory=default_factory,
            choices=choices,
            helpname=helpname,
            _command=False,
        )
        return self

    @property
    def argument(self):
        return self._argument

    @property
    def arity(self):
        return self._argument.arity

    @property
    def aliases(self):
        return self._names


class HelpOption(Option):
    """
    Built-in, recursive -h/--help option.

    Its description comes from the "help-option-description" string unless
    one is given explicitly.
    """

    def __new__(cls, *names, descr=Unset):
        return super().__new__(
            cls,
            *(names or ("--help", "-h", "-?", "/h", "/?")),
            descr=descr,
            type=bool,
            arity=Arity.ZERO,
            recursive=True,
        )

    @property
    def descr(self):
        return self._descr or getstring("help-option-description")


class VersionOption(Option):
    """
    Built-in --version option (root command only, not recursive).
    """

    def __new__(cls, *names, descr=Unset):
        return super().__new__(
            cls,
            *(names or ("--version",)),
            descr=descr,
            type=bool,
            arity=Arity.ZERO,
        )

    @property
    def descr(self):
        return self._descr or getstring("version-option-description")


class Command(Symbol):
    """
    Named node of the command tree.

    Children (arguments, options, subcommands) are given positionally after the
    description, or attached later with add(); their order is the display order.

    Properties
    - name, descr, aliases, hidden, strict (read-only).
      strict=False means unmatched tokens are forwarded to the application
      rather than reported as errors; help then advertises additional arguments.
    - arguments, options, subcommands: tuple snapshots.
    - parent: the first command that adopted this one, or None.
    - root / path: top of the tree, and every command from the root down to self.
    """
    __introspectable__ = (
        "name",
        "descr",
        "aliases",
        "hidden",
        "strict",
        "arguments",
        "options",
        "subcommands",
        "parent",
    )
    __displayable__ = (
        "name",
        "descr",
        "aliases",
        "hidden",
        "strict",
        "arguments",
        "options",
        "subcommands",
    )

    def __new__(cls, name, descr=Unset, /, *children, aliases=(), hidden=False, strict=True):
        metadata = {
            "name": name,
            "descr": descr,
            "hidden": bool(hidden),
            "strict": bool(strict),
        }
        _sanitize_metadata(cls, metadata, spaced=False)

        if isinstance(aliases, str) or not isinstance(aliases, Iterable):
            raise TypeError(f"{cls.__typename__} 'aliases' must be an iterable of strings")
        sanitized = []
        for alias in aliases:
            _sanitize_metadata(cls, {"name": alias, "descr": Unset}, spaced=False)
            if alias == name or alias in sanitized:
                raise ValueError(f"{cls.__typename__} aliases cannot contain duplicates")
            sanitized.append(alias)
        metadata["aliases"] = tuple(sanitized)

        self = super().__new__(cls)
        for key, object in metadata.items():
            setattr(self, "_" + key, object)
        self._arguments = []
        self._options = []
        self._subcommands = []
        self._parent = None

        for child in children:
            self.add(child)
        return self

    def add(self, symbol, /):
        """
        Attach an argument, option or subcommand; returns the symbol.

        A subcommand keeps the first command that adopts it as its parent.
        Arguments may be shared between commands.

        Raises
        - TypeError: symbol is not an Argument, Option or Command.
        - ValueError: adding the command would create a cycle.
        """
        match symbol:
            case Argument():
                self._arguments.append(symbol)
            case Option():
                self._options.append(symbol)
            case Command():
                if symbol is self or symbol in self.path:
                    raise ValueError(f"{type(self).__typename__} {self.name!r} cannot contain one of its ancestors")
                self._subcommands.append(symbol)
                if symbol._parent is None:
                    symbol._parent = self
            case _:
                raise TypeError(f"{type(self).__typename__} children must be arguments, options or commands")
        return symbol

    @property
    def names(self):
        return (self._name, *self._aliases)

    @property
    def root(self):
        return self.path[0]

    @property
    def path(self):
        path = []
        current = self
        while current is not None:
            path.append(current)
            current = current._parent
        return tuple(reversed(path))


class RootCommand(Command):
    """
    Top-level command named after the running executable.

    Owns a HelpOption and a VersionOption, listed before the given children.
    """

    def __new__(cls, descr=Unset, /, *children, name=Unset, aliases=(), hidden=False, strict=True):
        return super().__new__(
            cls,
            coalesce(name) or _executable(),
            descr,
            HelpOption(),
            VersionOption(),
            *children,
            aliases=aliases,
            hidden=hidden,
            strict=strict,
        )


__all__ = (
    "Arity",
    "Symbol",
    "Argument",
    "Option",
    "HelpOption",
    "VersionOption",
    "Command",
    "RootCommand",
)
