from __future__ import annotations
from copy import copy
from typing import Any, Callable, List, Optional, Union
from cmdline_parser.binding import BindTarget, update_bind
from cmdline_parser.exceptions import CommandLineArgumentException, CommandLineConfigurationError
from cmdline_parser.messages import Messages


class Argument:
    """
    Abstract definition of one command-line argument; identified by a short name (one character,
    used as -x) and/or a long name (one word, used as --xyz), plus any number of aliases of either kind.
    Subclasses implement parse (consuming tokens from the command line) and the value properties.
    """
    _BAD_LONG_NAME_CHARS = ("\r", "\n", " ", "\t")

    # Set for argument types which have a default value which is pushed to
    # the bound object even when the argument does not appear on the command line.
    supports_default_value = False

    def __init__(self,
                 short_name: Optional[str] = None,
                 long_name: Optional[str] = None,
                 description: Optional[str] = None,
                 optional: bool = True,
                 allow_multiple: bool = False,
                 aliases: Optional[List[str]] = None,
                 full_description: Optional[str] = None,
                 example: Optional[str] = None,
                 bind: Optional[BindTarget] = None) -> None:
        if isinstance(short_name, str) and (len(short_name) > 1) and (long_name is None):
            # Here only a long name is given, e.g. SwitchArgument("verbose").
            long_name = short_name ; short_name = None  # noqa
        self._short_name = None
        self._long_name = None
        self._short_aliases = []
        self._long_aliases = []
        self.short_name = short_name
        self.long_name = long_name
        if (self._short_name is None) and (not self._long_name):
            raise CommandLineConfigurationError(Messages.ARG_NAME_MISSING)
        for alias in (aliases or []):
            self.add_alias(alias)
        self.description = description
        self.full_description = full_description
        self.example = example
        self.optional = optional is not False
        self.allow_multiple = allow_multiple is True
        self.bind = bind
        self._parsed = False

    @property
    def short_name(self) -> Optional[str]:
        return self._short_name

    @short_name.setter
    def short_name(self, value: Optional[str]) -> None:
        if value is not None:
            if not (isinstance(value, str) and (len(value) == 1) and (not value.isspace())):
                raise CommandLineConfigurationError(Messages.ARG_NOT_ONE_CHAR)
        self._short_name = value

    @property
    def long_name(self) -> Optional[str]:
        return self._long_name

    @long_name.setter
    def long_name(self, value: Optional[str]) -> None:
        if value is not None:
            if not isinstance(value, str) or any(char in value for char in Argument._BAD_LONG_NAME_CHARS):
                raise CommandLineConfigurationError(Messages.ARG_NOT_ONE_WORD)
        self._long_name = value or None

    @property
    def short_aliases(self) -> List[str]:
        return self._short_aliases

    @property
    def long_aliases(self) -> List[str]:
        return self._long_aliases

    @property
    def aliases(self) -> List[str]:
        return self._long_aliases + self._short_aliases

    def add_alias(self, alias: str) -> None:
        if not (isinstance(alias, str) and alias):
            raise CommandLineConfigurationError(Messages.ARG_ALIAS_EMPTY)
        if len(alias) == 1:
            if alias.isspace():
                raise CommandLineConfigurationError(Messages.ARG_NOT_ONE_CHAR)
            self._short_aliases.append(alias)
        else:
            if any(char in alias for char in Argument._BAD_LONG_NAME_CHARS):
                raise CommandLineConfigurationError(Messages.ARG_NOT_ONE_WORD)
            self._long_aliases.append(alias)

    @property
    def name(self) -> str:
        if self._short_name and self._long_name:
            return f"{self._short_name}({self._long_name})"
        return self._long_name or self._short_name or ""

    @property
    def names(self) -> List[str]:
        """
        Returns all the names of this argument, as they would appear on the command line with hyphen
        prefixes, i.e. the short name, short aliases, long name, and long aliases, in that order.
        """
        names = []
        if self._short_name:
            names.append(f"-{self._short_name}")
        names.extend(f"-{alias}" for alias in self._short_aliases)
        if self._long_name:
            names.append(f"--{self._long_name}")
        names.extend(f"--{alias}" for alias in self._long_aliases)
        return names

    @property
    def parsed(self) -> bool:
        return self._parsed

    @property
    def value(self) -> Any:
        return None

    @property
    def default_value(self) -> Any:
        return None

    @property
    def value_type_name(self) -> str:
        return ""

    @property
    def value_display(self) -> str:
        return str(self.value)

    @property
    def string_value(self) -> Optional[str]:
        return None

    def init(self) -> None:
        self._parsed = False

    def parse(self, args: List[str], index: int) -> int:
        """
        Consumes this argument (found at the given index) and any tokens following it which belong
        to it, from the given list of command-line arguments; returns the index of the next unconsumed one.
        """
        if self._parsed and (not self.allow_multiple):
            raise CommandLineArgumentException(Messages.ARG_VALUE_MULTIPLE_OCCURS.format(self.name), self.name)
        return index

    def update_bound_object(self) -> None:
        update_bind(self.bind, self.value, self.name)

    def clone(self) -> Argument:
        argument = copy(self)
        argument._short_aliases = list(self._short_aliases)
        argument._long_aliases = list(self._long_aliases)
        argument.bind = None
        argument.init()
        return argument

    def value_info(self) -> List[str]:
        return [self.name, self.value_type_name, self.value_display, self.string_value or ""]

    def print_value_info(self, printf: Optional[Callable] = None) -> None:
        if not callable(printf):
            printf = print
        printf(f"Argument: {self.name}, type: {self.value_type_name}, value: {self.value_display}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


def argument_names(arguments: List[Argument]) -> str:
    """
    Returns the given arguments as a string suitable for messages, e.g. -a|-b|--charlie.
    """
    return "|".join(argument_display_name(argument) for argument in arguments)


def argument_display_name(argument: Union[Argument, str]) -> str:
    if isinstance(argument, str):
        return argument
    if argument.short_name:
        return f"-{argument.short_name}"
    return f"--{argument.long_name}"
