from __future__ import annotations
from typing import Any, List, Optional, Sequence, Union
from cmdline_parser.arguments.argument import Argument, argument_names
from cmdline_parser.exceptions import InvalidArgumentGroupException, UnknownArgumentException
from cmdline_parser.messages import Messages
from cmdline_parser.type_utils import split_string

# A group of arguments is given either directly as Argument objects or as a string of
# argument names separated by semicolons, commas, or vertical bars, e.g. "a;b;c" or "verbose|v".
ArgumentGroup = Union[Sequence[Argument], str]

_GROUP_STRING_SEPARATORS = ";,|"


class ArgumentCertification:
    """
    Abstract rule checked after the command line is parsed, over the parsed state of a group of
    arguments; certify raises an exception (derived from CommandLineException) if the rule is violated.
    The description, used in usage and error messages, may be overridden by setting it.
    """
    def __init__(self, description: Optional[str] = None) -> None:
        self._description = description

    @property
    def description(self) -> str:
        return self._description if self._description is not None else self.default_description()

    @description.setter
    def description(self, value: Optional[str]) -> None:
        self._description = value

    def default_description(self) -> str:
        return ""

    def certify(self, parser: Any) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.description})"


def get_arguments_from_group_string(parser: Any, group: str) -> List[Argument]:
    arguments = []
    for name in split_string(group, _GROUP_STRING_SEPARATORS, strip=True):
        if (argument := parser.lookup_argument(name)) is None:
            raise UnknownArgumentException(Messages.ARG_UNKNOWN.format(name), name)
        arguments.append(argument)
    return arguments


def get_group_string_from_arguments(arguments: Sequence[Argument]) -> str:
    return argument_names(arguments)


def resolve_argument_group(parser: Any, group: ArgumentGroup) -> List[Argument]:
    if isinstance(group, str):
        arguments = get_arguments_from_group_string(parser, group) if group.strip() else []
    else:
        arguments = list(group or [])
    if not arguments:
        raise InvalidArgumentGroupException(Messages.GROUP_EMPTY)
    return arguments


def group_display_string(group: ArgumentGroup) -> str:
    return group if isinstance(group, str) else get_group_string_from_arguments(group or [])


def format_description(description: str, *values: str) -> str:
    if "{0}" in description:
        return description.format(*values)
    return description
