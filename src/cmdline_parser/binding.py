from __future__ import annotations
from copy import copy
from typing import Any, Callable, List, Optional, Union
from cmdline_parser.exceptions import CommandLineException
from cmdline_parser.messages import Messages


class FieldArgumentBind:
    """
    Binding of an argument to a field of a target object; the field is set via setattr,
    or, if the target is a dictionary, via item assignment.
    """
    def __init__(self, target: Any, field: str) -> None:
        self._target = target
        self._field = field

    @property
    def target(self) -> Any:
        return self._target

    @property
    def field(self) -> str:
        return self._field

    def get(self) -> Any:
        if isinstance(self._target, dict):
            return self._target.get(self._field)
        return getattr(self._target, self._field, None)

    def set(self, value: Any) -> None:
        if isinstance(self._target, dict):
            self._target[self._field] = value
        else:
            setattr(self._target, self._field, value)

    def __repr__(self) -> str:
        return f"FieldArgumentBind({type(self._target).__name__}.{self._field})"


BindTarget = Union[FieldArgumentBind, Callable[[Any], None]]


def update_bind(bind: Optional[BindTarget], value: Any, argument_name: str) -> None:
    if bind is None:
        return
    try:
        if isinstance(bind, FieldArgumentBind):
            bind.set(value)
        else:
            bind(value)
    except Exception as e:
        if isinstance(bind, FieldArgumentBind):
            raise CommandLineException(Messages.BINDING.format(argument_name, bind.field, bind.target)) from e
        raise CommandLineException(Messages.BINDING.format(argument_name, getattr(bind, "__name__", "<callable>"),
                                                           getattr(bind, "__self__", None))) from e


def extract_argument_attributes(parser: Any, target: Any) -> List[Any]:
    """
    Searches the class of the given target object for attributes declared with an Argument value, e.g.:

      class Options:
          verbose = SwitchArgument("v", "verbose", default_value=False)
          level = ValueArgument("l", "level", value_type=int, default_value=1)
          certifications = [ArgumentGroupCertification("v,l", ArgumentGroupCondition.AT_LEAST_ONE_USED)]

    For each such attribute, a copy of the argument is added to the given parser, bound to the same named
    attribute of the target object, so that after parsing the target holds the parsed (or default) values.
    Any ArgumentCertification objects in a class attribute named certifications are added to the parser.
    Returns the list of arguments added.
    """
    from cmdline_parser.arguments.argument import Argument
    from cmdline_parser.certifications.certification import ArgumentCertification
    arguments = []
    for cls in reversed(type(target).__mro__):
        for name, value in vars(cls).items():
            if isinstance(value, Argument):
                if (existing := next((item for item in arguments if item[0] == name), None)) is not None:
                    arguments.remove(existing)
                arguments.append((name, value))
    added_arguments = []
    for name, declared_argument in arguments:
        argument = declared_argument.clone()
        argument.bind = FieldArgumentBind(target, name)
        parser.arguments.append(argument)
        added_arguments.append(argument)
    if isinstance(certifications := getattr(type(target), "certifications", None), (list, tuple)):
        for certification in certifications:
            if isinstance(certification, ArgumentCertification):
                parser.certifications.append(copy(certification))
    return added_arguments
