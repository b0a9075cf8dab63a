from __future__ import annotations
from typing import List, Optional
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.exceptions import (
    CommandLineConfigurationError,
    CommandLineException,
    MissingAdditionalArgumentsException
)
from cmdline_parser.messages import Messages


class AdditionalArgumentsSettings:
    """
    Settings for the additional arguments, i.e. the trailing command-line arguments which follow all
    of the named ones (e.g. the file names in: tool -v -l 3 file1 file2). If accept_additional_arguments
    is True (the default) these are available as strings in additional_arguments after parsing; and if
    typed_additional_arguments is set (to a list of ValueArgument objects) each one is converted into
    the corresponding value argument in turn, which must then be given, unless the (only) one is optional;
    the (only) one may also allow multiple values in which case it takes all the additional arguments.
    """
    def __init__(self, accept_additional_arguments: bool = True,
                 typed_additional_arguments: Optional[List[ValueArgument]] = None) -> None:
        self.accept_additional_arguments = accept_additional_arguments is not False
        self.typed_additional_arguments = list(typed_additional_arguments) if typed_additional_arguments else []
        self._additional_arguments = None
        self._requested_additional_arguments_count = 0

    @property
    def additional_arguments(self) -> List[str]:
        if not self.accept_additional_arguments:
            raise CommandLineException(Messages.ADDITIONAL_ARGUMENTS_FORBIDDEN)
        if self._additional_arguments is None:
            raise CommandLineException(Messages.ADDITIONAL_ARGUMENTS_TOO_EARLY)
        return self._additional_arguments

    @additional_arguments.setter
    def additional_arguments(self, value: Optional[List[str]]) -> None:
        self._additional_arguments = list(value) if value is not None else None

    @property
    def requested_additional_arguments_count(self) -> int:
        return self._requested_additional_arguments_count

    @requested_additional_arguments_count.setter
    def requested_additional_arguments_count(self, value: int) -> None:
        if (not isinstance(value, int)) or (value < 0):
            raise ValueError(Messages.NONNEGATIVE)
        self._requested_additional_arguments_count = value

    def init(self) -> None:
        self._additional_arguments = []
        for typed_additional_argument in self.typed_additional_arguments:
            typed_additional_argument.init()

    def check_typed_additional_arguments(self) -> None:
        optionals = sum(1 for argument in self.typed_additional_arguments if argument.optional)
        multiples = sum(1 for argument in self.typed_additional_arguments if argument.allow_multiple)
        if (optionals > 1) or (multiples > 1):
            raise CommandLineConfigurationError(Messages.ADDITIONAL_ARGUMENTS_SLOTS)
        if ((optionals == 1) or (multiples == 1)) and (len(self.typed_additional_arguments) > 1):
            raise CommandLineConfigurationError(Messages.ADDITIONAL_ARGUMENTS_SLOTS)

    def process_arguments(self) -> None:
        """
        Converts the additional arguments into the typed additional arguments, if any.
        """
        if not (typed_additional_arguments := self.typed_additional_arguments):
            return
        self.check_typed_additional_arguments()
        additional_arguments = self.additional_arguments
        if len(additional_arguments) < len(typed_additional_arguments):
            if not ((len(typed_additional_arguments) == 1) and typed_additional_arguments[0].optional):
                raise MissingAdditionalArgumentsException(
                    Messages.NOT_ENOUGH_ADDITIONAL_ARGUMENTS.format(len(typed_additional_arguments)))
        for typed_additional_argument, additional_argument in zip(typed_additional_arguments, additional_arguments):
            typed_additional_argument.parse_value(additional_argument)
        if (len(typed_additional_arguments) == 1) and typed_additional_arguments[0].allow_multiple:
            for additional_argument in additional_arguments[1:]:
                typed_additional_arguments[0].parse_value(additional_argument)
        for typed_additional_argument in typed_additional_arguments:
            if typed_additional_argument.parsed:
                typed_additional_argument.update_bound_object()
