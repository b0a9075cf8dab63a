from __future__ import annotations
from typing import Any, Optional, Union
from cmdline_parser.arguments.argument import Argument, argument_display_name
from cmdline_parser.certifications.certification import (
    ArgumentCertification,
    ArgumentGroup,
    format_description,
    group_display_string,
    resolve_argument_group
)
from cmdline_parser.exceptions import MandatoryArgumentNotSetException
from cmdline_parser.messages import Messages


class ArgumentRequiresOtherArgumentsCertification(ArgumentCertification):
    """
    If the main argument is used then all of the required arguments must be used too; a required
    argument which was not used but which has a (non-None) default value is taken as satisfied.
    """
    def __init__(self, main_argument: Union[Argument, str], required_arguments: ArgumentGroup,
                 description: Optional[str] = None) -> None:
        super().__init__(description)
        self.main_argument = main_argument
        self.required_arguments = required_arguments

    def default_description(self) -> str:
        return Messages.GROUP_REQUIRED_BY_ANOTHER_ARGUMENT.format(argument_display_name(self.main_argument),
                                                                 group_display_string(self.required_arguments))

    def certify(self, parser: Any) -> None:
        main_argument = resolve_argument_group(parser, self.main_argument if isinstance(self.main_argument, str)
                                               else [self.main_argument])[0]
        required_arguments = resolve_argument_group(parser, self.required_arguments)
        if not main_argument.parsed:
            return
        for required_argument in required_arguments:
            if required_argument.parsed:
                continue
            if required_argument.supports_default_value and (required_argument.default_value is not None):
                continue
            raise MandatoryArgumentNotSetException(
                format_description(self.description, argument_display_name(self.main_argument),
                                   group_display_string(self.required_arguments)), required_argument.name)
