from __future__ import annotations
from typing import Any, Optional
from cmdline_parser.certifications.certification import (
    ArgumentCertification,
    ArgumentGroup,
    format_description,
    group_display_string,
    resolve_argument_group
)
from cmdline_parser.exceptions import ArgumentConflictException
from cmdline_parser.messages import Messages


class DistinctGroupsCertification(ArgumentCertification):
    """
    Arguments from the first group must not be used together with arguments from the second group.
    """
    def __init__(self, first_group: ArgumentGroup, second_group: ArgumentGroup,
                 description: Optional[str] = None) -> None:
        super().__init__(description)
        self.first_group = first_group
        self.second_group = second_group

    def default_description(self) -> str:
        return Messages.GROUP_DISTINCT.format(group_display_string(self.first_group),
                                              group_display_string(self.second_group))

    def certify(self, parser: Any) -> None:
        first_arguments = resolve_argument_group(parser, self.first_group)
        second_arguments = resolve_argument_group(parser, self.second_group)
        if (any(argument.parsed for argument in first_arguments) and
            any(argument.parsed for argument in second_arguments)):  # noqa
            raise ArgumentConflictException(format_description(self.description,
                                                               group_display_string(self.first_group),
                                                               group_display_string(self.second_group)))
