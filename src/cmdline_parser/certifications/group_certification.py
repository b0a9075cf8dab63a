from __future__ import annotations
from enum import Enum
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


class ArgumentGroupCondition(Enum):
    AT_LEAST_ONE_USED = "at_least_one_used"
    EXACTLY_ONE_USED = "exactly_one_used"
    ONE_OR_NONE_USED = "one_or_none_used"
    ALL_USED = "all_used"
    ALL_OR_NONE_USED = "all_or_none_used"


_CONDITION_MESSAGES = {
    ArgumentGroupCondition.AT_LEAST_ONE_USED: Messages.GROUP_AT_LEAST_ONE_USED,
    ArgumentGroupCondition.EXACTLY_ONE_USED: Messages.GROUP_EXACTLY_ONE_USED,
    ArgumentGroupCondition.ONE_OR_NONE_USED: Messages.GROUP_ONE_OR_NONE_USED,
    ArgumentGroupCondition.ALL_USED: Messages.GROUP_ALL_USED,
    ArgumentGroupCondition.ALL_OR_NONE_USED: Messages.GROUP_ALL_OR_NONE_USED
}


class ArgumentGroupCertification(ArgumentCertification):
    """
    Checks how many of the arguments in the given group were used on the command line,
    according to the given condition, e.g. with EXACTLY_ONE_USED and the group "a,b,c"
    exactly one of -a, -b, -c must be given; raises ArgumentConflictException if not.
    """
    def __init__(self, arguments: ArgumentGroup, condition: ArgumentGroupCondition,
                 description: Optional[str] = None) -> None:
        super().__init__(description)
        if isinstance(condition, str):
            condition = ArgumentGroupCondition[condition.upper()]
        self.condition = condition
        self.arguments = arguments

    @property
    def group_string(self) -> str:
        return group_display_string(self.arguments)

    def default_description(self) -> str:
        return _CONDITION_MESSAGES[self.condition].format(self.group_string)

    def certify(self, parser: Any) -> None:
        arguments = resolve_argument_group(parser, self.arguments)
        count = sum(1 for argument in arguments if argument.parsed)
        if self.condition == ArgumentGroupCondition.AT_LEAST_ONE_USED:
            ok = count >= 1
        elif self.condition == ArgumentGroupCondition.EXACTLY_ONE_USED:
            ok = count == 1
        elif self.condition == ArgumentGroupCondition.ONE_OR_NONE_USED:
            ok = count <= 1
        elif self.condition == ArgumentGroupCondition.ALL_USED:
            ok = count == len(arguments)
        else:
            ok = (count == 0) or (count == len(arguments))
        if not ok:
            raise ArgumentConflictException(format_description(self.description, self.group_string))
