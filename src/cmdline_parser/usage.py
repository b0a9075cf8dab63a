from __future__ import annotations
from typing import Any, Callable, List, Optional
from prettytable import PrettyTable
from cmdline_parser.chars import chars
from cmdline_parser.exceptions import CommandLineException
from cmdline_parser.messages import Messages
from cmdline_parser.terminal_utils import argument_name_color, optional_marker_color, terminal_color


def print_usage(parser: Any, printf: Optional[Callable] = None, nocolor: bool = False) -> None:
    """
    Prints the usage for the given CommandLineParser; i.e. the header, each argument with its names,
    optional marker, description, example, and full description, the certification descriptions,
    and the footer. The argument names are colored unless nocolor is True.
    """
    if not callable(printf):
        printf = print
    if parser.show_usage_header:
        printf(parser.show_usage_header)
    printf(Messages.MSG_USAGE)
    for argument in parser.arguments:
        names = ", ".join(argument_name_color(name, nocolor=nocolor) for name in argument.names)
        line = f"\t{names}"
        if argument.optional:
            line += f" {optional_marker_color(Messages.MSG_OPTIONAL, nocolor=nocolor)}"
        printf(f"{line} ... {argument.description or ''}".rstrip())
        if argument.example:
            printf(f"\t{Messages.MSG_EXAMPLE_FORMAT.format(argument.example)}")
        if argument.full_description:
            printf("")
            printf(argument.full_description)
        printf("")
    if typed_additional_arguments := _typed_additional_arguments(parser):
        printf(Messages.MSG_ADDITIONAL_ARGUMENTS)
        for argument in typed_additional_arguments:
            line = f"\t{argument_name_color(argument.name, nocolor=nocolor)} ({argument.value_type_name})"
            if argument.optional:
                line += f" {optional_marker_color(Messages.MSG_OPTIONAL, nocolor=nocolor)}"
            printf(f"{line} ... {argument.description or ''}".rstrip())
        printf("")
    if parser.certifications:
        printf(Messages.CERT_REMARKS)
        for certification in parser.certifications:
            printf(f"\t{certification.description}")
        printf("")
    if parser.show_usage_footer:
        printf(parser.show_usage_footer)


def print_parsed_arguments(parser: Any, printf: Optional[Callable] = None,
                           omitted: bool = False, nocolor: bool = False) -> None:
    """
    Prints the results of the last parse of the given CommandLineParser; i.e. the command line, a table
    of the parsed arguments (and of the ones not specified if omitted is True), and the additional arguments.
    """
    if not callable(printf):
        printf = print
    printf(terminal_color(Messages.MSG_PARSING_RESULTS, bold=True, nocolor=nocolor))
    printf(f"\t{Messages.MSG_COMMAND_LINE} {' '.join(parser.args_not_parsed)}")
    printf(f"\t{Messages.MSG_PARSED_ARGUMENTS}")
    printf(_arguments_table([argument for argument in parser.arguments if argument.parsed], check=True))
    if omitted is True:
        printf(f"\t{Messages.MSG_NOT_PARSED_ARGUMENTS}")
        printf(_arguments_table([argument for argument in parser.arguments if not argument.parsed], check=False))
    if parser.additional_arguments_settings.accept_additional_arguments:
        try:
            additional_arguments = parser.additional_arguments_settings.additional_arguments
        except CommandLineException:
            additional_arguments = []
        printf(f"\t{Messages.MSG_ADDITIONAL_ARGUMENTS} {' '.join(additional_arguments) or chars.null}")
        if typed_additional_arguments := [argument for argument in _typed_additional_arguments(parser)
                                          if argument.parsed]:
            printf(_arguments_table(typed_additional_arguments, check=True))


def _arguments_table(arguments: List[Any], check: bool = True) -> str:
    table = PrettyTable()
    table.field_names = ["", "ARGUMENT", "TYPE", "VALUE", "STRING"]
    table.align = "l"
    for argument in arguments:
        table.add_row([chars.check if check else chars.xmark] +
                      [item or chars.null for item in argument.value_info()])
    return str(table)


def _typed_additional_arguments(parser: Any) -> List[Any]:
    return parser.additional_arguments_settings.typed_additional_arguments
