# Command-line tool to try out a command-line definition (see cmdline_parser.definitions) against a command line;
# usage: cmdline-parser [--nocolor] [--usage] [--omitted] DEFINITIONS-FILE -- [ARGUMENTS...]
# Prints the usage of the defined command line if --usage is given; and parses the given ARGUMENTS
# (everything after the --) against the definitions and prints the results; or the error if any.

import sys
from typing import List, Optional
from cmdline_parser.additional_arguments import AdditionalArgumentsSettings
from cmdline_parser.arguments.file_argument import FileArgument
from cmdline_parser.arguments.switch_argument import SwitchArgument
from cmdline_parser.chars import chars
from cmdline_parser.definitions import create_parser
from cmdline_parser.exceptions import CommandLineException
from cmdline_parser.parser import CommandLineParser
from cmdline_parser.terminal_utils import error_color


class CommandLineParserArgs:
    nocolor = SwitchArgument("nocolor", description="Do not color the output.")
    usage = SwitchArgument("usage", description="Print the usage of the defined command line.")
    omitted = SwitchArgument("omitted", description="Also show the defined arguments which were not given.")


def main(argv: Optional[List[str]] = None) -> int:

    if argv is None:
        argv = sys.argv[1:]
    if "--" in argv:
        index = argv.index("--")
        argv, args = argv[:index], argv[index + 1:]
    else:
        args = []

    cli_args = CommandLineParserArgs()
    definitions_argument = FileArgument("definitions", description="Command-line definitions file (YAML or JSON).",
                                        optional=False)
    cli_parser = CommandLineParser(additional_arguments_settings=AdditionalArgumentsSettings(
        typed_additional_arguments=[definitions_argument]))
    cli_parser.accept_slash = False
    cli_parser.show_usage_header = "cmdline-parser: parse a command line against a definitions file"
    cli_parser.show_usage_footer = ("usage: cmdline-parser [--nocolor] [--usage] [--omitted]"
                                    " DEFINITIONS-FILE -- [ARGUMENTS...]")
    cli_parser.extract_argument_attributes(cli_args)

    try:
        if not cli_parser.parse(argv):
            return 0
    except CommandLineException as e:
        _error(e.message)
        cli_parser.print_usage(printf=_print, nocolor=True)
        return 1

    nocolor = cli_args.nocolor

    try:
        parser = create_parser(definitions_argument.value)
    except Exception as e:
        _error(f"Cannot load definitions file: {definitions_argument.value} {chars.dot} {e}", nocolor=nocolor)
        return 1

    if cli_args.usage:
        parser.print_usage(nocolor=nocolor)

    try:
        parser.parse(args)
    except CommandLineException as e:
        _error(e.message, nocolor=nocolor)
        return 1

    if parser.parsing_succeeded:
        parser.show_parsed_arguments(omitted=cli_args.omitted, nocolor=nocolor)
    return 0


def _print(message: str) -> None:
    print(message, file=sys.stderr)


def _error(message: str, nocolor: bool = False) -> None:
    print(error_color(f"{chars.xmark} {message}", nocolor=nocolor), file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
