from __future__ import annotations
import re
import sys
from typing import Any, Callable, Dict, List, Optional
from cmdline_parser.additional_arguments import AdditionalArgumentsSettings
from cmdline_parser.arguments.argument import Argument
from cmdline_parser.arguments.switch_argument import SwitchArgument
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.binding import extract_argument_attributes
from cmdline_parser.certifications.certification import ArgumentCertification
from cmdline_parser.exceptions import (
    CommandLineConfigurationError,
    CommandLineFormatException,
    MandatoryArgumentNotSetException,
    UnknownArgumentException
)
from cmdline_parser.messages import Messages
from cmdline_parser.type_utils import split_string


class CommandLineParser:
    """
    Parser for a command line against a set of defined arguments; e.g.:

      parser = CommandLineParser()
      parser.arguments.append(SwitchArgument("v", "verbose", "Verbose output."))
      parser.arguments.append(ValueArgument("l", "level", "Level.", value_type=int, default_value=1))
      parser.certifications.append(ArgumentGroupCertification("v,l", ArgumentGroupCondition.AT_LEAST_ONE_USED))
      parser.parse(["-v", "--level", "3", "file1", "file2"])

    Arguments are given with a single hyphen for short names (-v), a double hyphen for long names
    (--verbose), or a slash for either (/v or /verbose). Short switches may be grouped (-abc meaning
    -a -b -c); and value arguments may be given as --name=value if accept_equal_sign_syntax is set.
    The first command-line argument which is not prefixed (and all following) are the additional
    arguments (see AdditionalArgumentsSettings). Any error raises an exception derived from
    CommandLineException; parsing_succeeded is True only after a fully successful parse.
    """
    _SHORT_SWITCHES_GROUP = re.compile(r"^[a-zA-Z]+$")
    _EQUAL_SIGN_SYNTAX = re.compile(r"([^=]*)=(.*)", re.DOTALL)

    def __init__(self,
                 arguments: Optional[List[Argument]] = None,
                 certifications: Optional[List[ArgumentCertification]] = None,
                 additional_arguments_settings: Optional[AdditionalArgumentsSettings] = None) -> None:
        self.arguments = list(arguments) if arguments else []
        self.certifications = list(certifications) if certifications else []
        self.additional_arguments_settings = additional_arguments_settings or AdditionalArgumentsSettings()
        self.accept_hyphen = True
        self.accept_slash = True
        self.ignore_case = False
        self.allow_short_switch_grouping = True
        self.accept_equal_sign_syntax = False
        self.preserve_value_quotes_for_equal_sign_syntax = False
        self.equal_sign_syntax_values_separators = ",;"
        self.check_mandatory_arguments = True
        self.check_argument_certifications = True
        self.show_usage_on_empty_commandline = False
        self.show_usage_commands = ["--help", "/?", "/help"]
        self.show_usage_header = None
        self.show_usage_footer = None
        self.parsing_succeeded = False
        self._args_not_parsed = []
        self._short_name_lookup = None
        self._long_name_lookup = None
        self._ignore_case_lookup = None

    @property
    def additional_arguments(self) -> List[str]:
        return self.additional_arguments_settings.additional_arguments

    @property
    def args_not_parsed(self) -> List[str]:
        return self._args_not_parsed

    def parse(self, args: Optional[List[str]] = None) -> bool:
        """
        Parses the given command-line arguments (default sys.argv[1:]) against the defined arguments;
        see the class comments for details. Returns True on success, or False if the usage was shown
        (for an empty command line if show_usage_on_empty_commandline is set, or for a single --help).
        """
        self.parsing_succeeded = False
        args = list(args) if args is not None else sys.argv[1:]
        for argument in self.arguments:
            argument.init()
        self.additional_arguments_settings.init()
        self._args_not_parsed = list(args)
        self._build_lookup_tables()
        args = self._expand_equal_sign_syntax(args)
        args = self._expand_short_switches(args)

        if (((not self._args_not_parsed) and self.show_usage_on_empty_commandline) or
            ((len(self._args_not_parsed) == 1) and (self._args_not_parsed[0] in self.show_usage_commands))):  # noqa
            self.show_usage()
            return False

        index = 0
        while index < len(args):
            if (argument := self._parse_argument(args[index])) is None:
                break
            index = argument.parse(args, index)
            argument.update_bound_object()
        self._parse_additional_arguments(args, index)

        for argument in self.arguments:
            if argument.supports_default_value and (not argument.parsed):
                argument.update_bound_object()

        if self.check_mandatory_arguments:
            self._check_mandatory_arguments()
        if self.check_argument_certifications:
            self._check_certifications()
        self.parsing_succeeded = True
        return True

    def lookup_argument(self, name: str) -> Optional[Argument]:
        if self._long_name_lookup is None:
            self._build_lookup_tables()
        if not (isinstance(name, str) and name):
            return None
        if len(name) == 1:
            if (argument := self._short_name_lookup.get(name)) is not None:
                return argument
        elif (argument := self._long_name_lookup.get(name)) is not None:
            return argument
        if self.ignore_case and self._ignore_case_lookup:
            return self._ignore_case_lookup.get(name.upper())
        return None

    def extract_argument_attributes(self, target: Any) -> List[Argument]:
        return extract_argument_attributes(self, target)

    def fill_descriptions_from_resource(self, resource: Any) -> None:
        """
        Replaces the full_description of each argument (including typed additional arguments) which
        has one with the string from the given resource (see cmdline_parser.resources.Resource)
        whose key is that full_description; allows the descriptions to be defined as resource keys.
        """
        for argument in self.arguments + self.additional_arguments_settings.typed_additional_arguments:
            if argument.full_description:
                argument.full_description = resource.get_string(argument.full_description)

    def print_usage(self, printf: Optional[Callable] = None, nocolor: bool = False) -> None:
        from cmdline_parser.usage import print_usage
        print_usage(self, printf=printf, nocolor=nocolor)

    def show_usage(self) -> None:
        self.print_usage()

    def show_parsed_arguments(self, omitted: bool = False, printf: Optional[Callable] = None,
                              nocolor: bool = False) -> None:
        from cmdline_parser.usage import print_parsed_arguments
        print_parsed_arguments(self, printf=printf, omitted=omitted, nocolor=nocolor)

    def _build_lookup_tables(self) -> None:
        short_name_lookup = {} ; long_name_lookup = {} ; ignore_case_lookup = {}  # noqa

        def add(lookup: Dict[str, Argument], name: str, argument: Argument) -> None:
            if name in lookup:
                raise CommandLineConfigurationError(Messages.ARG_DUPLICATE.format(name))
            lookup[name] = argument

        for argument in self.arguments:
            if argument.short_name:
                add(short_name_lookup, argument.short_name, argument)
            for alias in argument.short_aliases:
                add(short_name_lookup, alias, argument)
            if argument.long_name:
                add(long_name_lookup, argument.long_name, argument)
            for alias in argument.long_aliases:
                add(long_name_lookup, alias, argument)

        if self.ignore_case:
            for name, argument in list(short_name_lookup.items()) + list(long_name_lookup.items()):
                if (folded_name := name.upper()) in ignore_case_lookup:
                    raise CommandLineConfigurationError(Messages.ARG_IGNORE_CASE_CLASH.format(folded_name))
                ignore_case_lookup[folded_name] = argument

        self._short_name_lookup = short_name_lookup
        self._long_name_lookup = long_name_lookup
        self._ignore_case_lookup = ignore_case_lookup

    def _expand_equal_sign_syntax(self, args: List[str]) -> List[str]:
        """
        Expands any --name=value argument (for value arguments only) into --name value; for arguments
        allowing multiple values, --name=a,b expands into --name a --name b (see equal_sign_syntax_values_separators).
        """
        if not self.accept_equal_sign_syntax:
            return args
        expanded_args = []
        for arg in args:
            if not (match := self._EQUAL_SIGN_SYNTAX.match(arg)):
                expanded_args.append(arg)
                continue
            name_with_prefix = name = match.group(1)
            value = match.group(2)
            if not ((self.accept_hyphen and name.startswith("-")) or (self.accept_slash and name.startswith("/"))):
                expanded_args.append(arg)
                continue
            if self.accept_hyphen:
                name = name.lstrip("-")
            if self.accept_slash:
                name = name.lstrip("/")
            if ((not self.preserve_value_quotes_for_equal_sign_syntax) and
                (len(value) > 0) and value.startswith("\"") and value.endswith("\"")):  # noqa
                value = value.strip("\"")
            if not isinstance(argument := self.lookup_argument(name), ValueArgument):
                expanded_args.append(arg)
            elif argument.allow_multiple:
                for item in split_string(value, self.equal_sign_syntax_values_separators):
                    expanded_args.append(name_with_prefix)
                    if item:
                        expanded_args.append(item)
            else:
                expanded_args.append(name_with_prefix)
                expanded_args.append(value)
        return expanded_args

    def _expand_short_switches(self, args: List[str]) -> List[str]:
        """
        Expands any group of short switch arguments, e.g. -abc, into separate ones, e.g. -a -b -c.
        """
        if not self.allow_short_switch_grouping:
            return args
        expanded_args = []
        for arg in args:
            if not self._is_short_switches_group(arg):
                expanded_args.append(arg)
                continue
            separator = arg[0]
            for char in arg[1:]:
                if (argument := self._short_name_lookup.get(char)) is not None:
                    if not isinstance(argument, SwitchArgument):
                        raise CommandLineFormatException(Messages.BAD_ARG_IN_GROUP.format(char))
                expanded_args.append(f"{separator}{char}")
        return expanded_args

    def _is_short_switches_group(self, arg: str) -> bool:
        if len(arg) <= 2:
            return False
        if (arg[0] == "/") and (arg[1] != "/") and self.accept_slash and (self.lookup_argument(arg[1:]) is not None):
            return False
        if ("=" in arg) or (arg in self.show_usage_commands):
            return False
        if arg[0] == "-":
            return self.accept_hyphen and bool(self._SHORT_SWITCHES_GROUP.match(arg[1:]))
        if arg[0] == "/":
            return self.accept_slash and bool(self._SHORT_SWITCHES_GROUP.match(arg[1:]))
        return False

    def _parse_argument(self, arg: str) -> Optional[Argument]:
        """
        Returns the argument for the given command-line argument (i.e. with its prefix), or None if it is
        not prefixed (or its prefix is not accepted), meaning that it starts the additional arguments.
        """
        if arg.startswith("-"):
            if not self.accept_hyphen:
                return None
            if len(arg) == 1:
                raise CommandLineFormatException(Messages.FORMAT_SINGLE_HYPHEN)
            if arg[1] == "-":
                if len(name := arg[2:]) == 1:
                    raise CommandLineFormatException(Messages.FORMAT_SHORTNAME_PREFIX.format(name))
            elif len(name := arg[1:]) != 1:
                raise CommandLineFormatException(Messages.FORMAT_LONGNAME_PREFIX.format(name))
        elif arg.startswith("/"):
            if not self.accept_slash:
                return None
            if len(arg) == 1:
                raise CommandLineFormatException(Messages.FORMAT_SINGLE_SLASH)
            if arg[1] == "/":
                raise CommandLineFormatException(Messages.FORMAT_DOUBLE_SLASH)
            name = arg[1:]
        else:
            return None
        if (argument := self.lookup_argument(name)) is None:
            raise UnknownArgumentException(Messages.ARG_UNKNOWN.format(name), name)
        return argument

    def _parse_additional_arguments(self, args: List[str], index: int) -> None:
        settings = self.additional_arguments_settings
        if settings.accept_additional_arguments:
            settings.additional_arguments = args[index:]
            settings.process_arguments()
        elif index < len(args):
            raise CommandLineFormatException(Messages.ADDITIONAL_ARGUMENTS_FOUND)

    def _check_mandatory_arguments(self) -> None:
        for argument in self.arguments:
            if (not argument.optional) and (not argument.parsed):
                raise MandatoryArgumentNotSetException(Messages.ARG_MISSING_MANDATORY.format(argument.name),
                                                       argument.name)

    def _check_certifications(self) -> None:
        for certification in self.certifications:
            certification.certify(self)
