"""
Creates a CommandLineParser from a declarative definition, given as a dictionary or as a YAML or
JSON file containing one; the form of such a definition (with all properties shown) is like this:

  options:
    ignore_case: true
    accept_equal_sign_syntax: true
    show_usage_header: "mytool: does things"
  arguments:
    - type: switch
      short: v
      long: verbose
      aliases: [chatty]
      description: Verbose output.
    - type: bounded
      short: l
      long: level
      value_type: integer
      min: 0
      max: 3
      default: 1
  certifications:
    - condition: at_least_one_used
      arguments: v,l
    - distinct: [v, q]
    - requires: o
      arguments: l
  additional:
    accept: true
    arguments:
      - type: file
        long: input
        must_exist: false
        optional: false

The argument types are: switch, value, bounded, enumerated, regex, file, directory; and the value
types are: string, integer, float, boolean, decimal, date, datetime, uuid, path. Other argument properties
are: optional, multiple, value_optional, full_description, example, allowed and ignore_case (for enumerated),
pattern and sample (for regex), must_exist (for file and directory). The condition of a group certification
is one of: at_least_one_used, exactly_one_used, one_or_none_used, all_used, all_or_none_used.
"""
from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Optional, Union
from uuid import UUID
from cmdline_parser.additional_arguments import AdditionalArgumentsSettings
from cmdline_parser.arguments.argument import Argument
from cmdline_parser.arguments.certified_value_argument import (
    BoundedValueArgument,
    EnumeratedValueArgument,
    RegexValueArgument
)
from cmdline_parser.arguments.file_argument import DirectoryArgument, FileArgument
from cmdline_parser.arguments.switch_argument import SwitchArgument
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.certifications.certification import ArgumentCertification
from cmdline_parser.certifications.distinct_groups_certification import DistinctGroupsCertification
from cmdline_parser.certifications.group_certification import ArgumentGroupCertification, ArgumentGroupCondition
from cmdline_parser.certifications.requires_other_arguments_certification import (
    ArgumentRequiresOtherArgumentsCertification
)
from cmdline_parser.converters import convert_value
from cmdline_parser.exceptions import CommandLineConfigurationError
from cmdline_parser.parser import CommandLineParser
from cmdline_parser.resources import load_data_file
from cmdline_parser.type_utils import to_non_empty_string_list

ARGUMENT_TYPES = {
    "switch": SwitchArgument,
    "value": ValueArgument,
    "bounded": BoundedValueArgument,
    "enumerated": EnumeratedValueArgument,
    "regex": RegexValueArgument,
    "file": FileArgument,
    "directory": DirectoryArgument
}

VALUE_TYPES = {
    "string": str,
    "integer": int,
    "float": float,
    "boolean": bool,
    "decimal": Decimal,
    "date": date,
    "datetime": datetime,
    "uuid": UUID,
    "path": Path
}

PARSER_OPTIONS = (
    "accept_hyphen",
    "accept_slash",
    "ignore_case",
    "allow_short_switch_grouping",
    "accept_equal_sign_syntax",
    "preserve_value_quotes_for_equal_sign_syntax",
    "equal_sign_syntax_values_separators",
    "check_mandatory_arguments",
    "check_argument_certifications",
    "show_usage_on_empty_commandline",
    "show_usage_commands",
    "show_usage_header",
    "show_usage_footer"
)


def create_parser(definitions: Union[dict, str, Path]) -> CommandLineParser:
    if isinstance(definitions, (str, Path)):
        definitions = load_data_file(definitions)
    if not isinstance(definitions, dict):
        raise CommandLineConfigurationError("Command-line definitions must be a dictionary.")
    parser = CommandLineParser()
    for name, value in (definitions.get("options") or {}).items():
        if name not in PARSER_OPTIONS:
            raise CommandLineConfigurationError(f"Unknown command-line parser option: {name}")
        setattr(parser, name, value)
    for argument_definition in (definitions.get("arguments") or []):
        parser.arguments.append(create_argument(argument_definition))
    for certification_definition in (definitions.get("certifications") or []):
        parser.certifications.append(create_certification(certification_definition))
    if isinstance(additional := definitions.get("additional"), dict):
        parser.additional_arguments_settings = create_additional_arguments_settings(additional)
    return parser


def create_argument(definition: dict) -> Argument:
    if not isinstance(definition, dict):
        raise CommandLineConfigurationError(f"Argument definition must be a dictionary: {definition}")
    if (argument_class := ARGUMENT_TYPES.get(argument_type := definition.get("type", "value"))) is None:
        raise CommandLineConfigurationError(f"Unknown argument type: {argument_type}")
    kwargs = {
        "short_name": str(short_name) if (short_name := definition.get("short")) is not None else None,
        "long_name": definition.get("long", definition.get("name")),
        "description": definition.get("description"),
        "aliases": to_non_empty_string_list(definition.get("aliases") or []),
        "full_description": definition.get("full_description"),
        "example": definition.get("example"),
        "optional": definition.get("optional", True) is not False,
        "allow_multiple": definition.get("multiple", False) is True
    }
    if argument_class is SwitchArgument:
        kwargs["default_value"] = definition.get("default", False) is True
        return SwitchArgument(**kwargs)
    kwargs["value_optional"] = definition.get("value_optional", False) is True
    if argument_class in (FileArgument, DirectoryArgument, RegexValueArgument):
        value_type = Path if argument_class is not RegexValueArgument else str
    elif (value_type := VALUE_TYPES.get(value_type_name := definition.get("value_type", "string"))) is None:
        raise CommandLineConfigurationError(f"Unknown argument value type: {value_type_name}")
    else:
        kwargs["value_type"] = value_type
    kwargs["default_value"] = _typed_value(definition.get("default"), value_type)
    if argument_class is BoundedValueArgument:
        kwargs["min_value"] = _typed_value(definition.get("min"), value_type)
        kwargs["max_value"] = _typed_value(definition.get("max"), value_type)
    elif argument_class is EnumeratedValueArgument:
        kwargs["ignore_case"] = definition.get("ignore_case", False) is True
        if isinstance(allowed := definition.get("allowed"), list):
            kwargs["allowed_values"] = [_typed_value(item, value_type) for item in allowed]
    elif argument_class is RegexValueArgument:
        kwargs["regex"] = definition.get("pattern")
        kwargs["sample_value"] = definition.get("sample")
    elif argument_class is FileArgument:
        kwargs["file_must_exist"] = definition.get("must_exist", True) is not False
    elif argument_class is DirectoryArgument:
        kwargs["directory_must_exist"] = definition.get("must_exist", True) is not False
    argument = argument_class(**kwargs)
    if (argument_class is EnumeratedValueArgument) and isinstance(allowed := definition.get("allowed"), str):
        argument.init_allowed_values(allowed)
    return argument


def create_certification(definition: dict) -> ArgumentCertification:
    if not isinstance(definition, dict):
        raise CommandLineConfigurationError(f"Certification definition must be a dictionary: {definition}")
    description = definition.get("description")
    if (condition := definition.get("condition")) is not None:
        try:
            condition = ArgumentGroupCondition[str(condition).upper()]
        except KeyError as e:
            raise CommandLineConfigurationError(f"Unknown argument group condition: {condition}") from e
        return ArgumentGroupCertification(_group(definition.get("arguments")), condition, description=description)
    if (distinct := definition.get("distinct")) is not None:
        if not (isinstance(distinct, list) and (len(distinct) == 2)):
            raise CommandLineConfigurationError(f"Distinct certification must have two argument groups: {distinct}")
        return DistinctGroupsCertification(_group(distinct[0]), _group(distinct[1]), description=description)
    if (requires := definition.get("requires")) is not None:
        return ArgumentRequiresOtherArgumentsCertification(str(requires), _group(definition.get("arguments")),
                                                           description=description)
    raise CommandLineConfigurationError(f"Unknown certification definition: {definition}")


def create_additional_arguments_settings(definition: dict) -> AdditionalArgumentsSettings:
    typed_additional_arguments = []
    for argument_definition in (definition.get("arguments") or []):
        if not isinstance(argument := create_argument(argument_definition), ValueArgument):
            raise CommandLineConfigurationError(f"Additional argument must be a value argument: {argument.name}")
        typed_additional_arguments.append(argument)
    settings = AdditionalArgumentsSettings(accept_additional_arguments=definition.get("accept", True) is not False,
                                           typed_additional_arguments=typed_additional_arguments)
    if (requested_count := definition.get("requested_count")) is not None:
        settings.requested_additional_arguments_count = requested_count
    return settings


def _group(value: Optional[Union[str, List[str]]]) -> str:
    if isinstance(value, list):
        return ",".join(to_non_empty_string_list(value))
    return str(value) if value is not None else ""


def _typed_value(value: Any, value_type: Optional[type]) -> Any:
    if (value is None) or (value_type is None):
        return value
    if isinstance(value, str) and (value_type is not str):
        try:
            return convert_value(value, value_type)
        except (LookupError, ValueError) as e:
            raise CommandLineConfigurationError(
                f"Cannot convert definition value {value} to {value_type.__name__}") from e
    if (value_type is Decimal) and isinstance(value, (int, float)):
        return Decimal(str(value))
    if (value_type is float) and isinstance(value, int) and (not isinstance(value, bool)):
        return float(value)
    return value
