from __future__ import annotations
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional
from uuid import UUID
from cmdline_parser.datetime_utils import parse_date_string, parse_datetime_string
from cmdline_parser.type_utils import to_bool, to_decimal, to_float, to_integer

# Maps a value type to a function converting a command-line string to a value of that type;
# a converter signals a badly formatted string by raising ValueError (or returning None).
_converters = {}


def register_converter(value_type: type, converter: Callable[[str], Any]) -> None:
    if not isinstance(value_type, type):
        raise TypeError(f"Converter value type must be a type: {value_type}")
    if not callable(converter):
        raise TypeError(f"Converter for {value_type.__name__} must be callable.")
    _converters[value_type] = converter


def unregister_converter(value_type: type) -> None:
    _converters.pop(value_type, None)


def find_converter(value_type: type) -> Optional[Callable[[str], Any]]:
    """
    Returns the function to convert a string to the given type, or None if there is none. Registered
    converters take precedence; then Enum subclasses (matched by member name, case-insensitively);
    then a type which itself defines a callable parse (e.g. a static/class method taking a string).
    """
    if not isinstance(value_type, type):
        return None
    if (converter := _converters.get(value_type)) is not None:
        return converter
    if issubclass(value_type, Enum):
        return lambda value: _convert_enum(value, value_type)
    if callable(parse := getattr(value_type, "parse", None)):
        return parse
    return None


def convert_value(value: str, value_type: type) -> Any:
    if (converter := find_converter(value_type)) is None:
        raise LookupError(f"No converter for type: {getattr(value_type, '__name__', value_type)}")
    if (converted_value := converter(value)) is None:
        raise ValueError(f"Cannot convert to {value_type.__name__}: {value}")
    return converted_value


def _convert_strict(function: Callable[[str], Any], value_type: type) -> Callable[[str], Any]:
    def convert(value: str) -> Any:  # noqa
        if (converted_value := function(value)) is None:
            raise ValueError(f"Cannot convert to {value_type.__name__}: {value}")
        return converted_value
    return convert


def _convert_enum(value: str, enum_type: type) -> Enum:
    if isinstance(value, str) and (value := value.strip()):
        for member in enum_type:
            if member.name.lower() == value.lower():
                return member
        for member in enum_type:
            if str(member.value) == value:
                return member
    raise ValueError(f"Cannot convert to {enum_type.__name__}: {value}")


def _convert_uuid(value: str) -> UUID:
    return UUID(value.strip())


def _convert_path(value: str) -> Path:
    if not value:
        raise ValueError("Empty path")
    return Path(value)


register_converter(str, lambda value: value)
register_converter(int, _convert_strict(to_integer, int))
register_converter(float, _convert_strict(to_float, float))
register_converter(Decimal, _convert_strict(to_decimal, Decimal))
register_converter(bool, _convert_strict(to_bool, bool))
register_converter(datetime, _convert_strict(parse_datetime_string, datetime))
register_converter(date, _convert_strict(parse_date_string, date))
register_converter(UUID, _convert_uuid)
register_converter(Path, _convert_path)
