from __future__ import annotations
import re
from typing import Any, Iterable, List, Optional, Pattern, Union
from cmdline_parser.arguments.value_argument import ValueArgument
from cmdline_parser.exceptions import CommandLineArgumentOutOfRangeException, CommandLineConfigurationError
from cmdline_parser.messages import Messages
from cmdline_parser.type_utils import split_string


class CertifiedValueArgument(ValueArgument):
    """
    Abstract value argument whose every value, once converted, is checked with certify, which raises
    CommandLineArgumentOutOfRangeException if the value is not acceptable, and otherwise returns the
    (possibly normalized) value to store.
    """
    def certify(self, value: Any) -> Any:
        return value

    def _store_value(self, value: Any, string_value: str) -> None:
        super()._store_value(self.certify(value), string_value)


class BoundedValueArgument(CertifiedValueArgument):

    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, value_type: type = int,
                 min_value: Any = None, max_value: Any = None, **kwargs) -> None:
        super().__init__(short_name, long_name, description, value_type=value_type, **kwargs)
        self.min_value = min_value
        self.max_value = max_value

    def certify(self, value: Any) -> Any:
        if (self.min_value is not None) and (value < self.min_value):
            raise CommandLineArgumentOutOfRangeException(
                Messages.ARG_BOUNDED_LESSER_THAN_MIN.format(value, self.min_value), self.name)
        if (self.max_value is not None) and (value > self.max_value):
            raise CommandLineArgumentOutOfRangeException(
                Messages.ARG_BOUNDED_GREATER_THAN_MAX.format(value, self.max_value), self.name)
        return value


class EnumeratedValueArgument(CertifiedValueArgument):
    """
    Value argument whose value must be one of the given allowed_values; for string arguments
    ignore_case may be set in which case the value is replaced by the matching allowed value.
    """
    _ALLOWED_VALUES_SEPARATORS = ";,"

    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, allowed_values: Optional[Iterable[Any]] = None,
                 ignore_case: bool = False, **kwargs) -> None:
        super().__init__(short_name, long_name, description, **kwargs)
        self.allowed_values = list(allowed_values) if allowed_values is not None else []
        self._ignore_case = False
        self.ignore_case = ignore_case

    @property
    def ignore_case(self) -> bool:
        return self._ignore_case

    @ignore_case.setter
    def ignore_case(self, value: bool) -> None:
        if (value is True) and (self.value_type is not str):
            raise CommandLineConfigurationError(Messages.ARG_ENUM_IGNORE_CASE.format(self.value_type_name))
        self._ignore_case = value is True

    def init_allowed_values(self, values: str) -> None:
        """
        Sets the allowed values from the given string of values separated by semicolons or commas,
        each converted to the value_type of this argument, e.g. "red;green;blue" or "1,2,3".
        """
        self.allowed_values = [self.convert(value) for value in split_string(values, self._ALLOWED_VALUES_SEPARATORS)]

    def certify(self, value: Any) -> Any:
        if self._ignore_case and isinstance(value, str):
            if (found := next((allowed_value for allowed_value in self.allowed_values
                               if str(allowed_value).lower() == value.lower()), None)) is not None:
                return found
        elif value in self.allowed_values:
            return value
        raise CommandLineArgumentOutOfRangeException(Messages.ARG_ENUM_OUT_OF_RANGE.format(value, self.name), self.name)


class RegexValueArgument(CertifiedValueArgument):

    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, regex: Optional[Union[str, Pattern]] = None,
                 sample_value: Optional[str] = None, **kwargs) -> None:
        kwargs.pop("value_type", None)
        super().__init__(short_name, long_name, description, value_type=str, **kwargs)
        self.regex = regex
        self.sample_value = sample_value

    @property
    def regex(self) -> Optional[Pattern]:
        return self._regex

    @regex.setter
    def regex(self, value: Optional[Union[str, Pattern]]) -> None:
        self._regex = re.compile(value) if isinstance(value, str) else value

    def certify(self, value: Any) -> Any:
        if (self._regex is not None) and (not self._regex.search(value)):
            if self.sample_value is None:
                raise CommandLineArgumentOutOfRangeException(
                    Messages.ARG_REGEX_MISMATCH.format(value, self._regex.pattern), self.name)
            raise CommandLineArgumentOutOfRangeException(
                Messages.ARG_REGEX_MISMATCH_SAMPLE.format(value, self._regex.pattern, self.sample_value), self.name)
        return value

    def value_info(self) -> List[str]:
        info = super().value_info()
        if self._regex is not None:
            info[1] = f"{info[1]} /{self._regex.pattern}/"
        return info
