from __future__ import annotations
from typing import Any, Callable, List, Optional
from cmdline_parser.arguments.argument import Argument
from cmdline_parser.binding import FieldArgumentBind, update_bind
from cmdline_parser.converters import find_converter
from cmdline_parser.exceptions import (
    CommandLineException,
    InvalidConversionException,
    MissingArgumentValueException
)
from cmdline_parser.messages import Messages


class ValueArgument(Argument):
    """
    Argument which is followed by a value on the command line, e.g. -l 3 or --level 3 or /level 3;
    the value string is converted to value_type using the converters registered for that type
    (see cmdline_parser.converters), or using the given convert_value_handler if specified.
    If allow_multiple is True the argument may be given more than once and its
    values are collected into the values list; otherwise the single value is in value.
    If value_optional is True the argument may also appear without a following value.
    """
    supports_default_value = True

    def __init__(self,
                 short_name: Optional[str] = None,
                 long_name: Optional[str] = None,
                 description: Optional[str] = None,
                 value_type: type = str,
                 default_value: Any = None,
                 value_optional: bool = False,
                 convert_value_handler: Optional[Callable[[str], Any]] = None,
                 **kwargs) -> None:
        super().__init__(short_name, long_name, description, **kwargs)
        self.value_type = value_type
        self.convert_value_handler = convert_value_handler
        self.value_optional = value_optional is True
        self._default_value = default_value
        self._value = default_value
        self._values = []
        self._string_value = None
        self._string_values = []

    @property
    def value(self) -> Any:
        if self.allow_multiple:
            raise CommandLineException(Messages.ARG_VALUE_SINGLE_ACCESS.format(self.name))
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if self.allow_multiple:
            raise CommandLineException(Messages.ARG_VALUE_SINGLE_ACCESS.format(self.name))
        self._value = value

    @property
    def values(self) -> List[Any]:
        if not self.allow_multiple:
            raise CommandLineException(Messages.ARG_VALUE_MULTIPLE_ACCESS.format(self.name))
        return self._values

    @property
    def default_value(self) -> Any:
        return self._default_value

    @default_value.setter
    def default_value(self, value: Any) -> None:
        self._default_value = value
        if not self.parsed:
            self._value = value

    @property
    def string_value(self) -> Optional[str]:
        return self._string_value if self.parsed else None

    @property
    def string_values(self) -> List[str]:
        return self._string_values if self.parsed else []

    @property
    def value_type_name(self) -> str:
        return getattr(self.value_type, "__name__", str(self.value_type))

    @property
    def value_display(self) -> str:
        if self.allow_multiple:
            return ", ".join(str(value) for value in self._values)
        return str(self._value)

    def init(self) -> None:
        super().init()
        self._value = self._default_value
        self._values = []
        self._string_value = None
        self._string_values = []

    def parse(self, args: List[str], index: int) -> int:
        index = super().parse(args, index) + 1
        if index >= len(args):
            if self.value_optional:
                self._parsed = True
                return index
            raise MissingArgumentValueException(Messages.ARG_VALUE_MISSING_END.format(self.name), self.name)
        string_value = args[index]
        try:
            value = self.convert(string_value)
        except InvalidConversionException:
            if string_value.startswith("-"):
                # Here the token following this argument looks like another argument (and is not a valid
                # value for this one, e.g. it is not a negative number), so this argument has no value.
                if self.value_optional:
                    self._parsed = True
                    return index
                raise MissingArgumentValueException(
                    Messages.ARG_VALUE_MISSING.format(self.name, string_value), self.name)
            raise
        self._store_value(value, string_value)
        self._parsed = True
        return index + 1

    def parse_value(self, string_value: str) -> None:
        """
        Converts and stores the given string as a value of this argument, as if it followed this argument
        on the command line; used for the typed additional arguments, which appear without any name.
        """
        self._store_value(self.convert(string_value), string_value)
        self._parsed = True

    def convert(self, string_value: str) -> Any:
        """
        Converts the given string from the command line to a value of the value_type of this argument;
        raises InvalidConversionException if it cannot be converted (or if there is no converter for the type).
        """
        if callable(self.convert_value_handler):
            converter = self.convert_value_handler
        elif (converter := find_converter(self.value_type)) is None:
            raise InvalidConversionException(
                Messages.ARG_VALUE_USER_CONVERT_MISSING.format(self.value_type_name, self.name), self.name)
        try:
            value = converter(string_value)
        except (ValueError, TypeError, ArithmeticError) as e:
            raise InvalidConversionException(
                Messages.ARG_VALUE_STANDARD_CONVERT_FAILED.format(string_value, self.value_type_name), self.name) from e
        if value is None:
            raise InvalidConversionException(
                Messages.ARG_VALUE_STANDARD_CONVERT_FAILED.format(string_value, self.value_type_name), self.name)
        return value

    def update_bound_object(self) -> None:
        if self.bind is None:
            return
        if not self.allow_multiple:
            update_bind(self.bind, self._value, self.name)
            return
        if isinstance(self.bind, FieldArgumentBind):
            current_value = self.bind.get()
            if isinstance(current_value, list):
                # Here the bound field already holds a list; fill it in place.
                current_value[:] = self._values
                return
            if (current_value is not None) and (not isinstance(current_value, (tuple, Argument))):
                raise CommandLineException(Messages.BINDING_MULTIPLE.format(self.name, self.bind.field))
        update_bind(self.bind, list(self._values), self.name)

    def value_info(self) -> List[str]:
        string_value = ", ".join(self.string_values) if self.allow_multiple else self.string_value
        return [self.name, self.value_type_name, self.value_display, string_value or ""]

    def _store_value(self, value: Any, string_value: str) -> None:
        self._string_value = string_value
        self._string_values.append(string_value)
        if self.allow_multiple:
            self._values.append(value)
        else:
            self._value = value
