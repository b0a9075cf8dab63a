from __future__ import annotations
from typing import List, Optional
from cmdline_parser.arguments.argument import Argument


class SwitchArgument(Argument):
    """
    Argument which takes no value; its (boolean) value is its default_value, flipped
    each time it appears on the command line, e.g. -v or --verbose or /verbose.
    """
    supports_default_value = True

    def __init__(self, short_name: Optional[str] = None, long_name: Optional[str] = None,
                 description: Optional[str] = None, default_value: bool = False, **kwargs) -> None:
        super().__init__(short_name, long_name, description, **kwargs)
        self._default_value = default_value is True
        self._value = self._default_value

    @property
    def value(self) -> bool:
        return self._value

    @value.setter
    def value(self, value: bool) -> None:
        self._value = value is True

    @property
    def default_value(self) -> bool:
        return self._default_value

    @default_value.setter
    def default_value(self, value: bool) -> None:
        self._default_value = value is True
        if not self.parsed:
            self._value = self._default_value

    @property
    def value_type_name(self) -> str:
        return "bool"

    def init(self) -> None:
        super().init()
        self._value = self._default_value

    def parse(self, args: List[str], index: int) -> int:
        index = super().parse(args, index)
        self._value = not self._value
        self._parsed = True
        return index + 1
