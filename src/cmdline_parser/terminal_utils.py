from typing import Optional
from termcolor import colored


def terminal_color(value: str,
                   color: Optional[str] = None,
                   bold: bool = False,
                   underline: bool = False,
                   nocolor: bool = False) -> str:
    if (nocolor is True) or (not isinstance(value, str)) or (not value):
        return value
    attributes = []
    if bold is True:
        attributes.append("bold")
    if underline is True:
        attributes.append("underline")
    if isinstance(color, str) and color:
        return colored(value, color.lower(), attrs=attributes)
    return colored(value, attrs=attributes)


def argument_name_color(value: str, nocolor: bool = False) -> str:
    return terminal_color(value, "cyan", bold=True, nocolor=nocolor)


def optional_marker_color(value: str, nocolor: bool = False) -> str:
    return terminal_color(value, "yellow", nocolor=nocolor)


def error_color(value: str, nocolor: bool = False) -> str:
    return terminal_color(value, "red", bold=True, nocolor=nocolor)
