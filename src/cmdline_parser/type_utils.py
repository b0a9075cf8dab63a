from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple, Union


def to_integer(value: str) -> Optional[int]:
    if isinstance(value, str) and (value := value.strip()):
        try:
            return int(value)
        except Exception:
            pass
    return None


def to_float(value: str) -> Optional[float]:
    if isinstance(value, str) and (value := value.strip()):
        try:
            return float(value)
        except Exception:
            pass
    return None


def to_decimal(value: str) -> Optional[Decimal]:
    if isinstance(value, str) and (value := value.strip()):
        try:
            return Decimal(value)
        except InvalidOperation:
            pass
    return None


def to_bool(value: str) -> Optional[bool]:
    """
    Returns True or False for the usual spellings of a boolean (true/false, yes/no, on/off, 1/0),
    case-insensitively; returns None if the given value is not recognizable as a boolean.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and (value := value.strip().lower()):
        if value in ("true", "yes", "on", "1"):
            return True
        elif value in ("false", "no", "off", "0"):
            return False
    return None


def to_string_list(value: Union[List[str], Tuple[str, ...], str], strip: bool = True, empty: bool = True) -> List[str]:
    strings = []
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, str):
                if (strip is not False):
                    item = item.strip()
                if (empty is True) or item:
                    strings.append(item)
    elif isinstance(value, str):
        if (strip is not False):
            value = value.strip()
        if (empty is True) or value:
            strings.append(value)
    return strings


def to_non_empty_string_list(value: Union[List[str], Tuple[str, ...], str], strip: bool = True) -> List[str]:
    return to_string_list(value, strip=strip, empty=False)


def split_string(value: str, separators: str, strip: bool = False) -> List[str]:
    """
    Splits the given string on ANY of the characters in the given separators string; unlike
    str.split this treats each separator character individually. Empty pieces are retained.
    """
    if not isinstance(value, str):
        return []
    if not (isinstance(separators, str) and separators):
        return [value.strip() if strip is True else value]
    pieces = [] ; piece = ""  # noqa
    for char in value:
        if char in separators:
            pieces.append(piece.strip() if strip is True else piece)
            piece = ""
        else:
            piece += char
    pieces.append(piece.strip() if strip is True else piece)
    return pieces
