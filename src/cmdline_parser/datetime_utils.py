from datetime import date, datetime
from typing import Optional
from dcicutils.datetime_utils import parse_datetime_string as dcicutils_parse_datetime_string


def parse_datetime_string(value: str) -> Optional[datetime]:
    if isinstance(value, str) and (len(value) == 8) and value.isdigit():
        # Very special case to accept for example "20241206" to mean "2024-12-06".
        value = f"{value[0:4]}-{value[4:6]}-{value[6:8]}"
    elif isinstance(value, datetime):
        return value
    elif isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    return dcicutils_parse_datetime_string(value)


def parse_date_string(value: str) -> Optional[date]:
    if (value := parse_datetime_string(value)) is not None:
        return value.date()
    return None
