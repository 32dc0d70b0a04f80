"""Small general-purpose helpers for lists, strings, dates and identifiers."""

from __future__ import annotations

import calendar
import datetime as _dt
import json
import time
import uuid
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from slugify import slugify

_D = TypeVar("_D", _dt.date, _dt.datetime)


def find_in_array(items: Iterable[str], value: str) -> bool:
    """Return whether ``value`` occurs in ``items``."""
    return value in items


def str_pad_left(text: str, pad_length: int, pad_string: str) -> str:
    """Left-pad ``text`` to ``pad_length`` characters with repeats of ``pad_string``."""
    if len(text) >= pad_length:
        return text
    if not pad_string:
        raise ValueError("pad_string must not be empty")
    padding = pad_string
    while len(padding) < pad_length:
        padding += padding
    return padding[: pad_length - len(text)] + text


def trimmed_days() -> list[str]:
    """Short weekday names, Monday first, as one comma-separated entry."""
    return ["Mon,Tue,Wed,Thu,Fri,Sat,Sun"]


def name_of_days() -> list[str]:
    """Full weekday names, Monday first, as one comma-separated entry."""
    return ["Monday,Tuesday,Wednesday,Thursday,Friday,Saturday,Sunday"]


def arr_to_str_delimiter(items: Iterable[str], delimiter: str = ",") -> str:
    """Quote each distinct item in single quotes and join them with ``delimiter``."""
    unique = dict.fromkeys(items)
    return (delimiter or ",").join(f"'{item}'" for item in unique)


def first_saturday(year: int, month: int) -> int:
    """Day of the month of the first Saturday."""
    sunday_based = _dt.date(year, month, 1).isoweekday() % 7
    return 6 - sunday_based + 1


def in_array(needle: Any, haystack: Sequence[Any]) -> bool:
    """Return whether a string or integer ``needle`` occurs in ``haystack``.

    Needles of any other type are never found.
    """
    if isinstance(needle, bool) or not isinstance(needle, (str, int)):
        return False
    return needle in haystack


def get_uuid(text: str) -> uuid.UUID:
    """Parse ``text`` as a UUID, giving the nil UUID when it does not parse."""
    try:
        return uuid.UUID(text)
    except (ValueError, TypeError, AttributeError):
        return uuid.UUID(int=0)


def get_slug(text: str) -> str:
    """Slug of ``text`` followed by the current Unix time in seconds."""
    return f"{slugify(text)}-{int(time.time())}"


def _add_months(start: _D, months: int) -> _D:
    total = start.year * 12 + (start.month - 1) + months
    year, month_index = divmod(total, 12)
    first = start.replace(year=year, month=month_index + 1, day=1)
    # Overflowing days roll into the following month, as Jan 31 + 1 month = Mar 3.
    return first + _dt.timedelta(days=start.day - 1)


def calculate_end_date(start_date: _D, duration_value: int, duration_unit: str) -> _D:
    """Add ``duration_value`` days, months or years to ``start_date``."""
    if duration_unit == "day":
        return start_date + _dt.timedelta(days=duration_value)
    if duration_unit == "month":
        return _add_months(start_date, duration_value)
    if duration_unit == "year":
        return _add_months(start_date, 12 * duration_value)
    raise ValueError("invalid duration unit")


def log_pretty(data: Any) -> None:
    """Print ``data`` as indented JSON, or an error line when it cannot be encoded."""
    try:
        text = json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        print("error:", exc)
        text = ""
    print(text)


def non_empty(value: str | None) -> str | None:
    """Return ``value`` unless it is None or empty, in which case return None."""
    return value or None


__all__ = [
    "arr_to_str_delimiter",
    "calculate_end_date",
    "calendar",
    "find_in_array",
    "first_saturday",
    "get_slug",
    "get_uuid",
    "in_array",
    "log_pretty",
    "name_of_days",
    "non_empty",
    "str_pad_left",
    "trimmed_days",
] if False else [
    "arr_to_str_delimiter",
    "calculate_end_date",
    "find_in_array",
    "first_saturday",
    "get_slug",
    "get_uuid",
    "in_array",
    "log_pretty",
    "name_of_days",
    "non_empty",
    "str_pad_left",
    "trimmed_days",
]