"""Conversion between JSON scalars and DB-API values."""

import datetime
import math
from decimal import Decimal
from typing import Any, Sequence

JsonScalar = None | bool | int | float | str | list | dict


def encode_param(value: Any) -> Any:
    """Convert a JSON request parameter into a bind value.

    Arrays, objects and anything unrecognised bind as SQL NULL; encoding
    never fails.
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value
    return None


def encode_params(values: Sequence[Any]) -> tuple:
    """Encode positional parameters, preserving order."""
    return tuple(encode_param(v) for v in values)


def format_temporal(value: datetime.date) -> str:
    """Format a date or datetime as ``YYYY-MM-DD HH:MM:SS.ffffff``."""
    if isinstance(value, datetime.datetime):
        hour, minute, second, micro = value.hour, value.minute, value.second, value.microsecond
    else:
        hour = minute = second = micro = 0
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{hour:02d}:{minute:02d}:{second:02d}.{micro:06d}"
    )


def decode_value(value: Any) -> JsonScalar:
    """Convert a column value returned by the driver into a JSON scalar.

    Unsupported kinds (time-of-day, intervals, driver specific objects)
    come back as ``None`` instead of failing the row.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, str):
        return value
    # datetime before date: datetime subclasses date
    if isinstance(value, (datetime.datetime, datetime.date)):
        return format_temporal(value)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return str(value) if value.is_finite() else None
    return None


def decode_row(columns: Sequence[str], values: Sequence[Any]) -> dict[str, JsonScalar]:
    """Build a row mapping in column order. Duplicate names keep the last value."""
    row: dict[str, JsonScalar] = {}
    for name, value in zip(columns, values):
        row[name] = decode_value(value)
    return row
