"""Lenient conversions from Flickr's JSON values.

Flickr sends most numbers as strings, flags as "1"/"0" (or 1/0), and wraps
many text values as ``{"_content": ...}``. Every function here returns None
instead of raising when the value is missing or can't be converted.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def dig(raw: Any, *keys: str) -> Any:
    """Follow ``keys`` through nested mappings, returning None on any miss."""
    value = raw
    for key in keys:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def content(value: Any) -> Any:
    """Unwrap ``{"_content": ...}`` values; other values pass through."""
    if isinstance(value, Mapping):
        return value.get("_content")
    return value


def to_int(value: Any) -> int | None:
    value = content(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            # "3.0" style values
            number = float(value)
        except (TypeError, ValueError):
            return None
        return int(number) if number.is_integer() else None


def to_float(value: Any) -> float | None:
    value = content(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def to_bool(value: Any) -> bool | None:
    """Convert Flickr's 1/0 flags into True/False.

    Returns None when the flag is absent, so callers can tell "not sent"
    apart from "false".
    """
    value = content(value)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    number = to_int(value)
    if number is None:
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        return None
    return number != 0


def to_str(value: Any) -> str | None:
    value = content(value)
    if value is None:
        return None
    return str(value)


def from_timestamp(value: Any) -> datetime | None:
    """Parse epoch seconds into an aware UTC datetime."""
    seconds = to_int(value)
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def from_datetime_string(value: Any) -> datetime | None:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` (or ``YYYY-MM-DD``) string as UTC."""
    text = to_str(value)
    if not text:
        return None
    for fmt in (DATETIME_FORMAT, DATE_FORMAT):
        try:
            return datetime.strptime(text.strip(), fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None
