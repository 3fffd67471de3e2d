"""Helpers for working with plain mappings and request parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any


def deep_merge(base: Mapping[str, Any], other: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``other`` merged into ``base``.

    Nested mappings present on both sides are merged recursively; any other
    value from ``other`` replaces the one in ``base``. Neither argument is
    modified.
    """
    merged = dict(base)
    for key, value in other.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def except_keys(mapping: Mapping[str, Any], *keys: str) -> dict[str, Any]:
    """Return a copy of ``mapping`` without ``keys``."""
    return {k: v for k, v in mapping.items() if k not in keys}


def join_list(value: Any, separator: str = ",") -> str:
    """Join a sequence of ids into the comma-separated form Flickr expects.

    Strings are returned untouched so callers can pass an already joined list.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable):
        return separator.join(str(item) for item in value)
    return str(value)


def append_extras(extras: Any, *fields: str) -> str:
    """Add ``fields`` to an ``extras`` value, keeping existing entries first."""
    current = [e for e in join_list(extras).split(",") if e] if extras else []
    for field in fields:
        if field not in current:
            current.append(field)
    return ",".join(current)


def format_param(value: Any) -> str:
    """Format a single parameter value for the query string or form body."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, (list, tuple, set, frozenset)):
        return join_list(format_param(item) for item in value)
    return str(value)


def format_params(params: Mapping[str, Any]) -> dict[str, str]:
    """Format all parameters, dropping the ones set to ``None``."""
    return {key: format_param(value) for key, value in params.items() if value is not None}


def utc_datetime_string(value: datetime) -> str:
    """Format a datetime as a UTC ``YYYY-MM-DD HH:MM:SS`` string."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S")
