"""Numbers of photos and videos in date ranges (``photos.getCounts``)."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from ..core.utils import join_list, utc_datetime_string
from .base import FlickrObject
from .coerce import from_datetime_string, from_timestamp, to_int

UNIX_TIMESTAMP = "unix"
MYSQL_DATETIME = "mysql"


class MediaCount(FlickrObject):
    """How many photos and videos fall into one date range.

    Flickr answers in the format the range was requested in: epoch seconds
    for ``dates`` and ``YYYY-MM-DD HH:MM:SS`` strings for ``taken_dates``.
    """

    __display__ = ("value", "date_range")

    def __init__(self, raw: Mapping[str, Any] | None = None, caller: Any = None, dates_kind: str = MYSQL_DATETIME) -> None:
        super().__init__(raw, caller)
        self._dates_kind = dates_kind

    @property
    def value(self) -> int | None:
        return to_int(self._raw.get("count"))

    @property
    def date_range(self) -> tuple[datetime, datetime] | None:
        parse = from_timestamp if self._dates_kind == UNIX_TIMESTAMP else from_datetime_string
        begin, end = parse(self._raw.get("fromdate")), parse(self._raw.get("todate"))
        if begin is None or end is None:
            return None
        return (begin, end)

    time_interval = date_range

    @property
    def begin(self) -> datetime | None:
        date_range = self.date_range
        return date_range[0] if date_range else None

    @property
    def end(self) -> datetime | None:
        date_range = self.date_range
        return date_range[1] if date_range else None

    @staticmethod
    def dates_kind_for(params: Mapping[str, Any]) -> str:
        """The date format Flickr will answer with for these request params."""
        return UNIX_TIMESTAMP if params.get("dates") is not None else MYSQL_DATETIME

    @staticmethod
    def normalize_params(params: Mapping[str, Any]) -> dict[str, Any]:
        """Convert datetime values of ``dates``/``taken_dates`` to Flickr's formats.

        ``dates`` become epoch seconds; ``taken_dates`` become UTC datetime
        strings. Values that are already strings are left alone.
        """
        normalized = dict(params)
        dates = normalized.get("dates")
        if dates is not None and not isinstance(dates, str):
            normalized["dates"] = join_list(
                int(d.timestamp()) if isinstance(d, datetime) else d for d in dates
            )
        taken_dates = normalized.get("taken_dates")
        if taken_dates is not None and not isinstance(taken_dates, str):
            normalized["taken_dates"] = join_list(
                utc_datetime_string(d) if isinstance(d, datetime) else d for d in taken_dates
            )
        return normalized
