"""Asynchronous upload tickets."""

from __future__ import annotations

from datetime import datetime

from .base import FlickrObject
from .coerce import from_timestamp, to_bool, to_int, to_str

TICKET_PENDING = 0
TICKET_COMPLETE = 1
TICKET_FAILED = 2


class Ticket(FlickrObject):
    """Status of an upload made with ``async=1``.

    ``complete`` is 0 while the upload is processed, 1 when it finished and
    2 when it failed.
    """

    __display__ = ("id", "media_id")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def status(self) -> int | None:
        return to_int(self._raw.get("complete"))

    @property
    def is_complete(self) -> bool | None:
        status = self.status
        return None if status is None else status == TICKET_COMPLETE

    @property
    def is_pending(self) -> bool | None:
        status = self.status
        return None if status is None else status == TICKET_PENDING

    @property
    def has_failed(self) -> bool | None:
        status = self.status
        return None if status is None else status == TICKET_FAILED

    @property
    def is_invalid(self) -> bool | None:
        return to_bool(self._raw.get("invalid"))

    @property
    def media_id(self) -> str | None:
        return to_str(self._raw.get("photoid"))

    @property
    def imported_at(self) -> datetime | None:
        return from_timestamp(self._raw.get("imported"))
