"""Notes placed on photos."""

from __future__ import annotations

from .base import FlickrObject
from .coerce import to_int, to_str
from .user import User, user_from_fields


class Note(FlickrObject):
    __display__ = ("id", "content")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def author(self) -> User | None:
        return user_from_fields(
            self._raw.get("author"), self._raw.get("authorname"), self._caller
        )

    @property
    def content(self) -> str | None:
        return to_str(self._raw.get("_content"))

    @property
    def coordinates(self) -> tuple[int, int] | None:
        """Top left corner of the note as an ``(x, y)`` point."""
        x, y = to_int(self._raw.get("x")), to_int(self._raw.get("y"))
        if x is None or y is None:
            return None
        return (x, y)

    @property
    def width(self) -> int | None:
        return to_int(self._raw.get("w"))

    @property
    def height(self) -> int | None:
        return to_int(self._raw.get("h"))

    def __str__(self) -> str:
        return self.content or ""
