"""Comments on photos and videos."""

from __future__ import annotations

from datetime import datetime

from .base import FlickrObject
from .coerce import from_timestamp, to_str
from .user import User, user_from_fields


class Comment(FlickrObject):
    __display__ = ("id", "content")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def author(self) -> User | None:
        return user_from_fields(
            self._raw.get("author"),
            self._raw.get("authorname"),
            self._caller,
            realname=self._raw.get("realname"),
            iconserver=self._raw.get("iconserver"),
            iconfarm=self._raw.get("iconfarm"),
        )

    @property
    def content(self) -> str | None:
        return to_str(self._raw.get("_content"))

    @property
    def created_at(self) -> datetime | None:
        return from_timestamp(self._raw.get("datecreate"))

    @property
    def url(self) -> str | None:
        return to_str(self._raw.get("permalink"))

    def __str__(self) -> str:
        return self.content or ""
