"""Tags on photos and videos."""

from __future__ import annotations

from .base import FlickrObject
from .coerce import to_bool, to_str
from .user import User, user_from_fields


class Tag(FlickrObject):
    """A tag.

    Tags from ``photos.getInfo`` carry an id, author and the raw text; tags
    taken from the space separated ``tags`` extra only have their content.
    """

    __display__ = ("content",)

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def content(self) -> str | None:
        return to_str(self._raw.get("_content"))

    @property
    def raw_content(self) -> str | None:
        """The tag as the author typed it."""
        return to_str(self._raw.get("raw"))

    @property
    def author(self) -> User | None:
        return user_from_fields(
            self._raw.get("author"), self._raw.get("authorname"), self._caller
        )

    @property
    def is_machine_tag(self) -> bool | None:
        return to_bool(self._raw.get("machine_tag"))

    def __str__(self) -> str:
        return self.content or ""
