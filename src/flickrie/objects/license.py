"""Photo licenses."""

from __future__ import annotations

from .base import FlickrObject
from .coerce import to_str


class License(FlickrObject):
    """A license, as listed by ``photos.licenses.getInfo``.

    Media objects only know the license id; ``name`` and ``url`` are filled
    when the object comes from the license list.
    """

    __display__ = ("id", "name")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def name(self) -> str | None:
        return to_str(self._raw.get("name"))

    @property
    def url(self) -> str | None:
        return to_str(self._raw.get("url")) or None

    def __str__(self) -> str:
        return self.name or self.id or ""
