"""Neighbours of a photo or video in a photostream or set."""

from __future__ import annotations

from typing import Any

from .base import FlickrObject
from .coerce import to_int, to_str
from .mapper import map_media
from .media import Media


class MediaContext(FlickrObject):
    """The previous and next media around the one that was queried.

    Example::

        context = flickr.get_media_context(photo_id)
        context.count     # 23
        context.previous  # <Photo id='2433240' ...>
        context.next      # <Video id='1282404' ...>
    """

    __display__ = ("count", "previous", "next")

    @property
    def count(self) -> int | None:
        return to_int(self._raw.get("count"))

    @property
    def previous(self) -> Media | None:
        return self._neighbour("prevphoto")

    @property
    def next(self) -> Media | None:
        return self._neighbour("nextphoto")

    def _neighbour(self, key: str) -> Media | None:
        raw: Any = self._raw.get(key)
        # Flickr sends id "0" when there is no neighbour
        if not isinstance(raw, dict) or to_str(raw.get("id")) in (None, "", "0"):
            return None
        return map_media(raw, self._caller)
