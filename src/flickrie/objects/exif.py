"""EXIF data of photos and videos."""

from __future__ import annotations

from typing import Any

from .base import FlickrObject
from .coerce import content

CLEAN = "clean"
RAW = "raw"


class Exif(FlickrObject):
    """EXIF entries as returned by ``photos.getExif``.

    Example::

        photo = flickr.get_photo_exif(photo_id)
        photo.exif.get("X-Resolution")              # "180 dpi"
        photo.exif.get("X-Resolution", data="raw")  # "180"
    """

    __display__ = ("tags",)

    def __init__(self, entries: list[dict[str, Any]] | None = None, caller: Any = None) -> None:
        super().__init__({"exif": list(entries or [])}, caller)

    @property
    def _entries(self) -> list[dict[str, Any]]:
        return self._raw["exif"]

    @property
    def tags(self) -> list[str] | None:
        names = [entry.get("tag") for entry in self._entries if entry.get("tag")]
        return names or None

    def get(self, key: str, default: Any = None, data: str = CLEAN) -> Any:  # type: ignore[override]
        """Return the value of the EXIF tag ``key``.

        ``key`` is matched against the tag name first, then its label.
        With ``data="clean"`` (the default) Flickr's formatted value is
        preferred and the raw value is the fallback; ``data="raw"`` returns
        only the raw value.
        """
        entry = self._find(key)
        if entry is None:
            return default
        raw_value = content(entry.get("raw"))
        if data == RAW:
            return raw_value if raw_value is not None else default
        clean_value = content(entry.get("clean"))
        if clean_value is not None:
            return clean_value
        return raw_value if raw_value is not None else default

    def _find(self, key: str) -> dict[str, Any] | None:
        for entry in self._entries:
            if entry.get("tag") == key:
                return entry
        for entry in self._entries:
            if entry.get("label") == key:
                return entry
        return None

    def __len__(self) -> int:
        return len(self._entries)
