"""Videos."""

from __future__ import annotations

from typing import Any

from .coerce import dig, to_bool, to_int, to_str
from .media import VIDEO, Media, first_present


class Video(Media):
    """A video.

    Processing state and dimensions come from the ``video`` mapping of
    ``photos.getInfo``; playback URLs come from ``photos.getSizes``.
    """

    kind = VIDEO

    @property
    def is_ready(self) -> bool | None:
        return to_bool(dig(self._raw, "video", "ready"))

    @property
    def has_failed(self) -> bool | None:
        return to_bool(dig(self._raw, "video", "failed"))

    @property
    def is_pending(self) -> bool | None:
        return to_bool(dig(self._raw, "video", "pending"))

    @property
    def duration(self) -> int | None:
        """Length in seconds."""
        return to_int(first_present(dig(self._raw, "video", "duration"), self._raw.get("duration")))

    @property
    def width(self) -> int | None:
        return to_int(dig(self._raw, "video", "width"))

    @property
    def height(self) -> int | None:
        return to_int(dig(self._raw, "video", "height"))

    @property
    def source_url(self) -> str | None:
        """URL of the embeddable player."""
        return self._size_source("Video Player")

    @property
    def download_url(self) -> str | None:
        return self._size_source("Site MP4")

    @property
    def mobile_download_url(self) -> str | None:
        return self._size_source("Mobile MP4")

    @property
    def original_download_url(self) -> str | None:
        return self._size_source("Video Original")

    def _size_source(self, label: str) -> str | None:
        entry = self._size_entry(label)
        return to_str(entry.get("source")) if entry else None

    # Remote calls

    def get_exif(self, **params: Any) -> Video:
        return self._require_caller("get_exif").get_video_exif(self.id, **params)

    def get_favorites(self, **params: Any) -> Video:
        return self._require_caller("get_favorites").get_video_favorites(self.id, **params)

    def get_sizes(self, **params: Any) -> Video:
        return self._require_caller("get_sizes").get_video_sizes(self.id, **params)
