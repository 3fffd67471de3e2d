"""Photosets (albums)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from .base import FlickrObject
from .coerce import from_timestamp, to_bool, to_int, to_str
from .media import FLICKR_URL, first_present
from .user import User, user_from_fields

if TYPE_CHECKING:
    from .collection import Collection


class PhotoSet(FlickrObject):
    __display__ = ("id", "title")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("id"))

    @property
    def secret(self) -> str | None:
        return to_str(self._raw.get("secret"))

    @property
    def server(self) -> str | None:
        return to_str(self._raw.get("server"))

    @property
    def farm(self) -> int | None:
        return to_int(self._raw.get("farm"))

    @property
    def title(self) -> str | None:
        return to_str(self._raw.get("title"))

    @property
    def description(self) -> str | None:
        return to_str(self._raw.get("description"))

    @property
    def primary_media_id(self) -> str | None:
        return to_str(self._raw.get("primary"))

    primary_photo_id = primary_media_id
    primary_video_id = primary_media_id

    @property
    def views_count(self) -> int | None:
        return to_int(self._raw.get("count_views"))

    @property
    def comments_count(self) -> int | None:
        return to_int(self._raw.get("count_comments"))

    @property
    def photos_count(self) -> int | None:
        return to_int(first_present(self._raw.get("count_photos"), self._raw.get("photos")))

    @property
    def videos_count(self) -> int | None:
        return to_int(first_present(self._raw.get("count_videos"), self._raw.get("videos")))

    @property
    def media_count(self) -> int | None:
        if "total" in self._raw:
            return to_int(self._raw["total"])
        # photosets.getInfo counts photos and videos together in "photos"
        if "count_photos" in self._raw:
            return to_int(self._raw.get("photos"))
        photos, videos = self.photos_count, self.videos_count
        if photos is None or videos is None:
            return None
        return photos + videos

    @property
    def owner(self) -> User | None:
        return user_from_fields(
            self._raw.get("owner"),
            first_present(self._raw.get("username"), self._raw.get("ownername")),
            self._caller,
        )

    @property
    def created_at(self) -> datetime | None:
        return from_timestamp(self._raw.get("date_create"))

    @property
    def updated_at(self) -> datetime | None:
        return from_timestamp(self._raw.get("date_update"))

    @property
    def url(self) -> str | None:
        url = to_str(self._raw.get("url"))
        if url:
            return url
        owner = self.owner
        if self.id is None or owner is None:
            return None
        return f"{FLICKR_URL}/photos/{owner.nsid}/sets/{self.id}"

    @property
    def can_comment(self) -> bool | None:
        return to_bool(self._raw.get("can_comment"))

    @property
    def needs_interstitial(self) -> bool | None:
        return to_bool(self._raw.get("needs_interstitial"))

    @property
    def visibility_can_see_set(self) -> bool | None:
        return to_bool(self._raw.get("visibility_can_see_set"))

    # Remote calls

    def get_info(self, **params: Any) -> PhotoSet:
        return self._require_caller("get_info").get_set_info(self.id, **params)

    def get_media(self, **params: Any) -> Collection:
        return self._require_caller("get_media").get_media_from_set(self.id, **params)

    def get_photos(self, **params: Any) -> Collection:
        return self._require_caller("get_photos").get_photos_from_set(self.id, **params)

    def get_videos(self, **params: Any) -> Collection:
        return self._require_caller("get_videos").get_videos_from_set(self.id, **params)
