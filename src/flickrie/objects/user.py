"""Flickr users."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from .base import FlickrObject
from .coerce import content, dig, from_datetime_string, from_timestamp, to_bool, to_int, to_str

if TYPE_CHECKING:
    from .collection import Collection

DEFAULT_BUDDY_ICON_URL = "https://www.flickr.com/images/buddyicon.gif"


class UploadStatus(FlickrObject):
    """Upload limits of the authenticated user (``people.getUploadStatus``).

    Bandwidth and file size values are in kilobytes.
    """

    __display__ = ("bandwidth_remaining", "sets_remaining")

    @property
    def bandwidth_max(self) -> int | None:
        return to_int(dig(self._raw, "bandwidth", "maxkb"))

    @property
    def bandwidth_used(self) -> int | None:
        return to_int(dig(self._raw, "bandwidth", "usedkb"))

    @property
    def bandwidth_remaining(self) -> int | None:
        return to_int(dig(self._raw, "bandwidth", "remainingkb"))

    @property
    def is_bandwidth_unlimited(self) -> bool | None:
        return to_bool(dig(self._raw, "bandwidth", "unlimited"))

    @property
    def max_filesize(self) -> int | None:
        return to_int(dig(self._raw, "filesize", "maxkb"))

    @property
    def sets_created(self) -> int | None:
        return to_int(dig(self._raw, "sets", "created"))

    @property
    def sets_remaining(self) -> int | str | None:
        """Sets the user can still create; Flickr sends "lots" for pro accounts."""
        return _count_or_text(dig(self._raw, "sets", "remaining"))

    @property
    def videos_uploaded(self) -> int | None:
        return to_int(dig(self._raw, "videos", "uploaded"))

    @property
    def videos_remaining(self) -> int | str | None:
        return _count_or_text(dig(self._raw, "videos", "remaining"))


def _count_or_text(value: Any) -> int | str | None:
    number = to_int(value)
    if number is not None:
        return number
    return to_str(value)


class User(FlickrObject):
    __display__ = ("nsid", "username")

    @property
    def id(self) -> str | None:
        return to_str(self._raw.get("nsid") or self._raw.get("id"))

    @property
    def nsid(self) -> str | None:
        return self.id

    @property
    def username(self) -> str | None:
        return to_str(self._raw.get("username"))

    @property
    def real_name(self) -> str | None:
        return to_str(self._raw.get("realname"))

    @property
    def location(self) -> str | None:
        return to_str(self._raw.get("location"))

    @property
    def description(self) -> str | None:
        return to_str(self._raw.get("description"))

    @property
    def path_alias(self) -> str | None:
        return to_str(self._raw.get("path_alias"))

    @property
    def time_zone(self) -> dict[str, str] | None:
        """The user's time zone as ``{"label": ..., "offset": ...}``."""
        zone = self._raw.get("timezone")
        if not isinstance(zone, dict):
            return None
        return {"label": zone.get("label"), "offset": zone.get("offset")}

    @property
    def icon_server(self) -> str | None:
        return to_str(self._raw.get("iconserver"))

    @property
    def icon_farm(self) -> int | None:
        return to_int(self._raw.get("iconfarm"))

    @property
    def buddy_icon_url(self) -> str | None:
        """URL of the user's buddy icon, or Flickr's default icon."""
        nsid, server, farm = self.nsid, self.icon_server, self.icon_farm
        if nsid is None or server is None:
            return None
        if to_int(server) == 0 or farm is None:
            return DEFAULT_BUDDY_ICON_URL
        return f"https://farm{farm}.staticflickr.com/{server}/buddyicons/{nsid}.jpg"

    @property
    def profile_url(self) -> str | None:
        return to_str(self._raw.get("profileurl"))

    @property
    def photos_url(self) -> str | None:
        return to_str(self._raw.get("photosurl"))

    @property
    def mobile_url(self) -> str | None:
        return to_str(self._raw.get("mobileurl"))

    @property
    def first_taken(self) -> datetime | None:
        """When the oldest photo in the user's stream was taken."""
        return from_datetime_string(dig(self._raw, "photos", "firstdatetaken"))

    @property
    def first_uploaded(self) -> datetime | None:
        return from_timestamp(dig(self._raw, "photos", "firstdate"))

    @property
    def media_count(self) -> int | None:
        return to_int(dig(self._raw, "photos", "count"))

    @property
    def media_views_count(self) -> int | None:
        return to_int(dig(self._raw, "photos", "views"))

    @property
    def is_pro(self) -> bool | None:
        return to_bool(self._raw.get("ispro"))

    @property
    def favorited_at(self) -> datetime | None:
        """When this user favorited the photo (``photos.getFavorites``)."""
        return from_timestamp(self._raw.get("favedate"))

    @property
    def upload_status(self) -> UploadStatus | None:
        if "bandwidth" not in self._raw:
            return None
        return UploadStatus(self._raw, self._caller)

    def __str__(self) -> str:
        return self.username or self.nsid or ""

    # Remote calls

    def get_info(self, **params: Any) -> User:
        """Fetch the full profile of this user."""
        return self._require_caller("get_info").get_user_info(self.nsid, **params)

    def get_media(self, **params: Any) -> Collection:
        """Fetch photos and videos from this user (needs "read" permissions)."""
        return self._require_caller("get_media").get_media_from_user(self.nsid, **params)

    def get_photos(self, **params: Any) -> Collection:
        return self._require_caller("get_photos").get_photos_from_user(self.nsid, **params)

    def get_videos(self, **params: Any) -> Collection:
        return self._require_caller("get_videos").get_videos_from_user(self.nsid, **params)

    def get_public_media(self, **params: Any) -> Collection:
        return self._require_caller("get_public_media").get_public_media_from_user(self.nsid, **params)

    def get_sets(self, **params: Any) -> Collection:
        return self._require_caller("get_sets").get_sets_from_user(self.nsid, **params)


def user_from_fields(
    nsid: Any, username: Any = None, caller: Any = None, **fields: Any
) -> User | None:
    """Build a User from loose fields (e.g. ``author``/``authorname`` pairs).

    Returns None when there is no NSID to identify the user.
    """
    if nsid is None:
        return None
    raw: dict[str, Any] = {"nsid": content(nsid)}
    if username is not None:
        raw["username"] = username
    raw.update({k: v for k, v in fields.items() if v is not None})
    return User(raw, caller)
