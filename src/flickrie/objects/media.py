"""Accessors shared by photos and videos.

Flickr returns media in two shapes: the detailed ``photos.getInfo`` form
(nested ``dates``, ``owner``, ``visibility``...) and the flat form of list
endpoints, where optional fields are requested through ``extras``. Accessors
here understand both, so the raw response never has to be rewritten.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from .base import FlickrObject
from .coerce import (
    content,
    dig,
    from_datetime_string,
    from_timestamp,
    to_bool,
    to_float,
    to_int,
    to_str,
)
from .exif import Exif
from .license import License
from .location import Location
from .note import Note
from .tag import Tag
from .user import User, user_from_fields
from .visibility import Visibility

if TYPE_CHECKING:
    from .collection import Collection
    from .media_context import MediaContext

PHOTO = "photo"
VIDEO = "video"

FLICKR_URL = "https://www.flickr.com"

SAFETY_SAFE = 0
SAFETY_MODERATE = 1
SAFETY_RESTRICTED = 2

_FLAT_LOCATION_KEYS = ("latitude", "longitude", "accuracy", "context", "place_id", "woeid")
_FLAT_VISIBILITY_KEYS = ("ispublic", "isfriend", "isfamily")
_FLAT_GEO_PERMISSION_KEYS = {
    "geo_is_public": "ispublic",
    "geo_is_contact": "iscontact",
    "geo_is_friend": "isfriend",
    "geo_is_family": "isfamily",
}


def first_present(*values: Any) -> Any:
    """Return the first value that isn't None."""
    for value in values:
        if value is not None:
            return value
    return None


class Media(FlickrObject):
    """Base class of ``Photo`` and ``Video``; ``kind`` tells them apart."""

    kind: ClassVar[str] = ""
    __display__ = ("id", "title")

    # Identity

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
    def original_secret(self) -> str | None:
        return to_str(self._raw.get("originalsecret"))

    @property
    def original_format(self) -> str | None:
        return to_str(self._raw.get("originalformat"))

    # Description

    @property
    def title(self) -> str | None:
        return to_str(self._raw.get("title"))

    @property
    def description(self) -> str | None:
        return to_str(self._raw.get("description"))

    @property
    def media_status(self) -> str | None:
        return to_str(self._raw.get("media_status"))

    @property
    def path_alias(self) -> str | None:
        value = first_present(self._raw.get("pathalias"), dig(self._raw, "owner", "path_alias"))
        return to_str(value) or None

    @property
    def camera(self) -> str | None:
        return to_str(self._raw.get("camera")) or None

    @property
    def exif(self) -> Exif | None:
        entries = self._raw.get("exif")
        if not isinstance(entries, list):
            return None
        return Exif(entries, self._caller)

    @property
    def rotation(self) -> int | None:
        return to_int(self._raw.get("rotation"))

    @property
    def tags(self) -> list[Tag] | None:
        """Tags of this media, without machine tags."""
        tags = self._raw.get("tags")
        if isinstance(tags, dict):
            return [
                Tag(tag, self._caller)
                for tag in tags.get("tag") or []
                if not to_bool(tag.get("machine_tag"))
            ]
        if isinstance(tags, str):
            return [Tag({"_content": tag}, self._caller) for tag in tags.split()]
        return None

    @property
    def machine_tags(self) -> list[Tag] | None:
        tags = self._raw.get("tags")
        if isinstance(tags, dict):
            return [
                Tag(tag, self._caller)
                for tag in tags.get("tag") or []
                if to_bool(tag.get("machine_tag"))
            ]
        machine_tags = self._raw.get("machine_tags")
        if isinstance(machine_tags, str):
            return [Tag({"_content": tag, "machine_tag": 1}, self._caller) for tag in machine_tags.split()]
        return None

    @property
    def license(self) -> License | None:
        license_id = self._raw.get("license")
        if license_id is None:
            return None
        return License({"id": content(license_id)}, self._caller)

    @property
    def notes(self) -> list[Note] | None:
        notes = self._raw.get("notes")
        if not isinstance(notes, dict):
            return None
        return [Note(note, self._caller) for note in notes.get("note") or []]

    # Counters

    @property
    def views_count(self) -> int | None:
        return to_int(self._raw.get("views"))

    @property
    def comments_count(self) -> int | None:
        return to_int(first_present(self._raw.get("comments"), self._raw.get("count_comments")))

    # People

    @property
    def owner(self) -> User | None:
        owner = self._raw.get("owner")
        if isinstance(owner, dict):
            return User(owner, self._caller)
        return user_from_fields(
            owner,
            self._raw.get("ownername"),
            self._caller,
            iconserver=self._raw.get("iconserver"),
            iconfarm=self._raw.get("iconfarm"),
            path_alias=self._raw.get("pathalias"),
        )

    @property
    def favorites(self) -> list[User] | None:
        """Users who favorited this media (``photos.getFavorites``)."""
        people = self._raw.get("person")
        if not isinstance(people, list):
            return None
        return [User(person, self._caller) for person in people]

    @property
    def has_people(self) -> bool | None:
        return to_bool(dig(self._raw, "people", "haspeople"))

    # Geo

    @property
    def location(self) -> Location | None:
        location = self._raw.get("location")
        if isinstance(location, dict):
            return Location(location, self._caller)
        if "latitude" not in self._raw:
            return None
        flat = {k: self._raw[k] for k in _FLAT_LOCATION_KEYS if k in self._raw}
        # Items without geo data come back with zeroed coordinates
        if not to_float(flat.get("latitude")) and not to_float(flat.get("longitude")):
            return None
        return Location(flat, self._caller)

    @property
    def geo_permissions(self) -> Visibility | None:
        geoperms = self._raw.get("geoperms")
        if isinstance(geoperms, dict):
            return Visibility(geoperms, self._caller)
        flat = {
            target: self._raw[source]
            for source, target in _FLAT_GEO_PERMISSION_KEYS.items()
            if source in self._raw
        }
        return Visibility(flat, self._caller) if flat else None

    # Dates

    @property
    def posted_at(self) -> datetime | None:
        return from_timestamp(dig(self._raw, "dates", "posted"))

    @property
    def uploaded_at(self) -> datetime | None:
        return from_timestamp(first_present(self._raw.get("dateupload"), dig(self._raw, "dates", "posted")))

    @property
    def updated_at(self) -> datetime | None:
        return from_timestamp(first_present(self._raw.get("lastupdate"), dig(self._raw, "dates", "lastupdate")))

    @property
    def taken_at(self) -> datetime | None:
        return from_datetime_string(first_present(self._raw.get("datetaken"), dig(self._raw, "dates", "taken")))

    @property
    def taken_at_granularity(self) -> int | None:
        return to_int(
            first_present(
                self._raw.get("datetakengranularity"),
                dig(self._raw, "dates", "takengranularity"),
            )
        )

    # Safety and visibility

    @property
    def safety_level(self) -> int | None:
        return to_int(self._raw.get("safety_level"))

    @property
    def is_safe(self) -> bool | None:
        return self._safety_is(SAFETY_SAFE)

    @property
    def is_moderate(self) -> bool | None:
        return self._safety_is(SAFETY_MODERATE)

    @property
    def is_restricted(self) -> bool | None:
        return self._safety_is(SAFETY_RESTRICTED)

    def _safety_is(self, level: int) -> bool | None:
        current = self.safety_level
        return None if current is None else current == level

    @property
    def visibility(self) -> Visibility | None:
        visibility = self._raw.get("visibility")
        if isinstance(visibility, dict):
            return Visibility(visibility, self._caller)
        flat = {k: self._raw[k] for k in _FLAT_VISIBILITY_KEYS if k in self._raw}
        return Visibility(flat, self._caller) if flat else None

    # Permissions of the calling user

    @property
    def is_favorite(self) -> bool | None:
        return to_bool(self._raw.get("isfavorite"))

    @property
    def is_faved(self) -> bool | None:
        return to_bool(self._raw.get("is_faved"))

    @property
    def is_primary(self) -> bool | None:
        """Whether this is the primary media of the set it was listed from."""
        return to_bool(self._raw.get("isprimary"))

    @property
    def can_comment(self) -> bool | None:
        return to_bool(dig(self._raw, "editability", "cancomment"))

    @property
    def can_add_meta(self) -> bool | None:
        return to_bool(dig(self._raw, "editability", "canaddmeta"))

    @property
    def can_everyone_comment(self) -> bool | None:
        return to_bool(dig(self._raw, "publiceditability", "cancomment"))

    @property
    def can_everyone_add_meta(self) -> bool | None:
        return to_bool(dig(self._raw, "publiceditability", "canaddmeta"))

    @property
    def can_download(self) -> bool | None:
        return self._usage("candownload")

    @property
    def can_blog(self) -> bool | None:
        return self._usage("canblog")

    @property
    def can_print(self) -> bool | None:
        return self._usage("canprint")

    @property
    def can_share(self) -> bool | None:
        return self._usage("canshare")

    def _usage(self, key: str) -> bool | None:
        # photos.getSizes sends the usage flags at the top level
        return to_bool(first_present(dig(self._raw, "usage", key), self._raw.get(key)))

    # URLs

    @property
    def url(self) -> str | None:
        """URL of the media's page on Flickr."""
        urls = dig(self._raw, "urls", "url")
        if isinstance(urls, list):
            for entry in urls:
                if isinstance(entry, dict) and entry.get("type") == "photopage":
                    return to_str(entry)
        url = to_str(self._raw.get("url"))
        if url:
            return FLICKR_URL + url if url.startswith("/") else url
        media_id = self.id
        owner = self.owner
        user_part = self.path_alias or (owner.nsid if owner else None)
        if media_id is None or user_part is None:
            return None
        return f"{FLICKR_URL}/photos/{user_part}/{media_id}"

    def _size_entries(self) -> list[dict[str, Any]]:
        sizes = self._raw.get("size")
        if isinstance(sizes, list):
            return [s for s in sizes if isinstance(s, dict)]
        return []

    def _size_entry(self, label: str) -> dict[str, Any] | None:
        for entry in self._size_entries():
            if entry.get("label") == label:
                return entry
        return None

    # Remote calls

    def get_info(self, **params: Any) -> Media:
        """Fetch the full info of this media."""
        return self._require_caller("get_info").get_media_info(self.id, **params)

    def get_context(self, **params: Any) -> MediaContext:
        """Fetch the previous and next media in the owner's photostream."""
        return self._require_caller("get_context").get_media_context(self.id, **params)

    def get_comments(self, **params: Any) -> Collection:
        return self._require_caller("get_comments").get_media_comments(self.id, **params)
