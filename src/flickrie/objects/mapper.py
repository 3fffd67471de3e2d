"""Turning response payloads into objects.

The only real decision made here is whether a media item is a photo or a
video; list endpoints mix both. Everything else is wrapping fragments into
the right class and collecting pagination info.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..core.utils import deep_merge
from .collection import Collection
from .media import PHOTO, VIDEO, Media
from .photo import Photo
from .video import Video

if TYPE_CHECKING:
    from ..instance import Flickrie

log = logging.getLogger(__name__)

MEDIA_CLASSES: dict[str, type[Media]] = {PHOTO: Photo, VIDEO: Video}

# Set-level fields that photosets.getPhotos leaves out of each item
_INHERITED_OWNER_FIELDS = ("owner", "ownername")


def media_kind(raw: Mapping[str, Any]) -> str:
    """Decide whether a media fragment describes a photo or a video.

    The ``media`` field (added by the ``media`` extra) wins when present.
    Otherwise a nested ``video`` mapping, a ``duration`` field or a video
    entry in ``photos.getSizes`` output marks a video.
    """
    media = raw.get("media")
    if media in MEDIA_CLASSES:
        return media
    if isinstance(raw.get("video"), Mapping) or "duration" in raw:
        return VIDEO
    sizes = raw.get("size")
    if isinstance(sizes, list) and any(
        isinstance(size, Mapping) and size.get("media") == VIDEO for size in sizes
    ):
        return VIDEO
    return PHOTO


def map_media(raw: Mapping[str, Any], caller: Flickrie | None = None) -> Media:
    """Build a Photo or Video from a media fragment."""
    return MEDIA_CLASSES[media_kind(raw)](raw, caller)


def map_media_collection(
    payload: Mapping[str, Any] | None, caller: Flickrie | None = None
) -> Collection:
    """Build a collection of photos and videos from a list payload.

    ``payload`` is the mapping under ``photos`` or ``photoset``; items are
    read from its ``photo`` list.
    """
    payload = payload or {}
    inherited = {key: payload[key] for key in _INHERITED_OWNER_FIELDS if key in payload}
    items = []
    for item in _items(payload, "photo"):
        if inherited:
            item = deep_merge(inherited, item)
        items.append(map_media(item, caller))
    log.debug("Mapped %d media items", len(items))
    return Collection.from_payload(payload, items)


def map_collection(
    payload: Mapping[str, Any] | None,
    item_key: str,
    factory: Callable[..., Any],
    caller: Flickrie | None = None,
) -> Collection:
    """Build a collection of ``factory(item, caller)`` from ``payload[item_key]``."""
    payload = payload or {}
    items = [factory(item, caller) for item in _items(payload, item_key)]
    return Collection.from_payload(payload, items)


def map_list(items: Any, factory: Callable[..., Any], caller: Flickrie | None = None) -> Collection:
    """Build an unpaginated collection from a bare list of fragments."""
    return Collection(factory(item, caller) for item in _as_list(items))


def _items(payload: Mapping[str, Any], key: str) -> Iterable[Mapping[str, Any]]:
    return _as_list(payload.get(key))


def _as_list(value: Any) -> list[Mapping[str, Any]]:
    # A single result can come back as a bare mapping
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [value]
    return [item for item in value if isinstance(item, Mapping)]
