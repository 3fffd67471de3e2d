"""Alternative method names.

``ALIASES`` maps photo and video flavoured names to the method that serves
both kinds. ``DEPRECATED_ALIASES`` keeps old names working while warning
that they will go away.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from typing import Any

log = logging.getLogger(__name__)

ALIASES: dict[str, str] = {
    "tag_photo": "tag_media",
    "tag_video": "tag_media",
    "delete_photo": "delete_media",
    "delete_video": "delete_media",
    "get_photo_context": "get_media_context",
    "get_video_context": "get_media_context",
    "get_photos_counts": "get_media_counts",
    "get_videos_counts": "get_media_counts",
    "get_photo_info": "get_media_info",
    "get_video_info": "get_media_info",
    "untag_photo": "untag_media",
    "untag_video": "untag_media",
    "set_photo_content_type": "set_media_content_type",
    "set_video_content_type": "set_media_content_type",
    "set_photo_dates": "set_media_dates",
    "set_video_dates": "set_media_dates",
    "set_photo_meta": "set_media_meta",
    "set_video_meta": "set_media_meta",
    "set_photo_permissions": "set_media_permissions",
    "set_video_permissions": "set_media_permissions",
    "set_photo_safety_level": "set_media_safety_level",
    "set_video_safety_level": "set_media_safety_level",
    "set_photo_tags": "set_media_tags",
    "set_video_tags": "set_media_tags",
    "comment_photo": "comment_media",
    "comment_video": "comment_media",
    "delete_photo_comment": "delete_media_comment",
    "delete_video_comment": "delete_media_comment",
    "edit_photo_comment": "edit_media_comment",
    "edit_video_comment": "edit_media_comment",
    "get_photo_comments": "get_media_comments",
    "get_video_comments": "get_media_comments",
    "set_photo_license": "set_media_license",
    "set_video_license": "set_media_license",
    "rotate_photo": "rotate_media",
    "rotate_video": "rotate_media",
    "add_photo_to_set": "add_media_to_set",
    "add_video_to_set": "add_media_to_set",
    "edit_set_photos": "edit_set_media",
    "edit_set_videos": "edit_set_media",
    "remove_photos_from_set": "remove_media_from_set",
    "remove_videos_from_set": "remove_media_from_set",
    "reorder_photos_in_set": "reorder_media_in_set",
    "reorder_videos_in_set": "reorder_media_in_set",
    "set_set_primary_photo": "set_set_primary_media",
    "set_set_primary_video": "set_set_primary_media",
}

DEPRECATED_ALIASES: dict[str, str] = {
    "media_from_user": "get_media_from_user",
    "photos_from_user": "get_photos_from_user",
    "videos_from_user": "get_videos_from_user",
    "media_of_user": "get_media_of_user",
    "photos_of_user": "get_photos_of_user",
    "videos_of_user": "get_videos_of_user",
    "public_media_from_user": "get_public_media_from_user",
    "public_photos_from_user": "get_public_photos_from_user",
    "public_videos_from_user": "get_public_videos_from_user",
    "add_media_tags": "tag_media",
    "add_photo_tags": "tag_photo",
    "add_video_tags": "tag_video",
    "media_from_contacts": "get_media_from_contacts",
    "photos_from_contacts": "get_photos_from_contacts",
    "videos_from_contacts": "get_videos_from_contacts",
    "public_media_from_user_contacts": "get_public_media_from_contacts",
    "public_photos_from_user_contacts": "get_public_photos_from_contacts",
    "public_videos_from_user_contacts": "get_public_videos_from_contacts",
    "media_not_in_set": "get_media_not_in_set",
    "photos_not_in_set": "get_photos_not_in_set",
    "videos_not_in_set": "get_videos_not_in_set",
    "recently_updated_media": "get_recently_updated_media",
    "recently_updated_photos": "get_recently_updated_photos",
    "recently_updated_videos": "get_recently_updated_videos",
    "remove_media_tag": "untag_media",
    "remove_photo_tag": "untag_photo",
    "remove_video_tag": "untag_video",
    "sets_from_user": "get_sets_from_user",
    "media_from_set": "get_media_from_set",
    "photos_from_set": "get_photos_from_set",
    "videos_from_set": "get_videos_from_set",
    "set_primary_media_to_set": "set_set_primary_media",
    "set_primary_photo_to_set": "set_set_primary_photo",
    "set_primary_video_to_set": "set_set_primary_video",
}


def _alias(name: str, target: str) -> Callable[..., Any]:
    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        return getattr(self, target)(*args, **kwargs)

    method.__name__ = name
    method.__doc__ = f"Same as ``{target}``."
    return method


def _deprecated_alias(name: str, target: str) -> Callable[..., Any]:
    def method(self: Any, *args: Any, **kwargs: Any) -> Any:
        message = f"{name} is deprecated, use {target} instead"
        warnings.warn(message, DeprecationWarning, stacklevel=2)
        log.warning(message)
        return getattr(self, target)(*args, **kwargs)

    method.__name__ = name
    method.__doc__ = f"Deprecated, use ``{target}``."
    return method


def install_aliases(cls: type) -> type:
    """Add every alias to ``cls`` as a method forwarding to its target.

    Raises:
        AttributeError: If a target isn't defined on ``cls``
    """
    for name, target in ALIASES.items():
        _check_target(cls, name, target)
        setattr(cls, name, _alias(name, target))
    # Deprecated names may point at other aliases, so they go in last
    for name, target in DEPRECATED_ALIASES.items():
        _check_target(cls, name, target)
        setattr(cls, name, _deprecated_alias(name, target))
    return cls


def _check_target(cls: type, name: str, target: str) -> None:
    if not hasattr(cls, target):
        raise AttributeError(f"Alias {name} points at missing method {target}")
