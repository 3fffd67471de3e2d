"""Building Flickr API requests from operation names.

Each operation the library supports is listed in ``OPERATIONS`` with the
Flickr method it calls, the HTTP verb, and the names of its required
parameters in the order callers pass them::

    build_request("get_media_info", "7093101501")
    # ApiRequest(http_method="GET",
    #            params={"method": "flickr.photos.getInfo", "photo_id": "7093101501", ...})
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import UnknownOperationError
from ..core.utils import append_extras, except_keys, format_params
from ..objects.photo import SIZE_EXTRAS

GET = "GET"
POST = "POST"

MEDIA_ALL = "all"
MEDIA_PHOTOS = "photos"
MEDIA_VIDEOS = "videos"

BASE_PARAMS = {"format": "json", "nojsoncallback": "1"}


@dataclass(frozen=True)
class Operation:
    """One remote procedure.

    Attributes:
        api_method: Flickr method name (e.g. "flickr.photos.getInfo")
        http_method: GET for reads, POST for writes
        required: Names of the required parameters, in positional order
        lists_media: The response lists media; ``media`` is added to
            ``extras`` so each item says whether it is a photo or a video
        media_filter: The endpoint accepts ``media=all|photos|videos``
    """

    api_method: str
    http_method: str = GET
    required: tuple[str, ...] = ()
    lists_media: bool = False
    media_filter: bool = False


@dataclass(frozen=True)
class ApiRequest:
    operation: str
    api_method: str
    http_method: str
    params: dict[str, str] = field(default_factory=dict)


def _list(api_method: str, *required: str, media_filter: bool = False) -> Operation:
    return Operation(api_method, GET, required, lists_media=True, media_filter=media_filter)


def _write(api_method: str, *required: str) -> Operation:
    return Operation(api_method, POST, required)


def _read(api_method: str, *required: str) -> Operation:
    return Operation(api_method, GET, required)


OPERATIONS: dict[str, Operation] = {
    # people
    "find_user_by_email": _read("flickr.people.findByEmail", "find_email"),
    "find_user_by_username": _read("flickr.people.findByUsername", "username"),
    "get_user_info": _read("flickr.people.getInfo", "user_id"),
    "get_media_from_user": _list("flickr.people.getPhotos", "user_id"),
    "get_media_of_user": _list("flickr.people.getPhotosOf", "user_id"),
    "get_public_media_from_user": _list("flickr.people.getPublicPhotos", "user_id"),
    "get_upload_status": _read("flickr.people.getUploadStatus"),
    # photos
    "tag_media": _write("flickr.photos.addTags", "photo_id", "tags"),
    "delete_media": _write("flickr.photos.delete", "photo_id"),
    "get_media_from_contacts": _list("flickr.photos.getContactsPhotos"),
    "get_public_media_from_contacts": _list("flickr.photos.getContactsPublicPhotos", "user_id"),
    "get_media_context": _read("flickr.photos.getContext", "photo_id"),
    "get_media_counts": _read("flickr.photos.getCounts"),
    "get_media_exif": _read("flickr.photos.getExif", "photo_id"),
    "get_media_favorites": _read("flickr.photos.getFavorites", "photo_id"),
    "get_media_info": _read("flickr.photos.getInfo", "photo_id"),
    "get_media_not_in_set": _list("flickr.photos.getNotInSet", media_filter=True),
    "get_media_permissions": _read("flickr.photos.getPerms", "photo_id"),
    "get_recent_media": _list("flickr.photos.getRecent"),
    "get_media_sizes": _read("flickr.photos.getSizes", "photo_id"),
    "get_untagged_media": _list("flickr.photos.getUntagged", media_filter=True),
    "get_media_with_geo_data": _list("flickr.photos.getWithGeoData", media_filter=True),
    "get_media_without_geo_data": _list("flickr.photos.getWithoutGeoData", media_filter=True),
    "get_recently_updated_media": _list("flickr.photos.recentlyUpdated"),
    "untag_media": _write("flickr.photos.removeTag", "tag_id"),
    "search_media": _list("flickr.photos.search", media_filter=True),
    "set_media_content_type": _write("flickr.photos.setContentType", "photo_id", "content_type"),
    "set_media_dates": _write("flickr.photos.setDates", "photo_id"),
    "set_media_meta": _write("flickr.photos.setMeta", "photo_id"),
    "set_media_permissions": _write("flickr.photos.setPerms", "photo_id"),
    "set_media_safety_level": _write("flickr.photos.setSafetyLevel", "photo_id"),
    "set_media_tags": _write("flickr.photos.setTags", "photo_id", "tags"),
    # photos.comments
    "comment_media": _write("flickr.photos.comments.addComment", "photo_id", "comment_text"),
    "delete_media_comment": _write("flickr.photos.comments.deleteComment", "comment_id"),
    "edit_media_comment": _write("flickr.photos.comments.editComment", "comment_id", "comment_text"),
    "get_media_comments": _read("flickr.photos.comments.getList", "photo_id"),
    "get_recently_commented_media_from_contacts": _list("flickr.photos.comments.getRecentForContacts"),
    # photos.licenses
    "get_licenses": _read("flickr.photos.licenses.getInfo"),
    "set_media_license": _write("flickr.photos.licenses.setLicense", "photo_id", "license_id"),
    # photos.transform
    "rotate_media": _write("flickr.photos.transform.rotate", "photo_id", "degrees"),
    # photos.upload
    "check_upload_tickets": _read("flickr.photos.upload.checkTickets", "tickets"),
    # photosets
    "add_media_to_set": _write("flickr.photosets.addPhoto", "photoset_id", "photo_id"),
    "create_set": _write("flickr.photosets.create"),
    "delete_set": _write("flickr.photosets.delete", "photoset_id"),
    "edit_set_metadata": _write("flickr.photosets.editMeta", "photoset_id"),
    "edit_set_media": _write("flickr.photosets.editPhotos", "photoset_id"),
    "get_set_context": _read("flickr.photosets.getContext", "photoset_id", "photo_id"),
    "get_set_info": _read("flickr.photosets.getInfo", "photoset_id"),
    "get_sets_from_user": _read("flickr.photosets.getList", "user_id"),
    "get_media_from_set": _list("flickr.photosets.getPhotos", "photoset_id", media_filter=True),
    "order_sets": _write("flickr.photosets.orderSets", "photoset_ids"),
    "remove_media_from_set": _write("flickr.photosets.removePhotos", "photoset_id", "photo_ids"),
    "reorder_media_in_set": _write("flickr.photosets.reorderPhotos", "photoset_id", "photo_ids"),
    "set_set_primary_media": _write("flickr.photosets.setPrimaryPhoto", "photoset_id", "photo_id"),
    # reflection
    "get_methods": _read("flickr.reflection.getMethods"),
    # test
    "test_login": _read("flickr.test.login"),
}


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def build_request(name: str, *args: Any, **params: Any) -> ApiRequest:
    """Build the request for operation ``name``.

    Positional ``args`` fill the operation's required parameters in order.
    Keyword ``params`` are passed to Flickr as they are and win over
    defaults and positional values. ``include_sizes=True`` asks for the URLs
    of every photo size.

    Args:
        name: Operation name from ``OPERATIONS``
        *args: Values of the required parameters
        **params: Any other Flickr parameters

    Returns:
        The request to send

    Raises:
        UnknownOperationError: If ``name`` isn't a known operation
        TypeError: If more positional values are given than the operation takes
    """
    operation = get_operation(name)
    if len(args) > len(operation.required):
        raise TypeError(
            f"{name}() takes {len(operation.required)} positional parameters "
            f"({', '.join(operation.required) or 'none'}), got {len(args)}"
        )

    include_sizes = params.get("include_sizes", False)
    params = except_keys(params, "include_sizes")

    merged: dict[str, Any] = {}
    if operation.media_filter:
        merged["media"] = MEDIA_ALL
    merged.update(zip(operation.required, args))
    merged.update(params)

    if operation.lists_media:
        merged["extras"] = append_extras(merged.get("extras"), "media")
    if include_sizes:
        merged["extras"] = append_extras(merged.get("extras"), *SIZE_EXTRAS)

    request_params = format_params(merged)
    request_params.update(method=operation.api_method, **BASE_PARAMS)
    return ApiRequest(
        operation=name,
        api_method=operation.api_method,
        http_method=operation.http_method,
        params=request_params,
    )
