"""One Python method per Flickr remote procedure.

``ApiMethods`` is mixed into ``Flickrie``. Every method builds its request
with ``build_request``, sends it through ``self.client`` and maps the
payload to objects that keep ``self`` as their calling context.

Photo and video variants of media list methods either ask Flickr to filter
(``media=photos``) where the endpoint supports it, or filter the mapped
collection by kind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from ..core.utils import join_list
from ..objects.coerce import content, to_bool
from ..objects.collection import Collection
from ..objects.comment import Comment
from ..objects.license import License
from ..objects.mapper import map_collection, map_list, map_media, map_media_collection
from ..objects.media import Media
from ..objects.media_context import MediaContext
from ..objects.media_count import MediaCount
from ..objects.photo import Photo
from ..objects.photoset import PhotoSet
from ..objects.ticket import Ticket
from ..objects.user import User
from ..objects.video import Video
from .request_builder import MEDIA_PHOTOS, MEDIA_VIDEOS, build_request

if TYPE_CHECKING:
    from .client import FlickrClient, UploadClient

log = logging.getLogger(__name__)


class ApiMethods:
    """Flickr API methods, grouped like Flickr's own documentation."""

    client: FlickrClient
    upload_client: UploadClient

    def _call(self, operation: str, *args: Any, **params: Any) -> dict[str, Any]:
        request = build_request(operation, *args, **params)
        return self.client.call(request)

    # Uploading

    def upload(self, media: str | Path | IO[bytes], **params: Any) -> str:
        """Upload a photo or video.

        Example::

            photo_id = flickr.upload("photo.jpg", title="Me and Jessica")
            photo = flickr.get_photo_info(photo_id)

        With ``async=1`` (pass it as ``**{"async": 1}``) the upload is
        processed in the background and the ticket id is returned instead;
        see ``check_upload_tickets``. Requires "write" permissions.

        Returns:
            The new photo's id, or the ticket id for asynchronous uploads
        """
        result = self.upload_client.upload(media, params)
        return _upload_result(result, params)

    def replace(self, media: str | Path | IO[bytes], media_id: Any, **params: Any) -> str:
        """Replace the file of an existing photo or video.

        Returns:
            The photo's id, or the ticket id for asynchronous uploads
        """
        result = self.upload_client.replace(media, media_id, params)
        return _upload_result(result, params)

    def check_upload_tickets(self, tickets: Any, **params: Any) -> Collection:
        """Check the status of asynchronous uploads.

        Args:
            tickets: Ticket ids, as a list or a comma separated string
        """
        body = self._call("check_upload_tickets", join_list(tickets), **params)
        return map_list(body.get("uploader", {}).get("ticket"), Ticket, self)

    # People

    def find_user_by_email(self, email: str, **params: Any) -> User:
        body = self._call("find_user_by_email", email, **params)
        return User(body.get("user"), self)

    def find_user_by_username(self, username: str, **params: Any) -> User:
        body = self._call("find_user_by_username", username, **params)
        return User(body.get("user"), self)

    def get_user_info(self, nsid: str, **params: Any) -> User:
        body = self._call("get_user_info", nsid, **params)
        return User(body.get("person"), self)

    def get_media_from_user(self, nsid: str, **params: Any) -> Collection:
        """Photos and videos from a user (needs "read" permissions for private ones)."""
        body = self._call("get_media_from_user", nsid, **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_from_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_media_from_user(nsid, **params).photos()

    def get_videos_from_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_media_from_user(nsid, **params).videos()

    def get_media_of_user(self, nsid: str, **params: Any) -> Collection:
        """Photos and videos the user appears in."""
        body = self._call("get_media_of_user", nsid, **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_of_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_media_of_user(nsid, **params).photos()

    def get_videos_of_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_media_of_user(nsid, **params).videos()

    def get_public_media_from_user(self, nsid: str, **params: Any) -> Collection:
        body = self._call("get_public_media_from_user", nsid, **params)
        return map_media_collection(body.get("photos"), self)

    def get_public_photos_from_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_public_media_from_user(nsid, **params).photos()

    def get_public_videos_from_user(self, nsid: str, **params: Any) -> Collection:
        return self.get_public_media_from_user(nsid, **params).videos()

    def get_upload_status(self, **params: Any) -> User:
        """The authenticated user, with ``upload_status`` filled in."""
        body = self._call("get_upload_status", **params)
        return User(body.get("user"), self)

    # Photos

    def tag_media(self, media_id: Any, tags: str, **params: Any) -> None:
        """Add tags to a photo or video.

        Args:
            tags: Space separated tags; quote tags that contain spaces
        """
        self._call("tag_media", media_id, tags, **params)

    def delete_media(self, media_id: Any, **params: Any) -> None:
        """Delete a photo or video (needs "delete" permissions)."""
        self._call("delete_media", media_id, **params)

    def get_media_from_contacts(self, **params: Any) -> Collection:
        body = self._call("get_media_from_contacts", **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_from_contacts(self, **params: Any) -> Collection:
        return self.get_media_from_contacts(**params).photos()

    def get_videos_from_contacts(self, **params: Any) -> Collection:
        return self.get_media_from_contacts(**params).videos()

    def get_public_media_from_contacts(self, nsid: str, **params: Any) -> Collection:
        body = self._call("get_public_media_from_contacts", nsid, **params)
        return map_media_collection(body.get("photos"), self)

    def get_public_photos_from_contacts(self, nsid: str, **params: Any) -> Collection:
        return self.get_public_media_from_contacts(nsid, **params).photos()

    def get_public_videos_from_contacts(self, nsid: str, **params: Any) -> Collection:
        return self.get_public_media_from_contacts(nsid, **params).videos()

    def get_media_context(self, media_id: Any, **params: Any) -> MediaContext:
        """Previous and next media in the owner's photostream."""
        body = self._call("get_media_context", media_id, **params)
        return MediaContext(body, self)

    def get_media_counts(self, **params: Any) -> Collection:
        """Count photos and videos in date ranges.

        Example::

            counts = flickr.get_media_counts(taken_dates=[datetime(2011, 1, 3), datetime(2011, 8, 11)])
            counts[0].value       # 24
            counts[0].date_range  # (datetime(2011, 1, 3, ...), datetime(2011, 8, 11, ...))

        ``dates`` and ``taken_dates`` accept lists of datetimes.
        """
        params = MediaCount.normalize_params(params)
        dates_kind = MediaCount.dates_kind_for(params)
        body = self._call("get_media_counts", **params)
        counts = body.get("photocounts", {}).get("photocount")
        return map_list(
            counts,
            lambda raw, caller: MediaCount(raw, caller, dates_kind=dates_kind),
            self,
        )

    def get_photo_exif(self, photo_id: Any, **params: Any) -> Photo:
        """Fetch EXIF data; read it with ``photo.exif.get("Model")``."""
        body = self._call("get_media_exif", photo_id, **params)
        return Photo(body.get("photo"), self)

    def get_video_exif(self, video_id: Any, **params: Any) -> Video:
        body = self._call("get_media_exif", video_id, **params)
        return Video(body.get("photo"), self)

    def get_photo_favorites(self, photo_id: Any, **params: Any) -> Photo:
        """Fetch the users who favorited a photo, as ``photo.favorites``."""
        body = self._call("get_media_favorites", photo_id, **params)
        return Photo(body.get("photo"), self)

    def get_video_favorites(self, video_id: Any, **params: Any) -> Video:
        body = self._call("get_media_favorites", video_id, **params)
        return Video(body.get("photo"), self)

    def get_media_info(self, media_id: Any, **params: Any) -> Media:
        body = self._call("get_media_info", media_id, **params)
        return map_media(body.get("photo") or {}, self)

    def get_media_not_in_set(self, **params: Any) -> Collection:
        """The authenticated user's media that isn't in any set."""
        body = self._call("get_media_not_in_set", **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_not_in_set(self, **params: Any) -> Collection:
        return self.get_media_not_in_set(**{"media": MEDIA_PHOTOS, **params})

    def get_videos_not_in_set(self, **params: Any) -> Collection:
        return self.get_media_not_in_set(**{"media": MEDIA_VIDEOS, **params})

    def get_photo_permissions(self, photo_id: Any, **params: Any) -> Photo:
        """Fetch visibility and comment permissions of a photo."""
        body = self._call("get_media_permissions", photo_id, **params)
        return Photo(body.get("perms"), self)

    def get_video_permissions(self, video_id: Any, **params: Any) -> Video:
        body = self._call("get_media_permissions", video_id, **params)
        return Video(body.get("perms"), self)

    def get_recent_media(self, **params: Any) -> Collection:
        body = self._call("get_recent_media", **params)
        return map_media_collection(body.get("photos"), self)

    def get_recent_photos(self, **params: Any) -> Collection:
        return self.get_recent_media(**params).photos()

    def get_recent_videos(self, **params: Any) -> Collection:
        return self.get_recent_media(**params).videos()

    def get_photo_sizes(self, photo_id: Any, **params: Any) -> Photo:
        """Fetch the available sizes of a photo."""
        body = self._call("get_media_sizes", photo_id, **params)
        return Photo(_with_id(body.get("sizes"), photo_id), self)

    def get_video_sizes(self, video_id: Any, **params: Any) -> Video:
        """Fetch the available sizes of a video, including its player and MP4 URLs."""
        body = self._call("get_media_sizes", video_id, **params)
        return Video(_with_id(body.get("sizes"), video_id), self)

    def get_untagged_media(self, **params: Any) -> Collection:
        body = self._call("get_untagged_media", **params)
        return map_media_collection(body.get("photos"), self)

    def get_untagged_photos(self, **params: Any) -> Collection:
        return self.get_untagged_media(**{"media": MEDIA_PHOTOS, **params})

    def get_untagged_videos(self, **params: Any) -> Collection:
        return self.get_untagged_media(**{"media": MEDIA_VIDEOS, **params})

    def get_media_with_geo_data(self, **params: Any) -> Collection:
        body = self._call("get_media_with_geo_data", **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_with_geo_data(self, **params: Any) -> Collection:
        return self.get_media_with_geo_data(**{"media": MEDIA_PHOTOS, **params})

    def get_videos_with_geo_data(self, **params: Any) -> Collection:
        return self.get_media_with_geo_data(**{"media": MEDIA_VIDEOS, **params})

    def get_media_without_geo_data(self, **params: Any) -> Collection:
        body = self._call("get_media_without_geo_data", **params)
        return map_media_collection(body.get("photos"), self)

    def get_photos_without_geo_data(self, **params: Any) -> Collection:
        return self.get_media_without_geo_data(**{"media": MEDIA_PHOTOS, **params})

    def get_videos_without_geo_data(self, **params: Any) -> Collection:
        return self.get_media_without_geo_data(**{"media": MEDIA_VIDEOS, **params})

    def get_recently_updated_media(self, **params: Any) -> Collection:
        """Media of the authenticated user updated since ``min_date``."""
        body = self._call("get_recently_updated_media", **params)
        return map_media_collection(body.get("photos"), self)

    def get_recently_updated_photos(self, **params: Any) -> Collection:
        return self.get_recently_updated_media(**params).photos()

    def get_recently_updated_videos(self, **params: Any) -> Collection:
        return self.get_recently_updated_media(**params).videos()

    def untag_media(self, tag_id: Any, **params: Any) -> None:
        """Remove a tag; ``tag_id`` is the id from ``Tag.id``."""
        self._call("untag_media", tag_id, **params)

    def search_media(self, **params: Any) -> Collection:
        body = self._call("search_media", **params)
        return map_media_collection(body.get("photos"), self)

    def search_photos(self, **params: Any) -> Collection:
        return self.search_media(**{"media": MEDIA_PHOTOS, **params})

    def search_videos(self, **params: Any) -> Collection:
        return self.search_media(**{"media": MEDIA_VIDEOS, **params})

    def set_media_content_type(self, media_id: Any, content_type: Any, **params: Any) -> None:
        self._call("set_media_content_type", media_id, content_type, **params)

    def set_media_dates(self, media_id: Any, **params: Any) -> None:
        self._call("set_media_dates", media_id, **params)

    def set_media_meta(self, media_id: Any, **params: Any) -> None:
        self._call("set_media_meta", media_id, **params)

    def set_media_permissions(self, media_id: Any, **params: Any) -> None:
        self._call("set_media_permissions", media_id, **params)

    def set_media_safety_level(self, media_id: Any, **params: Any) -> None:
        self._call("set_media_safety_level", media_id, **params)

    def set_media_tags(self, media_id: Any, tags: str, **params: Any) -> None:
        """Replace all tags of a photo or video."""
        self._call("set_media_tags", media_id, tags, **params)

    # Comments

    def comment_media(self, media_id: Any, comment: str, **params: Any) -> str | None:
        """Add a comment.

        Returns:
            The new comment's id
        """
        body = self._call("comment_media", media_id, comment, **params)
        return content(body.get("comment", {}).get("id"))

    def delete_media_comment(self, comment_id: Any, **params: Any) -> None:
        self._call("delete_media_comment", comment_id, **params)

    def edit_media_comment(self, comment_id: Any, comment: str, **params: Any) -> None:
        self._call("edit_media_comment", comment_id, comment, **params)

    def get_media_comments(self, media_id: Any, **params: Any) -> Collection:
        body = self._call("get_media_comments", media_id, **params)
        return map_list(body.get("comments", {}).get("comment"), Comment, self)

    def get_recently_commented_media_from_contacts(self, **params: Any) -> Collection:
        body = self._call("get_recently_commented_media_from_contacts", **params)
        return map_media_collection(body.get("photos"), self)

    def get_recently_commented_photos_from_contacts(self, **params: Any) -> Collection:
        return self.get_recently_commented_media_from_contacts(**params).photos()

    def get_recently_commented_videos_from_contacts(self, **params: Any) -> Collection:
        return self.get_recently_commented_media_from_contacts(**params).videos()

    # Licenses

    def get_licenses(self, **params: Any) -> Collection:
        body = self._call("get_licenses", **params)
        return map_list(body.get("licenses", {}).get("license"), License, self)

    def set_media_license(self, media_id: Any, license_id: Any, **params: Any) -> None:
        self._call("set_media_license", media_id, license_id, **params)

    # Transform

    def rotate_media(self, media_id: Any, degrees: int, **params: Any) -> None:
        """Rotate a photo or video by 90, 180 or 270 degrees."""
        self._call("rotate_media", media_id, degrees, **params)

    # Photosets

    def add_media_to_set(self, set_id: Any, media_id: Any, **params: Any) -> None:
        self._call("add_media_to_set", set_id, media_id, **params)

    def create_set(self, **params: Any) -> PhotoSet:
        """Create a set; Flickr needs ``title`` and ``primary_photo_id``."""
        body = self._call("create_set", **params)
        return PhotoSet(body.get("photoset"), self)

    def delete_set(self, set_id: Any, **params: Any) -> None:
        self._call("delete_set", set_id, **params)

    def edit_set_metadata(self, set_id: Any, **params: Any) -> None:
        self._call("edit_set_metadata", set_id, **params)

    def edit_set_media(self, set_id: Any, **params: Any) -> None:
        """Replace the media of a set (``primary_photo_id`` and ``photo_ids``)."""
        self._call("edit_set_media", set_id, **_join_ids(params, "photo_ids"))

    def get_set_context(self, set_id: Any, media_id: Any, **params: Any) -> MediaContext:
        body = self._call("get_set_context", set_id, media_id, **params)
        return MediaContext(body, self)

    def get_set_info(self, set_id: Any, **params: Any) -> PhotoSet:
        body = self._call("get_set_info", set_id, **params)
        return PhotoSet(body.get("photoset"), self)

    def get_sets_from_user(self, nsid: str, **params: Any) -> Collection:
        body = self._call("get_sets_from_user", nsid, **params)
        return map_collection(body.get("photosets"), "photoset", PhotoSet, self)

    def get_media_from_set(self, set_id: Any, **params: Any) -> Collection:
        body = self._call("get_media_from_set", set_id, **params)
        return map_media_collection(body.get("photoset"), self)

    def get_photos_from_set(self, set_id: Any, **params: Any) -> Collection:
        return self.get_media_from_set(set_id, **{"media": MEDIA_PHOTOS, **params})

    def get_videos_from_set(self, set_id: Any, **params: Any) -> Collection:
        return self.get_media_from_set(set_id, **{"media": MEDIA_VIDEOS, **params})

    def order_sets(self, set_ids: Any, **params: Any) -> None:
        self._call("order_sets", join_list(set_ids), **params)

    def remove_media_from_set(self, set_id: Any, media_ids: Any, **params: Any) -> None:
        self._call("remove_media_from_set", set_id, join_list(media_ids), **params)

    def reorder_media_in_set(self, set_id: Any, media_ids: Any, **params: Any) -> None:
        self._call("reorder_media_in_set", set_id, join_list(media_ids), **params)

    def set_set_primary_media(self, set_id: Any, media_id: Any, **params: Any) -> None:
        self._call("set_set_primary_media", set_id, media_id, **params)

    # Reflection and testing

    def get_methods(self, **params: Any) -> list[str]:
        """Names of all methods the Flickr API offers."""
        body = self._call("get_methods", **params)
        methods = body.get("methods", {}).get("method") or []
        return [content(method) for method in methods]

    def test_login(self, **params: Any) -> User:
        """The user the access token belongs to."""
        body = self._call("test_login", **params)
        return User(body.get("user"), self)


def _upload_result(result: dict[str, str], params: dict[str, Any]) -> str:
    if to_bool(params.get("async")):
        return result["ticketid"]
    return result["photoid"]


def _with_id(payload: dict[str, Any] | None, media_id: Any) -> dict[str, Any]:
    # photos.getSizes doesn't echo the id back
    return {"id": str(media_id), **(payload or {})}


def _join_ids(params: dict[str, Any], key: str) -> dict[str, Any]:
    if key in params and params[key] is not None:
        return {**params, key: join_list(params[key])}
    return params
