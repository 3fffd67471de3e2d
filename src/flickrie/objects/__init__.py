"""Objects built from Flickr responses."""

from .base import FlickrObject
from .collection import Collection
from .comment import Comment
from .exif import Exif
from .license import License
from .location import Location, Place
from .mapper import map_collection, map_list, map_media, map_media_collection, media_kind
from .media import PHOTO, VIDEO, Media
from .media_context import MediaContext
from .media_count import MediaCount
from .note import Note
from .photo import SIZES, Photo
from .photoset import PhotoSet
from .tag import Tag
from .ticket import Ticket
from .user import UploadStatus, User
from .video import Video
from .visibility import Visibility

__all__ = [
    "PHOTO",
    "SIZES",
    "VIDEO",
    "Collection",
    "Comment",
    "Exif",
    "FlickrObject",
    "License",
    "Location",
    "Media",
    "MediaContext",
    "MediaCount",
    "Note",
    "Photo",
    "PhotoSet",
    "Place",
    "Tag",
    "Ticket",
    "UploadStatus",
    "User",
    "Video",
    "Visibility",
    "map_collection",
    "map_list",
    "map_media",
    "map_media_collection",
    "media_kind",
]
