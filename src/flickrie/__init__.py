"""Flickr API client with photos and videos as Python objects."""

import logging

from .api.auth import FlickrAuth
from .core.config import Settings
from .core.errors import (
    ConfigurationError,
    FlickrError,
    FlickrieError,
    UnboundEntityError,
    UnknownOperationError,
)
from .core.paths import app_version
from .instance import Flickrie
from .objects import (
    Collection,
    Comment,
    Exif,
    License,
    Location,
    Media,
    MediaContext,
    MediaCount,
    Note,
    Photo,
    PhotoSet,
    Place,
    Tag,
    Ticket,
    UploadStatus,
    User,
    Video,
    Visibility,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = app_version()

__all__ = [
    "Collection",
    "Comment",
    "ConfigurationError",
    "Exif",
    "FlickrAuth",
    "FlickrError",
    "Flickrie",
    "FlickrieError",
    "License",
    "Location",
    "Media",
    "MediaContext",
    "MediaCount",
    "Note",
    "Photo",
    "PhotoSet",
    "Place",
    "Settings",
    "Tag",
    "Ticket",
    "UnboundEntityError",
    "UnknownOperationError",
    "UploadStatus",
    "User",
    "Video",
    "Visibility",
    "__version__",
]
