"""Configuration, paths, errors and small helpers shared by flickrie."""

from .config import Settings
from .errors import (
    ConfigurationError,
    FlickrError,
    FlickrieError,
    UnboundEntityError,
    UnknownOperationError,
)

__all__ = [
    "ConfigurationError",
    "FlickrError",
    "FlickrieError",
    "Settings",
    "UnboundEntityError",
    "UnknownOperationError",
]
