"""Exceptions raised by flickrie."""

from __future__ import annotations


class FlickrieError(Exception):
    """Base exception for flickrie."""


class FlickrError(FlickrieError):
    """Raised when Flickr answers with a non-"ok" status.

    Attributes:
        message: The message Flickr sent back
        code: Flickr's numeric error code, if it sent one
    """

    def __init__(self, message: str | None, code: int | None = None) -> None:
        self.message = message or "Unknown Flickr error"
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.message} (code {self.code})"
        return self.message


class ConfigurationError(FlickrieError):
    """Raised when required credentials or settings are missing."""


class UnboundEntityError(ConfigurationError):
    """Raised when an entity without a calling context tries a remote call."""

    def __init__(self, entity: object, accessor: str) -> None:
        self.entity_kind = type(entity).__name__
        self.accessor = accessor
        super().__init__(
            f"{self.entity_kind}.{accessor}() needs a Flickrie instance; "
            "this entity was constructed without one"
        )


class UnknownOperationError(FlickrieError, KeyError):
    """Raised when a request is built for an operation that doesn't exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown Flickr operation: {name}")

    def __str__(self) -> str:
        return self.args[0]
