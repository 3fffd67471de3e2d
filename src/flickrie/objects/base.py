"""Base class for the objects built from Flickr responses."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..core.errors import UnboundEntityError

if TYPE_CHECKING:
    from ..instance import Flickrie


class FlickrObject:
    """Read-only view over a fragment of a Flickr response.

    The object keeps its own deep copy of the fragment. Accessors defined on
    subclasses derive their values from it and return None when the data
    isn't there; ``obj["key"]`` gives access to anything without a named
    accessor.
    """

    # Fields shown by __repr__
    __display__: tuple[str, ...] = ("id",)

    def __init__(self, raw: Mapping[str, Any] | None = None, caller: Flickrie | None = None) -> None:
        self._raw: dict[str, Any] = copy.deepcopy(dict(raw or {}))
        self._caller = caller

    @property
    def raw(self) -> Mapping[str, Any]:
        """The response fragment this object was built from (read-only)."""
        return MappingProxyType(self._raw)

    @property
    def caller(self) -> Flickrie | None:
        """The Flickrie instance used for further API calls, if any."""
        return self._caller

    def __getitem__(self, key: str) -> Any:
        return self._raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def get(self, key: str, default: Any = None) -> Any:
        return self._raw.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the raw fragment."""
        return copy.deepcopy(self._raw)

    def _require_caller(self, accessor: str) -> Flickrie:
        if self._caller is None:
            raise UnboundEntityError(self, accessor)
        return self._caller

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlickrObject):
            return NotImplemented
        return type(self) is type(other) and self._raw == other._raw

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values = []
        for name in self.__display__:
            value = getattr(self, name, None)
            if value is None:
                continue
            text = repr(value)
            if len(text) > 30:
                text = text[:30] + "..."
            values.append(f"{name}={text}")
        return f"<{type(self).__name__} {' '.join(values)}>" if values else f"<{type(self).__name__}>"
