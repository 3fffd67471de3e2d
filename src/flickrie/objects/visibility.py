"""Who can see a photo, or its location."""

from __future__ import annotations

from .base import FlickrObject
from .coerce import to_bool


class Visibility(FlickrObject):
    """Visibility flags.

    Built from ``visibility``/``geoperms`` mappings of ``photos.getInfo``, or
    from the ``ispublic``/``isfriend``/``isfamily`` fields of list items.
    """

    __display__ = ("is_public", "is_friends", "is_family", "is_contacts")

    @property
    def is_public(self) -> bool | None:
        return to_bool(self._raw.get("ispublic"))

    @property
    def is_friends(self) -> bool | None:
        return to_bool(self._raw.get("isfriend"))

    @property
    def is_family(self) -> bool | None:
        return to_bool(self._raw.get("isfamily"))

    @property
    def is_contacts(self) -> bool | None:
        return to_bool(self._raw.get("iscontact"))
