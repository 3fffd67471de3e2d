"""Geo data attached to photos and videos."""

from __future__ import annotations

from typing import Any

from .base import FlickrObject
from .coerce import content, to_float, to_int, to_str


class Place(FlickrObject):
    """One level of a location hierarchy (locality, county, region, ...)."""

    __display__ = ("name", "place_id")

    @property
    def name(self) -> str | None:
        return to_str(self._raw.get("_content"))

    @property
    def place_id(self) -> str | None:
        return self._raw.get("place_id")

    @property
    def woeid(self) -> str | None:
        return to_str(self._raw.get("woeid"))

    def __str__(self) -> str:
        return self.name or ""


class Location(FlickrObject):
    __display__ = ("latitude", "longitude")

    @property
    def latitude(self) -> float | None:
        return to_float(self._raw.get("latitude"))

    @property
    def longitude(self) -> float | None:
        return to_float(self._raw.get("longitude"))

    @property
    def accuracy(self) -> str | None:
        return to_str(self._raw.get("accuracy"))

    @property
    def context(self) -> int | None:
        return to_int(self._raw.get("context"))

    @property
    def neighbourhood(self) -> Place | None:
        return self._place("neighbourhood")

    @property
    def locality(self) -> Place | None:
        return self._place("locality")

    @property
    def county(self) -> Place | None:
        return self._place("county")

    @property
    def region(self) -> Place | None:
        return self._place("region")

    @property
    def country(self) -> Place | None:
        return self._place("country")

    @property
    def place_id(self) -> str | None:
        return self._raw.get("place_id")

    @property
    def woeid(self) -> str | None:
        return to_str(self._raw.get("woeid"))

    def _place(self, key: str) -> Place | None:
        value: Any = self._raw.get(key)
        if value is None:
            return None
        if not isinstance(value, dict):
            value = {"_content": content(value)}
        if not value.get("_content") and len(value) <= 1:
            return None
        return Place(value, self._caller)
