"""Lists of objects returned by Flickr, with pagination info."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, overload

from .coerce import to_int

log = logging.getLogger(__name__)

# Photoset listings use "per_page", everything else "perpage"
_PER_PAGE_KEYS = ("perpage", "per_page")


class Collection(Sequence):
    """An immutable sequence of Flickr objects plus pagination metadata.

    ``page``, ``per_page``, ``pages`` and ``total`` are either all set or
    all None; endpoints that don't paginate leave them unset.
    """

    def __init__(
        self,
        items: Iterable[Any] = (),
        page: int | None = None,
        per_page: int | None = None,
        pages: int | None = None,
        total: int | None = None,
    ) -> None:
        self._items = tuple(items)
        metadata = (page, per_page, pages, total)
        if all(value is not None for value in metadata):
            self.page, self.per_page, self.pages, self.total = metadata
        else:
            if any(value is not None for value in metadata):
                log.debug("Dropping incomplete pagination metadata: %s", metadata)
            self.page = self.per_page = self.pages = self.total = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None, items: Iterable[Any]) -> Collection:
        """Build a collection, reading pagination metadata from ``payload``."""
        payload = payload or {}
        per_page = None
        for key in _PER_PAGE_KEYS:
            per_page = to_int(payload.get(key))
            if per_page is not None:
                break
        return cls(
            items,
            page=to_int(payload.get("page")),
            per_page=per_page,
            pages=to_int(payload.get("pages")),
            total=to_int(payload.get("total")),
        )

    @property
    def has_pagination(self) -> bool:
        return self.page is not None

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> Collection: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self._with_items(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items and self._metadata() == other._metadata()
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def select(self, predicate: Callable[[Any], bool]) -> Collection:
        """Return the items matching ``predicate``, keeping the metadata."""
        return self._with_items(item for item in self._items if predicate(item))

    def of_kind(self, kind: type) -> Collection:
        return self.select(lambda item: isinstance(item, kind))

    def photos(self) -> Collection:
        from .photo import Photo

        return self.of_kind(Photo)

    def videos(self) -> Collection:
        from .video import Video

        return self.of_kind(Video)

    def find(self, object_id: Any) -> Any:
        """Return the first item whose ``id`` equals ``object_id``, or None."""
        object_id = str(object_id)
        for item in self._items:
            if getattr(item, "id", None) == object_id:
                return item
        return None

    def _metadata(self) -> tuple[int | None, ...]:
        return (self.page, self.per_page, self.pages, self.total)

    def _with_items(self, items: Iterable[Any]) -> Collection:
        return Collection(items, *self._metadata())

    def __repr__(self) -> str:
        if self.has_pagination:
            return (
                f"<Collection {len(self)} items page={self.page}/{self.pages} "
                f"per_page={self.per_page} total={self.total}>"
            )
        return f"<Collection {len(self)} items>"
