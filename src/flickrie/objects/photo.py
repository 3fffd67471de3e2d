"""Photos and their size variants."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from .coerce import to_int, to_str
from .media import PHOTO, Media

if TYPE_CHECKING:
    from ..instance import Flickrie

STATIC_URL = "https://farm{farm}.staticflickr.com/{server}/{id}_{secret}{suffix}.{ext}"


class SizeSpec(NamedTuple):
    """How one size is named in ``extras``, static URLs and ``photos.getSizes``."""

    token: str
    suffix: str
    flickr_label: str


# Ordered from smallest to largest
SIZES: dict[str, SizeSpec] = {
    "Square 75": SizeSpec("sq", "s", "Square"),
    "Square 150": SizeSpec("q", "q", "Large Square"),
    "Thumbnail": SizeSpec("t", "t", "Thumbnail"),
    "Small 240": SizeSpec("s", "m", "Small"),
    "Small 320": SizeSpec("n", "n", "Small 320"),
    "Medium 500": SizeSpec("m", "", "Medium"),
    "Medium 640": SizeSpec("z", "z", "Medium 640"),
    "Medium 800": SizeSpec("c", "c", "Medium 800"),
    "Large 1024": SizeSpec("l", "b", "Large"),
    "Original": SizeSpec("o", "o", "Original"),
}

ORIGINAL = "Original"
DEFAULT_SIZE = "Medium 500"

# Extras that make list endpoints include every size URL
SIZE_EXTRAS = tuple(f"url_{spec.token}" for spec in SIZES.values())


def build_source_url(
    farm: Any, server: Any, media_id: Any, secret: Any, suffix: str = "", ext: str = "jpg"
) -> str | None:
    """Build a static image URL, or None if any part is missing."""
    farm = to_int(farm)
    parts = [to_str(server), to_str(media_id), to_str(secret), to_str(ext)]
    if farm is None or not all(parts):
        return None
    server, media_id, secret, ext = parts
    return STATIC_URL.format(
        farm=farm,
        server=server,
        id=media_id,
        secret=secret,
        suffix=f"_{suffix}" if suffix else "",
        ext=ext,
    )


class Photo(Media):
    """A photo, viewed at one of the sizes in ``SIZES``.

    ``source_url``, ``width`` and ``height`` refer to the current size. Size
    methods return a new Photo over the same data::

        photo.source_url                # Medium 500
        photo.square75().source_url
        photo.largest().width
    """

    kind = PHOTO
    __display__ = ("id", "title", "size")

    def __init__(
        self,
        raw: dict[str, Any] | None = None,
        caller: Flickrie | None = None,
        size: str = DEFAULT_SIZE,
    ) -> None:
        if size not in SIZES:
            raise ValueError(f"Unknown photo size {size!r}; expected one of {', '.join(SIZES)}")
        super().__init__(raw, caller)
        self._size = size

    @property
    def size(self) -> str:
        return self._size

    def with_size(self, size: str) -> Photo:
        return Photo(self._raw, self._caller, size=size)

    def square75(self) -> Photo:
        return self.with_size("Square 75")

    def square150(self) -> Photo:
        return self.with_size("Square 150")

    def thumbnail(self) -> Photo:
        return self.with_size("Thumbnail")

    def small240(self) -> Photo:
        return self.with_size("Small 240")

    def small320(self) -> Photo:
        return self.with_size("Small 320")

    def medium500(self) -> Photo:
        return self.with_size("Medium 500")

    def medium640(self) -> Photo:
        return self.with_size("Medium 640")

    def medium800(self) -> Photo:
        return self.with_size("Medium 800")

    def large1024(self) -> Photo:
        return self.with_size("Large 1024")

    def original(self) -> Photo:
        return self.with_size(ORIGINAL)

    square = square75
    small = small240
    medium = medium500
    large = large1024

    @property
    def available_sizes(self) -> list[str] | None:
        """Sizes the response gave explicit URLs for, smallest first."""
        labels = [label for label in SIZES if self._explicit_size(label) is not None]
        return labels or None

    def largest(self) -> Photo:
        """This photo at its largest known size (the current one if unknown)."""
        labels = self.available_sizes
        return self.with_size(labels[-1]) if labels else self

    @property
    def source_url(self) -> str | None:
        return self.source_url_for(self._size)

    def source_url_for(self, size: str) -> str | None:
        """URL of the image file at ``size``.

        URLs from ``extras`` or ``photos.getSizes`` are used when present,
        otherwise the URL is built from farm, server, id and secret. The
        original size needs ``originalsecret`` and ``originalformat``.
        """
        spec = SIZES[size]
        explicit = self._explicit_size(size)
        if explicit is not None:
            return explicit["source"]
        if size == ORIGINAL:
            return build_source_url(
                self._raw.get("farm"),
                self._raw.get("server"),
                self._raw.get("id"),
                self._raw.get("originalsecret"),
                spec.suffix,
                self._raw.get("originalformat"),
            )
        return build_source_url(
            self._raw.get("farm"),
            self._raw.get("server"),
            self._raw.get("id"),
            self._raw.get("secret"),
            spec.suffix,
        )

    @property
    def width(self) -> int | None:
        explicit = self._explicit_size(self._size)
        return explicit["width"] if explicit else None

    @property
    def height(self) -> int | None:
        explicit = self._explicit_size(self._size)
        return explicit["height"] if explicit else None

    def _explicit_size(self, size: str) -> dict[str, Any] | None:
        spec = SIZES[size]
        url = to_str(self._raw.get(f"url_{spec.token}"))
        if url:
            return {
                "source": url,
                "width": to_int(self._raw.get(f"width_{spec.token}")),
                "height": to_int(self._raw.get(f"height_{spec.token}")),
            }
        entry = self._size_entry(spec.flickr_label)
        if entry and to_str(entry.get("source")):
            return {
                "source": to_str(entry.get("source")),
                "width": to_int(entry.get("width")),
                "height": to_int(entry.get("height")),
            }
        return None

    # Remote calls

    def get_exif(self, **params: Any) -> Photo:
        return self._require_caller("get_exif").get_photo_exif(self.id, **params)

    def get_favorites(self, **params: Any) -> Photo:
        return self._require_caller("get_favorites").get_photo_favorites(self.id, **params)

    def get_sizes(self, **params: Any) -> Photo:
        return self._require_caller("get_sizes").get_photo_sizes(self.id, **params)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is True and isinstance(other, Photo):
            return self._size == other._size
        return result

    __hash__ = None  # type: ignore[assignment]
