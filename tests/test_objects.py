"""Unit tests for the smaller response objects."""

from datetime import datetime, timezone

import pytest

from flickrie import (
    Comment,
    Exif,
    License,
    Location,
    MediaContext,
    MediaCount,
    Photo,
    Tag,
    Ticket,
    Video,
)
from flickrie.objects import FlickrObject
from flickrie.objects.mapper import map_list

# Accessors that describe how the object is viewed rather than the data
VIEW_ACCESSORS = {"size", "kind", "raw", "caller"}


def entity_classes(cls=FlickrObject):
    for subclass in cls.__subclasses__():
        yield subclass
        yield from entity_classes(subclass)


def blank_accessors():
    for cls in entity_classes():
        for name in sorted(dir(cls)):
            if not name.startswith("_") and isinstance(getattr(cls, name), property) and name not in VIEW_ACCESSORS:
                yield pytest.param(cls, name, id=f"{cls.__name__}.{name}")


@pytest.mark.parametrize("cls, name", list(blank_accessors()))
def test_blank_entity_accessors_return_none(cls, name):
    assert getattr(cls({}), name) is None


def test_blank_exif():
    exif = Exif({})
    assert len(exif) == 0
    assert exif.get("Model") is None


def exif_entries():
    return [
        {
            "tagspace": "IFD0",
            "tag": "Model",
            "label": "Model",
            "raw": {"_content": "iPhone 4S"},
        },
        {
            "tagspace": "IFD0",
            "tag": "XResolution",
            "label": "X-Resolution",
            "raw": {"_content": "72"},
            "clean": {"_content": "72 dpi"},
        },
    ]


def test_exif_lookup():
    exif = Exif(exif_entries())

    assert len(exif) == 2
    assert exif.tags == ["Model", "XResolution"]
    assert exif.get("Model") == "iPhone 4S"
    assert exif.get("XResolution") == "72 dpi"
    assert exif.get("X-Resolution") == "72 dpi"
    assert exif.get("X-Resolution", data="raw") == "72"
    assert exif.get("Flash") is None
    assert exif.get("Flash", "n/a") == "n/a"


def test_media_exif_accessor():
    photo = Photo({"id": "1", "camera": "Apple iPhone 4S", "exif": exif_entries()})
    assert photo.camera == "Apple iPhone 4S"
    assert photo.exif.get("Model") == "iPhone 4S"


def test_comment():
    comment = Comment(
        {
            "id": "67109718-7093101501-72157629492475816",
            "author": "67131352@N04",
            "authorname": "Janko Marohnić",
            "realname": "Janko Marohnić",
            "iconserver": "5464",
            "iconfarm": 6,
            "datecreate": "1335459555",
            "permalink": "https://www.flickr.com/photos/jankomarohnic/7093101501/#comment72157629492475816",
            "_content": "Nice!",
        }
    )

    assert comment.content == "Nice!"
    assert str(comment) == "Nice!"
    assert comment.author.username == "Janko Marohnić"
    assert comment.author.real_name == "Janko Marohnić"
    assert comment.created_at == datetime.fromtimestamp(1335459555, tz=timezone.utc)
    assert comment.url.endswith("#comment72157629492475816")


def test_tag_from_string_extra():
    tag = Tag({"_content": "luka"})
    assert tag.content == "luka"
    assert tag.id is None
    assert tag.author is None
    assert tag.is_machine_tag is None


def test_license_list():
    licenses = map_list(
        [
            {"id": 0, "name": "All Rights Reserved", "url": ""},
            {"id": 4, "name": "Attribution License", "url": "https://creativecommons.org/licenses/by/2.0/"},
        ],
        License,
    )
    assert [license.id for license in licenses] == ["0", "4"]
    assert licenses[0].url is None
    assert str(licenses[1]) == "Attribution License"


@pytest.mark.parametrize(
    "complete, is_complete, is_pending, has_failed",
    [(0, False, True, False), (1, True, False, False), (2, False, False, True)],
)
def test_ticket_status(complete, is_complete, is_pending, has_failed):
    ticket = Ticket({"id": "128", "complete": complete, "photoid": "7093101501"})
    assert ticket.is_complete is is_complete
    assert ticket.is_pending is is_pending
    assert ticket.has_failed is has_failed
    assert ticket.media_id == "7093101501"


def test_invalid_ticket():
    ticket = Ticket({"id": "129", "invalid": 1})
    assert ticket.is_invalid is True
    assert ticket.status is None
    assert ticket.is_complete is None


def test_location_with_plain_place_names():
    location = Location({"latitude": "45.8", "longitude": "15.9", "locality": "Zagreb", "region": ""})
    assert location.locality.name == "Zagreb"
    assert location.region is None


def test_media_count_with_epoch_dates():
    count = MediaCount({"count": "24", "fromdate": "1293840000", "todate": "1312934400"}, dates_kind="unix")
    assert count.value == 24
    assert count.begin == datetime(2011, 1, 1, tzinfo=timezone.utc)
    assert count.date_range == (count.begin, count.end)
    assert count.time_interval == count.date_range


def test_media_count_with_datetime_strings():
    count = MediaCount({"count": 3, "fromdate": "2011-01-03 00:00:00", "todate": "2011-08-11 00:00:00"})
    assert count.date_range == (
        datetime(2011, 1, 3, tzinfo=timezone.utc),
        datetime(2011, 8, 11, tzinfo=timezone.utc),
    )


def test_media_count_params():
    dates = [datetime(2011, 1, 1, tzinfo=timezone.utc), datetime(2011, 8, 10, tzinfo=timezone.utc)]

    params = MediaCount.normalize_params({"dates": dates})
    assert params == {"dates": "1293840000,1312934400"}
    assert MediaCount.dates_kind_for(params) == "unix"

    params = MediaCount.normalize_params({"taken_dates": dates})
    assert params == {"taken_dates": "2011-01-01 00:00:00,2011-08-10 00:00:00"}
    assert MediaCount.dates_kind_for(params) == "mysql"


def test_media_context():
    context = MediaContext(
        {
            "count": {"_content": 23},
            "prevphoto": {"id": "7093038981", "title": "IMG_0795", "media": "video"},
            "nextphoto": {"id": 0},
        }
    )
    assert context.count == 23
    assert isinstance(context.previous, Video)
    assert context.previous.title == "IMG_0795"
    assert context.next is None


def test_repr_shows_display_fields():
    assert repr(Tag({"_content": "luka"})) == "<Tag content='luka'>"
    assert repr(Ticket({})) == "<Ticket>"
