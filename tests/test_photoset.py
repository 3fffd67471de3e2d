"""Unit tests for photosets."""

from datetime import datetime, timezone

import pytest

from flickrie import PhotoSet, UnboundEntityError


def test_set_info(set_info):
    photoset = PhotoSet(set_info)

    assert photoset.id == "72157629409394888"
    assert photoset.title == "Speleologija"
    assert photoset.description == "Slike sa speleoloških izleta."
    assert photoset.primary_media_id == "7093101501"
    assert photoset.primary_photo_id == "7093101501"
    assert photoset.views_count == 5
    assert photoset.comments_count == 0
    assert photoset.photos_count == 1
    assert photoset.videos_count == 1
    assert photoset.media_count == 2
    assert photoset.can_comment is True
    assert photoset.created_at == datetime.fromtimestamp(1335459400, tz=timezone.utc)
    assert photoset.owner.nsid == "67131352@N04"
    assert photoset.owner.username == "Janko Marohnić"
    assert photoset.url == "https://www.flickr.com/photos/67131352@N04/sets/72157629409394888"


def test_set_list_item_counts():
    photoset = PhotoSet({"id": "1", "photos": "3", "videos": 2})
    assert photoset.photos_count == 3
    assert photoset.videos_count == 2
    assert photoset.media_count == 5


def test_set_media_count_prefers_total():
    assert PhotoSet({"id": "1", "total": "7", "photos": "3"}).media_count == 7


def test_blank_set():
    photoset = PhotoSet({})
    for name in ("id", "title", "media_count", "owner", "url", "created_at", "can_comment"):
        assert getattr(photoset, name) is None


def test_set_remote_calls(mocker):
    caller = mocker.Mock()
    photoset = PhotoSet({"id": "72157629409394888"}, caller)

    photoset.get_info()
    photoset.get_media(per_page=10)
    photoset.get_photos()
    photoset.get_videos()

    caller.get_set_info.assert_called_once_with("72157629409394888")
    caller.get_media_from_set.assert_called_once_with("72157629409394888", per_page=10)
    caller.get_photos_from_set.assert_called_once_with("72157629409394888")
    caller.get_videos_from_set.assert_called_once_with("72157629409394888")


def test_set_remote_call_without_caller():
    with pytest.raises(UnboundEntityError):
        PhotoSet({"id": "1"}).get_media()
