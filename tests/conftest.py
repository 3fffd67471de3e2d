"""Test configuration for pytest."""

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest

from flickrie import Flickrie, Settings


@pytest.fixture(autouse=True)
def setup_logging():
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)
    yield


@pytest.fixture(autouse=True)
def isolated_token_file(tmp_path, monkeypatch):
    """Keep tests away from a real saved access token."""
    path = tmp_path / "flickr_access_token.json"
    monkeypatch.setattr("flickrie.core.config.token_path", lambda: path)
    monkeypatch.setattr("flickrie.api.auth.token_path", lambda: path)
    return path


def _make_response(body: Any = None, status_code: int = 200, content: bytes = b"") -> MagicMock:
    """Create a mock requests response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.content = content
    return response


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test_key", shared_secret="test_secret")


@pytest.fixture
def authenticated_settings(settings) -> Settings:
    return settings.with_access_token("test_token", "test_token_secret")


@pytest.fixture
def session() -> MagicMock:
    """A mock requests session answering every call with an "ok" envelope."""
    session = MagicMock()
    session.request.return_value = _make_response({"stat": "ok"})
    return session


@pytest.fixture
def upload_session() -> MagicMock:
    session = MagicMock()
    session.post.return_value = _make_response(
        content=b'<?xml version="1.0" encoding="utf-8" ?>\n<rsp stat="ok">\n<photoid>1234</photoid>\n</rsp>\n'
    )
    return session


@pytest.fixture
def flickr(authenticated_settings, session, upload_session) -> Flickrie:
    return Flickrie(settings=authenticated_settings, session=session, upload_session=upload_session)


@pytest.fixture
def make_response():
    """Factory for mock requests responses."""
    return _make_response


@pytest.fixture
def respond(session):
    """Make the mock session answer with a payload plus an "ok" status."""

    def respond_with(body: dict[str, Any]) -> None:
        session.request.return_value = _make_response({**body, "stat": "ok"})

    return respond_with


@pytest.fixture
def sent(session):
    """Return the parameters of the last request sent through the mock session."""

    def sent_params() -> dict[str, Any]:
        kwargs = session.request.call_args.kwargs
        return kwargs["params"] if kwargs.get("params") is not None else kwargs["data"]

    return sent_params


@pytest.fixture
def photo_info() -> dict[str, Any]:
    """``photos.getInfo`` payload of a photo."""
    return {
        "id": "7093101501",
        "secret": "9337f28800",
        "server": "7049",
        "farm": 8,
        "dateuploaded": "1333789113",
        "isfavorite": 0,
        "license": "0",
        "safety_level": "0",
        "rotation": 90,
        "originalsecret": "2a8b5e4f9c",
        "originalformat": "jpg",
        "views": "32",
        "media": "photo",
        "owner": {
            "nsid": "67131352@N04",
            "username": "Janko Marohnić",
            "realname": "Janko Marohnić",
            "location": "Zagreb, Croatia",
            "iconserver": "5464",
            "iconfarm": 6,
            "path_alias": "jankomarohnic",
        },
        "title": {"_content": "IMG_0796"},
        "description": {"_content": "test"},
        "visibility": {"ispublic": 1, "isfriend": 0, "isfamily": 0},
        "dates": {
            "posted": "1333789113",
            "taken": "2012-04-07 10:58:33",
            "takengranularity": "0",
            "lastupdate": "1335459463",
        },
        "permissions": {"permcomment": 3, "permaddmeta": 2},
        "editability": {"cancomment": 1, "canaddmeta": 1},
        "publiceditability": {"cancomment": 1, "canaddmeta": 0},
        "usage": {"candownload": 1, "canblog": 1, "canprint": 0, "canshare": 1},
        "comments": {"_content": "1"},
        "notes": {
            "note": [
                {
                    "id": "72157629487842968",
                    "author": "67131352@N04",
                    "authorname": "Janko Marohnić",
                    "x": "316",
                    "y": "0",
                    "w": "18",
                    "h": "19",
                    "_content": "Test",
                }
            ]
        },
        "people": {"haspeople": 0},
        "tags": {
            "tag": [
                {
                    "id": "67109718-7093101501-101",
                    "author": "67131352@N04",
                    "raw": "luka",
                    "_content": "luka",
                    "machine_tag": 0,
                },
                {
                    "id": "67109718-7093101501-102",
                    "author": "67131352@N04",
                    "raw": "flickr:user=jan",
                    "_content": "flickr:user=jan",
                    "machine_tag": 1,
                },
            ]
        },
        "location": {
            "latitude": 45.831011,
            "longitude": 15.943103,
            "accuracy": "16",
            "context": "0",
            "locality": {"_content": "Zagreb", "place_id": "00j4IylZV7scWik", "woeid": "851128"},
            "county": {"_content": "Grad Zagreb", "place_id": "306dHrmdB5b_ZgDs", "woeid": "15022257"},
            "region": {"_content": "Grad Zagreb", "place_id": "Js1DU7OaBpkS8zDcLg", "woeid": "20070170"},
            "country": {"_content": "Croatia", "place_id": "FunRCI5TUb6a6soTyw", "woeid": "23424843"},
            "place_id": "00j4IylZV7scWik",
            "woeid": "851128",
        },
        "geoperms": {"ispublic": 1, "iscontact": 0, "isfriend": 0, "isfamily": 0},
        "urls": {
            "url": [
                {"type": "photopage", "_content": "https://www.flickr.com/photos/jankomarohnic/7093101501/"}
            ]
        },
        "media_status": "ready",
    }


@pytest.fixture
def video_info() -> dict[str, Any]:
    """``photos.getInfo`` payload of a video."""
    return {
        "id": "7093038981",
        "secret": "696e2d6b8f",
        "server": "7198",
        "farm": 8,
        "media": "video",
        "owner": {"nsid": "67131352@N04", "username": "Janko Marohnić"},
        "title": {"_content": "IMG_0795"},
        "description": {"_content": ""},
        "dates": {"posted": "1333788898", "taken": "2012-04-07 10:54:58", "lastupdate": "1335459463"},
        "video": {
            "ready": 1,
            "failed": 0,
            "pending": 0,
            "duration": "16",
            "width": "352",
            "height": "640",
        },
    }


@pytest.fixture
def video_sizes() -> dict[str, Any]:
    """``photos.getSizes`` payload of a video."""
    return {
        "canblog": 0,
        "canprint": 0,
        "candownload": 1,
        "size": [
            {"label": "Square", "width": 75, "height": 75, "source": "https://farm8.staticflickr.com/7198/7093038981_696e2d6b8f_s.jpg", "media": "photo"},
            {"label": "Video Player", "width": 352, "height": 640, "source": "https://www.flickr.com/apps/video/stewart.swf?photo_id=7093038981", "media": "video"},
            {"label": "Site MP4", "width": 352, "height": 640, "source": "https://www.flickr.com/photos/67131352@N04/7093038981/play/site/696e2d6b8f/", "media": "video"},
            {"label": "Mobile MP4", "width": 176, "height": 320, "source": "https://www.flickr.com/photos/67131352@N04/7093038981/play/mobile/696e2d6b8f/", "media": "video"},
        ],
    }


@pytest.fixture
def photo_list_item() -> dict[str, Any]:
    """A photo as list endpoints return it, with extras."""
    return {
        "id": "7049757411",
        "owner": "67131352@N04",
        "ownername": "Janko Marohnić",
        "secret": "9f5ba4bd5f",
        "server": "7084",
        "farm": 8,
        "title": "IMG_0797",
        "ispublic": 1,
        "isfriend": 0,
        "isfamily": 0,
        "license": "4",
        "dateupload": "1333789145",
        "lastupdate": "1335459463",
        "datetaken": "2012-04-07 10:58:52",
        "datetakengranularity": "0",
        "views": "10",
        "tags": "luka zagreb",
        "machine_tags": "",
        "latitude": 0,
        "longitude": 0,
        "accuracy": 0,
        "media": "photo",
        "url_sq": "https://farm8.staticflickr.com/7084/7049757411_9f5ba4bd5f_s.jpg",
        "height_sq": 75,
        "width_sq": 75,
        "url_m": "https://farm8.staticflickr.com/7084/7049757411_9f5ba4bd5f.jpg",
        "height_m": "375",
        "width_m": "500",
        "url_l": "https://farm8.staticflickr.com/7084/7049757411_9f5ba4bd5f_b.jpg",
        "height_l": "768",
        "width_l": "1024",
    }


@pytest.fixture
def photos_page(photo_list_item) -> dict[str, Any]:
    """A paginated ``photos`` payload mixing a photo and a video."""
    return {
        "page": 1,
        "pages": 3,
        "perpage": 2,
        "total": "5",
        "photo": [
            photo_list_item,
            {
                "id": "7093038981",
                "owner": "67131352@N04",
                "secret": "696e2d6b8f",
                "server": "7198",
                "farm": 8,
                "title": "IMG_0795",
                "ispublic": 1,
                "isfriend": 0,
                "isfamily": 0,
                "media": "video",
            },
        ],
    }


@pytest.fixture
def set_info() -> dict[str, Any]:
    """``photosets.getInfo`` payload."""
    return {
        "id": "72157629409394888",
        "owner": "67131352@N04",
        "username": "Janko Marohnić",
        "primary": "7093101501",
        "secret": "9337f28800",
        "server": "7049",
        "farm": 8,
        "photos": 2,
        "count_views": "5",
        "count_comments": "0",
        "count_photos": "1",
        "count_videos": 1,
        "title": {"_content": "Speleologija"},
        "description": {"_content": "Slike sa speleoloških izleta."},
        "can_comment": 1,
        "date_create": "1335459400",
        "date_update": "1335459463",
    }
