"""Unit tests for parameter helpers."""

from datetime import datetime, timedelta, timezone

from flickrie.core.utils import (
    append_extras,
    deep_merge,
    except_keys,
    format_param,
    format_params,
    join_list,
    utc_datetime_string,
)


def test_join_list():
    assert join_list(["1", 2, "3"]) == "1,2,3"
    assert join_list("1,2,3") == "1,2,3"
    assert join_list(42) == "42"
    assert join_list(("a", "b"), separator=" ") == "a b"


def test_append_extras_keeps_existing_entries_first():
    assert append_extras(None, "media") == "media"
    assert append_extras("tags,views", "media") == "tags,views,media"
    assert append_extras(["media", "tags"], "media") == "media,tags"
    assert append_extras("", "url_m", "url_o") == "url_m,url_o"


def test_format_param():
    assert format_param(True) == "1"
    assert format_param(False) == "0"
    assert format_param(5) == "5"
    assert format_param(["72157", "72158"]) == "72157,72158"
    assert format_param(datetime(2012, 4, 7, 8, 58, 33, tzinfo=timezone.utc)) == "1333789113"


def test_format_params_drops_none_values():
    assert format_params({"title": "Pool", "description": None, "is_public": True}) == {
        "title": "Pool",
        "is_public": "1",
    }


def test_utc_datetime_string_converts_to_utc():
    zagreb = timezone(timedelta(hours=2))
    assert utc_datetime_string(datetime(2012, 4, 7, 10, 58, 33, tzinfo=zagreb)) == "2012-04-07 08:58:33"
    assert utc_datetime_string(datetime(2012, 4, 7, 10, 58, 33)) == "2012-04-07 10:58:33"


def test_deep_merge_leaves_arguments_alone():
    base = {"owner": {"nsid": "1@N01", "username": "jan"}, "title": "Cave"}
    other = {"owner": {"username": "janko"}, "views": "3"}

    merged = deep_merge(base, other)

    assert merged == {"owner": {"nsid": "1@N01", "username": "janko"}, "title": "Cave", "views": "3"}
    assert base["owner"]["username"] == "jan"
    assert "views" not in base


def test_deep_merge_replaces_non_mappings():
    assert deep_merge({"owner": "1@N01"}, {"owner": {"nsid": "2@N01"}}) == {"owner": {"nsid": "2@N01"}}


def test_except_keys():
    params = {"api_key": "key", "photo_id": "1"}
    assert except_keys(params, "api_key", "missing") == {"photo_id": "1"}
    assert params == {"api_key": "key", "photo_id": "1"}
