import json

import pytest
from fastapi import Response

from indiaaura.catalog.bookmarks import BookmarkStore
from indiaaura.config import settings


def test_empty_store():
    store = BookmarkStore()
    assert store.ids == []
    assert len(store) == 0


def test_add_is_idempotent(repository):
    store = BookmarkStore()
    store.add("1")
    assert store.add("1") == ["1"]
    assert [item.id for item in store.resolve(repository)] == ["1"]


def test_add_keeps_order():
    store = BookmarkStore('["3"]')
    assert store.add("1") == ["3", "1"]
    assert "1" in store


def test_remove(repository):
    store = BookmarkStore('["1","2"]')
    assert store.remove("1") == ["2"]
    assert "1" not in [item.id for item in store.resolve(repository)]


def test_remove_missing_is_noop():
    store = BookmarkStore('["2"]')
    assert store.remove("1") == ["2"]


@pytest.mark.parametrize("raw", ["not valid json", "{\"a\": 1}", "42", "", None])
def test_bad_cookie_counts_as_empty(repository, raw):
    store = BookmarkStore(raw)
    assert store.ids == []
    assert store.resolve(repository) == []


def test_bad_cookie_recovers_on_write():
    store = BookmarkStore("not valid json")
    assert store.add("5") == ["5"]
    assert json.loads(store.cookie_value()) == ["5"]


def test_resolve_drops_unknown_ids_and_keeps_order(repository):
    store = BookmarkStore('["17","999","1"]')
    assert [item.id for item in store.resolve(repository)] == ["17", "1"]


def test_duplicates_and_non_strings_in_cookie():
    store = BookmarkStore('["1", 2, "1", null, true, {"x": 1}]')
    assert store.ids == ["1", "2"]


def test_write_cookie_sets_expiry_and_path():
    store = BookmarkStore()
    store.add("1")
    response = Response()
    store.write_cookie(response)
    header = response.headers["set-cookie"]
    assert header.startswith(f"{settings.BOOKMARK_COOKIE_NAME}=")
    assert f"Max-Age={settings.BOOKMARK_MAX_AGE}" in header
    assert "Path=/" in header
