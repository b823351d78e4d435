from datetime import timedelta

import pytest

from mobiledetect import cache
from mobiledetect.exceptions import CacheException
from mobiledetect.exceptions import InvalidKeyError


class TestCache:
    @pytest.fixture
    def c(self):
        return cache.Cache()

    @pytest.fixture
    def fast_sleep(self, monkeypatch):
        def sleep(delta):
            orig_time = cache.time
            monkeypatch.setattr(cache, "time", lambda: orig_time() + delta)

        return sleep

    def test_get_dict(self, c):
        assert c.set("a", "a")
        assert c.set("b", "b")
        d = c.get_multiple(["a", "b", "c"])
        assert d == {"a": "a", "b": "b", "c": None}

    def test_get_dict_default(self, c):
        assert c.get_multiple(["a"], default=False) == {"a": False}

    def test_set_get(self, c):
        for i in range(3):
            assert c.set(str(i), i * i)

        for i in range(3):
            result = c.get(str(i))
            assert result == i * i, result

    def test_get_default(self, c):
        assert c.get("foo") is None
        assert c.get("foo", "bar") == "bar"

    def test_set_many(self, c):
        assert c.set_multiple({"foo": "bar", "spam": ["eggs"]})
        assert c.get("foo") == "bar"
        assert c.get("spam") == ["eggs"]

    def test_set_many_pairs(self, c):
        assert c.set_multiple([("foo", 1), ("bar", 2)])
        assert c.get_keys() == ["foo", "bar"]

    def test_add(self, c):
        # sanity check that add() works like set()
        assert c.add("foo", "bar")
        assert c.get("foo") == "bar"
        assert not c.add("foo", "qux")
        assert c.get("foo") == "bar"

    def test_delete(self, c):
        assert c.add("foo", "bar")
        assert c.get("foo") == "bar"
        assert c.delete("foo")
        assert c.get("foo") is None
        # deleting a missing key is not an error
        assert c.delete("foo")

    def test_delete_many(self, c):
        assert c.add("foo", "bar")
        assert c.add("spam", "eggs")
        assert c.delete_multiple(["foo", "spam"])
        assert c.get("foo") is None
        assert c.get("spam") is None

    def test_clear(self, c):
        c.set_multiple({"a": 1, "b": 2})
        assert c.clear()
        assert c.count() == 0
        assert c.get_keys() == []

    def test_true_false(self, c):
        assert c.set("foo", True)
        assert c.get("foo") is True
        assert c.set("bar", False)
        assert c.get("bar") is False

    def test_has(self, c):
        assert not c.has("foo")
        assert c.set("foo", "bar")
        assert c.has("foo")
        assert "foo" in c
        assert not c.has("spam")
        c.delete("foo")
        assert not c.has("foo")

    def test_count(self, c):
        assert len(c) == 0
        c.set("a", 1)
        c.set("b", 2)
        c.set("a", 3)
        assert c.count() == 2
        assert len(c) == 2

    def test_get_item(self, c):
        c.set("foo", "bar", 10)
        item = c.get_item("foo")
        assert isinstance(item, cache.CacheItem)
        assert item.key == "foo"
        assert item.value == "bar"
        assert item.ttl == 10
        assert c.get_item("missing") is None

    def test_timeout(self, c, fast_sleep):
        c.set("foo", "bar", 0)
        assert c.get("foo") == "bar"
        c.set("baz", "qux", 1)
        assert c.get("baz") == "qux"
        fast_sleep(3)
        # timeout of zero means no timeout
        assert c.get("foo") == "bar"
        assert c.get("baz") is None

    def test_timeout_timedelta(self, c, fast_sleep):
        c.set("foo", "bar", timedelta(minutes=1))
        fast_sleep(30)
        assert c.get("foo") == "bar"
        fast_sleep(60)
        assert c.get("foo") is None

    def test_expired_entries_are_not_counted(self, c, fast_sleep):
        c.set("short", 1, 1)
        c.set("long", 2, 100)
        c.set("forever", 3)
        assert c.count() == 3
        fast_sleep(10)
        assert not c.has("short")
        assert c.count() == 2
        assert c.get_keys() == ["long", "forever"]

    def test_add_replaces_expired(self, c, fast_sleep):
        c.set("foo", "old", 1)
        fast_sleep(5)
        assert c.add("foo", "new")
        assert c.get("foo") == "new"

    def test_default_ttl(self, fast_sleep):
        c = cache.Cache(default_ttl=5)
        c.set("foo", "bar")
        c.set("baz", "qux", 0)
        fast_sleep(10)
        assert c.get("foo") is None
        assert c.get("baz") == "qux"

    @pytest.mark.parametrize("key", ["", None, 42])
    def test_invalid_key(self, c, key):
        with pytest.raises(InvalidKeyError):
            c.get(key)

        with pytest.raises(InvalidKeyError):
            c.set(key, "value")

        with pytest.raises(InvalidKeyError):
            c.add(key, "value")

    def test_invalid_key_error(self, c):
        with pytest.raises(CacheException) as exc_info:
            c.set("", 1)

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.key == ""
        assert str(exc_info.value) == "Invalid cache key ''."

    def test_repr(self, c):
        c.set("foo", "bar")
        assert repr(c) == "<Cache 1 entries>"
        assert repr(c.get_item("foo")) == "<CacheItem 'foo': 'bar'>"
