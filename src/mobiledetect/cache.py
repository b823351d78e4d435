"""
mobiledetect.cache
~~~~~~~~~~~~~~~~~~

Every rule check a :class:`~mobiledetect.MobileDetect` performs ends up
as a regular expression search over the User-Agent.  Most applications
ask the same few questions (``is_mobile()``, ``is_tablet()``, maybe
``is_ios()``) several times while handling a single request, so the
detector remembers every answer in a cache keyed by a fingerprint of the
question and the User-Agent.

The cache used by default is :class:`Cache`, a plain in-memory store:

>>> from mobiledetect.cache import Cache
>>> c = Cache()
>>> c.set("foo", True)
True
>>> c.get("foo")
True
>>> c.get("missing") is None
True

Expiration
==========

Every entry may carry a time to live.  The cache has no background
sweeper and no size limit; instead an entry whose time to live has
elapsed is treated as missing the next time it is looked at and dropped
right then.  A time to live of ``None`` or ``0`` means the entry never
expires.  Long lived caches should still be cleared by the owner between
unrelated requests.
"""
from __future__ import annotations

import collections.abc as cabc
import typing as t
from datetime import timedelta
from time import time

from ._internal import _log
from .exceptions import InvalidKeyError

TTL = t.Optional[t.Union[int, float, timedelta]]


def _ttl_seconds(ttl: TTL) -> float | None:
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        ttl = ttl.total_seconds()
    if ttl == 0:
        return None
    return float(ttl)


def _check_key(key: t.Any) -> None:
    if not key or not isinstance(key, str):
        raise InvalidKeyError(key)


class CacheItem:
    """A single cache record holding a key, its value and the time to
    live it was stored with.

    :param key: the key of the record.
    :param value: the stored value.
    :param ttl: the time to live in seconds or as a
                :class:`~datetime.timedelta`.  ``None`` or ``0`` means
                the record never expires.
    """

    __slots__ = ("key", "value", "ttl", "expires")

    def __init__(self, key: str, value: t.Any = None, ttl: TTL = None) -> None:
        self.key = key
        self.value = value
        self.ttl = ttl
        seconds = _ttl_seconds(ttl)
        #: absolute expiry timestamp or ``None`` if the record never expires
        self.expires = None if seconds is None else time() + seconds

    def is_expired(self, now: float | None = None) -> bool:
        if self.expires is None:
            return False
        if now is None:
            now = time()
        return self.expires <= now

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.key!r}: {self.value!r}>"


class Cache:
    """Simple memory cache for a single detector.  Not thread safe; give
    every thread its own detector and cache or serialize the access.

    :param default_ttl: the time to live used if :meth:`set` is called
                        without one.  ``None`` keeps entries until they
                        are deleted.
    """

    def __init__(self, default_ttl: TTL = None) -> None:
        self.default_ttl = default_ttl
        self._cache: dict[str, CacheItem] = {}

    def _get_live_item(self, key: str) -> CacheItem | None:
        item = self._cache.get(key)
        if item is not None and item.is_expired():
            _log("debug", "Cache entry %r expired.", key)
            del self._cache[key]
            return None
        return item

    def _prune(self) -> None:
        now = time()
        for key, item in list(self._cache.items()):
            if item.is_expired(now):
                del self._cache[key]

    def get(self, key: str, default: t.Any = None) -> t.Any:
        """Looks up key in the cache and returns its value.  If the key
        does not exist or has expired `default` is returned instead.

        :param key: the key to be looked up.
        :param default: returned for missing keys.
        :raises InvalidKeyError: if the key is empty.
        """
        _check_key(key)
        item = self._get_live_item(key)
        if item is None:
            return default
        return item.value

    def get_item(self, key: str) -> CacheItem | None:
        """Like :meth:`get` but returns the :class:`CacheItem` or ``None``."""
        _check_key(key)
        return self._get_live_item(key)

    def set(self, key: str, value: t.Any, ttl: TTL = None) -> bool:
        """Adds or overrides a key in the cache.

        :param key: the key to set.
        :param value: the value for the key.
        :param ttl: the time to live for the key or the default time to
                    live if not specified.
        :raises InvalidKeyError: if the key is empty.
        """
        _check_key(key)
        if ttl is None:
            ttl = self.default_ttl
        self._cache[key] = CacheItem(key, value, ttl)
        return True

    def add(self, key: str, value: t.Any, ttl: TTL = None) -> bool:
        """Works like :meth:`set` but does not override already existing
        values.  Returns whether the value was stored.
        """
        _check_key(key)
        if self._get_live_item(key) is not None:
            return False
        return self.set(key, value, ttl)

    def delete(self, key: str) -> bool:
        """Deletes `key` from the cache.  If it does not exist in the cache
        nothing happens.
        """
        self._cache.pop(key, None)
        return True

    def clear(self) -> bool:
        """Removes every entry."""
        self._cache.clear()
        return True

    def has(self, key: str) -> bool:
        return self._get_live_item(key) is not None

    def count(self) -> int:
        """The number of entries that have not expired yet."""
        self._prune()
        return len(self._cache)

    def get_keys(self) -> list[str]:
        self._prune()
        return list(self._cache)

    def get_multiple(
        self, keys: t.Iterable[str], default: t.Any = None
    ) -> dict[str, t.Any]:
        """Works like :meth:`get` for many keys at once and returns a dict::

            d = cache.get_multiple(["foo", "bar"])
            foo = d["foo"]
            bar = d["bar"]

        :param keys: the keys to look up.
        :param default: the value used for missing keys.
        """
        return {key: self.get(key, default) for key in keys}

    def set_multiple(
        self,
        mapping: t.Mapping[str, t.Any] | t.Iterable[tuple[str, t.Any]],
        ttl: TTL = None,
    ) -> bool:
        """Sets multiple keys and values from a dict or an iterable of
        ``(key, value)`` pairs.

        :param mapping: the values to set.
        :param ttl: the time to live for every key or the default time
                    to live if not specified.
        """
        if isinstance(mapping, cabc.Mapping):
            mapping = mapping.items()
        for key, value in mapping:
            self.set(key, value, ttl)
        return True

    def delete_multiple(self, keys: t.Iterable[str]) -> bool:
        for key in keys:
            self.delete(key)
        return True

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {len(self._cache)} entries>"
