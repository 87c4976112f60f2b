# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Simple cache interface on top of a named cache engine."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from datetime import timedelta
from typing import Any

from cachebridge.exceptions import InvalidArgumentException
from cachebridge.ports.engine import DURATION, MISS, CacheEngine
from cachebridge.ports.simple_cache import TTL
from cachebridge.registry import CacheRegistry, default_registry

logger = logging.getLogger(__name__)


class Bridge:
    """Adds a :class:`~cachebridge.ports.SimpleCache` interface to a cache engine.

    The engine is resolved once, by configuration name, from a
    :class:`~cachebridge.registry.CacheRegistry`. Engines only expose a
    shared ``duration`` setting, so a per-call ``ttl`` is applied by
    overriding that setting for the length of the write and restoring the
    value captured at construction afterwards.

    Writes through one bridge are serialized so an override is never
    observed by another write of the same bridge. Code writing to the same
    engine without going through this bridge is not covered.

    NOTE: engines signal a miss with ``False`` (:data:`~cachebridge.ports.MISS`),
    so a stored ``False`` reads back as a miss.
    """

    INVALID_KEY = "Key provided must be a string"
    INVALID_KEYS = "Keys provided must be an iterable of string keys"
    INVALID_VALUES = "Values provided must be a mapping with string keys"
    INVALID_TTL = "TTL provided must be an int, a timedelta or None"

    def __init__(self, cache_config: str, registry: CacheRegistry | None = None) -> None:
        self._cache_config = cache_config
        self._cache_engine: CacheEngine = (registry or default_registry).engine(cache_config)
        self._original_duration: Any = self._cache_engine.get_config(DURATION)
        self._write_lock = threading.RLock()

    @property
    def cache_config(self) -> str:
        return self._cache_config

    @property
    def engine(self) -> CacheEngine:
        return self._cache_engine

    @property
    def original_duration(self) -> Any:
        """Engine duration captured at construction; restored after every TTL write."""
        return self._original_duration

    def get(self, key: str, default: Any = None) -> Any:
        """Fetch a value from the cache.

        Args:
            key: The unique key of this item in the cache.
            default: Value returned on a cache miss.

        Returns:
            The cached value, or *default* on a cache miss.

        Raises:
            InvalidArgumentException: If *key* is not a string.
        """
        self._validate_key(key)

        value = self._cache_engine.read(key)
        return default if value is MISS else value

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Persist *value* under *key*, with an optional expiration.

        Args:
            key: The key of the item to store.
            value: The value to store; the engine must be able to serialize it.
            ttl: Seconds or a ``timedelta``. ``None`` keeps the engine's duration.
                A TTL of zero seconds or less (after truncation to whole
                seconds) means already expired: the key is deleted instead.

        Returns:
            The engine's success flag.

        Raises:
            InvalidArgumentException: If *key* is not a string or *ttl* is not
                an accepted type.
        """
        self._validate_key(key)
        duration = self._ttl_to_duration(ttl)

        if duration is not None and duration <= 0:
            self._cache_engine.delete(key)
            return True

        with self._duration_override(duration):
            return self._cache_engine.write(key, value)

    def delete(self, key: str) -> bool:
        """Delete an item by key. Returns the engine's success flag."""
        self._validate_key(key)

        return self._cache_engine.delete(key)

    def clear(self) -> bool:
        """Remove every entry of this configuration, expired or not."""
        return self._cache_engine.clear(False)

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch several values in one engine call.

        Returns:
            One entry per requested key, in request order. Misses map to
            *default*.

        Raises:
            InvalidArgumentException: If *keys* is not an iterable of strings.
        """
        key_list = self._keys_as_list(keys)

        values = self._cache_engine.read_many(key_list)
        result: dict[str, Any] = {}
        for key in key_list:
            value = values.get(key, MISS)
            result[key] = default if value is MISS else value
        return result

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Persist several key/value pairs in one engine call.

        The optional *ttl* applies to every pair, exactly as in :meth:`set`,
        including the delete on a non-positive TTL.

        Raises:
            InvalidArgumentException: If *values* is not a mapping (or an
                iterable of pairs) with string keys, or *ttl* is invalid.
        """
        data = self._values_as_dict(values)
        duration = self._ttl_to_duration(ttl)

        if duration is not None and duration <= 0:
            self._cache_engine.delete_many(list(data))
            return True

        with self._duration_override(duration):
            return self._cache_engine.write_many(data)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several keys in one engine call."""
        key_list = self._keys_as_list(keys)

        return self._cache_engine.delete_many(key_list)

    def has(self, key: str) -> bool:
        """Determine whether an item is present in the cache.

        Only meant for cache warming: another process may remove the item
        right after this returns True.

        NOTE: a stored falsy value (``""``, ``0``, ``False``, empty
        containers) is reported as absent.
        """
        return bool(self.get(key, False))

    @contextmanager
    def _duration_override(self, duration: int | None) -> Iterator[None]:
        with self._write_lock:
            if duration is None:
                yield
                return

            logger.debug("Overriding duration of '%s' to %ss", self._cache_config, duration)
            self._cache_engine.set_config(DURATION, duration)
            try:
                yield
            finally:
                self._cache_engine.set_config(DURATION, self._original_duration)
                logger.debug("Restored duration of '%s' to %ss", self._cache_config, self._original_duration)

    def _ttl_to_duration(self, ttl: TTL) -> int | None:
        if ttl is None:
            return None
        if isinstance(ttl, timedelta):
            return int(ttl.total_seconds())
        if isinstance(ttl, (int, float)) and not isinstance(ttl, bool):
            return int(ttl)
        raise InvalidArgumentException(
            self.INVALID_TTL,
            code="INVALID_ARGUMENT",
            context={"type": type(ttl).__name__},
        )

    def _validate_key(self, key: object) -> None:
        if not isinstance(key, str):
            raise InvalidArgumentException(
                self.INVALID_KEY,
                code="INVALID_ARGUMENT",
                context={"type": type(key).__name__},
            )

    def _keys_as_list(self, keys: object) -> list[str]:
        if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
            raise InvalidArgumentException(
                self.INVALID_KEYS,
                code="INVALID_ARGUMENT",
                context={"type": type(keys).__name__},
            )

        key_list = list(keys)
        for key in key_list:
            if not isinstance(key, str):
                raise InvalidArgumentException(
                    self.INVALID_KEYS,
                    code="INVALID_ARGUMENT",
                    context={"type": type(key).__name__},
                )
        return key_list

    def _values_as_dict(self, values: object) -> dict[str, Any]:
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise self._invalid_values(values)

        if isinstance(values, Mapping):
            data = dict(values)
        else:
            data = {}
            for pair in values:
                if not isinstance(pair, tuple) or len(pair) != 2:
                    raise self._invalid_values(pair)
                data[pair[0]] = pair[1]

        for key in data:
            if not isinstance(key, str):
                raise self._invalid_values(key)
        return data

    def _invalid_values(self, offending: object) -> InvalidArgumentException:
        return InvalidArgumentException(
            self.INVALID_VALUES,
            code="INVALID_ARGUMENT",
            context={"type": type(offending).__name__},
        )
