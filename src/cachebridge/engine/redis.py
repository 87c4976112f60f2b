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
"""Redis-backed cache engine."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

from cachebridge.engine.base import CacheEngineBase
from cachebridge.ports.engine import MISS

_logger = logging.getLogger(__name__)

_GLOB_SPECIAL_RE = re.compile(r"([*?\[\]\\])")


def escape_glob(text: str) -> str:
    """Escape Redis glob metacharacters so *text* matches literally."""
    return _GLOB_SPECIAL_RE.sub(r"\\\1", text)


class RedisEngine(CacheEngineBase):
    """Engine that delegates to a synchronous ``redis.Redis``-like client.

    Values are JSON-serialized before storage so that any JSON-compatible
    Python object can be cached transparently. Expiration is handed to
    Redis through ``SET ... EX`` using the current duration setting.

    The engine owns every key under its prefix. Engines sharing a client
    must use prefixes that are not prefixes of one another; the registry
    enforces this.
    """

    def __init__(self, client: Any, **config: Any) -> None:
        super().__init__(**config)
        self._client = client

    @property
    def backend(self) -> Any:
        return self._client

    def read(self, key: str) -> Any:
        """Retrieve and deserialize a cached value."""
        raw = self._client.get(self._key(key))
        if raw is None:
            return MISS
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            _logger.warning("Failed to deserialize cached value for key '%s'", key)
            return MISS

    def write(self, key: str, value: Any) -> bool:
        """Serialize and store a value, expiring after the duration setting (0 = never)."""
        raw = json.dumps(value)
        duration = self._duration()
        ex = duration if duration > 0 else None
        return bool(self._client.set(self._key(key), raw.encode(), ex=ex))

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        count = self._client.delete(self._key(key))
        return bool(count > 0)

    def delete_many(self, keys: Iterable[str]) -> bool:
        full_keys = [self._key(key) for key in keys]
        if not full_keys:
            return True
        self._client.delete(*full_keys)
        return True

    def _own_keys(self) -> list[Any]:
        return list(self._client.scan_iter(match=f"{escape_glob(self.prefix)}*"))

    def clear(self, check: bool) -> bool:
        """Delete every key under this engine's prefix.

        Redis expires keys on its own, so an expired-only sweep has nothing
        to do.
        """
        if check:
            return True
        keys = self._own_keys()
        if keys:
            self._client.delete(*keys)
        return True

    def get_stats(self) -> dict[str, Any]:
        """Return the number of keys under this engine's prefix."""
        return {"size": len(self._own_keys()), "type": "redis", "duration": self._duration()}

    def close(self) -> None:
        """Close the underlying Redis connection."""
        self._client.close()
