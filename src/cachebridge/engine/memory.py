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
"""In-memory cache engine."""

from __future__ import annotations

import time
from typing import Any

from cachebridge.engine.base import CacheEngineBase
from cachebridge.ports.engine import MISS

Store = dict[tuple[str, str], tuple[Any, float | None]]


class InMemoryEngine(CacheEngineBase):
    """In-memory engine with duration-based expiry.

    Suitable for development, testing, and single-process applications.
    Several engines may share one *store*. Entries are keyed by
    ``(prefix, key)``, so an engine only ever sees and clears entries
    written under exactly its own prefix.
    """

    def __init__(self, store: Store | None = None, **config: Any) -> None:
        super().__init__(**config)
        self._store: Store = store if store is not None else {}

    @property
    def backend(self) -> Store:
        return self._store

    def _entry_key(self, key: str) -> tuple[str, str]:
        return (self.prefix, key)

    def read(self, key: str) -> Any:
        """Get a value by key. Returns MISS if missing or expired."""
        entry_key = self._entry_key(key)
        entry = self._store.get(entry_key)
        if entry is None:
            return MISS

        value, expires_at = entry
        if expires_at is not None and time.monotonic() > expires_at:
            del self._store[entry_key]
            return MISS

        return value

    def write(self, key: str, value: Any) -> bool:
        """Store a value, expiring after the current duration setting (0 = never)."""
        duration = self._duration()
        expires_at = time.monotonic() + duration if duration > 0 else None
        self._store[self._entry_key(key)] = (value, expires_at)
        return True

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        entry_key = self._entry_key(key)
        if entry_key in self._store:
            del self._store[entry_key]
            return True
        return False

    def clear(self, check: bool) -> bool:
        """Remove this engine's entries; only the expired ones when *check* is set."""
        now = time.monotonic()
        prefix = self.prefix
        for entry_key, (_, expires_at) in list(self._store.items()):
            if entry_key[0] != prefix:
                continue
            if check and (expires_at is None or now <= expires_at):
                continue
            del self._store[entry_key]
        return True

    def get_stats(self) -> dict[str, Any]:
        """Return the number of live entries owned by this engine."""
        now = time.monotonic()
        size = sum(
            1
            for (prefix, _), (_, expires_at) in self._store.items()
            if prefix == self.prefix and (expires_at is None or now <= expires_at)
        )
        return {"size": size, "type": "memory", "duration": self._duration()}
