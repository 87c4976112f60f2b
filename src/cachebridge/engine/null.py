"""Engine that stores nothing."""

from __future__ import annotations

from typing import Any

from cachebridge.engine.base import CacheEngineBase
from cachebridge.ports.engine import MISS


class NullEngine(CacheEngineBase):
    """Accepts every write and forgets it. Every read is a miss."""

    def read(self, key: str) -> Any:
        return MISS

    def write(self, key: str, value: Any) -> bool:
        return True

    def delete(self, key: str) -> bool:
        return True

    def clear(self, check: bool) -> bool:
        return True
