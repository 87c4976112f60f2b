"""Cache engines — concrete storage behind the bridge."""

from cachebridge.engine.base import CacheEngineBase
from cachebridge.engine.memory import InMemoryEngine
from cachebridge.engine.null import NullEngine
from cachebridge.engine.redis import RedisEngine

__all__ = ["CacheEngineBase", "InMemoryEngine", "NullEngine", "RedisEngine"]
