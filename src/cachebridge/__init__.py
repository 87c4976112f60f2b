"""cachebridge — simple cache interface over named cache engines."""

from cachebridge.bridge import Bridge
from cachebridge.engine import InMemoryEngine, NullEngine, RedisEngine
from cachebridge.exceptions import (
    CacheBridgeException,
    CacheConfigurationException,
    EngineNotFoundException,
    InvalidArgumentException,
)
from cachebridge.logging import LoggingPort, StructlogAdapter
from cachebridge.ports import DURATION, MISS, CacheEngine, SimpleCache
from cachebridge.registry import CacheRegistry, default_registry

__all__ = [
    "DURATION",
    "MISS",
    "Bridge",
    "CacheBridgeException",
    "CacheConfigurationException",
    "CacheEngine",
    "CacheRegistry",
    "EngineNotFoundException",
    "InMemoryEngine",
    "InvalidArgumentException",
    "LoggingPort",
    "NullEngine",
    "RedisEngine",
    "SimpleCache",
    "StructlogAdapter",
    "default_registry",
]
