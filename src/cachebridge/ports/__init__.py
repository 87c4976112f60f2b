"""Ports: the simple-cache contract and the engine contract it is bridged onto."""

from cachebridge.ports.engine import DURATION, MISS, CacheEngine
from cachebridge.ports.simple_cache import SimpleCache

__all__ = ["DURATION", "MISS", "CacheEngine", "SimpleCache"]
