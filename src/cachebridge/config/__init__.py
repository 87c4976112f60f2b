"""Typed configuration properties."""

from cachebridge.config.properties import CacheProperties, EngineProperties, LoggingProperties

__all__ = ["CacheProperties", "EngineProperties", "LoggingProperties"]
