"""Core configuration support."""

from cachebridge.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
