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
"""Named cache engine registry."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from cachebridge.config.properties import CacheProperties, EngineProperties
from cachebridge.core.config import Config
from cachebridge.engine import InMemoryEngine, NullEngine, RedisEngine
from cachebridge.exceptions import CacheConfigurationException, EngineNotFoundException
from cachebridge.ports.engine import DURATION, CacheEngine

logger = logging.getLogger(__name__)


def is_available(module_name: str) -> bool:
    """Check if a Python package is importable."""
    try:
        importlib.import_module(module_name)
        return True
    except ImportError:
        return False


class CacheRegistry:
    """Holds engine instances by configuration name.

    A bridge is constructed with a configuration name and resolves its
    engine here exactly once.
    """

    def __init__(self) -> None:
        self._engines: dict[str, CacheEngine] = {}

    def set_config(self, name: str, engine: CacheEngine) -> None:
        """Register *engine* under *name*. Names cannot be reassigned without drop().

        Engines sharing a backend (an in-memory store or a Redis client)
        must have non-empty prefixes, none of which is a prefix of another,
        so clearing one configuration never reaches into another.
        """
        if name in self._engines:
            raise CacheConfigurationException(
                f"Cache engine '{name}' already exists",
                code="DUPLICATE_CONFIG",
                context={"name": name},
            )
        self._check_prefix_isolation(name, engine)
        self._engines[name] = engine
        logger.debug("Registered cache engine '%s' (%s)", name, type(engine).__name__)

    def _check_prefix_isolation(self, name: str, engine: CacheEngine) -> None:
        backend = getattr(engine, "backend", None)
        if backend is None:
            return
        prefix = str(engine.get_config("prefix") or "")
        for other_name, other in self._engines.items():
            if getattr(other, "backend", None) is not backend:
                continue
            other_prefix = str(other.get_config("prefix") or "")
            if not prefix or not other_prefix or prefix.startswith(other_prefix) or other_prefix.startswith(prefix):
                raise CacheConfigurationException(
                    f"Cache engine '{name}' (prefix '{prefix}') overlaps '{other_name}' "
                    f"(prefix '{other_prefix}') on a shared backend",
                    code="OVERLAPPING_PREFIX",
                    context={"name": name, "other": other_name, "prefix": prefix, "other_prefix": other_prefix},
                )

    def engine(self, name: str) -> CacheEngine:
        """Resolve the engine registered under *name*."""
        try:
            return self._engines[name]
        except KeyError:
            raise EngineNotFoundException(
                f"Cache engine '{name}' is not configured",
                code="ENGINE_NOT_FOUND",
                context={"name": name},
            ) from None

    def drop(self, name: str) -> bool:
        """Forget the engine registered under *name*. Returns True if it existed."""
        return self._engines.pop(name, None) is not None

    def configured(self) -> list[str]:
        """Names of all registered configurations, in registration order."""
        return list(self._engines)

    def __contains__(self, name: object) -> bool:
        return name in self._engines

    @classmethod
    def from_config(cls, config: Config) -> CacheRegistry:
        """Build a registry from the ``cachebridge.cache.engines`` section.

        Redis engines pointing at the same URL share one client.
        """
        try:
            props = config.bind(CacheProperties)
        except ValueError as exc:
            raise CacheConfigurationException(str(exc), code="INVALID_CONFIG") from exc

        registry = cls()
        clients: dict[str, Any] = {}
        for name, engine_props in props.engines.items():
            registry.set_config(name, build_engine(name, engine_props, clients))
        logger.info("Configured cache engines: %s", ", ".join(registry.configured()) or "<none>")
        return registry


def _redis_client(url: str) -> Any:
    import redis

    return redis.Redis.from_url(url)


def build_engine(name: str, props: EngineProperties, clients: dict[str, Any] | None = None) -> CacheEngine:
    """Instantiate the engine described by *props* for configuration *name*.

    *clients* caches Redis clients by URL across calls.
    """
    prefix = props.prefix if props.prefix is not None else f"{name}_"
    settings = {DURATION: props.duration, "prefix": prefix}

    if props.engine == "redis":
        if not is_available("redis"):
            raise CacheConfigurationException(
                "Redis engine requested but the 'redis' package is not installed",
                code="PROVIDER_UNAVAILABLE",
                context={"engine": "redis"},
            )
        clients = clients if clients is not None else {}
        if props.url not in clients:
            clients[props.url] = _redis_client(props.url)
        return RedisEngine(clients[props.url], **settings)

    if props.engine == "null":
        return NullEngine(**settings)

    return InMemoryEngine(**settings)


default_registry = CacheRegistry()
"""Process-wide registry used by bridges constructed without one."""
