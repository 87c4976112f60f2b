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
"""Tests for CacheRegistry lookup and config-driven engine construction."""

from unittest.mock import MagicMock, patch

import pytest

from cachebridge.bridge import Bridge
from cachebridge.core.config import Config
from cachebridge.engine import InMemoryEngine, NullEngine, RedisEngine
from cachebridge.exceptions import CacheConfigurationException, EngineNotFoundException
from cachebridge.ports import DURATION
from cachebridge.registry import CacheRegistry


class TestCacheRegistry:
    def test_register_and_resolve(self):
        registry = CacheRegistry()
        engine = InMemoryEngine()
        registry.set_config("default", engine)
        assert registry.engine("default") is engine
        assert "default" in registry
        assert registry.configured() == ["default"]

    def test_unknown_name_raises(self):
        with pytest.raises(EngineNotFoundException, match="'missing' is not configured") as exc_info:
            CacheRegistry().engine("missing")
        assert exc_info.value.code == "ENGINE_NOT_FOUND"
        assert isinstance(exc_info.value, KeyError)

    def test_duplicate_name_raises(self):
        registry = CacheRegistry()
        registry.set_config("default", NullEngine())
        with pytest.raises(CacheConfigurationException, match="already exists"):
            registry.set_config("default", NullEngine())

    def test_drop(self):
        registry = CacheRegistry()
        registry.set_config("default", NullEngine())
        assert registry.drop("default") is True
        assert registry.drop("default") is False
        assert "default" not in registry

    def test_overlapping_prefixes_on_shared_backend_rejected(self):
        store: dict = {}
        registry = CacheRegistry()
        registry.set_config("app", InMemoryEngine(store=store, prefix="app_"))

        with pytest.raises(CacheConfigurationException, match="overlaps 'app'") as exc_info:
            registry.set_config("users", InMemoryEngine(store=store, prefix="app_users_"))
        assert exc_info.value.code == "OVERLAPPING_PREFIX"
        assert "users" not in registry

    def test_empty_prefix_on_shared_backend_rejected(self):
        client = MagicMock()
        registry = CacheRegistry()
        registry.set_config("default", RedisEngine(client, prefix="default_"))

        with pytest.raises(CacheConfigurationException, match="shared backend"):
            registry.set_config("everything", RedisEngine(client))

    def test_distinct_prefixes_or_backends_accepted(self):
        store: dict = {}
        registry = CacheRegistry()
        registry.set_config("a", InMemoryEngine(store=store, prefix="a_"))
        registry.set_config("b", InMemoryEngine(store=store, prefix="b_"))
        registry.set_config("c", InMemoryEngine(prefix=""))
        registry.set_config("d", InMemoryEngine(prefix=""))
        registry.set_config("n1", NullEngine())
        registry.set_config("n2", NullEngine())
        assert registry.configured() == ["a", "b", "c", "d", "n1", "n2"]


class TestRegistryFromConfig:
    def test_builds_engines_from_config(self):
        config = Config(
            {
                "cachebridge": {
                    "cache": {
                        "engines": {
                            "default": {"engine": "memory", "duration": 300, "prefix": "app_"},
                            "blackhole": {"engine": "null"},
                        }
                    }
                }
            }
        )

        registry = CacheRegistry.from_config(config)

        default = registry.engine("default")
        assert isinstance(default, InMemoryEngine)
        assert default.get_config(DURATION) == 300
        assert default.get_config("prefix") == "app_"
        assert isinstance(registry.engine("blackhole"), NullEngine)
        assert registry.engine("blackhole").get_config("prefix") == "blackhole_"
        assert Bridge("default", registry=registry).original_duration == 300

    def test_empty_config_builds_empty_registry(self):
        assert CacheRegistry.from_config(Config({})).configured() == []

    def test_invalid_settings_raise(self):
        config = Config({"cachebridge": {"cache": {"engines": {"x": {"duration": -1}}}}})
        with pytest.raises(CacheConfigurationException):
            CacheRegistry.from_config(config)

    def test_unknown_engine_type_raises(self):
        config = Config({"cachebridge": {"cache": {"engines": {"x": {"engine": "memcached"}}}}})
        with pytest.raises(CacheConfigurationException):
            CacheRegistry.from_config(config)

    def test_redis_engine_from_url_placeholder(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://cache:6379/2")
        config = Config(
            {
                "cachebridge": {
                    "cache": {
                        "engines": {
                            "sessions": {"engine": "redis", "url": "${REDIS_URL:redis://localhost:6379/0}"}
                        }
                    }
                }
            }
        )
        client = MagicMock()

        with (
            patch("cachebridge.registry.is_available", return_value=True),
            patch("cachebridge.registry._redis_client", return_value=client) as redis_client,
        ):
            registry = CacheRegistry.from_config(config)

        redis_client.assert_called_once_with("redis://cache:6379/2")
        engine = registry.engine("sessions")
        assert isinstance(engine, RedisEngine)
        assert engine.backend is client
        assert engine.get_config("prefix") == "sessions_"
        assert engine.get_config(DURATION) == 3600

    def test_redis_engines_on_one_url_share_a_client(self):
        config = Config(
            {
                "cachebridge": {
                    "cache": {
                        "engines": {
                            "default": {"engine": "redis"},
                            "sessions": {"engine": "redis"},
                            "other": {"engine": "redis", "url": "redis://other:6379/0"},
                        }
                    }
                }
            }
        )

        with (
            patch("cachebridge.registry.is_available", return_value=True),
            patch("cachebridge.registry._redis_client", side_effect=lambda url: MagicMock(name=url)) as redis_client,
        ):
            registry = CacheRegistry.from_config(config)

        assert redis_client.call_count == 2
        assert registry.engine("default").backend is registry.engine("sessions").backend
        assert registry.engine("other").backend is not registry.engine("default").backend

    def test_redis_without_package_raises(self):
        config = Config({"cachebridge": {"cache": {"engines": {"s": {"engine": "redis"}}}}})
        with patch("cachebridge.registry.is_available", return_value=False):
            with pytest.raises(CacheConfigurationException, match="not installed"):
                CacheRegistry.from_config(config)
