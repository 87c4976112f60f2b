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
"""Shared behaviour for the built-in cache engines."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cachebridge.ports.engine import DURATION


class CacheEngineBase:
    """Settings handling, key prefixing and bulk operations for engines.

    Subclasses implement the single-key operations and ``clear``; the bulk
    operations are built on top of them.
    """

    default_config: dict[str, Any] = {DURATION: 3600, "prefix": ""}

    def __init__(self, **config: Any) -> None:
        self._config: dict[str, Any] = {**self.default_config, **config}

    def get_config(self, key: str | None = None, default: Any = None) -> Any:
        """Return one setting, or a copy of all settings when *key* is None."""
        if key is None:
            return dict(self._config)
        return self._config.get(key, default)

    def set_config(self, key: str | Mapping[str, Any], value: Any = None) -> None:
        """Update one setting, or several when *key* is a mapping."""
        if isinstance(key, Mapping):
            self._config.update(key)
        else:
            self._config[key] = value

    @property
    def backend(self) -> Any:
        """Storage object this engine may share with other engines, if any."""
        return None

    @property
    def prefix(self) -> str:
        return str(self._config.get("prefix") or "")

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def _duration(self) -> int:
        return int(self._config.get(DURATION) or 0)

    def read(self, key: str) -> Any:
        raise NotImplementedError

    def write(self, key: str, value: Any) -> bool:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def clear(self, check: bool) -> bool:
        raise NotImplementedError

    def read_many(self, keys: Iterable[str]) -> dict[str, Any]:
        return {key: self.read(key) for key in keys}

    def write_many(self, data: Mapping[str, Any]) -> bool:
        results = [self.write(key, value) for key, value in data.items()]
        return all(results)

    def delete_many(self, keys: Iterable[str]) -> bool:
        results = [self.delete(key) for key in keys]
        return all(results)
