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
"""Cache engine protocol."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Final, Protocol, runtime_checkable

MISS: Final = False
"""Value engines return from ``read`` (and inside ``read_many``) on a cache miss."""

DURATION: Final = "duration"
"""Name of the engine setting holding the default expiration in seconds."""


@runtime_checkable
class CacheEngine(Protocol):
    """Engine contract wrapped by :class:`cachebridge.bridge.Bridge`.

    Engines own storage, eviction and expiration. Writes expire after the
    engine's current ``duration`` setting.
    """

    def read(self, key: str) -> Any: ...

    def write(self, key: str, value: Any) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def clear(self, check: bool) -> bool: ...

    def read_many(self, keys: Iterable[str]) -> dict[str, Any]: ...

    def write_many(self, data: Mapping[str, Any]) -> bool: ...

    def delete_many(self, keys: Iterable[str]) -> bool: ...

    def get_config(self, key: str | None = None, default: Any = None) -> Any: ...

    def set_config(self, key: str | Mapping[str, Any], value: Any = None) -> None: ...
