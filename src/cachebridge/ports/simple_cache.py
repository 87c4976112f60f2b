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
"""Simple cache protocol."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

TTL = int | timedelta | None


@runtime_checkable
class SimpleCache(Protocol):
    """Standard key/value cache interface with optional per-call expiration.

    Keys are strings. A ``ttl`` of ``None`` means the backend default
    expiration applies.
    """

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def clear(self) -> bool: ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]: ...

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool: ...

    def delete_multiple(self, keys: Iterable[str]) -> bool: ...

    def has(self, key: str) -> bool: ...
