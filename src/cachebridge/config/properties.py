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
"""Configuration properties for cache engines and logging."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, Field

from cachebridge.core.config import config_properties


class EngineProperties(BaseModel):
    """One named engine under ``cachebridge.cache.engines.<name>``."""

    engine: Literal["memory", "redis", "null"] = "memory"
    duration: int = Field(default=3600, ge=0)
    # None means "<engine name>_"
    prefix: str | None = None
    url: str = "redis://localhost:6379/0"


@config_properties(prefix="cachebridge.cache")
class CacheProperties(BaseModel):
    """Configuration for the engine registry (cachebridge.cache.*)."""

    engines: dict[str, EngineProperties] = Field(default_factory=dict)


@config_properties(prefix="cachebridge.logging")
@dataclass
class LoggingProperties:
    """Configuration for logging (cachebridge.logging.*)."""

    level: dict = field(default_factory=lambda: {"root": "INFO"})
    format: str = "console"
