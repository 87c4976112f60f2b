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
"""Tests for the exception hierarchy."""

import pytest

from cachebridge.exceptions import (
    CacheBridgeException,
    CacheConfigurationException,
    EngineNotFoundException,
    InvalidArgumentException,
    ValidationException,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc_cls",
        [ValidationException, InvalidArgumentException, CacheConfigurationException, EngineNotFoundException],
    )
    def test_all_inherit_from_base(self, exc_cls):
        assert issubclass(exc_cls, CacheBridgeException)

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentException, ValueError)

    def test_code_and_context_default(self):
        exc = CacheBridgeException("boom")
        assert str(exc) == "boom"
        assert exc.code is None
        assert exc.context == {}

    def test_engine_not_found_message_is_not_quoted(self):
        exc = EngineNotFoundException("Cache engine 'x' is not configured")
        assert str(exc) == "Cache engine 'x' is not configured"
        assert isinstance(exc, KeyError)
