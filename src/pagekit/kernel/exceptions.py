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
"""Unified exception hierarchy for pagekit.

All library exceptions inherit from PagekitException, so callers can map every
failure to a client error at a single boundary.

Categories:
- BusinessException: rule violations in caller-supplied input
- ValidationException: input that fails a syntactic or semantic check
- FormatException: a header or query string that cannot be parsed, or a
  navigation step that would leave the valid page range
"""

from __future__ import annotations

from typing import Any


class PagekitException(Exception):
    """Base exception for all pagekit errors.

    Args:
        message: Human-readable error description, usually quoting the input.
        code: Machine-readable error code (e.g. "HEADER_FORMAT").
        context: Arbitrary key-value pairs describing the rejected input.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict[str, Any] = context if context is not None else {}


class BusinessException(PagekitException):
    """Rule violations in caller-supplied input."""


class ValidationException(BusinessException):
    """Input validation failures."""


class FormatException(ValidationException):
    """A header, filter or sort string is malformed, or paging went out of range."""
