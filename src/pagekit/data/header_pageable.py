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
"""HeaderPageable: the paging descriptor carried by Range-style headers.

A descriptor names the paged collection and records the zero-based page, the
page size and the total element count. ``-1`` in ``page``, ``size`` or
``total`` marks the value as unknown or not applicable for the header it was
parsed from. Range headers carry no total; Accept-Ranges carries no range at
all.

Descriptors are frozen. Navigation and :meth:`HeaderPageable.to_builder`
always hand back new values.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import structlog

from pagekit.kernel.exceptions import FormatException

logger = structlog.get_logger("pagekit.data")

UNKNOWN = -1

_DEFAULT_ELEMENT_NAME = "elements"


@dataclass(frozen=True)
class HeaderPageable:
    """Paging descriptor: element name, page index, page size and total."""

    element_name: str
    page: int
    size: int
    total: int

    @staticmethod
    def builder() -> HeaderPageableBuilder:
        """Start a builder from the defaults (``elements``, 0, 0, 0)."""
        return HeaderPageableBuilder()

    def to_builder(self) -> HeaderPageableBuilder:
        """Start a builder seeded with this descriptor's values."""
        return HeaderPageableBuilder(self)

    @property
    def start(self) -> int:
        """Index of the first element on the current page."""
        return self.page * self.size

    @property
    def end(self) -> int:
        """Index of the last element on the current page.

        Clamped to ``total - 1`` when the total is known, so the last page may
        be shorter than ``size``.
        """
        end = (self.page + 1) * self.size - 1
        if self.total == UNKNOWN:
            return end
        return min(end, self.total - 1)

    @property
    def has_next(self) -> bool:
        if self.size < 1:
            return False
        return self.page < self._last_page_index()

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def next_page(self) -> HeaderPageable:
        """Return the descriptor for the following page.

        Raises:
            FormatException: if this is already the last page.
        """
        if self.page >= self._last_page_index():
            logger.debug("page_navigation_rejected", direction="next", page=self.page, total=self.total)
            raise FormatException(
                "We are currently on the last page",
                code="PAGE_LAST",
                context=self._paging_context(),
            )
        return dataclasses.replace(self, page=self.page + 1)

    def previous_page(self) -> HeaderPageable:
        """Return the descriptor for the preceding page.

        Raises:
            FormatException: if this is already the first page.
        """
        if not self.has_previous:
            logger.debug("page_navigation_rejected", direction="previous", page=self.page)
            raise FormatException(
                "We are currently on the first page",
                code="PAGE_FIRST",
                context=self._paging_context(),
            )
        return dataclasses.replace(self, page=self.page - 1)

    def first_page(self) -> HeaderPageable:
        return dataclasses.replace(self, page=0)

    def last_page(self) -> HeaderPageable:
        """Return the descriptor for the last page implied by ``total``.

        An empty or unknown total yields page 0.
        """
        return dataclasses.replace(self, page=max(self._last_page_index(), 0))

    def _last_page_index(self) -> int:
        if self.size < 1:
            raise FormatException(
                f"The page size must be at least 1, got {self.size}",
                code="PAGE_SIZE",
                context=self._paging_context(),
            )
        return (self.total - 1) // self.size

    def _paging_context(self) -> dict[str, int | str]:
        return {
            "element_name": self.element_name,
            "page": self.page,
            "size": self.size,
            "total": self.total,
        }


class HeaderPageableBuilder:
    """Fluent staging object for :class:`HeaderPageable`.

    Setters return the builder itself. Nothing is validated here; parsers and
    navigation enforce the paging invariants.

    Usage:
        pageable = HeaderPageable.builder().element_name("items").page(1).size(20).total(100).build()
    """

    def __init__(self, source: HeaderPageable | None = None) -> None:
        if source is None:
            self._element_name = _DEFAULT_ELEMENT_NAME
            self._page = 0
            self._size = 0
            self._total = 0
        else:
            self._element_name = source.element_name
            self._page = source.page
            self._size = source.size
            self._total = source.total

    def element_name(self, element_name: str) -> HeaderPageableBuilder:
        self._element_name = element_name
        return self

    def page(self, page: int) -> HeaderPageableBuilder:
        self._page = page
        return self

    def size(self, size: int) -> HeaderPageableBuilder:
        self._size = size
        return self

    def total(self, total: int) -> HeaderPageableBuilder:
        self._total = total
        return self

    def build(self) -> HeaderPageable:
        return HeaderPageable(
            element_name=self._element_name,
            page=self._page,
            size=self._size,
            total=self._total,
        )
