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
"""Sort directives: ``property[:asc|desc]`` entries, comma separated."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

import structlog

from pagekit.kernel.exceptions import FormatException

logger = structlog.get_logger("pagekit.data.sort")

_SORT_PATTERN = re.compile(
    r"[a-z_]+(?::(?:asc|desc))?(?:,[a-z_]+(?::(?:asc|desc))?)*",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")


class SortOrder(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Order:
    """A single sort order: property name + direction."""

    property: str
    direction: SortOrder = SortOrder.ASC

    @staticmethod
    def asc(property: str) -> Order:
        return Order(property=property, direction=SortOrder.ASC)

    @staticmethod
    def desc(property: str) -> Order:
        return Order(property=property, direction=SortOrder.DESC)

    def __str__(self) -> str:
        return f"{self.property}:{self.direction.value.lower()}"


@dataclass(frozen=True)
class Sort:
    """Ordered collection of sort orders; the first order is the primary key."""

    orders: tuple[Order, ...] = ()

    @staticmethod
    def by(*properties: str) -> Sort:
        """Create ascending sort by properties."""
        return Sort(orders=tuple(Order.asc(p) for p in properties))

    @staticmethod
    def unsorted() -> Sort:
        return Sort()

    def and_then(self, other: Sort) -> Sort:
        """Combine sorts, appending *other*'s orders after this sort's orders."""
        return Sort(orders=self.orders + other.orders)

    def descending(self) -> Sort:
        return Sort(orders=tuple(Order.desc(o.property) for o in self.orders))

    def ascending(self) -> Sort:
        return Sort(orders=tuple(Order.asc(o.property) for o in self.orders))

    def to_query(self) -> str:
        """Render as ``firstName:asc,lastName:desc``."""
        return ",".join(str(o) for o in self.orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)


def parse_sort(text: str | None) -> Sort:
    """Parse a sort string such as ``firstName:asc, lastName:desc``.

    Whitespace anywhere in the input is ignored. A property without an order
    sorts ascending; the order token is case-insensitive.

    Raises:
        FormatException: if *text* is empty or does not match the grammar.
            The message quotes the input as given, before whitespace removal.
    """
    if not text:
        logger.debug("sort_rejected", input=text, reason="SORT_EMPTY")
        raise FormatException("Sorts string cannot be null or empty", code="SORT_EMPTY", context={"input": text})

    clean = _WHITESPACE.sub("", text)
    if not _SORT_PATTERN.fullmatch(clean):
        logger.debug("sort_rejected", input=text, reason="SORT_FORMAT")
        raise FormatException(
            f"Bad format of the sorts string '{text}'",
            code="SORT_FORMAT",
            context={"input": text},
        )

    orders: list[Order] = []
    for entry in clean.split(","):
        property_, _, direction = entry.partition(":")
        orders.append(Order(property=property_, direction=SortOrder(direction.upper() or SortOrder.ASC.value)))
    return Sort(orders=tuple(orders))
