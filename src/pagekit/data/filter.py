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
"""Filter mini-language: ``property operator value`` triples, comma separated.

Example::

    parse_filters("age gte 18,status eq active")
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

import structlog

from pagekit.kernel.exceptions import FormatException

logger = structlog.get_logger("pagekit.data.filter")


class FilterOperator(StrEnum):
    """Comparison operators accepted in a filter string."""

    EQUALS = "eq"
    NOT_EQUALS = "ne"
    GREATER = "gt"
    GREATER_OR_EQUALS = "gte"
    LESS = "lt"
    LESS_OR_EQUALS = "lte"
    LIKE = "like"
    IN = "in"

    @classmethod
    def of(cls, operator: str) -> FilterOperator:
        """Look up an operator by its wire token (``eq``, ``gte``...)."""
        try:
            return cls(operator)
        except ValueError:
            raise FormatException(
                f"Unknown filter operator '{operator}'",
                code="FILTER_FORMAT",
                context={"input": operator},
            ) from None


@dataclass(frozen=True)
class Filter:
    """A single ``property operator value`` condition."""

    property: str
    operator: FilterOperator
    value: str

    def __str__(self) -> str:
        return f"{self.property} {self.operator.value} {self.value}"


def parse_filters(text: str | None) -> list[Filter]:
    """Parse a comma-separated filter string into filters, in input order.

    Raises:
        FormatException: if *text* is empty, or any item is not exactly three
            space-separated tokens with a known operator. The message quotes
            the whole input, not just the offending item.
    """
    if not text:
        logger.debug("filters_rejected", input=text, reason="FILTER_EMPTY")
        raise FormatException("Filters string cannot be null or empty", code="FILTER_EMPTY", context={"input": text})

    filters: list[Filter] = []
    for item in text.split(","):
        tokens = item.split(" ")
        if len(tokens) != 3:
            raise _bad_format(text)
        property_, operator, value = tokens
        try:
            filters.append(Filter(property=property_, operator=FilterOperator.of(operator), value=value))
        except FormatException:
            raise _bad_format(text) from None
    return filters


def format_filters(filters: Iterable[Filter]) -> str:
    """Render filters back into the comma-separated wire form."""
    return ",".join(str(f) for f in filters)


def _bad_format(text: str) -> FormatException:
    logger.debug("filters_rejected", input=text, reason="FILTER_FORMAT")
    return FormatException(
        f"Bad format of the filters string '{text}'",
        code="FILTER_FORMAT",
        context={"input": text},
    )
