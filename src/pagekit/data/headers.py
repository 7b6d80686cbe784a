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
"""Parse and render the Range, Content-Range and Accept-Ranges paging headers.

Wire formats (prefixes are case-sensitive)::

    Range: <element_name>=<start>-<end>
    Content-Range: <element_name> <start>-<end>/<total>
    Accept-Ranges: <element_name>

Parsers return a :class:`HeaderPageable` and raise :class:`FormatException`
quoting the whole header on any failure. Renderers never fail; they compute
the page bounds from the descriptor on every call.
"""

from __future__ import annotations

import re

import structlog

from pagekit.data.header_pageable import UNKNOWN, HeaderPageable
from pagekit.kernel.exceptions import FormatException

logger = structlog.get_logger("pagekit.data.headers")

RANGE = "Range"
CONTENT_RANGE = "Content-Range"
ACCEPT_RANGES = "Accept-Ranges"

_RANGE_PATTERN = re.compile(r"Range: (?P<name>[A-Za-z0-9_-]+)=(?P<start>[0-9]+)-(?P<end>[0-9]+)")
_CONTENT_RANGE_PATTERN = re.compile(
    r"Content-Range: (?P<name>[A-Za-z]+) (?P<start>[0-9]+)-(?P<end>[0-9]+)/(?P<total>[0-9]+)"
)
_ACCEPT_RANGES_PATTERN = re.compile(r"Accept-Ranges: (?P<name>[A-Za-z]+)")

_RANGE_EXAMPLE = "Range: elements=0-9"
_CONTENT_RANGE_EXAMPLE = "Content-Range: elements 0-9/100"
_ACCEPT_RANGES_EXAMPLE = "Accept-Ranges: elements"


def _reject(header: str, reason: str, code: str) -> FormatException:
    logger.debug("header_rejected", input=header, reason=code)
    return FormatException(
        f"Header '{header}' is not in the correct format. {reason}",
        code=code,
        context={"input": header},
    )


def _match(pattern: re.Pattern[str], header: str | None, example: str) -> re.Match[str]:
    if not header:
        logger.debug("header_rejected", input=header, reason="HEADER_EMPTY")
        raise FormatException("Header cannot be null or empty", code="HEADER_EMPTY", context={"input": header})
    match = pattern.fullmatch(header)
    if match is None:
        raise _reject(header, f"The format must be like '{example}'", "HEADER_FORMAT")
    return match


def _page_and_size(header: str, start: int, end: int) -> tuple[int, int]:
    # start == end is rejected as well: a one-element range cannot be expressed.
    if end <= start:
        raise _reject(header, "The end must be greater than the start", "RANGE_ORDER")
    size = end - start + 1
    if start % size != 0:
        raise _reject(header, "The start must be a multiple of the page size", "RANGE_ALIGNMENT")
    return start // size, size


def parse_range_header(header: str | None) -> HeaderPageable:
    """Parse ``Range: items=0-9`` into a descriptor with an unknown total.

    Raises:
        FormatException: if the header is empty, malformed, has ``end <= start``
            or a start that is not on a page boundary.
    """
    match = _match(_RANGE_PATTERN, header, _RANGE_EXAMPLE)
    page, size = _page_and_size(match.string, int(match["start"]), int(match["end"]))
    return HeaderPageable(element_name=match["name"], page=page, size=size, total=UNKNOWN)


def parse_content_range_header(header: str | None) -> HeaderPageable:
    """Parse ``Content-Range: items 0-9/100`` into a descriptor.

    Raises:
        FormatException: on the same failures as :func:`parse_range_header`,
            and when the start is not below the total.
    """
    match = _match(_CONTENT_RANGE_PATTERN, header, _CONTENT_RANGE_EXAMPLE)
    start = int(match["start"])
    page, size = _page_and_size(match.string, start, int(match["end"]))
    total = int(match["total"])
    if start >= total:
        raise _reject(match.string, "The start must be less than the total", "RANGE_TOTAL")
    return HeaderPageable(element_name=match["name"], page=page, size=size, total=total)


def parse_accept_ranges_header(header: str | None) -> HeaderPageable:
    """Parse ``Accept-Ranges: items``; page, size and total are all ``-1``."""
    match = _match(_ACCEPT_RANGES_PATTERN, header, _ACCEPT_RANGES_EXAMPLE)
    return HeaderPageable(element_name=match["name"], page=UNKNOWN, size=UNKNOWN, total=UNKNOWN)


def to_range_header(pageable: HeaderPageable) -> str:
    return f"{RANGE}: {pageable.element_name}={pageable.start}-{pageable.end}"


def to_content_range_header(pageable: HeaderPageable) -> str:
    return f"{CONTENT_RANGE}: {pageable.element_name} {pageable.start}-{pageable.end}/{pageable.total}"


def to_accept_ranges_header(pageable: HeaderPageable) -> str:
    return f"{ACCEPT_RANGES}: {pageable.element_name}"
