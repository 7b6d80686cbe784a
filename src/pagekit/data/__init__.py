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
"""pagekit Data: paging headers and the filter/sort query-string parsers.

Three independent modules:
    - ``header_pageable`` / ``headers``: the HeaderPageable descriptor and its
      Range, Content-Range and Accept-Ranges codec.
    - ``filter``: ``property operator value`` filter strings.
    - ``sort``: ``property[:asc|desc]`` sort strings.
"""

from pagekit.data.filter import Filter, FilterOperator, format_filters, parse_filters
from pagekit.data.header_pageable import UNKNOWN, HeaderPageable, HeaderPageableBuilder
from pagekit.data.headers import (
    ACCEPT_RANGES,
    CONTENT_RANGE,
    RANGE,
    parse_accept_ranges_header,
    parse_content_range_header,
    parse_range_header,
    to_accept_ranges_header,
    to_content_range_header,
    to_range_header,
)
from pagekit.data.sort import Order, Sort, SortOrder, parse_sort

__all__ = [
    # Headers
    "ACCEPT_RANGES",
    "CONTENT_RANGE",
    "RANGE",
    "UNKNOWN",
    "HeaderPageable",
    "HeaderPageableBuilder",
    "parse_accept_ranges_header",
    "parse_content_range_header",
    "parse_range_header",
    "to_accept_ranges_header",
    "to_content_range_header",
    "to_range_header",
    # Filters
    "Filter",
    "FilterOperator",
    "format_filters",
    "parse_filters",
    # Sorting
    "Order",
    "Sort",
    "SortOrder",
    "parse_sort",
]
