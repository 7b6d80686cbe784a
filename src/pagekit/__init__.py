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
"""pagekit: pagination headers and list-endpoint query strings.

Pure functions over frozen value objects; no I/O and no shared state.
"""

from pagekit.data import (
    Filter,
    FilterOperator,
    HeaderPageable,
    HeaderPageableBuilder,
    Order,
    Sort,
    SortOrder,
    format_filters,
    parse_accept_ranges_header,
    parse_content_range_header,
    parse_filters,
    parse_range_header,
    parse_sort,
    to_accept_ranges_header,
    to_content_range_header,
    to_range_header,
)
from pagekit.kernel.exceptions import FormatException, PagekitException

__version__ = "0.1.0"

__all__ = [
    "Filter",
    "FilterOperator",
    "FormatException",
    "HeaderPageable",
    "HeaderPageableBuilder",
    "Order",
    "PagekitException",
    "Sort",
    "SortOrder",
    "format_filters",
    "parse_accept_ranges_header",
    "parse_content_range_header",
    "parse_filters",
    "parse_range_header",
    "parse_sort",
    "to_accept_ranges_header",
    "to_content_range_header",
    "to_range_header",
]
