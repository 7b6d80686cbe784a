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
"""Tests for the HeaderPageable descriptor, its builder and page navigation."""

from __future__ import annotations

import pytest

from pagekit.data.header_pageable import UNKNOWN, HeaderPageable, HeaderPageableBuilder
from pagekit.kernel.exceptions import FormatException


def _records(page: int, size: int = 10, total: int = 100) -> HeaderPageable:
    return HeaderPageable(element_name="records", page=page, size=size, total=total)


# ---------------------------------------------------------------------------
# HeaderPageable
# ---------------------------------------------------------------------------


class TestHeaderPageable:
    def test_frozen(self) -> None:
        pageable = _records(0)
        with pytest.raises(AttributeError):
            pageable.page = 1  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert _records(3) == _records(3)
        assert _records(3) != _records(4)

    def test_start_and_end(self) -> None:
        pageable = _records(2)
        assert pageable.start == 20
        assert pageable.end == 29

    def test_end_clamped_to_total(self) -> None:
        pageable = HeaderPageable(element_name="elements", page=0, size=10, total=9)
        assert pageable.end == 8

    def test_end_not_clamped_when_total_unknown(self) -> None:
        pageable = HeaderPageable(element_name="items", page=1, size=10, total=UNKNOWN)
        assert pageable.end == 19

    def test_end_before_start_when_page_past_total(self) -> None:
        pageable = HeaderPageable(element_name="elements", page=2, size=10, total=9)
        assert pageable.start == 20
        assert pageable.end == 8


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


class TestHeaderPageableBuilder:
    def test_build_with_all_fields(self) -> None:
        pageable = HeaderPageable.builder().element_name("items").page(1).size(20).total(100).build()

        assert pageable == HeaderPageable(element_name="items", page=1, size=20, total=100)

    def test_default_values(self) -> None:
        pageable = HeaderPageable.builder().build()

        assert pageable.element_name == "elements"
        assert pageable.page == 0
        assert pageable.size == 0
        assert pageable.total == 0

    def test_override_values_from_existing(self) -> None:
        original = _records(0)

        pageable = original.to_builder().element_name("items").page(1).size(20).build()

        assert pageable.element_name == "items"
        assert pageable.page == 1
        assert pageable.size == 20
        assert pageable.total == 100

    def test_original_left_unchanged(self) -> None:
        original = _records(0)
        original.to_builder().page(5).build()
        assert original.page == 0

    def test_setters_return_same_builder(self) -> None:
        builder = HeaderPageableBuilder()
        assert builder.page(1) is builder
        assert builder.size(2) is builder
        assert builder.total(3) is builder
        assert builder.element_name("x") is builder

    def test_build_snapshots_staged_values(self) -> None:
        builder = HeaderPageable.builder().size(10)
        first = builder.build()
        second = builder.page(4).build()
        assert first.page == 0
        assert second.page == 4

    def test_no_validation(self) -> None:
        pageable = HeaderPageable.builder().page(-5).size(-1).build()
        assert pageable.page == -5
        assert pageable.size == -1


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


class TestNextPage:
    @pytest.mark.parametrize(("page", "expected"), [(0, 1), (1, 2), (8, 9)])
    def test_next_page(self, page: int, expected: int) -> None:
        assert _records(page).next_page().page == expected

    def test_keeps_other_fields(self) -> None:
        nxt = _records(0).next_page()
        assert (nxt.element_name, nxt.size, nxt.total) == ("records", 10, 100)

    def test_input_unchanged(self) -> None:
        current = _records(3)
        current.next_page()
        assert current.page == 3

    def test_fails_on_last_page(self) -> None:
        with pytest.raises(FormatException, match="We are currently on the last page") as exc_info:
            _records(9).next_page()
        assert exc_info.value.code == "PAGE_LAST"
        assert exc_info.value.context["page"] == 9

    def test_fails_on_short_last_page(self) -> None:
        with pytest.raises(FormatException, match="last page"):
            _records(9, total=95).next_page()

    def test_fails_when_total_unknown(self) -> None:
        with pytest.raises(FormatException, match="last page"):
            _records(0, total=UNKNOWN).next_page()

    def test_fails_on_zero_size(self) -> None:
        with pytest.raises(FormatException, match="page size must be at least 1") as exc_info:
            HeaderPageable.builder().build().next_page()
        assert exc_info.value.code == "PAGE_SIZE"

    def test_has_next(self) -> None:
        assert _records(8).has_next
        assert not _records(9).has_next

    def test_has_next_false_without_page_size(self) -> None:
        pageable = HeaderPageable.builder().build()
        assert not pageable.has_next
        with pytest.raises(FormatException) as exc_info:
            pageable.next_page()
        assert exc_info.value.code == "PAGE_SIZE"


class TestPreviousPage:
    @pytest.mark.parametrize(("page", "expected"), [(1, 0), (2, 1), (9, 8)])
    def test_previous_page(self, page: int, expected: int) -> None:
        assert _records(page).previous_page().page == expected

    def test_fails_on_first_page(self) -> None:
        with pytest.raises(FormatException, match="We are currently on the first page") as exc_info:
            _records(0).previous_page()
        assert exc_info.value.code == "PAGE_FIRST"

    def test_has_previous(self) -> None:
        assert _records(1).has_previous
        assert not _records(0).has_previous


class TestFirstAndLastPage:
    def test_first_page(self) -> None:
        assert _records(7).first_page() == _records(0)

    def test_first_page_from_first_page(self) -> None:
        assert _records(0).first_page() == _records(0)

    def test_last_page_uses_total(self) -> None:
        assert _records(2).last_page().page == 9

    def test_last_page_partial(self) -> None:
        assert _records(0, total=101).last_page().page == 10

    def test_last_page_single_page(self) -> None:
        assert _records(0, total=9).last_page().page == 0

    def test_last_page_empty_total(self) -> None:
        assert _records(3, total=0).last_page().page == 0

    def test_last_page_unknown_total(self) -> None:
        assert _records(3, total=UNKNOWN).last_page().page == 0

    def test_last_then_next_fails(self) -> None:
        with pytest.raises(FormatException, match="last page"):
            _records(0).last_page().next_page()
