"""Tests pagination — tranches, bornage, plage de pages, contrôles."""
import pytest
from page_binding.core.pagination import (
    ELLIPSIS,
    PaginationMetadata,
    page_range,
    paginate,
    pagination_controls,
)


# ── paginate ─────────────────────────────────────────────────────────────────

def test_paginate_middle_page():
    result = paginate(list(range(1, 26)), page=2, page_size=10)
    assert result.data == list(range(11, 21))
    assert result.pagination.total_pages == 3
    assert result.pagination.total_items == 25
    assert result.pagination.has_next_page is True
    assert result.pagination.has_prev_page is True


def test_paginate_last_partial_page():
    result = paginate(list(range(1, 26)), page=3, page_size=10)
    assert result.data == [21, 22, 23, 24, 25]
    assert result.pagination.has_next_page is False


def test_paginate_empty():
    result = paginate([], page=1, page_size=10)
    assert result.data == []
    assert result.pagination.total_pages == 0
    assert result.pagination.current_page == 1
    assert result.pagination.has_next_page is False
    assert result.pagination.has_prev_page is False


@pytest.mark.parametrize("page, expected", [(0, 1), (-3, 1), (99, 3)])
def test_paginate_clamps_page(page, expected):
    result = paginate(list(range(25)), page=page, page_size=10)
    assert result.pagination.current_page == expected


def test_paginate_single_object():
    result = paginate({"name": "solo"}, page=4, page_size=10)
    assert result.data == [{"name": "solo"}]
    assert result.pagination.total_pages == 1
    assert result.pagination.current_page == 1
    assert result.pagination.page_size == 1


def test_paginate_none_source():
    result = paginate(None, page=2, page_size=5)
    assert result.data == []
    assert result.pagination.total_pages == 0
    assert result.pagination.current_page == 1


def test_paginate_page_size_floor():
    result = paginate([1, 2, 3], page=2, page_size=0)
    assert result.pagination.page_size == 1
    assert result.data == [2]


def test_paginate_does_not_mutate():
    items = [1, 2, 3]
    result = paginate(items, page=1, page_size=2)
    result.data.append(99)
    assert items == [1, 2, 3]


def test_metadata_scope_uses_camel_case():
    meta = paginate(list(range(25)), page=2, page_size=10).pagination.to_scope()
    assert meta == {
        "currentPage": 2,
        "pageSize": 10,
        "totalPages": 3,
        "totalItems": 25,
        "hasNextPage": True,
        "hasPrevPage": True,
    }


def test_metadata_accepts_aliases():
    meta = PaginationMetadata.model_validate({"currentPage": 3, "totalPages": 4})
    assert meta.current_page == 3
    assert meta.total_pages == 4


# ── page_range ───────────────────────────────────────────────────────────────

def test_range_small_no_ellipsis():
    assert page_range(1, 5, 1) == [1, 2, 3, 4, 5]


def test_range_exactly_seven():
    assert page_range(4, 7, 1) == [1, 2, 3, 4, 5, 6, 7]


def test_range_zero_pages():
    assert page_range(1, 0, 1) == []


def test_range_middle_both_ellipsis():
    pages = page_range(10, 20, 1)
    assert pages[0] == 1
    assert pages[-1] == 20
    assert pages.count(ELLIPSIS) == 2
    assert pages == [1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20]


def test_range_near_start_right_ellipsis_only():
    assert page_range(2, 20, 1) == [1, 2, 3, 4, 5, ELLIPSIS, 20]


def test_range_near_end_left_ellipsis_only():
    assert page_range(19, 20, 1) == [1, ELLIPSIS, 16, 17, 18, 19, 20]


def test_range_sibling_count_two():
    assert page_range(10, 20, 2) == [1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20]


def test_range_boundary_left_sibling_three():
    # left sibling = 3 > 2 → ellipse à gauche
    assert page_range(4, 10, 1) == [1, ELLIPSIS, 3, 4, 5, ELLIPSIS, 10]


@pytest.mark.parametrize("current", range(1, 31))
def test_range_always_starts_and_ends_with_pages(current):
    pages = page_range(current, 30, 1)
    assert pages[0] == 1
    assert pages[-1] == 30
    assert current in pages


# ── pagination_controls ──────────────────────────────────────────────────────

def test_controls_from_scope():
    meta = paginate(list(range(200)), page=10, page_size=10).pagination
    controls = pagination_controls({"pagination": meta.to_scope()}, sibling_count=1)
    assert controls.current_page == 10
    assert controls.total_pages == 20
    assert controls.has_next_page and controls.has_prev_page
    assert controls.previous_page == 9
    assert controls.next_page == 11
    assert controls.pages == [1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20]
    assert controls.visible is True


def test_controls_accept_metadata_model():
    meta = paginate(list(range(30)), page=3, page_size=10).pagination
    controls = pagination_controls({"pagination": meta})
    assert controls.current_page == 3
    assert controls.has_next_page is False
    assert controls.next_page == 3


def test_controls_without_metadata_hidden():
    controls = pagination_controls({})
    assert controls.current_page == 1
    assert controls.total_pages == 1
    assert controls.visible is False
    assert controls.pages == [1]


def test_controls_infer_flags_when_missing():
    controls = pagination_controls({"pagination": {"currentPage": 2, "totalPages": 3}})
    assert controls.has_next_page is True
    assert controls.has_prev_page is True


def test_controls_ignore_garbage():
    controls = pagination_controls({"pagination": {"currentPage": "x", "totalPages": None}})
    assert controls.current_page == 1
    assert controls.total_pages == 1


@pytest.mark.parametrize("current", range(1, 9))
def test_range_wide_siblings_on_few_pages(current):
    assert page_range(current, 8, 3) == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("total, siblings", [(10, 2), (12, 3), (13, 3), (40, 3)])
def test_range_never_exceeds_total_nor_repeats(total, siblings):
    for current in range(1, total + 1):
        pages = [p for p in page_range(current, total, siblings) if p is not ELLIPSIS]
        assert len(pages) == len(set(pages))
        assert all(1 <= p <= total for p in pages)
        assert pages[0] == 1 and pages[-1] == total
