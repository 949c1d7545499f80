from __future__ import annotations

import pytest

from dealer_catalog.domain.paging import PageRequest, Pagination, parse_leading_int


# ==============================================================================
# parse_leading_int
# ==============================================================================


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("3", 3),
        ("  7", 7),
        ("12abc", 12),
        ("1.9", 1),
        ("-4", -4),
        ("+5", 5),
        (8, 8),
        ("abc", None),
        ("", None),
        (None, None),
        (True, None),
        ("\u0661\u0662", None),
        (" \u0663", None),
        ("7\u0661", 7),
    ],
)
def test_parse_leading_int(raw: object, expected: int | None) -> None:
    assert parse_leading_int(raw) == expected


# ==============================================================================
# PageRequest.sanitize
# ==============================================================================


def test_sanitize_defaults() -> None:
    assert PageRequest.sanitize() == PageRequest(page=1, per_page=10)


@pytest.mark.parametrize("raw_page", ["0", "-3", "abc", "", None])
def test_sanitize_invalid_page_becomes_one(raw_page: str | None) -> None:
    assert PageRequest.sanitize(page=raw_page).page == 1


@pytest.mark.parametrize("raw_per_page", ["0", "-1", "x", "", None])
def test_sanitize_invalid_per_page_becomes_ten(raw_per_page: str | None) -> None:
    assert PageRequest.sanitize(per_page=raw_per_page).per_page == 10


def test_sanitize_clamps_per_page_to_maximum() -> None:
    paging = PageRequest.sanitize(page="2", per_page="9999", max_per_page=200)

    assert paging == PageRequest(page=2, per_page=200)


def test_sanitize_respects_custom_maximum() -> None:
    assert PageRequest.sanitize(per_page="50", max_per_page=25).per_page == 25


def test_offset() -> None:
    assert PageRequest(page=3, per_page=20).offset == 40


# ==============================================================================
# Pagination envelope
# ==============================================================================


@pytest.mark.parametrize(
    ("total", "per_page", "total_pages"),
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5), (26, 5, 6)],
)
def test_total_pages_is_at_least_one(total: int, per_page: int, total_pages: int) -> None:
    pagination = Pagination.for_page("products", PageRequest(page=1, per_page=per_page), total)

    assert pagination.total_pages == total_pages


def test_first_page_links() -> None:
    pagination = Pagination.for_page("products", PageRequest(page=1, per_page=10), 25)

    assert pagination.next_page == 2
    assert pagination.prev_page is None


def test_middle_page_links() -> None:
    pagination = Pagination.for_page("products", PageRequest(page=2, per_page=10), 25)

    assert pagination.next_page == 3
    assert pagination.prev_page == 1


def test_last_page_has_no_next() -> None:
    pagination = Pagination.for_page("products", PageRequest(page=3, per_page=10), 25)

    assert pagination.next_page is None
    assert pagination.prev_page == 2


def test_page_past_the_end_keeps_totals() -> None:
    pagination = Pagination.for_page("products", PageRequest(page=9, per_page=10), 25)

    assert pagination == Pagination(
        resource="products",
        page=9,
        per_page=10,
        total=25,
        total_pages=3,
        next_page=None,
        prev_page=8,
    )


def test_single_page_envelope() -> None:
    pagination = Pagination.single_page("dealers", 4)

    assert pagination == Pagination(
        resource="dealers", page=1, per_page=4, total=4, total_pages=1
    )
