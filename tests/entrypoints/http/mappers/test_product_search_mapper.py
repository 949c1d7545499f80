"""
Test suite for ProductSearchMapper.

The mapper only translates between REST DTOs and domain models:
- Query params become trimmed domain filters
- page/per_page are passed through raw for the use case to sanitize
- Products are returned untouched inside the pagination envelope
"""

from __future__ import annotations

from typing import Any

from dealer_catalog.domain.paging import Pagination
from dealer_catalog.domain.product import ProductFilters
from dealer_catalog.entrypoints.http.dtos.products import ProductsQueryDTO
from dealer_catalog.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from dealer_catalog.use_cases.search_products import SearchProductsResponse


# ==============================================================================
# to_domain_filters() / to_domain_request() - DTO → Domain
# ==============================================================================


def test_to_domain_filters_trims_and_lowercases() -> None:
    dto = ProductsQueryDTO(dealer_code="  EZ978 ", search="  WiDgEt ")

    filters = ProductSearchMapper.to_domain_filters(dto)

    assert filters == ProductFilters(dealer_code="EZ978", search="widget")


def test_to_domain_filters_with_no_fields() -> None:
    filters = ProductSearchMapper.to_domain_filters(ProductsQueryDTO())

    assert filters == ProductFilters(dealer_code="", search="")


def test_to_domain_request_keeps_raw_paging() -> None:
    dto = ProductsQueryDTO(page="abc", per_page="9999")

    request = ProductSearchMapper.to_domain_request(dto)

    assert request.page == "abc"
    assert request.per_page == "9999"


# ==============================================================================
# to_response() - Domain → DTO
# ==============================================================================


def test_to_response_passes_products_through(products: list[dict[str, Any]]) -> None:
    result = SearchProductsResponse(
        products=products[:2],
        pagination=Pagination(
            resource="products",
            page=1,
            per_page=2,
            total=5,
            total_pages=3,
            next_page=2,
            prev_page=None,
        ),
    )

    dto = ProductSearchMapper.to_response(result)

    assert dto.data == products[:2]
    assert dto.pagination.next_page == 2
    assert dto.pagination.prev_page is None
    assert dto.model_dump()["pagination"] == {
        "resource": "products",
        "page": 1,
        "per_page": 2,
        "total": 5,
        "total_pages": 3,
        "next_page": 2,
        "prev_page": None,
    }
