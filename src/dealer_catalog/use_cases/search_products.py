from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dealer_catalog.domain.paging import DEFAULT_MAX_PER_PAGE, PageRequest, Pagination
from dealer_catalog.domain.product import Product, ProductFilters
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository

PRODUCTS_RESOURCE = "products"


@dataclass(frozen=True, slots=True)
class SearchProductsRequest:
    filters: ProductFilters
    page: Any = None  # raw values; sanitized by the use case
    per_page: Any = None


@dataclass(frozen=True, slots=True)
class SearchProductsResponse:
    products: list[Product]
    pagination: Pagination


class SearchProducts:
    """
    Product search with dealer/text filters and pagination.

    This use case sanitizes paging (never rejects it) and delegates filtering
    to the repository adapter. No filtering logic exists in the use case.
    """

    def __init__(
        self,
        repository: ProductCatalogRepository,
        max_per_page: int = DEFAULT_MAX_PER_PAGE,
    ) -> None:
        self._repository = repository
        self._max_per_page = max_per_page

    def execute(self, request: SearchProductsRequest) -> SearchProductsResponse:
        """
        Execute product search.

        Args:
            request: Filters plus raw page/per_page values

        Returns:
            The requested page and its pagination envelope

        Raises:
            NotReadyError: If the catalog has not been loaded yet
        """
        paging = PageRequest.sanitize(
            page=request.page,
            per_page=request.per_page,
            max_per_page=self._max_per_page,
        )

        result = self._repository.search(filters=request.filters, paging=paging)

        return SearchProductsResponse(
            products=result.products,
            pagination=Pagination.for_page(PRODUCTS_RESOURCE, paging, result.total_count),
        )
