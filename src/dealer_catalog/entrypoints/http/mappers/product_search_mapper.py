from __future__ import annotations

from dealer_catalog.domain.paging import Pagination
from dealer_catalog.domain.product import ProductFilters
from dealer_catalog.entrypoints.http.dtos.products import (
    ProductPaginationDTO,
    ProductsQueryDTO,
    ProductsResponseDTO,
)
from dealer_catalog.use_cases.search_products import (
    SearchProductsRequest,
    SearchProductsResponse,
)


class ProductSearchMapper:
    """Maps between REST DTOs and domain models for product search."""

    @staticmethod
    def to_domain_filters(dto: ProductsQueryDTO) -> ProductFilters:
        """
        Converts query params to domain filters (trimmed, search lowercased).

        Args:
            dto: The data transfer object containing query parameters

        Returns:
            ProductFilters: Domain filters
        """
        return ProductFilters.from_raw(dealer_code=dto.dealer_code, search=dto.search)

    @staticmethod
    def to_domain_request(dto: ProductsQueryDTO) -> SearchProductsRequest:
        """
        Builds the domain request; page/per_page stay raw for the use case to sanitize.

        Args:
            dto: The data transfer object containing query parameters

        Returns:
            SearchProductsRequest: Domain request
        """
        return SearchProductsRequest(
            filters=ProductSearchMapper.to_domain_filters(dto),
            page=dto.page,
            per_page=dto.per_page,
        )

    @staticmethod
    def to_pagination(pagination: Pagination) -> ProductPaginationDTO:
        return ProductPaginationDTO(
            resource=pagination.resource,
            page=pagination.page,
            per_page=pagination.per_page,
            total=pagination.total,
            total_pages=pagination.total_pages,
            next_page=pagination.next_page,
            prev_page=pagination.prev_page,
        )

    @staticmethod
    def to_response(result: SearchProductsResponse) -> ProductsResponseDTO:
        """
        Converts domain search result to REST response with the pagination envelope.

        Products are passed through as stored; the search text lives in the
        index, not on the records, so nothing internal leaks.

        Args:
            result: Domain search result

        Returns:
            ProductsResponseDTO: REST response
        """
        return ProductsResponseDTO(
            pagination=ProductSearchMapper.to_pagination(result.pagination),
            data=result.products,
        )
