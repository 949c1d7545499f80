from __future__ import annotations

from dealer_catalog.domain.dealer import Dealer
from dealer_catalog.entrypoints.http.dtos.dealers import (
    DealerPaginationDTO,
    DealerResponseDTO,
    DealersResponseDTO,
)
from dealer_catalog.use_cases.list_dealers import ListDealersResponse


class DealerMapper:
    """Maps the dealer directory to its REST response."""

    @staticmethod
    def to_dealer_response(dealer: Dealer) -> DealerResponseDTO:
        return DealerResponseDTO(dealer_code=dealer.dealer_code, dealer_name=dealer.dealer_name)

    @staticmethod
    def to_response(result: ListDealersResponse) -> DealersResponseDTO:
        pagination = result.pagination
        return DealersResponseDTO(
            pagination=DealerPaginationDTO(
                resource=pagination.resource,
                page=pagination.page,
                per_page=pagination.per_page,
                total=pagination.total,
                total_pages=pagination.total_pages,
            ),
            data=[DealerMapper.to_dealer_response(dealer) for dealer in result.dealers],
        )
