from __future__ import annotations

from dealer_catalog.domain.product import PriceUpdate, UpdatedPrice
from dealer_catalog.entrypoints.http.dtos.products import (
    PriceUpdateRequestDTO,
    PriceUpdateResponseDTO,
    UpdatedPriceDTO,
)

PRICE_UPDATED_MESSAGE = "Price updated successfully."


class PriceUpdateMapper:
    """Maps between REST DTOs and domain models for price updates."""

    @staticmethod
    def to_domain_request(item_code: str, dto: PriceUpdateRequestDTO | None) -> PriceUpdate:
        """
        Builds the domain update; a missing body is treated as missing fields.

        Args:
            item_code: Item code from the path
            dto: Request body, or None when no body was sent

        Returns:
            PriceUpdate with raw values
        """
        if dto is None:
            return PriceUpdate(item_code=item_code)
        return PriceUpdate(item_code=item_code, price_index=dto.price_index, price=dto.price)

    @staticmethod
    def to_response(updated: UpdatedPrice) -> PriceUpdateResponseDTO:
        return PriceUpdateResponseDTO(
            success=True,
            message=PRICE_UPDATED_MESSAGE,
            updated_price=UpdatedPriceDTO(
                item_code=updated.item_code,
                price_index=updated.price_index,
                new_price=updated.new_price,
            ),
        )
