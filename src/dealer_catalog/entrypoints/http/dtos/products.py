from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductsQueryDTO(BaseModel):
    """Query parameters for listing products.

    Paging values are taken as raw strings: invalid values fall back to
    defaults instead of being rejected.
    """

    dealer_code: str | None = Field(
        default=None,
        description="Only products of this dealer (exact code). Empty means all dealers.",
        examples=["EZ978"],
    )
    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of name, item code or barcode",
        examples=["widget"],
    )
    page: str | None = Field(
        default=None,
        description="1-based page number; invalid values become 1",
        examples=["1"],
    )
    per_page: str | None = Field(
        default=None,
        description="Page size; invalid values become 10, large values are clamped",
        examples=["10"],
    )


class ProductPaginationDTO(BaseModel):
    resource: str
    page: int
    per_page: int
    total: int
    total_pages: int
    next_page: int | None
    prev_page: int | None


class ProductsResponseDTO(BaseModel):
    pagination: ProductPaginationDTO
    # records pass through as stored, including entries that are not objects
    data: list[Any]


class PriceUpdateRequestDTO(BaseModel):
    """Request payload for updating one price of a product.

    Values are kept raw (numbers or numeric strings); the use case
    validates them so each failure gets its own message.
    """

    price_index: Any = Field(
        default=None,
        description="1-based index N of the price_N key to overwrite",
        examples=[1],
    )
    price: Any = Field(
        default=None,
        description="New price, a number >= 0",
        examples=[12.5],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "price_index": 1,
                "price": 12.5,
            }
        }
    )


class UpdatedPriceDTO(BaseModel):
    item_code: str
    price_index: int
    new_price: int | float


class PriceUpdateResponseDTO(BaseModel):
    success: bool = True
    message: str
    updated_price: UpdatedPriceDTO
