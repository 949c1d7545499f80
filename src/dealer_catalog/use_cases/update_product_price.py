"""Update product price use case."""

from __future__ import annotations

import logging

from dealer_catalog.domain.errors import (
    InvalidPriceIndexError,
    InvalidPriceIndexKeyError,
    InvalidPriceValueError,
    MissingFieldError,
    NoPricesError,
    NotFoundError,
)
from dealer_catalog.domain.product import (
    PriceUpdate,
    UpdatedPrice,
    parse_price,
    parse_price_index,
    price_key,
)
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


class UpdateProductPrice:
    """
    Use case for overwriting one price of a product's live price entry.

    Responsibilities:
    - Validate the update in a fixed order, one error type per failure
    - Only overwrite existing price_<N> keys, never create them
    - Write in place so later reads see the new value; no index rebuild,
      since prices play no part in dealer membership or search text
    """

    def __init__(self, repository: ProductCatalogRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            repository: Catalog store holding the live products
        """
        self._repository = repository

    def execute(self, request: PriceUpdate) -> UpdatedPrice:
        """
        Execute the price update.

        Args:
            request: Item code plus raw price_index and price values

        Returns:
            UpdatedPrice echoing the item code, numeric index and stored value

        Raises:
            NotReadyError: If the catalog has not been loaded yet
            MissingFieldError: If price_index or price is missing
            NotFoundError: If no product has the item code
            NoPricesError: If the product has no price entries
            InvalidPriceIndexError: If price_index is not an integer >= 1
            InvalidPriceIndexKeyError: If price_<index> does not exist
            InvalidPriceValueError: If price is not a number >= 0
        """
        if request.price_index is None or request.price is None:
            raise MissingFieldError("price_index and price are required.")

        product = self._repository.get_by_item_code(request.item_code)
        if product is None:
            raise NotFoundError(
                resource="Product", identifier=request.item_code, message="Product not found."
            )

        prices = product.get("prices")
        if not isinstance(prices, list) or not prices:
            raise NoPricesError("Product has no prices.", item_code=request.item_code)

        price_index = parse_price_index(request.price_index)
        if price_index is None:
            raise InvalidPriceIndexError("Invalid price_index.", item_code=request.item_code)

        key = price_key(price_index)
        live_entry = prices[0]
        if not isinstance(live_entry, dict) or key not in live_entry:
            raise InvalidPriceIndexKeyError(
                "Invalid price index key.", item_code=request.item_code, price_index=price_index
            )

        new_price = parse_price(request.price)
        if new_price is None:
            raise InvalidPriceValueError("Invalid price value.", item_code=request.item_code)

        self._repository.write_price(product, key, new_price)

        logger.info(
            "Price updated",
            extra={"item_code": request.item_code, "price_key": key, "new_price": new_price},
        )

        return UpdatedPrice(
            item_code=request.item_code,
            price_index=price_index,
            new_price=new_price,
        )
