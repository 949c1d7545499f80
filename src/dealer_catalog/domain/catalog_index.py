"""Derived lookup structures for an in-memory product list.

The index is built in one pass and then treated as read-only. It holds
positions into the product list, never copies of products, so an in-place
price update on a product is visible through every lookup without a rebuild.

If products ever become able to change dealer, the affected index must be
rebuilt after the write (build_catalog_index on the same list).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from dealer_catalog.domain.dealer import DEFAULT_DEALER_NAMES, Dealer, dealer_name_for
from dealer_catalog.domain.product import field_text, search_text

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Any] = {}


@dataclass(frozen=True, slots=True)
class CatalogIndex:
    # search_texts[i] belongs to products[i]
    search_texts: tuple[str, ...] = ()
    # dealer_code -> positions; products without a dealer sit under ""
    dealer_positions: Mapping[str, tuple[int, ...]] = field(default_factory=dict)
    # public directory: dealers with >= 1 product, sorted by code
    dealers: tuple[Dealer, ...] = ()
    # item_code -> position of the first product carrying it
    item_positions: Mapping[str, int] = field(default_factory=dict)

    def positions_for_dealer(self, dealer_code: str) -> tuple[int, ...]:
        return self.dealer_positions.get(dealer_code, ())

    def position_of(self, item_code: str) -> int | None:
        return self.item_positions.get(item_code)


def build_catalog_index(
    products: Sequence[Any],
    dealer_names: Mapping[str, str] = DEFAULT_DEALER_NAMES,
) -> CatalogIndex:
    """
    Build the search texts, dealer index, dealer directory and item lookup.

    Never fails: entries that are not objects, or fields that are missing,
    index as empty strings.

    Args:
        products: Product records in canonical order
        dealer_names: Dealer code -> display name table

    Returns:
        CatalogIndex over the given positions
    """
    search_texts: list[str] = []
    positions: dict[str, list[int]] = {}
    dealers: dict[str, Dealer] = {}
    item_positions: dict[str, int] = {}

    for position, product in enumerate(products):
        record = product if isinstance(product, Mapping) else _EMPTY

        search_texts.append(search_text(record))

        code = field_text(record, "dealer_code")
        if code and code not in dealers:
            dealers[code] = Dealer(dealer_code=code, dealer_name=dealer_name_for(code, dealer_names))
        positions.setdefault(code, []).append(position)

        item_code = field_text(record, "item_code")
        if item_code:
            item_positions.setdefault(item_code, position)

    directory = tuple(
        sorted(
            (dealer for code, dealer in dealers.items() if len(positions[code]) > 0),
            key=lambda dealer: dealer.dealer_code,
        )
    )

    index = CatalogIndex(
        search_texts=tuple(search_texts),
        dealer_positions={code: tuple(idxs) for code, idxs in positions.items()},
        dealers=directory,
        item_positions=item_positions,
    )

    logger.info(
        "Dealer index built",
        extra={
            "products": len(search_texts),
            "dealer_keys": len(positions),
            "dealers_with_products": len(directory),
        },
    )
    for code, idxs in positions.items():
        logger.debug("Dealer %r: %d products", code, len(idxs))

    return index
