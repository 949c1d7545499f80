from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Sequence

from dealer_catalog.domain.catalog_index import CatalogIndex, build_catalog_index
from dealer_catalog.domain.dealer import DEFAULT_DEALER_NAMES
from dealer_catalog.domain.product import Product


class CatalogState(str, Enum):
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True, slots=True)
class CatalogDocument:
    """Decoded catalog source: products plus the source's own pagination block."""

    products: list[Any]
    pagination: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """
    A product list and the index derived from it, published together.

    The store swaps whole snapshots, so a reader holding one never sees
    products from one load paired with an index from another.
    """

    products: Sequence[Product] = ()
    index: CatalogIndex = field(default_factory=CatalogIndex)

    @classmethod
    def build(
        cls,
        products: list[Any],
        dealer_names: Mapping[str, str] = DEFAULT_DEALER_NAMES,
    ) -> CatalogSnapshot:
        return cls(products=products, index=build_catalog_index(products, dealer_names))

    @classmethod
    def empty(cls) -> CatalogSnapshot:
        return cls(products=[], index=CatalogIndex())

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def dealer_count(self) -> int:
        return len(self.index.dealers)
