from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from dealer_catalog.domain.catalog import CatalogSnapshot, CatalogState
from dealer_catalog.domain.dealer import Dealer
from dealer_catalog.domain.paging import PageRequest
from dealer_catalog.domain.product import Product, ProductFilters


@dataclass(frozen=True)
class SearchResult:
    """Result from product search including the count before paging."""

    products: list[Product]
    total_count: int


@dataclass(frozen=True, slots=True)
class CatalogStatus:
    ready: bool
    products: int
    dealers: int


class ProductCatalogRepository(ABC):
    """
    Port for the catalog store.

    Read operations raise NotReadyError until the first snapshot has been
    published. Status never raises.

    Contract (Preconditions):
        - filters and paging are sanitized by the caller (UseCase)
        - implementations trust inputs and do not re-validate
    """

    @property
    @abstractmethod
    def state(self) -> CatalogState: ...

    @abstractmethod
    def replace(self, snapshot: CatalogSnapshot) -> None:
        """Publish a new snapshot atomically and mark the store ready."""
        ...

    @abstractmethod
    def status(self) -> CatalogStatus: ...

    @abstractmethod
    def search(self, filters: ProductFilters, paging: PageRequest) -> SearchResult:
        """
        Search products with filters and paging.

        Args:
            filters: Dealer code and lowercase search term (empty = no filter)
            paging: Sanitized page request

        Returns:
            SearchResult with the requested page and the filtered total
        """
        ...

    @abstractmethod
    def list_dealers(self) -> list[Dealer]: ...

    @abstractmethod
    def get_by_item_code(self, item_code: str) -> Product | None: ...

    @abstractmethod
    def write_price(self, product: Product, key: str, value: Any) -> None:
        """Overwrite prices[0][key] on a product in place."""
        ...
