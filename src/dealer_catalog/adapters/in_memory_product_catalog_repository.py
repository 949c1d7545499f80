from __future__ import annotations

import logging
import threading
from typing import Any, Sequence

from dealer_catalog.domain.catalog import CatalogSnapshot, CatalogState
from dealer_catalog.domain.dealer import Dealer
from dealer_catalog.domain.errors import NotReadyError
from dealer_catalog.domain.paging import PageRequest
from dealer_catalog.domain.product import Product, ProductFilters
from dealer_catalog.ports.product_catalog_repository import (
    CatalogStatus,
    ProductCatalogRepository,
    SearchResult,
)

logger = logging.getLogger(__name__)


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Catalog store backed by a single published snapshot.

    - Starts LOADING; the first replace() moves it to READY for good
    - Readers grab the snapshot reference once per call, no lock needed
    - Snapshot swaps and price writes are serialized by one lock
    - Narrows by dealer first (index lookup), then by search text
    - Applies paging AFTER filtering
    """

    def __init__(self, snapshot: CatalogSnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = snapshot
        self._state = CatalogState.READY if snapshot is not None else CatalogState.LOADING

    @property
    def state(self) -> CatalogState:
        return self._state

    def snapshot(self) -> CatalogSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            raise NotReadyError()
        return snapshot

    def replace(self, snapshot: CatalogSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot
            self._state = CatalogState.READY

    def status(self) -> CatalogStatus:
        snapshot = self._snapshot
        if snapshot is None:
            return CatalogStatus(ready=False, products=0, dealers=0)
        return CatalogStatus(
            ready=self._state is CatalogState.READY,
            products=snapshot.product_count,
            dealers=snapshot.dealer_count,
        )

    def search(self, filters: ProductFilters, paging: PageRequest) -> SearchResult:
        snapshot = self.snapshot()
        index = snapshot.index

        positions: Sequence[int]
        if filters.dealer_code:
            positions = index.positions_for_dealer(filters.dealer_code)
        else:
            # no copy of the product list, just its positions
            positions = range(snapshot.product_count)

        if filters.search:
            texts = index.search_texts
            positions = [i for i in positions if filters.search in texts[i]]

        total_count = len(positions)  # Count BEFORE paging

        start = paging.offset
        end = start + paging.per_page
        page = [snapshot.products[i] for i in positions[start:end]]

        logger.debug(
            "Product search",
            extra={
                "dealer_code": filters.dealer_code,
                "search": filters.search,
                "page": paging.page,
                "per_page": paging.per_page,
                "total": total_count,
                "returned": len(page),
            },
        )

        return SearchResult(products=page, total_count=total_count)

    def list_dealers(self) -> list[Dealer]:
        return list(self.snapshot().index.dealers)

    def get_by_item_code(self, item_code: str) -> Product | None:
        snapshot = self.snapshot()
        position = snapshot.index.position_of(item_code)
        if position is None:
            return None
        return snapshot.products[position]

    def write_price(self, product: Product, key: str, value: Any) -> None:
        with self._lock:
            product["prices"][0][key] = value
