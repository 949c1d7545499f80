from __future__ import annotations

from dataclasses import dataclass

from dealer_catalog.domain.dealer import Dealer
from dealer_catalog.domain.paging import Pagination
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository

DEALERS_RESOURCE = "dealers"


@dataclass(frozen=True, slots=True)
class ListDealersResponse:
    dealers: list[Dealer]
    pagination: Pagination


class ListDealers:
    """Dealer directory: every dealer with at least one product, as one page."""

    def __init__(self, repository: ProductCatalogRepository) -> None:
        self._repository = repository

    def execute(self) -> ListDealersResponse:
        dealers = self._repository.list_dealers()
        return ListDealersResponse(
            dealers=dealers,
            pagination=Pagination.single_page(DEALERS_RESOURCE, len(dealers)),
        )
