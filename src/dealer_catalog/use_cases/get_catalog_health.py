from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class CatalogHealth:
    status: str
    data_ready: bool
    products: int
    dealers: int
    timestamp: datetime


class GetCatalogHealth:
    """Liveness plus catalog readiness. Answers even while loading."""

    def __init__(
        self,
        repository: ProductCatalogRepository,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self) -> CatalogHealth:
        status = self._repository.status()
        return CatalogHealth(
            status="OK",
            data_ready=status.ready,
            products=status.products,
            dealers=status.dealers,
            timestamp=self._clock(),
        )
