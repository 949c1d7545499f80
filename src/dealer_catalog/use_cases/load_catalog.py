from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Mapping

from dealer_catalog.domain.catalog import CatalogSnapshot
from dealer_catalog.domain.dealer import DEFAULT_DEALER_NAMES
from dealer_catalog.domain.errors import CatalogLoadError
from dealer_catalog.ports.catalog_source import CatalogSource
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadCatalogResponse:
    loaded: bool  # False when the empty fallback was published
    products: int
    dealers: int
    elapsed_ms: float


class LoadCatalog:
    """
    Load (or reload) the catalog and publish it to the store.

    Any load failure is logged and replaced by an empty catalog, so the store
    always ends READY: the service stays queryable, just empty.
    """

    def __init__(
        self,
        source: CatalogSource,
        repository: ProductCatalogRepository,
        dealer_names: Mapping[str, str] = DEFAULT_DEALER_NAMES,
    ) -> None:
        self._source = source
        self._repository = repository
        self._dealer_names = dealer_names

    def execute(self) -> LoadCatalogResponse:
        started = time.perf_counter()
        logger.info("Loading products from %s", self._source.description)

        try:
            document = self._source.load()
            snapshot = CatalogSnapshot.build(document.products, self._dealer_names)
            loaded = True
        except CatalogLoadError as exc:
            logger.error(
                "Failed to load catalog, falling back to empty dataset",
                extra={
                    "error_code": exc.error_code,
                    "error_message": exc.message,
                    "context": exc.context,
                },
            )
            snapshot = CatalogSnapshot.empty()
            loaded = False
        except Exception:
            logger.exception("Unexpected error while loading catalog, falling back to empty dataset")
            snapshot = CatalogSnapshot.empty()
            loaded = False

        self._repository.replace(snapshot)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Catalog ready: %d products, %d dealers (%.1f ms)",
            snapshot.product_count,
            snapshot.dealer_count,
            elapsed_ms,
        )

        return LoadCatalogResponse(
            loaded=loaded,
            products=snapshot.product_count,
            dealers=snapshot.dealer_count,
            elapsed_ms=elapsed_ms,
        )
