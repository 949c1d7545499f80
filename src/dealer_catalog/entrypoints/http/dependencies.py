"""
Dependency injection for FastAPI routes.

Key principle: the catalog store is owned by the application (app.state),
one per app, shared by every request. Use cases are cheap and built per
request around it.
"""

from __future__ import annotations

from fastapi import Depends, Request

from dealer_catalog.domain.catalog import CatalogState
from dealer_catalog.domain.errors import NotReadyError
from dealer_catalog.infra.config import Settings
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository
from dealer_catalog.use_cases.get_catalog_health import GetCatalogHealth
from dealer_catalog.use_cases.list_dealers import ListDealers
from dealer_catalog.use_cases.search_products import SearchProducts
from dealer_catalog.use_cases.update_product_price import UpdateProductPrice


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog_repository(request: Request) -> ProductCatalogRepository:
    """
    Provides the application's catalog store.

    Yields the same instance for every request of an app; build_app()
    creates it and the lifespan fills it.
    """
    return request.app.state.catalog_repository


def require_catalog_ready(
    repository: ProductCatalogRepository = Depends(get_catalog_repository),
) -> None:
    """
    Readiness gate: rejects traffic until the first load (or its fallback) finished.

    Raises:
        NotReadyError: While the catalog is still loading (mapped to 503)
    """
    if repository.state is not CatalogState.READY:
        raise NotReadyError()


def get_search_products_use_case(
    repository: ProductCatalogRepository = Depends(get_catalog_repository),
    settings: Settings = Depends(get_settings),
) -> SearchProducts:
    return SearchProducts(repository=repository, max_per_page=settings.max_per_page)


def get_list_dealers_use_case(
    repository: ProductCatalogRepository = Depends(get_catalog_repository),
) -> ListDealers:
    return ListDealers(repository=repository)


def get_update_product_price_use_case(
    repository: ProductCatalogRepository = Depends(get_catalog_repository),
) -> UpdateProductPrice:
    return UpdateProductPrice(repository=repository)


def get_catalog_health_use_case(
    repository: ProductCatalogRepository = Depends(get_catalog_repository),
) -> GetCatalogHealth:
    return GetCatalogHealth(repository=repository)
