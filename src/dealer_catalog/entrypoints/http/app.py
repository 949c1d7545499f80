import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealer_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from dealer_catalog.adapters.json_file_catalog_source import JsonFileCatalogSource
from dealer_catalog.domain.catalog import CatalogState
from dealer_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from dealer_catalog.entrypoints.http.routes.dealers import router as dealers_router
from dealer_catalog.entrypoints.http.routes.health import router as health_router
from dealer_catalog.entrypoints.http.routes.products import router as products_router
from dealer_catalog.infra.config import Settings
from dealer_catalog.ports.catalog_source import CatalogSource
from dealer_catalog.ports.product_catalog_repository import ProductCatalogRepository
from dealer_catalog.use_cases.load_catalog import LoadCatalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Start loading the catalog without blocking startup.

    The file is read on a worker thread so the server accepts requests right
    away; gated endpoints answer 503 until the load (or its fallback) is done.
    """
    repository: ProductCatalogRepository = app.state.catalog_repository
    load_task: asyncio.Task | None = None

    if repository.state is CatalogState.LOADING:
        loader = LoadCatalog(source=app.state.catalog_source, repository=repository)
        load_task = asyncio.create_task(asyncio.to_thread(loader.execute))

    yield

    if load_task is not None:
        if not load_task.done():
            logger.info("Waiting for catalog load to finish before shutdown")
        # re-raises anything the load raised outside its own fallback
        await load_task


def build_app(
    settings: Settings | None = None,
    repository: ProductCatalogRepository | None = None,
    source: CatalogSource | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Dealer Catalog API",
        description="""
        Read-mostly product catalog grouped by dealer.

        ## Features
        - List products filtered by dealer and free text, paginated
        - Dealer directory (dealers with at least one product)
        - In-memory price updates

        ## Availability
        The catalog loads in the background at startup. Until it is ready,
        every endpoint except /health answers 503.

        ## Error Handling
        All errors return {"success": false, "message": ..., "code": ...}.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
        license_info={
            "name": "Proprietary",
        },
    )

    app.state.settings = settings
    app.state.catalog_repository = repository or InMemoryProductCatalogRepository()
    app.state.catalog_source = source or JsonFileCatalogSource(settings.products_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router, prefix="/api")
    app.include_router(dealers_router, prefix="/api")

    return app


app = build_app()
