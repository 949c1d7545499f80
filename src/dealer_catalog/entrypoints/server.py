"""
Process entry point: configure logging and serve the HTTP app with uvicorn.

Usage:
    dealer-catalog
    PORT=8080 PRODUCTS_PATH=data/products.json dealer-catalog
"""

from __future__ import annotations

import logging

import uvicorn

from dealer_catalog.entrypoints.http.app import build_app
from dealer_catalog.infra.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    app = build_app(settings)

    logger.info("API server starting on http://%s:%d", settings.host, settings.port)
    logger.info("Endpoints:")
    logger.info("  GET  /api/products?dealer_code=&search=&page=&per_page=")
    logger.info("  GET  /api/dealers")
    logger.info("  PUT  /api/products/{item_code}/price  { price_index, price }")
    logger.info("  GET  /health")

    # uvicorn handles SIGINT/SIGTERM and drains connections before exiting
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
