from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from dealer_catalog.domain.catalog import CatalogDocument
from dealer_catalog.domain.errors import CatalogLoadError, SchemaError
from dealer_catalog.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class JsonFileCatalogSource(CatalogSource):
    """
    Reads a catalog document shaped like {"data": [...], "pagination": {...}}.

    Only the top-level shape is checked; individual products are taken as-is.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def description(self) -> str:
        return str(self._path)

    def load(self) -> CatalogDocument:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogLoadError(
                f"Cannot read catalog file: {exc}", path=str(self._path)
            ) from exc

        logger.debug("Catalog file preview: %s...", raw[:200])

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(
                f"Invalid catalog JSON: {exc}", path=str(self._path)
            ) from exc

        if not isinstance(document, Mapping) or not isinstance(document.get("data"), list):
            raise SchemaError(
                "Invalid products JSON structure: expected { data: [], pagination: {} }",
                path=str(self._path),
            )

        pagination = document.get("pagination")
        return CatalogDocument(
            products=document["data"],
            pagination=pagination if isinstance(pagination, Mapping) else {},
        )
