from __future__ import annotations

from abc import ABC, abstractmethod

from dealer_catalog.domain.catalog import CatalogDocument


class CatalogSource(ABC):
    """Port for reading the raw catalog document."""

    @abstractmethod
    def load(self) -> CatalogDocument:
        """
        Read and decode the catalog document.

        Raises:
            SchemaError: If the document has no list under "data"
            CatalogLoadError: If the document cannot be read or decoded
        """
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable location of the source, for logs."""
        ...
