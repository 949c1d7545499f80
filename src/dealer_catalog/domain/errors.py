"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP (or any other transport) formats.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class BadRequestError(DomainError):
    """The request is well-formed but cannot be applied.

    Each failure of the price update sequence is its own subclass so callers
    can tell them apart by type or by error_code.

    Protocol mappings:
        - REST: 400 Bad Request
    """

    error_code: str = "BAD_REQUEST"


class MissingFieldError(BadRequestError):
    error_code: str = "MISSING_FIELD"


class NoPricesError(BadRequestError):
    error_code: str = "NO_PRICES"


class InvalidPriceIndexError(BadRequestError):
    error_code: str = "INVALID_INDEX"


class InvalidPriceIndexKeyError(BadRequestError):
    error_code: str = "INVALID_INDEX_KEY"


class InvalidPriceValueError(BadRequestError):
    error_code: str = "INVALID_VALUE"


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Product with item code not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Product")
            identifier: Resource identifier (e.g., item code)
            message: Overrides the generated message
            **context: Additional context
        """
        if message is None:
            if identifier:
                message = f"{resource} with identifier '{identifier}' not found"
            else:
                message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class NotReadyError(DomainError):
    """The catalog has not finished its first load.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "NOT_READY"

    def __init__(self, message: str = "Data is loading, please retry shortly.", **context: Any) -> None:
        super().__init__(message, **context)


class CatalogLoadError(DomainError):
    """The catalog source could not be read or decoded.

    Never surfaced to clients: the loader logs it and falls back
    to an empty catalog.
    """

    error_code: str = "CATALOG_LOAD_ERROR"


class SchemaError(CatalogLoadError):
    """The catalog document does not have the expected shape."""

    error_code: str = "SCHEMA_ERROR"
