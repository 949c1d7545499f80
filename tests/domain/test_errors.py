"""Tests for domain error classes."""

from dealer_catalog.domain.errors import (
    BadRequestError,
    CatalogLoadError,
    DomainError,
    InvalidPriceIndexError,
    InvalidPriceIndexKeyError,
    InvalidPriceValueError,
    MissingFieldError,
    NoPricesError,
    NotFoundError,
    NotReadyError,
    SchemaError,
)


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="test", value=123)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "test",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        error = DomainError("Test message")

        assert str(error) == "Test message"


class TestBadRequestErrors:
    """Each price update failure has its own type and code."""

    def test_all_price_update_failures_are_bad_requests(self) -> None:
        for error_type in (
            MissingFieldError,
            NoPricesError,
            InvalidPriceIndexError,
            InvalidPriceIndexKeyError,
            InvalidPriceValueError,
        ):
            assert issubclass(error_type, BadRequestError)

    def test_error_codes_are_distinct(self) -> None:
        codes = {
            MissingFieldError.error_code,
            NoPricesError.error_code,
            InvalidPriceIndexError.error_code,
            InvalidPriceIndexKeyError.error_code,
            InvalidPriceValueError.error_code,
        }

        assert codes == {
            "MISSING_FIELD",
            "NO_PRICES",
            "INVALID_INDEX",
            "INVALID_INDEX_KEY",
            "INVALID_VALUE",
        }

    def test_context_is_kept(self) -> None:
        error = InvalidPriceIndexKeyError("Invalid price index key.", item_code="A1", price_index=2)

        assert error.to_dict() == {
            "message": "Invalid price index key.",
            "code": "INVALID_INDEX_KEY",
            "item_code": "A1",
            "price_index": 2,
        }


class TestNotFoundError:
    def test_generates_message_from_resource_and_identifier(self) -> None:
        error = NotFoundError("Product", "A1")

        assert error.message == "Product with identifier 'A1' not found"
        assert error.context == {"resource": "Product", "identifier": "A1"}

    def test_generates_message_without_identifier(self) -> None:
        error = NotFoundError("Product")

        assert error.message == "Product not found"

    def test_explicit_message_overrides_generated_one(self) -> None:
        error = NotFoundError("Product", "A1", message="Product not found.")

        assert error.message == "Product not found."
        assert error.error_code == "NOT_FOUND"


class TestNotReadyError:
    def test_has_default_loading_message(self) -> None:
        error = NotReadyError()

        assert error.message == "Data is loading, please retry shortly."
        assert error.error_code == "NOT_READY"


class TestCatalogLoadErrors:
    def test_schema_error_is_a_load_error(self) -> None:
        error = SchemaError("bad shape", path="x.json")

        assert isinstance(error, CatalogLoadError)
        assert error.error_code == "SCHEMA_ERROR"
        assert error.context == {"path": "x.json"}
