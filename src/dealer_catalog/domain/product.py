from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

# Products are kept as the decoded JSON objects so unknown fields pass through.
Product = dict[str, Any]

PRICE_KEY_PREFIX = "price_"


def field_text(product: Mapping[str, Any], field: str) -> str:
    """Return a field as a string, treating missing or null values as ''."""
    value = product.get(field)
    if value is None:
        return ""
    return str(value)


def search_text(product: Mapping[str, Any]) -> str:
    """Lowercase 'name item_code barcode' blob used for substring search."""
    return " ".join(
        field_text(product, field).lower() for field in ("name", "item_code", "barcode")
    )


def price_key(price_index: int) -> str:
    return f"{PRICE_KEY_PREFIX}{price_index}"


def _to_number(value: Any) -> int | float | None:
    # bool is an int subclass; true/false are not prices
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        # Python-only spellings: digit separators and non-ASCII digits
        if "_" in text or not text.isascii():
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def parse_price_index(value: Any) -> int | None:
    """Parse a price index: a finite integer >= 1, else None."""
    number = _to_number(value)
    if number is None:
        return None
    if isinstance(number, float):
        if not number.is_integer():
            return None
        number = int(number)
    return number if number >= 1 else None


def parse_price(value: Any) -> int | float | None:
    """Parse a price: a finite number >= 0, else None. Integral ints stay ints."""
    number = _to_number(value)
    if number is None or number < 0:
        return None
    return number


@dataclass(frozen=True, slots=True)
class PriceUpdate:
    """Raw price update as received; values are validated by the use case."""

    item_code: str
    price_index: Any = None
    price: Any = None


@dataclass(frozen=True, slots=True)
class UpdatedPrice:
    item_code: str
    price_index: int
    new_price: int | float


@dataclass(frozen=True, slots=True)
class ProductFilters:
    """Product filters; empty strings mean 'no filter'."""

    dealer_code: str = ""
    search: str = ""

    @classmethod
    def from_raw(cls, dealer_code: Any = None, search: Any = None) -> ProductFilters:
        """Trim both values and lowercase the search term."""
        return cls(
            dealer_code="" if dealer_code is None else str(dealer_code).strip(),
            search="" if search is None else str(search).strip().lower(),
        )
