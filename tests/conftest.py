from __future__ import annotations

from typing import Any

import pytest


def make_products() -> list[dict[str, Any]]:
    """Fresh product records; tests may mutate them."""
    return [
        {
            "item_code": "A1",
            "name": "Widget",
            "barcode": "8850001",
            "dealer_code": "EZ978",
            "prices": [{"price_1": 10, "price_2": 9}],
        },
        {
            "item_code": "B2",
            "name": "Gadget Pro",
            "barcode": "8850002",
            "dealer_code": "QC759",
            "prices": [{"price_1": 20}],
        },
        {
            "item_code": "C3",
            "name": "WIDGET Mini",
            "dealer_code": "EZ978",
            "prices": [{"price_1": 5}],
        },
        {
            "item_code": "D4",
            "name": "Loose Bolt",
            "barcode": None,
            "prices": [],
        },
        {
            "item_code": "E5",
            "name": "Spanner",
            "barcode": "8850005",
            "dealer_code": "ZZ001",
            "prices": [{"price_1": 7}],
        },
    ]


@pytest.fixture()
def products() -> list[dict[str, Any]]:
    return make_products()
