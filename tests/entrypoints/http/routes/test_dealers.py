from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from dealer_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from dealer_catalog.domain.catalog import CatalogSnapshot
from dealer_catalog.entrypoints.http.app import build_app
from dealer_catalog.infra.config import Settings


@pytest.fixture
def client(products: list[dict[str, Any]]) -> TestClient:
    repository = InMemoryProductCatalogRepository(CatalogSnapshot.build(products))
    return TestClient(build_app(settings=Settings(), repository=repository))


def test_list_dealers(client: TestClient) -> None:
    response = client.get("/api/dealers")

    assert response.status_code == 200
    assert response.json() == {
        "pagination": {
            "resource": "dealers",
            "page": 1,
            "per_page": 3,
            "total": 3,
            "total_pages": 1,
        },
        "data": [
            {"dealer_code": "EZ978", "dealer_name": "Top Store"},
            {"dealer_code": "QC759", "dealer_name": "Golden Market"},
            {"dealer_code": "ZZ001", "dealer_name": "Dealer ZZ001"},
        ],
    }


def test_paging_params_are_ignored(client: TestClient) -> None:
    response = client.get("/api/dealers", params={"page": "2", "per_page": "1"})

    assert response.json()["pagination"]["page"] == 1
    assert len(response.json()["data"]) == 3


def test_empty_catalog_has_empty_directory() -> None:
    repository = InMemoryProductCatalogRepository(CatalogSnapshot.empty())
    client = TestClient(build_app(settings=Settings(), repository=repository))

    response = client.get("/api/dealers")

    assert response.json() == {
        "pagination": {
            "resource": "dealers",
            "page": 1,
            "per_page": 0,
            "total": 0,
            "total_pages": 1,
        },
        "data": [],
    }


def test_gated_while_loading() -> None:
    client = TestClient(
        build_app(settings=Settings(), repository=InMemoryProductCatalogRepository())
    )

    response = client.get("/api/dealers")

    assert response.status_code == 503
    assert response.json()["code"] == "NOT_READY"
