"""Shared pytest fixtures for warehouse API tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from warehouse_api.api.dependencies import get_order_store, get_product_catalog
from warehouse_api.database.order_store import OrderStore
from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.main import app
from warehouse_api.models.product import ProductMapping

PRODUCT_MAPPING = {
    "BOX": {"products": [{"product_name": "Widget"}]},
    "GIFTBOX-RELAX": {
        "products": [
            {"product_name": "Lavender Candle"},
            {"product_name": "Bath Salts", "sku": "BS-100"},
        ]
    },
    "CANDLE-LAV": {"products": [{"product_name": "Lavender Candle"}]},
}


@pytest.fixture
def catalog() -> ProductCatalog:
    """Catalog built from the sample mapping."""
    return ProductCatalog.from_mapping(ProductMapping.model_validate(PRODUCT_MAPPING))


@pytest.fixture
def orders_path(tmp_path: Path) -> Path:
    """Location of the order file for one test."""
    return tmp_path / "orders.json"


@pytest.fixture
def order_store(orders_path: Path) -> OrderStore:
    """Order store backed by a temporary file."""
    return OrderStore(orders_path)


@pytest.fixture
def write_orders(orders_path: Path) -> Callable[[list[dict[str, Any]]], None]:
    """Write raw order records straight to the order file."""

    def _write(records: list[dict[str, Any]]) -> None:
        orders_path.write_text(json.dumps(records), encoding="utf-8")

    return _write


@pytest.fixture
def read_orders(orders_path: Path) -> Callable[[], list[dict[str, Any]]]:
    """Read the raw order records back from the order file."""

    def _read() -> list[dict[str, Any]]:
        return json.loads(orders_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def client(order_store: OrderStore, catalog: ProductCatalog):
    """Test client wired to the temporary store and sample catalog."""
    app.dependency_overrides[get_order_store] = lambda: order_store
    app.dependency_overrides[get_product_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
