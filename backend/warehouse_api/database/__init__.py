"""Database package."""

from warehouse_api.database.order_store import OrderStore
from warehouse_api.database.product_catalog import ProductCatalog

__all__ = [
    "OrderStore",
    "ProductCatalog",
]
