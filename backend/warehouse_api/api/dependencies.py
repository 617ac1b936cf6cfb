"""FastAPI dependencies handing the stores to the routes.

The order store and product catalog are created once by the application
lifespan and kept on ``app.state``; tests swap them through
``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from warehouse_api.database.order_store import OrderStore
from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.services.fulfillment_service import FulfillmentService
from warehouse_api.services.order_service import OrderService


def get_order_store(request: Request) -> OrderStore:
    """Order store created at startup."""
    return request.app.state.order_store


def get_product_catalog(request: Request) -> ProductCatalog:
    """Product mapping loaded at startup."""
    return request.app.state.product_catalog


def get_order_service(store: OrderStore = Depends(get_order_store)) -> OrderService:
    """Order service bound to the current store."""
    return OrderService(store)


def get_fulfillment_service(
    store: OrderStore = Depends(get_order_store),
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> FulfillmentService:
    """Picking/packing service bound to the current store and catalog."""
    return FulfillmentService(store, catalog)
