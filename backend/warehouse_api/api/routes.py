"""API routes for orders, picking and packing."""

import logging

from fastapi import APIRouter, Depends, status

from warehouse_api.api.dependencies import (
    get_fulfillment_service,
    get_order_service,
    get_order_store,
    get_product_catalog,
)
from warehouse_api.config import get_settings
from warehouse_api.database.order_store import OrderStore
from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.models.order import Order, OrderCreate, OrderUpdate, PackedOrder
from warehouse_api.models.request import ErrorResponse, HealthResponse, PickingItem
from warehouse_api.services.fulfillment_service import FulfillmentService
from warehouse_api.services.order_service import OrderService

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix=settings.api_prefix)

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: OrderStore = Depends(get_order_store),
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> HealthResponse:
    """Health check endpoint."""
    orders_status = "available" if store.path.is_file() else "missing"
    mapping_status = f"{len(catalog)} entries" if len(catalog) else "empty"

    return HealthResponse(
        status="healthy" if orders_status == "available" and len(catalog) else "degraded",
        version=settings.app_version,
        services={
            "orders_file": orders_status,
            "product_mapping": mapping_status,
        },
    )


#
# Orders
#


@router.get(
    "/orders",
    response_model=list[Order],
    response_model_exclude_unset=True,
)
async def list_orders(service: OrderService = Depends(get_order_service)) -> list[Order]:
    """Get all orders."""
    return await service.list_orders()


@router.get(
    "/orders/{order_id}",
    response_model=Order,
    response_model_exclude_unset=True,
    responses=NOT_FOUND_RESPONSE,
)
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)) -> Order:
    """Get an order by its order_id."""
    return await service.get_order(order_id)


@router.post(
    "/orders",
    response_model=Order,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    payload: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Create an order.

    The order number, order date and order total are derived, and every line
    item without a line_item_id gets the next store-wide ``LI-<n>``.
    """
    return await service.create_order(payload)


@router.put(
    "/orders/{order_id}",
    response_model=Order,
    response_model_exclude_unset=True,
    responses=NOT_FOUND_RESPONSE,
)
async def update_order(
    order_id: str,
    update: OrderUpdate,
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Update an order by shallow-merging the body onto it.

    Derived fields are not recomputed, and a ``line_items`` field replaces
    the whole list.
    """
    return await service.update_order(order_id, update)


@router.delete(
    "/orders/{order_id}",
    response_model=Order,
    response_model_exclude_unset=True,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)) -> Order:
    """Delete an order and return it."""
    return await service.delete_order(order_id)


#
# Warehouse views
#


@router.get("/picking", response_model=list[PickingItem])
async def picking_list(
    service: FulfillmentService = Depends(get_fulfillment_service),
) -> list[PickingItem]:
    """Aggregate all individual products needed across every order."""
    return await service.picking_list()


@router.get(
    "/packing",
    response_model=list[PackedOrder],
    response_model_exclude_unset=True,
)
async def packing_view(
    service: FulfillmentService = Depends(get_fulfillment_service),
) -> list[PackedOrder]:
    """Orders with each line item broken down into its individual products."""
    return await service.packing_view()
