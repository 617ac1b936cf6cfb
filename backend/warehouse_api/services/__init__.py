"""Services package."""

from warehouse_api.services.data_loader import DataLoader
from warehouse_api.services.fulfillment_service import (
    FulfillmentService,
    build_packing_view,
    build_picking_list,
)
from warehouse_api.services.order_builder import build_order
from warehouse_api.services.order_service import OrderService

__all__ = [
    "DataLoader",
    "OrderService",
    "FulfillmentService",
    "build_order",
    "build_picking_list",
    "build_packing_view",
]
