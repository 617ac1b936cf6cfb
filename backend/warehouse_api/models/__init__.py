"""Data models package."""

from warehouse_api.models.order import (
    LineItem,
    Order,
    OrderCreate,
    OrderUpdate,
    PackedLineItem,
    PackedOrder,
)
from warehouse_api.models.product import MappedProduct, ProductMapping, ProductMappingEntry
from warehouse_api.models.request import ErrorResponse, HealthResponse, PickingItem

__all__ = [
    # Order models
    "Order",
    "OrderCreate",
    "OrderUpdate",
    "LineItem",
    "PackedOrder",
    "PackedLineItem",
    # Product mapping models
    "MappedProduct",
    "ProductMapping",
    "ProductMappingEntry",
    # Request/Response models
    "PickingItem",
    "HealthResponse",
    "ErrorResponse",
]
