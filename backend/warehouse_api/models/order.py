"""Order and line item data models.

Orders and line items are open records: besides the known fields below,
any extra attribute a caller sends is kept in the model's extra mapping and
written back to the order file unchanged.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from warehouse_api.models.product import MappedProduct

Number = Union[int, float]


class LineItem(BaseModel):
    """Line item in an order."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    line_item_id: Optional[str] = Field(None, description="Store-wide line item id, LI-<n>")
    product_id: Optional[str] = Field(None, description="Product or kit identifier")
    price: Optional[Number] = Field(None, description="Line item price")


class Order(BaseModel):
    """Order model as stored in the order file."""

    model_config = ConfigDict(
        extra="allow",
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {
                "order_id": "12",
                "order_total": 59.98,
                "order_date": "2024-09-06T03:28:26.000Z",
                "shipping_address": "1 Harbour St, Sydney NSW 2000",
                "customer_name": "Jane Smith",
                "customer_email": "jane.smith@example.com",
                "line_items": [
                    {"line_item_id": "LI-31", "product_id": "GIFTBOX-01", "price": 29.99},
                    {"line_item_id": "LI-32", "product_id": "GIFTBOX-02", "price": 29.99},
                ],
            }
        },
    )

    order_id: str = Field(..., description="Order number")
    order_total: Number = Field(0, description="Sum of line item prices at creation")
    order_date: Optional[str] = Field(None, description="ISO-8601 creation timestamp")
    # copied verbatim from the caller, whatever their JSON type
    shipping_address: Any = None
    customer_name: Any = None
    customer_email: Any = None
    line_items: list[LineItem] = Field(default_factory=list, description="Items in the order")


class OrderCreate(BaseModel):
    """Order creation payload; ids, date and total are derived."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "shipping_address": "1 Harbour St, Sydney NSW 2000",
                "customer_name": "Jane Smith",
                "customer_email": "jane.smith@example.com",
                "line_items": [{"product_id": "GIFTBOX-01", "price": 29.99}],
            }
        },
    )

    shipping_address: Any = None
    customer_name: Any = None
    customer_email: Any = None
    line_items: list[LineItem] = Field(..., description="Items in the order")


class OrderUpdate(BaseModel):
    """Partial order payload, shallow-merged onto the stored order."""

    model_config = ConfigDict(extra="allow")

    order_total: Optional[Number] = None
    order_date: Optional[str] = None
    shipping_address: Any = None
    customer_name: Any = None
    customer_email: Any = None
    line_items: Optional[list[LineItem]] = None


class PackedLineItem(LineItem):
    """Line item expanded into the physical products it contains."""

    products: list[MappedProduct] = Field(default_factory=list)


class PackedOrder(Order):
    """Order whose line items carry their physical products."""

    line_items: list[PackedLineItem] = Field(default_factory=list)
