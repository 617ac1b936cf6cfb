"""Picking and packing views over the order collection."""

import logging
from typing import Iterable

from warehouse_api.database.order_store import OrderStore
from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.models.order import Order, PackedLineItem, PackedOrder
from warehouse_api.models.request import PickingItem

logger = logging.getLogger(__name__)


def build_picking_list(orders: Iterable[Order], catalog: ProductCatalog) -> list[PickingItem]:
    """Count every physical product occurrence across all line items.

    Each product in a line item's mapping adds exactly one unit; line items
    are not multiplied by any quantity attribute. Rows come out in order of
    first occurrence.
    """
    tally: dict[str, int] = {}
    for order in orders:
        for item in order.line_items:
            for product in catalog.products_for(item.product_id):
                tally[product.product_name] = tally.get(product.product_name, 0) + 1

    return [PickingItem(product_name=name, quantity=count) for name, count in tally.items()]


def pack_order(order: Order, catalog: ProductCatalog) -> PackedOrder:
    """Copy of ``order`` with each line item carrying its physical products."""
    packed_items = [
        PackedLineItem.model_validate(
            {
                **item.model_dump(exclude_unset=True),
                "products": catalog.products_for(item.product_id),
            }
        )
        for item in order.line_items
    ]
    return PackedOrder.model_validate(
        {**order.model_dump(exclude_unset=True), "line_items": packed_items}
    )


def build_packing_view(orders: Iterable[Order], catalog: ProductCatalog) -> list[PackedOrder]:
    """Every order, in stored order, with its line items expanded."""
    return [pack_order(order, catalog) for order in orders]


class FulfillmentService:
    """Warehouse views computed from a freshly loaded order collection."""

    def __init__(self, store: OrderStore, catalog: ProductCatalog) -> None:
        self.store = store
        self.catalog = catalog

    async def picking_list(self) -> list[PickingItem]:
        """Aggregate product quantities needed for all orders."""
        orders = self.store.load()
        picking = build_picking_list(orders, self.catalog)
        logger.info("Picking list built: %d products from %d orders", len(picking), len(orders))
        return picking

    async def packing_view(self) -> list[PackedOrder]:
        """Orders with every line item broken down into its products."""
        orders = self.store.load()
        return build_packing_view(orders, self.catalog)
