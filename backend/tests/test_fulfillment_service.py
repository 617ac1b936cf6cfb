"""Tests for the picking and packing views."""

import pytest

from warehouse_api.database.product_catalog import ProductCatalog
from warehouse_api.models.order import Order
from warehouse_api.services.fulfillment_service import (
    FulfillmentService,
    build_packing_view,
    build_picking_list,
)


def order(order_id: str, *product_ids: str, **fields) -> Order:
    return Order.model_validate(
        {
            "order_id": order_id,
            "line_items": [
                {"line_item_id": f"LI-{order_id}{n}", "product_id": pid}
                for n, pid in enumerate(product_ids)
            ],
            **fields,
        }
    )


class TestPickingList:
    """Aggregated product quantities."""

    def test_counts_one_unit_per_line_item_occurrence(self, catalog: ProductCatalog) -> None:
        orders = [order("1", "BOX"), order("2", "BOX")]

        picking = build_picking_list(orders, catalog)

        assert [p.model_dump() for p in picking] == [{"product_name": "Widget", "quantity": 2}]

    def test_same_product_from_different_kits_is_merged(self, catalog: ProductCatalog) -> None:
        orders = [order("1", "GIFTBOX-RELAX"), order("2", "CANDLE-LAV", "BOX")]

        picking = {p.product_name: p.quantity for p in build_picking_list(orders, catalog)}

        assert picking == {"Lavender Candle": 2, "Bath Salts": 1, "Widget": 1}

    def test_rows_follow_first_occurrence(self, catalog: ProductCatalog) -> None:
        orders = [order("1", "BOX"), order("2", "GIFTBOX-RELAX"), order("3", "BOX")]

        names = [p.product_name for p in build_picking_list(orders, catalog)]

        assert names == ["Widget", "Lavender Candle", "Bath Salts"]

    def test_quantity_attribute_is_not_multiplied(self, catalog: ProductCatalog) -> None:
        orders = [
            Order.model_validate(
                {"order_id": "1", "line_items": [{"product_id": "BOX", "quantity": 5}]}
            )
        ]

        picking = build_picking_list(orders, catalog)

        assert picking[0].quantity == 1

    def test_unmapped_products_contribute_nothing(self, catalog: ProductCatalog) -> None:
        orders = [order("1", "UNKNOWN"), Order(order_id="2")]

        assert build_picking_list(orders, catalog) == []


class TestPackingView:
    """Per-order kit expansion."""

    def test_line_items_gain_products(self, catalog: ProductCatalog) -> None:
        packed = build_packing_view([order("1", "GIFTBOX-RELAX")], catalog)

        products = packed[0].line_items[0].products
        assert [p.product_name for p in products] == ["Lavender Candle", "Bath Salts"]
        assert products[1].model_dump() == {"product_name": "Bath Salts", "sku": "BS-100"}

    def test_unmapped_product_gets_empty_list(self, catalog: ProductCatalog) -> None:
        packed = build_packing_view([order("1", "UNKNOWN")], catalog)

        assert packed[0].line_items[0].products == []

    def test_other_fields_are_preserved(self, catalog: ProductCatalog) -> None:
        source = Order.model_validate(
            {
                "order_id": "7",
                "order_total": 30,
                "customer_name": "Jane",
                "priority": "express",
                "line_items": [
                    {"line_item_id": "LI-1", "product_id": "BOX", "price": 30, "note": "fragile"}
                ],
            }
        )

        packed = build_packing_view([source], catalog)[0].model_dump(exclude_unset=True)

        assert packed["order_id"] == "7"
        assert packed["order_total"] == 30
        assert packed["priority"] == "express"
        assert packed["line_items"][0]["note"] == "fragile"
        assert packed["line_items"][0]["products"] == [{"product_name": "Widget"}]
        assert "products" not in source.line_items[0].model_dump()

    def test_orders_keep_their_order(self, catalog: ProductCatalog) -> None:
        packed = build_packing_view([order("3", "BOX"), order("1", "BOX")], catalog)

        assert [o.order_id for o in packed] == ["3", "1"]


class TestFulfillmentService:
    """Views computed from the order file."""

    @pytest.mark.asyncio
    async def test_picking_reads_current_store(self, order_store, write_orders, catalog) -> None:
        write_orders([order("1", "BOX").model_dump(), order("2", "BOX").model_dump()])
        service = FulfillmentService(order_store, catalog)

        picking = await service.picking_list()

        assert [(p.product_name, p.quantity) for p in picking] == [("Widget", 2)]

    @pytest.mark.asyncio
    async def test_views_on_missing_store_are_empty(self, order_store, catalog) -> None:
        service = FulfillmentService(order_store, catalog)

        assert await service.picking_list() == []
        assert await service.packing_view() == []
