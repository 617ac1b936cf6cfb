"""Seed the order file with sample orders."""

import asyncio
import logging

from warehouse_api.config import get_settings
from warehouse_api.database.order_store import OrderStore
from warehouse_api.models.order import LineItem, OrderCreate
from warehouse_api.services.order_service import OrderService
from warehouse_api.utils.logger import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

SAMPLE_ORDERS = [
    OrderCreate(
        shipping_address="1 Harbour St, Sydney NSW 2000",
        customer_name="Jane Smith",
        customer_email="jane.smith@example.com",
        line_items=[
            LineItem(product_id="GIFTBOX-RELAX", price=49.95),
            LineItem(product_id="CANDLE-LAV", price=14.5),
        ],
    ),
    OrderCreate(
        shipping_address="22 King St, Melbourne VIC 3000",
        customer_name="Bob Johnson",
        customer_email="bob.johnson@example.com",
        line_items=[
            LineItem(product_id="GIFTBOX-SWEET", price=39.95, gift_message="Happy birthday!"),
        ],
    ),
]


async def init_orders() -> None:
    """Create the sample orders through the order service."""
    settings = get_settings()
    service = OrderService(OrderStore(settings.orders_file))

    existing = await service.list_orders()
    if existing:
        logger.info("Order file already holds %d orders, skipping seed", len(existing))
        return

    for payload in SAMPLE_ORDERS:
        order = await service.create_order(payload)
        logger.info("Seeded order %s for %s", order.order_id, order.customer_name)

    logger.info("Seeded %d sample orders into %s", len(SAMPLE_ORDERS), settings.orders_file)


if __name__ == "__main__":
    asyncio.run(init_orders())
