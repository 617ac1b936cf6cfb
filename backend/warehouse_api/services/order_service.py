"""Order service for business logic."""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from warehouse_api.database.order_store import OrderStore
from warehouse_api.exceptions import MalformedInput, OrderNotFound
from warehouse_api.models.order import Order, OrderCreate, OrderUpdate
from warehouse_api.services.order_builder import build_order

logger = logging.getLogger(__name__)


def _find_index(orders: list[Order], order_id: str) -> int:
    for index, order in enumerate(orders):
        if order.order_id == order_id:
            return index
    raise OrderNotFound(order_id)


class OrderService:
    """CRUD operations over the order store.

    Every call loads the full collection, and every mutation writes the full
    collection back before returning. File I/O stays on the event loop so a
    load-mutate-save sequence is never interleaved with another request.
    """

    def __init__(self, store: OrderStore) -> None:
        self.store = store

    async def list_orders(self) -> list[Order]:
        """List all orders."""
        return self.store.load()

    async def get_order(self, order_id: str) -> Order:
        """Get order by ID."""
        orders = self.store.load()
        return orders[_find_index(orders, order_id)]

    async def create_order(
        self,
        payload: OrderCreate | Mapping[str, Any],
        order_date: Optional[str] = None,
    ) -> Order:
        """Create an order with derived id, date, total and line item ids."""
        if not isinstance(payload, OrderCreate):
            try:
                payload = OrderCreate.model_validate(payload)
            except ValidationError as e:
                raise MalformedInput(f"Invalid order payload: {e.error_count()} error(s)") from e

        orders = self.store.load(strict=True)
        order = build_order(orders, payload, order_date=order_date)
        orders.append(order)
        self.store.save(orders)

        logger.info(
            "Created order %s with %d line items, total %s",
            order.order_id,
            len(order.line_items),
            order.order_total,
        )
        return order

    async def update_order(
        self, order_id: str, update: OrderUpdate | Mapping[str, Any]
    ) -> Order:
        """Shallow-merge the update's fields onto the stored order."""
        try:
            if not isinstance(update, OrderUpdate):
                update = OrderUpdate.model_validate(update)
        except ValidationError as e:
            raise MalformedInput(f"Invalid order update: {e.error_count()} error(s)") from e

        orders = self.store.load(strict=True)
        index = _find_index(orders, order_id)

        merged = {
            **orders[index].model_dump(exclude_unset=True),
            **update.model_dump(exclude_unset=True),
        }
        try:
            orders[index] = Order.model_validate(merged)
        except ValidationError as e:
            raise MalformedInput(f"Invalid order update: {e.error_count()} error(s)") from e

        self.store.save(orders)
        logger.info("Updated order %s", order_id)
        return orders[index]

    async def delete_order(self, order_id: str) -> Order:
        """Delete an order and return it."""
        orders = self.store.load(strict=True)
        deleted = orders.pop(_find_index(orders, order_id))
        self.store.save(orders)
        logger.info("Deleted order %s", order_id)
        return deleted
