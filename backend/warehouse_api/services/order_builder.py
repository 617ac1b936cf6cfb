"""Derivation of new orders from a creation payload.

Everything here is pure: functions take the current order collection and
return new values, persistence is left to the caller.
"""

from typing import Iterable, Optional, Sequence

from warehouse_api.models.order import LineItem, Number, Order, OrderCreate
from warehouse_api.utils.helpers import (
    format_line_item_id,
    get_timestamp,
    line_item_number,
    parse_int,
)

CUSTOMER_FIELDS = ("shipping_address", "customer_name", "customer_email")


def next_order_id(orders: Iterable[Order]) -> str:
    """One more than the highest numeric order id, "1" for an empty store.

    Ids that are not integers do not take part in the maximum.
    """
    highest = 0
    for order in orders:
        number = parse_int(order.order_id)
        if number is not None and number > highest:
            highest = number
    return str(highest + 1)


def compute_order_total(line_items: Iterable[LineItem]) -> Number:
    """Sum of line item prices; a missing price counts as 0."""
    return sum((item.price or 0 for item in line_items), 0)


def max_line_item_number(orders: Iterable[Order]) -> int:
    """Highest ``LI-<n>`` counter over every line item of every order."""
    highest = 0
    for order in orders:
        for item in order.line_items:
            highest = max(highest, line_item_number(item.line_item_id))
    return highest


def assign_line_item_ids(line_items: Sequence[LineItem], start: int) -> list[LineItem]:
    """Give every line item without an id the next ``LI-<n>`` after ``start``.

    Items that already carry an id are returned unchanged, in their original
    position.
    """
    counter = start
    assigned: list[LineItem] = []
    for item in line_items:
        if item.line_item_id:
            assigned.append(item)
            continue
        counter += 1
        assigned.append(item.model_copy(update={"line_item_id": format_line_item_id(counter)}))
    return assigned


def build_order(
    orders: Sequence[Order],
    payload: OrderCreate,
    order_date: Optional[str] = None,
) -> Order:
    """Build a fully populated order from a creation payload.

    Customer fields the payload left out stay unset on the order.
    """
    line_items = assign_line_item_ids(payload.line_items, max_line_item_number(orders))
    customer_fields = {
        name: getattr(payload, name)
        for name in CUSTOMER_FIELDS
        if name in payload.model_fields_set
    }
    return Order(
        order_id=next_order_id(orders),
        order_total=compute_order_total(payload.line_items),
        order_date=order_date or get_timestamp(),
        **customer_fields,
        line_items=line_items,
    )
