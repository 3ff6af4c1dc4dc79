from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restaurant_core.domain.value_objects import Money, OrderId, Quantity


@dataclass(frozen=True, slots=True)
class OrderLine:
    """A single item on an order.

    quantity is a Quantity, so a line can never hold -3 pizzas or
    50,000 coffees.
    """

    item_name: str
    quantity: Quantity
    unit_price: Money

    def total(self) -> Money:
        return self.unit_price.multiply(self.quantity)


@dataclass(frozen=True, slots=True)
class Order:
    """An order identified by a validated OrderId."""

    order_id: OrderId
    customer_name: str
    total: Money
