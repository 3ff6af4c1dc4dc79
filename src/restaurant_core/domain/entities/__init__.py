"""Domain entities - Objects with identity and lifecycle."""

from restaurant_core.domain.entities.customer import Customer
from restaurant_core.domain.entities.menu_item import MenuItem
from restaurant_core.domain.entities.order import Order, OrderLine
from restaurant_core.domain.entities.table import Table

__all__ = [
    "Customer",
    "MenuItem",
    "Order",
    "OrderLine",
    "Table",
]
