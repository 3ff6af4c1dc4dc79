"""Value objects - Immutable objects defined by their attributes."""

from restaurant_core.domain.value_objects.email import Email, parse_email
from restaurant_core.domain.value_objects.hour import Hour, create_hour
from restaurant_core.domain.value_objects.money import Currency, Money
from restaurant_core.domain.value_objects.operating_hours import OperatingHours
from restaurant_core.domain.value_objects.order_id import (
    OrderId,
    create_order_id,
    generate_order_id,
)
from restaurant_core.domain.value_objects.quantity import MAX_QUANTITY, Quantity, create_quantity

__all__ = [
    "MAX_QUANTITY",
    "Currency",
    "Email",
    "Hour",
    "Money",
    "OperatingHours",
    "OrderId",
    "Quantity",
    "create_hour",
    "create_order_id",
    "create_quantity",
    "generate_order_id",
    "parse_email",
]
