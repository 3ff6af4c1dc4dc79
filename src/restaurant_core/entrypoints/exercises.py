"""Demonstration routines, one per exercise.

Each routine feeds a fixed set of bad and good inputs through a smart
constructor or entity method. Rejections are caught at the call site and
reported through log_error(); a rejection never stops the routine.
"""

from __future__ import annotations

from collections.abc import Callable

from restaurant_core.domain.entities import Customer, MenuItem, Order, OrderLine, Table
from restaurant_core.domain.exceptions import DomainException
from restaurant_core.domain.value_objects import (
    Money,
    OperatingHours,
    create_hour,
    create_order_id,
    create_quantity,
    generate_order_id,
    parse_email,
)
from restaurant_core.infrastructure import InMemoryOrderRepository, SystemTimeProvider
from restaurant_core.logging_config import get_logger, log_error

logger = get_logger(__name__)


def exercise2_primitive_quantity() -> None:
    """Quantity: -3 pizzas and 50,000 coffees are blocked, 5 coffees go through."""
    unit_prices = {"Pizza": Money.from_dollars(15, "USD"), "Coffee": Money.from_dollars(3, "USD")}

    for item_name, raw_quantity in (("Pizza", -3), ("Coffee", 50_000), ("Pizza", 2.5)):
        logger.info("Attempting to order", item=item_name, quantity=raw_quantity)
        try:
            OrderLine(
                item_name=item_name,
                quantity=create_quantity(raw_quantity),  # type: ignore[arg-type]
                unit_price=unit_prices[item_name],
            )
        except DomainException as e:
            log_error(2, "Invalid quantity rejected", {"item": item_name, **e.details()})

    try:
        line = OrderLine(
            item_name="Coffee", quantity=create_quantity(5), unit_price=unit_prices["Coffee"]
        )
    except DomainException as e:
        log_error(2, "Valid order failed", e.details())
        return

    logger.info(
        "Order accepted",
        item=line.item_name,
        quantity=line.quantity.value,
        total=line.total().format(),
    )


def exercise4_business_rule_violation() -> None:
    """Table: overcapacity and negative seating are blocked, 2 + 2 at a 4-top fits."""
    try:
        table = Table.create(5, 4)
        table.seat_guests(7)
    except DomainException as e:
        log_error(4, "Table overcapacity - business rule violated", e.details())

    try:
        table = Table.create(3, 6)
        table.seat_guests(-2)
    except DomainException as e:
        log_error(4, "Negative guest count - impossible in real world", e.details())

    try:
        Table.create(7, 0)
    except DomainException as e:
        log_error(4, "Table without seats rejected", e.details())

    try:
        table = Table.create(1, 4)
        table.seat_guests(2)
        table.seat_guests(2)
    except DomainException as e:
        log_error(4, "Valid seating failed", e.details())
        return

    logger.info(
        "Guests seated",
        table=table.table_number,
        guests=table.current_guests,
        capacity=table.capacity,
    )


def exercise5_identity_crisis() -> None:
    """OrderId: malformed and duplicate ids are blocked, generated ids register."""
    repository = InMemoryOrderRepository()
    clock = SystemTimeProvider()

    for raw in ("", "12345", "12345", "not-a-number", "ORD-123", "ORD-10001", "ORD-10001"):
        try:
            repository.register(create_order_id(raw))
        except DomainException as e:
            log_error(5, "Order ID rejected", e.details())

    orders = [
        Order(
            order_id=generate_order_id(clock.now()),
            customer_name="Alice",
            total=Money.from_dollars(25, "USD"),
        ),
        Order(
            order_id=generate_order_id(clock.now()),
            customer_name="Bob",
            total=Money.from_dollars(30, "USD"),
        ),
    ]

    for order in orders:
        try:
            repository.register(order.order_id)
        except DomainException as e:
            log_error(5, "Generated Order ID rejected", e.details())
            continue
        logger.info("Order registered", order_id=order.order_id.value, customer=order.customer_name)


def exercise6_temporal_logic() -> None:
    """OperatingHours: 25 and -5 are blocked, a 22-6 venue is open at 2 AM."""
    try:
        OperatingHours.create(25, -5)
    except DomainException as e:
        log_error(6, "Invalid hours rejected", e.details())

    hours = OperatingHours.create(22, 6)
    test_hour = create_hour(2)

    if not hours.is_open_at(test_hour):
        log_error(
            6,
            "Operating hours logic broken for overnight restaurants",
            {"issue": "2 AM should be open for a 10PM-6AM restaurant!"},
        )
        return

    logger.info(
        "Overnight hours resolved",
        opens=hours.opens.value,
        closes=hours.closes.value,
        hour=test_hour.value,
        is_open=True,
    )


def exercise7_currency_confusion() -> None:
    """Money: USD + EUR is blocked, 12.50 + 18.50 USD totals $31.00 USD."""
    try:
        Money.from_dollars(10, "USD").add(Money.from_dollars(10, "EUR"))
    except DomainException as e:
        log_error(7, "Cannot add different currencies", e.details())

    try:
        Money.from_cents(18.5, "USD")  # type: ignore[arg-type]
    except DomainException as e:
        log_error(7, "Fractional cents rejected", e.details())

    burger = MenuItem(name="Burger", price=Money.from_dollars(12.50, "USD"))
    pizza = MenuItem(name="Pizza", price=Money.from_dollars(18.50, "USD"))

    total = burger.price.add(pizza.price)
    logger.info("Bill totalled", items=[burger.name, pizza.name], total=total.format())


def exercise8_email_validation() -> None:
    """Email: malformed addresses are blocked, valid ones are parsed and lowercased."""
    raw_inputs = [
        ("Alice", "alice@example.com"),
        ("Bob", "not-an-email"),
        ("Charlie", "charlie@@double.com"),
        ("Diana", "@no-local-part.com"),
        ("Eve", "eve@"),
        ("Frank", " "),
    ]

    customers: list[Customer] = []
    for name, raw_email in raw_inputs:
        try:
            customers.append(Customer(name=name, email=parse_email(raw_email)))
        except DomainException as e:
            log_error(8, "Invalid email rejected", {"name": name, **e.details()})

    for customer in customers:
        logger.info("Customer accepted", name=customer.name, email=customer.email.value)


EXERCISES: dict[int, Callable[[], None]] = {
    2: exercise2_primitive_quantity,
    4: exercise4_business_rule_violation,
    5: exercise5_identity_crisis,
    6: exercise6_temporal_logic,
    7: exercise7_currency_confusion,
    8: exercise8_email_validation,
}
