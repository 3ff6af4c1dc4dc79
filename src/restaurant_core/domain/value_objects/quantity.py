from __future__ import annotations

from dataclasses import dataclass

from restaurant_core.domain.exceptions import (
    ExceedsMaximumError,
    NonPositiveError,
    NotIntegerError,
)

MAX_QUANTITY = 100


@dataclass(frozen=True, slots=True, order=True)
class Quantity:
    """Value object for the number of units of an item on an order.

    Rules, checked in order:
      - Must be a whole number (no half-pizzas)
      - Must be positive
      - Must not exceed MAX_QUANTITY (anti-hoarding / typo guard)
    """

    value: int

    def __post_init__(self) -> None:
        n = self.value

        # bool is an int subclass but True is not a quantity
        if isinstance(n, bool) or not isinstance(n, int):
            raise NotIntegerError(f"Quantity must be a whole number. Received: {n!r}", value=n)

        if n <= 0:
            raise NonPositiveError(f"Quantity must be positive. Received: {n}", value=n)

        if n > MAX_QUANTITY:
            raise ExceedsMaximumError(
                f"Quantity {n} exceeds maximum allowed ({MAX_QUANTITY})", value=n
            )

    def __int__(self) -> int:
        return self.value


def create_quantity(n: int) -> Quantity:
    """Smart constructor for Quantity.

    Raises:
        NotIntegerError: If n is not an int.
        NonPositiveError: If n <= 0.
        ExceedsMaximumError: If n > MAX_QUANTITY.
    """
    return Quantity(value=n)
