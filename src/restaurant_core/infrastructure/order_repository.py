from __future__ import annotations

from typing import TYPE_CHECKING

from restaurant_core.application.ports import OrderRepository
from restaurant_core.domain.exceptions import DuplicateIdError

if TYPE_CHECKING:
    from restaurant_core.domain.value_objects import OrderId


class InMemoryOrderRepository(OrderRepository):
    """Set-backed order repository.

    Implementation notes:
    - OrderId is a frozen dataclass, so it hashes by value
    - Each instance owns its own set; create a fresh one per test or run
    - NOT thread-safe
    """

    def __init__(self) -> None:
        self._ids: set[OrderId] = set()

    def register(self, order_id: OrderId) -> None:
        if order_id in self._ids:
            raise DuplicateIdError(
                f"Duplicate OrderId detected: {order_id.value}", value=order_id.value
            )
        self._ids.add(order_id)

    def contains(self, order_id: OrderId) -> bool:
        return order_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
