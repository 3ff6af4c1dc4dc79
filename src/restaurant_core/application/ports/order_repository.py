from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restaurant_core.domain.value_objects import OrderId


class OrderRepository(ABC):
    """Port for order-id registration.

    Contract:
    - register() stores an id exactly once; a second register() of an equal
      id raises DuplicateIdError and leaves the repository unchanged
    - contains() never raises
    - Each instance is an isolated registry (no process-wide state)
    - Implementations are NOT thread-safe; callers must ensure serialization

    Design note:
    OrderId only guarantees format. Uniqueness spans many ids, so a single
    value object cannot enforce it; the repository is the sole owner of
    that rule.
    """

    @abstractmethod
    def register(self, order_id: OrderId) -> None:
        """Register an order ID.

        Args:
            order_id: A format-valid order identifier.

        Raises:
            DuplicateIdError: If order_id was already registered.
        """

    @abstractmethod
    def contains(self, order_id: OrderId) -> bool:
        """Return True if order_id has been registered."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of registered ids."""
