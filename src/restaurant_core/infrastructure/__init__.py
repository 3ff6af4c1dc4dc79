"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Order Repository: In-memory uniqueness registry for order IDs
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from restaurant_core.infrastructure.order_repository import InMemoryOrderRepository
from restaurant_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryOrderRepository",
    "SystemTimeProvider",
]
