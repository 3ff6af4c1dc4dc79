"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows callers to stay decoupled from concrete implementations.
"""

from restaurant_core.application.ports.order_repository import OrderRepository
from restaurant_core.application.ports.time_provider import TimeProvider

__all__ = [
    "OrderRepository",
    "TimeProvider",
]
