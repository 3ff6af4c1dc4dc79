from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restaurant_core.domain.value_objects import Money


@dataclass(frozen=True, slots=True)
class MenuItem:
    """Menu entry priced in Money rather than a bare number."""

    name: str
    price: Money
