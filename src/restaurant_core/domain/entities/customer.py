from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from restaurant_core.domain.value_objects import Email


@dataclass(frozen=True, slots=True)
class Customer:
    """Customer contact record. email is already parsed, never a raw string."""

    name: str
    email: Email
