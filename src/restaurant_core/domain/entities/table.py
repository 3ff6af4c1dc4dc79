"""Table entity with capacity-guarded seating.

Unlike the value objects, a Table has identity (its table number) and a
lifecycle: created empty, then filled by repeated seat_guests() calls.
"""

from __future__ import annotations

from restaurant_core.domain.exceptions import (
    CapacityExceededError,
    NonPositiveCapacityError,
    NonPositiveGuestCountError,
)


class Table:
    """Restaurant table entity.

    Invariant (always true after any successful operation):
        0 <= current_guests <= capacity

    current_guests has no public setter; seat_guests() is the only mutator
    and re-checks capacity on every call. A rejected call leaves the table
    unchanged.

    Use the create() factory method to construct instances.

    Not thread-safe; callers serialize access to a given table.
    """

    __slots__ = ("_capacity", "_current_guests", "_table_number")

    def __init__(self, table_number: int, capacity: int, current_guests: int = 0) -> None:
        if capacity <= 0:
            raise NonPositiveCapacityError(
                f"Capacity must be positive. Received: {capacity}", value=capacity
            )
        if current_guests < 0:
            raise NonPositiveGuestCountError(
                f"Current guests cannot be negative. Received: {current_guests}",
                value=current_guests,
            )
        if current_guests > capacity:
            raise CapacityExceededError(
                f"Current guests exceed table capacity. Capacity: {capacity}, "
                f"Current: {current_guests}",
                value=current_guests,
            )

        self._table_number = table_number
        self._capacity = capacity
        self._current_guests = current_guests

    @classmethod
    def create(cls, table_number: int, capacity: int) -> Table:
        """Factory method to create an empty Table.

        Args:
            table_number: Identity of the table.
            capacity: Maximum number of guests.

        Returns:
            A new Table with zero guests.

        Raises:
            NonPositiveCapacityError: If capacity <= 0.
        """
        return cls(table_number, capacity, 0)

    @property
    def table_number(self) -> int:
        return self._table_number

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_guests(self) -> int:
        return self._current_guests

    @property
    def available_seats(self) -> int:
        return self._capacity - self._current_guests

    @property
    def is_full(self) -> bool:
        return self._current_guests == self._capacity

    def seat_guests(self, count: int) -> None:
        """Seat additional guests at this table.

        Args:
            count: Number of guests arriving.

        Raises:
            NonPositiveGuestCountError: If count <= 0.
            CapacityExceededError: If current_guests + count > capacity.
        """
        if count <= 0:
            raise NonPositiveGuestCountError(
                f"Guest count must be positive. Received: {count}", value=count
            )

        if self._current_guests + count > self._capacity:
            raise CapacityExceededError(
                f"Exceeds table capacity. Capacity: {self._capacity}, "
                f"Current: {self._current_guests}, Requested: {count}",
                value=count,
            )

        self._current_guests += count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._table_number == other._table_number

    def __hash__(self) -> int:
        return hash(self._table_number)

    def __repr__(self) -> str:
        return (
            f"Table(table_number={self._table_number}, capacity={self._capacity}, "
            f"current_guests={self._current_guests})"
        )
