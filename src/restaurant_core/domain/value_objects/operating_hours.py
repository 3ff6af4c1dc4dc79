"""Operating hours value object.

Owns both the validation of its bounds and the "are we open?" rule,
including spans that cross midnight.
"""

from __future__ import annotations

from dataclasses import dataclass

from restaurant_core.domain.value_objects.hour import Hour, create_hour


@dataclass(frozen=True, slots=True)
class OperatingHours:
    """Daily opening window, from ``opens`` (inclusive) to ``closes`` (exclusive).

    When closes < opens the window spans midnight (e.g. 22 -> 6).
    When opens == closes the window is empty and the venue is always closed.

    Use the create() factory method to build from raw integers.
    """

    opens: Hour
    closes: Hour

    def __post_init__(self) -> None:
        if not isinstance(self.opens, Hour) or not isinstance(self.closes, Hour):
            raise TypeError("OperatingHours requires Hour values; use OperatingHours.create()")

    @classmethod
    def create(cls, opens: int, closes: int) -> OperatingHours:
        """Factory method to create OperatingHours from raw hours.

        Args:
            opens: Opening hour, 0-23.
            closes: Closing hour, 0-23.

        Returns:
            A new OperatingHours instance.

        Raises:
            InvalidHourError: If either hour is invalid (opens is checked first).
        """
        return cls(opens=create_hour(opens), closes=create_hour(closes))

    @property
    def is_overnight(self) -> bool:
        return self.closes < self.opens

    def is_open_at(self, hour: Hour | int) -> bool:
        """Check whether the venue is open at the given hour.

        Args:
            hour: An Hour, or a raw int which is validated through create_hour().

        Returns:
            True if hour falls inside the window, False otherwise.

        Raises:
            InvalidHourError: If a raw int outside [0, 23] is given.
        """
        if not isinstance(hour, Hour):
            hour = create_hour(hour)

        if self.opens <= self.closes:
            return self.opens <= hour < self.closes

        return hour >= self.opens or hour < self.closes
