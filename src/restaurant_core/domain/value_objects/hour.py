from __future__ import annotations

from dataclasses import dataclass

from restaurant_core.domain.exceptions import InvalidHourError

MIN_HOUR = 0
MAX_HOUR = 23


@dataclass(frozen=True, slots=True, order=True)
class Hour:
    """Value object for an hour of the day on a 24-hour clock (0-23)."""

    value: int

    def __post_init__(self) -> None:
        h = self.value
        if isinstance(h, bool) or not isinstance(h, int) or not MIN_HOUR <= h <= MAX_HOUR:
            raise InvalidHourError(f"Hour must be 0-23. Received: {h!r}", value=h)

    def __int__(self) -> int:
        return self.value


def create_hour(h: int) -> Hour:
    """Smart constructor for Hour.

    Raises:
        InvalidHourError: If h is not an integer in [0, 23].
    """
    return Hour(value=h)
