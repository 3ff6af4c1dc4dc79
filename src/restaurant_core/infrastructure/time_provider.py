from dataclasses import dataclass
from datetime import UTC, datetime

from restaurant_core.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Wall clock for order-id generation."""

    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class FixedTimeProvider(TimeProvider):
    """Clock pinned to one UTC instant, so generated order IDs share a known prefix.

    To generate from a later instant, build another provider.
    """

    fixed_time: datetime

    def __post_init__(self) -> None:
        if self.fixed_time.tzinfo is not UTC:
            raise ValueError(
                f"datetime must have tzinfo=UTC, got tzinfo={self.fixed_time.tzinfo}"
            )

    def now(self) -> datetime:
        return self.fixed_time
