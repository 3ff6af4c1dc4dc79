from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime

from restaurant_core.domain.exceptions import InvalidFormatError

ORDER_ID_PATTERN: re.Pattern[str] = re.compile(r"ORD-[0-9]{5,}")
SUFFIX_DIGITS = 5


@dataclass(frozen=True, slots=True)
class OrderId:
    """Value object for order identifiers.

    Format: literal ``ORD-`` followed by five or more ASCII digits, full match.
    The value object only guarantees format; uniqueness is the
    OrderRepository's job.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or ORDER_ID_PATTERN.fullmatch(self.value) is None:
            raise InvalidFormatError(
                f"OrderId must match ORD-XXXXX format. Received: {self.value!r}",
                value=self.value,
            )

    @classmethod
    def generate(cls, now: datetime | None = None) -> OrderId:
        """Generate a new OrderId from a millisecond timestamp and a random suffix.

        Args:
            now: UTC timestamp to derive the id from. Defaults to the current UTC time.

        Returns:
            An OrderId such as ``ORD-170531520000004217``.

        Raises:
            ValueError: If now is naive or not in UTC.
        """
        moment = now if now is not None else datetime.now(UTC)
        if moment.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={moment.tzinfo}")
        millis = int(moment.timestamp() * 1000)
        suffix = secrets.randbelow(10**SUFFIX_DIGITS)
        return cls(value=f"ORD-{millis}{suffix:0{SUFFIX_DIGITS}d}")

    def __str__(self) -> str:
        return self.value


def create_order_id(raw: str) -> OrderId:
    """Parse an OrderId from a raw string.

    Raises:
        InvalidFormatError: If raw is not ``ORD-`` followed by 5+ digits.
    """
    return OrderId(value=raw)


def generate_order_id(now: datetime | None = None) -> OrderId:
    """Generate a fresh, format-valid OrderId."""
    return OrderId.generate(now)
