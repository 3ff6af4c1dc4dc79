from __future__ import annotations

import re
from dataclasses import dataclass

from restaurant_core.domain.exceptions import EmptyEmailError, InvalidEmailFormatError

# Structural check only: local@domain.tld with no whitespace and no extra '@'.
# Deliberately simple; not RFC 5322.
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True, slots=True)
class Email:
    """Domain value object for customer email addresses.

    Parse, don't validate: once an Email exists it is known to be
    well-formed, so nothing downstream re-checks it.
      - Surrounding whitespace is trimmed
      - Must be non-empty after trimming
      - Must match local@domain.tld
      - Normalized to lowercase
    """

    value: str

    def __post_init__(self) -> None:
        raw = self.value
        normalized = raw.strip()

        if not normalized:
            raise EmptyEmailError("Email cannot be empty", value=raw)

        if EMAIL_PATTERN.match(normalized) is None:
            raise InvalidEmailFormatError(f"Invalid email format: {raw!r}", value=raw)

        normalized = normalized.lower()
        if normalized != raw:
            object.__setattr__(self, "value", normalized)

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    def __str__(self) -> str:
        return self.value


def parse_email(raw: str) -> Email:
    """Parse a raw string into an Email.

    Raises:
        EmptyEmailError: If raw is empty or whitespace only.
        InvalidEmailFormatError: If raw does not look like local@domain.tld.
    """
    return Email(value=raw)
