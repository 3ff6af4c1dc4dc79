"""Domain exceptions for restaurant-core.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors (ValidationError)
    │   ├── NotIntegerError, NonPositiveError, ExceedsMaximumError   (Quantity)
    │   ├── InvalidFormatError                                       (OrderId)
    │   ├── InvalidHourError                                         (Hour)
    │   ├── InvalidCentsError, UnsupportedCurrencyError              (Money)
    │   └── EmptyEmailError, InvalidEmailFormatError                 (Email)
    ├── Invariant Errors (InvariantViolationError)
    │   ├── NonPositiveCapacityError
    │   ├── NonPositiveGuestCountError
    │   └── CapacityExceededError
    ├── DuplicateIdError
    └── CurrencyMismatchError

Every exception carries a message, the offending raw value and a textual
``kind``. There are no numeric error codes.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from programming errors.
    """

    kind: str = "domain_error"

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def details(self) -> dict[str, Any]:
        """Structured payload for the error logging sink."""
        return {"kind": self.kind, "raw": self.value, "issue": self.message}


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(DomainException):
    """Raised when a raw primitive is rejected by a smart constructor."""

    kind = "validation_error"


class NotIntegerError(ValidationError):
    """Raised when a quantity is not a whole number (2.5 pizzas)."""

    kind = "not_integer"


class NonPositiveError(ValidationError):
    """Raised when a quantity is zero or negative."""

    kind = "non_positive"


class ExceedsMaximumError(ValidationError):
    """Raised when a quantity is above the per-order maximum."""

    kind = "exceeds_maximum"


class InvalidFormatError(ValidationError):
    """Raised when an order ID does not match ``ORD-`` followed by 5+ digits."""

    kind = "invalid_format"


class InvalidHourError(ValidationError):
    """Raised when an hour is not an integer in [0, 23]."""

    kind = "invalid_hour"


class InvalidCentsError(ValidationError):
    """Raised when a cents amount is not an integer."""

    kind = "invalid_cents"


class UnsupportedCurrencyError(ValidationError):
    """Raised when a currency code is not one of USD, EUR, GBP."""

    kind = "unsupported_currency"


class EmptyEmailError(ValidationError):
    """Raised when an email is empty after trimming whitespace."""

    kind = "empty_email"


class InvalidEmailFormatError(ValidationError):
    """Raised when an email does not have the ``local@domain.tld`` shape."""

    kind = "invalid_email_format"


# =============================================================================
# Invariant Errors
# =============================================================================


class InvariantViolationError(DomainException):
    """Raised when an entity operation would break one of its invariants.

    The entity is left unchanged when this is raised.
    """

    kind = "invariant_violation"


class NonPositiveCapacityError(InvariantViolationError):
    """Raised when a table is created with capacity <= 0."""

    kind = "non_positive_capacity"


class NonPositiveGuestCountError(InvariantViolationError):
    """Raised when seating zero or a negative number of guests."""

    kind = "non_positive_guest_count"


class CapacityExceededError(InvariantViolationError):
    """Raised when seating guests would push a table over its capacity."""

    kind = "capacity_exceeded"


# =============================================================================
# Uniqueness & Operation Errors
# =============================================================================


class DuplicateIdError(DomainException):
    """Raised when an order ID is registered twice in the same repository.

    The OrderId value object only checks format. Uniqueness is a
    cross-instance rule owned by the OrderRepository.
    """

    kind = "duplicate_id"


class CurrencyMismatchError(DomainException):
    """Raised when combining Money amounts of different currencies.

    Money never converts between currencies; 10 USD + 10 EUR has no answer.
    """

    kind = "currency_mismatch"
