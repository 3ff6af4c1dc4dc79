"""Money value object.

Amounts are held as an integer count of minor units (cents) paired with a
currency, which removes both floating-point drift and the "is 1850 dollars
or cents?" ambiguity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum

from restaurant_core.domain.exceptions import (
    CurrencyMismatchError,
    InvalidCentsError,
    UnsupportedCurrencyError,
)
from restaurant_core.domain.value_objects.quantity import Quantity

CENTS_PER_UNIT = 100


class Currency(Enum):
    """Supported currencies."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, code: Currency | str) -> Currency:
        """Coerce a currency code into a Currency.

        Raises:
            UnsupportedCurrencyError: If code is not USD, EUR or GBP.
        """
        if isinstance(code, cls):
            return code
        try:
            return cls(code)
        except ValueError as e:
            raise UnsupportedCurrencyError(
                f"Unsupported currency: {code!r}; allowed: USD, EUR, GBP", value=code
            ) from e


_SYMBOLS = {Currency.USD: "$", Currency.EUR: "€", Currency.GBP: "£"}


@dataclass(frozen=True, slots=True)
class Money:
    """Immutable amount of money in a single currency.

    Use from_dollars() or from_cents() to construct. Arithmetic returns a
    new Money and never mixes currencies.
    """

    cents: int
    currency: Currency

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise InvalidCentsError(
                f"Cents must be integer. Received: {self.cents!r}", value=self.cents
            )

        currency = Currency.parse(self.currency)
        if currency is not self.currency:
            object.__setattr__(self, "currency", currency)

    @classmethod
    def from_dollars(cls, amount: int | float | Decimal, currency: Currency | str) -> Money:
        """Build Money from a major-unit amount, rounded to the nearest cent.

        Halves round away from zero (12.345 -> 1235 cents). The amount goes
        through str() first so binary float noise does not affect rounding.

        Raises:
            InvalidCentsError: If amount is NaN or infinite.
            UnsupportedCurrencyError: If currency is not supported.
        """
        dollars = Decimal(str(amount))
        if not dollars.is_finite():
            raise InvalidCentsError(
                f"Amount must be a finite number. Received: {amount!r}", value=amount
            )

        # Default precision (28 digits) cannot hold very large amounts in cents.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, dollars.adjusted() + 4)
            cents = dollars.scaleb(2).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(cents=int(cents), currency=Currency.parse(currency))

    @classmethod
    def from_cents(cls, cents: int, currency: Currency | str) -> Money:
        """Build Money from an integer number of minor units.

        Raises:
            InvalidCentsError: If cents is not an integer.
            UnsupportedCurrencyError: If currency is not supported.
        """
        return cls(cents=cents, currency=currency)  # type: ignore[arg-type]

    @property
    def amount(self) -> Decimal:
        """Major-unit amount, e.g. Decimal('31.00')."""
        return Decimal(self.cents).scaleb(-2)

    def add(self, other: Money) -> Money:
        """Return the sum of two amounts in the same currency.

        Raises:
            CurrencyMismatchError: If the currencies differ.
        """
        if self.currency is not other.currency:
            raise CurrencyMismatchError(
                f"Cannot add different currencies: {self.currency.value} "
                f"and {other.currency.value}",
                value=other.currency.value,
            )
        return Money(cents=self.cents + other.cents, currency=self.currency)

    def multiply(self, factor: int | Quantity) -> Money:
        """Return this amount multiplied by a whole number (e.g. a Quantity)."""
        n = factor.value if isinstance(factor, Quantity) else factor
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Money can only be multiplied by an integer, got {n!r}")
        return Money(cents=self.cents * n, currency=self.currency)

    def format(self) -> str:
        """Render as symbol, two decimals and code, e.g. ``$31.00 USD``."""
        sign = "-" if self.cents < 0 else ""
        units, cents = divmod(abs(self.cents), CENTS_PER_UNIT)
        return f"{sign}{self.currency.symbol}{units}.{cents:02d} {self.currency.value}"

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __str__(self) -> str:
        return self.format()
