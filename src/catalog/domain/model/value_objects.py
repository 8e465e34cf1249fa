"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import (
    DateOutOfRangeError,
    InvalidDateFormatError,
    ValidationError,
)

EXPIRATION_FORMAT = "%d/%m/%Y"
MINIMUM_EXPIRATION = date(2023, 1, 1)

_EXPIRATION_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that summing many float prices and applying a
    surcharge rate does not drift before the final rounding.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor)

    def rounded(self, places: int = 2) -> Money:
        """Round half away from zero to ``places`` decimals."""
        exponent = Decimal(1).scaleb(-places)
        return Money(self.amount.quantize(exponent, rounding=ROUND_HALF_UP))

    def __float__(self) -> float:
        return float(self.amount)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely.

        Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather
        than its binary expansion.
        """
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Expiration:
    """A product expiration date in its DD/MM/YYYY textual form."""

    text: str
    value: date

    @classmethod
    def parse(cls, text: str) -> Expiration:
        """Parse ``text`` strictly: two-digit day and month, four-digit year."""
        if not _EXPIRATION_PATTERN.match(text or ""):
            raise InvalidDateFormatError(
                f"expiration {text!r} must have the format DD/MM/YYYY"
            )
        try:
            parsed = datetime.strptime(text, EXPIRATION_FORMAT).date()
        except ValueError as exc:
            raise InvalidDateFormatError(
                f"expiration {text!r} is not a valid date"
            ) from exc
        return cls(text=text, value=parsed)

    @classmethod
    def parse_valid(cls, text: str) -> Expiration:
        """Parse ``text`` and enforce the minimum expiration date."""
        expiration = cls.parse(text)
        expiration.ensure_not_before(MINIMUM_EXPIRATION)
        return expiration

    def ensure_not_before(self, minimum: date) -> None:
        if self.value < minimum:
            raise DateOutOfRangeError(
                f"expiration must be after {minimum.strftime(EXPIRATION_FORMAT)}"
            )

    def __str__(self) -> str:
        return self.text
