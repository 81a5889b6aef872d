"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
Prices and totals travel as decimal text; Money is what we turn them into
whenever arithmetic is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from storefront.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")

# Parsed amounts must stay below 10**MAX_INTEGER_DIGITS
MAX_INTEGER_DIGITS = 18


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount in the store's base currency unit."""

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

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    def difference(self, other: Money) -> Decimal:
        """Absolute distance between two amounts."""
        return abs(self.amount - other.amount)

    # --- Display --------------------------------------------------------------

    def to_text(self) -> str:
        """Render with two decimals, e.g. ``"25.50"``."""
        with localcontext() as ctx:
            # sums may carry more digits than the default context holds
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 3)
            return str(self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"${self.to_text()}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Coerce decimal text (or an int/Decimal) to Money."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if value.is_finite() and value and value.adjusted() >= MAX_INTEGER_DIGITS:
            raise ValidationError(f"Money amount is too large: {amount!r}")
        return Money(value)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
