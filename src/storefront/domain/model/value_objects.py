"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from storefront.domain.exceptions import ValidationError

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Pricing helpers ------------------------------------------------------

    def percent(self, rate: Decimal) -> Money:
        """Return ``rate`` percent of this amount (unrounded)."""
        return Money(self.amount * rate / Decimal("100"), self.currency)

    @property
    def is_whole_cents(self) -> bool:
        return self.amount == self.amount.quantize(CENTS)

    def round2(self) -> Money:
        """Quantize to cents using half-up rounding."""
        return Money(self.amount.quantize(CENTS, rounding=ROUND_HALF_UP), self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)


class PurchaseOption(Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    PREMIUM = "premium"
    BUNDLE = "bundle"
    WARRANTY = "warranty"
    BULK = "bulk"
    SUBSCRIPTION = "subscription"

    @staticmethod
    def parse(raw: str | PurchaseOption | None) -> PurchaseOption:
        """Coerce user input, defaulting to STANDARD when omitted."""
        if raw is None or raw == "":
            return PurchaseOption.STANDARD
        if isinstance(raw, PurchaseOption):
            return raw
        try:
            return PurchaseOption(raw.strip().lower())
        except ValueError as exc:
            raise ValidationError(f"Unknown purchase option: {raw!r}") from exc


@dataclass(frozen=True)
class ShippingAddress:
    """Where an order ships to.  Every field is optional free text."""

    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "street": self.street,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "country": self.country,
        }

    @staticmethod
    def from_dict(raw: dict | None) -> ShippingAddress:
        raw = raw or {}
        return ShippingAddress(
            street=raw.get("street") or "",
            city=raw.get("city") or "",
            state=raw.get("state") or "",
            zip=raw.get("zip") or "",
            country=raw.get("country") or "",
        )
