"""
Price Value Object for the Marketplace Domain

Fixed-point money amount with two fractional digits.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from grocery_market.core.domain import ValueObject

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Price(ValueObject):
    """
    Price value object for products and order lines.

    Amounts are kept as Decimal quantized to two places, which is also how
    they are stored (NUMERIC(10, 2)).

    Example:
        ```python
        unit = Price.from_value(25.50)
        line_total = unit.multiply(5)  # Price(amount=127.50)
        ```
    """

    amount: Decimal
    currency: str = "VND"

    def _validate(self) -> None:
        """Validate price constraints."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Price cannot be negative")
        object.__setattr__(self, "amount", self.amount.quantize(CENTS, ROUND_HALF_UP))

    def multiply(self, quantity: int) -> "Price":
        """Multiply price by quantity."""
        return Price(amount=self.amount * quantity, currency=self.currency)

    def add(self, other: "Price") -> "Price":
        """Add two prices of the same currency."""
        if self.currency != other.currency:
            raise ValueError(f"Cannot add {self.currency} to {other.currency}")
        return Price(amount=self.amount + other.amount, currency=self.currency)

    def is_positive(self) -> bool:
        """Check if price is strictly greater than zero."""
        return self.amount > 0

    def to_float(self) -> float:
        """Numeric value for serialization."""
        return float(self.amount)

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self) -> str:
        return f"Price(amount={self.amount}, currency='{self.currency}')"

    @classmethod
    def zero(cls, currency: str = "VND") -> "Price":
        """Create a zero price."""
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def from_value(cls, amount: Decimal | float | int | str, currency: str = "VND") -> "Price":
        """Create Price from any numeric representation with proper rounding."""
        if isinstance(amount, float):
            amount = str(amount)
        return cls(amount=Decimal(amount), currency=currency)
