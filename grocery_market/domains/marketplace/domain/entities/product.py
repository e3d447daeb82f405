"""
Product Entity for the Marketplace Domain

A grocery product owned by one seller, carrying its own stock ledger.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from grocery_market.core.domain import Entity, Quantity

from ..value_objects.catalog import ProductCategory, UnitOfMeasurement
from ..value_objects.price import Price

# Absolute tolerance between a requested unit price and the catalog price
PRICE_TOLERANCE = Decimal("0.01")


@dataclass
class Product(Entity[int]):
    """
    Product offered by a seller.

    Example:
        ```python
        product = Product(name="Cá basa", price=Price.from_value(25.50), stock_quantity=100, seller_id=2)
        product.has_stock(5)  # True
        product.price_matches(Decimal("25.50"))  # True
        ```
    """

    name: str = ""
    description: str = ""
    price: Price = field(default_factory=Price.zero)
    category: ProductCategory = ProductCategory.OTHERS
    origin: str = ""
    stock_quantity: int = 0
    unit_of_measurement: UnitOfMeasurement = UnitOfMeasurement.PIECE
    images: list[str] = field(default_factory=list)
    seller_id: int = 0

    def has_stock(self, required: int, reserved: int = 0) -> bool:
        """Check if the requested quantity can be taken from stock not yet reserved."""
        return Quantity(self.stock_quantity - reserved).is_available(required)

    def price_matches(self, amount: Decimal) -> bool:
        """Check a requested unit price against the current price, within PRICE_TOLERANCE."""
        return abs(amount - self.price.amount) <= PRICE_TOLERANCE

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price.to_float(),
            "category": self.category.value,
            "origin": self.origin,
            "stock_quantity": self.stock_quantity,
            "unit_of_measurement": self.unit_of_measurement.value,
            "images": list(self.images),
            "seller_id": self.seller_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
