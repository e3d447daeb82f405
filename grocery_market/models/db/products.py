"""
Product catalog models
"""

from typing import TYPE_CHECKING

from sqlalchemy import JSON, CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .users import User


class Product(Base, TimestampMixin):
    """Grocery products offered by a seller."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String(30), nullable=False)
    origin = Column(String(255), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)
    unit_of_measurement = Column(String(20), nullable=False)
    images = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    seller: Mapped["User"] = relationship("User", back_populates="products")

    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        Index("idx_products_seller", seller_id),
        Index("idx_products_category", category),
        Index("idx_products_created", "created_at"),
    )

    def __repr__(self):
        return f"<Product(name='{self.name}', price={self.price}, stock={self.stock_quantity})>"
