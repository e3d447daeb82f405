"""
Marketplace user models (customers and sellers)
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Column, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .products import Product


class User(Base, TimestampMixin):
    """Customers and sellers share one table, told apart by role."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    full_name = Column(String(200), nullable=False)
    phone = Column(String(20), nullable=False)
    address = Column(Text)
    role = Column(String(20), nullable=False)  # customer, seller

    products: Mapped[List["Product"]] = relationship("Product", back_populates="seller")

    __table_args__ = (Index("idx_users_role", role),)

    def __repr__(self):
        return f"<User(email='{self.email}', role='{self.role}')>"
