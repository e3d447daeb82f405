"""
SQLAlchemy models for the marketplace tables.
"""

from .base import Base, TimestampMixin
from .orders import Order, OrderItem
from .products import Product
from .users import User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Product",
    "Order",
    "OrderItem",
]
