"""
Marketplace Entities
"""

from .order import Order, OrderItem
from .product import PRICE_TOLERANCE, Product
from .user import User

__all__ = [
    "User",
    "Product",
    "PRICE_TOLERANCE",
    "Order",
    "OrderItem",
]
