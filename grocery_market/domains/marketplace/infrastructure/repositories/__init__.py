"""
Marketplace Repositories

SQLAlchemy implementations of the marketplace ports.
"""

from .order_repository import SQLAlchemyOrderRepository
from .product_repository import SQLAlchemyProductRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyOrderRepository",
]
