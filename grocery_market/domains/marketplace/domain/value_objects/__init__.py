"""
Marketplace Value Objects
"""

from .catalog import ProductCategory, UnitOfMeasurement, UserRole
from .order_status import ORDER_STATUS_TRANSITIONS, OrderStatus, OrderStatusTransition, PaymentMethod
from .price import CENTS, Price

__all__ = [
    "CENTS",
    "Price",
    "OrderStatus",
    "OrderStatusTransition",
    "ORDER_STATUS_TRANSITIONS",
    "PaymentMethod",
    "UserRole",
    "ProductCategory",
    "UnitOfMeasurement",
]
