"""
Marketplace Domain Layer

This module contains:
- Entities: User, Product, Order, OrderItem
- Value Objects: Price, OrderStatus (with its transition table), tags
- Exceptions: order creation and status transition errors
"""

from grocery_market.domains.marketplace.domain.entities import (
    PRICE_TOLERANCE,
    Order,
    OrderItem,
    Product,
    User,
)
from grocery_market.domains.marketplace.domain.exceptions import (
    CustomerNotFoundException,
    InsufficientStockException,
    InvalidStatusTransitionException,
    PriceMismatchException,
    ProductNotFoundForSellerException,
    SellerNotFoundException,
)
from grocery_market.domains.marketplace.domain.value_objects import (
    ORDER_STATUS_TRANSITIONS,
    OrderStatus,
    OrderStatusTransition,
    PaymentMethod,
    Price,
    ProductCategory,
    UnitOfMeasurement,
    UserRole,
)

__all__ = [
    # Entities
    "User",
    "Product",
    "Order",
    "OrderItem",
    "PRICE_TOLERANCE",
    # Value Objects
    "Price",
    "OrderStatus",
    "OrderStatusTransition",
    "ORDER_STATUS_TRANSITIONS",
    "PaymentMethod",
    "UserRole",
    "ProductCategory",
    "UnitOfMeasurement",
    # Exceptions
    "CustomerNotFoundException",
    "SellerNotFoundException",
    "ProductNotFoundForSellerException",
    "InsufficientStockException",
    "PriceMismatchException",
    "InvalidStatusTransitionException",
]
