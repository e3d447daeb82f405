"""
Marketplace Domain Exceptions

Errors raised by order creation and order status updates. Each one aborts
the surrounding transaction.
"""

from decimal import Decimal

from grocery_market.core.domain import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidOperationException,
)

from .value_objects.order_status import OrderStatus


class CustomerNotFoundException(EntityNotFoundException):
    """Customer id does not resolve to a user with the customer role."""

    def __init__(self, customer_id: int):
        super().__init__(
            entity_type="Customer",
            entity_id=customer_id,
            message=f"Customer {customer_id} not found or invalid role",
            code="CUSTOMER_NOT_FOUND",
        )


class SellerNotFoundException(EntityNotFoundException):
    """Seller id does not resolve to a user with the seller role."""

    def __init__(self, seller_id: int):
        super().__init__(
            entity_type="Seller",
            entity_id=seller_id,
            message=f"Seller {seller_id} not found or invalid role",
            code="SELLER_NOT_FOUND",
        )


class ProductNotFoundForSellerException(EntityNotFoundException):
    """Product does not exist or belongs to another seller."""

    def __init__(self, product_id: int, seller_id: int):
        self.seller_id = seller_id
        super().__init__(
            entity_type="Product",
            entity_id=product_id,
            message=f"Product {product_id} not found or does not belong to seller {seller_id}",
            code="PRODUCT_NOT_FOUND_FOR_SELLER",
        )
        self.details["seller_id"] = seller_id


class PriceMismatchException(BusinessRuleViolationException):
    """Requested unit price differs from the current product price."""

    def __init__(self, product_id: int, product_name: str, current_price: Decimal, provided_price: Decimal):
        self.product_id = product_id
        self.current_price = current_price
        self.provided_price = provided_price
        super().__init__(
            rule="UNIT_PRICE_MATCHES_PRODUCT_PRICE",
            message=(
                f"Price mismatch for product {product_name}. "
                f"Current price: {current_price}, Provided: {provided_price}"
            ),
            details={
                "product_id": product_id,
                "current_price": float(current_price),
                "provided_price": float(provided_price),
            },
            code="PRICE_MISMATCH",
        )


class InvalidStatusTransitionException(InvalidOperationException):
    """Order status change not present in the transition table."""

    def __init__(self, current_status: OrderStatus, requested_status: OrderStatus):
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(
            operation=f"transition_to:{requested_status.value}",
            current_state=current_status.value,
            message=(
                f"Order is already {current_status.value} and cannot move to {requested_status.value}"
                if current_status.is_terminal()
                else f"Cannot transition from {current_status.value} to {requested_status.value}"
            ),
            code="INVALID_TRANSITION",
        )
        self.details["requested_status"] = requested_status.value
        self.details["allowed_statuses"] = [s.value for s in current_status.get_valid_transitions()]


__all__ = [
    "CustomerNotFoundException",
    "SellerNotFoundException",
    "ProductNotFoundForSellerException",
    "InsufficientStockException",
    "PriceMismatchException",
    "InvalidStatusTransitionException",
]
