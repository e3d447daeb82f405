"""
Order Entity for the Marketplace Domain

Represents a customer order placed with a single seller. Items and total are
fixed at creation; afterwards the order only moves through status transitions.
"""

from dataclasses import dataclass, field
from typing import Any

from grocery_market.core.domain import Entity

from ..exceptions import InvalidStatusTransitionException
from ..value_objects.order_status import OrderStatus, OrderStatusTransition, PaymentMethod
from ..value_objects.price import Price


@dataclass
class OrderItem(Entity[int]):
    """
    Individual line of an order.

    total_price is quantity * unit_price, computed once when the line is created.
    """

    order_id: int | None = None
    product_id: int = 0
    quantity: int = 0
    unit_price: Price = field(default_factory=Price.zero)
    total_price: Price = field(default_factory=Price.zero)

    # Read-side annotations, filled by detail queries
    product_name: str | None = None
    product_unit: str | None = None

    @classmethod
    def create(cls, product_id: int, quantity: int, unit_price: Price) -> "OrderItem":
        """Build a new line with its total computed."""
        return cls(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            total_price=unit_price.multiply(quantity),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "order_id": self.order_id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "unit_price": self.unit_price.to_float(),
            "total_price": self.total_price.to_float(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if self.product_name is not None:
            data["product_name"] = self.product_name
            data["product_unit"] = self.product_unit
        return data


@dataclass
class Order(Entity[int]):
    """
    Order aggregate for the marketplace.

    Example:
        ```python
        order = Order.place(
            customer_id=1,
            seller_id=2,
            payment_method=PaymentMethod.COD,
            delivery_address="12 Lê Lợi, Quận 1",
            items=[OrderItem.create(product_id=7, quantity=5, unit_price=Price.from_value(25.50))],
        )
        order.transition_to(OrderStatus.CONFIRMED)
        ```
    """

    customer_id: int = 0
    seller_id: int = 0
    items: list[OrderItem] = field(default_factory=list)
    total_value: Price = field(default_factory=Price.zero)
    status: OrderStatus = OrderStatus.PENDING_CONFIRMATION
    payment_method: PaymentMethod = PaymentMethod.COD
    delivery_address: str = ""
    customer_notes: str | None = None

    # Read-side annotations, filled by detail queries
    customer_name: str | None = None
    seller_name: str | None = None

    @classmethod
    def place(
        cls,
        customer_id: int,
        seller_id: int,
        payment_method: PaymentMethod,
        delivery_address: str,
        items: list[OrderItem],
        customer_notes: str | None = None,
    ) -> "Order":
        """
        Create a new order awaiting confirmation.

        The total is the sum of the line totals and is never recomputed later.
        """
        total = Price.zero()
        for item in items:
            total = total.add(item.total_price)

        return cls(
            customer_id=customer_id,
            seller_id=seller_id,
            items=list(items),
            total_value=total,
            status=OrderStatus.PENDING_CONFIRMATION,
            payment_method=payment_method,
            delivery_address=delivery_address,
            customer_notes=customer_notes,
        )

    def transition_to(self, new_status: OrderStatus, performed_by: int | None = None) -> OrderStatusTransition:
        """
        Move the order to a new status.

        Raises:
            InvalidStatusTransitionException: If the transition table forbids it
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionException(self.status, new_status)

        transition = OrderStatusTransition(
            from_status=self.status,
            to_status=new_status,
            performed_by=performed_by,
        )
        self.status = new_status
        self.touch()
        return transition

    def is_visible_to(self, user_id: int, role: str) -> bool:
        """Customers see their own orders, sellers the orders placed with them."""
        if role == "customer":
            return self.customer_id == user_id
        if role == "seller":
            return self.seller_id == user_id
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customer_id": self.customer_id,
            "seller_id": self.seller_id,
            "total_value": self.total_value.to_float(),
            "status": self.status.value,
            "payment_method": self.payment_method.value,
            "delivery_address": self.delivery_address,
            "customer_notes": self.customer_notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def to_detail_dict(self) -> dict[str, Any]:
        return {
            **self.to_dict(),
            "items": [item.to_dict() for item in self.items],
            "customer_name": self.customer_name,
            "seller_name": self.seller_name,
        }
