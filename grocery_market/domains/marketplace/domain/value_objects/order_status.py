"""
Order Status Value Object for the Marketplace Domain

Represents the lifecycle states of an order with transition rules.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from grocery_market.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING_CONFIRMATION -> CONFIRMED, CANCELLED
    - CONFIRMED -> DELIVERING, CANCELLED
    - DELIVERING -> DELIVERED, CANCELLED
    - DELIVERED, CANCELLED -> (terminal states)
    """

    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"
    DELIVERING = "delivering"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """
        Check if transition to new status is valid.

        Args:
            new_status: Target status

        Returns:
            True if transition is allowed
        """
        return new_status in ORDER_STATUS_TRANSITIONS[self]

    def get_valid_transitions(self) -> list["OrderStatus"]:
        """Get the statuses reachable from this one, in declaration order."""
        allowed = ORDER_STATUS_TRANSITIONS[self]
        return [status for status in OrderStatus if status in allowed]

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) state."""
        return not ORDER_STATUS_TRANSITIONS[self]


# Read-only transition table: status -> statuses it may move to
ORDER_STATUS_TRANSITIONS: Mapping[OrderStatus, frozenset[OrderStatus]] = MappingProxyType(
    {
        OrderStatus.PENDING_CONFIRMATION: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
        OrderStatus.CONFIRMED: frozenset({OrderStatus.DELIVERING, OrderStatus.CANCELLED}),
        OrderStatus.DELIVERING: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
        OrderStatus.DELIVERED: frozenset(),
        OrderStatus.CANCELLED: frozenset(),
    }
)


class PaymentMethod(StatusEnum):
    """Payment method tag stored with the order. No payment is processed."""

    COD = "cod"
    BANK_TRANSFER = "bank_transfer"
    MOMO = "momo"
    ZALOPAY = "zalopay"


@dataclass(frozen=True)
class OrderStatusTransition:
    """
    Represents a status transition with metadata.

    Returned by Order.transition_to so callers can apply side effects.
    """

    from_status: OrderStatus
    to_status: OrderStatus
    performed_by: int | None = None

    @property
    def restores_stock(self) -> bool:
        """Entering CANCELLED gives the reserved stock back."""
        return self.to_status is OrderStatus.CANCELLED and self.from_status is not OrderStatus.CANCELLED

    def __str__(self) -> str:
        return f"{self.from_status.value} -> {self.to_status.value}"
