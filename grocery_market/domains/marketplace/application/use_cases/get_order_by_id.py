"""
Get Order By ID Use Case

Single order with its items, product names and party names, subject to an
optional viewer ownership check.
"""

import logging

from grocery_market.domains.marketplace.application.ports import IOrderRepository
from grocery_market.domains.marketplace.domain.entities import Order
from grocery_market.domains.marketplace.domain.value_objects import UserRole

logger = logging.getLogger(__name__)


class GetOrderByIdUseCase:
    """
    Use Case: Get Order By ID

    When a viewer is given, customers only see their own orders and sellers
    only orders placed with them. Anything else looks like a missing order.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(
        self,
        order_id: int,
        user_id: int | None = None,
        user_role: UserRole | None = None,
    ) -> Order | None:
        try:
            order = await self.order_repository.get_detail(order_id)
        except Exception as e:
            logger.error(f"Error getting order {order_id}: {e}", exc_info=True)
            raise

        if order is None:
            return None

        if user_id is not None and user_role is not None and not order.is_visible_to(user_id, user_role.value):
            logger.info(f"Order {order_id} hidden from {user_role.value} {user_id}")
            return None

        return order


__all__ = ["GetOrderByIdUseCase"]
