"""
Update Order Status Use Case

Moves an order through the status state machine on behalf of its seller,
restoring stock when the order is cancelled.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.domain import DomainException
from grocery_market.domains.marketplace.application.ports import IOrderRepository, IProductRepository
from grocery_market.domains.marketplace.domain.entities import Order
from grocery_market.domains.marketplace.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    Responsibilities:
    - Load and lock the order, scoped to the acting seller
    - Enforce the transition table
    - Give item quantities back to stock on cancellation
    - Persist the new status and commit
    """

    def __init__(
        self,
        session: AsyncSession,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
    ):
        self.session = session
        self.order_repository = order_repository
        self.product_repository = product_repository

    async def execute(self, order_id: int, status: OrderStatus, seller_id: int) -> Order | None:
        """
        Change the status of an order.

        Returns:
            The updated order, or None if no order with that id belongs to the seller

        Raises:
            InvalidStatusTransitionException: Transition not allowed from the current status
        """
        try:
            order = await self.order_repository.get_for_seller(order_id, seller_id)
            if order is None:
                logger.info(f"Order {order_id} not found for seller {seller_id}")
                await self.session.rollback()
                return None

            transition = order.transition_to(status, performed_by=seller_id)

            if transition.restores_stock:
                await self._restore_stock(order)

            updated = await self.order_repository.save_status(order)
            await self.session.commit()

            logger.info(f"Order {order.id} status changed: {transition}")
            return updated

        except DomainException as e:
            logger.info(f"Status change rejected for order {order_id}: {e.message}")
            await self.session.rollback()
            raise
        except Exception as e:
            logger.error(f"Error updating status for order {order_id}: {e}")
            await self.session.rollback()
            raise

    async def _restore_stock(self, order: Order) -> None:
        """Give item quantities back, one update per product in ascending id order."""
        quantities: dict[int, int] = {}
        for item in order.items:
            quantities[item.product_id] = quantities.get(item.product_id, 0) + item.quantity

        for product_id in sorted(quantities):
            await self.product_repository.increment_stock(product_id, quantities[product_id])


__all__ = ["UpdateOrderStatusUseCase"]
