"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, cast

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from grocery_market.domains.marketplace.application.ports import IOrderRepository
from grocery_market.domains.marketplace.domain.entities import Order, OrderItem
from grocery_market.domains.marketplace.domain.value_objects import (
    OrderStatus,
    PaymentMethod,
    Price,
)
from grocery_market.models.db.orders import Order as OrderModel
from grocery_market.models.db.orders import OrderItem as OrderItemModel

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Handles order and order item persistence. Nothing here commits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, order: Order) -> Order:
        """Insert the order and all of its items in one flush."""
        model = self._to_model(order)
        self.session.add(model)
        await self.session.flush()
        return self._to_entity(model)

    async def get_for_seller(self, order_id: int, seller_id: int) -> Order | None:
        """
        Get an order owned by the seller and lock its row.

        Returns None both when the order does not exist and when another
        seller owns it.
        """
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id, OrderModel.seller_id == seller_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save_status(self, order: Order) -> Order:
        """Persist status and updated_at of an existing order."""
        model = None if order.is_new() else await self.session.get(OrderModel, order.id)
        if model is None:
            raise ValueError(f"Order {order.id} is not persisted")

        setattr(model, "status", order.status.value)
        setattr(model, "updated_at", order.updated_at)
        await self.session.flush()
        return order

    async def get_detail(self, order_id: int) -> Order | None:
        """Get order with items annotated with product data and party names."""
        result = await self.session.execute(
            select(OrderModel)
            .options(
                selectinload(OrderModel.items).joinedload(OrderItemModel.product),
                joinedload(OrderModel.customer),
                joinedload(OrderModel.seller),
            )
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        order = self._to_entity(model, with_product_info=True)
        order.customer_name = cast(str, model.customer.full_name)
        order.seller_name = cast(str, model.seller.full_name)
        return order

    async def search(
        self,
        customer_id: int | None = None,
        seller_id: int | None = None,
        status: OrderStatus | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Order]:
        """Filtered order listing with items, newest first."""
        conditions = self._build_conditions(customer_id, seller_id, status)
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(*conditions)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count(
        self,
        customer_id: int | None = None,
        seller_id: int | None = None,
        status: OrderStatus | None = None,
    ) -> int:
        """Count orders matching the same filters as search."""
        conditions = self._build_conditions(customer_id, seller_id, status)
        result = await self.session.execute(select(func.count()).select_from(OrderModel).where(*conditions))
        return result.scalar_one()

    # Query helpers

    def _build_conditions(
        self,
        customer_id: int | None,
        seller_id: int | None,
        status: OrderStatus | None,
    ) -> list[Any]:
        conditions: list[Any] = []
        if customer_id is not None:
            conditions.append(OrderModel.customer_id == customer_id)
        if seller_id is not None:
            conditions.append(OrderModel.seller_id == seller_id)
        if status is not None:
            conditions.append(OrderModel.status == status.value)
        return conditions

    # Mapping methods

    def _item_to_entity(self, model: OrderItemModel, with_product_info: bool = False) -> OrderItem:
        item = OrderItem(
            id=cast(int, model.id),
            order_id=cast(int, model.order_id),
            product_id=cast(int, model.product_id),
            quantity=cast(int, model.quantity),
            unit_price=Price.from_value(cast(Decimal, model.unit_price)),
            total_price=Price.from_value(cast(Decimal, model.total_price)),
            created_at=cast(datetime, model.created_at),
        )
        if with_product_info and model.product is not None:
            item.product_name = cast(str, model.product.name)
            item.product_unit = cast(str, model.product.unit_of_measurement)
        return item

    def _to_entity(self, model: OrderModel, with_product_info: bool = False) -> Order:
        """Convert model to entity."""
        return Order(
            id=cast(int, model.id),
            customer_id=cast(int, model.customer_id),
            seller_id=cast(int, model.seller_id),
            items=[self._item_to_entity(i, with_product_info) for i in model.items or []],
            total_value=Price.from_value(cast(Decimal, model.total_value)),
            status=OrderStatus(cast(str, model.status)),
            payment_method=PaymentMethod(cast(str, model.payment_method)),
            delivery_address=cast(str, model.delivery_address),
            customer_notes=cast(str | None, model.customer_notes),
            created_at=cast(datetime, model.created_at),
            updated_at=cast(datetime, model.updated_at),
        )

    def _to_model(self, order: Order) -> OrderModel:
        """Convert entity to model, items included."""
        model = OrderModel(
            customer_id=order.customer_id,
            seller_id=order.seller_id,
            total_value=order.total_value.amount,
            status=order.status.value,
            payment_method=order.payment_method.value,
            delivery_address=order.delivery_address,
            customer_notes=order.customer_notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
        model.items = [
            OrderItemModel(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price.amount,
                total_price=item.total_price.amount,
                created_at=item.created_at,
            )
            for item in order.items
        ]
        return model
