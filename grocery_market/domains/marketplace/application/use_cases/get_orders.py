"""
Get Orders Use Case

Filtered, paginated order listing for customers and sellers.
"""

import logging
from dataclasses import dataclass, field

from grocery_market.core.domain import ValidationException
from grocery_market.domains.marketplace.application.ports import IOrderRepository
from grocery_market.domains.marketplace.domain.entities import Order
from grocery_market.domains.marketplace.domain.value_objects import OrderStatus

logger = logging.getLogger(__name__)

MAX_ORDERS_PAGE_SIZE = 50


@dataclass
class GetOrdersRequest:
    """Request for listing orders."""

    customer_id: int | None = None
    seller_id: int | None = None
    status: OrderStatus | None = None
    page: int = 1
    limit: int = 10


@dataclass
class GetOrdersResponse:
    """One page of orders (items included) plus the number of all matches."""

    orders: list[Order] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10


class GetOrdersUseCase:
    """Use Case: Get Orders, newest first."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, request: GetOrdersRequest) -> GetOrdersResponse:
        if request.page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if not 1 <= request.limit <= MAX_ORDERS_PAGE_SIZE:
            raise ValidationException(f"limit must be between 1 and {MAX_ORDERS_PAGE_SIZE}", field="limit")

        try:
            orders = await self.order_repository.search(
                customer_id=request.customer_id,
                seller_id=request.seller_id,
                status=request.status,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )
            total = await self.order_repository.count(
                customer_id=request.customer_id,
                seller_id=request.seller_id,
                status=request.status,
            )
        except Exception as e:
            logger.error(f"Error listing orders: {e}")
            raise

        return GetOrdersResponse(orders=orders, total=total, page=request.page, limit=request.limit)


__all__ = ["GetOrdersUseCase", "GetOrdersRequest", "GetOrdersResponse", "MAX_ORDERS_PAGE_SIZE"]
