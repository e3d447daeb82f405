"""
Get Products Use Case

Filtered, paginated product listing.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from grocery_market.core.domain import ValidationException
from grocery_market.domains.marketplace.application.ports import IProductRepository
from grocery_market.domains.marketplace.domain.entities import Product
from grocery_market.domains.marketplace.domain.value_objects import ProductCategory

logger = logging.getLogger(__name__)

MAX_PRODUCTS_PAGE_SIZE = 100


@dataclass
class GetProductsRequest:
    """Request for listing products."""

    category: ProductCategory | None = None
    seller_id: int | None = None
    search: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    page: int = 1
    limit: int = 20


@dataclass
class GetProductsResponse:
    """One page of products plus the number of all matches."""

    products: list[Product] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20


class GetProductsUseCase:
    """
    Use Case: Get Products

    Filters by category, seller, case-insensitive text in name or description,
    and price range. Results are newest first.
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, request: GetProductsRequest) -> GetProductsResponse:
        if request.page < 1:
            raise ValidationException("page must be at least 1", field="page")
        if not 1 <= request.limit <= MAX_PRODUCTS_PAGE_SIZE:
            raise ValidationException(f"limit must be between 1 and {MAX_PRODUCTS_PAGE_SIZE}", field="limit")

        filters = {
            "category": request.category.value if request.category else None,
            "seller_id": request.seller_id,
            "search": request.search,
            "min_price": request.min_price,
            "max_price": request.max_price,
        }

        try:
            products = await self.product_repository.search(
                **filters,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )
            total = await self.product_repository.count(**filters)
        except Exception as e:
            logger.error(f"Error listing products: {e}")
            raise

        return GetProductsResponse(products=products, total=total, page=request.page, limit=request.limit)


__all__ = ["GetProductsUseCase", "GetProductsRequest", "GetProductsResponse", "MAX_PRODUCTS_PAGE_SIZE"]
