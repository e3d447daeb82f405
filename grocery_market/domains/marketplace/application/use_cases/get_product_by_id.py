"""
Get Product By ID Use Case
"""

import logging

from grocery_market.domains.marketplace.application.ports import IProductRepository
from grocery_market.domains.marketplace.domain.entities import Product

logger = logging.getLogger(__name__)


class GetProductByIdUseCase:
    """Use case for retrieving a single product by its ID."""

    def __init__(self, product_repository: IProductRepository):
        """
        Initialize use case with dependencies.

        Args:
            product_repository: Repository for product data access
        """
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product | None:
        try:
            return await self.product_repository.get_by_id(product_id)
        except Exception as e:
            logger.error(f"Error getting product by ID {product_id}: {e}", exc_info=True)
            raise


__all__ = ["GetProductByIdUseCase"]
