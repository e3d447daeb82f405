"""
Update Product Use Case

Partial update of a catalog entry: only the attributes that were provided are
merged onto the stored product.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.domain import DomainException, Quantity, ValidationException
from grocery_market.domains.marketplace.application.ports import IProductRepository
from grocery_market.domains.marketplace.domain.entities import Product
from grocery_market.domains.marketplace.domain.value_objects import Price

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Use Case: Update Product"""

    def __init__(self, session: AsyncSession, product_repository: IProductRepository):
        self.session = session
        self.product_repository = product_repository

    async def execute(self, product_id: int, changes: dict[str, Any]) -> Product | None:
        """
        Merge changes onto a product.

        Args:
            product_id: Product to update
            changes: Attribute name to new value, only for provided attributes

        Returns:
            The updated product, or None if it does not exist
        """
        try:
            changes = self._validate_changes(changes)

            product = await self.product_repository.update(product_id, changes)
            if product is None:
                await self.session.rollback()
                return None

            await self.session.commit()
            logger.info(f"Product {product_id} updated: {sorted(changes)}")
            return product

        except DomainException:
            await self.session.rollback()
            raise
        except Exception as e:
            logger.error(f"Error updating product {product_id}: {e}")
            await self.session.rollback()
            raise

    def _validate_changes(self, changes: dict[str, Any]) -> dict[str, Any]:
        changes = dict(changes)
        if "price" in changes:
            try:
                price = Price.from_value(changes["price"])
            except ValueError as e:
                raise ValidationException(str(e), field="price") from e
            if not price.is_positive():
                raise ValidationException("Price must be positive", field="price")
            changes["price"] = price
        if "stock_quantity" in changes:
            try:
                Quantity(changes["stock_quantity"])
            except ValueError as e:
                raise ValidationException(str(e), field="stock_quantity") from e
        return changes


__all__ = ["UpdateProductUseCase"]
