"""
Product Repository Implementation

SQLAlchemy implementation of IProductRepository, including the row locks and
guarded updates used for stock bookkeeping.
"""

import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, cast

from sqlalchemy import func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.domains.marketplace.application.ports import IProductRepository
from grocery_market.domains.marketplace.domain.entities import Product
from grocery_market.domains.marketplace.domain.value_objects import (
    Price,
    ProductCategory,
    UnitOfMeasurement,
)
from grocery_market.models.db.base import utcnow
from grocery_market.models.db.products import Product as ProductModel

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "price",
        "category",
        "origin",
        "stock_quantity",
        "unit_of_measurement",
        "images",
    }
)


class SQLAlchemyProductRepository(IProductRepository):
    """
    SQLAlchemy implementation of product repository.

    Handles product persistence and the stock ledger. Nothing here commits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID."""
        result = await self.session.execute(select(ProductModel).where(ProductModel.id == product_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def lock_for_seller(self, product_ids: list[int], seller_id: int) -> dict[int, Product]:
        """
        Lock the seller's products among product_ids.

        Rows are locked FOR UPDATE in ascending ID order so that concurrent
        orders touching overlapping products always acquire locks in the same
        order. IDs that are missing or owned by another seller are simply
        absent from the result.
        """
        if not product_ids:
            return {}

        result = await self.session.execute(
            select(ProductModel)
            .where(
                ProductModel.id.in_(sorted(set(product_ids))),
                ProductModel.seller_id == seller_id,
            )
            .order_by(ProductModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return {cast(int, m.id): self._to_entity(m) for m in result.scalars().all()}

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """
        Take quantity from stock.

        Guarded by stock_quantity >= quantity; returns False when no row
        matched, leaving the stock untouched.
        """
        result = await self.session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock_quantity >= quantity)
            .values(stock_quantity=ProductModel.stock_quantity - quantity, updated_at=utcnow())
            .returning(ProductModel.id)
            .execution_options(synchronize_session="fetch")
        )
        return result.scalar_one_or_none() is not None

    async def increment_stock(self, product_id: int, quantity: int) -> None:
        """Give quantity back to stock."""
        await self.session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(stock_quantity=ProductModel.stock_quantity + quantity, updated_at=utcnow())
            .execution_options(synchronize_session="fetch")
        )

    async def search(
        self,
        category: str | None = None,
        seller_id: int | None = None,
        search: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Product]:
        """Filtered product listing, newest first."""
        conditions = self._build_conditions(category, seller_id, search, min_price, max_price)
        result = await self.session.execute(
            select(ProductModel)
            .where(*conditions)
            .order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count(
        self,
        category: str | None = None,
        seller_id: int | None = None,
        search: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> int:
        """Count products matching the same filters as search."""
        conditions = self._build_conditions(category, seller_id, search, min_price, max_price)
        result = await self.session.execute(select(func.count()).select_from(ProductModel).where(*conditions))
        return result.scalar_one()

    async def create(self, product: Product) -> Product:
        """Insert a product. The caller commits."""
        model = self._to_model(product)
        self.session.add(model)
        await self.session.flush()
        return self._to_entity(model)

    async def update(self, product_id: int, changes: dict[str, Any]) -> Product | None:
        """
        Merge changes onto the stored product.

        Only keys in UPDATABLE_FIELDS are applied; updated_at is always refreshed.
        """
        model = await self.session.get(ProductModel, product_id)
        if model is None:
            return None

        for key, value in changes.items():
            if key not in UPDATABLE_FIELDS:
                logger.warning(f"Ignoring non-updatable product field: {key}")
                continue
            setattr(model, key, self._column_value(value))

        setattr(model, "updated_at", utcnow())
        await self.session.flush()
        return self._to_entity(model)

    # Query helpers

    def _build_conditions(
        self,
        category: str | None,
        seller_id: int | None,
        search: str | None,
        min_price: Decimal | None,
        max_price: Decimal | None,
    ) -> list[Any]:
        conditions: list[Any] = []
        if category:
            conditions.append(ProductModel.category == category)
        if seller_id is not None:
            conditions.append(ProductModel.seller_id == seller_id)
        if search:
            pattern = f"%{search}%"
            conditions.append(or_(ProductModel.name.ilike(pattern), ProductModel.description.ilike(pattern)))
        if min_price is not None:
            conditions.append(ProductModel.price >= min_price)
        if max_price is not None:
            conditions.append(ProductModel.price <= max_price)
        return conditions

    @staticmethod
    def _column_value(value: Any) -> Any:
        if isinstance(value, Price):
            return value.amount
        if isinstance(value, Enum):
            return value.value
        return value

    # Mapping methods

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert model to entity."""
        return Product(
            id=cast(int, model.id),
            name=cast(str, model.name),
            description=cast(str, model.description),
            price=Price.from_value(cast(Decimal, model.price)),
            category=ProductCategory(cast(str, model.category)),
            origin=cast(str, model.origin),
            stock_quantity=cast(int, model.stock_quantity),
            unit_of_measurement=UnitOfMeasurement(cast(str, model.unit_of_measurement)),
            images=list(cast(list[str] | None, model.images) or []),
            seller_id=cast(int, model.seller_id),
            created_at=cast(datetime, model.created_at),
            updated_at=cast(datetime, model.updated_at),
        )

    def _to_model(self, product: Product) -> ProductModel:
        """Convert entity to model."""
        return ProductModel(
            name=product.name,
            description=product.description,
            price=product.price.amount,
            category=product.category.value,
            origin=product.origin,
            stock_quantity=product.stock_quantity,
            unit_of_measurement=product.unit_of_measurement.value,
            images=list(product.images),
            seller_id=product.seller_id,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
