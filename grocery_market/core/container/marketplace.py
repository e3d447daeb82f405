"""
Marketplace Domain Container.

Single Responsibility: Wire marketplace repositories and use cases to a session.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.domains.marketplace.application.use_cases import (
    CreateOrderUseCase,
    CreateProductUseCase,
    CreateUserUseCase,
    GetOrderByIdUseCase,
    GetOrdersUseCase,
    GetProductByIdUseCase,
    GetProductsUseCase,
    GetSellersUseCase,
    GetUserByIdUseCase,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)
from grocery_market.domains.marketplace.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyUserRepository,
)

logger = logging.getLogger(__name__)


class MarketplaceContainer:
    """
    Marketplace domain container.

    Every factory takes the request's session; repositories and use cases
    built from the same session share its transaction.
    """

    # ==================== REPOSITORIES ====================

    def create_user_repository(self, db: AsyncSession) -> SQLAlchemyUserRepository:
        """Create User Repository."""
        return SQLAlchemyUserRepository(session=db)

    def create_product_repository(self, db: AsyncSession) -> SQLAlchemyProductRepository:
        """Create Product Repository."""
        return SQLAlchemyProductRepository(session=db)

    def create_order_repository(self, db: AsyncSession) -> SQLAlchemyOrderRepository:
        """Create Order Repository."""
        return SQLAlchemyOrderRepository(session=db)

    # ==================== USER USE CASES ====================

    def create_create_user_use_case(self, db: AsyncSession) -> CreateUserUseCase:
        """Create CreateUserUseCase with dependencies."""
        return CreateUserUseCase(session=db, user_repository=self.create_user_repository(db))

    def create_get_user_by_id_use_case(self, db: AsyncSession) -> GetUserByIdUseCase:
        """Create GetUserByIdUseCase with dependencies."""
        return GetUserByIdUseCase(user_repository=self.create_user_repository(db))

    def create_get_sellers_use_case(self, db: AsyncSession) -> GetSellersUseCase:
        """Create GetSellersUseCase with dependencies."""
        return GetSellersUseCase(user_repository=self.create_user_repository(db))

    # ==================== PRODUCT USE CASES ====================

    def create_create_product_use_case(self, db: AsyncSession) -> CreateProductUseCase:
        """Create CreateProductUseCase with dependencies."""
        return CreateProductUseCase(
            session=db,
            user_repository=self.create_user_repository(db),
            product_repository=self.create_product_repository(db),
        )

    def create_update_product_use_case(self, db: AsyncSession) -> UpdateProductUseCase:
        """Create UpdateProductUseCase with dependencies."""
        return UpdateProductUseCase(session=db, product_repository=self.create_product_repository(db))

    def create_get_product_by_id_use_case(self, db: AsyncSession) -> GetProductByIdUseCase:
        """Create GetProductByIdUseCase with dependencies."""
        return GetProductByIdUseCase(product_repository=self.create_product_repository(db))

    def create_get_products_use_case(self, db: AsyncSession) -> GetProductsUseCase:
        """Create GetProductsUseCase with dependencies."""
        return GetProductsUseCase(product_repository=self.create_product_repository(db))

    # ==================== ORDER USE CASES ====================

    def create_create_order_use_case(self, db: AsyncSession) -> CreateOrderUseCase:
        """Create CreateOrderUseCase with dependencies."""
        return CreateOrderUseCase(
            session=db,
            user_repository=self.create_user_repository(db),
            product_repository=self.create_product_repository(db),
            order_repository=self.create_order_repository(db),
        )

    def create_update_order_status_use_case(self, db: AsyncSession) -> UpdateOrderStatusUseCase:
        """Create UpdateOrderStatusUseCase with dependencies."""
        return UpdateOrderStatusUseCase(
            session=db,
            order_repository=self.create_order_repository(db),
            product_repository=self.create_product_repository(db),
        )

    def create_get_orders_use_case(self, db: AsyncSession) -> GetOrdersUseCase:
        """Create GetOrdersUseCase with dependencies."""
        return GetOrdersUseCase(order_repository=self.create_order_repository(db))

    def create_get_order_by_id_use_case(self, db: AsyncSession) -> GetOrderByIdUseCase:
        """Create GetOrderByIdUseCase with dependencies."""
        return GetOrderByIdUseCase(order_repository=self.create_order_repository(db))
