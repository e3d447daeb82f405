"""
Marketplace API Dependencies

FastAPI dependencies for the marketplace domain. Each use case is bound to
the request's database session.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.container import MarketplaceContainer
from grocery_market.database import get_async_db
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


def get_container() -> MarketplaceContainer:
    """Get dependency container instance."""
    return MarketplaceContainer()


def get_create_user_use_case(db: AsyncSession = Depends(get_async_db)) -> CreateUserUseCase:
    """Get CreateUserUseCase instance."""
    return get_container().create_create_user_use_case(db)


def get_user_by_id_use_case(db: AsyncSession = Depends(get_async_db)) -> GetUserByIdUseCase:
    """Get GetUserByIdUseCase instance."""
    return get_container().create_get_user_by_id_use_case(db)


def get_sellers_use_case(db: AsyncSession = Depends(get_async_db)) -> GetSellersUseCase:
    """Get GetSellersUseCase instance."""
    return get_container().create_get_sellers_use_case(db)


def get_create_product_use_case(db: AsyncSession = Depends(get_async_db)) -> CreateProductUseCase:
    """Get CreateProductUseCase instance."""
    return get_container().create_create_product_use_case(db)


def get_update_product_use_case(db: AsyncSession = Depends(get_async_db)) -> UpdateProductUseCase:
    """Get UpdateProductUseCase instance."""
    return get_container().create_update_product_use_case(db)


def get_product_by_id_use_case(db: AsyncSession = Depends(get_async_db)) -> GetProductByIdUseCase:
    """Get GetProductByIdUseCase instance."""
    return get_container().create_get_product_by_id_use_case(db)


def get_products_use_case(db: AsyncSession = Depends(get_async_db)) -> GetProductsUseCase:
    """Get GetProductsUseCase instance."""
    return get_container().create_get_products_use_case(db)


def get_create_order_use_case(db: AsyncSession = Depends(get_async_db)) -> CreateOrderUseCase:
    """Get CreateOrderUseCase instance."""
    return get_container().create_create_order_use_case(db)


def get_update_order_status_use_case(db: AsyncSession = Depends(get_async_db)) -> UpdateOrderStatusUseCase:
    """Get UpdateOrderStatusUseCase instance."""
    return get_container().create_update_order_status_use_case(db)


def get_orders_use_case(db: AsyncSession = Depends(get_async_db)) -> GetOrdersUseCase:
    """Get GetOrdersUseCase instance."""
    return get_container().create_get_orders_use_case(db)


def get_order_by_id_use_case(db: AsyncSession = Depends(get_async_db)) -> GetOrderByIdUseCase:
    """Get GetOrderByIdUseCase instance."""
    return get_container().create_get_order_by_id_use_case(db)


__all__ = [
    "get_container",
    "get_create_user_use_case",
    "get_user_by_id_use_case",
    "get_sellers_use_case",
    "get_create_product_use_case",
    "get_update_product_use_case",
    "get_product_by_id_use_case",
    "get_products_use_case",
    "get_create_order_use_case",
    "get_update_order_status_use_case",
    "get_orders_use_case",
    "get_order_by_id_use_case",
]
