"""
Marketplace Use Cases

Business use cases for the marketplace domain.
Each use case represents a single business operation.
"""

from .create_order import CreateOrderRequest, CreateOrderUseCase, OrderItemInput
from .create_product import CreateProductRequest, CreateProductUseCase
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_order_by_id import GetOrderByIdUseCase
from .get_orders import GetOrdersRequest, GetOrdersResponse, GetOrdersUseCase
from .get_product_by_id import GetProductByIdUseCase
from .get_products import GetProductsRequest, GetProductsResponse, GetProductsUseCase
from .get_sellers import GetSellersUseCase
from .get_user_by_id import GetUserByIdUseCase
from .update_order_status import UpdateOrderStatusUseCase
from .update_product import UpdateProductUseCase

__all__ = [
    # Orders
    "CreateOrderUseCase",
    "CreateOrderRequest",
    "OrderItemInput",
    "UpdateOrderStatusUseCase",
    "GetOrdersUseCase",
    "GetOrdersRequest",
    "GetOrdersResponse",
    "GetOrderByIdUseCase",
    # Products
    "CreateProductUseCase",
    "CreateProductRequest",
    "UpdateProductUseCase",
    "GetProductByIdUseCase",
    "GetProductsUseCase",
    "GetProductsRequest",
    "GetProductsResponse",
    # Users
    "CreateUserUseCase",
    "CreateUserRequest",
    "GetUserByIdUseCase",
    "GetSellersUseCase",
]
