"""
Marketplace Application Ports

Interface definitions (ports) for the Marketplace domain.
Uses Protocol for structural typing.

Repositories never commit; the calling use case owns the transaction.
"""

from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from grocery_market.domains.marketplace.domain.entities import Order, Product, User
from grocery_market.domains.marketplace.domain.value_objects import OrderStatus, UserRole


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for user repository.

    Defines the contract for customer and seller data access.
    """

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID"""
        ...

    async def get_by_id_and_role(self, user_id: int, role: UserRole) -> User | None:
        """Get user by ID, only if it has the given role"""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get user by (lower-cased) email"""
        ...

    async def get_sellers(self) -> list[User]:
        """Get all sellers ordered by ID"""
        ...

    async def create(self, user: User) -> User:
        """Insert a user and return it with its ID"""
        ...


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interface for product repository.

    Defines the contract for product data access and stock bookkeeping.
    """

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID"""
        ...

    async def lock_for_seller(self, product_ids: list[int], seller_id: int) -> dict[int, Product]:
        """Lock the seller's products among product_ids, in ascending ID order"""
        ...

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Take quantity from stock; False if stock would go negative"""
        ...

    async def increment_stock(self, product_id: int, quantity: int) -> None:
        """Give quantity back to stock"""
        ...

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
        """Filtered product listing, newest first"""
        ...

    async def count(
        self,
        category: str | None = None,
        seller_id: int | None = None,
        search: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
    ) -> int:
        """Count products matching the same filters as search"""
        ...

    async def create(self, product: Product) -> Product:
        """Insert a product and return it with its ID"""
        ...

    async def update(self, product_id: int, changes: dict[str, Any]) -> Product | None:
        """Merge changes onto the stored product"""
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def create(self, order: Order) -> Order:
        """Insert an order together with its items"""
        ...

    async def get_for_seller(self, order_id: int, seller_id: int) -> Order | None:
        """Get and lock an order owned by the seller"""
        ...

    async def save_status(self, order: Order) -> Order:
        """Persist status and updated_at of an existing order"""
        ...

    async def get_detail(self, order_id: int) -> Order | None:
        """Get order with items, product names and party names"""
        ...

    async def search(
        self,
        customer_id: int | None = None,
        seller_id: int | None = None,
        status: OrderStatus | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Order]:
        """Filtered order listing with items, newest first"""
        ...

    async def count(
        self,
        customer_id: int | None = None,
        seller_id: int | None = None,
        status: OrderStatus | None = None,
    ) -> int:
        """Count orders matching the same filters as search"""
        ...


__all__ = [
    "IUserRepository",
    "IProductRepository",
    "IOrderRepository",
]
