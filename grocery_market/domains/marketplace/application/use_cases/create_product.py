"""
Create Product Use Case

Adds a product to a seller's catalog.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.domain import DomainException, Quantity, ValidationException
from grocery_market.domains.marketplace.application.ports import IProductRepository, IUserRepository
from grocery_market.domains.marketplace.domain.entities import Product
from grocery_market.domains.marketplace.domain.exceptions import SellerNotFoundException
from grocery_market.domains.marketplace.domain.value_objects import (
    Price,
    ProductCategory,
    UnitOfMeasurement,
    UserRole,
)

logger = logging.getLogger(__name__)


@dataclass
class CreateProductRequest:
    """Request for creating a product."""

    seller_id: int
    name: str
    description: str
    price: Decimal
    category: ProductCategory
    origin: str
    unit_of_measurement: UnitOfMeasurement
    stock_quantity: int = 0
    images: list[str] = field(default_factory=list)


class CreateProductUseCase:
    """
    Use Case: Create Product

    Responsibilities:
    - Check the owner is a seller
    - Validate price and stock through value objects
    - Persist the product
    """

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        product_repository: IProductRepository,
    ):
        self.session = session
        self.user_repository = user_repository
        self.product_repository = product_repository

    async def execute(self, request: CreateProductRequest) -> Product:
        """
        Create a product.

        Raises:
            SellerNotFoundException: seller_id is not a seller
            ValidationException: Non-positive price or negative stock
        """
        try:
            seller = await self.user_repository.get_by_id_and_role(request.seller_id, UserRole.SELLER)
            if seller is None:
                raise SellerNotFoundException(request.seller_id)

            product = Product(
                name=request.name,
                description=request.description,
                price=self._price(request.price),
                category=request.category,
                origin=request.origin,
                stock_quantity=self._stock(request.stock_quantity),
                unit_of_measurement=request.unit_of_measurement,
                images=list(request.images),
                seller_id=request.seller_id,
            )
            created = await self.product_repository.create(product)
            await self.session.commit()

            logger.info(f"Product {created.id} created for seller {request.seller_id}")
            return created

        except DomainException:
            await self.session.rollback()
            raise
        except Exception as e:
            logger.error(f"Error creating product for seller {request.seller_id}: {e}")
            await self.session.rollback()
            raise

    @staticmethod
    def _price(amount: Decimal) -> Price:
        try:
            price = Price.from_value(amount)
        except ValueError as e:
            raise ValidationException(str(e), field="price") from e
        if not price.is_positive():
            raise ValidationException("Price must be positive", field="price")
        return price

    @staticmethod
    def _stock(stock_quantity: int) -> int:
        try:
            return int(Quantity(stock_quantity))
        except ValueError as e:
            raise ValidationException(str(e), field="stock_quantity") from e


__all__ = ["CreateProductUseCase", "CreateProductRequest"]
