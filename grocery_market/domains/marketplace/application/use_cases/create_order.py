"""
Create Order Use Case

Validates an order request against live product rows, reserves stock and
persists the order with its items in a single transaction.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from grocery_market.core.domain import DomainException, ValidationException
from grocery_market.domains.marketplace.application.ports import (
    IOrderRepository,
    IProductRepository,
    IUserRepository,
)
from grocery_market.domains.marketplace.domain.entities import Order, OrderItem
from grocery_market.domains.marketplace.domain.exceptions import (
    CustomerNotFoundException,
    InsufficientStockException,
    PriceMismatchException,
    ProductNotFoundForSellerException,
    SellerNotFoundException,
)
from grocery_market.domains.marketplace.domain.value_objects import (
    CENTS,
    PaymentMethod,
    Price,
    UserRole,
)

logger = logging.getLogger(__name__)


@dataclass
class OrderItemInput:
    """Input for order item."""

    product_id: int
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if not isinstance(self.unit_price, Decimal):
            self.unit_price = Decimal(str(self.unit_price))


@dataclass
class CreateOrderRequest:
    """Request for creating an order."""

    customer_id: int
    seller_id: int
    payment_method: PaymentMethod
    delivery_address: str
    items: list[OrderItemInput] = field(default_factory=list)
    customer_notes: str | None = None


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Responsibilities:
    - Resolve the customer and seller by role
    - Lock and validate every referenced product (ownership, stock, price)
    - Compute line totals and the order total
    - Insert order and items, decrement stock, commit

    Any failure rolls the whole transaction back; no partial order or stock
    change survives.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_repository: IUserRepository,
        product_repository: IProductRepository,
        order_repository: IOrderRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            session: Session whose transaction this use case owns
            user_repository: Repository for customer/seller lookup
            product_repository: Repository for product validation and stock
            order_repository: Repository for order persistence
        """
        self.session = session
        self.user_repository = user_repository
        self.product_repository = product_repository
        self.order_repository = order_repository

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Create a new order.

        Args:
            request: Order creation request

        Returns:
            The persisted order, items included

        Raises:
            ValidationException: Empty item list or delivery address
            CustomerNotFoundException: Customer missing or not a customer
            SellerNotFoundException: Seller missing or not a seller
            ProductNotFoundForSellerException: Product missing or owned by another seller
            InsufficientStockException: Requested quantity exceeds available stock
            PriceMismatchException: Unit price differs from the product price by more than 0.01
        """
        try:
            self._validate_request(request)

            customer = await self.user_repository.get_by_id_and_role(request.customer_id, UserRole.CUSTOMER)
            if customer is None:
                raise CustomerNotFoundException(request.customer_id)

            seller = await self.user_repository.get_by_id_and_role(request.seller_id, UserRole.SELLER)
            if seller is None:
                raise SellerNotFoundException(request.seller_id)

            items = await self._build_order_items(request)

            order = Order.place(
                customer_id=request.customer_id,
                seller_id=request.seller_id,
                payment_method=request.payment_method,
                delivery_address=request.delivery_address,
                items=items,
                customer_notes=request.customer_notes,
            )
            created_order = await self.order_repository.create(order)

            for item in items:
                if not await self.product_repository.decrement_stock(item.product_id, item.quantity):
                    current = await self.product_repository.get_by_id(item.product_id)
                    raise InsufficientStockException(
                        product_id=item.product_id,
                        requested=item.quantity,
                        available=current.stock_quantity if current else 0,
                        product_name=current.name if current else None,
                    )

            await self.session.commit()

            logger.info(
                f"Order {created_order.id} created for customer {request.customer_id} "
                f"with seller {request.seller_id}: {len(items)} items, total {created_order.total_value}"
            )
            return created_order

        except DomainException as e:
            logger.info(f"Order rejected for customer {request.customer_id}: {e.code} {e.message}")
            await self.session.rollback()
            raise
        except Exception as e:
            logger.error(f"Error creating order for customer {request.customer_id}: {e}")
            await self.session.rollback()
            raise

    def _validate_request(self, request: CreateOrderRequest) -> None:
        if not request.items:
            raise ValidationException("Order must contain at least one item", field="items")
        if not request.delivery_address or not request.delivery_address.strip():
            raise ValidationException("Delivery address is required", field="delivery_address")
        for index, line in enumerate(request.items):
            if line.quantity <= 0:
                raise ValidationException(f"Item {index + 1}: quantity must be positive", field="quantity")
            if line.unit_price <= 0:
                raise ValidationException(f"Item {index + 1}: unit price must be positive", field="unit_price")
            if line.unit_price != line.unit_price.quantize(CENTS):
                raise ValidationException(
                    f"Item {index + 1}: unit price cannot have more than two decimal places", field="unit_price"
                )

    async def _build_order_items(self, request: CreateOrderRequest) -> list[OrderItem]:
        """Validate each line in input order against the locked product rows."""
        products = await self.product_repository.lock_for_seller(
            [line.product_id for line in request.items],
            request.seller_id,
        )

        reserved: dict[int, int] = {}
        items: list[OrderItem] = []

        for line in request.items:
            product = products.get(line.product_id)
            if product is None:
                raise ProductNotFoundForSellerException(line.product_id, request.seller_id)

            already_reserved = reserved.get(line.product_id, 0)
            if not product.has_stock(line.quantity, reserved=already_reserved):
                raise InsufficientStockException(
                    product_id=line.product_id,
                    requested=line.quantity,
                    available=product.stock_quantity - already_reserved,
                    product_name=product.name,
                )

            if not product.price_matches(line.unit_price):
                raise PriceMismatchException(
                    product_id=line.product_id,
                    product_name=product.name,
                    current_price=product.price.amount,
                    provided_price=line.unit_price,
                )

            reserved[line.product_id] = already_reserved + line.quantity
            items.append(OrderItem.create(line.product_id, line.quantity, Price.from_value(line.unit_price)))

        return items


__all__ = ["CreateOrderUseCase", "CreateOrderRequest", "OrderItemInput"]
