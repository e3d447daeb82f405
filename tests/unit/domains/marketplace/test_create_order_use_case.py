"""
Tests for CreateOrderUseCase against an in-memory database.
"""

from decimal import Decimal

import pytest

from grocery_market.core.container import MarketplaceContainer
from grocery_market.core.domain import ValidationException
from grocery_market.domains.marketplace.application.use_cases import (
    CreateOrderRequest,
    CreateOrderUseCase,
    OrderItemInput,
)
from grocery_market.domains.marketplace.domain.exceptions import (
    CustomerNotFoundException,
    InsufficientStockException,
    PriceMismatchException,
    ProductNotFoundForSellerException,
    SellerNotFoundException,
)
from grocery_market.domains.marketplace.domain.value_objects import OrderStatus, PaymentMethod
from grocery_market.domains.marketplace.infrastructure.repositories import SQLAlchemyProductRepository
from tests.utils.factories import count_rows, get_stock

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def use_case(db_session) -> CreateOrderUseCase:
    return MarketplaceContainer().create_create_order_use_case(db_session)


def make_request(seed, lines, **overrides) -> CreateOrderRequest:
    params = {
        "customer_id": seed.customer_id,
        "seller_id": seed.seller_id,
        "payment_method": PaymentMethod.COD,
        "delivery_address": "12 Lê Lợi, Quận 1, TP.HCM",
        "items": [OrderItemInput(product_id=pid, quantity=qty, unit_price=Decimal(price)) for pid, qty, price in lines],
    }
    params.update(overrides)
    return CreateOrderRequest(**params)


# ============================================================================
# Successful creation
# ============================================================================


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_computes_total_and_decrements_stock(use_case, marketplace, async_session_factory):
    # Arrange
    request = make_request(marketplace, [(marketplace.fish_id, 5, "25.50"), (marketplace.greens_id, 2, "15.00")])

    # Act
    order = await use_case.execute(request)

    # Assert
    assert order.id is not None
    assert order.total_value.amount == Decimal("157.50")
    assert order.status is OrderStatus.PENDING_CONFIRMATION
    assert [(i.product_id, i.quantity) for i in order.items] == [
        (marketplace.fish_id, 5),
        (marketplace.greens_id, 2),
    ]
    assert [i.total_price.amount for i in order.items] == [Decimal("127.50"), Decimal("30.00")]
    assert all(i.order_id == order.id for i in order.items)

    assert await get_stock(async_session_factory, marketplace.fish_id) == 95
    assert await get_stock(async_session_factory, marketplace.greens_id) == 48
    assert await count_rows(async_session_factory) == (1, 2)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_accepts_price_within_tolerance(use_case, marketplace, async_session_factory):
    order = await use_case.execute(make_request(marketplace, [(marketplace.fish_id, 2, "25.51")]))

    # The requested unit price is what gets recorded
    assert order.items[0].unit_price.amount == Decimal("25.51")
    assert order.total_value.amount == Decimal("51.02")
    assert await get_stock(async_session_factory, marketplace.fish_id) == 98


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_can_take_entire_stock(use_case, marketplace, async_session_factory):
    await use_case.execute(make_request(marketplace, [(marketplace.greens_id, 50, "15.00")]))

    assert await get_stock(async_session_factory, marketplace.greens_id) == 0


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_keeps_notes_and_payment_method(use_case, marketplace):
    order = await use_case.execute(
        make_request(
            marketplace,
            [(marketplace.fish_id, 1, "25.50")],
            payment_method=PaymentMethod.MOMO,
            customer_notes="Giao buổi sáng",
        )
    )

    assert order.payment_method is PaymentMethod.MOMO
    assert order.customer_notes == "Giao buổi sáng"


# ============================================================================
# Validation failures (nothing persisted)
# ============================================================================


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_insufficient_stock_creates_nothing(use_case, marketplace, async_session_factory):
    # Arrange
    request = make_request(marketplace, [(marketplace.fish_id, 200, "25.50")])

    # Act & Assert
    with pytest.raises(InsufficientStockException) as exc_info:
        await use_case.execute(request)

    assert exc_info.value.requested == 200
    assert exc_info.value.available == 100
    assert await count_rows(async_session_factory) == (0, 0)
    assert await get_stock(async_session_factory, marketplace.fish_id) == 100


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_repeated_product_checks_cumulative_stock(use_case, marketplace, async_session_factory):
    request = make_request(marketplace, [(marketplace.greens_id, 30, "15.00"), (marketplace.greens_id, 30, "15.00")])

    with pytest.raises(InsufficientStockException) as exc_info:
        await use_case.execute(request)

    assert exc_info.value.available == 20
    assert await get_stock(async_session_factory, marketplace.greens_id) == 50
    assert await count_rows(async_session_factory) == (0, 0)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_price_mismatch(use_case, marketplace, async_session_factory):
    request = make_request(marketplace, [(marketplace.fish_id, 1, "25.50"), (marketplace.greens_id, 1, "14.00")])

    with pytest.raises(PriceMismatchException) as exc_info:
        await use_case.execute(request)

    assert exc_info.value.code == "PRICE_MISMATCH"
    assert exc_info.value.current_price == Decimal("15.00")
    assert await count_rows(async_session_factory) == (0, 0)
    assert await get_stock(async_session_factory, marketplace.fish_id) == 100


@pytest.mark.use_case
@pytest.mark.asyncio
@pytest.mark.parametrize("unit_price", ["25.505", "25.499", "0.004"])
async def test_create_order_rejects_sub_cent_unit_price(use_case, marketplace, async_session_factory, unit_price):
    request = make_request(marketplace, [(marketplace.fish_id, 5, unit_price)])

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(request)

    assert exc_info.value.details["field"] == "unit_price"
    assert await count_rows(async_session_factory) == (0, 0)
    assert await get_stock(async_session_factory, marketplace.fish_id) == 100


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_line_total_uses_exact_unit_price(use_case, marketplace):
    # Trailing zeros are still a whole number of cents
    order = await use_case.execute(make_request(marketplace, [(marketplace.fish_id, 5, "25.500")]))

    assert order.items[0].total_price.amount == Decimal("127.50")
    assert order.total_value.amount == Decimal("127.50")

@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_product_of_other_seller(use_case, marketplace, async_session_factory):
    request = make_request(marketplace, [(marketplace.pork_id, 1, "120.00")])

    with pytest.raises(ProductNotFoundForSellerException) as exc_info:
        await use_case.execute(request)

    assert exc_info.value.details["seller_id"] == marketplace.seller_id
    assert await count_rows(async_session_factory) == (0, 0)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_unknown_product(use_case, marketplace):
    with pytest.raises(ProductNotFoundForSellerException):
        await use_case.execute(make_request(marketplace, [(9999, 1, "10.00")]))


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_checks_lines_in_input_order(use_case, marketplace):
    # Line 1 is unknown, line 2 has insufficient stock: the first failing line wins
    request = make_request(marketplace, [(9999, 1, "10.00"), (marketplace.fish_id, 500, "25.50")])

    with pytest.raises(ProductNotFoundForSellerException):
        await use_case.execute(request)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_customer_must_have_customer_role(use_case, marketplace):
    request = make_request(marketplace, [(marketplace.fish_id, 1, "25.50")], customer_id=marketplace.seller_id)

    with pytest.raises(CustomerNotFoundException):
        await use_case.execute(request)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_seller_must_have_seller_role(use_case, marketplace):
    request = make_request(marketplace, [(marketplace.fish_id, 1, "25.50")], seller_id=marketplace.customer_id)

    with pytest.raises(SellerNotFoundException):
        await use_case.execute(request)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_order_rolls_back_when_stock_update_fails(db_session, marketplace, async_session_factory):
    """A failed guarded decrement after the order insert leaves no trace."""

    class RacingProductRepository(SQLAlchemyProductRepository):
        async def decrement_stock(self, product_id: int, quantity: int) -> bool:
            if product_id == marketplace.greens_id:
                return False
            return await super().decrement_stock(product_id, quantity)

    container = MarketplaceContainer()
    use_case = CreateOrderUseCase(
        session=db_session,
        user_repository=container.create_user_repository(db_session),
        product_repository=RacingProductRepository(db_session),
        order_repository=container.create_order_repository(db_session),
    )
    request = make_request(marketplace, [(marketplace.fish_id, 5, "25.50"), (marketplace.greens_id, 2, "15.00")])

    with pytest.raises(InsufficientStockException):
        await use_case.execute(request)

    assert await count_rows(async_session_factory) == (0, 0)
    assert await get_stock(async_session_factory, marketplace.fish_id) == 100
    assert await get_stock(async_session_factory, marketplace.greens_id) == 50
