"""
Tests for user, product and order query use cases against an in-memory database.
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from grocery_market.core.container import MarketplaceContainer
from grocery_market.core.domain import DuplicateEntityException, ValidationException
from grocery_market.domains.marketplace.application.use_cases import (
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    GetOrdersRequest,
    GetProductsRequest,
    OrderItemInput,
)
from grocery_market.domains.marketplace.domain.exceptions import SellerNotFoundException
from grocery_market.domains.marketplace.domain.value_objects import (
    OrderStatus,
    PaymentMethod,
    ProductCategory,
    UnitOfMeasurement,
    UserRole,
)
from tests.utils.factories import get_stock

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def container() -> MarketplaceContainer:
    return MarketplaceContainer()


@pytest_asyncio.fixture
async def two_orders(container, marketplace, async_session_factory):
    """One pending and one cancelled order from the seeded customer."""
    async with async_session_factory() as session:
        create = container.create_create_order_use_case(session)
        first = await create.execute(
            CreateOrderRequest(
                customer_id=marketplace.customer_id,
                seller_id=marketplace.seller_id,
                payment_method=PaymentMethod.COD,
                delivery_address="12 Lê Lợi",
                items=[OrderItemInput(marketplace.fish_id, 1, Decimal("25.50"))],
            )
        )
        second = await create.execute(
            CreateOrderRequest(
                customer_id=marketplace.customer_id,
                seller_id=marketplace.other_seller_id,
                payment_method=PaymentMethod.BANK_TRANSFER,
                delivery_address="12 Lê Lợi",
                items=[OrderItemInput(marketplace.pork_id, 2, Decimal("120.00"))],
            )
        )
    async with async_session_factory() as session:
        await container.create_update_order_status_use_case(session).execute(
            second.id, OrderStatus.CANCELLED, marketplace.other_seller_id
        )
    return first, second


# ============================================================================
# Users
# ============================================================================


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_user_normalizes_email(container, db_session):
    use_case = container.create_create_user_use_case(db_session)

    user = await use_case.execute(
        CreateUserRequest(
            email="Hoa.Pham@Example.com",
            full_name="Phạm Thị Hoa",
            phone="0351234567",
            role=UserRole.CUSTOMER,
        )
    )

    assert user.id is not None
    assert user.email == "hoa.pham@example.com"
    assert user.is_customer()


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_user_rejects_duplicate_email(container, marketplace, db_session):
    use_case = container.create_create_user_use_case(db_session)

    with pytest.raises(DuplicateEntityException):
        await use_case.execute(
            CreateUserRequest(
                email="LAN.NGUYEN@example.com",
                full_name="Someone Else",
                phone="0351234567",
                role=UserRole.SELLER,
            )
        )


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_user_rejects_malformed_email(container, db_session):
    use_case = container.create_create_user_use_case(db_session)

    with pytest.raises(ValidationException) as exc_info:
        await use_case.execute(
            CreateUserRequest(
                email="hoa.pham.example.com",
                full_name="Phạm Thị Hoa",
                phone="0351234567",
                role=UserRole.CUSTOMER,
            )
        )

    assert exc_info.value.details["field"] == "email"

@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_user_by_id(container, marketplace, db_session):
    use_case = container.create_get_user_by_id_use_case(db_session)

    user = await use_case.execute(marketplace.seller_id)

    assert user is not None
    assert user.is_seller()
    assert await use_case.execute(9999) is None


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_sellers_ordered_by_id(container, marketplace, db_session):
    sellers = await container.create_get_sellers_use_case(db_session).execute()

    assert [s.id for s in sellers] == [marketplace.seller_id, marketplace.other_seller_id]
    assert all(s.role is UserRole.SELLER for s in sellers)


# ============================================================================
# Products
# ============================================================================


def product_request(seller_id: int, **overrides) -> CreateProductRequest:
    params = {
        "seller_id": seller_id,
        "name": "Trung ga",
        "description": "Free-range chicken eggs",
        "price": Decimal("3.20"),
        "category": ProductCategory.EGGS_DAIRY,
        "origin": "Long An",
        "unit_of_measurement": UnitOfMeasurement.DOZEN,
        "stock_quantity": 40,
        "images": ["eggs.jpg"],
    }
    params.update(overrides)
    return CreateProductRequest(**params)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_product(container, marketplace, db_session):
    product = await container.create_create_product_use_case(db_session).execute(
        product_request(marketplace.seller_id)
    )

    assert product.id is not None
    assert product.price.amount == Decimal("3.20")
    assert product.images == ["eggs.jpg"]
    assert product.unit_of_measurement is UnitOfMeasurement.DOZEN


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_product_requires_seller(container, marketplace, db_session):
    use_case = container.create_create_product_use_case(db_session)

    with pytest.raises(SellerNotFoundException):
        await use_case.execute(product_request(marketplace.customer_id))


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_create_product_rejects_zero_price(container, marketplace, db_session):
    use_case = container.create_create_product_use_case(db_session)

    with pytest.raises(ValidationException):
        await use_case.execute(product_request(marketplace.seller_id, price=Decimal("0")))


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_product_merges_only_given_fields(container, marketplace, db_session, async_session_factory):
    use_case = container.create_update_product_use_case(db_session)

    product = await use_case.execute(marketplace.fish_id, {"price": Decimal("27.00"), "stock_quantity": 80})

    assert product is not None
    assert product.price.amount == Decimal("27.00")
    assert product.stock_quantity == 80
    assert product.name == "Ca basa fillet"
    assert product.images == ["basa-1.jpg"]
    assert await get_stock(async_session_factory, marketplace.fish_id) == 80


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_product_missing_returns_none(container, marketplace, db_session):
    use_case = container.create_update_product_use_case(db_session)

    assert await use_case.execute(9999, {"name": "Ghost"}) is None


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_update_product_rejects_negative_stock(container, marketplace, db_session):
    use_case = container.create_update_product_use_case(db_session)

    with pytest.raises(ValidationException):
        await use_case.execute(marketplace.fish_id, {"stock_quantity": -1})


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_product_by_id(container, marketplace, db_session):
    use_case = container.create_get_product_by_id_use_case(db_session)

    product = await use_case.execute(marketplace.greens_id)

    assert product.name == "Rau muong"
    assert product.category is ProductCategory.VEGETABLES
    assert await use_case.execute(9999) is None


@pytest.mark.use_case
@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("filters", "expected_names"),
    [
        ({}, ["Thit heo ba chi", "Rau muong", "Ca basa fillet"]),
        ({"category": ProductCategory.SEAFOOD}, ["Ca basa fillet"]),
        ({"search": "SPINACH"}, ["Rau muong"]),
        ({"search": "basa"}, ["Ca basa fillet"]),
        ({"min_price": Decimal("20"), "max_price": Decimal("100")}, ["Ca basa fillet"]),
    ],
)
async def test_get_products_filters(container, marketplace, db_session, filters, expected_names):
    use_case = container.create_get_products_use_case(db_session)

    result = await use_case.execute(GetProductsRequest(**filters))

    assert [p.name for p in result.products] == expected_names
    assert result.total == len(expected_names)


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_products_by_seller_paginated(container, marketplace, db_session):
    use_case = container.create_get_products_use_case(db_session)

    result = await use_case.execute(GetProductsRequest(seller_id=marketplace.seller_id, page=2, limit=1))

    assert result.total == 2
    assert [p.name for p in result.products] == ["Ca basa fillet"]


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_products_rejects_bad_paging(container, db_session):
    use_case = container.create_get_products_use_case(db_session)

    with pytest.raises(ValidationException):
        await use_case.execute(GetProductsRequest(page=0))
    with pytest.raises(ValidationException):
        await use_case.execute(GetProductsRequest(limit=101))


# ============================================================================
# Order queries
# ============================================================================


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_orders_newest_first_with_items(container, marketplace, two_orders, db_session):
    first, second = two_orders

    result = await container.create_get_orders_use_case(db_session).execute(
        GetOrdersRequest(customer_id=marketplace.customer_id)
    )

    assert result.total == 2
    assert [o.id for o in result.orders] == [second.id, first.id]
    assert [len(o.items) for o in result.orders] == [1, 1]


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_orders_by_status_and_seller(container, marketplace, two_orders, db_session):
    first, second = two_orders
    use_case = container.create_get_orders_use_case(db_session)

    cancelled = await use_case.execute(GetOrdersRequest(status=OrderStatus.CANCELLED))
    by_seller = await use_case.execute(GetOrdersRequest(seller_id=marketplace.seller_id))

    assert [o.id for o in cancelled.orders] == [second.id]
    assert [o.id for o in by_seller.orders] == [first.id]


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_orders_limit_bound(container, db_session):
    with pytest.raises(ValidationException):
        await container.create_get_orders_use_case(db_session).execute(GetOrdersRequest(limit=51))


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_order_by_id_with_details(container, marketplace, two_orders, db_session):
    first, _ = two_orders

    order = await container.create_get_order_by_id_use_case(db_session).execute(first.id)

    assert order.customer_name == "Nguyễn Thị Lan"
    assert order.seller_name == "Trần Văn Minh"
    assert order.items[0].product_name == "Ca basa fillet"
    assert order.items[0].product_unit == "kg"


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_get_order_by_id_viewer_check(container, marketplace, two_orders, db_session):
    first, _ = two_orders
    use_case = container.create_get_order_by_id_use_case(db_session)

    assert await use_case.execute(first.id, marketplace.customer_id, UserRole.CUSTOMER) is not None
    assert await use_case.execute(first.id, marketplace.seller_id, UserRole.SELLER) is not None
    assert await use_case.execute(first.id, marketplace.other_seller_id, UserRole.SELLER) is None
    assert await use_case.execute(first.id, marketplace.seller_id, UserRole.CUSTOMER) is None
    assert await use_case.execute(9999) is None


@pytest.mark.use_case
@pytest.mark.asyncio
async def test_cancelled_order_restored_stock(marketplace, two_orders, async_session_factory):
    assert await get_stock(async_session_factory, marketplace.pork_id) == 30
    assert await get_stock(async_session_factory, marketplace.fish_id) == 99
