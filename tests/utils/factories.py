"""
Factories for marketplace test data.

Entity builders for pure domain tests, and a seeding helper that writes a
small marketplace straight through the ORM.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker

from grocery_market.domains.marketplace.domain.entities import Order, OrderItem, Product
from grocery_market.domains.marketplace.domain.value_objects import (
    PaymentMethod,
    Price,
    ProductCategory,
    UnitOfMeasurement,
)
from grocery_market.models.db import Order as OrderModel
from grocery_market.models.db import OrderItem as OrderItemModel
from grocery_market.models.db import Product as ProductModel
from grocery_market.models.db import User as UserModel


def create_product(
    product_id: int = 1,
    name: str = "Cá basa",
    price: str = "25.50",
    stock_quantity: int = 100,
    seller_id: int = 2,
    **kwargs: Any,
) -> Product:
    """Create a product entity with default values."""
    return Product(
        id=product_id,
        name=name,
        description=kwargs.pop("description", f"Fresh {name}"),
        price=Price.from_value(price),
        category=kwargs.pop("category", ProductCategory.SEAFOOD),
        origin=kwargs.pop("origin", "Cần Thơ"),
        stock_quantity=stock_quantity,
        unit_of_measurement=kwargs.pop("unit_of_measurement", UnitOfMeasurement.KG),
        seller_id=seller_id,
        **kwargs,
    )


def create_order(
    order_id: int | None = 1,
    customer_id: int = 1,
    seller_id: int = 2,
    lines: list[tuple[int, int, str]] | None = None,
) -> Order:
    """Create an order entity from (product_id, quantity, unit_price) lines."""
    lines = lines or [(1, 5, "25.50"), (2, 2, "15.00")]
    order = Order.place(
        customer_id=customer_id,
        seller_id=seller_id,
        payment_method=PaymentMethod.COD,
        delivery_address="12 Lê Lợi, Quận 1, TP.HCM",
        items=[OrderItem.create(pid, qty, Price.from_value(price)) for pid, qty, price in lines],
    )
    order.id = order_id
    return order


@dataclass
class MarketplaceSeed:
    """IDs of the seeded rows."""

    customer_id: int
    seller_id: int
    other_seller_id: int
    fish_id: int  # 25.50, stock 100, seller
    greens_id: int  # 15.00, stock 50, seller
    pork_id: int  # 120.00, stock 30, other seller


async def seed_marketplace(session_factory: async_sessionmaker) -> MarketplaceSeed:
    """Insert one customer, two sellers and three products, committed."""
    async with session_factory() as session:
        customer = UserModel(
            email="lan.nguyen@example.com",
            full_name="Nguyễn Thị Lan",
            phone="0901234567",
            address="12 Lê Lợi, Quận 1, TP.HCM",
            role="customer",
        )
        seller = UserModel(
            email="cho.ben.thanh@example.com",
            full_name="Trần Văn Minh",
            phone="0912345678",
            address="Chợ Bến Thành",
            role="seller",
        )
        other_seller = UserModel(
            email="thit.sach@example.com",
            full_name="Lê Hoàng",
            phone="0987654321",
            role="seller",
        )
        session.add_all([customer, seller, other_seller])
        await session.flush()

        fish = ProductModel(
            name="Ca basa fillet",
            description="Fresh basa fish fillet",
            price=Decimal("25.50"),
            category="seafood",
            origin="Cần Thơ",
            stock_quantity=100,
            unit_of_measurement="kg",
            images=["basa-1.jpg"],
            seller_id=seller.id,
        )
        greens = ProductModel(
            name="Rau muong",
            description="Water spinach, picked this morning",
            price=Decimal("15.00"),
            category="vegetables",
            origin="Đà Lạt",
            stock_quantity=50,
            unit_of_measurement="bundle",
            images=[],
            seller_id=seller.id,
        )
        pork = ProductModel(
            name="Thit heo ba chi",
            description="Pork belly",
            price=Decimal("120.00"),
            category="meat",
            origin="Đồng Nai",
            stock_quantity=30,
            unit_of_measurement="kg",
            images=[],
            seller_id=other_seller.id,
        )
        session.add_all([fish, greens, pork])
        await session.commit()

        return MarketplaceSeed(
            customer_id=customer.id,
            seller_id=seller.id,
            other_seller_id=other_seller.id,
            fish_id=fish.id,
            greens_id=greens.id,
            pork_id=pork.id,
        )


async def get_stock(session_factory: async_sessionmaker, product_id: int) -> int:
    """Read stock through a fresh session."""
    async with session_factory() as session:
        result = await session.execute(select(ProductModel.stock_quantity).where(ProductModel.id == product_id))
        return result.scalar_one()


async def count_rows(session_factory: async_sessionmaker) -> tuple[int, int]:
    """(orders, order_items) row counts through a fresh session."""
    async with session_factory() as session:
        orders = (await session.execute(select(func.count()).select_from(OrderModel))).scalar_one()
        items = (await session.execute(select(func.count()).select_from(OrderItemModel))).scalar_one()
        return orders, items


async def get_order_status(session_factory: async_sessionmaker, order_id: int) -> str:
    """Read an order status through a fresh session."""
    async with session_factory() as session:
        result = await session.execute(select(OrderModel.status).where(OrderModel.id == order_id))
        return result.scalar_one()
