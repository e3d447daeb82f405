"""
Marketplace API Schemas

Pydantic schemas for API request/response validation. Money is accepted as
Decimal and returned as JSON numbers.
"""

import re
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from grocery_market.domains.marketplace.domain.value_objects import (
    OrderStatus,
    PaymentMethod,
    ProductCategory,
    UnitOfMeasurement,
    UserRole,
)

# Vietnamese mobile numbers: +84 / 84 / 0 prefix, carrier digit, 8 digits
PHONE_PATTERN = re.compile(r"^(\+84|84|0)[35789][0-9]{8}$")


# ==================== USERS ====================


class UserCreate(BaseModel):
    """Create user request schema."""

    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=200)
    phone: str
    address: str | None = None
    role: UserRole

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.match(v):
            raise ValueError("Invalid Vietnamese phone number")
        return v


class UserResponse(BaseModel):
    """User response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    phone: str
    address: str | None = None
    role: str
    created_at: datetime
    updated_at: datetime


# ==================== PRODUCTS ====================


class ProductCreate(BaseModel):
    """Create product request schema."""

    seller_id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category: ProductCategory
    origin: str = Field(..., min_length=1, max_length=255)
    stock_quantity: int = Field(default=0, ge=0)
    unit_of_measurement: UnitOfMeasurement
    images: list[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """Partial product update; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    price: Decimal | None = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    category: ProductCategory | None = None
    origin: str | None = Field(default=None, min_length=1, max_length=255)
    stock_quantity: int | None = Field(default=None, ge=0)
    unit_of_measurement: UnitOfMeasurement | None = None
    images: list[str] | None = None


class ProductResponse(BaseModel):
    """Product response schema."""

    id: int
    name: str
    description: str
    price: float
    category: str
    origin: str
    stock_quantity: int
    unit_of_measurement: str
    images: list[str]
    seller_id: int
    created_at: datetime
    updated_at: datetime


class ProductListResponse(BaseModel):
    """Paginated product listing."""

    products: list[ProductResponse]
    total: int
    page: int
    limit: int
    total_pages: int


# ==================== ORDERS ====================


class OrderItemCreate(BaseModel):
    """Order line request schema."""

    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class OrderCreate(BaseModel):
    """Create order request schema."""

    customer_id: int = Field(..., gt=0)
    seller_id: int = Field(..., gt=0)
    payment_method: PaymentMethod
    delivery_address: str = Field(..., min_length=1)
    customer_notes: str | None = None
    items: list[OrderItemCreate] = Field(..., min_length=1)


class OrderStatusUpdate(BaseModel):
    """Status change requested by the order's seller."""

    status: OrderStatus
    seller_id: int = Field(..., gt=0)


class OrderItemResponse(BaseModel):
    """Order item response schema."""

    id: int
    order_id: int
    product_id: int
    quantity: int
    unit_price: float
    total_price: float
    created_at: datetime
    product_name: str | None = None
    product_unit: str | None = None


class OrderResponse(BaseModel):
    """Order response schema."""

    id: int
    customer_id: int
    seller_id: int
    total_value: float
    status: str
    payment_method: str
    delivery_address: str
    customer_notes: str | None = None
    created_at: datetime
    updated_at: datetime
    items: list[OrderItemResponse] = Field(default_factory=list)


class OrderDetailResponse(OrderResponse):
    """Order with product names and party names."""

    customer_name: str | None = None
    seller_name: str | None = None


class OrderListResponse(BaseModel):
    """Paginated order listing."""

    orders: list[OrderResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class HealthResponse(BaseModel):
    status: str
    version: str
