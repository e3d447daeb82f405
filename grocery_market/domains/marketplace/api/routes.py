"""
Marketplace API Routes

FastAPI router for user, product and order endpoints.
"""

import math
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from grocery_market.domains.marketplace.api.dependencies import (
    get_create_order_use_case,
    get_create_product_use_case,
    get_create_user_use_case,
    get_order_by_id_use_case,
    get_orders_use_case,
    get_product_by_id_use_case,
    get_products_use_case,
    get_sellers_use_case,
    get_update_order_status_use_case,
    get_update_product_use_case,
    get_user_by_id_use_case,
)
from grocery_market.domains.marketplace.api.schemas import (
    OrderCreate,
    OrderDetailResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatusUpdate,
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    UserCreate,
    UserResponse,
)
from grocery_market.domains.marketplace.application.use_cases import (
    CreateOrderRequest,
    CreateOrderUseCase,
    CreateProductRequest,
    CreateProductUseCase,
    CreateUserRequest,
    CreateUserUseCase,
    GetOrderByIdUseCase,
    GetOrdersRequest,
    GetOrdersUseCase,
    GetProductByIdUseCase,
    GetProductsRequest,
    GetProductsUseCase,
    GetSellersUseCase,
    GetUserByIdUseCase,
    OrderItemInput,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)
from grocery_market.domains.marketplace.application.use_cases.get_orders import MAX_ORDERS_PAGE_SIZE
from grocery_market.domains.marketplace.application.use_cases.get_products import MAX_PRODUCTS_PAGE_SIZE
from grocery_market.domains.marketplace.domain.value_objects import (
    OrderStatus,
    ProductCategory,
    UserRole,
)

router = APIRouter(tags=["Marketplace"])


def _total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


# ==================== USERS ====================


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: UserCreate,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    """Register a customer or seller."""
    user = await use_case.execute(
        CreateUserRequest(
            email=request.email,
            full_name=request.full_name,
            phone=request.phone,
            role=request.role,
            address=request.address,
        )
    )
    return UserResponse.model_validate(user.to_dict())


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    use_case: GetUserByIdUseCase = Depends(get_user_by_id_use_case),
):
    """Get user by ID."""
    user = await use_case.execute(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserResponse.model_validate(user.to_dict())


@router.get("/sellers", response_model=list[UserResponse])
async def get_sellers(use_case: GetSellersUseCase = Depends(get_sellers_use_case)):
    """List all sellers."""
    sellers = await use_case.execute()
    return [UserResponse.model_validate(seller.to_dict()) for seller in sellers]


# ==================== PRODUCTS ====================


@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreate,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
):
    """Add a product to a seller's catalog."""
    product = await use_case.execute(CreateProductRequest(**request.model_dump()))
    return ProductResponse.model_validate(product.to_dict())


@router.get("/products", response_model=ProductListResponse)
async def get_products(
    category: ProductCategory | None = None,
    seller_id: int | None = None,
    search: str | None = Query(default=None, min_length=1),
    min_price: Decimal | None = Query(default=None, ge=0),
    max_price: Decimal | None = Query(default=None, ge=0),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=MAX_PRODUCTS_PAGE_SIZE),
    use_case: GetProductsUseCase = Depends(get_products_use_case),
):
    """List products with filters, newest first."""
    result = await use_case.execute(
        GetProductsRequest(
            category=category,
            seller_id=seller_id,
            search=search,
            min_price=min_price,
            max_price=max_price,
            page=page,
            limit=limit,
        )
    )
    return ProductListResponse(
        products=[ProductResponse.model_validate(p.to_dict()) for p in result.products],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=_total_pages(result.total, result.limit),
    )


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    use_case: GetProductByIdUseCase = Depends(get_product_by_id_use_case),
):
    """Get product by ID."""
    product = await use_case.execute(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.model_validate(product.to_dict())


@router.patch("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    request: ProductUpdate,
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
):
    """Update only the provided product fields."""
    product = await use_case.execute(product_id, request.model_dump(exclude_unset=True, exclude_none=True))
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductResponse.model_validate(product.to_dict())


# ==================== ORDERS ====================


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: OrderCreate,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """Place an order with one seller, reserving stock for every line."""
    order = await use_case.execute(
        CreateOrderRequest(
            customer_id=request.customer_id,
            seller_id=request.seller_id,
            payment_method=request.payment_method,
            delivery_address=request.delivery_address,
            customer_notes=request.customer_notes,
            items=[
                OrderItemInput(product_id=item.product_id, quantity=item.quantity, unit_price=item.unit_price)
                for item in request.items
            ],
        )
    )
    return OrderResponse.model_validate(order.to_detail_dict())


@router.get("/orders", response_model=OrderListResponse)
async def get_orders(
    customer_id: int | None = None,
    seller_id: int | None = None,
    order_status: OrderStatus | None = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=MAX_ORDERS_PAGE_SIZE),
    use_case: GetOrdersUseCase = Depends(get_orders_use_case),
):
    """List orders with filters, newest first."""
    result = await use_case.execute(
        GetOrdersRequest(
            customer_id=customer_id,
            seller_id=seller_id,
            status=order_status,
            page=page,
            limit=limit,
        )
    )
    return OrderListResponse(
        orders=[OrderResponse.model_validate(o.to_detail_dict()) for o in result.orders],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=_total_pages(result.total, result.limit),
    )


@router.get("/orders/{order_id}", response_model=OrderDetailResponse)
async def get_order(
    order_id: int,
    user_id: int | None = None,
    user_role: UserRole | None = None,
    use_case: GetOrderByIdUseCase = Depends(get_order_by_id_use_case),
):
    """Get one order; with user_id and user_role, only if that user is a party to it."""
    order = await use_case.execute(order_id, user_id=user_id, user_role=user_role)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderDetailResponse.model_validate(order.to_detail_dict())


@router.patch("/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    request: OrderStatusUpdate,
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    """Move an order to a new status on behalf of its seller."""
    order = await use_case.execute(order_id, request.status, request.seller_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found or not owned by seller")
    return OrderResponse.model_validate(order.to_detail_dict())


__all__ = ["router"]
