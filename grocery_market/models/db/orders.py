"""
Order management models
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin, utcnow

if TYPE_CHECKING:
    from .products import Product
    from .users import User


class Order(Base, TimestampMixin):
    """Customer orders placed with a single seller."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    total_value = Column(Numeric(10, 2), nullable=False)
    # pending_confirmation, confirmed, delivering, delivered, cancelled
    status = Column(String(30), nullable=False, default="pending_confirmation")
    payment_method = Column(String(20), nullable=False)  # cod, bank_transfer, momo, zalopay
    delivery_address = Column(Text, nullable=False)
    customer_notes = Column(Text)

    customer: Mapped["User"] = relationship("User", foreign_keys=[customer_id])
    seller: Mapped["User"] = relationship("User", foreign_keys=[seller_id])
    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        CheckConstraint("total_value > 0", name="ck_orders_total_positive"),
        Index("idx_orders_customer", customer_id),
        Index("idx_orders_seller", seller_id),
        Index("idx_orders_status", status),
        Index("idx_orders_created", "created_at"),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, status='{self.status}', total={self.total_value})>"


class OrderItem(Base):
    """Line items of an order; written once together with the order."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)  # price at the time of purchase
    total_price = Column(Numeric(10, 2), nullable=False)  # quantity * unit_price

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product"] = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
        Index("idx_order_items_order", order_id),
        Index("idx_order_items_product", product_id),
    )

    def __repr__(self):
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity}, price={self.unit_price})>"
