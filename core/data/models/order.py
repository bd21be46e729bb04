"""SQLAlchemy ORM models for the Order aggregate."""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Column, DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import relationship

from core.domain.enums import OrderStatus

from .base import Base
from .delivery import Delivery
from .item import Item
from .member import Member


class Order(Base):
    """
    Order aggregate root.

    Every association is lazy (``lazy="select"``): nothing beyond the
    ``orders`` row is loaded unless the query asks for it. Order owns its
    items; Member and Delivery are only referenced.
    """

    __tablename__ = "orders"

    id = Column("order_id", Integer, primary_key=True, autoincrement=True)

    member_id = Column(ForeignKey("member.member_id"), nullable=False, index=True)
    delivery_id = Column(ForeignKey("delivery.delivery_id"), nullable=False, unique=True)

    order_date = Column(DateTime, nullable=False, default=datetime.now)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.ORDERED)

    # Relationships
    member = relationship("Member", back_populates="orders")
    delivery = relationship("Delivery", back_populates="order", cascade="all")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    @classmethod
    def create(
        cls,
        member: Member,
        delivery: Delivery,
        *order_items: "OrderItem",
        order_date: Optional[datetime] = None,
    ) -> "Order":
        """Build a new order.

        back_populates keeps Member.orders, Delivery.order and
        OrderItem.order in step with the assignments below.
        """
        if not order_items:
            raise ValueError("An order needs at least one order item")

        order = cls(
            status=OrderStatus.ORDERED,
            order_date=order_date or datetime.now(),
        )
        order.member = member
        order.delivery = delivery
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)

    def __repr__(self):
        return f"<Order(id={self.id}, status={self.status})>"


class OrderItem(Base):
    """One line of an order: an item, the price paid per unit and a quantity."""

    __tablename__ = "order_item"

    id = Column("order_item_id", Integer, primary_key=True, autoincrement=True)

    item_id = Column(ForeignKey("item.item_id"), nullable=False)
    order_id = Column(ForeignKey("orders.order_id"), nullable=False, index=True)

    order_price = Column(Integer, nullable=False)
    count = Column(Integer, nullable=False)

    # Relationships
    item = relationship("Item")
    order = relationship("Order", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("count > 0", name="ck_order_item_count_positive"),
    )

    @classmethod
    def create(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """Build an order line and take ``count`` units out of stock.

        Raises:
            ValueError: If count is not positive or stock is insufficient
        """
        if count <= 0:
            raise ValueError(f"Order item count must be positive, got: {count}")

        order_item = cls(item=item, order_price=order_price, count=count)
        item.remove_stock(count)
        return order_item

    def total_price(self) -> int:
        return self.order_price * self.count

    def __repr__(self):
        return f"<OrderItem(id={self.id}, count={self.count})>"
