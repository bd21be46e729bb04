"""DTOs built from Order entities (V2, V3, V3.1 and the simple-order variants)."""

from datetime import datetime
from typing import List

from pydantic import Field

from core.data.models import Order, OrderItem
from core.domain.enums import OrderStatus

from .base import AddressDto, ApiModel


class OrderItemDto(ApiModel):
    """DTO for one order line: only what the client needs."""

    item_name: str = Field(..., description="Item name")
    order_price: int = Field(..., description="Price paid per unit")
    count: int = Field(..., gt=0, description="Quantity ordered")

    @classmethod
    def from_entity(cls, order_item: OrderItem) -> "OrderItemDto":
        return cls(
            item_name=order_item.item.name,  # lazy
            order_price=order_item.order_price,
            count=order_item.count,
        )


class OrderDto(ApiModel):
    """Response DTO for an order with its items."""

    order_id: int = Field(..., description="Order ID")
    name: str = Field(..., description="Member name")
    order_date: datetime = Field(..., description="Order date")
    order_status: OrderStatus = Field(..., description="Order status")
    address: AddressDto = Field(..., description="Delivery address")
    order_items: List[OrderItemDto] = Field(default_factory=list, description="Order items")

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDto":
        """Copy an order graph into a DTO.

        Touches member, delivery, order_items and each item, so those must
        be loaded already or loadable from the current greenlet.
        """
        return cls(
            order_id=order.id,
            name=order.member.name,  # lazy
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDto.from_value(order.delivery.address),  # lazy
            order_items=[OrderItemDto.from_entity(oi) for oi in order.order_items],  # lazy
        )


class SimpleOrderDto(ApiModel):
    """Response DTO for an order and its to-one associations only."""

    order_id: int = Field(..., description="Order ID")
    name: str = Field(..., description="Member name")
    order_date: datetime = Field(..., description="Order date")
    order_status: OrderStatus = Field(..., description="Order status")
    address: AddressDto = Field(..., description="Delivery address")

    @classmethod
    def from_entity(cls, order: Order) -> "SimpleOrderDto":
        return cls(
            order_id=order.id,
            name=order.member.name,  # lazy
            order_date=order.order_date,
            order_status=order.status,
            address=AddressDto.from_value(order.delivery.address),  # lazy
        )
