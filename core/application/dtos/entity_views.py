"""
Wire views of raw entities (V1 endpoints).

These mirror the ORM graph field for field, which is exactly why V1 leaks
the internal model: renaming an entity column changes the API. Only the
owning direction of each association is exposed; Member.orders,
Delivery.order and OrderItem.order are left out, otherwise serializing
an order would walk back into itself forever.
"""

from datetime import datetime
from typing import List

from core.domain.enums import DeliveryStatus, OrderStatus

from .base import AddressDto, ApiModel


class ItemView(ApiModel):
    id: int
    name: str
    price: int
    stock_quantity: int


class MemberView(ApiModel):
    id: int
    name: str
    address: AddressDto


class DeliveryView(ApiModel):
    id: int
    address: AddressDto
    status: DeliveryStatus


class OrderItemView(ApiModel):
    id: int
    item: ItemView
    order_price: int
    count: int


class SimpleOrderEntityView(ApiModel):
    """Order entity with to-one associations."""

    id: int
    member: MemberView
    delivery: DeliveryView
    order_date: datetime
    status: OrderStatus


class OrderEntityView(SimpleOrderEntityView):
    """Order entity with to-one associations and its items."""

    order_items: List[OrderItemView]
