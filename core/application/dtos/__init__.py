"""Application DTOs."""

from .base import AddressDto, ApiModel
from .entity_views import (
    DeliveryView,
    ItemView,
    MemberView,
    OrderEntityView,
    OrderItemView,
    SimpleOrderEntityView,
)
from .order_dto import OrderDto, OrderItemDto, SimpleOrderDto
from .order_query_dto import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
    OrderSimpleQueryDto,
)

__all__ = [
    "AddressDto",
    "ApiModel",
    "DeliveryView",
    "ItemView",
    "MemberView",
    "OrderDto",
    "OrderEntityView",
    "OrderFlatDto",
    "OrderItemDto",
    "OrderItemQueryDto",
    "OrderItemView",
    "OrderQueryDto",
    "OrderSimpleQueryDto",
    "SimpleOrderDto",
    "SimpleOrderEntityView",
]
