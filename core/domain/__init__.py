"""Domain layer - enums, value objects and repository interfaces."""

from .enums import DeliveryStatus, OrderStatus
from .repositories import OrderRepository
from .value_objects import Address, OrderSearch

__all__ = [
    "Address",
    "DeliveryStatus",
    "OrderRepository",
    "OrderSearch",
    "OrderStatus",
]
