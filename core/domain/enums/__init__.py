"""Domain enums."""

from .delivery_status import DeliveryStatus
from .order_status import OrderStatus

__all__ = ["DeliveryStatus", "OrderStatus"]
