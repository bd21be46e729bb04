"""
Order Status Enum.

Lifecycle states of an order.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""

    ORDERED = "ORDERED"
    CANCELED = "CANCELED"
