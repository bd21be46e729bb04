"""
Delivery Status Enum.
"""
from enum import Enum


class DeliveryStatus(str, Enum):
    """Delivery status values."""

    READY = "READY"
    COMP = "COMP"  # completed
