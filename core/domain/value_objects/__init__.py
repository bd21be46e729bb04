"""Domain value objects."""

from .address import Address
from .order_search import OrderSearch

__all__ = ["Address", "OrderSearch"]
