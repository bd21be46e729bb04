"""Database models."""

from .base import Base
from .delivery import Delivery
from .item import Album, Book, Item, Movie
from .member import Member
from .order import Order, OrderItem

__all__ = [
    "Album",
    "Base",
    "Book",
    "Delivery",
    "Item",
    "Member",
    "Movie",
    "Order",
    "OrderItem",
]
