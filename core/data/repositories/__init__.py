"""Repository implementations."""

from .order_query_repository import OrderQueryRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .order_simple_query_repository import OrderSimpleQueryRepository

__all__ = [
    "OrderQueryRepository",
    "OrderSimpleQueryRepository",
    "SqlAlchemyOrderRepository",
]
