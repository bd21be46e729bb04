"""Application services."""

from .order_query_service import OrderQueryService

__all__ = ["OrderQueryService"]
