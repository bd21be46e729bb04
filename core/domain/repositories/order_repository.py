"""Repository interfaces for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ..value_objects import OrderSearch

if TYPE_CHECKING:
    from core.data.models import Order


class OrderRepository(ABC):
    """
    Abstract repository for Order entities.

    Each finder commits to a loading strategy; callers pick the finder
    that loads exactly what they are about to touch.
    """

    @abstractmethod
    async def find_one(self, order_id: int) -> Optional[Order]:
        """Retrieve a single order, associations left lazy.

        Args:
            order_id: Order primary key

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_search(
        self, search: OrderSearch, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """List orders matching the search, associations left lazy.

        Args:
            search: Member name / status filters
            offset: Number of orders to skip
            limit: Maximum number of orders to return (None for all)

        Returns:
            List of Order entities
        """
        pass

    @abstractmethod
    async def find_all_with_member_delivery(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """List orders with member and delivery fetch-joined.

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders to return (None for all)

        Returns:
            List of Order entities
        """
        pass

    @abstractmethod
    async def find_all_with_items(self) -> List[Order]:
        """List orders with every association, collections included, fetch-joined.

        Returns:
            List of distinct Order entities
        """
        pass

    @abstractmethod
    async def find_page_with_batched_items(self, offset: int, limit: int) -> List[Order]:
        """Page through orders, to-ones joined and items batch loaded.

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders to return

        Returns:
            List of Order entities
        """
        pass
