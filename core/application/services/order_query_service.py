"""Query service that owns its session (open-session-in-view off)."""

import logging
from typing import List

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import OrderDto
from core.data.uow import create_uow


logger = logging.getLogger(__name__)


class OrderQueryService:
    """
    Application service for order read models.

    Responsibilities:
    - Open and close its own unit of work
    - Load and map everything while that session is open
    - Hand back finished DTOs, so the caller never sees an entity
    """

    def __init__(self, session_factory: async_sessionmaker, batch_size: int = 100) -> None:
        """Initialize order query service.

        Args:
            session_factory: SQLAlchemy async session factory
            batch_size: IN-list size for batched item queries
        """
        self._session_factory = session_factory
        self._batch_size = batch_size

    async def orders_v3_osiv(self) -> List[OrderDto]:
        """Fetch-join orders with items and map them inside the service.

        Returns:
            List of OrderDto ordered by order id
        """
        async with create_uow(self._session_factory, batch_size=self._batch_size) as uow:
            orders = await uow.orders.find_all_with_items()
            dtos = [OrderDto.from_entity(order) for order in orders]

        logger.info(f"✅ Mapped {len(dtos)} orders before closing the session")
        return dtos
