"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderSearch

from ..models import Member, Order, OrderItem


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def find_one(self, order_id: int) -> Optional[Order]:
        return await self._session.get(Order, order_id)

    async def find_all_by_search(
        self, search: OrderSearch, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """List orders matching the search.

        Only the ``orders`` rows are loaded. Member, delivery and items
        each cost one more query per order once touched.

        Args:
            search: Member name / status filters
            offset: Number of orders to skip
            limit: Maximum number of orders to return (None for all)

        Returns:
            List of Order entities ordered by id
        """
        logger.info(f"Finding orders by search: {search}")

        stmt = select(Order).order_by(Order.id)

        if search.order_status is not None:
            stmt = stmt.where(Order.status == search.order_status)

        if search.member_name is not None:
            # Plain join for filtering; Order.member stays unloaded
            stmt = stmt.join(Order.member).where(
                Member.name.contains(search.member_name, autoescape=True)
            )

        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        orders = result.scalars().all()

        logger.info(f"✅ Found {len(orders)} orders (associations lazy)")
        return list(orders)

    async def find_all_with_member_delivery(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[Order]:
        """List orders with member and delivery fetch-joined in one query.

        To-one joins never multiply rows, so offset/limit stay correct.

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders to return (None for all)

        Returns:
            List of Order entities ordered by id
        """
        stmt = (
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
            )
            .order_by(Order.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        orders = result.scalars().all()

        logger.info(f"✅ Found {len(orders)} orders with member/delivery (offset={offset}, limit={limit})")
        return list(orders)

    async def find_all_with_items(self) -> List[Order]:
        """List orders with every association fetch-joined in one query.

        The order_items join repeats each order row once per item;
        ``unique()`` collapses them back to one Order per identity. The
        multiplied rows are why this finder takes no offset/limit.

        Returns:
            List of distinct Order entities ordered by id
        """
        result = await self._session.execute(
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                joinedload(Order.order_items).joinedload(OrderItem.item),
            )
            .order_by(Order.id)
        )
        orders = result.unique().scalars().all()

        logger.info(f"✅ Found {len(orders)} distinct orders with items (single fetch join)")
        return list(orders)

    async def find_page_with_batched_items(self, offset: int, limit: int) -> List[Order]:
        """Page through orders, to-ones joined and items batch loaded.

        The page query joins only to-one associations; order items and
        their items then arrive through IN-list queries keyed on the
        page's ids, one query per association instead of one per order.

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders to return

        Returns:
            List of Order entities ordered by id
        """
        result = await self._session.execute(
            select(Order)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
            .order_by(Order.id)
            .offset(offset)
            .limit(limit)
        )
        orders = result.scalars().all()

        logger.info(f"✅ Found {len(orders)} orders (offset={offset}, limit={limit}) with batched items")
        return list(orders)
