"""
Projection queries for the order read model.

Nothing here returns entities: every query selects exactly the columns
the response needs and the rows go straight into query DTOs, so there is
no lazy association to trip over.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.base import AddressDto
from core.application.dtos.order_query_dto import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)

from ..models import Delivery, Item, Member, Order, OrderItem


logger = logging.getLogger(__name__)


class OrderQueryRepository:
    """Hand-written projections of orders and their items."""

    def __init__(self, session: AsyncSession, batch_size: int = 100) -> None:
        """Initialize repository.

        Args:
            session: SQLAlchemy async session
            batch_size: Max order ids per IN-list when batch loading items
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got: {batch_size}")
        self._session = session
        self._batch_size = batch_size

    async def find_order_query_dtos(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[OrderQueryDto]:
        """Orders plus one item query per order (1 + N).

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders (None for all)

        Returns:
            List of OrderQueryDto ordered by order id
        """
        orders = await self._find_orders(offset, limit)

        result = []
        for order in orders:
            items = await self._find_order_items(order.order_id)
            result.append(order.model_copy(update={"order_items": items}))

        logger.info(f"✅ Projected {len(result)} orders, {1 + len(orders)} queries")
        return result

    async def find_all_by_dto_optimization(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> List[OrderQueryDto]:
        """Orders plus one batched item query for all of them (1 + 1).

        Args:
            offset: Number of orders to skip
            limit: Maximum number of orders (None for all)

        Returns:
            List of OrderQueryDto ordered by order id
        """
        orders = await self._find_orders(offset, limit)
        item_map = await self._find_order_item_map([order.order_id for order in orders])

        result = [
            order.model_copy(update={"order_items": item_map.get(order.order_id, [])})
            for order in orders
        ]

        logger.info(f"✅ Projected {len(result)} orders with batched items")
        return result

    async def find_all_by_dto_flat(self) -> List[OrderFlatDto]:
        """Orders joined down to items in a single query.

        One row per order line; order columns repeat on every row of the
        same order. Outer joins: an order without lines still produces one
        row, with the line columns set to None.

        Returns:
            List of OrderFlatDto ordered by order id, then order line id
        """
        result = await self._session.execute(
            select(
                Order.id.label("order_id"),
                Member.name.label("name"),
                Order.order_date,
                Order.status.label("order_status"),
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .outerjoin(Order.order_items)
            .outerjoin(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )

        flats = [
            OrderFlatDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=AddressDto(city=row.city, street=row.street, zipcode=row.zipcode),
                item_name=row.item_name,
                order_price=row.order_price,
                count=row.count,
            )
            for row in result
        ]

        logger.info(f"✅ Fetched {len(flats)} flat order rows")
        return flats

    async def _find_orders(self, offset: int, limit: Optional[int]) -> List[OrderQueryDto]:
        stmt = (
            select(
                Order.id.label("order_id"),
                Member.name.label("name"),
                Order.order_date,
                Order.status.label("order_status"),
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        return [
            OrderQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=AddressDto(city=row.city, street=row.street, zipcode=row.zipcode),
            )
            for row in result
        ]

    async def _find_order_items(self, order_id: int) -> List[OrderItemQueryDto]:
        result = await self._session.execute(
            self._order_items_stmt().where(OrderItem.order_id == order_id)
        )
        return [self._row_to_item(row) for row in result]

    async def _find_order_item_map(
        self, order_ids: Sequence[int]
    ) -> Dict[int, List[OrderItemQueryDto]]:
        item_map: Dict[int, List[OrderItemQueryDto]] = defaultdict(list)

        for start in range(0, len(order_ids), self._batch_size):
            chunk = order_ids[start:start + self._batch_size]
            result = await self._session.execute(
                self._order_items_stmt().where(OrderItem.order_id.in_(chunk))
            )
            for row in result:
                item_map[row.order_id].append(self._row_to_item(row))

        return item_map

    @staticmethod
    def _order_items_stmt() -> Select:
        return (
            select(
                OrderItem.order_id,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count,
            )
            .select_from(OrderItem)
            .join(OrderItem.item)
            .order_by(OrderItem.order_id, OrderItem.id)
        )

    @staticmethod
    def _row_to_item(row) -> OrderItemQueryDto:
        return OrderItemQueryDto(
            order_id=row.order_id,
            item_name=row.item_name,
            order_price=row.order_price,
            count=row.count,
        )
