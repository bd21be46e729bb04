"""Projection of orders with their to-one associations only."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.base import AddressDto
from core.application.dtos.order_query_dto import OrderSimpleQueryDto

from ..models import Delivery, Member, Order


logger = logging.getLogger(__name__)


class OrderSimpleQueryRepository:
    """
    Selects straight into OrderSimpleQueryDto.

    Lighter on the wire than fetching entities, but the query is shaped
    by one API response and is hard to reuse elsewhere.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_order_dtos(self) -> List[OrderSimpleQueryDto]:
        result = await self._session.execute(
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
        )

        dtos = [
            OrderSimpleQueryDto(
                order_id=row.order_id,
                name=row.name,
                order_date=row.order_date,
                order_status=row.order_status,
                address=AddressDto(city=row.city, street=row.street, zipcode=row.zipcode),
            )
            for row in result
        ]

        logger.info(f"✅ Projected {len(dtos)} simple orders")
        return dtos
