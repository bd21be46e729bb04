"""
Simple order endpoints: orders with to-one associations only.

Order -> Member, Order -> Delivery.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.entity_views import SimpleOrderEntityView
from core.application.dtos.order_dto import SimpleOrderDto
from core.application.dtos.order_query_dto import OrderSimpleQueryDto
from core.application.mappers import map_in_session
from core.data.repositories import OrderSimpleQueryRepository, SqlAlchemyOrderRepository
from core.domain.value_objects import OrderSearch

from apps.api.deps import get_order_repository, get_order_simple_query_repository, get_session

router = APIRouter(prefix="/api", tags=["simple-orders"])


@router.get("/v1/simple-orders", response_model=List[SimpleOrderEntityView])
async def simple_orders_v1(
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
) -> List[SimpleOrderEntityView]:
    """V1. Expose entities, member and delivery force-initialized.

    Order items are never loaded and never serialized.
    """
    orders = await repository.find_all_by_search(OrderSearch())
    for order in orders:
        await order.awaitable_attrs.member
        await order.awaitable_attrs.delivery
    return [SimpleOrderEntityView.model_validate(order) for order in orders]


@router.get("/v2/simple-orders", response_model=List[SimpleOrderDto])
async def simple_orders_v2(
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
    session: AsyncSession = Depends(get_session),
) -> List[SimpleOrderDto]:
    """V2. Map lazily loaded entities to DTOs: 1 + N (member) + N (delivery).

    A member who placed several orders is loaded once; the identity map
    answers the repeats.
    """
    orders = await repository.find_all_by_search(OrderSearch())
    return await map_in_session(session, orders, SimpleOrderDto.from_entity)


@router.get("/v3/simple-orders", response_model=List[SimpleOrderDto])
async def simple_orders_v3(
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
) -> List[SimpleOrderDto]:
    """V3. Fetch-join member and delivery: one query."""
    orders = await repository.find_all_with_member_delivery()
    return [SimpleOrderDto.from_entity(order) for order in orders]


@router.get("/v4/simple-orders", response_model=List[OrderSimpleQueryDto])
async def simple_orders_v4(
    repository: OrderSimpleQueryRepository = Depends(get_order_simple_query_repository),
) -> List[OrderSimpleQueryDto]:
    """V4. Select straight into DTOs: one query, only the needed columns."""
    return await repository.find_order_dtos()
