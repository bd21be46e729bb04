"""
Order endpoints: orders with their member, delivery and items.

Each version answers the same question, all orders with member name,
delivery address and item lines, with a different fetch strategy.

V1.   Entities exposed directly, lazy associations force-initialized.
      The API shape is the entity shape. 1 + N + N queries.
V2.   Entities mapped to DTOs, no fetch join. Same N+1 as V1.
V3.   Entities fetch-joined down to items, mapped to DTOs. One query,
      but rows multiply per item, so no paging.
V3.1. To-ones fetch-joined, items batch loaded by IN list. Pageable.
V4.   DTO projection, one item query per order. 1 + N.
V5.   DTO projection, one item query for all orders. 1 + 1.
V6.   DTO projection, a single flat join regrouped in memory. One
      query, no paging, duplicated order columns on the wire.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.entity_views import OrderEntityView
from core.application.dtos.order_dto import OrderDto
from core.application.dtos.order_query_dto import OrderQueryDto
from core.application.mappers import map_in_session, regroup_order_flats
from core.application.services.order_query_service import OrderQueryService
from core.data.models import Order
from core.data.repositories import OrderQueryRepository, SqlAlchemyOrderRepository
from core.domain.enums import OrderStatus
from core.domain.value_objects import OrderSearch
from core.settings import get_app_settings

from apps.api.deps import (
    get_order_query_repository,
    get_order_query_service,
    get_order_repository,
    get_session,
)

router = APIRouter(prefix="/api", tags=["orders"])

_api_settings = get_app_settings().api


async def _force_initialize(order: Order) -> None:
    """Load every lazy association the entity view will read."""
    await order.awaitable_attrs.member
    await order.awaitable_attrs.delivery
    for order_item in await order.awaitable_attrs.order_items:
        await order_item.awaitable_attrs.item


@router.get("/v1/orders", response_model=List[OrderEntityView])
async def orders_v1(
    member_name: Optional[str] = Query(default=None, description="Member name contains"),
    order_status: Optional[OrderStatus] = Query(default=None, description="Order status"),
    offset: int = Query(default=0, ge=0, description="Number of orders to skip"),
    limit: Optional[int] = Query(
        default=None,
        ge=1,
        le=_api_settings.max_page_limit,
        description="Maximum number of orders to return",
    ),
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
) -> List[OrderEntityView]:
    """V1. Expose entities directly.

    Returns:
        Order entity graphs (back-references omitted)
    """
    orders = await repository.find_all_by_search(
        OrderSearch(member_name, order_status), offset=offset, limit=limit
    )
    for order in orders:
        await _force_initialize(order)
    return [OrderEntityView.model_validate(order) for order in orders]


@router.get("/v2/orders", response_model=List[OrderDto])
async def orders_v2(
    member_name: Optional[str] = Query(default=None, description="Member name contains"),
    order_status: Optional[OrderStatus] = Query(default=None, description="Order status"),
    offset: int = Query(default=0, ge=0, description="Number of orders to skip"),
    limit: Optional[int] = Query(
        default=None,
        ge=1,
        le=_api_settings.max_page_limit,
        description="Maximum number of orders to return",
    ),
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
    session: AsyncSession = Depends(get_session),
) -> List[OrderDto]:
    """V2. Map lazily loaded entities to DTOs.

    SQL executed for N orders:
    - orders: 1
    - member, delivery: N each
    - order items: N
    - item: once per distinct item
    """
    orders = await repository.find_all_by_search(
        OrderSearch(member_name, order_status), offset=offset, limit=limit
    )
    return await map_in_session(session, orders, OrderDto.from_entity)


@router.get("/v3/orders", response_model=List[OrderDto])
async def orders_v3(
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
) -> List[OrderDto]:
    """V3. Fetch-join everything, collections included, in one query."""
    orders = await repository.find_all_with_items()
    return [OrderDto.from_entity(order) for order in orders]


@router.get("/v3.1/orders", response_model=List[OrderDto])
async def orders_v3_page(
    offset: int = Query(default=0, ge=0, description="Number of orders to skip"),
    limit: int = Query(
        default=_api_settings.default_page_limit,
        ge=1,
        le=_api_settings.max_page_limit,
        description="Maximum number of orders to return",
    ),
    repository: SqlAlchemyOrderRepository = Depends(get_order_repository),
) -> List[OrderDto]:
    """V3.1. Fetch-join to-ones, batch load items, page by order.

    **Query Parameters:**
    - `offset`: Number of orders to skip (default: 0)
    - `limit`: Maximum orders to return (default: 100)
    """
    orders = await repository.find_page_with_batched_items(offset=offset, limit=limit)
    return [OrderDto.from_entity(order) for order in orders]


@router.get("/osiv/v3/orders", response_model=List[OrderDto])
async def orders_v3_osiv(
    service: OrderQueryService = Depends(get_order_query_service),
) -> List[OrderDto]:
    """V3 through a query service that closes its session before returning."""
    return await service.orders_v3_osiv()


@router.get("/v4/orders", response_model=List[OrderQueryDto])
async def orders_v4(
    repository: OrderQueryRepository = Depends(get_order_query_repository),
) -> List[OrderQueryDto]:
    """V4. Project to DTOs, one item query per order."""
    return await repository.find_order_query_dtos()


@router.get("/v5/orders", response_model=List[OrderQueryDto])
async def orders_v5(
    repository: OrderQueryRepository = Depends(get_order_query_repository),
) -> List[OrderQueryDto]:
    """V5. Project to DTOs, items for all orders in one IN-list query."""
    return await repository.find_all_by_dto_optimization()


@router.get("/v6/orders", response_model=List[OrderQueryDto])
async def orders_v6(
    repository: OrderQueryRepository = Depends(get_order_query_repository),
) -> List[OrderQueryDto]:
    """V6. One flat join, regrouped into orders by the application.

    Fewer round trips than V5 but every order column is repeated per
    item, so it can be slower on large orders. Not pageable by order.
    """
    flats = await repository.find_all_by_dto_flat()
    return regroup_order_flats(flats)
