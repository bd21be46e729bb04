"""Row and entity mappers for the order read models."""

from typing import Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from core.application.dtos.order_query_dto import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)

E = TypeVar("E")
D = TypeVar("D")


def regroup_order_flats(flats: Iterable[OrderFlatDto]) -> List[OrderQueryDto]:
    """Fold flat join rows (one per order line) back into order trees.

    Rows are grouped by (order id, name, order date, status, address);
    each row contributes one item to its group, except a row without a
    line (an order with no items), which only opens the group. Groups
    keep the order in which their first row was seen and items keep row
    order, so the same rows always produce the same result.

    Args:
        flats: Rows from the flat join query

    Returns:
        One OrderQueryDto per distinct order
    """
    grouped: Dict[Tuple, List[OrderItemQueryDto]] = {}

    for flat in flats:
        key = (flat.order_id, flat.name, flat.order_date, flat.order_status, flat.address)
        items = grouped.setdefault(key, [])
        if flat.item_name is None:
            # Order without lines
            continue
        items.append(
            OrderItemQueryDto(
                order_id=flat.order_id,
                item_name=flat.item_name,
                order_price=flat.order_price,
                count=flat.count,
            )
        )

    return [
        OrderQueryDto(
            order_id=order_id,
            name=name,
            order_date=order_date,
            order_status=order_status,
            address=address,
            order_items=items,
        )
        for (order_id, name, order_date, order_status, address), items in grouped.items()
    ]


async def map_in_session(
    session: AsyncSession,
    entities: Sequence[E],
    mapper: Callable[[E], D],
) -> List[D]:
    """Map entities whose associations are still lazy.

    The mapper runs through ``AsyncSession.run_sync``, i.e. inside the
    session's greenlet, where touching an unloaded association emits its
    SELECT instead of raising ``MissingGreenlet``. One query per
    association per entity: this is the N+1 path.

    Args:
        session: Session the entities are attached to
        entities: Entities to convert
        mapper: Pure field-copy function

    Returns:
        Mapped DTOs, in input order
    """
    return await session.run_sync(lambda _sync_session: [mapper(entity) for entity in entities])
