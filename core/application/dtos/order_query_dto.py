"""DTOs filled straight from projection queries (V4, V5, V6 and simple V4)."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.domain.enums import OrderStatus

from .base import AddressDto, ApiModel


class OrderItemQueryDto(ApiModel):
    """Projected order line."""

    # Grouping key only, not part of the response body
    order_id: Optional[int] = Field(default=None, exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(ApiModel):
    """Projected order with its lines."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto
    order_items: List[OrderItemQueryDto] = Field(default_factory=list)


class OrderFlatDto(ApiModel):
    """
    One row of the single-query flat join.

    Order columns repeat once per order line; the row-to-tree regrouping
    folds them back into OrderQueryDto. An order without lines comes back
    as a single row whose line fields are None.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto

    item_name: Optional[str] = None
    order_price: Optional[int] = None
    count: Optional[int] = None


class OrderSimpleQueryDto(ApiModel):
    """Projected order with to-one data only."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressDto
