"""Order search criteria."""
from dataclasses import dataclass
from typing import Optional

from ..enums import OrderStatus


@dataclass(frozen=True)
class OrderSearch:
    """
    Optional filters for listing orders.

    Empty criteria match every order.
    """
    member_name: Optional[str] = None
    order_status: Optional[OrderStatus] = None

    def __post_init__(self):
        if self.member_name is not None and not self.member_name.strip():
            object.__setattr__(self, "member_name", None)

    @property
    def is_empty(self) -> bool:
        return self.member_name is None and self.order_status is None
