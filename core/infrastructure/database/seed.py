"""
Sample data.

Two members, each with one order of two books. Runs on startup when
enabled and the database holds no orders yet.
"""
from datetime import datetime
from typing import List, Optional
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.data.models import Book, Delivery, Member, Order, OrderItem
from core.domain.value_objects import Address


logger = logging.getLogger(__name__)


def _book(name: str, price: int, stock_quantity: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock_quantity)


def build_sample_orders(order_date: Optional[datetime] = None) -> List[Order]:
    """
    Build the sample order graphs (transient, not yet added to a session).

    Returns:
        Orders for userA (JPA1/JPA2 BOOK) and userB (SPRING1/SPRING2 BOOK)
    """
    member_a = Member.create("userA", Address("Seoul", "1", "1111"))
    jpa1 = _book("JPA1 BOOK", 10000, 100)
    jpa2 = _book("JPA2 BOOK", 20000, 100)
    order_a = Order.create(
        member_a,
        Delivery.create(member_a.address),
        OrderItem.create(jpa1, 10000, 1),
        OrderItem.create(jpa2, 20000, 2),
        order_date=order_date,
    )

    member_b = Member.create("userB", Address("Busan", "2", "2222"))
    spring1 = _book("SPRING1 BOOK", 20000, 200)
    spring2 = _book("SPRING2 BOOK", 40000, 300)
    order_b = Order.create(
        member_b,
        Delivery.create(member_b.address),
        OrderItem.create(spring1, 20000, 3),
        OrderItem.create(spring2, 40000, 4),
        order_date=order_date,
    )

    return [order_a, order_b]


async def seed_sample_data(session_factory: async_sessionmaker[AsyncSession]) -> bool:
    """
    Insert the sample orders if the orders table is empty.

    Args:
        session_factory: Session factory to write through

    Returns:
        True if data was inserted, False if orders already existed
    """
    async with session_factory() as session:
        async with session.begin():
            existing = await session.scalar(select(func.count()).select_from(Order))
            if existing:
                logger.info(f"Skipping sample data: {existing} orders already present")
                return False

            # Member, delivery, items and order lines cascade from each order
            session.add_all(build_sample_orders())

    logger.info("✅ Sample data inserted (userA, userB)")
    return True
