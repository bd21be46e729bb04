"""Pytest configuration and shared fixtures."""

from datetime import datetime
from typing import AsyncGenerator, List

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession

from apps.api.deps import get_order_query_service, get_session
from apps.api.main import app
from core.application.services.order_query_service import OrderQueryService
from core.data.models import Base, Book, Delivery, Member, Order, OrderItem
from core.domain.enums import OrderStatus
from core.domain.value_objects import Address
from core.infrastructure.database.config import (
    create_engine,
    create_session_factory,
    init_database,
)
from core.infrastructure.database.seed import seed_sample_data
from core.settings import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# What every order variant must return for the seeded data, keyed by order id
EXPECTED_ORDER_ITEMS = {
    1: [("JPA1 BOOK", 10000, 1), ("JPA2 BOOK", 20000, 2)],
    2: [("SPRING1 BOOK", 20000, 3), ("SPRING2 BOOK", 40000, 4)],
}


class QueryCounter:
    """Records every SQL statement sent to the database."""

    def __init__(self) -> None:
        self.statements: List[str] = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany) -> None:
        self.statements.append(statement)

    @property
    def count(self) -> int:
        return len(self.statements)

    def reset(self) -> None:
        self.statements.clear()


def make_order(name: str, *lines: tuple) -> Order:
    """Build a transient order for ``name`` from (item name, price, count) lines."""
    member = Member.create(name, Address("City", name, "00000"))
    order_items = [
        OrderItem.create(Book(name=item_name, price=price, stock_quantity=100), price, count)
        for item_name, price, count in lines
    ]
    return Order.create(member, Delivery.create(member.address), *order_items)


def make_order_without_items(name: str) -> Order:
    """Build a transient order with member and delivery but no lines.

    Order.create refuses this; writers outside the API can still store one,
    or empty a stored order's lines through delete-orphan.
    """
    member = Member.create(name, Address("City", name, "00000"))
    order = Order(status=OrderStatus.ORDERED, order_date=datetime.now())
    order.member = member
    order.delivery = Delivery.create(member.address)
    return order


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_engine(DatabaseSettings(database_url=TEST_DATABASE_URL))

    await init_database(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield create_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_orders(test_session_factory) -> None:
    """Insert the two sample orders (ids 1 and 2)."""
    inserted = await seed_sample_data(test_session_factory)
    assert inserted


@pytest_asyncio.fixture
async def order_without_items(test_session_factory, seeded_orders) -> int:
    """Insert a third order (id 3) that has no order lines."""
    async with test_session_factory() as session:
        order = make_order_without_items("userC")
        session.add(order)
        await session.commit()
        return order.id


@pytest.fixture
def query_counter(test_engine):
    """Count statements executed through the test engine."""
    counter = QueryCounter()
    event.listen(test_engine.sync_engine, "before_cursor_execute", counter)
    yield counter
    event.remove(test_engine.sync_engine, "before_cursor_execute", counter)


@pytest_asyncio.fixture
async def test_client(test_session_factory, seeded_orders) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Create HTTP client for the app, wired to the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with test_session_factory() as session:
            yield session

    def override_get_order_query_service() -> OrderQueryService:
        return OrderQueryService(test_session_factory)

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_order_query_service] = override_get_order_query_service

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # Cleanup
    app.dependency_overrides.clear()
