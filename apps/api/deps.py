"""FastAPI dependencies for dependency injection."""

from pathlib import Path
from typing import AsyncGenerator

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.application.services.order_query_service import OrderQueryService
from core.data.repositories import (
    OrderQueryRepository,
    OrderSimpleQueryRepository,
    SqlAlchemyOrderRepository,
)
from core.infrastructure.database.config import get_session_factory
from core.settings import get_app_settings


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get the request-scoped SQLAlchemy session.

    FastAPI caches this per request, so every repository of one request
    shares the session, and the session stays open until the response
    has been produced.

    Yields:
        AsyncSession instance
    """
    async with get_session_factory()() as session:
        yield session


def get_order_repository(
    session: AsyncSession = Depends(get_session),
) -> SqlAlchemyOrderRepository:
    """Get SqlAlchemyOrderRepository bound to the request session.

    Returns:
        SqlAlchemyOrderRepository instance
    """
    return SqlAlchemyOrderRepository(session)


def get_order_query_repository(
    session: AsyncSession = Depends(get_session),
) -> OrderQueryRepository:
    """Get OrderQueryRepository bound to the request session.

    Returns:
        OrderQueryRepository instance
    """
    return OrderQueryRepository(
        session, batch_size=get_app_settings().database.batch_fetch_size
    )


def get_order_simple_query_repository(
    session: AsyncSession = Depends(get_session),
) -> OrderSimpleQueryRepository:
    return OrderSimpleQueryRepository(session)


def get_order_query_service() -> OrderQueryService:
    """Get OrderQueryService instance (opens its own sessions).

    Returns:
        OrderQueryService instance
    """
    return OrderQueryService(
        get_session_factory(), batch_size=get_app_settings().database.batch_fetch_size
    )
