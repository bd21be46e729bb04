"""Unit of Work scoping one session for a block of repository calls."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import (
    OrderQueryRepository,
    OrderSimpleQueryRepository,
    SqlAlchemyOrderRepository,
)


class UnitOfWork:
    """
    Unit of Work pattern for session-bounded work.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Lazy initialization of repositories sharing that session
    3. Rollback on error, close always

    Anything lazy must be loaded before the block exits; after that the
    entities are detached and touching an unloaded association raises.
    """

    def __init__(self, session_factory: async_sessionmaker, batch_size: int = 100) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
            batch_size: IN-list size for batched item queries
        """
        self._session_factory = session_factory
        self._batch_size = batch_size
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._order_query_repository: Optional[OrderQueryRepository] = None
        self._order_simple_query_repository: Optional[OrderSimpleQueryRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start session scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then close."""
        if exc_type is not None:
            await self._session.rollback()
        await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository.

        Returns:
            SqlAlchemyOrderRepository instance
        """
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session)
        return self._order_repository

    @property
    def order_queries(self) -> OrderQueryRepository:
        """Lazy-load order projection repository.

        Returns:
            OrderQueryRepository instance
        """
        if self._order_query_repository is None:
            self._order_query_repository = OrderQueryRepository(
                self.session, batch_size=self._batch_size
            )
        return self._order_query_repository

    @property
    def simple_order_queries(self) -> OrderSimpleQueryRepository:
        if self._order_simple_query_repository is None:
            self._order_simple_query_repository = OrderSimpleQueryRepository(self.session)
        return self._order_simple_query_repository

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker, batch_size: int = 100) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory
        batch_size: IN-list size for batched item queries

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory, batch_size=batch_size)
