"""Declarative base for all ORM models."""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase


class Base(AsyncAttrs, DeclarativeBase):
    """
    Declarative base.

    AsyncAttrs adds ``awaitable_attrs`` so a lazy association can be
    loaded explicitly from async code (``await order.awaitable_attrs.member``).
    Plain attribute access to an unloaded association under AsyncSession
    raises ``MissingGreenlet``.
    """
