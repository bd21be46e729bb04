"""Database infrastructure."""

from .config import (
    close_database,
    create_engine,
    create_session_factory,
    get_engine,
    get_session_factory,
    init_database,
)
from .seed import build_sample_orders, seed_sample_data

__all__ = [
    "build_sample_orders",
    "close_database",
    "create_engine",
    "create_session_factory",
    "get_engine",
    "get_session_factory",
    "init_database",
    "seed_sample_data",
]
