from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database connection settings.
    Loaded automatically from the environment with prefix DB_*
    """

    database_url: str = "sqlite+aiosqlite:///./jpashop.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for watching the N+1 queries)
    echo_sql: bool = False

    # Max ids per IN-list when batch loading order items
    batch_fetch_size: int = 100

    model_config = {
        "env_prefix": "DB_",
        "extra": "ignore",
    }
