from typing import List

from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """
    HTTP API settings.
    Loaded automatically from the environment with prefix API_*
    """

    title: str = "jpashop - Order Query API"
    version: str = "1.0.0"
    log_level: str = "INFO"

    # Insert the sample members/orders on startup when the database is empty
    seed_data: bool = True

    default_page_limit: int = 100
    max_page_limit: int = 1000

    cors_origins: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    model_config = {
        "env_prefix": "API_",
        "extra": "ignore",
    }
