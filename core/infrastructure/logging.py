"""
Logging infrastructure.

Provides logging setup for the application.
"""
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for the process.

    SQL statements are logged by the engine itself when ``DB_ECHO_SQL``
    is set.

    Args:
        level: Root log level name
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
