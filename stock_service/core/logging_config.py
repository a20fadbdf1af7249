# stock_service/core/logging_config.py
"""
Centralized logging configuration for the service.

Keeps the service's own loggers at the configured level while holding the
database drivers and the uvicorn access log at WARNING.
"""

import logging
from typing import Optional


def configure_logging(log_level: Optional[str] = None):
    """
    Configure logging for the service.

    - Service code: LOG_LEVEL from settings (INFO by default)
    - Database (sqlalchemy, aiosqlite, asyncpg): WARNING only
    - uvicorn access log: WARNING only
    """
    if log_level is None:
        from stock_service.core.config import get_settings
        log_level = get_settings().LOG_LEVEL
    log_level = log_level.upper()
    level = getattr(logging, log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet database loggers
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    # Request lines are noise at this volume
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("stock_service").setLevel(level)
    logging.getLogger("__main__").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at level: {log_level}")
