"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from userbase.config import get_settings
from userbase.db import DbClient, InMemoryDbClient, SqlDbClient

logger = logging.getLogger(__name__)

_db_client: DbClient | None = None


def get_db_client() -> DbClient:
    """
    Return a singleton DB client so stored users persist across requests.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory user store")
        _db_client = InMemoryDbClient()
    else:
        logger.info("Using SQL user store")
        _db_client = SqlDbClient(settings.database_url)
    return _db_client


def reset_db_client() -> None:
    """Drop the cached client so the next call re-reads settings."""
    global _db_client
    _db_client = None
