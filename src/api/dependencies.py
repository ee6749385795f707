"""
FastAPI dependency injection providers.
"""

from __future__ import annotations

import logging
import time
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import text

from ..config import Settings, get_settings
from ..db.client import DatabaseClient

LOGGER = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Type Aliases for Dependency Injection
# -----------------------------------------------------------------------------

SettingsDep = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Database Client
# -----------------------------------------------------------------------------


def get_db_client(request: Request) -> DatabaseClient:
    """Provide the DatabaseClient the lifespan attached to app state."""
    return request.app.state.db


DbClientDep = Annotated[DatabaseClient, Depends(get_db_client)]


# -----------------------------------------------------------------------------
# Health Check Helpers
# -----------------------------------------------------------------------------


async def check_database_health(client: DatabaseClient) -> tuple[bool, float]:
    """Check database connectivity and return (healthy, latency_ms)."""
    start = time.perf_counter()
    try:
        async with client.session() as session:
            await session.execute(text("SELECT 1"))
        latency = (time.perf_counter() - start) * 1000
        return True, latency
    except Exception as exc:
        LOGGER.error("Database health check failed: %s", exc)
        latency = (time.perf_counter() - start) * 1000
        return False, latency


__all__ = [
    "DbClientDep",
    "SettingsDep",
    "check_database_health",
    "get_db_client",
]
