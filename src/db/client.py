"""
Database client and the environment-gated accessor that hands it out.

The client is constructed lazily. Outside production it is kept in a
process-wide ``ClientContext`` so repeated application start-ups in the same
process (reloads, repeated ``create_app`` calls) reuse one engine instead of
opening a new pool each time. In production the client is built once by the
application lifespan and is never written into shared state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import Settings, get_settings

LOGGER = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], "DatabaseClient"]


class DatabaseClient:
    """Async engine plus session factory; creating one does not open a connection."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> DatabaseClient:
        """Build a client from ``settings.database_url``; a bad URL raises here."""
        url = make_url(settings.database_url)
        engine_kwargs: dict[str, Any] = {"echo": settings.database.echo}
        # SQLite engines use a static/single-connection pool without pool_size.
        if url.get_backend_name() != "sqlite":
            engine_kwargs["pool_size"] = settings.database.pool_size

        LOGGER.info(
            "Creating database client for %s",
            url.render_as_string(hide_password=True),
        )
        return cls(create_async_engine(url, **engine_kwargs))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a transactional session.

        The session is committed on success and rolled back on exception; the
        exception itself is re-raised untouched.
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        """Close pooled connections. The client stays usable and reconnects on demand."""
        await self._engine.dispose()


class ClientContext:
    """
    Holder for at most one DatabaseClient.

    ``get_or_create`` constructs under a lock with a second check, so concurrent
    first calls build exactly one client and every caller receives it.
    """

    def __init__(self) -> None:
        self._client: DatabaseClient | None = None
        self._lock = threading.Lock()

    def peek(self) -> DatabaseClient | None:
        """Return the held client without constructing one."""
        return self._client

    def get_or_create(self, factory: Callable[[], DatabaseClient]) -> DatabaseClient:
        client = self._client
        if client is not None:
            return client

        with self._lock:
            if self._client is None:
                self._client = factory()
                LOGGER.debug("Stored database client in shared context")
            return self._client

    def clear(self) -> DatabaseClient | None:
        """Forget the held client and return it (without disposing)."""
        with self._lock:
            client, self._client = self._client, None
        return client


shared_context = ClientContext()


def get_client(
    settings: Settings | None = None,
    *,
    context: ClientContext | None = None,
    factory: ClientFactory | None = None,
) -> DatabaseClient:
    """
    Return the database client for this process.

    Non-production environments cache the client in ``context`` (the shared
    context by default). Production reuses a client that is already held but
    otherwise builds a fresh one and leaves ``context`` untouched.
    """
    runtime_settings = settings or get_settings()
    holder = context if context is not None else shared_context
    build = factory or DatabaseClient.from_settings

    if runtime_settings.environment.caches_client:
        return holder.get_or_create(lambda: build(runtime_settings))

    existing = holder.peek()
    if existing is not None:
        return existing
    return build(runtime_settings)


__all__ = [
    "ClientContext",
    "ClientFactory",
    "DatabaseClient",
    "get_client",
    "shared_context",
]
