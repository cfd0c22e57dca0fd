"""Database configuration and session management."""

import logging
import typing as t

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

LOGGER: logging.Logger = logging.getLogger(__name__)


class Base(DeclarativeBase):  # pylint: disable=too-few-public-methods
    """Base class for all database models."""


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions.

    One instance is created by the application lifespan and disposed at
    shutdown; request handlers receive it through ``get_db``.
    """

    engine: AsyncEngine
    session_maker: async_sessionmaker[AsyncSession]

    def __init__(self, database_url: str, echo: bool = False) -> None:
        """Initialize DatabaseSessionManager.

        Args:
            database_url (str): SQLAlchemy async database URL.
            echo (bool): Whether to log emitted SQL.
        """
        self.engine = create_async_engine(database_url, echo=echo)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """Check that the database answers a trivial query.

        Returns:
            bool: True when the database is reachable.
        """
        async with self.session_maker() as session:
            await session.execute(text("SELECT 1"))
        return True

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()


def get_session_manager(request: Request) -> DatabaseSessionManager:
    """Return the session manager installed by the application lifespan.

    Args:
        request (Request): The incoming request.

    Returns:
        DatabaseSessionManager: The process-wide session manager.
    """
    manager: DatabaseSessionManager | None = getattr(
        request.app.state, "database", None
    )
    if manager is None:
        raise RuntimeError("Database has not been initialized")
    return manager


async def get_db(request: Request) -> t.AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session.

    The whole request runs in one transaction: it is committed when the
    handler returns and rolled back when anything raises. Routes declare it
    with ``scope="function"`` so the commit happens before the response is
    sent and a failed commit still reaches the storage error handler.

    Args:
        request (Request): The incoming request.

    Yields:
        AsyncSession: An asynchronous database session.
    """
    async with get_session_manager(request).session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
