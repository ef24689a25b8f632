# vaultkeep/app/db/session.py
"""
Async database handle for SQLAlchemy.

The engine is not a module global: a ``Database`` is opened in the
application lifespan, kept on ``app.state.database`` and disposed at
shutdown. Request handlers get a session through ``get_db``.

- asyncpg for PostgreSQL (production)
- aiosqlite for SQLite (local development, tests)
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, AsyncAdaptedQueuePool

from vaultkeep.app.core.config import Settings


def _create_async_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    SQLite (local development):
    - NullPool, one connection per session
    - check_same_thread=False for async compatibility

    PostgreSQL (production):
    - AsyncAdaptedQueuePool, pool_size=5, max_overflow=10
    - pool_pre_ping=True to drop stale connections
    - pool_recycle=300, hosted databases close idle connections
    """
    if "sqlite" in url.lower():
        return create_async_engine(
            url,
            echo=echo,
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
        )

    return create_async_engine(
        url,
        echo=echo,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=300,
    )


class Database:
    """Owns the engine and the session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    def open(self) -> "Database":
        if self.engine is None:
            self.engine = _create_async_engine(self.url, echo=self.echo)
            # expire_on_commit=False: attributes stay readable after commit
            # autoflush=False: writes only happen on explicit flush/commit
            self.sessionmaker = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self

    async def create_all(self) -> None:
        """Create every table registered on ``Base.metadata``."""
        # Registers the models on Base.metadata
        from vaultkeep.app import models  # noqa: F401
        from vaultkeep.app.db.base import Base

        self.open()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()
        self.engine = None
        self.sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self.sessionmaker is None:
            raise RuntimeError("Database is not open")
        async with self.sessionmaker() as session:
            yield session


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Usage in FastAPI endpoints:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...

    One session per request, closed when the request finishes (also on
    error). Nothing is committed automatically: the store commits.
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
