"""Database engine, session factory and request session dependency."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from my_movie_list.config import get_settings


class Base(DeclarativeBase):
    """Base class for the user and watchlist tables."""

    pass


def engine_options(database_url: str) -> dict[str, Any]:
    """Extra create_async_engine arguments for the given URL.

    An in-memory SQLite database only lives as long as its connection, so
    every session must share one connection.
    """
    if not database_url.startswith("sqlite"):
        return {}
    options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in database_url:
        options["poolclass"] = StaticPool
    return options


def make_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(database_url, echo=echo, **engine_options(database_url))


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Records are validated from ORM rows after commit, so rows must stay loaded
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


async def create_tables(bind: AsyncEngine) -> None:
    """Create any missing tables. Deployed databases use Alembic instead."""
    from my_movie_list import models  # noqa: F401 - registers tables on Base.metadata

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


settings = get_settings()

engine = make_engine(settings.database_url, echo=settings.debug)
async_session = make_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession]:
    """Dependency that provides an async database session.

    Stores commit each write on their own, so the session is only rolled
    back here when a request fails between writes.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
