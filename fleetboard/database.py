"""
Async database engine and per-request sessions for the dashboard store.

PostgreSQL (asyncpg) in production, SQLite (aiosqlite) for local runs and
tests. Primary keys use SQLAlchemy's ``Uuid`` type, which maps to the native
UUID column on PostgreSQL and to CHAR(32) on SQLite.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from fleetboard.config import get_settings


def engine_options(database_url: str, debug: bool = False) -> Dict[str, Any]:
    """
    Engine keyword arguments for ``database_url``.

    In-memory SQLite must share one connection across the event loop;
    server databases get a checked connection pool.
    """
    url = make_url(database_url)
    options: Dict[str, Any] = {"echo": debug}

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True
        options["pool_size"] = 10
        options["max_overflow"] = 20
    return options


settings = get_settings()

engine = create_async_engine(
    settings.database_url,
    **engine_options(settings.database_url, settings.debug),
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base shared by every dashboard table."""
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session dependency.
    The handler's changes are committed when it returns and rolled back if it raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create any missing dashboard tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
