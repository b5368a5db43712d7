"""SQLAlchemy 2.0 async engine and session factory."""
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from authorhub.config import get_settings

logger = structlog.get_logger()


class Base(DeclarativeBase):
    pass


def _build_engine() -> AsyncEngine:
    settings = get_settings()
    url = make_url(settings.database_url)
    options: dict = {"echo": settings.is_development and settings.debug}
    # SQLite uses a single-connection pool; sizing only applies to server databases
    if url.get_backend_name() != "sqlite":
        options.update(pool_size=5, max_overflow=10, pool_pre_ping=True)
    logger.debug("database.engine_created", backend=url.get_backend_name())
    return create_async_engine(url, **options)


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = _build_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            bind=get_engine(),
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    factory = get_session_factory()
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception as exc:
            await session.rollback()
            logger.warning("database.rollback", error_type=type(exc).__name__)
            raise


async def create_schema() -> None:
    """Create every mapped table. Migrations own the schema outside of tests and local runs."""
    from authorhub.infrastructure.database import models  # noqa: F401  registers the mappers

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
