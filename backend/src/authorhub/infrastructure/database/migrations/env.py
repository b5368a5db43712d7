"""Alembic environment: runs migrations over the application's async engine."""
import asyncio

from alembic import context
from sqlalchemy.engine import Connection

from authorhub.infrastructure.database import models  # noqa: F401  registers the mappers
from authorhub.infrastructure.database.connection import Base, dispose_engine, get_engine

target_metadata = Base.metadata


def _run(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _run_online() -> None:
    async with get_engine().connect() as connection:
        await connection.run_sync(_run)
    await dispose_engine()


if context.is_offline_mode():
    context.configure(
        url=str(get_engine().url),
        target_metadata=target_metadata,
        literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_run_online())
