"""Wiring: settings-driven logging and a facade bound to one database session."""
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from authorhub.config import Settings, get_settings
from authorhub.infrastructure.database.connection import get_db_session
from authorhub.infrastructure.logging import configure_from_settings
from authorhub.interfaces.facade import AuthorFacade


def bootstrap(settings: Settings | None = None) -> Settings:
    settings = settings or get_settings()
    configure_from_settings(settings)
    return settings


@asynccontextmanager
async def author_facade() -> AsyncGenerator[AuthorFacade, None]:
    """Yield a facade whose work commits on exit and rolls back on error."""
    # Lazy import keeps the repository's SQLAlchemy models out of plain domain imports
    from authorhub.infrastructure.database.repositories.author import AuthorRepository

    async with get_db_session() as session:
        yield AuthorFacade(author_repo=AuthorRepository(session))
