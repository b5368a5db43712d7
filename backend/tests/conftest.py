"""
Shared pytest fixtures for authorhub tests.

Repository and application tests run against an in-memory SQLite database
(aiosqlite) whose schema is created from the ORM metadata.
"""

import os
from uuid import UUID

# Settings require a database URL; point everything at in-memory SQLite
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from authorhub.domain.author.entities import Author
from authorhub.infrastructure.database.connection import Base
from authorhub.infrastructure.database import models  # noqa: F401
from authorhub.infrastructure.database.repositories.author import AuthorRepository


AUTHOR_ID = "f7286cc1-5d88-4a91-844e-588cbb940c67"
ACTIVATION_TOKEN = "f6cac5f10e4d14bf1cf85cfec2a0a24c"
AVATAR_URL = "https://creativeimagelicensing.com/how-to-find-non-copyrighted-pictures/"
EMAIL = "audialb@yahoo.com"
PASSWORD_HASH = (
    "4a21312be53b16e88c5f78bcfddd16058f773cbc15ead7985b4dcb967dc85c698"
    "fcd080fe5ff93a9399c2003084abc3d8"
)
USERNAME = "audialb"


def make_author(**overrides) -> Author:
    """Build a valid Author, replacing any raw field given as a keyword."""
    values = {
        "id": UUID(AUTHOR_ID),
        "activation_token": ACTIVATION_TOKEN,
        "avatar_url": AVATAR_URL,
        "email": EMAIL,
        "password_hash": PASSWORD_HASH,
        "username": USERNAME,
    }
    values.update(overrides)
    return Author.create(**values)


@pytest.fixture
def author() -> Author:
    return make_author()


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repo(session) -> AuthorRepository:
    return AuthorRepository(session)
