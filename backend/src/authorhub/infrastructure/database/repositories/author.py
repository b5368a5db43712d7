"""Concrete SQLAlchemy repository for the author table."""
from uuid import UUID

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authorhub.domain.author.entities import Author
from authorhub.domain.author.errors import AuthorValidationError
from authorhub.domain.author.sanitize import sanitize_text
from authorhub.infrastructure.database.errors import (
    AuthorConflictError,
    AuthorNotFoundError,
    CorruptRowError,
    InvalidSearchError,
)
from authorhub.infrastructure.database.models.author import AuthorModel

logger = structlog.get_logger()

_LIKE_ESCAPE = "\\"


class AuthorRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, author: Author) -> Author:
        self._session.add(
            AuthorModel(
                id=author.id,
                activation_token=_optional_str(author.activation_token),
                avatar_url=_optional_str(author.avatar_url),
                email=str(author.email),
                password_hash=str(author.password_hash),
                username=str(author.username),
            )
        )
        await self._flush(author.id)
        logger.info("author.inserted", author_id=str(author.id))
        return author

    async def update(self, author: Author) -> Author:
        existing = await self._session.get(AuthorModel, author.id)
        if existing is None:
            raise AuthorNotFoundError(author.id)
        existing.activation_token = _optional_str(author.activation_token)
        existing.avatar_url = _optional_str(author.avatar_url)
        existing.email = str(author.email)
        existing.password_hash = str(author.password_hash)
        existing.username = str(author.username)
        await self._flush(author.id)
        logger.info("author.updated", author_id=str(author.id))
        return author

    async def delete(self, author_id: UUID) -> None:
        result = await self._session.execute(delete(AuthorModel).where(AuthorModel.id == author_id))
        await self._session.flush()
        logger.info("author.deleted", author_id=str(author_id), rows=result.rowcount)

    async def get_by_id(self, author_id: UUID) -> Author | None:
        result = await self._session.get(AuthorModel, author_id)
        return _to_author(result) if result else None

    async def get_by_email(self, email: str) -> list[Author]:
        stmt = select(AuthorModel).where(AuthorModel.email == email.strip())
        result = await self._session.execute(stmt)
        return [_to_author(r) for r in result.scalars()]

    async def get_by_username(self, username: str) -> Author | None:
        stmt = select(AuthorModel).where(AuthorModel.username == username.strip())
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        return _to_author(row) if row else None

    async def search_by_username(self, fragment: str) -> list[Author]:
        """Authors whose username contains ``fragment``, with LIKE wildcards taken literally."""
        fragment = sanitize_text(fragment.strip()).strip()
        if not fragment:
            raise InvalidSearchError("Search text is empty or invalid")
        escaped = (
            fragment.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
            .replace("%", _LIKE_ESCAPE + "%")
            .replace("_", _LIKE_ESCAPE + "_")
        )
        stmt = (
            select(AuthorModel)
            .where(AuthorModel.username.like(f"%{escaped}%", escape=_LIKE_ESCAPE))
            .order_by(AuthorModel.username)
        )
        result = await self._session.execute(stmt)
        return [_to_author(r) for r in result.scalars()]

    async def list_all(self) -> list[Author]:
        result = await self._session.execute(select(AuthorModel).order_by(AuthorModel.username))
        return [_to_author(r) for r in result.scalars()]

    async def _flush(self, author_id: UUID) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            logger.warning("author.conflict", author_id=str(author_id))
            raise AuthorConflictError("Email or username already taken") from exc


# ── Mappers ───────────────────────────────────────────────────────────────────

def _optional_str(value) -> str | None:
    return str(value) if value is not None else None


def _to_author(m: AuthorModel) -> Author:
    try:
        return Author.create(
            id=m.id,
            activation_token=m.activation_token,
            avatar_url=m.avatar_url,
            email=m.email,
            password_hash=m.password_hash,
            username=m.username,
        )
    except AuthorValidationError as exc:
        logger.error("author.corrupt_row", author_id=str(m.id), field=exc.field, kind=exc.kind.value)
        raise CorruptRowError(f"Stored author {m.id} is invalid: {exc}") from exc
