"""Author use-case commands: register, change, delete."""
from __future__ import annotations

from uuid import UUID, uuid4

import structlog

from authorhub.domain.author.entities import Author
from authorhub.domain.author.repositories import IAuthorRepository
from authorhub.infrastructure.database.errors import AuthorConflictError, AuthorNotFoundError

logger = structlog.get_logger()

_UNSET = object()


class AuthorAlreadyExistsError(AuthorConflictError):
    pass


async def register_author(
    *,
    email: str,
    password_hash: str,
    username: str,
    author_repo: IAuthorRepository,
    activation_token: str | None = None,
    avatar_url: str | None = None,
) -> Author:
    """Validate a new author, check the unique columns, and insert it."""
    author = Author.create(
        id=uuid4(),
        activation_token=activation_token,
        avatar_url=avatar_url,
        email=email,
        password_hash=password_hash,
        username=username,
    )
    await _ensure_available(author, author_repo)
    author = await author_repo.insert(author)
    logger.info("author.registered", author_id=str(author.id), username=str(author.username))
    return author


async def change_author(
    author_id: UUID,
    *,
    author_repo: IAuthorRepository,
    activation_token: str | None | object = _UNSET,
    avatar_url: str | None | object = _UNSET,
    email: str | object = _UNSET,
    password_hash: str | object = _UNSET,
    username: str | object = _UNSET,
) -> Author:
    """Apply only the supplied field changes; untouched fields are not re-validated.

    ``activation_token=None`` and ``avatar_url=None`` clear those fields.
    """
    author = await author_repo.get_by_id(author_id)
    if author is None:
        raise AuthorNotFoundError(author_id)

    changed: list[str] = []
    if activation_token is not _UNSET:
        author = author.with_activation_token(activation_token)
        changed.append("activation_token")
    if avatar_url is not _UNSET:
        author = author.with_avatar_url(avatar_url)
        changed.append("avatar_url")
    if email is not _UNSET:
        author = author.with_email(email)
        changed.append("email")
    if password_hash is not _UNSET:
        author = author.with_password_hash(password_hash)
        changed.append("password_hash")
    if username is not _UNSET:
        author = author.with_username(username)
        changed.append("username")

    if not changed:
        return author
    await _ensure_available(author, author_repo)
    author = await author_repo.update(author)
    logger.info("author.changed", author_id=str(author.id), fields=changed)
    return author


async def delete_author(author_id: UUID, *, author_repo: IAuthorRepository) -> None:
    await author_repo.delete(author_id)


async def _ensure_available(author: Author, author_repo: IAuthorRepository) -> None:
    for other in await author_repo.get_by_email(str(author.email)):
        if other.id != author.id:
            raise AuthorAlreadyExistsError("Email already registered")
    other = await author_repo.get_by_username(str(author.username))
    if other is not None and other.id != author.id:
        raise AuthorAlreadyExistsError("Username already taken")
