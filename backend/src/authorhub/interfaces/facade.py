"""AuthorFacade: the single entry point to the application layer.

Callers go through this facade instead of calling application functions
directly, so the outer layer never holds a repository itself.
"""
from __future__ import annotations

from uuid import UUID

from authorhub.application.author import commands as author_commands
from authorhub.application.author import queries as author_queries
from authorhub.domain.author.entities import Author
from authorhub.domain.author.value_objects import parse_author_id
from authorhub.interfaces.schemas.author import AuthorResponse


class AuthorFacade:
    def __init__(self, author_repo) -> None:
        self._author_repo = author_repo

    # ── Commands ──────────────────────────────────────────────────────────────

    async def register(
        self, email: str, password_hash: str, username: str,
        activation_token: str | None = None, avatar_url: str | None = None,
    ) -> Author:
        return await author_commands.register_author(
            email=email, password_hash=password_hash, username=username,
            activation_token=activation_token, avatar_url=avatar_url,
            author_repo=self._author_repo,
        )

    async def change(self, author_id: UUID | str, **changes) -> Author:
        return await author_commands.change_author(
            parse_author_id(author_id), author_repo=self._author_repo, **changes
        )

    async def delete(self, author_id: UUID | str) -> None:
        await author_commands.delete_author(
            parse_author_id(author_id), author_repo=self._author_repo
        )

    # ── Queries ───────────────────────────────────────────────────────────────

    async def get(self, author_id: UUID | str) -> Author | None:
        return await author_queries.get_author_by_id(author_id, self._author_repo)

    async def find_by_email(self, email: str) -> list[Author]:
        return await author_queries.get_authors_by_email(email, self._author_repo)

    async def search(self, fragment: str) -> list[Author]:
        return await author_queries.search_authors(fragment, self._author_repo)

    async def list_all(self) -> list[Author]:
        return await author_queries.list_authors(self._author_repo)

    # ── Serialization ─────────────────────────────────────────────────────────

    @staticmethod
    def to_public(author: Author) -> dict:
        """JSON-ready representation; never carries the password hash."""
        return AuthorResponse.from_entity(author).model_dump(mode="json")
