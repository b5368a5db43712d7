"""Repository contract for the Author bounded context."""
from typing import Protocol
from uuid import UUID

from .entities import Author


class IAuthorRepository(Protocol):
    async def insert(self, author: Author) -> Author: ...

    async def update(self, author: Author) -> Author: ...

    async def delete(self, author_id: UUID) -> None: ...

    async def get_by_id(self, author_id: UUID) -> Author | None: ...

    async def get_by_email(self, email: str) -> list[Author]: ...

    async def get_by_username(self, username: str) -> Author | None: ...

    async def search_by_username(self, fragment: str) -> list[Author]: ...

    async def list_all(self) -> list[Author]: ...
