"""Author use-case queries."""
from uuid import UUID

from authorhub.domain.author.entities import Author
from authorhub.domain.author.repositories import IAuthorRepository
from authorhub.domain.author.value_objects import parse_author_id


async def get_author_by_id(author_id: UUID | str, author_repo: IAuthorRepository) -> Author | None:
    return await author_repo.get_by_id(parse_author_id(author_id))


async def get_authors_by_email(email: str, author_repo: IAuthorRepository) -> list[Author]:
    return await author_repo.get_by_email(email)


async def search_authors(fragment: str, author_repo: IAuthorRepository) -> list[Author]:
    return await author_repo.search_by_username(fragment)


async def list_authors(author_repo: IAuthorRepository) -> list[Author]:
    return await author_repo.list_all()
