"""Persistence failures. None of these derive from the domain validation errors."""
from uuid import UUID


class AuthorPersistenceError(Exception):
    pass


class AuthorConflictError(AuthorPersistenceError):
    """A unique column (email or username) already holds the value."""


class AuthorNotFoundError(AuthorPersistenceError):
    def __init__(self, author_id: UUID) -> None:
        super().__init__(f"Author {author_id} does not exist")
        self.author_id = author_id


class CorruptRowError(AuthorPersistenceError):
    """A stored row no longer satisfies the entity's validation rules."""


class InvalidSearchError(AuthorPersistenceError):
    """A search fragment is empty once sanitized, so no query is issued."""
