"""Pydantic v2 schema for the public representation of an author."""
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from authorhub.domain.author.entities import Author


class AuthorResponse(BaseModel):
    """Every author field except the password hash."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    activation_token: str | None
    avatar_url: str | None
    email: str
    username: str

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorResponse":
        return cls(
            id=author.id,
            activation_token=str(author.activation_token) if author.activation_token else None,
            avatar_url=str(author.avatar_url) if author.avatar_url else None,
            email=str(author.email),
            username=str(author.username),
        )
