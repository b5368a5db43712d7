"""Domain entity for the Author bounded context."""
from __future__ import annotations

from dataclasses import dataclass, replace
from uuid import UUID

from .errors import (
    InvalidAvatarError,
    InvalidEmailError,
    InvalidHashError,
    InvalidIdentifierError,
    InvalidTokenError,
    InvalidUsernameError,
)
from .value_objects import ActivationToken, AvatarUrl, Email, PasswordHash, Username

# field name -> (value object type, error, may be None)
_FIELD_TYPES = {
    "activation_token": (ActivationToken, InvalidTokenError, True),
    "avatar_url": (AvatarUrl, InvalidAvatarError, True),
    "email": (Email, InvalidEmailError, False),
    "password_hash": (PasswordHash, InvalidHashError, False),
    "username": (Username, InvalidUsernameError, False),
}


def _require_uuid(value: object) -> None:
    if not isinstance(value, UUID):
        raise InvalidIdentifierError(
            "Author id must be a UUID; parse text ids with parse_author_id"
        )


@dataclass(frozen=True)
class Author:
    """A validated author record.

    Build one with :meth:`create` from raw values. The ``with_*`` methods
    re-run a single field's rule and return a new instance; the id never
    changes after creation. Direct construction only accepts value objects,
    so no raw string can reach a field.
    """
    id: UUID
    activation_token: ActivationToken | None
    avatar_url: AvatarUrl | None
    email: Email
    password_hash: PasswordHash
    username: Username

    def __post_init__(self) -> None:
        _require_uuid(self.id)
        for name, (value_type, error, optional) in _FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and optional:
                continue
            if not isinstance(value, value_type):
                raise error(
                    f"{name} must be a validated {value_type.__name__}, "
                    f"not {type(value).__name__}; use Author.create or with_{name}"
                )

    @classmethod
    def create(
        cls,
        id: UUID,
        activation_token: str | None,
        avatar_url: str | None,
        email: str,
        password_hash: str,
        username: str,
    ) -> Author:
        """Validate every field in declaration order and build the entity.

        The first invalid field raises its own ``AuthorValidationError``
        subclass and nothing is constructed.
        """
        # id is checked first so its failure wins over the other fields
        _require_uuid(id)
        token = ActivationToken(activation_token) if activation_token is not None else None
        avatar = AvatarUrl(avatar_url) if avatar_url is not None else None
        return cls(
            id=id,
            activation_token=token,
            avatar_url=avatar,
            email=Email(email),
            password_hash=PasswordHash(password_hash),
            username=Username(username),
        )

    def with_activation_token(self, activation_token: str | None) -> Author:
        token = ActivationToken(activation_token) if activation_token is not None else None
        return replace(self, activation_token=token)

    def with_avatar_url(self, avatar_url: str | None) -> Author:
        avatar = AvatarUrl(avatar_url) if avatar_url is not None else None
        return replace(self, avatar_url=avatar)

    def with_email(self, email: str) -> Author:
        return replace(self, email=Email(email))

    def with_password_hash(self, password_hash: str) -> Author:
        return replace(self, password_hash=PasswordHash(password_hash))

    def with_username(self, username: str) -> Author:
        return replace(self, username=Username(username))
