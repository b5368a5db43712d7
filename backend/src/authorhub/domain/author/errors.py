"""Validation errors for the Author bounded context.

Every error names exactly one field and one failure kind so callers can
decide how to present it without inspecting message text.
"""
from enum import Enum


class ErrorKind(str, Enum):
    EMPTY = "empty"
    TOO_LONG = "too_long"
    MALFORMED = "malformed"


class AuthorValidationError(ValueError):
    field: str = ""

    def __init__(self, reason: str, kind: ErrorKind = ErrorKind.MALFORMED) -> None:
        super().__init__(reason)
        self.reason = reason
        self.kind = kind

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class InvalidIdentifierError(AuthorValidationError):
    field = "id"


class InvalidTokenError(AuthorValidationError):
    field = "activation_token"


class InvalidAvatarError(AuthorValidationError):
    field = "avatar_url"


class InvalidEmailError(AuthorValidationError):
    field = "email"


class InvalidHashError(AuthorValidationError):
    field = "password_hash"


class InvalidUsernameError(AuthorValidationError):
    field = "username"
