"""Immutable value objects for the Author bounded context.

Each value object normalizes its input in ``__post_init__`` and rejects it
with the field's own error type. Constructing one never touches the others.
"""
from dataclasses import dataclass, field
import re
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from .errors import (
    ErrorKind,
    InvalidAvatarError,
    InvalidEmailError,
    InvalidHashError,
    InvalidIdentifierError,
    InvalidTokenError,
    InvalidUsernameError,
)
from .sanitize import sanitize_text

# Column widths of the author table
ACTIVATION_TOKEN_LENGTH = 32
AVATAR_URL_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 128
PASSWORD_HASH_LENGTH = 97
USERNAME_MAX_LENGTH = 32

_HEX = re.compile(r"[0-9a-f]+")
_UUID_TEXT = re.compile(
    r"[0-9a-f]{8}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{4}-?[0-9a-f]{12}",
    re.IGNORECASE,
)


def parse_author_id(value: UUID | str) -> UUID:
    """Convert an author id from its text form.

    Accepts a ``UUID`` as-is, or the 32 hex digits in any letter case, with
    or without the canonical hyphens.
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifierError(f"Author id must be a UUID or text, not {type(value).__name__}")

    text = value.strip()
    if not text:
        raise InvalidIdentifierError("Author id is empty", ErrorKind.EMPTY)
    try:
        parsed = UUID(text)
    except ValueError as exc:
        raise InvalidIdentifierError(f"Author id is not a valid UUID: {text!r}") from exc
    if not _UUID_TEXT.fullmatch(text):
        raise InvalidIdentifierError(f"Author id is not in canonical UUID form: {text!r}")
    return parsed


def _as_text(value: object, error: type, label: str) -> str:
    if value is None:
        raise error(f"{label} is required", ErrorKind.EMPTY)
    if not isinstance(value, str):
        raise error(f"{label} must be text, not {type(value).__name__}")
    return value


def _check_exact_length(value: str, length: int, error: type, label: str) -> None:
    if len(value) > length:
        raise error(f"{label} must be exactly {length} characters", ErrorKind.TOO_LONG)
    if len(value) < length:
        raise error(f"{label} must be exactly {length} characters", ErrorKind.MALFORMED)


@dataclass(frozen=True)
class ActivationToken:
    """One-time hex credential that confirms an account is legitimate."""
    value: str

    def __post_init__(self) -> None:
        token = _as_text(self.value, InvalidTokenError, "Activation token").strip().lower()
        if not token:
            raise InvalidTokenError("Activation token is empty", ErrorKind.EMPTY)
        if not _HEX.fullmatch(token):
            raise InvalidTokenError("Activation token must be hexadecimal")
        _check_exact_length(token, ACTIVATION_TOKEN_LENGTH, InvalidTokenError, "Activation token")
        object.__setattr__(self, "value", token)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AvatarUrl:
    value: str

    def __post_init__(self) -> None:
        url = sanitize_text(_as_text(self.value, InvalidAvatarError, "Avatar URL").strip()).strip()
        if not url:
            raise InvalidAvatarError("Avatar URL is empty or insecure", ErrorKind.EMPTY)
        if len(url) > AVATAR_URL_MAX_LENGTH:
            raise InvalidAvatarError(
                f"Avatar URL exceeds {AVATAR_URL_MAX_LENGTH} characters", ErrorKind.TOO_LONG
            )
        object.__setattr__(self, "value", url)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        email = _as_text(self.value, InvalidEmailError, "Email").strip()
        if not email:
            raise InvalidEmailError("Email is empty", ErrorKind.EMPTY)
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as exc:
            raise InvalidEmailError(f"Invalid email address: {email}") from exc
        if len(email) > EMAIL_MAX_LENGTH:
            raise InvalidEmailError(
                f"Email exceeds {EMAIL_MAX_LENGTH} characters", ErrorKind.TOO_LONG
            )
        object.__setattr__(self, "value", email)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PasswordHash:
    """Storage shape of a password hash. Computing or verifying it happens elsewhere."""
    value: str = field(repr=False)

    def __post_init__(self) -> None:
        digest = _as_text(self.value, InvalidHashError, "Password hash").strip().lower()
        if not digest:
            raise InvalidHashError("Password hash is empty", ErrorKind.EMPTY)
        if not _HEX.fullmatch(digest):
            raise InvalidHashError("Password hash must be hexadecimal")
        _check_exact_length(digest, PASSWORD_HASH_LENGTH, InvalidHashError, "Password hash")
        object.__setattr__(self, "value", digest)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self) -> None:
        username = sanitize_text(_as_text(self.value, InvalidUsernameError, "Username").strip()).strip()
        if not username:
            raise InvalidUsernameError("Username is empty or invalid", ErrorKind.EMPTY)
        if len(username) > USERNAME_MAX_LENGTH:
            raise InvalidUsernameError(
                f"Username exceeds {USERNAME_MAX_LENGTH} characters", ErrorKind.TOO_LONG
            )
        object.__setattr__(self, "value", username)

    def __str__(self) -> str:
        return self.value
