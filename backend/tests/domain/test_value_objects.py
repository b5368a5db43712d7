"""Tests for the Author value objects and the id parser.

Tests:
    - parse_author_id accepts canonical text in any case, with or without hyphens
    - each field's normalization (trim, lower-case, sanitize)
    - each field's rejection kind: empty, too long, malformed
"""

from uuid import UUID

import pytest
from email_validator import EmailNotValidError

from authorhub.domain.author.errors import (
    ErrorKind,
    InvalidAvatarError,
    InvalidEmailError,
    InvalidHashError,
    InvalidIdentifierError,
    InvalidTokenError,
    InvalidUsernameError,
)
from authorhub.domain.author.value_objects import (
    ActivationToken,
    AvatarUrl,
    Email,
    PasswordHash,
    Username,
    parse_author_id,
)

from conftest import ACTIVATION_TOKEN, AUTHOR_ID, PASSWORD_HASH


class TestParseAuthorId:
    @pytest.mark.parametrize(
        "text",
        [
            AUTHOR_ID,
            AUTHOR_ID.upper(),
            AUTHOR_ID.replace("-", ""),
            AUTHOR_ID.replace("-", "").upper(),
            f"  {AUTHOR_ID}  ",
        ],
    )
    def test_accepts_canonical_forms(self, text):
        parsed = parse_author_id(text)
        assert str(parsed) == AUTHOR_ID

    def test_passes_uuid_through(self):
        value = UUID(AUTHOR_ID)
        assert parse_author_id(value) is value

    def test_malformed_text_chains_cause(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_author_id("not-a-uuid")
        assert exc_info.value.kind is ErrorKind.MALFORMED
        assert isinstance(exc_info.value.cause, ValueError)

    def test_braced_form_rejected(self):
        with pytest.raises(InvalidIdentifierError):
            parse_author_id("{" + AUTHOR_ID + "}")

    def test_empty_text(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_author_id("   ")
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_wrong_type(self):
        with pytest.raises(InvalidIdentifierError):
            parse_author_id(42)


class TestActivationToken:
    def test_trims_and_lowercases(self):
        token = ActivationToken(f"  {ACTIVATION_TOKEN.upper()} ")
        assert str(token) == ACTIVATION_TOKEN

    @pytest.mark.parametrize("length", [31, 33, 64])
    def test_wrong_length(self, length):
        with pytest.raises(InvalidTokenError):
            ActivationToken("a" * length)

    def test_longer_than_column_is_too_long(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            ActivationToken("a" * 33)
        assert exc_info.value.kind is ErrorKind.TOO_LONG

    def test_non_hex(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            ActivationToken("g" * 32)
        assert exc_info.value.kind is ErrorKind.MALFORMED

    def test_empty_string_is_not_absence(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            ActivationToken("  ")
        assert exc_info.value.kind is ErrorKind.EMPTY


class TestAvatarUrl:
    def test_safe_url_untouched(self):
        url = "https://example.org/avatars/a_b-c.png?size=64&fmt='png'"
        assert str(AvatarUrl(f" {url} ")) == url

    def test_tags_stripped(self):
        assert str(AvatarUrl("https://x.io/<script>alert(1)</script>a.png")) == "https://x.io/alert(1)a.png"

    def test_trailing_tag_leaves_no_whitespace(self):
        assert str(AvatarUrl("https://x.io/a.png <b")) == "https://x.io/a.png"

    def test_empty_after_sanitization(self):
        with pytest.raises(InvalidAvatarError) as exc_info:
            AvatarUrl("<img src=x>")
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_max_length(self):
        url = "https://x.io/" + "a" * (255 - len("https://x.io/"))
        assert len(str(AvatarUrl(url))) == 255
        with pytest.raises(InvalidAvatarError) as exc_info:
            AvatarUrl(url + "a")
        assert exc_info.value.kind is ErrorKind.TOO_LONG


class TestEmail:
    def test_trims(self):
        assert str(Email("  a@b.com ")) == "a@b.com"

    @pytest.mark.parametrize("value", ["audialb", "audialb@", "@yahoo.com", "a b@yahoo.com", "a@@b.com"])
    def test_malformed(self, value):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email(value)
        assert exc_info.value.kind is ErrorKind.MALFORMED
        assert isinstance(exc_info.value.cause, EmailNotValidError)

    def test_empty(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email("   ")
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_none(self):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email(None)
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_length_limit(self):
        at_limit = "a" * 63 + "@" + "b" * 60 + ".com"
        assert len(at_limit) == 128
        assert str(Email(at_limit)) == at_limit

        too_long = "a" * 64 + "@" + "b" * 60 + ".com"
        assert len(too_long) == 129
        with pytest.raises(InvalidEmailError) as exc_info:
            Email(too_long)
        assert exc_info.value.kind is ErrorKind.TOO_LONG


class TestPasswordHash:
    def test_exact_length_hex(self):
        assert str(PasswordHash(PASSWORD_HASH)) == PASSWORD_HASH

    def test_lowercases(self):
        assert str(PasswordHash(f" {PASSWORD_HASH.upper()} ")) == PASSWORD_HASH

    def test_short(self):
        with pytest.raises(InvalidHashError) as exc_info:
            PasswordHash(PASSWORD_HASH[:96])
        assert exc_info.value.kind is ErrorKind.MALFORMED

    def test_long(self):
        with pytest.raises(InvalidHashError) as exc_info:
            PasswordHash(PASSWORD_HASH + "a")
        assert exc_info.value.kind is ErrorKind.TOO_LONG

    def test_non_hex(self):
        with pytest.raises(InvalidHashError) as exc_info:
            PasswordHash("z" + PASSWORD_HASH[1:])
        assert exc_info.value.kind is ErrorKind.MALFORMED

    def test_empty(self):
        with pytest.raises(InvalidHashError) as exc_info:
            PasswordHash("")
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_repr_hides_value(self):
        assert PASSWORD_HASH not in repr(PasswordHash(PASSWORD_HASH))


class TestUsername:
    def test_trims(self):
        assert str(Username("  audialb  ")) == "audialb"

    def test_whitespace_only(self):
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username("   \t ")
        assert exc_info.value.kind is ErrorKind.EMPTY

    def test_length_limit(self):
        assert str(Username("u" * 32)) == "u" * 32
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username("u" * 33)
        assert exc_info.value.kind is ErrorKind.TOO_LONG

    def test_quotes_preserved(self):
        assert str(Username("o'brien \"dan\"")) == "o'brien \"dan\""

    def test_markup_only(self):
        with pytest.raises(InvalidUsernameError):
            Username("<b></b>")

    def test_bare_less_than_kept(self):
        assert str(Username("a < b")) == "a < b"

    @pytest.mark.parametrize("value, expected", [("x <3 y", "x"), ("<b>dan</b> ", "dan"), ("  dan <i>", "dan")])
    def test_no_whitespace_left_after_stripping(self, value, expected):
        assert str(Username(value)) == expected
