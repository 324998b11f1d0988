"""
Unit tests for password hashing and credential verification.

Covers:
    - bcrypt hash/verify round trip, salting, malformed hashes
    - all four verification outcomes and their log lines
    - first-match-wins when duplicate emails exist in the store
    - authenticate_user raising AuthDenied
    - Authenticator.require / optional
    - Basic header parsing (UTF-8, malformed values)
"""

import logging

import pytest
from fastapi.security import HTTPBasicCredentials

from auth.dependencies import Authenticator, parse_basic_credentials
from auth.service import AuthOutcome, authenticate_user, verify_credentials
from auth.utils import hash_password, verify_password
from course_platform.errors import AuthDenied


@pytest.fixture
def ada(storage):
    return storage.create_user("Ada", "Lovelace", "ada@example.com", hash_password("secret"))


# ---------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------

def test_hash_is_not_plaintext_and_verifies():
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert hashed.startswith("$2")
    assert verify_password("secret", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_hash_is_salted():
    assert hash_password("secret") != hash_password("secret")


def test_verify_malformed_hash_returns_false():
    assert verify_password("secret", "not-a-bcrypt-hash") is False


def test_long_passwords_hash_and_verify():
    long_pw = "x" * 100
    assert verify_password(long_pw, hash_password(long_pw)) is True


# ---------------------------------------------------------------------
# verify_credentials
# ---------------------------------------------------------------------

def test_authenticated(storage, ada, caplog):
    with caplog.at_level(logging.INFO, logger="course_platform.auth"):
        result = verify_credentials(storage, "ada@example.com", "secret")
    assert result.outcome is AuthOutcome.AUTHENTICATED
    assert result.ok is True
    assert result.user["id"] == ada["id"]
    assert "Authentication successful for username: Ada Lovelace" in caplog.text


def test_wrong_password(storage, ada, caplog):
    with caplog.at_level(logging.WARNING, logger="course_platform.auth"):
        result = verify_credentials(storage, "ada@example.com", "wrong")
    assert result.outcome is AuthOutcome.WRONG_PASSWORD
    assert result.user is None
    assert "Authentication failure for username: Ada Lovelace" in caplog.text


def test_no_such_user(storage, caplog):
    with caplog.at_level(logging.WARNING, logger="course_platform.auth"):
        result = verify_credentials(storage, "ghost@example.com", "secret")
    assert result.outcome is AuthOutcome.NO_SUCH_USER
    assert "User not found for username: ghost@example.com" in caplog.text


def test_missing_header(storage, caplog):
    with caplog.at_level(logging.WARNING, logger="course_platform.auth"):
        result = verify_credentials(storage, None, None)
    assert result.outcome is AuthOutcome.MISSING_HEADER
    assert "Auth header not found" in caplog.text


def test_email_match_is_case_sensitive(storage, ada):
    result = verify_credentials(storage, "ADA@example.com", "secret")
    assert result.outcome is AuthOutcome.NO_SUCH_USER


def test_first_matching_user_wins(storage, ada, monkeypatch):
    impostor = {**ada, "id": 99, "password": hash_password("other")}
    monkeypatch.setattr(storage, "find_users_by_email", lambda email: [ada, impostor])

    assert verify_credentials(storage, "ada@example.com", "secret").user["id"] == ada["id"]
    assert verify_credentials(storage, "ada@example.com", "other").outcome is AuthOutcome.WRONG_PASSWORD


def test_authenticate_user_raises_for_every_failure(storage, ada):
    for username, password in [(None, None), ("ghost@example.com", "x"), ("ada@example.com", "x")]:
        with pytest.raises(AuthDenied):
            authenticate_user(storage, username, password)


# ---------------------------------------------------------------------
# Authenticator
# ---------------------------------------------------------------------

def test_authenticator_require(storage, ada):
    auth = Authenticator(storage)
    creds = HTTPBasicCredentials(username="ada@example.com", password="secret")
    assert auth.require(creds)["email_address"] == "ada@example.com"

    with pytest.raises(AuthDenied):
        auth.require(None)


def test_authenticator_optional(storage, ada):
    auth = Authenticator(storage)
    assert auth.optional(None) is None

    with pytest.raises(AuthDenied):
        auth.optional(HTTPBasicCredentials(username="ada@example.com", password="nope"))


# ---------------------------------------------------------------------
# Header parsing
# ---------------------------------------------------------------------

def _encode(raw: bytes) -> str:
    import base64

    return "Basic " + base64.b64encode(raw).decode("ascii")


def test_parse_utf8_credentials():
    creds = parse_basic_credentials(_encode("jürgen@example.com:pässwörd".encode("utf-8")))
    assert creds.username == "jürgen@example.com"
    assert creds.password == "pässwörd"


def test_parse_keeps_colons_in_password():
    creds = parse_basic_credentials(_encode(b"ada@example.com:a:b"))
    assert creds.password == "a:b"


@pytest.mark.parametrize("header", [None, "", "Bearer abc", "Basic"])
def test_parse_absent_or_other_scheme_is_silent(header, caplog):
    with caplog.at_level(logging.WARNING, logger="course_platform.auth"):
        assert parse_basic_credentials(header) is None
    assert "Malformed" not in caplog.text


@pytest.mark.parametrize(
    "header",
    ["Basic !!!not-base64!!!", _encode(b"no-colon"), _encode(b"\xff\xfe:bad-utf8")],
)
def test_parse_malformed_header_is_logged(header, caplog):
    with caplog.at_level(logging.WARNING, logger="course_platform.auth"):
        assert parse_basic_credentials(header) is None
    assert "Malformed Authorization header" in caplog.text
