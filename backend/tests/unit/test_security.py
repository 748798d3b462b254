"""Token issue/verify and password hashing."""

from datetime import timedelta

import pytest
from jose import jwt

from roster.core.exceptions import AuthError, AuthErrorKind
from roster.core.security import create_access_token, decode_token, hash_password, verify_password
from roster.models.employee import Role

pytestmark = pytest.mark.unit


def test_password_hash_roundtrip():
    hashed = hash_password("superPassword123")

    assert hashed != "superPassword123"
    assert hashed.startswith("$pbkdf2-sha256$")
    assert verify_password("superPassword123", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_without_hash_is_false():
    assert not verify_password("anything", None)
    assert not verify_password("anything", "")


def test_token_decodes_to_identity(settings):
    token = create_access_token(7, Role.ADMIN, settings=settings)

    identity = decode_token(token, settings=settings)

    assert identity.user_id == 7
    assert identity.role is Role.ADMIN


def test_token_carries_issued_at_and_expiry(settings):
    token = create_access_token(3, "employee", settings=settings)

    claims = jwt.get_unverified_claims(token)

    assert claims["sub"] == "3"
    assert claims["role"] == "employee"
    assert claims["exp"] - claims["iat"] == settings.access_token_expire_minutes * 60


def test_expired_token_is_rejected(settings):
    token = create_access_token(1, Role.ADMIN, settings=settings, expires_delta=timedelta(seconds=-5))

    with pytest.raises(AuthError) as exc:
        decode_token(token, settings=settings)

    assert exc.value.kind is AuthErrorKind.INVALID_TOKEN
    assert exc.value.status_code == 401


def test_token_signed_with_other_key_is_rejected(settings):
    other = settings.model_copy(update={"jwt_secret_key": "someone-else"})
    token = create_access_token(1, Role.ADMIN, settings=other)

    with pytest.raises(AuthError) as exc:
        decode_token(token, settings=settings)

    assert exc.value.kind is AuthErrorKind.INVALID_TOKEN


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(settings, token):
    with pytest.raises(AuthError) as exc:
        decode_token(token, settings=settings)

    assert exc.value.kind is AuthErrorKind.INVALID_TOKEN


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "1", "role": "superuser"},
        {"sub": "abc", "role": "admin"},
        {"role": "admin"},
        {"sub": "1"},
    ],
)
def test_token_with_bad_claims_is_rejected(settings, claims):
    token = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    with pytest.raises(AuthError) as exc:
        decode_token(token, settings=settings)

    assert exc.value.kind is AuthErrorKind.INVALID_TOKEN
