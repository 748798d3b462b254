# backend/roster/core/security.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import BaseModel

from roster.core.config import Settings
from roster.core.exceptions import AuthError, AuthErrorKind
from roster.models.employee import Role

# ONLY pbkdf2_sha256 (no bcrypt anywhere)
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class Identity(BaseModel):
    user_id: int
    role: Role


def hash_password(password: str) -> str:
    return pwd_context.hash(password or "")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password or "", hashed_password)


def create_access_token(
    user_id: int,
    role: Role | str,
    *,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    claims = {
        "sub": str(user_id),
        "role": Role(role).value,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, *, settings: Settings) -> Identity:
    """Verify signature and expiry, then turn the claims into an Identity.

    Pure: no store lookups, so the guard can run before any DB access.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthError(AuthErrorKind.INVALID_TOKEN) from e

    try:
        return Identity(user_id=int(payload["sub"]), role=Role(payload["role"]))
    except (KeyError, TypeError, ValueError) as e:
        raise AuthError(AuthErrorKind.INVALID_TOKEN) from e
