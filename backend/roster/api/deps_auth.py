# backend/roster/api/deps_auth.py

from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from roster.core.config import Settings, get_settings
from roster.core.database import SessionLocal
from roster.core.exceptions import AuthError, AuthErrorKind
from roster.core.security import Identity, decode_token
from roster.models.employee import Role
from roster.services.access import authorize

# Pulls the raw JWT out of "Authorization: Bearer <token>"; tokenUrl drives the
# Swagger UI "Authorize" flow. auto_error=False: a missing header becomes
# AuthError(MISSING_TOKEN).
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/token", auto_error=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_identity(
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> Identity:
    if not token:
        raise AuthError(AuthErrorKind.MISSING_TOKEN)
    return decode_token(token, settings=settings)


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    authorize(identity, Role.ADMIN)
    return identity
