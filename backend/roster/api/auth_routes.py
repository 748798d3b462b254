# backend/roster/api/auth_routes.py

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from roster.api.deps_auth import get_current_identity, get_db
from roster.core.config import Settings, get_settings
from roster.core.security import Identity, create_access_token
from roster.schemas.employee import EmployeeOut, LoginIn, LoginOut, RegisterIn, RegisterOut, TokenOut
from roster.services import employees as svc

router = APIRouter()


@router.post("/register", response_model=RegisterOut, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    emp = svc.register_employee(db, payload, secret_word=settings.secret_word)
    return RegisterOut(user_id=emp.id)


# JSON login
@router.post("/login", response_model=LoginOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return LoginOut(token=svc.login(db, payload.email, payload.password, settings=settings))


# OAuth2 form endpoint (Swagger Authorize uses this); username is the email
@router.post("/token", response_model=TokenOut)
def token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    emp = svc.authenticate(db, form_data.username or "", form_data.password or "")
    return TokenOut(access_token=create_access_token(emp.id, emp.role, settings=settings))


@router.get("/me", response_model=EmployeeOut)
def me(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    return EmployeeOut.model_validate(svc.get_employee(db, identity.user_id))
