"""Use cases behind the employee endpoints.

Every function takes an open Session and leaves it committed on success or
rolled back on failure. Role checks happen before these are called (see
``roster.api.deps_auth.require_admin``), so nothing here looks at identity.
"""

import hmac
import logging
from typing import Optional

from pydantic.alias_generators import to_camel
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from roster.core.config import Settings
from roster.core.exceptions import (
    AuthError,
    AuthErrorKind,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from roster.core.security import create_access_token, hash_password, verify_password
from roster.models.employee import REQUIRED_FIELDS, Employee, Role
from roster.schemas.employee import EmployeeUpdate, RegisterIn
from roster.services.pagination import PageRequest, PageResult, fetch_page

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "Email already registered"

# ids are 64-bit signed integers in every supported backend
MAX_ID = 2**63 - 1


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _email_taken(db: Session, email: str, exclude_id: Optional[int] = None) -> bool:
    q = db.query(Employee.id).filter(Employee.email == email)
    if exclude_id is not None:
        q = q.filter(Employee.id != exclude_id)
    return q.first() is not None


def _secret_matches(supplied: Optional[str], configured: Optional[str]) -> bool:
    if not configured or supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), configured.encode("utf-8"))


def register_employee(db: Session, payload: RegisterIn, *, secret_word: Optional[str]) -> Employee:
    email = normalize_email(payload.email)

    if _email_taken(db, email):
        raise ConflictError(EMAIL_TAKEN)

    if payload.role == Role.ADMIN and not _secret_matches(payload.secret_word, secret_word):
        logger.warning("Admin registration refused", extra={"email": email})
        raise AuthError(AuthErrorKind.FORBIDDEN, "Invalid secret word")

    data = payload.model_dump(exclude={"password", "secret_word", "email", "role"})
    emp = Employee(
        **data,
        email=email,
        role=payload.role.value,
        password_hash=hash_password(payload.password),
    )

    db.add(emp)
    try:
        db.commit()
    except IntegrityError as e:
        # lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictError(EMAIL_TAKEN) from e
    db.refresh(emp)

    logger.info("Employee registered", extra={"employee_id": emp.id, "role": emp.role})
    return emp


def authenticate(db: Session, email: str, password: str) -> Employee:
    emp = db.query(Employee).filter(Employee.email == normalize_email(email)).first()
    if not emp or not verify_password(password, emp.password_hash):
        logger.warning("Failed login", extra={"email": email})
        raise AuthError(AuthErrorKind.INVALID_CREDENTIALS)
    return emp


def login(db: Session, email: str, password: str, *, settings: Settings) -> str:
    emp = authenticate(db, email, password)
    return create_access_token(emp.id, emp.role, settings=settings)


def list_employees(db: Session, req: PageRequest) -> PageResult:
    return fetch_page(db, req)


def _load(db: Session, employee_id: int, *, lock: bool = False) -> Employee:
    # out-of-range ids cannot exist and would overflow the driver's bind
    if not 1 <= employee_id <= MAX_ID:
        raise NotFoundError(USER_NOT_FOUND)

    emp = db.get(Employee, employee_id, with_for_update=True if lock else None)
    if not emp:
        raise NotFoundError(USER_NOT_FOUND)
    return emp


def get_employee(db: Session, employee_id: int) -> Employee:
    return _load(db, employee_id)


def update_employee(db: Session, employee_id: int, payload: EmployeeUpdate) -> Employee:
    # row lock on backends that have one (Postgres); SQLite serializes writers anyway
    emp = _load(db, employee_id, lock=True)

    changes = payload.model_dump(exclude_unset=True)

    not_nullable = REQUIRED_FIELDS | {"password"}
    if emp.role == Role.EMPLOYEE.value:
        not_nullable = not_nullable | {"salary"}

    nulled = sorted(k for k, v in changes.items() if v is None and k in not_nullable)
    if nulled:
        db.rollback()
        raise ValidationError(
            "Required fields cannot be null",
            errors=[{"field": to_camel(k), "message": "may not be null"} for k in nulled],
        )

    if "email" in changes:
        changes["email"] = normalize_email(changes["email"])
        if _email_taken(db, changes["email"], exclude_id=employee_id):
            db.rollback()
            raise ConflictError(EMAIL_TAKEN)

    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    for k, v in changes.items():
        setattr(emp, k, v)

    try:
        db.commit()
    except StaleDataError as e:
        # row vanished under us (concurrent delete): never resurrect it
        db.rollback()
        raise NotFoundError(USER_NOT_FOUND) from e
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(EMAIL_TAKEN) from e
    db.refresh(emp)

    logger.info("Employee updated", extra={"employee_id": emp.id, "fields": sorted(changes)})
    return emp


def delete_employee(db: Session, employee_id: int) -> None:
    _load(db, employee_id, lock=True)

    # a concurrent delete may win between the lookup and here: 0 rows is a 404
    result = db.execute(delete(Employee).where(Employee.id == employee_id))
    if result.rowcount != 1:
        db.rollback()
        raise NotFoundError(USER_NOT_FOUND)
    db.commit()

    logger.info("Employee deleted", extra={"employee_id": employee_id})
