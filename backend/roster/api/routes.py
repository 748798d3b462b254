# backend/roster/api/routes.py

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from roster.api.deps_auth import get_db, require_admin
from roster.core.config import Settings, get_settings
from roster.core.security import Identity
from roster.schemas.employee import EmployeeOut, EmployeePage, EmployeeUpdate, MessageOut, UpdateOut
from roster.services import employees as svc
from roster.services.pagination import parse_page_request

router = APIRouter()

# ---------- EMPLOYEES (admin only) ----------
# require_admin is listed first so the guard resolves before any DB work


@router.get("/users", response_model=EmployeePage)
def list_users(
    _admin: Identity = Depends(require_admin),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    sort_key: Optional[str] = Query(None, alias="sortKey"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    req = parse_page_request(
        page,
        limit,
        sort_key,
        sort_order,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
    result = svc.list_employees(db, req)

    return EmployeePage(
        users=[EmployeeOut.model_validate(e) for e in result.items],
        total=result.total,
        total_pages=result.total_pages,
        page=result.page,
        limit=result.limit,
    )


@router.get("/users/{user_id}", response_model=EmployeeOut)
def get_user(
    user_id: int,
    _admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return EmployeeOut.model_validate(svc.get_employee(db, user_id))


@router.put("/users/{user_id}", response_model=UpdateOut)
def update_user(
    user_id: int,
    payload: EmployeeUpdate,
    _admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
):
    emp = svc.update_employee(db, user_id, payload)
    return UpdateOut(message="Employee updated", user=EmployeeOut.model_validate(emp))


@router.delete("/users/{user_id}", response_model=MessageOut)
def delete_user(
    user_id: int,
    _admin: Identity = Depends(require_admin),
    db: Session = Depends(get_db),
):
    svc.delete_employee(db, user_id)
    return MessageOut(message="Employee deleted")
