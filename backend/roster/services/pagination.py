import math
from dataclasses import dataclass
from typing import Literal, Optional

from sqlalchemy.orm import Session

from roster.core.exceptions import ValidationError
from roster.models.employee import Employee

SortOrder = Literal["ASC", "DESC"]

# public sort key -> column (password_hash is not sortable)
SORTABLE_COLUMNS = {
    "id": Employee.id,
    "email": Employee.email,
    "firstName": Employee.first_name,
    "lastName": Employee.last_name,
    "middleName": Employee.middle_name,
    "birthDate": Employee.birth_date,
    "phone": Employee.phone,
    "role": Employee.role,
    "programmingLanguage": Employee.programming_language,
    "country": Employee.country,
    "mentorName": Employee.mentor_name,
    "englishLevel": Employee.english_level,
    "salary": Employee.salary,
}


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = 10
    sort_key: str = "id"
    sort_order: SortOrder = "ASC"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PageResult:
    items: list[Employee]
    total: int
    total_pages: int
    page: int
    limit: int
    sort_key: str = "id"
    sort_order: SortOrder = "ASC"


def parse_page_request(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    sort_key: Optional[str] = None,
    sort_order: Optional[str] = None,
    *,
    default_limit: int = 10,
    max_limit: int = 100,
) -> PageRequest:
    page = 1 if page is None else page
    limit = default_limit if limit is None else limit

    errors = []
    if page < 1:
        errors.append({"field": "page", "message": "must be a positive integer"})
    if limit < 1:
        errors.append({"field": "limit", "message": "must be a positive integer"})

    key = sort_key or "id"
    if key not in SORTABLE_COLUMNS:
        errors.append(
            {"field": "sortKey", "message": f"must be one of: {', '.join(SORTABLE_COLUMNS)}"}
        )

    order = (sort_order or "ASC").strip().upper()
    if order not in ("ASC", "DESC"):
        errors.append({"field": "sortOrder", "message": "must be ASC or DESC"})

    if errors:
        raise ValidationError("Invalid query parameters", errors=errors)

    return PageRequest(page=page, limit=min(limit, max_limit), sort_key=key, sort_order=order)  # type: ignore[arg-type]


def total_pages(total: int, limit: int) -> int:
    if total <= 0:
        return 0
    return int(math.ceil(total / limit))


def order_by_clauses(sort_key: str, sort_order: SortOrder) -> list:
    col = SORTABLE_COLUMNS[sort_key]
    primary = col.desc() if sort_order == "DESC" else col.asc()

    clauses = [primary.nulls_last()]
    # tie-break so equal keys always come back in the same order
    if sort_key != "id":
        clauses.append(Employee.id.asc())
    return clauses


def fetch_page(db: Session, req: PageRequest) -> PageResult:
    total = db.query(Employee).count()

    # past the end: empty page, and no OFFSET that could overflow the driver
    items: list[Employee] = []
    if req.offset < total:
        items = (
            db.query(Employee)
            .order_by(*order_by_clauses(req.sort_key, req.sort_order))
            .offset(req.offset)
            .limit(req.limit)
            .all()
        )

    return PageResult(
        items=items,
        total=total,
        total_pages=total_pages(total, req.limit),
        page=req.page,
        limit=req.limit,
        sort_key=req.sort_key,
        sort_order=req.sort_order,
    )
