# backend/roster/schemas/employee.py

import re
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from roster.models.employee import Role

# "+" then 7..15 digits, no leading zero in the country code
PHONE_RE = re.compile(r"^\+[1-9]\d{6,14}$")


def _check_phone(v: Optional[str]) -> Optional[str]:
    if v is not None and not PHONE_RE.match(v):
        raise ValueError("phone must be in international format, e.g. +380661234567")
    return v


class CamelModel(BaseModel):
    """Wire format is camelCase; Python side stays snake_case."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ---------- INPUT ----------


class RegisterIn(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    middle_name: str = Field(min_length=1)
    birth_date: date
    phone: str

    role: Role = Role.EMPLOYEE
    secret_word: Optional[str] = None

    programming_language: Optional[str] = None
    country: Optional[str] = None
    mentor_name: Optional[str] = None
    english_level: Optional[str] = None

    salary: Optional[float] = Field(None, ge=0)

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v):
        return _check_phone(v)

    @model_validator(mode="after")
    def salary_required_for_employees(self):
        if self.role == Role.EMPLOYEE and self.salary is None:
            raise ValueError("salary is required for employees")
        return self


class EmployeeUpdate(CamelModel):
    # role and secretWord are not accepted here: role is fixed at registration
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    middle_name: Optional[str] = Field(None, min_length=1)
    birth_date: Optional[date] = None
    phone: Optional[str] = None

    programming_language: Optional[str] = None
    country: Optional[str] = None
    mentor_name: Optional[str] = None
    english_level: Optional[str] = None

    salary: Optional[float] = Field(None, ge=0)

    @field_validator("phone")
    @classmethod
    def phone_format(cls, v):
        return _check_phone(v)


class LoginIn(BaseModel):
    email: str
    password: str


# ---------- OUTPUT ----------


class EmployeeOut(CamelModel):
    id: int
    email: str

    first_name: str
    last_name: str
    middle_name: str
    birth_date: date
    phone: str

    role: Role

    programming_language: Optional[str] = None
    country: Optional[str] = None
    mentor_name: Optional[str] = None
    english_level: Optional[str] = None

    salary: Optional[float] = None


class RegisterOut(CamelModel):
    user_id: int


class LoginOut(BaseModel):
    token: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"


class EmployeePage(CamelModel):
    users: List[EmployeeOut]
    total: int
    total_pages: int
    page: int
    limit: int


class UpdateOut(CamelModel):
    message: str
    user: EmployeeOut


class MessageOut(BaseModel):
    message: str
