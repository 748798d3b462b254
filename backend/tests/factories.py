from datetime import date

from roster.core.security import hash_password
from roster.models.employee import Employee, Role

PASSWORD = "superPassword123"

_PASSWORD_HASH = hash_password(PASSWORD)


def employee_payload(n: int = 1, **overrides) -> dict:
    data = {
        "email": f"employee{n}@example.com",
        "password": PASSWORD,
        "firstName": "John",
        "lastName": "Smith",
        "middleName": "Tom",
        "birthDate": "2000-08-11",
        "phone": f"+38066356{n:04d}",
        "programmingLanguage": "Java",
        "country": "France",
        "mentorName": "Jane Doe",
        "englishLevel": "Intermediate",
        "salary": 1500,
    }
    data.update(overrides)
    return data


def admin_payload(secret_word: str, **overrides) -> dict:
    data = {
        "email": "admin@example.com",
        "password": PASSWORD,
        "firstName": "Jane",
        "lastName": "Doe",
        "middleName": "Ginny",
        "birthDate": "1995-01-09",
        "phone": "+380663569955",
        "programmingLanguage": "N/A",
        "role": "admin",
        "secretWord": secret_word,
        "englishLevel": "Advanced",
        "salary": 3000,
    }
    data.update(overrides)
    return data


def register(client, payload: dict) -> int:
    resp = client.post("/register", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["userId"]


def auth_headers(client, email: str, password: str = PASSWORD) -> dict:
    resp = client.post("/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


def add_employee(db, n: int, **overrides) -> Employee:
    """Insert a row straight into the store, bypassing the API."""
    data = {
        "email": f"row{n}@example.com",
        "password_hash": _PASSWORD_HASH,
        "first_name": f"First{n}",
        "last_name": f"Last{n}",
        "middle_name": "M",
        "birth_date": date(1990, 1, 1),
        "phone": f"+1415555{n:04d}",
        "role": Role.EMPLOYEE.value,
        "salary": 1000 + n,
    }
    data.update(overrides)
    emp = Employee(**data)
    db.add(emp)
    db.commit()
    db.refresh(emp)
    return emp
