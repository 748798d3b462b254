# backend/roster/seed.py

from datetime import date

from sqlalchemy.orm import Session

from roster.core.database import Base, SessionLocal, engine
from roster.core.security import hash_password
from roster.models.employee import Employee, Role

# Change these creds anytime (dev defaults)
SEED_PASSWORD = "superPassword123"

SEEDS = [
    {
        "email": "admin@example.com",
        "first_name": "Jane",
        "last_name": "Doe",
        "middle_name": "Ginny",
        "birth_date": date(1995, 1, 9),
        "phone": "+380663569955",
        "role": Role.ADMIN.value,
        "programming_language": "N/A",
        "english_level": "Advanced",
        "salary": 3000,
    },
    {
        "email": "john.smith@example.com",
        "first_name": "John",
        "last_name": "Smith",
        "middle_name": "Tom",
        "birth_date": date(2000, 8, 11),
        "phone": "+380663569933",
        "programming_language": "Java",
        "country": "France",
        "mentor_name": "Jane Doe",
        "english_level": "Intermediate",
        "salary": 1500,
    },
    {
        "email": "ann.lee@example.com",
        "first_name": "Ann",
        "last_name": "Lee",
        "middle_name": "Mei",
        "birth_date": date(1998, 3, 2),
        "phone": "+14155550123",
        "programming_language": "Python",
        "country": "USA",
        "mentor_name": "Jane Doe",
        "english_level": "Upper-Intermediate",
        "salary": 2200,
    },
]


def seed_employees_if_empty(db: Session) -> int:
    """Insert the dev roster into an empty table. Returns how many rows were added."""
    if db.query(Employee).count() > 0:
        return 0

    hashed = hash_password(SEED_PASSWORD)
    db.add_all(
        [Employee(**{"role": Role.EMPLOYEE.value, **s}, password_hash=hashed) for s in SEEDS]
    )
    db.commit()
    return len(SEEDS)


def main() -> None:
    # make sure tables exist
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        created = seed_employees_if_empty(db)
    finally:
        db.close()

    if created:
        print(f"Created {created} employee(s). Password for all: {SEED_PASSWORD}")
        print(" - admin: admin@example.com")
    else:
        print("Employees table not empty, nothing seeded.")


if __name__ == "__main__":
    main()
