import enum

from sqlalchemy import Column, Date, Float, Integer, String
from roster.core.database import Base


class Role(str, enum.Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


class Employee(Base):
    __tablename__ = "employees"

    # AUTOINCREMENT keeps SQLite from handing out a deleted max id again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    middle_name = Column(String, nullable=False)
    birth_date = Column(Date, nullable=False)
    phone = Column(String, nullable=False)

    # "admin" | "employee", never changed after insert
    role = Column(String, nullable=False, default=Role.EMPLOYEE.value)

    programming_language = Column(String, nullable=True)
    country = Column(String, nullable=True)
    mentor_name = Column(String, nullable=True)
    english_level = Column(String, nullable=True)

    salary = Column(Float, nullable=True)


# columns an update may not set to NULL
REQUIRED_FIELDS = frozenset(
    c.name for c in Employee.__table__.columns if not c.nullable and not c.primary_key
)
