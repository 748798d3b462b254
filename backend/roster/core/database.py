from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from roster.core.config import get_settings

DATABASE_URL = get_settings().database_url


def engine_options(url: str) -> dict:
    # SQLite needs check_same_thread, Postgres must NOT have it
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {}


engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()
