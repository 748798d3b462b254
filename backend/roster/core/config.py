# backend/roster/core/config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_env: str = "dev"

    database_url: str = "sqlite:///./roster.db"
    auto_create_tables: bool = True

    # Put this on the host as JWT_SECRET_KEY
    jwt_secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 10080

    # unset -> nobody can register as admin
    secret_word: Optional[str] = None

    default_page_limit: int = 10
    max_page_limit: int = 100

    # Example: CORS_ORIGINS="https://roster.example.com,http://localhost:3000"
    cors_origins: str = ""
    frontend_url: str = "http://localhost:3000"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def allowed_origins(self) -> list[str]:
        cors_env = self.cors_origins.strip()
        if cors_env:
            return [o.strip() for o in cors_env.split(",") if o.strip()]
        return sorted({self.frontend_url.strip(), "http://localhost:3000"})


@lru_cache
def get_settings() -> Settings:
    return Settings()
