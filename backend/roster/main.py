# backend/roster/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.auth_routes import router as auth_router
from roster.api.errors import register_exception_handlers
from roster.api.routes import router as api_router
from roster.core.config import get_settings
from roster.core.database import Base, engine
from roster.core.logger import configure_logging

settings = get_settings()
logger = configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        # dev convenience; deployments run `alembic upgrade head`
        Base.metadata.create_all(bind=engine)
    logger.info("Roster API started", extra={"app_env": settings.app_env})
    yield


app = FastAPI(title="Employee Roster API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Authorization", "Content-Type"],
)

register_exception_handlers(app)

app.include_router(auth_router, tags=["auth"])
app.include_router(api_router, tags=["employees"])


@app.get("/health")
def health():
    return {"status": "ok"}
