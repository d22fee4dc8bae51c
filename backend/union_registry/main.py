"""FastAPI application entry point."""
import logging

from fastapi import FastAPI

from . import models
from .bootstrap import ensure_admin_user
from .config import get_settings
from .database import AsyncSessionLocal, engine
from .exception_handlers import register_exception_handlers
from .logging_config import setup_logging
from .routers.admin import router as admin_router
from .routers.auth import router as auth_router
from .routers.dealer import router as dealer_router
from .routers.search import router as search_router
from .routers.users import router as users_router

settings = get_settings()
setup_logging(environment=settings.environment)
logger = logging.getLogger(__name__)

app = FastAPI(title="Union Registry API", version="0.1.0")
register_exception_handlers(app)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(admin_router)
app.include_router(dealer_router)
app.include_router(search_router)


@app.on_event("startup")
async def on_startup() -> None:
    """Ensure database tables exist and the admin account is present."""

    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await ensure_admin_user(session, settings)
    logger.info("Union Registry API started (environment=%s)", settings.environment)


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    """Simple readiness probe for uptime checks."""

    return {"status": "ok"}
