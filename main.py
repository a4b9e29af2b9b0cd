"""
Chef Fest FastAPI Application

Wires settings, logging, middleware, error handlers and the /api routers.
Run with ``python main.py`` or ``uvicorn main:app``.
"""

from contextlib import asynccontextmanager
import logging

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from api.middleware import RequestLoggingMiddleware, register_exception_handlers
from api.routes import admin, contact, health, recipes, reviews, saved_recipes, users
from app.config import settings
from domain.models import init_database

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("cheffest.main")

ROUTERS = (
    recipes.router,
    saved_recipes.router,
    reviews.router,
    users.router,
    contact.router,
    admin.router,
    health.router,
)


async def _create_schema_with_retry() -> None:
    """Run ``init_database`` off the event loop until the database accepts it."""
    attempts = settings.db_init_attempts
    for attempt in range(1, attempts + 1):
        try:
            await anyio.to_thread.run_sync(init_database)
            _logger.info("database_ready attempt=%d", attempt)
            return
        except SQLAlchemyError as exc:
            if attempt == attempts:
                _logger.error("database_init_gave_up attempts=%d error=%s", attempts, exc)
                raise
            _logger.warning(
                "database_init_retry attempt=%d/%d error=%s", attempt, attempts, exc
            )
            await anyio.sleep(settings.db_init_delay_sec)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")
    await _create_schema_with_retry()
    yield
    _logger.info(f"Stopping {settings.app_name}")


docs_enabled = not settings.is_production()

app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
    docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
    redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)
# admin login state lives in this signed cookie
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key.get_secret_value(),
    max_age=settings.session_max_age_sec,
    same_site="lax",
    https_only=settings.is_production(),
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

for router in ROUTERS:
    app.include_router(router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
