"""HTTP entry point for the user directory.

User routes live under /api/v1/users; /health is unversioned.

Run with:
    uvicorn user_directory.presentation.api.app:create_app --factory
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_directory.infrastructure.persistence.sqlalchemy.init_db import create_tables
from user_directory.presentation.api.dependencies import get_engine, get_event_publisher
from user_directory.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from user_directory.presentation.api.routers import users_router
from user_directory.presentation.log_config import configure_logging
from user_directory_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup, drain the publisher on shutdown."""
    settings = get_settings()
    logger.info(
        "Starting %s API (event delivery: %s)",
        settings.app_name,
        settings.event_delivery,
    )
    await create_tables(get_engine())

    yield

    logger.info("Shutting down, flushing pending event publications")
    await get_event_publisher().close()
    await get_engine().dispose()


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. ``settings`` defaults to ``get_settings()``."""
    configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Directory of users with CREATE/DELETE event notifications.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Unversioned for load balancer/monitoring compatibility."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app
