"""Offices API — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from offices.adapters.persistence.database import create_client
from offices.config import settings
from offices.infrastructure.api.dependencies import get_blob_storage
from offices.infrastructure.api.error_handlers import register_exception_handlers
from offices.infrastructure.api.routes_health import router as health_router
from offices.infrastructure.api.routes_offices import router as offices_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    client = create_client(settings)
    app.state.mongo_client = client
    try:
        await client.admin.command("ping")
        logger.info("MongoDB connection established")
    except Exception as e:
        logger.warning("MongoDB not available on startup: %s", e)

    try:
        await get_blob_storage().ensure_container()
        logger.info("Photo bucket %s is ready", settings.s3_bucket)
    except Exception as e:
        logger.warning("Photo storage not available on startup: %s", e)

    yield
    await client.close()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Offices API",
        description="Office records with photos stored in object storage",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(offices_router, prefix="/api")

    return app


app = create_app()
