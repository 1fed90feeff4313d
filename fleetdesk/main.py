"""
FastAPI application entry point for FleetDesk.

Fleet and trip back office API.
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fleetdesk.core.config import settings
from fleetdesk.api.v1 import api_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    # Note: schema changes go through Alembic migrations
    logger.info(f"{settings.app_name} {settings.app_version} starting")
    yield
    # Shutdown
    logger.info(f"{settings.app_name} shutting down")


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## FleetDesk

        Back office for a fleet and trip platform:

        - **Review workflow**: approve, reject or return drivers, vehicles
          and fleet partners to review
        - **Document expiry**: every document is classified as expired,
          expiring (30 day window), valid or unknown
        - **Trips & payouts**: trip details and commission splits
        - **Driver portal**: self-service edits that send records back to review
        """,
        version=settings.app_version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


# Create application instance
app = create_application()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": f"{settings.api_v1_prefix}/docs",
        "openapi": f"{settings.api_v1_prefix}/openapi.json",
    }
