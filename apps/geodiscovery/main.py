"""Geo-discovery API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geodiscovery.presentation.http.controllers import (
    health_router,
    locations_router,
    nearby_products_router,
    nearby_sellers_router,
    sellers_router,
)
from geodiscovery.presentation.http.errors import register_exception_handlers
from geodiscovery.setup.dependencies import close_geocoder
from geodiscovery.setup.config import get_settings
from geodiscovery.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name}")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_geocoder()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Geo-discovery API",
        description="Nearby sellers and products for the farm marketplace",
        version="1.0.0",
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        redoc_url="/api/v1/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(locations_router, prefix="/api/v1")
    app.include_router(nearby_sellers_router, prefix="/api/v1")
    app.include_router(nearby_products_router, prefix="/api/v1")
    app.include_router(sellers_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "geodiscovery.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
