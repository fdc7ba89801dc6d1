"""
FastAPI Application Entry Point.

Read-only HTTP surface over the shipment tracking database.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from shipment_tracker.app.core.config import settings
from shipment_tracker.app.core.observability import ObservabilityMiddleware, configure_logging
from shipment_tracker.app.api.v1.router import router as api_v1_router
from shipment_tracker.app.db.session import engine
from shipment_tracker.app.services.seeding import load_database
from shipment_tracker.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

logger = logging.getLogger("shipment_tracker")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.
    
    1. Loads schema and fixtures on startup when configured.
    2. Disposes of the engine on shutdown.
    """
    configure_logging()
    if settings.load_on_startup:
        counts = await load_database(engine, drop_existing=settings.drop_existing)
        logger.info("Database ready", extra={"counts": counts})
    yield
    await engine.dispose()

# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Courier, consignment, item and tracking event reports",
    lifespan=lifespan,
)

app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.
    
    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


# Include API v1 router
app.include_router(api_v1_router, prefix=f"/{settings.api_version}")


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint.
    
    Returns:
        dict: Welcome message and API documentation links
    """
    return {
        "message": "Welcome to Shipment Tracker API",
        "docs": "/docs",
        "health": "/health",
    }
