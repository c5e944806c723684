"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.exceptions import TrainingRecordsError
from app.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Weekly training summaries and validated coaching recommendations.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")


@app.exception_handler(TrainingRecordsError)
async def training_records_error_handler(request: Request, exc: TrainingRecordsError):
    """Map domain errors to their HTTP status."""
    if exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code,
                        content={"detail": exc.detail, "error_code": exc.error_code})


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Training Records API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "training-records-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
