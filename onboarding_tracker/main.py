"""
Main FastAPI application entry point.

This module creates the FastAPI application instance and configures
all routes, middleware, and application lifecycle events.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from onboarding_tracker.api.routes import activity, auth, employees, preferences, reports, tasks
from onboarding_tracker.config.settings import settings
from onboarding_tracker.core.dependencies import get_storage, get_store, resolve_store
from onboarding_tracker.core.logging import setup_logging
from onboarding_tracker.core.store import KeyValueStore
from onboarding_tracker.mocks import MemoryStore
from onboarding_tracker.services.workflows import DemoDataSeeder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Configures logging and seeds the demo dataset into an empty store
    before the first request is served.
    """
    setup_logging()
    logger.info(f"Starting {settings.project_name} API...")

    if settings.seed_demo_data:
        result = DemoDataSeeder(get_storage(resolve_store(app))).seed()
        if not result.success:
            logger.error(f"Demo data seeding failed: {result.error.message}")

    logger.info(f"{settings.project_name} API ready, docs at /docs")

    yield

    logger.info(f"Shutting down {settings.project_name} API...")


# Create FastAPI application instance
app = FastAPI(
    title=settings.project_name,
    description="""
    ## Onboarding Tracker API

    Tracks new hires through a fixed set of HR, IT and Admin onboarding tasks.

    - **Sessions**: demo login as HR, IT or Admin
    - **Employees**: create employees, each with their onboarding task set
    - **Tasks**: update task status (role gated) and comment on tasks
    - **Reports**: dashboard counters, department and timeline reports
    - **Activity**: the last 100 user actions, newest first
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url=f"{settings.api_v1_str}/openapi.json",
    lifespan=lifespan
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    Global exception handler for unhandled errors.

    Provides consistent error responses and logging for debugging.
    """
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    error_detail = str(exc) if settings.debug else "Internal server error"

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": error_detail,
            "path": str(request.url),
            "method": request.method
        }
    )


# Root endpoint
@app.get("/", tags=["System"])
async def root():
    """
    Root endpoint providing API information.

    Returns:
        Dict containing API information and available endpoints
    """
    return {
        "message": f"Welcome to {settings.project_name}",
        "version": "1.0.0",
        "documentation": {
            "interactive": "/docs",
            "alternative": "/redoc",
            "openapi_spec": f"{settings.api_v1_str}/openapi.json"
        },
        "endpoints": {
            "auth": f"{settings.api_v1_str}/auth",
            "employees": f"{settings.api_v1_str}/employees",
            "tasks": f"{settings.api_v1_str}/tasks",
            "activity": f"{settings.api_v1_str}/activity",
            "reports": f"{settings.api_v1_str}/reports",
            "preferences": f"{settings.api_v1_str}/preferences"
        }
    }


# Health check endpoint
@app.get("/health", tags=["System"])
async def health_check(store: KeyValueStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns:
        Dict containing application health status and store information
    """
    health = {
        "status": "healthy",
        "version": "1.0.0",
        "environment": "development" if settings.debug else "production",
        "store": settings.store_backend,
    }
    if isinstance(store, MemoryStore):
        health["store_metrics"] = store.get_metrics()
    elif not store.ping():
        health["status"] = "degraded"
    return health


# Include API routers
app.include_router(
    auth.router,
    prefix=f"{settings.api_v1_str}/auth",
    tags=["Session"]
)

app.include_router(
    employees.router,
    prefix=f"{settings.api_v1_str}/employees",
    tags=["Employees"]
)

app.include_router(
    tasks.router,
    prefix=f"{settings.api_v1_str}/tasks",
    tags=["Tasks"]
)

app.include_router(
    activity.router,
    prefix=f"{settings.api_v1_str}/activity",
    tags=["Activity"]
)

app.include_router(
    reports.router,
    prefix=f"{settings.api_v1_str}/reports",
    tags=["Reports"]
)

app.include_router(
    preferences.router,
    prefix=f"{settings.api_v1_str}/preferences",
    tags=["Preferences"]
)


# Development server entry point
if __name__ == "__main__":
    uvicorn.run(
        "onboarding_tracker.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
