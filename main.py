# main.py
"""
Smart Fitness Planner API - Main Application.

FastAPI app with a SQLAlchemy (SQLite/PostgreSQL) backend.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from settings import settings
from app.database import init_db
from app.middleware.db_middleware import LazyDatabaseMiddleware
from app.utils.errors import FitnessPlannerException, PersistenceError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")

# Import routers
from app.routes import (
    profile,
    plans,
    weight,
    progress,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Starting Smart Fitness Planner API...")
    # If table creation fails here, the middleware retries on first request
    try:
        init_db()
    except Exception as e:
        logger.warning(f"Failed to initialize database at startup: {e}")
        logger.warning("Database will be initialized lazily on first request")

    yield

    logger.info("Smart Fitness Planner API shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Smart Fitness Planner API",
    version="1.0.0",
    description="Weekly workout and meal planning with progress tracking",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Lazy table creation middleware
app.add_middleware(LazyDatabaseMiddleware)


@app.exception_handler(FitnessPlannerException)
async def planner_exception_handler(request: Request, exc: FitnessPlannerException):
    """Render domain errors as ``{"message", "detail"}``."""
    detail = exc.detail
    if isinstance(exc, PersistenceError) and not settings.expose_error_details:
        detail = exc.message
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "detail": detail}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Request validation failures use the same 400 shape as ValidationError."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = f"{field}: {first.get('msg', 'Invalid value')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={
            "message": message,
            "detail": [
                {"field": ".".join(str(part) for part in e.get("loc", ())), "error": e.get("msg")}
                for e in errors
            ]
        }
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint - fast response without database dependency."""
    return {
        "status": "ok",
        "environment": settings.ENV,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0"
    }


# Include routers
app.include_router(profile.router, prefix="/api", tags=["Profile"])
app.include_router(plans.router, prefix="/api", tags=["Weekly Plan"])
app.include_router(weight.router, prefix="/api", tags=["Weight Tracking"])
app.include_router(progress.router, prefix="/api", tags=["Progress"])


# Root endpoint
@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "message": "Smart Fitness Planner API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
