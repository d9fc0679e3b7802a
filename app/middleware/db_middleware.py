# app/middleware/db_middleware.py
"""
Lazy Database Initialization Middleware.

Ensures tables exist before processing requests when startup creation failed.
"""

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
import logging

from app.database import init_db, tables_ready

logger = logging.getLogger(__name__)


class LazyDatabaseMiddleware(BaseHTTPMiddleware):
    """Middleware to ensure the schema exists before handling requests."""

    async def dispatch(self, request: Request, call_next):
        """
        Create tables on the first non-health request if startup did not.
        """
        # Skip for health check endpoints to allow fast startup validation
        if request.url.path in ["/", "/health"]:
            return await call_next(request)

        if not tables_ready():
            try:
                logger.info("Lazy initializing database tables...")
                await run_in_threadpool(init_db)
            except Exception as e:
                logger.error(f"Failed to initialize database: {e}")
                # Let the request proceed - storage errors surface as PersistenceError

        return await call_next(request)
