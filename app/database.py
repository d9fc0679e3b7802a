"""
Smart Fitness Planner API - Database Configuration.

SQLAlchemy engine, session factory, and declarative base for ORM models.
LAZY INITIALIZATION: Engine connects on first use, not at import time.
"""

from contextlib import contextmanager
from typing import Generator, Iterator, Optional
import logging

from sqlalchemy import create_engine, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from settings import settings
from app.utils.errors import PersistenceError

logger = logging.getLogger(__name__)

# Declarative base for ORM models
Base = declarative_base()

# Global engine and session factory (initialized lazily)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None
_tables_ready: bool = False


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def get_engine() -> Engine:
    """
    Get or create the SQLAlchemy engine (lazy initialization).

    SQLite gets a thread-agnostic engine (a single StaticPool connection for
    in-memory databases); PostgreSQL gets connection pooling and validation.

    Returns:
        Engine: SQLAlchemy engine instance.
    """
    global _engine
    if _engine is None:
        logger.info("Creating database engine...")
        try:
            if settings.is_sqlite:
                kwargs = {"connect_args": {"check_same_thread": False}}
                if _is_memory_sqlite(settings.DATABASE_URL):
                    kwargs["poolclass"] = StaticPool
                _engine = create_engine(settings.DATABASE_URL, echo=False, **kwargs)
            else:
                _engine = create_engine(
                    settings.DATABASE_URL,
                    echo=False,
                    pool_size=5,
                    max_overflow=10,
                    pool_pre_ping=True,      # Validate connections before use
                    pool_recycle=3600,       # Recycle connections every hour
                )
            logger.info("Database engine created successfully")
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise
    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get or create the session factory (lazy initialization).

    Returns:
        sessionmaker: SQLAlchemy session factory.
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = get_engine()
        _SessionLocal = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _SessionLocal


def init_db() -> None:
    """Create all tables that do not exist yet."""
    global _tables_ready
    # Register models on the metadata before create_all
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
    _tables_ready = True
    logger.info("Database tables ready")


def tables_ready() -> bool:
    return _tables_ready


@contextmanager
def storage_operation(db: Session, action: str) -> Iterator[Session]:
    """
    Translate driver failures into PersistenceError.

    Rolls back the session and re-raises as a single opaque error; nothing is retried.

    Args:
        db: Active session.
        action: Short description used in the message, e.g. "save profile".
    """
    try:
        yield db
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error while trying to {action}: {e}")
        raise PersistenceError(f"Failed to {action}", detail=str(e)) from e


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Yields a database session and ensures proper cleanup after request.

    Yields:
        Session: SQLAlchemy database session.

    Example:
        @router.get("/users/{user_id}/plans")
        def get_plans(user_id: int, db: Session = Depends(get_db)):
            return plan_generator.get_plans_for_user(db, user_id)
    """
    SessionLocal = get_session_factory()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
