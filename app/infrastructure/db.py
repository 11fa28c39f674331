"""Database infrastructure setup for the lead store."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.infrastructure.config.settings import settings

# Shared declarative base for ORM models
Base = declarative_base()

# Engine is created on first use so the in-memory lead store needs no DATABASE_URL
_engine = None
_SessionLocal = None


def _get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when LEAD_REPOSITORY=postgres")
        connect_args = {}
        if settings.database_url.startswith("sqlite"):
            # Sessions are opened from the event loop and the threadpool
            connect_args["check_same_thread"] = False
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,  # Verify connections before using
            echo=settings.debug_mode,  # Log SQL queries in debug mode
            connect_args=connect_args,
        )
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_get_engine())
    return _SessionLocal()


def dispose_engine() -> None:
    """Close pooled connections (no-op if the engine was never created)."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None
