"""
Database configuration and connection management.

Engine settings come from the shared service settings.
"""

import logging
import time
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config import settings
from .models import Base

logger = logging.getLogger(__name__)

QUERY_LOGGING_THRESHOLD_MS = 100


def get_engine_options(db_url: str) -> dict:
    """
    Get database-specific engine arguments.

    SQLite does not accept the pooling options used for PostgreSQL.

    Args:
        db_url: Database connection URL

    Returns:
        Keyword arguments for create_engine
    """
    if db_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": settings.DB_POOL_PRE_PING,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
    }


def _safe_url(db_url: str) -> str:
    if "@" in db_url:
        return db_url.split("@")[0].rsplit(":", 1)[0] + ":***@..."
    return db_url


@event.listens_for(Engine, "before_cursor_execute")
def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Track query start time."""
    conn.info.setdefault("query_start_time", []).append(time.time())


@event.listens_for(Engine, "after_cursor_execute")
def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
    """Log slow queries."""
    total_time_ms = (time.time() - conn.info["query_start_time"].pop()) * 1000

    if total_time_ms > QUERY_LOGGING_THRESHOLD_MS:
        logger.warning(
            f"Slow query detected: {total_time_ms:.2f}ms",
            extra={"query_time_ms": total_time_ms, "statement": statement[:200]},
        )


logger.info(f"Using database: {_safe_url(settings.DATABASE_URL)}")

engine = create_engine(
    settings.DATABASE_URL, echo=False, **get_engine_options(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@retry(
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
def init_db() -> None:
    """
    Initialize database tables.

    Uses checkfirst=True to safely handle existing tables. Connection
    failures are retried while the database is still starting up.
    """
    try:
        logger.info("Initializing database tables...")
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database initialized successfully")
    except Exception as e:
        error_msg = str(e).lower()
        if "already exists" in error_msg or "duplicate" in error_msg:
            logger.warning("Database objects already exist (expected)")
        else:
            logger.error(f"Failed to initialize database: {e}")
            raise


def get_db() -> Generator[Session, None, None]:
    """
    Get database session for dependency injection.

    Yields:
        SQLAlchemy database session, closed when the request ends
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connection(db: Session) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connectivity check failed: {e}")
        return False
