# src/scoreforge/db/session.py

"""Database engine and session management."""
import logging
import os

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

logger = logging.getLogger(__name__)

# Database URL from environment variable with SQLite fallback for development
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./scoreforge.db")


def create_db_engine(url: str | None = None) -> Engine:
    """Create the engine with appropriate configuration.

    SQLite doesn't support connection pooling, so we only configure
    pool settings for other databases like PostgreSQL.
    """
    url = url or DATABASE_URL
    echo = os.getenv("DB_ECHO", "false").lower() == "true"

    # SQLite doesn't support connection pooling
    if url.startswith("sqlite"):
        logger.debug("Creating SQLite engine", extra={"url": url})
        return create_engine(url, echo=echo)

    # PostgreSQL and other databases get full pool configuration
    return create_engine(
        url,
        pool_size=int(os.getenv("DB_POOL_SIZE", "20")),
        max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "10")),
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "3600")),
        echo=echo,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    """Create a configured "Session" class bound to ``engine``.

    autoflush=False: Changes are not flushed to the database until explicitly committed.
    expire_on_commit=False: Objects remain accessible after commit.
    """
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
