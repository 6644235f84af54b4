"""Database initialization utilities."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

# Import models to register with Base.metadata
import school.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import school_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from school.infrastructure.persistence.sqlalchemy.models.base import Base
from school_config.settings import get_settings

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        Path(database_url.split("///")[-1]).parent.mkdir(parents=True, exist_ok=True)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    ensure_sqlite_directory(settings.database_url)
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def display_database_url(database_url: Optional[str] = None) -> str:
    """Return the database URL without credentials."""
    url = database_url or get_settings().database_url
    return url.split("@")[-1] if "@" in url else url


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or _get_engine()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


async def _reset_database() -> None:
    logger.info("Dropping all tables...")
    await drop_tables()

    logger.info("Creating all tables...")
    await create_tables()

    logger.info("Database recreated successfully!")


async def _seed_database() -> bool:
    # Imported lazily so schema management does not pull in the services
    from school.infrastructure.persistence.sqlalchemy.seed import seed_development_data
    from school.infrastructure.persistence.sqlalchemy.unit_of_work import (
        UnitOfWorkSQLAlchemy,
    )
    from school_identity.services import PasswordHashingService

    settings = get_settings()
    engine = _get_engine()
    await create_tables(engine)

    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    try:
        async with session_maker() as session:
            return await seed_development_data(
                UnitOfWorkSQLAlchemy(session),
                PasswordHashingService(iterations=settings.password_hash_iterations),
            )
    finally:
        await engine.dispose()


def db_init() -> None:
    """Initialize database (create tables)."""
    logger.info("Initializing database: %s", display_database_url())
    asyncio.run(create_tables())
    logger.info("Database initialized successfully!")


def db_reset() -> None:
    """Drop and recreate all database tables."""
    asyncio.run(_reset_database())


def db_seed() -> bool:
    """Insert development data. Returns False when data already exists."""
    return asyncio.run(_seed_database())
