"""
Pytest configuration for school_identity integration tests.

Repository tests run against in-memory SQLite and, when enabled, against
an ephemeral PostgreSQL instance from Testcontainers.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    session,
    sqlite_engine,
    sqlite_session,
)

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "session",
    "sqlite_engine",
    "sqlite_session",
]
