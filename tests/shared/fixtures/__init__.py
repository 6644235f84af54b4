"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    session,
    sqlite_engine,
    sqlite_session,
)
from tests.shared.fixtures.factories import TestSchoolFactory, TestUserFactory

__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "session",
    "sqlite_engine",
    "sqlite_session",
    "TestSchoolFactory",
    "TestUserFactory",
]
