"""
Pytest configuration for school_identity tests.

This conftest provides fixtures specific to identity concerns
(users, password hashing and tokens).
"""

import pytest

from school_identity import JWTService, PasswordHashingService
from school_identity.domain.user import User
from tests.shared.fixtures.factories import TestUserFactory

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only-0123456789"


@pytest.fixture
def test_user() -> User:
    """Create a standard student user."""
    return TestUserFactory.alice()


@pytest.fixture
def admin_user() -> User:
    """Create an admin user."""
    return TestUserFactory.root()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Password service with the lowest accepted iteration count."""
    return PasswordHashingService(iterations=PasswordHashingService.MIN_ITERATIONS)


@pytest.fixture
def jwt_service() -> JWTService:
    """JWT service with a fixed test secret."""
    return JWTService(
        secret_key=TEST_JWT_SECRET,
        issuer="school-api",
        audience="school-clients",
        expire_minutes=30,
    )
