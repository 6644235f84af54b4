"""Pytest fixtures for API integration tests.

The application runs against an in-memory SQLite database shared by all
requests of one test. Requests go through httpx's ASGI transport so app
and database live on the test's event loop.
"""

import httpx
import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from school.presentation.api.app import API_V1_PREFIX, create_app
from school.presentation.api.config import get_api_settings
from school.presentation.api.dependencies import get_db_session
from school_config.settings import Settings

TEST_PASSWORD = "secret1"


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only-0123456789"),
        database_url="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_iterations=10_000,
        log_level="WARNING",
    )


@pytest.fixture
def app(api_settings, sqlite_engine):
    """Create the application with the database and settings overridden."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        sqlite_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    return app


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def _register(
    client: httpx.AsyncClient,
    username: str,
    role: str | None = None,
) -> dict:
    """Register ``username`` with a derived email and return the auth body."""
    payload = {
        "username": username,
        "email": f"{username}@example.com",
        "password": TEST_PASSWORD,
    }
    if role is not None:
        payload["role"] = role
    response = await client.post(f"{API_V1_PREFIX}/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def _current_user_id(client: httpx.AsyncClient, token: str) -> str:
    response = await client.get(
        f"{API_V1_PREFIX}/auth/me",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 200, response.text
    return response.json()["id"]


@pytest_asyncio.fixture
async def auth_headers(client) -> dict:
    """Bearer headers of a freshly registered admin."""
    body = await _register(client, "root", role="Admin")
    return {"Authorization": f"Bearer {body['token']}"}


@pytest_asyncio.fixture
async def school_data(client, auth_headers, api_v1_prefix) -> dict:
    """A teacher with one course and a student, created through the API."""
    grace = await _register(client, "grace", role="Teacher")
    alice = await _register(client, "alice")

    teacher = await client.post(
        f"{api_v1_prefix}/teachers",
        headers=auth_headers,
        json={
            "user_id": await _current_user_id(client, grace["token"]),
            "full_name": "Grace Hopper",
            "hire_date": "2015-09-01",
        },
    )
    assert teacher.status_code == 201, teacher.text

    student = await client.post(
        f"{api_v1_prefix}/students",
        headers=auth_headers,
        json={
            "user_id": await _current_user_id(client, alice["token"]),
            "full_name": "Alice Liddell",
            "birth_date": "2005-05-17",
        },
    )
    assert student.status_code == 201, student.text

    course = await client.post(
        f"{api_v1_prefix}/courses",
        headers=auth_headers,
        json={
            "title": "Math 101",
            "description": "Introduction to algebra",
            "start_date": "2025-09-01",
            "teacher_profile_id": teacher.json()["id"],
        },
    )
    assert course.status_code == 201, course.text

    return {
        "teacher": teacher.json(),
        "student": student.json(),
        "course": course.json(),
    }


@pytest.fixture
def register_user(client):
    """Register a user through the API and return the auth response body."""

    async def _register_user(username: str, role: str | None = None) -> dict:
        return await _register(client, username, role)

    return _register_user


@pytest.fixture
def user_id_of(client):
    """Resolve the user id behind a token via /auth/me."""

    async def _user_id_of(token: str) -> str:
        return await _current_user_id(client, token)

    return _user_id_of
