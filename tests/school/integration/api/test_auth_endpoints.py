"""Integration tests for authentication endpoints."""

import pytest


class TestAuthRegister:
    """Tests for POST /api/v1/auth/register."""

    @pytest.mark.asyncio
    async def test_register_success(self, client, api_v1_prefix):
        """Successfully register a new user as a student."""
        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={
                "username": "alice",
                "email": "Alice@Example.com",
                "password": "secret1",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["role"] == "Student"
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 60 * 60
        assert data["token"]

    @pytest.mark.asyncio
    async def test_register_with_role(self, register_user):
        """The caller may pick the role."""
        body = await register_user("grace", role="Teacher")

        assert body["role"] == "Teacher"

    @pytest.mark.asyncio
    async def test_register_duplicate_username(
        self, client, register_user, api_v1_prefix
    ):
        """A taken username is a 409 with a machine-readable code."""
        await register_user("alice")

        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={
                "username": "alice",
                "email": "other@example.com",
                "password": "secret1",
            },
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_USERNAME"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, client, register_user, api_v1_prefix):
        """A registered email is a 409, regardless of case."""
        await register_user("alice")

        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={
                "username": "alice2",
                "email": "ALICE@example.com",
                "password": "secret1",
            },
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"
        assert "already registered" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_register_short_username(self, client, api_v1_prefix):
        """Domain validation failures are 400s."""
        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={"username": "al", "email": "al@example.com", "password": "secret1"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_register_short_password(self, client, api_v1_prefix):
        """Request shape violations are rejected by FastAPI with 422."""
        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={"username": "alice", "email": "a@example.com", "password": "12345"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, client, api_v1_prefix):
        """Cannot register with an invalid email format."""
        response = await client.post(
            f"{api_v1_prefix}/auth/register",
            json={"username": "alice", "email": "not-an-email", "password": "secret1"},
        )

        assert response.status_code == 422


class TestAuthLogin:
    """Tests for POST /api/v1/auth/login."""

    @pytest.mark.asyncio
    async def test_login_success(self, client, register_user, api_v1_prefix):
        """Correct credentials return a fresh token."""
        await register_user("alice")

        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json={"username": "alice", "password": "secret1"},
        )

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert response.json()["token"]

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client, register_user, api_v1_prefix):
        """A wrong password is a 401 with a bearer challenge."""
        await register_user("alice")

        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json={"username": "alice", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
        assert response.json()["detail"] == "Invalid username or password"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client, api_v1_prefix):
        """Unknown users get the same answer as wrong passwords."""
        response = await client.post(
            f"{api_v1_prefix}/auth/login",
            json={"username": "nobody", "password": "secret1"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid username or password"


class TestAuthAvailability:
    """Tests for the username and email availability checks."""

    @pytest.mark.asyncio
    async def test_username_exists(self, client, register_user, api_v1_prefix):
        """Taken and free usernames are reported."""
        await register_user("alice")

        taken = await client.get(f"{api_v1_prefix}/auth/username-exists/alice")
        free = await client.get(f"{api_v1_prefix}/auth/username-exists/bob")

        assert taken.json() == {"exists": True}
        assert free.json() == {"exists": False}

    @pytest.mark.asyncio
    async def test_email_exists(self, client, register_user, api_v1_prefix):
        """Email checks ignore case."""
        await register_user("alice")

        response = await client.get(
            f"{api_v1_prefix}/auth/email-exists/ALICE@example.com",
        )

        assert response.json() == {"exists": True}


class TestAuthMe:
    """Tests for GET /api/v1/auth/me."""

    @pytest.mark.asyncio
    async def test_me_returns_current_user(self, client, register_user, api_v1_prefix):
        """The token resolves to the registered user."""
        body = await register_user("grace", role="Teacher")

        response = await client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": f"Bearer {body['token']}"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "grace"
        assert data["role"] == "Teacher"
        assert data["is_active"] is True

    @pytest.mark.asyncio
    async def test_me_without_token(self, client, api_v1_prefix):
        """Missing credentials are a 401."""
        response = await client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_me_with_invalid_token(self, client, api_v1_prefix):
        """A forged token is a 401."""
        response = await client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"
