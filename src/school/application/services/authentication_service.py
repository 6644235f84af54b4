"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from school_identity import (
    AuthResult,
    EmailAlreadyExistsError,
    JWTService,
    PasswordHashingService,
    User,
    UsernameAlreadyExistsError,
    UserRole,
)

if TYPE_CHECKING:
    from school.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates school_identity infrastructure (password hashing, JWT
    tokens) with the User aggregate to provide:
    - User registration
    - Login with username and password
    - Username/email availability checks

    The service keeps no state of its own between calls.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._uow = unit_of_work
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(
            token=self._jwt_service.create_access_token(user),
            username=user.username,
            email=user.email,
            role=user.role,
        )

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> AuthResult:
        """Register a new user and issue a token.

        Both uniqueness checks run before anything is written. The storage
        layer's unique constraints remain the authoritative guard against
        concurrent registrations.

        Raises
        ------
        UsernameAlreadyExistsError
            If the username is taken
        EmailAlreadyExistsError
            If the email is already registered
        ValidationError
            If any field fails validation
        """
        if await self._uow.users.username_exists(username.strip()):
            raise UsernameAlreadyExistsError(username)

        if await self._uow.users.email_exists(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(
            username=username,
            email=email,
            password_hash=password_hash,
            role=role or UserRole.STUDENT,
        )
        await self._uow.users.add(user)
        await self._uow.save_changes()

        logger.info("User registered: %s (role: %s)", user.username, user.role.value)
        return self._issue(user)

    async def login(self, username: str, password: str) -> Optional[AuthResult]:
        """Authenticate a user.

        Returns None for an unknown username, an inactive account or a
        wrong password, without telling the caller which one it was.
        """
        user = await self._uow.users.find_by_username(username.strip())
        if user is None:
            logger.warning("Login failed: unknown username %s", username)
            return None

        if not self._password_service.verify(password, user.password_hash):
            logger.warning("Login failed: wrong password for %s", user.username)
            return None

        if not user.is_active:
            logger.warning("Login refused for inactive user %s", user.username)
            return None

        logger.info("User logged in: %s", user.username)
        return self._issue(user)

    async def username_exists(self, username: str) -> bool:
        return await self._uow.users.username_exists(username.strip())

    async def email_exists(self, email: str) -> bool:
        return await self._uow.users.email_exists(email)
