"""User repository interface."""

from abc import abstractmethod
from typing import Optional
from uuid import UUID

from school.domain.shared.repository import Repository
from school_identity.domain.user.aggregates.user import User


class UserRepository(Repository[User]):
    """Repository interface for User aggregates.

    Username lookups are exact. Email lookups are case-insensitive
    because emails are stored lower-cased.
    """

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def username_exists(
        self,
        username: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """Check if a username is taken, optionally ignoring one user."""

    @abstractmethod
    async def email_exists(
        self,
        email: str,
        exclude_id: Optional[UUID] = None,
    ) -> bool:
        """Check if an email is registered, optionally ignoring one user."""
