"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from folio.domain.model.user import AccountWarning, User
from folio.domain.value import ModeratedFilter, UserId
from folio.domain.value.types import Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users at once (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (case-insensitive).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If username or email is already taken
        """
        pass

    @abstractmethod
    async def search(self, query: str, limit: int, offset: int) -> List[User]:
        """Find active users whose username or name contains ``query``.

        Results are ordered by username.
        """
        pass

    @abstractmethod
    async def count_search(self, query: str) -> int:
        """Count users matched by ``search``."""
        pass

    @abstractmethod
    async def find_all(self, limit: int, offset: int) -> List[User]:
        """List every user, newest first (admin listing)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count every user."""
        pass

    @abstractmethod
    async def find_moderated(self, state: ModeratedFilter) -> List[User]:
        """List users that are suspended, banned or deleted.

        Args:
            state: Which moderation flag to filter by, or ALL for any

        Returns:
            Matching users, newest first
        """
        pass

    @abstractmethod
    async def find_public_active(self) -> List[User]:
        """List users that are neither private nor blocked from the platform.

        These are the only users that may appear in public rankings.
        """
        pass

    @abstractmethod
    async def add_warning(self, warning: AccountWarning) -> AccountWarning:
        """Record a moderation warning against a user."""
        pass

    @abstractmethod
    async def find_warnings(self, user_id: UserId) -> List[AccountWarning]:
        """List a user's warnings, oldest first."""
        pass
