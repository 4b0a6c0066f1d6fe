"""User domain service."""

import logfire

from folio.domain.error import NotFoundError
from folio.domain.model import User
from folio.domain.repository import UserRepository
from folio.domain.value import UserId
from folio.domain.value.types import Username

from .base import Service


class UserService(Service):
    """Domain service for user lookups and profile reads."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: str) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If no user has this username
        """
        with logfire.span("user_service.get_by_username", username=username):
            try:
                handle = Username(username)
            except ValueError:
                raise NotFoundError("User", username)
            user = await self.user_repository.find_by_username(handle)
            if not user:
                logfire.warn("User not found", username=username)
                raise NotFoundError("User", username)
            return user

    async def find_by_login(self, identifier: str) -> User | None:
        """Find a user by email or username.

        Identifiers containing ``@`` are treated as emails.
        """
        if "@" in identifier:
            return await self.user_repository.find_by_email(identifier.strip().lower())
        try:
            return await self.user_repository.find_by_username(
                Username(identifier.strip())
            )
        except ValueError:
            return None

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users keyed by ID; unknown IDs are skipped."""
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(user_ids)
        return {user.id: user for user in users}

    async def search(self, query: str, page: int, limit: int) -> tuple[list[User], int]:
        """Search active users by username or name.

        Args:
            query: Substring to match
            page: 1-based page number
            limit: Page size

        Returns:
            Page of users and total match count
        """
        with logfire.span("user_service.search", query=query, page=page):
            offset = (page - 1) * limit
            users = await self.user_repository.search(query, limit, offset)
            total = await self.user_repository.count_search(query)
            logfire.info("User search", query=query, total=total)
            return users, total
