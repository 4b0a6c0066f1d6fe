"""Relationship repository interface.

Follows, pending follow requests and blocks are directed edges between
users. Each edge is stored once; adding an existing edge is a no-op that
reports ``False`` so concurrent requests cannot double-insert.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from folio.domain.value import UserId


class RelationshipRepository(ABC):
    """Repository for the user relationship graph."""

    # Follow edges

    @abstractmethod
    async def add_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Create a follow edge.

        Args:
            follower_id: User who follows
            followee_id: User being followed

        Returns:
            True if the edge was created, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Delete a follow edge.

        Returns:
            True if an edge was removed
        """
        pass

    @abstractmethod
    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        pass

    @abstractmethod
    async def find_followers(self, user_id: UserId) -> List[UserId]:
        """IDs of users following ``user_id``, most recent first."""
        pass

    @abstractmethod
    async def find_following(self, user_id: UserId) -> List[UserId]:
        """IDs of users ``user_id`` follows, most recent first."""
        pass

    @abstractmethod
    async def count_followers(self, user_ids: Sequence[UserId]) -> Dict[UserId, int]:
        """Follower counts for several users (batch query).

        Users without followers map to 0.
        """
        pass

    # Follow requests

    @abstractmethod
    async def add_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        """Record a pending follow request.

        Returns:
            True if created, False if a request was already pending
        """
        pass

    @abstractmethod
    async def remove_follow_request(
        self, requester_id: UserId, target_id: UserId
    ) -> bool:
        """Consume a pending follow request.

        Returns:
            True if a request was pending and removed
        """
        pass

    @abstractmethod
    async def has_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        pass

    @abstractmethod
    async def find_follow_requests(self, target_id: UserId) -> List[UserId]:
        """IDs of users waiting for ``target_id`` to approve them, oldest first."""
        pass

    # Blocks

    @abstractmethod
    async def add_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        """Create a block edge.

        Returns:
            True if created, False if already blocked
        """
        pass

    @abstractmethod
    async def remove_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        pass

    @abstractmethod
    async def is_blocked(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        pass

    @abstractmethod
    async def find_blocked(self, blocker_id: UserId) -> List[UserId]:
        """IDs of users ``blocker_id`` has blocked."""
        pass
