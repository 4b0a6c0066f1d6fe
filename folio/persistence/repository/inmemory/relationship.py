"""In-memory relationship repository for testing."""

from datetime import datetime
from typing import Sequence

from folio.domain.repository import RelationshipRepository
from folio.domain.value import UserId

from .store import InMemoryStore

Edges = dict[tuple[UserId, UserId], datetime]


def _add(edges: Edges, key: tuple[UserId, UserId]) -> bool:
    if key in edges:
        return False
    edges[key] = datetime.now()
    return True


def _remove(edges: Edges, key: tuple[UserId, UserId]) -> bool:
    return edges.pop(key, None) is not None


class InMemoryRelationshipRepository(RelationshipRepository):
    """In-memory implementation of RelationshipRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def add_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        return _add(self._store.follows, (follower_id, followee_id))

    async def remove_follow(self, follower_id: UserId, followee_id: UserId) -> bool:
        return _remove(self._store.follows, (follower_id, followee_id))

    async def is_following(self, follower_id: UserId, followee_id: UserId) -> bool:
        return (follower_id, followee_id) in self._store.follows

    async def find_followers(self, user_id: UserId) -> list[UserId]:
        return [
            follower
            for follower, followee in reversed(self._store.follows)
            if followee == user_id
        ]

    async def find_following(self, user_id: UserId) -> list[UserId]:
        return [
            followee
            for follower, followee in reversed(self._store.follows)
            if follower == user_id
        ]

    async def count_followers(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        counts = {user_id: 0 for user_id in user_ids}
        for _, followee in self._store.follows:
            if followee in counts:
                counts[followee] += 1
        return counts

    async def add_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        return _add(self._store.follow_requests, (requester_id, target_id))

    async def remove_follow_request(
        self, requester_id: UserId, target_id: UserId
    ) -> bool:
        return _remove(self._store.follow_requests, (requester_id, target_id))

    async def has_follow_request(self, requester_id: UserId, target_id: UserId) -> bool:
        return (requester_id, target_id) in self._store.follow_requests

    async def find_follow_requests(self, target_id: UserId) -> list[UserId]:
        return [
            requester
            for requester, target in self._store.follow_requests
            if target == target_id
        ]

    async def add_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return _add(self._store.blocks, (blocker_id, blocked_id))

    async def remove_block(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return _remove(self._store.blocks, (blocker_id, blocked_id))

    async def is_blocked(self, blocker_id: UserId, blocked_id: UserId) -> bool:
        return (blocker_id, blocked_id) in self._store.blocks

    async def find_blocked(self, blocker_id: UserId) -> list[UserId]:
        return [
            blocked
            for blocker, blocked in reversed(self._store.blocks)
            if blocker == blocker_id
        ]
