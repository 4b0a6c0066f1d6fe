"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from folio.domain.model import AccountWarning, User
from folio.domain.repository import UserRepository
from folio.domain.value import ModeratedFilter, UserId
from folio.domain.value.types import Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        return [
            self._store.users[uid] for uid in set(user_ids) if uid in self._store.users
        ]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username, ignoring case."""
        wanted = username.root.lower()
        for user in self._store.users.values():
            if user.username.root.lower() == wanted:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email, ignoring case."""
        for user in self._store.users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If another user holds the username or email
        """
        for other in self._store.users.values():
            if other.id == user.id:
                continue
            if other.username.root.lower() == user.username.root.lower():
                raise IntegrityError(
                    "Key (username)=(%s) already exists" % user.username, None, Exception()
                )
            if other.email.lower() == user.email.lower():
                raise IntegrityError(
                    "Key (email)=(%s) already exists" % user.email, None, Exception()
                )
        self._store.users[user.id] = user
        return user

    def _matches(self, user: User, query: str) -> bool:
        query = query.lower()
        return user.is_active and (
            query in user.username.root.lower() or query in user.name.lower()
        )

    async def search(self, query: str, limit: int, offset: int) -> list[User]:
        matches = sorted(
            (u for u in self._store.users.values() if self._matches(u, query)),
            key=lambda u: u.username.root,
        )
        return matches[offset : offset + limit]

    async def count_search(self, query: str) -> int:
        return sum(1 for u in self._store.users.values() if self._matches(u, query))

    async def find_all(self, limit: int, offset: int) -> list[User]:
        users = sorted(
            self._store.users.values(), key=lambda u: u.created_at, reverse=True
        )
        return users[offset : offset + limit]

    async def count(self) -> int:
        return len(self._store.users)

    async def find_moderated(self, state: ModeratedFilter) -> list[User]:
        checks = {
            ModeratedFilter.SUSPENDED: lambda u: u.is_suspended,
            ModeratedFilter.BANNED: lambda u: u.is_banned,
            ModeratedFilter.DELETED: lambda u: u.is_deleted,
            ModeratedFilter.ALL: lambda u: not u.is_active,
        }
        return sorted(
            (u for u in self._store.users.values() if checks[state](u)),
            key=lambda u: u.updated_at,
            reverse=True,
        )

    async def find_public_active(self) -> list[User]:
        return [
            u
            for u in self._store.users.values()
            if u.is_active and not u.privacy.is_private
        ]

    async def add_warning(self, warning: AccountWarning) -> AccountWarning:
        self._store.warnings.append(warning)
        return warning

    async def find_warnings(self, user_id: UserId) -> list[AccountWarning]:
        return [w for w in self._store.warnings if w.user_id == user_id]
