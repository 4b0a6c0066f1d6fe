"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import AccountWarning, User
from folio.domain.repository import UserRepository
from folio.domain.value import ModeratedFilter, UserId
from folio.domain.value.types import Username
from folio.persistence.mappers import row_to_user, row_to_warning, user_to_dict
from folio.persistence.tables import user_warnings_table, users_table

_active = (
    users_table.c.is_suspended.is_(False),
    users_table.c.is_banned.is_(False),
    users_table.c.is_deleted.is_(False),
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def _fetch_all(self, stmt) -> List[User]:
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        return await self._fetch_all(stmt)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username, ignoring case."""
        stmt = select(users_table).where(
            func.lower(users_table.c.username) == username.root.lower()
        )
        return await self._fetch_one(stmt)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        return await self._fetch_one(stmt)

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    def _search_filter(self, query: str):
        return or_(
            users_table.c.username.icontains(query, autoescape=True),
            users_table.c.name.icontains(query, autoescape=True),
        )

    async def search(self, query: str, limit: int, offset: int) -> List[User]:
        """Active users whose username or name contains ``query``."""
        stmt = (
            select(users_table)
            .where(self._search_filter(query), *_active)
            .order_by(users_table.c.username)
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count_search(self, query: str) -> int:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(self._search_filter(query), *_active)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_all(self, limit: int, offset: int) -> List[User]:
        stmt = (
            select(users_table)
            .order_by(users_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        return await self._fetch_all(stmt)

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(users_table)
        )
        return result.scalar_one()

    async def find_moderated(self, state: ModeratedFilter) -> List[User]:
        conditions = {
            ModeratedFilter.SUSPENDED: users_table.c.is_suspended.is_(True),
            ModeratedFilter.BANNED: users_table.c.is_banned.is_(True),
            ModeratedFilter.DELETED: users_table.c.is_deleted.is_(True),
            ModeratedFilter.ALL: or_(
                users_table.c.is_suspended.is_(True),
                users_table.c.is_banned.is_(True),
                users_table.c.is_deleted.is_(True),
            ),
        }
        stmt = (
            select(users_table)
            .where(conditions[state])
            .order_by(users_table.c.updated_at.desc())
        )
        return await self._fetch_all(stmt)

    async def find_public_active(self) -> List[User]:
        stmt = select(users_table).where(users_table.c.is_private.is_(False), *_active)
        return await self._fetch_all(stmt)

    async def add_warning(self, warning: AccountWarning) -> AccountWarning:
        stmt = user_warnings_table.insert().values(**warning.model_dump())
        await self.session.execute(stmt)
        await self.session.flush()
        return warning

    async def find_warnings(self, user_id: UserId) -> List[AccountWarning]:
        stmt = (
            select(user_warnings_table)
            .where(user_warnings_table.c.user_id == user_id)
            .order_by(user_warnings_table.c.issued_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_warning(dict(row)) for row in result.mappings().all()]
