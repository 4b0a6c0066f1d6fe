"""Authentication domain service.

Handles registration, password login and account-state enforcement.
Login refuses deleted, banned and suspended accounts before a token is
issued; the same check runs on every authenticated request.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from folio.config import AuthSettings
from folio.domain.error import (
    AccountStateError,
    AuthenticationError,
    BusinessRuleViolationError,
    ValidationError,
)
from folio.domain.model import User
from folio.domain.repository import UserRepository
from folio.domain.value import UserId
from folio.domain.value.types import Username
from folio.util.password import check_password, hash_password

from .base import Service
from .user_service import UserService

# bcrypt only reads the first 72 bytes of a password
PASSWORD_MAX_LENGTH = 72


def _parse_username(username: str) -> Username:
    try:
        return Username(username)
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"])


class AuthService(Service):
    """Domain service for password authentication and account profile."""

    def __init__(
        self,
        user_repository: UserRepository,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            user_service: User domain service
            auth_settings: Password and token settings
        """
        self.user_repository = user_repository
        self.user_service = user_service
        self.auth_settings = auth_settings

    def _validate_password(self, password: str) -> None:
        if len(password) < self.auth_settings.password_min_length:
            raise ValidationError(
                f"Password must be at least {self.auth_settings.password_min_length} characters"
            )
        if len(password.encode("utf-8")) > PASSWORD_MAX_LENGTH:
            raise ValidationError(
                f"Password must be at most {PASSWORD_MAX_LENGTH} bytes"
            )

    async def _ensure_username_free(
        self, username: Username, user_id: UserId | None = None
    ) -> None:
        existing = await self.user_repository.find_by_username(username)
        if existing and existing.id != user_id:
            raise BusinessRuleViolationError("Username is already taken")

    async def _ensure_email_free(
        self, email: str, user_id: UserId | None = None
    ) -> None:
        existing = await self.user_repository.find_by_email(email)
        if existing and existing.id != user_id:
            raise BusinessRuleViolationError("Email is already registered")

    async def register(
        self, username: str, email: str, name: str, password: str
    ) -> User:
        """Create a new account.

        Args:
            username: Desired username
            email: Email address (stored lower-cased)
            name: Display name
            password: Plaintext password

        Returns:
            Created user

        Raises:
            ValidationError: If username or password are malformed
            BusinessRuleViolationError: If username or email is taken
        """
        with logfire.span("auth_service.register", username=username):
            handle = _parse_username(username)
            email = email.strip().lower()
            self._validate_password(password)

            await self._ensure_username_free(handle)
            await self._ensure_email_free(email)

            user = User(
                id=UserId(uuid4()),
                username=handle,
                email=email,
                name=name.strip(),
                password_hash=hash_password(
                    password, rounds=self.auth_settings.bcrypt_rounds
                ),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    def ensure_active(self, user: User) -> None:
        """Reject deleted, banned and suspended accounts.

        Raises:
            AccountStateError: With the blocking state and its reason
        """
        state = user.account_state
        if state is not None:
            logfire.warn(
                "Blocked account rejected",
                user_id=str(user.id),
                state=state.value,
            )
            raise AccountStateError(state, user.account_state_reason)

    async def authenticate(self, identifier: str, password: str) -> User:
        """Check credentials for login by email or username.

        Args:
            identifier: Email or username
            password: Plaintext password

        Returns:
            The authenticated, active user

        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
            AccountStateError: If the account is deleted, banned or suspended
        """
        with logfire.span("auth_service.authenticate", identifier=identifier):
            user = await self.user_service.find_by_login(identifier)
            if not user:
                logfire.warn("Login for unknown user", identifier=identifier)
                raise AuthenticationError("Invalid credentials")

            if not check_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid credentials")

            self.ensure_active(user)

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def update_profile(
        self,
        user: User,
        username: str | None = None,
        email: str | None = None,
        name: str | None = None,
        bio: str | None = None,
    ) -> User:
        """Update profile fields; unset arguments are left unchanged.

        Raises:
            BusinessRuleViolationError: If the new username or email is taken
        """
        with logfire.span("auth_service.update_profile", user_id=str(user.id)):
            update: dict = {"updated_at": datetime.now()}

            if username is not None and username != user.username.root:
                handle = _parse_username(username)
                await self._ensure_username_free(handle, user.id)
                update["username"] = handle

            if email is not None and email.strip().lower() != user.email:
                normalized = email.strip().lower()
                await self._ensure_email_free(normalized, user.id)
                update["email"] = normalized

            if name is not None:
                update["name"] = name.strip()
            if bio is not None:
                update["bio"] = bio

            updated = user.model_copy(update=update)
            saved = await self.user_repository.save(updated)
            logfire.info(
                "Profile updated", user_id=str(user.id), fields=sorted(update.keys())
            )
            return saved

    async def change_password(
        self, user: User, current_password: str, new_password: str
    ) -> User:
        """Replace the password after checking the current one.

        Raises:
            AuthenticationError: If the current password is wrong
            ValidationError: If the new password is too short or too long
        """
        with logfire.span("auth_service.change_password", user_id=str(user.id)):
            if not check_password(current_password, user.password_hash):
                raise AuthenticationError("Current password is incorrect")
            self._validate_password(new_password)

            updated = user.model_copy(
                update={
                    "password_hash": hash_password(
                        new_password, rounds=self.auth_settings.bcrypt_rounds
                    ),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user.id))
            return saved

    async def set_avatar(self, user: User, avatar_url: str | None) -> User:
        """Set or clear the avatar URL."""
        updated = user.model_copy(
            update={"avatar_url": avatar_url, "updated_at": datetime.now()}
        )
        return await self.user_repository.save(updated)
