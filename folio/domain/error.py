"""Domain layer errors."""

from folio.domain.value import AccountState


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class ConflictError(DomainError):
    """Raised when a change would duplicate an existing relationship."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials or a session are missing or invalid."""

    pass


class PermissionDeniedError(DomainError):
    """Raised when the caller lacks the role an operation needs."""

    pass


class NotAuthorizedError(PermissionDeniedError):
    """Raised when a user attempts to act on content they may not touch."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AccountStateError(DomainError):
    """Raised when a suspended, banned or deleted account tries to act."""

    def __init__(self, state: AccountState, reason: str | None = None):
        self.state = state
        self.reason = reason
        messages = {
            AccountState.DELETED: "This account has been deleted",
            AccountState.BANNED: "This account has been banned",
            AccountState.SUSPENDED: "This account is suspended",
        }
        super().__init__(messages[state])


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
