"""Who may moderate whom."""

from folio.domain.error import PermissionDeniedError
from folio.domain.model import User
from folio.domain.value import ModerationAction

# Actions allowed against another admin
ADMIN_TARGET_ACTIONS = frozenset(
    {ModerationAction.GRANT_ADMIN, ModerationAction.REVOKE_ADMIN}
)


def ensure_can_moderate(actor: User, target: User, action: ModerationAction) -> None:
    """Check that ``actor`` may apply ``action`` to ``target``.

    Admins cannot act on themselves, and cannot act on another admin until
    that admin's role has been revoked.

    Raises:
        PermissionDeniedError: If any rule is broken
    """
    if not actor.is_admin:
        raise PermissionDeniedError("Admin privileges required")
    if actor.id == target.id:
        raise PermissionDeniedError(f"You cannot {action.value.replace('_', ' ')} yourself")
    if target.is_admin and action not in ADMIN_TARGET_ACTIONS:
        raise PermissionDeniedError(
            "Revoke this user's admin role before moderating their account"
        )
