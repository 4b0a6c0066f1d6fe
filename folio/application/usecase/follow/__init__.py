"""Follow, block and privacy use cases."""

from .block_user import BlockUserUseCase, ListBlockedUseCase, UnblockUserUseCase
from .follow_request import (
    AcceptFollowRequestUseCase,
    ListFollowRequestsUseCase,
    RejectFollowRequestUseCase,
    UserListRequest,
    UserListResponse,
)
from .follow_user import (
    FollowResponse,
    FollowUserUseCase,
    RemoveFollowerUseCase,
    UnfollowUserUseCase,
    UserActionRequest,
)
from .list_follows import FollowListRequest, ListFollowersUseCase, ListFollowingUseCase
from .relationship import (
    GetRelationshipUseCase,
    UpdatePrivacyRequest,
    UpdatePrivacyUseCase,
)

__all__ = [
    "AcceptFollowRequestUseCase",
    "BlockUserUseCase",
    "FollowListRequest",
    "FollowResponse",
    "FollowUserUseCase",
    "GetRelationshipUseCase",
    "ListBlockedUseCase",
    "ListFollowRequestsUseCase",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "RejectFollowRequestUseCase",
    "RemoveFollowerUseCase",
    "UnblockUserUseCase",
    "UnfollowUserUseCase",
    "UpdatePrivacyRequest",
    "UpdatePrivacyUseCase",
    "UserActionRequest",
    "UserListRequest",
    "UserListResponse",
]
