"""My ranking position use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.application.usecase.ranking.get_rankings import UserTotals, user_totals
from folio.domain.service import RankingService, UserService
from folio.domain.value import UserId


class MyPositionRequest(BaseModel):
    """Request naming the signed-in user."""

    user_id: str


class MyPositionResponse(ApiModel):
    """The caller's place in the global ranking.

    ``position`` is None for private accounts, which are never ranked.
    """

    position: int | None
    total_users: int
    stats: UserTotals | None = None
    message: str | None = None


class MyPositionUseCase(BaseUseCase):
    """Use case for looking up the caller's global rank."""

    def __init__(
        self, ranking_service: RankingService, user_service: UserService
    ) -> None:
        self.ranking_service = ranking_service
        self.user_service = user_service

    async def execute(self, request: MyPositionRequest) -> MyPositionResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        position = await self.ranking_service.position_of(user)

        if user.privacy.is_private:
            return MyPositionResponse(
                position=None,
                total_users=position.total_users,
                message="Private profiles are not included in rankings",
            )

        return MyPositionResponse(
            position=position.position,
            total_users=position.total_users,
            stats=user_totals(position.stats) if position.stats else None,
        )
