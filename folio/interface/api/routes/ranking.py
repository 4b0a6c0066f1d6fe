"""Ranking routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.ranking import (
    GlobalRankingUseCase,
    MyPositionRequest,
    MyPositionResponse,
    MyPositionUseCase,
    ProjectRankingResponse,
    ProjectRankingUseCase,
    RankingRequest,
    TagRankingResponse,
    TagRankingUseCase,
    UserRankingResponse,
    WeeklyRankingResponse,
    WeeklyRankingUseCase,
)
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/ranking", tags=["ranking"], route_class=DishkaRoute)


@router.get("/global", response_model=UserRankingResponse)
async def global_ranking(
    global_ranking_use_case: FromDishka[GlobalRankingUseCase],
    skip: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> UserRankingResponse:
    """Public users ranked by all-time popularity.

    Args:
        global_ranking_use_case: Ranking use case from DI
        skip: Entries to skip; negative values count as 0
        limit: Page size, clamped to 1..100 (default 20)

    Returns:
        Ranked users and pagination
    """
    return await global_ranking_use_case.execute(RankingRequest(skip=skip, limit=limit))


@router.get("/projects", response_model=ProjectRankingResponse)
async def project_ranking(
    project_ranking_use_case: FromDishka[ProjectRankingUseCase],
    skip: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> ProjectRankingResponse:
    """Public projects ranked by popularity."""
    return await project_ranking_use_case.execute(
        RankingRequest(skip=skip, limit=limit)
    )


@router.get("/tags", response_model=TagRankingResponse)
async def tag_ranking(
    tag_ranking_use_case: FromDishka[TagRankingUseCase],
    skip: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> TagRankingResponse:
    """Tags ranked by the summed popularity of their projects."""
    return await tag_ranking_use_case.execute(RankingRequest(skip=skip, limit=limit))


@router.get("/weekly", response_model=WeeklyRankingResponse)
async def weekly_ranking(
    weekly_ranking_use_case: FromDishka[WeeklyRankingUseCase],
    skip: int | None = Query(default=None),
    limit: int | None = Query(default=None),
) -> WeeklyRankingResponse:
    """Public users ranked by engagement over the trailing week."""
    return await weekly_ranking_use_case.execute(RankingRequest(skip=skip, limit=limit))


@router.get("/my-position", response_model=MyPositionResponse)
async def my_position(
    my_position_use_case: FromDishka[MyPositionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> MyPositionResponse:
    """The signed-in user's position in the global ranking.

    Private accounts are not ranked and get a null position.
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await my_position_use_case.execute(MyPositionRequest(user_id=user.id))
