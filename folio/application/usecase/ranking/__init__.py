"""Ranking use cases."""

from .get_rankings import (
    GlobalRankingUseCase,
    ProjectRankingResponse,
    ProjectRankingUseCase,
    RankingRequest,
    TagRankingResponse,
    TagRankingUseCase,
    UserRankingResponse,
    WeeklyRankingResponse,
    WeeklyRankingUseCase,
)
from .my_position import MyPositionRequest, MyPositionResponse, MyPositionUseCase

__all__ = [
    "GlobalRankingUseCase",
    "MyPositionRequest",
    "MyPositionResponse",
    "MyPositionUseCase",
    "ProjectRankingResponse",
    "ProjectRankingUseCase",
    "RankingRequest",
    "TagRankingResponse",
    "TagRankingUseCase",
    "UserRankingResponse",
    "WeeklyRankingResponse",
    "WeeklyRankingUseCase",
]
