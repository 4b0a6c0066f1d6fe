"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from folio.config import (
    AnalyticsSettings,
    AuthSettings,
    FeedSettings,
    RankingSettings,
    Settings,
)
from folio.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each nested settings group is exposed on its own so services only depend
    on the part they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_ranking_settings(self, settings: Settings) -> RankingSettings:
        return settings.ranking

    @provide
    def provide_analytics_settings(self, settings: Settings) -> AnalyticsSettings:
        return settings.analytics

    @provide
    def provide_feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed
