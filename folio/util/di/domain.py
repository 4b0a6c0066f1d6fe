"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import AnalyticsSettings, AuthSettings, FeedSettings, RankingSettings
from folio.domain.repository import (
    ActivityRepository,
    AnalyticsRepository,
    CollaborationRepository,
    CommentRepository,
    NotificationRepository,
    ProjectRepository,
    RelationshipRepository,
    ReportRepository,
    UserRepository,
)
from folio.domain.service import (
    AnalyticsService,
    AuthService,
    CollaborationService,
    CommentService,
    JWTService,
    ModerationService,
    NotificationService,
    ProjectService,
    RankingService,
    RelationshipService,
    ReportService,
    UserService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_analytics_service(
        self,
        analytics_repository: AnalyticsRepository,
        activity_repository: ActivityRepository,
        project_repository: ProjectRepository,
        analytics_settings: AnalyticsSettings,
    ) -> AnalyticsService:
        """Provide analytics domain service."""
        return AnalyticsService(
            analytics_repository=analytics_repository,
            activity_repository=activity_repository,
            project_repository=project_repository,
            analytics_settings=analytics_settings,
        )

    @provide
    def get_relationship_service(
        self,
        relationship_repository: RelationshipRepository,
        user_repository: UserRepository,
        user_service: UserService,
        notification_service: NotificationService,
        analytics_service: AnalyticsService,
    ) -> RelationshipService:
        """Provide relationship (follow/block/privacy) domain service."""
        return RelationshipService(
            relationship_repository=relationship_repository,
            user_repository=user_repository,
            user_service=user_service,
            notification_service=notification_service,
            analytics_service=analytics_service,
        )

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        collaboration_repository: CollaborationRepository,
        user_service: UserService,
        relationship_service: RelationshipService,
        analytics_service: AnalyticsService,
        notification_service: NotificationService,
        feed_settings: FeedSettings,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            collaboration_repository=collaboration_repository,
            user_service=user_service,
            relationship_service=relationship_service,
            analytics_service=analytics_service,
            notification_service=notification_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        project_service: ProjectService,
        analytics_service: AnalyticsService,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            project_service=project_service,
            analytics_service=analytics_service,
            notification_service=notification_service,
        )

    @provide
    def get_collaboration_service(
        self,
        collaboration_repository: CollaborationRepository,
        user_repository: UserRepository,
        user_service: UserService,
        project_service: ProjectService,
        notification_service: NotificationService,
        analytics_service: AnalyticsService,
    ) -> CollaborationService:
        """Provide collaboration domain service."""
        return CollaborationService(
            collaboration_repository=collaboration_repository,
            user_repository=user_repository,
            user_service=user_service,
            project_service=project_service,
            notification_service=notification_service,
            analytics_service=analytics_service,
        )

    @provide
    def get_ranking_service(
        self,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        relationship_repository: RelationshipRepository,
        analytics_repository: AnalyticsRepository,
        ranking_settings: RankingSettings,
    ) -> RankingService:
        """Provide ranking domain service."""
        return RankingService(
            user_repository=user_repository,
            project_repository=project_repository,
            relationship_repository=relationship_repository,
            analytics_repository=analytics_repository,
            ranking_settings=ranking_settings,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
        project_service: ProjectService,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            comment_repository=comment_repository,
            user_service=user_service,
            project_service=project_service,
        )

    @provide
    def get_moderation_service(
        self,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
        report_service: ReportService,
        project_service: ProjectService,
        comment_service: CommentService,
        notification_service: NotificationService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            user_repository=user_repository,
            comment_repository=comment_repository,
            user_service=user_service,
            report_service=report_service,
            project_service=project_service,
            comment_service=comment_service,
            notification_service=notification_service,
        )
