"""Mock persistence providers for testing."""

from dishka import Scope, provide

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
from folio.persistence.repository.inmemory import (
    InMemoryActivityRepository,
    InMemoryAnalyticsRepository,
    InMemoryCollaborationRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryProjectRepository,
    InMemoryRelationshipRepository,
    InMemoryReportRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from folio.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so every request of one container sees the same
    data; each test builds its own container, which keeps tests isolated.
    Repositories are REQUEST-scoped like their Postgres counterparts.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_relationship_repository(
        self, store: InMemoryStore
    ) -> RelationshipRepository:
        """Provide in-memory relationship repository."""
        return InMemoryRelationshipRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, store: InMemoryStore) -> ProjectRepository:
        """Provide in-memory project repository."""
        return InMemoryProjectRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_collaboration_repository(
        self, store: InMemoryStore
    ) -> CollaborationRepository:
        """Provide in-memory collaboration repository."""
        return InMemoryCollaborationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, store: InMemoryStore) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_analytics_repository(self, store: InMemoryStore) -> AnalyticsRepository:
        """Provide in-memory analytics repository."""
        return InMemoryAnalyticsRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_activity_repository(self, store: InMemoryStore) -> ActivityRepository:
        """Provide in-memory activity log repository."""
        return InMemoryActivityRepository(store)
