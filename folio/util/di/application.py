"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.admin import (
    AdminDeleteProjectUseCase,
    GetReportUseCase,
    ListModeratedUsersUseCase,
    ListReportsUseCase,
    ListUserProjectsUseCase,
    ListUsersUseCase,
    ModerateUserUseCase,
    ProcessReportUseCase,
    RejectReportUseCase,
    ReportStatsUseCase,
    SetAdminUseCase,
    UpdateReportStatusUseCase,
)
from folio.application.usecase.analytics import (
    GetActivityUseCase,
    GetAudienceUseCase,
    GetDashboardUseCase,
    GetProjectAnalyticsUseCase,
    GetProjectsAnalyticsUseCase,
    GetTopProjectsUseCase,
)
from folio.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    SetAvatarUseCase,
    UpdateProfileUseCase,
)
from folio.application.usecase.collaboration import (
    AcceptInvitationUseCase,
    InviteCollaboratorUseCase,
    LeaveProjectUseCase,
    ListCollaboratorsUseCase,
    ListInvitationsUseCase,
    RejectInvitationUseCase,
    RemoveCollaboratorUseCase,
    UpdateRoleUseCase,
)
from folio.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from folio.application.usecase.follow import (
    AcceptFollowRequestUseCase,
    BlockUserUseCase,
    FollowUserUseCase,
    GetRelationshipUseCase,
    ListBlockedUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowRequestsUseCase,
    RejectFollowRequestUseCase,
    RemoveFollowerUseCase,
    UnblockUserUseCase,
    UnfollowUserUseCase,
    UpdatePrivacyUseCase,
)
from folio.application.usecase.notification import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from folio.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    FollowingFeedUseCase,
    GetProjectUseCase,
    LikeProjectUseCase,
    ListMyProjectsUseCase,
    PopularTagsUseCase,
    SavedProjectsUseCase,
    SaveProjectUseCase,
    SearchProjectsUseCase,
    UnlikeProjectUseCase,
    UnsaveProjectUseCase,
    UpdateProjectUseCase,
)
from folio.application.usecase.ranking import (
    GlobalRankingUseCase,
    MyPositionUseCase,
    ProjectRankingUseCase,
    TagRankingUseCase,
    WeeklyRankingUseCase,
)
from folio.application.usecase.report import CreateReportUseCase
from folio.application.usecase.user import GetUserProfileUseCase, SearchUsersUseCase
from folio.domain.service import AuthService, JWTService, UserService
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    Most use cases are wired from their constructor annotations; the
    authentication entry points are spelled out because every authenticated
    route goes through them.
    """

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> GetCurrentUserUseCase:
        """Provide the use case that resolves bearer tokens."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service,
            user_service=user_service,
            auth_service=auth_service,
        )

    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    login = provide(LoginUseCase)
    update_profile = provide(UpdateProfileUseCase)
    change_password = provide(ChangePasswordUseCase)
    set_avatar = provide(SetAvatarUseCase)

    # User use cases
    get_user_profile = provide(GetUserProfileUseCase)
    search_users = provide(SearchUsersUseCase)

    # Project use cases
    create_project = provide(CreateProjectUseCase)
    get_project = provide(GetProjectUseCase)
    update_project = provide(UpdateProjectUseCase)
    delete_project = provide(DeleteProjectUseCase)
    list_my_projects = provide(ListMyProjectsUseCase)
    following_feed = provide(FollowingFeedUseCase)
    saved_projects = provide(SavedProjectsUseCase)
    search_projects = provide(SearchProjectsUseCase)
    popular_tags = provide(PopularTagsUseCase)
    like_project = provide(LikeProjectUseCase)
    unlike_project = provide(UnlikeProjectUseCase)
    save_project = provide(SaveProjectUseCase)
    unsave_project = provide(UnsaveProjectUseCase)

    # Comment use cases
    add_comment = provide(AddCommentUseCase)
    delete_comment = provide(DeleteCommentUseCase)
    like_comment = provide(LikeCommentUseCase)
    unlike_comment = provide(UnlikeCommentUseCase)

    # Collaboration use cases
    invite_collaborator = provide(InviteCollaboratorUseCase)
    accept_invitation = provide(AcceptInvitationUseCase)
    reject_invitation = provide(RejectInvitationUseCase)
    update_role = provide(UpdateRoleUseCase)
    remove_collaborator = provide(RemoveCollaboratorUseCase)
    leave_project = provide(LeaveProjectUseCase)
    list_collaborators = provide(ListCollaboratorsUseCase)
    list_invitations = provide(ListInvitationsUseCase)

    # Follow use cases
    follow_user = provide(FollowUserUseCase)
    unfollow_user = provide(UnfollowUserUseCase)
    remove_follower = provide(RemoveFollowerUseCase)
    accept_follow_request = provide(AcceptFollowRequestUseCase)
    reject_follow_request = provide(RejectFollowRequestUseCase)
    list_follow_requests = provide(ListFollowRequestsUseCase)
    block_user = provide(BlockUserUseCase)
    unblock_user = provide(UnblockUserUseCase)
    list_blocked = provide(ListBlockedUseCase)
    list_followers = provide(ListFollowersUseCase)
    list_following = provide(ListFollowingUseCase)
    get_relationship = provide(GetRelationshipUseCase)
    update_privacy = provide(UpdatePrivacyUseCase)

    # Notification use cases
    list_notifications = provide(ListNotificationsUseCase)
    mark_notification_read = provide(MarkNotificationReadUseCase)
    mark_all_notifications_read = provide(MarkAllNotificationsReadUseCase)
    delete_notification = provide(DeleteNotificationUseCase)

    # Ranking use cases
    global_ranking = provide(GlobalRankingUseCase)
    project_ranking = provide(ProjectRankingUseCase)
    tag_ranking = provide(TagRankingUseCase)
    weekly_ranking = provide(WeeklyRankingUseCase)
    my_position = provide(MyPositionUseCase)

    # Analytics use cases
    dashboard = provide(GetDashboardUseCase)
    top_projects = provide(GetTopProjectsUseCase)
    project_analytics = provide(GetProjectAnalyticsUseCase)
    projects_analytics = provide(GetProjectsAnalyticsUseCase)
    activity = provide(GetActivityUseCase)
    audience = provide(GetAudienceUseCase)

    # Report and admin use cases
    create_report = provide(CreateReportUseCase)
    list_reports = provide(ListReportsUseCase)
    report_stats = provide(ReportStatsUseCase)
    get_report = provide(GetReportUseCase)
    update_report_status = provide(UpdateReportStatusUseCase)
    reject_report = provide(RejectReportUseCase)
    process_report = provide(ProcessReportUseCase)
    list_users = provide(ListUsersUseCase)
    list_moderated_users = provide(ListModeratedUsersUseCase)
    moderate_user = provide(ModerateUserUseCase)
    set_admin = provide(SetAdminUseCase)
    list_user_projects = provide(ListUserProjectsUseCase)
    admin_delete_project = provide(AdminDeleteProjectUseCase)
