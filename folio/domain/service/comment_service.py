"""Comment domain service."""

from uuid import uuid4

import logfire

from folio.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from folio.domain.model import Comment, Project, User
from folio.domain.repository import CommentRepository
from folio.domain.value import ActivityAction, CommentId, NotificationType, ProjectId

from .analytics_service import AnalyticsService
from .base import Service
from .notification_service import NotificationService
from .project_service import ProjectService


class CommentService(Service):
    """Domain service for comments on projects."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        project_service: ProjectService,
        analytics_service: AnalyticsService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            project_service: Project lookups and visibility
            analytics_service: Engagement counters and activity log
            notification_service: Notification domain service
        """
        self.comment_repository = comment_repository
        self.project_service = project_service
        self.analytics_service = analytics_service
        self.notification_service = notification_service

    async def _get_comment(
        self, project_id: ProjectId, comment_id: CommentId
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.project_id != project_id:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_for_project(self, project_id: ProjectId) -> list[Comment]:
        return await self.comment_repository.find_by_project(project_id)

    async def add(self, project_id: ProjectId, author: User, text: str) -> Comment:
        """Comment on a project the author can see.

        Args:
            project_id: Project being commented on
            author: Commenting user
            text: Comment body, 1-1000 characters

        Returns:
            Created comment

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the author may not see the project
        """
        with logfire.span(
            "comment_service.add", project_id=str(project_id), author_id=str(author.id)
        ):
            project = await self.project_service.get_by_id(project_id)
            await self.project_service.ensure_can_view(project, author)

            comment = Comment(
                id=CommentId(uuid4()),
                project_id=project.id,
                author_id=author.id,
                text=text.strip(),
            )
            saved = await self.comment_repository.save(comment)

            await self.analytics_service.record_comment(project.id)
            await self.analytics_service.log_activity(
                author.id, ActivityAction.COMMENT_ADDED, project
            )
            await self.notification_service.notify(
                project.owner_id,
                author.id,
                NotificationType.COMMENT,
                f"{author.username} commented on \"{project.title}\"",
                project_id=project.id,
            )
            logfire.info(
                "Comment created", comment_id=str(saved.id), project_id=str(project.id)
            )
            return saved

    async def delete(
        self, project_id: ProjectId, comment_id: CommentId, user: User
    ) -> None:
        """Delete a comment as its author, the project owner, or an admin.

        Raises:
            NotFoundError: If the project or comment does not exist
            NotAuthorizedError: If the user may not delete it
        """
        with logfire.span(
            "comment_service.delete", comment_id=str(comment_id), user_id=str(user.id)
        ):
            project = await self.project_service.get_by_id(project_id)
            comment = await self._get_comment(project.id, comment_id)
            if (
                comment.author_id != user.id
                and project.owner_id != user.id
                and not user.is_admin
            ):
                raise NotAuthorizedError("comment", str(comment_id), str(user.id))

            await self.remove(comment, project)
            await self.analytics_service.log_activity(
                user.id, ActivityAction.COMMENT_DELETED, project
            )

    async def remove(self, comment: Comment, project: Project) -> None:
        """Delete a comment and adjust the project's counters, without checks."""
        if await self.comment_repository.delete(comment.id):
            await self.analytics_service.record_comment_removed(project.id)
            logfire.info(
                "Comment deleted", comment_id=str(comment.id), project_id=str(project.id)
            )

    async def likes_count(self, comment_ids: list[CommentId]) -> dict[CommentId, int]:
        if not comment_ids:
            return {}
        return await self.comment_repository.count_likes(comment_ids)

    async def like(
        self, project_id: ProjectId, comment_id: CommentId, user: User
    ) -> int:
        """Like a comment.

        Returns:
            The new like count

        Raises:
            BusinessRuleViolationError: If the user already liked the comment
        """
        project = await self.project_service.get_by_id(project_id)
        await self.project_service.ensure_can_view(project, user)
        comment = await self._get_comment(project.id, comment_id)
        if not await self.comment_repository.add_like(comment.id, user.id):
            raise BusinessRuleViolationError("You already liked this comment")
        return (await self.likes_count([comment.id]))[comment.id]

    async def unlike(
        self, project_id: ProjectId, comment_id: CommentId, user: User
    ) -> int:
        """Remove a like from a comment; a no-op when not liked."""
        comment = await self._get_comment(project_id, comment_id)
        await self.comment_repository.remove_like(comment.id, user.id)
        return (await self.likes_count([comment.id]))[comment.id]
