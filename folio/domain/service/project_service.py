"""Project domain service."""

import re
from datetime import datetime
from uuid import uuid4

import logfire

from folio.config import FeedSettings
from folio.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    PermissionDeniedError,
)
from folio.domain.model import Project, User
from folio.domain.repository import CollaborationRepository, ProjectRepository
from folio.domain.value import (
    ActivityAction,
    CollaboratorRole,
    NotificationType,
    ProjectId,
    ProjectVisibility,
    Slug,
    TagName,
    UserId,
)

from .analytics_service import AnalyticsService
from .base import Service
from .notification_service import NotificationService
from .relationship_service import RelationshipService
from .user_service import UserService

# Fields an editor collaborator may change
CONTENT_FIELDS = ("title", "description", "live_url", "repo_url", "tags", "images")


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated slug for ``text``; "project" if nothing is left."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug[:100].strip("-") or "project"


def normalize_tags(tags: list[str]) -> list[TagName]:
    """Lower-case tags, dropping blanks and duplicates but keeping order."""
    result: list[TagName] = []
    for tag in tags:
        if not str(tag).strip():
            continue
        name = TagName(tag)
        if name not in result:
            result.append(name)
    return result


class ProjectService(Service):
    """Domain service for project operations."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        collaboration_repository: CollaborationRepository,
        user_service: UserService,
        relationship_service: RelationshipService,
        analytics_service: AnalyticsService,
        notification_service: NotificationService,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            collaboration_repository: Collaborator/invitation repository
            user_service: User domain service
            relationship_service: Visibility resolution
            analytics_service: Engagement counters and activity log
            notification_service: Notification domain service
            feed_settings: Feed and search page sizes
        """
        self.project_repository = project_repository
        self.collaboration_repository = collaboration_repository
        self.user_service = user_service
        self.relationship_service = relationship_service
        self.analytics_service = analytics_service
        self.notification_service = notification_service
        self.feed_settings = feed_settings

    async def get_by_id(self, project_id: ProjectId) -> Project:
        """Get project by ID.

        Raises:
            NotFoundError: If project not found
        """
        with logfire.span("project_service.get_by_id", project_id=str(project_id)):
            project = await self.project_repository.find_by_id(project_id)
            if not project:
                logfire.warn("Project not found", project_id=str(project_id))
                raise NotFoundError("Project", str(project_id))
            return project

    async def _unique_slug(self, base: str) -> Slug:
        slug = Slug(base)
        if not await self.project_repository.find_by_slug(slug):
            return slug
        return Slug(f"{base}-{uuid4().hex[:6]}")

    async def create(
        self,
        owner: User,
        title: str,
        slug: str | None = None,
        description: str | None = None,
        live_url: str | None = None,
        repo_url: str | None = None,
        tags: list[str] | None = None,
        images: list[str] | None = None,
        visibility: ProjectVisibility = ProjectVisibility.PUBLIC,
    ) -> Project:
        """Create a project owned by ``owner``.

        A slug is derived from the title when none is given.

        Raises:
            BusinessRuleViolationError: If an explicit slug is already taken
        """
        with logfire.span("project_service.create", owner_id=str(owner.id)):
            if slug:
                project_slug = Slug(slug)
                if await self.project_repository.find_by_slug(project_slug):
                    raise BusinessRuleViolationError(
                        f"The slug '{slug}' already exists"
                    )
            else:
                project_slug = await self._unique_slug(slugify(title))

            project = Project(
                id=ProjectId(uuid4()),
                owner_id=owner.id,
                title=title.strip(),
                slug=project_slug,
                description=description,
                live_url=live_url,
                repo_url=repo_url,
                tags=normalize_tags(tags or []),
                images=images or [],
                visibility=visibility,
            )
            saved = await self.project_repository.save(project)
            await self.analytics_service.log_activity(
                owner.id, ActivityAction.PROJECT_CREATED, saved
            )
            logfire.info(
                "Project created",
                project_id=str(saved.id),
                owner_id=str(owner.id),
                slug=saved.slug.root,
            )
            return saved

    async def _collaborator_role(
        self, project: Project, user_id: UserId
    ) -> CollaboratorRole | None:
        collaborator = await self.collaboration_repository.find_collaborator(
            project.id, user_id
        )
        return collaborator.role if collaborator else None

    async def can_view(self, project: Project, viewer: User | None) -> bool:
        """Whether ``viewer`` may see ``project``.

        Owners, admins and collaborators always can. Otherwise the project
        must be public and its owner's profile visible to the viewer.
        """
        if viewer is not None:
            if viewer.id == project.owner_id or viewer.is_admin:
                return True
            if await self._collaborator_role(project, viewer.id):
                return True
        if project.visibility == ProjectVisibility.PRIVATE:
            return False
        owner = await self.user_service.get_by_id(project.owner_id)
        if not owner.is_active:
            return False
        capabilities = await self.relationship_service.resolve(
            viewer.id if viewer else None, owner
        )
        return capabilities.can_view

    async def ensure_can_view(self, project: Project, viewer: User | None) -> None:
        """Raises PermissionDeniedError unless ``viewer`` may see ``project``."""
        if not await self.can_view(project, viewer):
            raise PermissionDeniedError("You do not have access to this project")

    async def can_edit(self, project: Project, user: User) -> bool:
        """Owners and editor collaborators may change content fields."""
        if user.id == project.owner_id:
            return True
        return await self._collaborator_role(project, user.id) == CollaboratorRole.EDITOR

    async def view(self, project_id: ProjectId, viewer: User | None) -> Project:
        """Fetch a project for display and count the view.

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the viewer may not see it
        """
        with logfire.span("project_service.view", project_id=str(project_id)):
            project = await self.get_by_id(project_id)
            await self.ensure_can_view(project, viewer)
            await self.analytics_service.record_view(
                project, viewer.id if viewer else None
            )
            return project

    async def update(self, project_id: ProjectId, editor: User, **fields) -> Project:
        """Update a project.

        Owners may change every field. Editor collaborators may change
        content fields only; slug and visibility stay with the owner.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: If the user may not make this change
            BusinessRuleViolationError: If the new slug is taken
        """
        with logfire.span(
            "project_service.update",
            project_id=str(project_id),
            user_id=str(editor.id),
        ):
            project = await self.get_by_id(project_id)
            if not await self.can_edit(project, editor):
                raise NotAuthorizedError("project", str(project_id), str(editor.id))

            is_owner = editor.id == project.owner_id
            update: dict = {"updated_at": datetime.now()}
            for key, value in fields.items():
                if value is None:
                    continue
                if key not in CONTENT_FIELDS and not is_owner:
                    raise NotAuthorizedError("project", str(project_id), str(editor.id))
                if key == "tags":
                    value = normalize_tags(value)
                elif key == "title":
                    value = value.strip()
                elif key == "slug":
                    value = Slug(value)
                    if value != project.slug:
                        existing = await self.project_repository.find_by_slug(value)
                        if existing and existing.id != project.id:
                            raise BusinessRuleViolationError(
                                f"The slug '{value.root}' already exists"
                            )
                update[key] = value

            updated = Project.model_validate(
                {**project.model_dump(), **update}
            )
            saved = await self.project_repository.save(updated)
            await self.analytics_service.log_activity(
                editor.id, ActivityAction.PROJECT_UPDATED, saved
            )
            logfire.info(
                "Project updated",
                project_id=str(project_id),
                fields=sorted(update.keys()),
            )
            return saved

    async def delete(self, project_id: ProjectId, user: User) -> None:
        """Delete a project. Only its owner or an admin may.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: If the user is neither owner nor admin
        """
        with logfire.span("project_service.delete", project_id=str(project_id)):
            project = await self.get_by_id(project_id)
            if project.owner_id != user.id and not user.is_admin:
                raise NotAuthorizedError("project", str(project_id), str(user.id))
            await self.remove(project)
            await self.analytics_service.log_activity(
                user.id,
                ActivityAction.PROJECT_DELETED,
                description=project.title,
            )

    async def remove(self, project: Project) -> None:
        """Delete a project and everything attached to it, without checks."""
        await self.project_repository.delete(project.id)
        logfire.info("Project deleted", project_id=str(project.id))

    async def list_owned(self, owner_id: UserId) -> list[Project]:
        return await self.project_repository.find_by_owner(owner_id)

    async def list_for_profile(self, owner: User, viewer: User | None) -> list[Project]:
        """Projects of ``owner`` that ``viewer`` may see on the profile page."""
        projects = await self.project_repository.find_by_owner(owner.id)
        return [p for p in projects if await self.can_view(p, viewer)]

    async def following_feed(self, user: User) -> list[Project]:
        """Newest projects from followed users that the user may see."""
        with logfire.span("project_service.following_feed", user_id=str(user.id)):
            following = await self.relationship_service.following_ids(user.id)
            if not following:
                return []
            projects = await self.project_repository.find_by_owners(
                following, self.feed_settings.following_limit
            )
            return [p for p in projects if await self.can_view(p, user)]

    async def list_saved(self, user: User) -> list[Project]:
        """Bookmarked projects the user can still see."""
        projects = await self.project_repository.find_saved(user.id)
        return [p for p in projects if await self.can_view(p, user)]

    async def search(
        self, query: str | None, tag: str | None, page: int, limit: int
    ) -> tuple[list[Project], int]:
        """Search discoverable projects by text and tag.

        Returns:
            Page of projects (newest first) and the total match count
        """
        with logfire.span("project_service.search", query=query, tag=tag):
            limit = max(1, min(limit, self.feed_settings.search_max_limit))
            tag_name = TagName(tag) if tag and tag.strip() else None
            offset = (max(page, 1) - 1) * limit
            projects = await self.project_repository.find_discoverable(
                query=query or None, tag=tag_name, limit=limit, offset=offset
            )
            total = await self.project_repository.count_discoverable(
                query=query or None, tag=tag_name
            )
            return projects, total

    async def popular_tags(self, limit: int) -> list[tuple[str, int]]:
        return await self.project_repository.popular_tags(limit)

    async def likes_count(self, project_ids: list[ProjectId]) -> dict[ProjectId, int]:
        if not project_ids:
            return {}
        return await self.project_repository.count_likes(project_ids)

    async def has_liked(self, project_id: ProjectId, user_id: UserId) -> bool:
        return await self.project_repository.has_liked(project_id, user_id)

    async def like(self, project_id: ProjectId, user: User) -> int:
        """Like a project.

        Returns:
            The new like count

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the user may not see the project
            BusinessRuleViolationError: If the user already liked it
        """
        with logfire.span(
            "project_service.like", project_id=str(project_id), user_id=str(user.id)
        ):
            project = await self.get_by_id(project_id)
            await self.ensure_can_view(project, user)

            if not await self.project_repository.add_like(project.id, user.id):
                raise BusinessRuleViolationError("You already liked this project")

            await self.analytics_service.record_like(project.id)
            await self.analytics_service.log_activity(
                user.id, ActivityAction.PROJECT_LIKED, project
            )
            await self.notification_service.notify(
                project.owner_id,
                user.id,
                NotificationType.LIKE,
                f"{user.username} liked your project \"{project.title}\"",
                project_id=project.id,
            )
            count = (await self.likes_count([project.id]))[project.id]
            logfire.info("Project liked", project_id=str(project.id), likes=count)
            return count

    async def unlike(self, project_id: ProjectId, user: User) -> int:
        """Remove a like; a no-op when the user had not liked the project.

        Returns:
            The new like count
        """
        with logfire.span(
            "project_service.unlike", project_id=str(project_id), user_id=str(user.id)
        ):
            project = await self.get_by_id(project_id)
            if await self.project_repository.remove_like(project.id, user.id):
                await self.analytics_service.record_unlike(project.id)
                await self.analytics_service.log_activity(
                    user.id, ActivityAction.PROJECT_UNLIKED, project
                )
            return (await self.likes_count([project.id]))[project.id]

    async def save_project(self, project_id: ProjectId, user: User) -> None:
        """Bookmark a project.

        Raises:
            BusinessRuleViolationError: If it is already saved
        """
        project = await self.get_by_id(project_id)
        await self.ensure_can_view(project, user)
        if not await self.project_repository.add_save(project.id, user.id):
            raise BusinessRuleViolationError("Project already saved")
        logfire.info("Project saved", project_id=str(project.id), user_id=str(user.id))

    async def unsave_project(self, project_id: ProjectId, user: User) -> None:
        project = await self.get_by_id(project_id)
        await self.project_repository.remove_save(project.id, user.id)
