"""Project aggregate.

A project is a portfolio entry owned by one user. Likes, saves and
collaborators are kept as sets beside the project row so that concurrent
likes never race on a counter.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import (
    CollaboratorRole,
    ProjectId,
    ProjectVisibility,
    Slug,
    TagName,
    UserId,
)


class Project(DomainModel):
    """Project entity."""

    id: ProjectId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=200)
    slug: Slug
    description: Optional[str] = Field(default=None, max_length=5000)
    live_url: Optional[str] = None
    repo_url: Optional[str] = None
    tags: list[TagName] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    visibility: ProjectVisibility = ProjectVisibility.PUBLIC
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Collaborator(DomainModel):
    """Accepted collaborator on a project."""

    project_id: ProjectId
    user_id: UserId
    role: CollaboratorRole
    added_by: UserId
    added_at: datetime = Field(default_factory=datetime.now)


class Invitation(DomainModel):
    """Pending collaboration invitation.

    Invitations only exist while pending: accepting moves the invitee into
    the collaborators set, rejecting simply removes the record.
    """

    project_id: ProjectId
    user_id: UserId
    role: CollaboratorRole
    invited_by: UserId
    invited_at: datetime = Field(default_factory=datetime.now)
