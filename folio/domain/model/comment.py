"""Comment entity, owned by its parent project."""

from datetime import datetime

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import CommentId, ProjectId, UserId


class Comment(DomainModel):
    """Comment on a project."""

    id: CommentId
    project_id: ProjectId
    author_id: UserId
    text: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
