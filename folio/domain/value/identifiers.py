"""Strongly typed identifiers for Folio domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
ReportId = NewType("ReportId", UUID)
ActivityId = NewType("ActivityId", UUID)
WarningId = NewType("WarningId", UUID)
