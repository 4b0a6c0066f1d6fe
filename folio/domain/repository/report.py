"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from folio.domain.model.report import Report
from folio.domain.value import ReportId, ReportStatus, ReportType


class ReportRepository(ABC):
    """Repository for moderation reports."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[ReportStatus],
        report_type: Optional[ReportType],
        limit: int,
        offset: int,
    ) -> List[Report]:
        """List reports, newest first, optionally filtered."""
        pass

    @abstractmethod
    async def count(
        self, status: Optional[ReportStatus], report_type: Optional[ReportType]
    ) -> int:
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[ReportStatus, int]:
        """Report counts per status; statuses without reports are omitted."""
        pass

    @abstractmethod
    async def count_by_type(self) -> Dict[ReportType, int]:
        """Report counts per target type; types without reports are omitted."""
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Save a report (create or update)."""
        pass
