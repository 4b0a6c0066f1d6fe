"""In-memory report repository for testing."""

from collections import Counter
from typing import Optional

from folio.domain.model import Report
from folio.domain.repository import ReportRepository
from folio.domain.value import ReportId, ReportStatus, ReportType

from .store import InMemoryStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _filtered(
        self, status: Optional[ReportStatus], report_type: Optional[ReportType]
    ) -> list[Report]:
        return [
            r
            for r in self._store.reports.values()
            if (status is None or r.status == status)
            and (report_type is None or r.type == report_type)
        ]

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._store.reports.get(report_id)

    async def find_all(
        self,
        status: Optional[ReportStatus],
        report_type: Optional[ReportType],
        limit: int,
        offset: int,
    ) -> list[Report]:
        reports = sorted(
            self._filtered(status, report_type),
            key=lambda r: r.created_at,
            reverse=True,
        )
        return reports[offset : offset + limit]

    async def count(
        self, status: Optional[ReportStatus], report_type: Optional[ReportType]
    ) -> int:
        return len(self._filtered(status, report_type))

    async def count_by_status(self) -> dict[ReportStatus, int]:
        return dict(Counter(r.status for r in self._store.reports.values()))

    async def count_by_type(self) -> dict[ReportType, int]:
        return dict(Counter(r.type for r in self._store.reports.values()))

    async def save(self, report: Report) -> Report:
        """Save or update a report."""
        self._store.reports[report.id] = report
        return report
