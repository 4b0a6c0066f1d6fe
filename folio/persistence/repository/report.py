"""PostgreSQL implementation of Report repository."""

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Report
from folio.domain.repository import ReportRepository
from folio.domain.value import ReportId, ReportStatus, ReportType
from folio.persistence.mappers import report_to_dict, row_to_report
from folio.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filters(
        self, status: Optional[ReportStatus], report_type: Optional[ReportType]
    ) -> list:
        conditions = []
        if status:
            conditions.append(reports_table.c.status == status.value)
        if report_type:
            conditions.append(reports_table.c.type == report_type.value)
        return conditions

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_report(dict(row)) if row else None

    async def find_all(
        self,
        status: Optional[ReportStatus],
        report_type: Optional[ReportType],
        limit: int,
        offset: int,
    ) -> List[Report]:
        stmt = (
            select(reports_table)
            .where(*self._filters(status, report_type))
            .order_by(reports_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_report(dict(row)) for row in result.mappings().all()]

    async def count(
        self, status: Optional[ReportStatus], report_type: Optional[ReportType]
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(reports_table)
            .where(*self._filters(status, report_type))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_status(self) -> Dict[ReportStatus, int]:
        stmt = select(reports_table.c.status, func.count().label("total")).group_by(
            reports_table.c.status
        )
        result = await self.session.execute(stmt)
        return {ReportStatus(row.status): row.total for row in result.all()}

    async def count_by_type(self) -> Dict[ReportType, int]:
        stmt = select(reports_table.c.type, func.count().label("total")).group_by(
            reports_table.c.type
        )
        result = await self.session.execute(stmt)
        return {ReportType(row.type): row.total for row in result.all()}

    async def save(self, report: Report) -> Report:
        """Save a report (create or update)."""
        data = report_to_dict(report)
        for key in ("type", "reason", "status", "action"):
            data[key] = data[key].value
        existing = await self.find_by_id(report.id)
        if existing:
            stmt = (
                reports_table.update()
                .where(reports_table.c.id == report.id)
                .values(**data)
            )
        else:
            stmt = reports_table.insert().values(**data)
        await self.session.execute(stmt)
        await self.session.flush()
        return report
