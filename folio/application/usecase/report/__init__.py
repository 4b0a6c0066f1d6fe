"""Report use cases."""

from .create_report import (
    CreateReportRequest,
    CreateReportUseCase,
    ReportInfo,
    report_info,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportUseCase",
    "ReportInfo",
    "report_info",
]
