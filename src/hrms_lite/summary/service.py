from __future__ import annotations

from ..core.enums import AttendanceStatus
from .model import Summary
from .repository import SummaryRepository


class SummaryService:
    """Use case: roster and attendance totals, computed on every call."""

    def __init__(self, summary: SummaryRepository):
        self._summary = summary

    def build(self) -> Summary:
        return Summary(
            employees=self._summary.count_employees(),
            attendance=self._summary.count_attendance(),
            present=self._summary.count_attendance(status=AttendanceStatus.PRESENT.value),
            present_by_employee=list(self._summary.present_days_by_employee()),
        )
