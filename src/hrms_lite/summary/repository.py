from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PresentDays


class SummaryRepository(Protocol):
    def count_employees(self) -> int:
        raise NotImplementedError

    def count_attendance(self, *, status: Optional[str] = None) -> int:
        raise NotImplementedError

    def present_days_by_employee(self) -> Sequence[PresentDays]:
        """One row per employee, zero when nothing matches."""

        raise NotImplementedError
