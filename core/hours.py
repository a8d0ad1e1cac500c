from enum import Enum
from typing import Iterable, Optional
from core.catalog import ShiftCatalog
from schemas.roster.entities import Shift
from schemas.hours.summary import HourLimits
from utils.shift_utils import in_month, normalise_date, week_window


class HourStatus(str, Enum):
    """Advisory monthly load band. Never blocks an assignment."""

    LOW = "low"
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class HourAccountant:
    """
    Hour totals for one doctor over a calendar month or a Sunday-Saturday week.

    Queries are pure: the shift list and catalog are snapshots owned by the caller.
    """

    def __init__(self, shifts: Iterable[Shift], catalog: ShiftCatalog):
        self.shifts = list(shifts)
        self.catalog = catalog

    def _doctor_shifts(self, doctor_id: str, exclude_shift_id: Optional[str] = None):
        for s in self.shifts:
            if s.doctorId != doctor_id:
                continue
            if exclude_shift_id is not None and s.id == exclude_shift_id:
                continue
            yield s

    def monthly_hours(
        self, doctor_id: str, year: int, month: int, exclude_shift_id: Optional[str] = None
    ) -> float:
        return sum(
            self.catalog.duration_of(s.shiftTypeId)
            for s in self._doctor_shifts(doctor_id, exclude_shift_id)
            if in_month(s.date, year, month)
        )

    def weekly_hours(
        self, doctor_id: str, anchor_date, exclude_shift_id: Optional[str] = None
    ) -> float:
        start, end = week_window(normalise_date(anchor_date))
        return sum(
            self.catalog.duration_of(s.shiftTypeId)
            for s in self._doctor_shifts(doctor_id, exclude_shift_id)
            if start <= s.date <= end
        )


def hour_status(
    monthly: float, weekly: float, limits: Optional[HourLimits] = None
) -> HourStatus:
    limits = limits or HourLimits()
    if monthly >= limits.monthlyCriticalHours or weekly > limits.maxWeeklyHours:
        return HourStatus.CRITICAL
    if monthly > limits.monthlyWarningHours:
        return HourStatus.WARNING
    if monthly < limits.minMonthlyHours:
        return HourStatus.LOW
    return HourStatus.OK
