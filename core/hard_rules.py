from dataclasses import dataclass
from typing import Callable, Dict, Optional
from core.hours import HourAccountant
from core.state import ValidationContext
from schemas.shifts.assign import Decision, RejectionReason
from utils.shift_utils import intervals_overlap, previous_day, shift_interval, week_window


@dataclass
class HardRule:
    reason: RejectionReason
    check: Callable[[ValidationContext], Optional[Decision]]
    roster_only: bool = False


def check_shift_type(ctx: ValidationContext) -> Optional[Decision]:
    if ctx.definition is None:
        return Decision.reject(
            RejectionReason.UNKNOWN_SHIFT_TYPE, shiftTypeId=ctx.proposed.shiftTypeId
        )
    return None


def check_doctor(ctx: ValidationContext) -> Optional[Decision]:
    if ctx.doctor is None:
        return Decision.reject(RejectionReason.UNKNOWN_DOCTOR, doctorId=ctx.proposed.doctorId)
    return None


def check_specialty_scope(ctx: ValidationContext) -> Optional[Decision]:
    # custom types of another specialty do not exist for this doctor
    scope = ctx.definition.specialtyScope
    if scope is not None and scope != ctx.doctor.specialty:
        return Decision.reject(
            RejectionReason.UNKNOWN_SHIFT_TYPE,
            shiftTypeId=ctx.proposed.shiftTypeId,
            specialty=ctx.doctor.specialty,
        )
    return None


def check_weekly_cap(ctx: ValidationContext) -> Optional[Decision]:
    start, end = week_window(ctx.proposed.date)
    existing = sum(
        ctx.catalog.duration_of(s.shiftTypeId) for s in ctx.others if start <= s.date <= end
    )
    total = existing + ctx.proposed_hours
    if total > ctx.limits.maxWeeklyHours:
        return Decision.reject(
            RejectionReason.WEEKLY_CAP_EXCEEDED,
            total=total,
            max=ctx.limits.maxWeeklyHours,
            weekStart=start.isoformat(),
            weekEnd=end.isoformat(),
        )
    return None


def check_monthly_cap(ctx: ValidationContext) -> Optional[Decision]:
    day = ctx.proposed.date
    current = HourAccountant(ctx.shifts, ctx.catalog).monthly_hours(
        ctx.proposed.doctorId, day.year, day.month
    )
    old = 0
    replaced = ctx.replaced
    # only subtract what `current` actually counted
    if (
        replaced is not None
        and replaced.doctorId == ctx.proposed.doctorId
        and replaced.date.year == day.year
        and replaced.date.month == day.month
    ):
        old = ctx.catalog.duration_of(replaced.shiftTypeId)

    total = current - old + ctx.proposed_hours
    if total > ctx.limits.monthlyCriticalHours:
        return Decision.reject(
            RejectionReason.MONTHLY_CAP_EXCEEDED,
            total=total,
            max=ctx.limits.monthlyCriticalHours,
        )
    return None


def check_vacation_outgoing(ctx: ValidationContext) -> Optional[Decision]:
    if not ctx.catalog.is_vacation(ctx.proposed.shiftTypeId):
        return None
    same_day = ctx.same_day_others
    if same_day:
        return Decision.reject(
            RejectionReason.VACATION_CONFLICT,
            direction="outgoing",
            shiftId=same_day[0].id,
        )
    return None


def check_vacation_incoming(ctx: ValidationContext) -> Optional[Decision]:
    if ctx.catalog.is_vacation(ctx.proposed.shiftTypeId):
        return None
    for s in ctx.same_day_others:
        if ctx.catalog.is_vacation(s.shiftTypeId):
            return Decision.reject(
                RejectionReason.VACATION_CONFLICT,
                direction="incoming",
                shiftId=s.id,
            )
    return None


def check_post_night_rest(ctx: ValidationContext) -> Optional[Decision]:
    day_before = previous_day(ctx.proposed.date)
    for s in ctx.others:
        if s.date == day_before and ctx.catalog.is_night_type(s.shiftTypeId):
            return Decision.reject(
                RejectionReason.INSUFFICIENT_REST,
                shiftId=s.id,
                date=s.date.isoformat(),
            )
    return None


def check_time_overlap(ctx: ValidationContext) -> Optional[Decision]:
    if not ctx.definition.is_timed:
        return None
    proposed = shift_interval(ctx.definition.startTime, ctx.definition.endTime)
    for s in ctx.same_day_others:
        other = ctx.catalog.resolve(s.shiftTypeId)
        # untimed types (Vacation) are handled by the vacation rules
        if other is None or not other.is_timed:
            continue
        if intervals_overlap(proposed, shift_interval(other.startTime, other.endTime)):
            return Decision.reject(RejectionReason.TIME_OVERLAP, shiftId=s.id)
    return None


def define_hard_rules() -> Dict[str, HardRule]:
    """Hard rules in evaluation order; the first violation names the rejection."""
    return {
        "Shift type": HardRule(RejectionReason.UNKNOWN_SHIFT_TYPE, check_shift_type),
        "Doctor": HardRule(RejectionReason.UNKNOWN_DOCTOR, check_doctor, roster_only=True),
        "Specialty scope": HardRule(
            RejectionReason.UNKNOWN_SHIFT_TYPE, check_specialty_scope, roster_only=True
        ),
        "Weekly cap": HardRule(RejectionReason.WEEKLY_CAP_EXCEEDED, check_weekly_cap),
        "Monthly cap": HardRule(RejectionReason.MONTHLY_CAP_EXCEEDED, check_monthly_cap),
        "Vacation outgoing": HardRule(
            RejectionReason.VACATION_CONFLICT, check_vacation_outgoing
        ),
        "Vacation incoming": HardRule(
            RejectionReason.VACATION_CONFLICT, check_vacation_incoming
        ),
        "Post-night rest": HardRule(RejectionReason.INSUFFICIENT_REST, check_post_night_rest),
        "Time overlap": HardRule(RejectionReason.TIME_OVERLAP, check_time_overlap),
    }
