from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from enum import Enum
from schemas.roster.entities import ProposedAssignment
from schemas.hours.summary import HourLimits


class RejectionReason(str, Enum):
    UNKNOWN_DOCTOR = "UnknownDoctor"
    UNKNOWN_SHIFT_TYPE = "UnknownShiftType"
    WEEKLY_CAP_EXCEEDED = "WeeklyCapExceeded"
    MONTHLY_CAP_EXCEEDED = "MonthlyCapExceeded"
    VACATION_CONFLICT = "VacationConflict"
    INSUFFICIENT_REST = "InsufficientRest"
    TIME_OVERLAP = "TimeOverlap"


class Decision(BaseModel):
    """
    Outcome of validating one proposed assignment.

    `details` holds the structured values a presentation layer needs to word its own message
    (totals and caps, the offending shift id, ...).
    """

    accepted: bool
    reason: Optional[RejectionReason] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def accept(cls) -> "Decision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason, **details: Any) -> "Decision":
        return cls(accepted=False, reason=reason, details=details)


class AssignRequest(BaseModel):
    proposal: ProposedAssignment
    limits: Optional[HourLimits] = None


class BatchAssignRequest(BaseModel):
    proposals: List[ProposedAssignment]
    limits: Optional[HourLimits] = None


class AssignResult(BaseModel):
    decision: Decision
    shiftId: Optional[str] = None
