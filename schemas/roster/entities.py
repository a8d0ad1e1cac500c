from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import date

# HH:MM, 00:00 - 23:59
CLOCK_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class Specialty(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str


class Doctor(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    specialty: str


class ShiftTypeDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    displayName: str
    abbreviation: str
    durationHours: float = Field(ge=0)
    startTime: Optional[str] = Field(default=None, pattern=CLOCK_TIME_PATTERN)
    endTime: Optional[str] = Field(default=None, pattern=CLOCK_TIME_PATTERN)
    specialtyScope: Optional[str] = None

    @model_validator(mode="after")
    def check_clock_pair(self) -> "ShiftTypeDefinition":
        """
        Start and end times come as a pair. An end at or before the start is allowed and
        denotes an overnight shift.
        """
        if (self.startTime is None) != (self.endTime is None):
            raise ValueError(
                f"Shift type {self.id!r} must define both startTime and endTime, or neither."
            )
        return self

    @property
    def is_timed(self) -> bool:
        return self.startTime is not None and self.endTime is not None


class Shift(BaseModel):
    id: str
    doctorId: str
    date: date
    shiftTypeId: str


class ProposedAssignment(BaseModel):
    doctorId: str
    date: date
    shiftTypeId: str
    # set when editing: the shift being replaced is ignored when scanning for conflicts
    excludeShiftId: Optional[str] = None
