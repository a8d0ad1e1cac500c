from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List
from datetime import date
from utils.constants import *


class HourLimits(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    maxWeeklyHours: float = Field(default=MAX_WEEKLY_HOURS, ge=0)
    minMonthlyHours: float = Field(default=MIN_MONTHLY_HOURS, ge=0)
    monthlyWarningHours: float = Field(default=MAX_MONTHLY_HOURS_WARNING, ge=0)
    monthlyCriticalHours: float = Field(default=MAX_MONTHLY_HOURS_CRITICAL, ge=0)

    @model_validator(mode="after")
    def check_bands(self) -> "HourLimits":
        if self.monthlyWarningHours > self.monthlyCriticalHours:
            raise ValueError(
                "monthlyWarningHours cannot be above monthlyCriticalHours."
            )
        if self.minMonthlyHours > self.monthlyWarningHours:
            raise ValueError("minMonthlyHours cannot be above monthlyWarningHours.")
        return self


class DoctorHours(BaseModel):
    doctorId: str
    name: str
    specialty: str
    monthlyHours: float
    weeklyHours: float
    status: str


class HoursSummary(BaseModel):
    year: int
    month: int
    weekStart: date
    weekEnd: date
    limits: HourLimits
    doctors: List[DoctorHours]
