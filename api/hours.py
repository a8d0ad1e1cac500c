from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError
from core.service import ScheduleService
from api.dependencies import get_service
from docs.hours.summary import hours_summary_description, hours_report_description
from schemas.hours.summary import DoctorHours, HourLimits, HoursSummary

router = APIRouter(prefix="/hours", tags=["Hours"])


def limits_from_query(
    maxWeeklyHours: Optional[float] = None,
    monthlyCriticalHours: Optional[float] = None,
    monthlyWarningHours: Optional[float] = None,
    minMonthlyHours: Optional[float] = None,
) -> Optional[HourLimits]:
    overrides = {
        k: v
        for k, v in {
            "maxWeeklyHours": maxWeeklyHours,
            "monthlyCriticalHours": monthlyCriticalHours,
            "monthlyWarningHours": monthlyWarningHours,
            "minMonthlyHours": minMonthlyHours,
        }.items()
        if v is not None
    }
    if not overrides:
        return None
    try:
        return HourLimits(**overrides)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get(
    "/summary",
    response_model=HoursSummary,
    description=hours_summary_description,
    summary="Hours Summary",
)
def hours_summary(
    year: int = Query(..., ge=1),
    month: int = Query(..., ge=1, le=12),
    anchor: Optional[date] = None,
    specialty: Optional[str] = None,
    limits: Optional[HourLimits] = Depends(limits_from_query),
    service: ScheduleService = Depends(get_service),
):
    return service.hours_summary(year, month, anchor, limits, specialty)


@router.get(
    "/report",
    response_model=dict,
    description=hours_report_description,
    summary="Monthly Hours Report",
)
def hours_report(
    year: int = Query(..., ge=1),
    month: int = Query(..., ge=1, le=12),
    specialty: Optional[str] = None,
    service: ScheduleService = Depends(get_service),
):
    report = service.monthly_report(year, month, specialty)
    return {"year": year, "month": month, "rows": report.to_dict(orient="records")}


@router.get("/{doctor_id}", response_model=DoctorHours, summary="Doctor Hours")
def doctor_hours(
    doctor_id: str,
    year: int = Query(..., ge=1),
    month: int = Query(..., ge=1, le=12),
    anchor: Optional[date] = None,
    limits: Optional[HourLimits] = Depends(limits_from_query),
    service: ScheduleService = Depends(get_service),
):
    doctor = service.get_doctor(doctor_id)
    if doctor is None:
        raise HTTPException(status_code=404, detail=f"Unknown doctor: {doctor_id}")
    return service.doctor_hours(doctor, year, month, anchor or date(year, month, 1), limits)
