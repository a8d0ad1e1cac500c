from fastapi import APIRouter, Body, Depends
from core.service import ScheduleService
from api.dependencies import get_service
from schemas.roster.snapshot import RosterSnapshot

router = APIRouter(prefix="/roster", tags=["Roster"])


@router.get("", response_model=RosterSnapshot, summary="Get Roster")
def get_roster(service: ScheduleService = Depends(get_service)):
    return RosterSnapshot(doctors=service.doctors, specialties=service.specialties)


@router.put("", response_model=dict, summary="Replace Roster")
def put_roster(
    data: RosterSnapshot = Body(...), service: ScheduleService = Depends(get_service)
):
    removed = service.set_roster(data.doctors, data.specialties)
    return {
        "doctors": len(data.doctors),
        "specialties": len(data.specialties),
        "removedShifts": removed,
    }
