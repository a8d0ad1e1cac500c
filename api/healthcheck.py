from fastapi import APIRouter, Depends
from core.service import ScheduleService
from api.dependencies import get_service

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck(service: ScheduleService = Depends(get_service)):
    return {
        "status": "ok",
        "doctors": len(service.doctors),
        "shiftTypes": len(service.catalog),
    }
