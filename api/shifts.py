from typing import List
from fastapi import APIRouter, Body, Depends, HTTPException, Response
from core.service import ScheduleService
from api.dependencies import get_service
from docs.shifts.assign import (
    validate_shift_description,
    assign_shift_description,
    batch_assign_description,
)
from schemas.roster.entities import Shift
from schemas.shifts.assign import (
    AssignRequest,
    AssignResult,
    BatchAssignRequest,
    Decision,
)
from exceptions.custom_errors import *
import traceback

router = APIRouter(prefix="/shifts", tags=["Shifts"])


@router.get("", response_model=List[Shift], summary="List Shifts")
def list_shifts(doctorId: str = None, service: ScheduleService = Depends(get_service)):
    shifts = service.shifts()
    if doctorId is not None:
        shifts = [s for s in shifts if s.doctorId == doctorId]
    return shifts


@router.post(
    "/validate",
    response_model=Decision,
    description=validate_shift_description,
    summary="Validate Shift",
)
def validate_shift(
    data: AssignRequest = Body(...), service: ScheduleService = Depends(get_service)
):
    return service.validate(data.proposal, data.limits)


@router.post(
    "/assign",
    response_model=AssignResult,
    description=assign_shift_description,
    summary="Assign Shift",
)
def assign_shift(
    data: AssignRequest = Body(...), service: ScheduleService = Depends(get_service)
):
    try:
        shift_id = service.assign_or_raise(data.proposal, data.limits)
        return AssignResult(decision=Decision.accept(), shiftId=shift_id)

    except AssignmentRejectedError as e:
        raise HTTPException(status_code=409, detail=e.decision.model_dump(mode="json"))
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
    except Exception as e:
        tb = traceback.format_exc()
        raise HTTPException(status_code=500, detail=f"{str(e)}\n\nTraceback:\n{tb}")


@router.post(
    "/batch",
    response_model=dict,
    description=batch_assign_description,
    summary="Apply Proposal Batch",
)
def assign_batch(
    data: BatchAssignRequest = Body(...), service: ScheduleService = Depends(get_service)
):
    results = service.apply_batch(data.proposals, data.limits)
    accepted = sum(r.decision.accepted for r in results)
    return {
        "results": [r.model_dump(mode="json") for r in results],
        "accepted": accepted,
        "rejected": len(results) - accepted,
    }


@router.delete("/{shift_id}", status_code=204, summary="Delete Shift")
def delete_shift(shift_id: str, service: ScheduleService = Depends(get_service)):
    # deleting a missing shift is not an error
    service.remove_shift(shift_id)
    return Response(status_code=204)
