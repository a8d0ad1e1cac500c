from fastapi import APIRouter, Body, Depends, HTTPException, Response
from core.service import ScheduleService
from api.dependencies import get_service
from docs.catalog.types import (
    list_shift_types_description,
    create_shift_type_description,
    delete_shift_type_description,
)
from schemas.catalog.types import (
    CatalogListing,
    CustomShiftTypeRequest,
    ShiftTypeEntry,
    ShiftTypeUsage,
)
from schemas.roster.entities import ShiftTypeDefinition
from utils.shift_utils import day_night_bucket
from exceptions.custom_errors import *

router = APIRouter(prefix="/catalog", tags=["Shift Types"])


def to_entry(definition: ShiftTypeDefinition, service: ScheduleService) -> ShiftTypeEntry:
    return ShiftTypeEntry(
        **definition.model_dump(),
        standard=service.catalog.is_standard(definition.id),
        night=service.catalog.is_night_type(definition.id),
        displayBucket=day_night_bucket(definition.startTime),
    )


@router.get(
    "/types",
    response_model=CatalogListing,
    description=list_shift_types_description,
    summary="List Shift Types",
)
def list_shift_types(specialty: str = None, service: ScheduleService = Depends(get_service)):
    catalog = service.catalog
    definitions = (
        catalog.definitions() if specialty is None else catalog.available_for(specialty)
    )
    return CatalogListing(types=[to_entry(d, service) for d in definitions])


@router.post(
    "/types",
    response_model=ShiftTypeEntry,
    status_code=201,
    description=create_shift_type_description,
    summary="Create Custom Shift Type",
)
def create_shift_type(
    data: CustomShiftTypeRequest = Body(...),
    service: ScheduleService = Depends(get_service),
):
    try:
        definition = service.add_custom_type(
            data.name, data.abbreviation, data.startTime, data.endTime, data.specialty
        )
        return to_entry(definition, service)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))


@router.get(
    "/types/{shift_type_id}/in-use",
    response_model=ShiftTypeUsage,
    summary="Shift Type Usage",
)
def shift_type_in_use(shift_type_id: str, service: ScheduleService = Depends(get_service)):
    if shift_type_id not in service.catalog:
        raise HTTPException(status_code=404, detail=f"Unknown shift type: {shift_type_id}")
    return ShiftTypeUsage(
        shiftTypeId=shift_type_id, inUse=service.is_shift_type_in_use(shift_type_id)
    )


@router.delete(
    "/types/{shift_type_id}",
    status_code=204,
    description=delete_shift_type_description,
    summary="Delete Custom Shift Type",
)
def delete_shift_type(shift_type_id: str, service: ScheduleService = Depends(get_service)):
    try:
        service.delete_custom_type(shift_type_id)
        return Response(status_code=204)
    except tuple(CUSTOM_ERRORS) as e:
        raise HTTPException(status_code=CUSTOM_ERRORS[type(e)], detail=str(e))
