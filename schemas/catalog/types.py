from pydantic import BaseModel, Field
from typing import List, Optional
from schemas.roster.entities import CLOCK_TIME_PATTERN, ShiftTypeDefinition


class CustomShiftTypeRequest(BaseModel):
    name: str = Field(min_length=1)
    abbreviation: str = Field(min_length=1)
    startTime: str = Field(pattern=CLOCK_TIME_PATTERN)
    endTime: str = Field(pattern=CLOCK_TIME_PATTERN)
    specialty: str = Field(min_length=1)


class ShiftTypeEntry(ShiftTypeDefinition):
    standard: bool
    night: bool
    displayBucket: Optional[str] = None


class ShiftTypeUsage(BaseModel):
    shiftTypeId: str
    inUse: bool


class CatalogListing(BaseModel):
    types: List[ShiftTypeEntry]
