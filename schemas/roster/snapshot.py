from pydantic import BaseModel, Field, model_validator
from typing import List
from schemas.roster.entities import Doctor, Specialty


class RosterSnapshot(BaseModel):
    doctors: List[Doctor] = Field(default_factory=list)
    specialties: List[Specialty] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> "RosterSnapshot":
        seen = set()
        for doctor in self.doctors:
            if doctor.id in seen:
                raise ValueError(f"Duplicate doctor id: {doctor.id}")
            seen.add(doctor.id)

        if self.specialties:
            names = {s.name for s in self.specialties}
            unknown = sorted({d.specialty for d in self.doctors} - names)
            if unknown:
                raise ValueError(f"Doctors reference unknown specialties: {', '.join(unknown)}")
        return self
