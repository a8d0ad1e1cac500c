from dataclasses import dataclass, field
from typing import List, Optional
from core.catalog import ShiftCatalog
from schemas.roster.entities import Doctor, ProposedAssignment, Shift, ShiftTypeDefinition
from schemas.hours.summary import HourLimits


@dataclass
class ValidationContext:
    """
    Everything the ordered hard rules need to judge one proposed assignment against a
    snapshot of existing shifts.
    """

    # inputs
    proposed: ProposedAssignment
    """The assignment being judged."""
    shifts: List[Shift]
    """The full snapshot of existing shifts, all doctors, nothing excluded."""
    catalog: ShiftCatalog
    """Shift type definitions used for durations, night/vacation membership and times."""
    limits: HourLimits
    """Weekly and monthly hour thresholds."""
    roster_checked: bool = False
    """True when a doctor roster was supplied, enabling the doctor and scope rules."""
    doctor: Optional[Doctor] = None
    """The proposed doctor, when known to the roster."""

    # derived
    definition: Optional[ShiftTypeDefinition] = None
    """The resolved proposed shift type, or None if unresolved."""
    doctor_shifts: List[Shift] = field(default_factory=list)
    """The doctor's shifts, including the one being replaced."""
    others: List[Shift] = field(default_factory=list)
    """The doctor's shifts minus the one named by `excludeShiftId`."""
    replaced: Optional[Shift] = None
    """The shift named by `excludeShiftId`, if it exists in the snapshot."""

    @property
    def proposed_hours(self) -> float:
        return self.definition.durationHours if self.definition else 0

    @property
    def same_day_others(self) -> List[Shift]:
        return [s for s in self.others if s.date == self.proposed.date]


def build_context(
    proposed: ProposedAssignment,
    shifts: List[Shift],
    catalog: ShiftCatalog,
    limits: HourLimits,
    doctors: Optional[List[Doctor]] = None,
) -> ValidationContext:
    doctor = None
    if doctors is not None:
        doctor = next((d for d in doctors if d.id == proposed.doctorId), None)

    doctor_shifts = [s for s in shifts if s.doctorId == proposed.doctorId]
    exclude = proposed.excludeShiftId
    return ValidationContext(
        proposed=proposed,
        shifts=shifts,
        catalog=catalog,
        limits=limits,
        roster_checked=doctors is not None,
        doctor=doctor,
        definition=catalog.resolve(proposed.shiftTypeId),
        doctor_shifts=doctor_shifts,
        others=[s for s in doctor_shifts if exclude is None or s.id != exclude],
        replaced=next((s for s in shifts if exclude is not None and s.id == exclude), None),
    )
