import uuid
from typing import List, Optional
from schemas.roster.entities import ProposedAssignment, Shift


def new_shift_id() -> str:
    return f"shift_{uuid.uuid4().hex[:12]}"


class ScheduleMutator:
    """
    Applies accepted assignments to a shift collection.

    No checks happen here; callers validate against the same snapshot immediately before
    committing.
    """

    def __init__(self, shifts: List[Shift]):
        self.shifts = shifts

    def _index_of(self, shift_id: str) -> Optional[int]:
        for idx, s in enumerate(self.shifts):
            if s.id == shift_id:
                return idx
        return None

    def commit(self, proposed: ProposedAssignment, result_id: Optional[str] = None) -> str:
        """
        Replace the shift named by `result_id` (or `proposed.excludeShiftId`) in place, or
        append a new shift with a fresh id when no such shift exists.
        """
        target_id = result_id or proposed.excludeShiftId
        idx = self._index_of(target_id) if target_id else None
        shift_id = target_id if idx is not None else new_shift_id()
        shift = Shift(
            id=shift_id,
            doctorId=proposed.doctorId,
            date=proposed.date,
            shiftTypeId=proposed.shiftTypeId,
        )
        if idx is None:
            self.shifts.append(shift)
        else:
            self.shifts[idx] = shift
        return shift_id

    def remove(self, shift_id: str) -> bool:
        """Delete by id. Returns False, without error, when nothing matched."""
        idx = self._index_of(shift_id)
        if idx is None:
            return False
        del self.shifts[idx]
        return True

    def remove_doctor_shifts(self, doctor_id: str) -> int:
        kept = [s for s in self.shifts if s.doctorId != doctor_id]
        removed = len(self.shifts) - len(kept)
        self.shifts[:] = kept
        return removed

    def is_shift_type_in_use(self, shift_type_id: str) -> bool:
        return any(s.shiftTypeId == shift_type_id for s in self.shifts)
