import uuid
from enum import Enum
from typing import Dict, Iterable, List, Optional
from schemas.roster.entities import ShiftTypeDefinition
from exceptions.custom_errors import (
    DuplicateShiftTypeError,
    InvalidShiftTypeError,
    StandardShiftTypeError,
)
from utils.constants import STANDARD_SHIFT_TYPES, VACATION_SHIFT_TYPE, NIGHT_SHIFT_TYPES
from utils.shift_utils import duration_from_times, time_to_minutes


class StandardShiftType(str, Enum):
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    MORNING_AFTERNOON = "MorningAfternoon"
    NIGHT = "Night"
    DAY_GUARD = "DayGuard"
    NIGHT_GUARD = "NightGuard"
    VACATION = "Vacation"


STANDARD_IDS = frozenset(t.value for t in StandardShiftType)
VACATION_ID = StandardShiftType(VACATION_SHIFT_TYPE).value
# Closed set; the rest rule never infers "night" from clock times.
NIGHT_TYPE_IDS = frozenset(StandardShiftType(t).value for t in NIGHT_SHIFT_TYPES)


def standard_definitions() -> List[ShiftTypeDefinition]:
    return [ShiftTypeDefinition(**raw) for raw in STANDARD_SHIFT_TYPES]


class ShiftCatalog:
    """
    Read-only mapping from shift type id to its definition.

    A catalog instance never changes; `with_custom` and `without` return a new catalog, so a
    validator call always sees one consistent set of definitions.
    """

    def __init__(self, definitions: Optional[Iterable[ShiftTypeDefinition]] = None):
        if definitions is None:
            definitions = standard_definitions()
        self._types: Dict[str, ShiftTypeDefinition] = {}
        for definition in definitions:
            if definition.id in self._types:
                raise DuplicateShiftTypeError(f"Duplicate shift type id: {definition.id}")
            self._types[definition.id] = definition
        missing = STANDARD_IDS - set(self._types)
        if missing:
            raise StandardShiftTypeError(
                f"Catalog is missing standard shift types: {', '.join(sorted(missing))}"
            )

    def __contains__(self, shift_type_id: str) -> bool:
        return shift_type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    def resolve(self, shift_type_id: str) -> Optional[ShiftTypeDefinition]:
        """Definition for `shift_type_id`, or None when it is not in the catalog."""
        return self._types.get(shift_type_id)

    def duration_of(self, shift_type_id: str) -> float:
        """Hours counted for a shift of this type; 0 when unresolved."""
        definition = self._types.get(shift_type_id)
        return definition.durationHours if definition else 0

    def is_night_type(self, shift_type_id: str) -> bool:
        return shift_type_id in NIGHT_TYPE_IDS

    def is_vacation(self, shift_type_id: str) -> bool:
        return shift_type_id == VACATION_ID

    def is_standard(self, shift_type_id: str) -> bool:
        return shift_type_id in STANDARD_IDS

    def definitions(self) -> List[ShiftTypeDefinition]:
        return list(self._types.values())

    def custom_definitions(self) -> List[ShiftTypeDefinition]:
        return [d for d in self._types.values() if d.id not in STANDARD_IDS]

    def available_for(self, specialty: Optional[str]) -> List[ShiftTypeDefinition]:
        """Global types plus the custom types scoped to `specialty`."""
        return [
            d
            for d in self._types.values()
            if d.specialtyScope is None or d.specialtyScope == specialty
        ]

    def is_available_for(self, shift_type_id: str, specialty: Optional[str]) -> bool:
        definition = self._types.get(shift_type_id)
        if definition is None:
            return False
        return definition.specialtyScope is None or definition.specialtyScope == specialty

    def with_custom(self, definition: ShiftTypeDefinition) -> "ShiftCatalog":
        """
        New catalog including `definition`.

        Custom types must be scoped to a specialty, and their id, name and abbreviation must be
        unique (case-insensitive) across every type in the catalog.
        """
        if definition.id in STANDARD_IDS:
            raise StandardShiftTypeError(
                f"{definition.id!r} is a standard shift type and cannot be redefined."
            )
        if not definition.specialtyScope:
            raise InvalidShiftTypeError(
                f"Custom shift type {definition.id!r} must be scoped to a specialty."
            )
        for existing in self._types.values():
            if existing.id.lower() == definition.id.lower():
                raise DuplicateShiftTypeError(f"Shift type id {definition.id!r} already exists.")
            if existing.displayName.lower() == definition.displayName.lower():
                raise DuplicateShiftTypeError(
                    f"Shift type name {definition.displayName!r} already exists."
                )
            if existing.abbreviation.lower() == definition.abbreviation.lower():
                raise DuplicateShiftTypeError(
                    f"Shift type abbreviation {definition.abbreviation!r} already exists."
                )
        return ShiftCatalog([*self._types.values(), definition])

    def without(self, shift_type_id: str) -> "ShiftCatalog":
        """New catalog without a custom type. Usage checks are the caller's job."""
        if shift_type_id in STANDARD_IDS:
            raise StandardShiftTypeError(
                f"{shift_type_id!r} is a standard shift type and cannot be deleted."
            )
        return ShiftCatalog(d for d in self._types.values() if d.id != shift_type_id)


def build_custom_type(
    name: str,
    abbreviation: str,
    start_time: str,
    end_time: str,
    specialty: str,
) -> ShiftTypeDefinition:
    """Scoped custom type with a fresh id and a duration derived from its clock times."""
    name, abbreviation = name.strip(), abbreviation.strip()
    if not name or not abbreviation:
        raise InvalidShiftTypeError("Custom shift types need a name and an abbreviation.")
    if time_to_minutes(start_time) == time_to_minutes(end_time):
        raise InvalidShiftTypeError("Start and end time of a custom shift type cannot be equal.")

    return ShiftTypeDefinition(
        id=f"custom_{uuid.uuid4().hex[:12]}",
        displayName=name,
        abbreviation=abbreviation,
        durationHours=round(duration_from_times(start_time, end_time), 2),
        startTime=start_time,
        endTime=end_time,
        specialtyScope=specialty,
    )
