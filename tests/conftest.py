"""Shared fixtures: a small roster, a catalog with a few custom types, and shift builders."""

import pytest
from datetime import date
from core.catalog import ShiftCatalog
from core.service import ScheduleService
from schemas.roster.entities import (
    Doctor,
    ProposedAssignment,
    Shift,
    ShiftTypeDefinition,
    Specialty,
)

CARDIO = "Cardiología"
NEURO = "Neurología"

CUSTOM_TYPES = [
    ShiftTypeDefinition(
        id="custom_7h",
        displayName="Extended morning",
        abbreviation="EM",
        durationHours=7,
        startTime="07:00",
        endTime="14:00",
        specialtyScope=CARDIO,
    ),
    ShiftTypeDefinition(
        id="custom_13h",
        displayName="Long day",
        abbreviation="LD",
        durationHours=13,
        startTime="07:00",
        endTime="20:00",
        specialtyScope=CARDIO,
    ),
    ShiftTypeDefinition(
        id="custom_late",
        displayName="Late bridge",
        abbreviation="LB",
        durationHours=2,
        startTime="18:00",
        endTime="20:00",
        specialtyScope=CARDIO,
    ),
]


def _make_shift(shift_id, day, shift_type, doctor_id="doc1"):
    return Shift(
        id=shift_id,
        doctorId=doctor_id,
        date=date.fromisoformat(day),
        shiftTypeId=shift_type,
    )


def _propose(day, shift_type, doctor_id="doc1", exclude=None):
    return ProposedAssignment(
        doctorId=doctor_id,
        date=date.fromisoformat(day),
        shiftTypeId=shift_type,
        excludeShiftId=exclude,
    )


@pytest.fixture
def make_shift():
    return _make_shift


@pytest.fixture
def propose():
    return _propose


@pytest.fixture
def specialties():
    return [Specialty(name=CARDIO), Specialty(name=NEURO)]


@pytest.fixture
def doctors():
    return [
        Doctor(id="doc1", name="Reed, Evelyn", specialty=CARDIO),
        Doctor(id="doc2", name="Thorne, Marcos", specialty=NEURO),
    ]


@pytest.fixture
def catalog():
    catalog = ShiftCatalog()
    for definition in CUSTOM_TYPES:
        catalog = catalog.with_custom(definition)
    return catalog


@pytest.fixture
def service(catalog, doctors, specialties):
    return ScheduleService(catalog=catalog, doctors=doctors, specialties=specialties)


@pytest.fixture
def month_of_144(make_shift):
    """
    doc1 in May 2024: eleven DayGuards and two Mornings, 144 hours, at most 36 per week.
    "edit_me" is the Morning on Monday 27th.
    """
    guards = ["01", "03", "05", "07", "09", "12", "14", "16", "19", "21", "23"]
    shifts = [make_shift(f"gd{d}", f"2024-05-{d}", "DayGuard") for d in guards]
    shifts.append(make_shift("edit_me", "2024-05-27", "Morning"))
    shifts.append(make_shift("m29", "2024-05-29", "Morning"))
    return shifts
