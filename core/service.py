import threading
from datetime import date
from typing import Iterable, List, Optional
import pandas as pd
from core.catalog import ShiftCatalog, build_custom_type
from core.hours import HourAccountant, hour_status
from core.locks import DoctorLocks
from core.mutator import ScheduleMutator
from core.validator import validate
from exceptions.custom_errors import (
    AssignmentRejectedError,
    ShiftTypeInUseError,
    UnknownShiftTypeError,
    UnknownSpecialtyError,
)
from schemas.roster.entities import (
    Doctor,
    ProposedAssignment,
    Shift,
    ShiftTypeDefinition,
    Specialty,
)
from schemas.hours.summary import DoctorHours, HourLimits, HoursSummary
from schemas.shifts.assign import AssignResult, Decision
from utils.helpers.hours_report import build_monthly_report
from utils.logger import logger
from utils.shift_utils import normalise_date, week_window


class ScheduleService:
    """
    In-memory owner of the roster snapshot: doctors, specialties, shift catalog and shifts.

    Every write to a doctor's shifts goes through `assign`/`remove_shift`, which run the
    validate -> commit sequence under that doctor's lock. Proposals for different doctors do
    not wait on each other; a short list lock only protects the structure of the shift list
    while it is copied or mutated.
    """

    def __init__(
        self,
        catalog: Optional[ShiftCatalog] = None,
        doctors: Optional[Iterable[Doctor]] = None,
        specialties: Optional[Iterable[Specialty]] = None,
        shifts: Optional[Iterable[Shift]] = None,
        limits: Optional[HourLimits] = None,
    ):
        self.catalog = catalog or ShiftCatalog()
        self.doctors: List[Doctor] = list(doctors or [])
        self.specialties: List[Specialty] = list(specialties or [])
        self.limits = limits or HourLimits()
        self._shifts: List[Shift] = list(shifts or [])
        self._mutator = ScheduleMutator(self._shifts)
        self._locks = DoctorLocks()
        self._list_lock = threading.Lock()
        # guards replacement of `catalog` and `doctors`; commits re-check both under it
        self._state_lock = threading.Lock()

    # --- snapshots ---
    def shifts(self) -> List[Shift]:
        with self._list_lock:
            return list(self._shifts)

    def get_shift(self, shift_id: str) -> Optional[Shift]:
        return next((s for s in self.shifts() if s.id == shift_id), None)

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return next((d for d in self.doctors if d.id == doctor_id), None)

    # --- roster ---
    def set_roster(self, doctors: Iterable[Doctor], specialties: Iterable[Specialty]) -> int:
        """
        Replace the doctor/specialty snapshot. Shifts of doctors no longer on the roster are
        removed; returns how many were dropped.
        """
        doctors, specialties = list(doctors), list(specialties)
        known = {d.id for d in doctors}

        removed = 0
        with self._state_lock:
            self.doctors = doctors
            self.specialties = specialties
            with self._list_lock:
                gone = {s.doctorId for s in self._shifts if s.doctorId not in known}
                for doctor_id in gone:
                    removed += self._mutator.remove_doctor_shifts(doctor_id)
        if removed:
            logger.info(f"Roster update removed {removed} shifts of {len(gone)} doctors.")
        return removed

    # --- validation / assignment ---
    def validate(
        self, proposed: ProposedAssignment, limits: Optional[HourLimits] = None
    ) -> Decision:
        """Dry run against the current snapshot; nothing is committed."""
        return validate(
            proposed, self.shifts(), self.catalog, self.doctors, limits or self.limits
        )

    def _doctors_to_lock(self, proposed: ProposedAssignment) -> set:
        doctor_ids = {proposed.doctorId}
        if proposed.excludeShiftId:
            replaced = self.get_shift(proposed.excludeShiftId)
            if replaced is not None:
                doctor_ids.add(replaced.doctorId)
        return doctor_ids

    def assign(
        self, proposed: ProposedAssignment, limits: Optional[HourLimits] = None
    ) -> AssignResult:
        """
        Validate and, when accepted, commit. An edit that moves a shift to another doctor
        holds both doctors' locks.

        Validation runs against the catalog and roster read at its start. If either was
        replaced before the commit, the proposal is validated again.
        """
        while True:
            doctor_ids = self._doctors_to_lock(proposed)
            with self._locks.hold(doctor_ids):
                # the replaced shift may have changed owner before we got the locks
                if self._doctors_to_lock(proposed) != doctor_ids:
                    continue
                catalog, doctors = self.catalog, self.doctors
                decision = validate(
                    proposed, self.shifts(), catalog, doctors, limits or self.limits
                )
                if not decision.accepted:
                    logger.info(
                        f"Rejected {proposed.shiftTypeId} for {proposed.doctorId} on "
                        f"{proposed.date}: {decision.reason.value} {decision.details}"
                    )
                    return AssignResult(decision=decision)
                with self._state_lock:
                    if self.catalog is not catalog or self.doctors is not doctors:
                        logger.info(
                            f"Catalog or roster changed while validating {proposed.shiftTypeId} "
                            f"for {proposed.doctorId}; validating again."
                        )
                        continue
                    with self._list_lock:
                        shift_id = self._mutator.commit(proposed)
            logger.info(
                f"Committed {shift_id}: {proposed.shiftTypeId} for {proposed.doctorId} on {proposed.date}"
            )
            return AssignResult(decision=decision, shiftId=shift_id)

    def assign_or_raise(
        self, proposed: ProposedAssignment, limits: Optional[HourLimits] = None
    ) -> str:
        result = self.assign(proposed, limits)
        if not result.decision.accepted:
            raise AssignmentRejectedError(result.decision)
        return result.shiftId

    def apply_batch(
        self, proposals: Iterable[ProposedAssignment], limits: Optional[HourLimits] = None
    ) -> List[AssignResult]:
        """
        Feed externally generated proposals through `assign`, one at a time, in the order
        received. Rejected items do not stop the batch.
        """
        results = [self.assign(p, limits) for p in proposals]
        accepted = sum(r.decision.accepted for r in results)
        logger.info(f"Batch applied: {accepted}/{len(results)} proposals accepted.")
        return results

    def remove_shift(self, shift_id: str) -> bool:
        shift = self.get_shift(shift_id)
        if shift is None:
            return False
        with self._locks.hold([shift.doctorId]), self._list_lock:
            removed = self._mutator.remove(shift_id)
        if removed:
            logger.info(f"Removed shift {shift_id} of {shift.doctorId}")
        return removed

    # --- catalog management ---
    def is_shift_type_in_use(self, shift_type_id: str) -> bool:
        with self._list_lock:
            return self._mutator.is_shift_type_in_use(shift_type_id)

    def add_custom_type(
        self, name: str, abbreviation: str, start_time: str, end_time: str, specialty: str
    ) -> ShiftTypeDefinition:
        if self.specialties and specialty not in {s.name for s in self.specialties}:
            raise UnknownSpecialtyError(f"Unknown specialty: {specialty}")

        definition = build_custom_type(name, abbreviation, start_time, end_time, specialty)
        with self._state_lock:
            self.catalog = self.catalog.with_custom(definition)
        logger.info(f"Added custom shift type {definition.id} ({definition.displayName}) for {specialty}")
        return definition

    def delete_custom_type(self, shift_type_id: str):
        with self._state_lock:
            if shift_type_id not in self.catalog:
                raise UnknownShiftTypeError(f"Unknown shift type: {shift_type_id}")
            if self.is_shift_type_in_use(shift_type_id):
                raise ShiftTypeInUseError(
                    f"Shift type {shift_type_id} is used by at least one shift."
                )
            self.catalog = self.catalog.without(shift_type_id)
        logger.info(f"Deleted custom shift type {shift_type_id}")

    # --- hours ---
    def doctor_hours(
        self,
        doctor: Doctor,
        year: int,
        month: int,
        anchor: date,
        limits: Optional[HourLimits] = None,
        accountant: Optional[HourAccountant] = None,
    ) -> DoctorHours:
        limits = limits or self.limits
        accountant = accountant or HourAccountant(self.shifts(), self.catalog)
        monthly = accountant.monthly_hours(doctor.id, year, month)
        weekly = accountant.weekly_hours(doctor.id, anchor)
        return DoctorHours(
            doctorId=doctor.id,
            name=doctor.name,
            specialty=doctor.specialty,
            monthlyHours=monthly,
            weeklyHours=weekly,
            status=hour_status(monthly, weekly, limits).value,
        )

    def hours_summary(
        self,
        year: int,
        month: int,
        anchor=None,
        limits: Optional[HourLimits] = None,
        specialty: Optional[str] = None,
    ) -> HoursSummary:
        limits = limits or self.limits
        anchor = normalise_date(anchor) if anchor is not None else date(year, month, 1)
        week_start, week_end = week_window(anchor)
        accountant = HourAccountant(self.shifts(), self.catalog)
        doctors = [d for d in self.doctors if specialty is None or d.specialty == specialty]
        return HoursSummary(
            year=year,
            month=month,
            weekStart=week_start,
            weekEnd=week_end,
            limits=limits,
            doctors=[
                self.doctor_hours(d, year, month, anchor, limits, accountant) for d in doctors
            ],
        )

    def monthly_report(self, year: int, month: int, specialty: Optional[str] = None) -> pd.DataFrame:
        doctors = [d for d in self.doctors if specialty is None or d.specialty == specialty]
        return build_monthly_report(doctors, self.shifts(), self.catalog, year, month)
