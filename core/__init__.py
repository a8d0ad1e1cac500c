"""
core
----

Shift conflict validation and hour accounting:

- ShiftCatalog:
  Shift type definitions keyed by id, with the closed night-type and vacation sets.

- HourAccountant:
  Monthly and Sunday-Saturday weekly hour totals per doctor, plus advisory hour status.

- validate / ConflictValidator:
  Apply the ordered hard rules (see `hard_rules`) to one proposed assignment.

- ScheduleMutator:
  Commit accepted assignments and remove shifts.

- ScheduleService:
  Own the roster snapshot and serialize validate -> commit per doctor.
"""
