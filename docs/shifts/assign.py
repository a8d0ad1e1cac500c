validate_shift_description = """
Check a proposed shift assignment against the current roster without saving it.

### Request Body

- `proposal` (`ProposedAssignment` object):
    - `doctorId`: Primary key of the doctor
    - `date`: Date of the shift (`YYYY-MM-DD`)
    - `shiftTypeId`: Id of a standard shift type (e.g. "Morning", "NightGuard", "Vacation") or of a custom type
    - `excludeShiftId`: (Optional) Id of the shift being edited; it is ignored when scanning for conflicts

- `limits` (Optional `HourLimits` object): overrides of the configured hour thresholds
    - `maxWeeklyHours`: Blocking weekly cap (default 36)
    - `monthlyCriticalHours`: Blocking monthly cap (default 150)
    - `monthlyWarningHours`: Advisory monthly warning (default 140)
    - `minMonthlyHours`: Advisory monthly minimum (default 120)

Rules are checked in this order and the first one violated is reported:

1. `UnknownShiftType`: the shift type does not exist
2. `UnknownDoctor`: the doctor is not on the roster
3. `UnknownShiftType`: the custom type belongs to another specialty (`details.specialty`)
4. `WeeklyCapExceeded`: Sunday-Saturday total would exceed the weekly cap (`details.total`, `details.max`)
5. `MonthlyCapExceeded`: calendar-month total would exceed the critical cap (`details.total`, `details.max`)
6. `VacationConflict`: Vacation proposed on a date with other shifts (`details.direction` = "outgoing")
7. `VacationConflict`: shift proposed on a Vacation date (`details.direction` = "incoming")
8. `InsufficientRest`: the doctor worked a Night or NightGuard the day before (`details.shiftId`)
9. `TimeOverlap`: the clock times overlap another shift that date (`details.shiftId`)

The API endpoint returns a `Decision` object:

- `accepted`: Whether the assignment is admissible
- `reason`: Rejection reason (null when accepted)
- `details`: Structured values for building a message
"""

assign_shift_description = """
Validate a proposed shift assignment and save it when accepted.

Takes the same body as `/shifts/validate`. When `excludeShiftId` names an existing shift, that shift is
replaced in place; otherwise a new shift is created.

Validation and saving run under the doctor's lock, so two concurrent proposals for the same doctor cannot both
pass against a stale roster.

The API endpoint returns an `AssignResult` object:

- `decision`: The `Decision` that allowed the save
- `shiftId`: Id of the saved shift

The API endpoint raises an HTTPException with a status code of 409 whose `detail` is the rejecting `Decision`.
"""

batch_assign_description = """
Apply an ordered batch of proposed assignments, e.g. the output of an automatic schedule generator.

Each proposal goes through the same validate-then-save path as `/shifts/assign`, one at a time, in the order
received. A rejected proposal does not stop the batch.

The API endpoint returns `results`: one `AssignResult` per proposal, in request order, plus `accepted` and
`rejected` counts.
"""
