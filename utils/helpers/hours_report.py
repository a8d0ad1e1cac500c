import calendar
import pandas as pd
from typing import List
from schemas.roster.entities import Doctor, Shift


def build_monthly_report(
    doctors: List[Doctor], shifts: List[Shift], catalog, year: int, month: int
) -> pd.DataFrame:
    """
    Doctor x day grid for one calendar month.

    One row per doctor with columns "id", "name", "specialty", one column per day of the month
    ("1".."31") holding the abbreviation(s) of that day's shifts joined by "/", and
    "totalHours". Layout and styling are left to the export collaborator.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    day_cols = [str(d) for d in range(1, days_in_month + 1)]

    month_shifts = [s for s in shifts if s.date.year == year and s.date.month == month]
    records = [
        {
            "id": s.doctorId,
            "day": str(s.date.day),
            "abbreviation": (
                catalog.resolve(s.shiftTypeId).abbreviation
                if catalog.resolve(s.shiftTypeId)
                else ""
            ),
            "hours": catalog.duration_of(s.shiftTypeId),
        }
        for s in sorted(month_shifts, key=lambda s: (s.date, s.id))
    ]
    shifts_df = pd.DataFrame(records, columns=["id", "day", "abbreviation", "hours"])

    report = pd.DataFrame(
        [{"id": d.id, "name": d.name, "specialty": d.specialty} for d in doctors],
        columns=["id", "name", "specialty"],
    )

    if shifts_df.empty:
        grid = pd.DataFrame(index=report["id"], columns=day_cols)
        totals = pd.Series(0.0, index=report["id"])
    else:
        grid = (
            shifts_df.groupby(["id", "day"])["abbreviation"]
            .agg("/".join)
            .unstack("day")
            .reindex(index=report["id"], columns=day_cols)
        )
        totals = shifts_df.groupby("id")["hours"].sum().reindex(report["id"])

    report = report.set_index("id")
    report = report.join(grid.fillna(""))
    report["totalHours"] = totals.fillna(0.0).astype(float)
    return report.reset_index()
