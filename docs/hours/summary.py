hours_summary_description = """
Worked hours per doctor for a calendar month and for the Sunday-Saturday week containing `anchor`.

### Query Parameters

- `year`, `month`: Calendar month to total
- `anchor`: (Optional) Any date of the week to total; defaults to the first day of the month
- `specialty`: (Optional) Only doctors of this specialty
- `maxWeeklyHours`, `monthlyCriticalHours`, `monthlyWarningHours`, `minMonthlyHours`: (Optional) Threshold overrides

The API endpoint returns an `HoursSummary` object with the week window, the limits used and, per doctor:

- `monthlyHours`, `weeklyHours`: Totals
- `status`: Advisory band
    - `critical`: monthly at or above the critical cap, or weekly above the weekly cap
    - `warning`: monthly above the warning cap
    - `low`: monthly below the minimum
    - `ok`: otherwise
"""

hours_report_description = """
Doctor by day grid for one calendar month, as records.

Each record has `id`, `name`, `specialty`, one key per day of the month (`"1"`..`"31"`) with the abbreviations of
that day's shifts, and `totalHours`.
"""
