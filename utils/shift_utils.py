import pandas as pd
from datetime import datetime, timedelta, date as dt_date
from typing import Optional, Tuple
from utils.constants import NIGHT_BUCKET_START_HOUR

MINUTES_PER_DAY = 24 * 60


def normalise_date(input_date):
    """
    Convert input to a datetime.date object.
    Supports date/datetime/Timestamp objects and strings like '2025-07-07', '2025/07/07', '20250707'.
    """
    if isinstance(input_date, dt_date) and not isinstance(input_date, datetime):
        return input_date
    elif isinstance(input_date, pd.Timestamp):
        return input_date.date()
    elif isinstance(input_date, datetime):
        return input_date.date()
    elif isinstance(input_date, str):
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            return pd.to_datetime(input_date, errors="raise").date()
        except Exception as e:
            raise ValueError(f"Could not parse date string '{input_date}': {e}")
    raise ValueError(f"Unsupported date type: {type(input_date)}")


# format time
def time_to_minutes(tstr: str) -> int:
    """Convert 'HH:MM' string to minutes since midnight."""
    hours, minutes = tstr.split(":")
    return int(hours) * 60 + int(minutes)


def shift_interval(start_time: str, end_time: str) -> Tuple[int, int]:
    """
    Half-open [start, end) interval in minutes since midnight of the shift date.

    An end at or before the start wraps into the next day, so 19:00-07:00 becomes (1140, 1860).
    """
    start = time_to_minutes(start_time)
    end = time_to_minutes(end_time)
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def intervals_overlap(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if two half-open intervals share at least one minute."""
    return a[0] < b[1] and a[1] > b[0]


def duration_from_times(start_time: str, end_time: str) -> float:
    """Length in hours of a start/end pair under the overnight convention."""
    start, end = shift_interval(start_time, end_time)
    return (end - start) / 60


# week / month windows
def week_window(anchor) -> Tuple[dt_date, dt_date]:
    """
    Sunday on/before `anchor` through the following Saturday, both inclusive.
    Pure date arithmetic, so the result does not depend on the caller's timezone.
    """
    day = normalise_date(anchor)
    days_since_sunday = (day.weekday() + 1) % 7  # weekday(): Monday=0 .. Sunday=6
    start = day - timedelta(days=days_since_sunday)
    return start, start + timedelta(days=6)


def in_month(day, year: int, month: int) -> bool:
    day = normalise_date(day)
    return day.year == year and day.month == month


def previous_day(day) -> dt_date:
    return normalise_date(day) - timedelta(days=1)


def day_night_bucket(start_time: Optional[str]) -> Optional[str]:
    """
    Display bucket of a shift type for day views: 'night' when it starts at or after the night
    bucket hour, 'day' otherwise, None for untimed types (e.g. Vacation).

    Presentation only; the rest rule uses the closed night-type set from the catalog.
    """
    if not start_time:
        return None
    hour = time_to_minutes(start_time) // 60
    return "night" if hour >= NIGHT_BUCKET_START_HOUR else "day"
