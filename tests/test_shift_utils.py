import pytest
from datetime import date, datetime
from utils.shift_utils import (
    day_night_bucket,
    duration_from_times,
    in_month,
    intervals_overlap,
    normalise_date,
    previous_day,
    shift_interval,
    time_to_minutes,
    week_window,
)


class TestClockTimes:
    def test_time_to_minutes(self):
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("07:30") == 450
        assert time_to_minutes("23:59") == 1439

    def test_day_interval(self):
        assert shift_interval("07:00", "13:00") == (420, 780)

    def test_overnight_interval_wraps(self):
        assert shift_interval("19:00", "07:00") == (1140, 1860)

    def test_equal_times_span_a_full_day(self):
        assert shift_interval("08:00", "08:00") == (480, 480 + 1440)

    def test_duration_from_times(self):
        assert duration_from_times("07:00", "13:00") == 6
        assert duration_from_times("22:00", "06:30") == 8.5


class TestOverlap:
    def test_touching_intervals_do_not_overlap(self):
        assert not intervals_overlap((420, 780), (780, 1140))

    def test_nested_interval_overlaps(self):
        assert intervals_overlap((420, 1140), (600, 700))

    def test_night_then_next_morning(self):
        # next-day morning expressed on the night shift's clock
        night = shift_interval("19:00", "07:00")
        start, end = shift_interval("07:00", "13:00")
        assert not intervals_overlap(night, (start + 1440, end + 1440))
        start, end = shift_interval("06:00", "13:00")
        assert intervals_overlap(night, (start + 1440, end + 1440))


class TestWindows:
    @pytest.mark.parametrize(
        "anchor,expected",
        [
            (date(2024, 5, 12), (date(2024, 5, 12), date(2024, 5, 18))),  # Sunday
            (date(2024, 5, 15), (date(2024, 5, 12), date(2024, 5, 18))),
            (date(2024, 5, 18), (date(2024, 5, 12), date(2024, 5, 18))),  # Saturday
            (date(2024, 5, 1), (date(2024, 4, 28), date(2024, 5, 4))),
        ],
    )
    def test_week_window_is_sunday_to_saturday(self, anchor, expected):
        assert week_window(anchor) == expected

    def test_week_window_accepts_strings_and_datetimes(self):
        assert week_window("2024-05-15") == week_window(datetime(2024, 5, 15, 23, 30))

    def test_in_month(self):
        assert in_month(date(2024, 2, 29), 2024, 2)
        assert not in_month(date(2024, 3, 1), 2024, 2)

    def test_previous_day_crosses_month(self):
        assert previous_day(date(2024, 3, 1)) == date(2024, 2, 29)


class TestNormaliseDate:
    def test_formats(self):
        assert normalise_date("2024-05-11") == date(2024, 5, 11)
        assert normalise_date("2024/05/11") == date(2024, 5, 11)
        assert normalise_date(datetime(2024, 5, 11, 8)) == date(2024, 5, 11)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            normalise_date("not a date")
        with pytest.raises(ValueError):
            normalise_date(42)


class TestDisplayBucket:
    def test_buckets(self):
        assert day_night_bucket("07:00") == "day"
        assert day_night_bucket("18:59") == "day"
        assert day_night_bucket("19:00") == "night"
        assert day_night_bucket("23:00") == "night"
        assert day_night_bucket(None) is None
