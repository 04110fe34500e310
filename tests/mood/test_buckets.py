"""Tests for calendar bucket keys."""

from datetime import date, datetime, timedelta, timezone

import pytest

from mood.buckets import (
    bucket_key,
    bucket_start_ts,
    date_to_ts,
    day_key,
    iso_week_key,
    iso_week_start,
    month_key,
)


def utc_ms(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp() * 1000)


class TestDayKey:
    def test_key_is_utc_date(self):
        assert day_key(utc_ms(2024, 3, 5, 23, 59, 59)) == "2024-03-05"

    def test_midnight_starts_new_day(self):
        assert day_key(utc_ms(2024, 3, 6)) == "2024-03-06"

    def test_start_is_utc_midnight(self):
        assert bucket_start_ts("2024-03-05", "day") == utc_ms(2024, 3, 5)

    def test_pre_epoch(self):
        assert day_key(utc_ms(1969, 12, 31, 12)) == "1969-12-31"
        assert bucket_start_ts("1969-12-31", "day") == utc_ms(1969, 12, 31)


class TestMonthKey:
    def test_leap_day(self):
        ts = utc_ms(2024, 2, 29, 12)
        assert month_key(ts) == "2024-02"
        assert bucket_start_ts("2024-02", "month") == utc_ms(2024, 2, 1)

    def test_december(self):
        assert month_key(utc_ms(2023, 12, 31, 23)) == "2023-12"
        assert bucket_start_ts("2023-12", "month") == utc_ms(2023, 12, 1)


class TestIsoWeek:
    def test_new_year_friday_belongs_to_previous_iso_year(self):
        ts = utc_ms(2021, 1, 1)
        assert iso_week_key(ts) == "2020-W53"
        assert bucket_start_ts("2020-W53", "week") == utc_ms(2020, 12, 28)

    def test_late_december_in_week_one(self):
        # 2024-12-30 is a Monday in ISO week 2025-W01
        assert iso_week_key(utc_ms(2024, 12, 30)) == "2025-W01"
        assert bucket_start_ts("2025-W01", "week") == utc_ms(2024, 12, 30)

    def test_sunday_closes_week(self):
        # Sunday 2024-01-14 is still week 2, Monday 2024-01-15 opens week 3
        assert iso_week_key(utc_ms(2024, 1, 14, 23, 59)) == "2024-W02"
        assert iso_week_key(utc_ms(2024, 1, 15)) == "2024-W03"

    def test_zero_padded(self):
        assert iso_week_key(utc_ms(2024, 2, 1)) == "2024-W05"

    def test_matches_isocalendar_every_day(self):
        """Key and Monday start agree with the stdlib for every day 1995-2035."""
        d = date(1995, 1, 1)
        end = date(2035, 12, 31)
        while d <= end:
            iso_year, week, weekday = d.isocalendar()
            ts = date_to_ts(d) + 13 * 3_600_000
            key = iso_week_key(ts)
            assert key == f"{iso_year}-W{week:02d}"
            monday = d - timedelta(days=weekday - 1)
            assert bucket_start_ts(key, "week") == date_to_ts(monday)
            d += timedelta(days=1)

    @pytest.mark.parametrize("year", [2004, 2009, 2015, 2020, 2026])
    def test_week_53_years(self, year):
        assert iso_week_start(year, 53) + timedelta(days=7) == iso_week_start(year + 1, 1)


class TestDispatch:
    def test_unknown_granularity_is_day(self):
        ts = utc_ms(2024, 5, 17, 8)
        assert bucket_key(ts, "fortnight") == "2024-05-17"
        assert bucket_start_ts("2024-05-17", "fortnight") == utc_ms(2024, 5, 17)

    def test_none_granularity_is_day(self):
        assert bucket_key(utc_ms(2024, 5, 17), None) == "2024-05-17"

    def test_granularity_case_insensitive(self):
        assert bucket_key(utc_ms(2024, 5, 17), "MONTH") == "2024-05"
