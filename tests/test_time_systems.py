# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the JulianDate value object and calendar conversions."""
from datetime import datetime, timedelta, timezone

import pytest

from heliosim.domain.time_systems import (
    J2000,
    JulianDate,
    as_julian_date,
    datetime_to_jd,
    jd_to_datetime,
)


class TestDatetimeToJd:

    def test_j2000_epoch(self):
        dt = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert datetime_to_jd(dt) == 2451545.0

    def test_sputnik_launch(self):
        """Meeus example 7.a: 1957 October 4.81 = JD 2436116.31."""
        dt = datetime(1957, 10, 4, 19, 26, 24, tzinfo=timezone.utc)
        assert abs(datetime_to_jd(dt) - 2436116.31) < 1e-6

    def test_naive_treated_as_utc(self):
        naive = datetime(2012, 8, 25, 6, 30)
        aware = datetime(2012, 8, 25, 6, 30, tzinfo=timezone.utc)
        assert datetime_to_jd(naive) == datetime_to_jd(aware)

    def test_other_timezone_converted(self):
        cet = timezone(timedelta(hours=1))
        local = datetime(2000, 1, 1, 13, 0, tzinfo=cet)
        assert abs(datetime_to_jd(local) - 2451545.0) < 1e-9

    def test_january_february_handled(self):
        jan31 = datetime_to_jd(datetime(2001, 1, 31, tzinfo=timezone.utc))
        feb1 = datetime_to_jd(datetime(2001, 2, 1, tzinfo=timezone.utc))
        assert abs((feb1 - jan31) - 1.0) < 1e-9


class TestJdToDatetime:

    def test_midnight(self):
        assert jd_to_datetime(2451544.5) == datetime(2000, 1, 1, tzinfo=timezone.utc)

    def test_noon(self):
        assert jd_to_datetime(2451545.0) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)

    def test_round_trip(self):
        for dt in (
            datetime(1977, 9, 5, 12, 56, 0, tzinfo=timezone.utc),
            datetime(2004, 12, 16, 3, 15, 42, tzinfo=timezone.utc),
            datetime(2030, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 2, 29, 23, 59, 59, tzinfo=timezone.utc),
        ):
            back = jd_to_datetime(datetime_to_jd(dt))
            assert abs((back - dt).total_seconds()) < 1e-3

    def test_result_is_utc(self):
        assert jd_to_datetime(2460000.25).tzinfo == timezone.utc

    def test_last_microsecond_stays_on_day(self):
        dt = datetime(2012, 8, 25, 23, 59, 59, 999_000, tzinfo=timezone.utc)
        back = jd_to_datetime(datetime_to_jd(dt))
        assert abs((back - dt).total_seconds()) < 1e-3

    def test_whole_days_step_calendar_dates(self):
        start = datetime_to_jd(datetime(1999, 12, 31, tzinfo=timezone.utc))
        assert jd_to_datetime(start + 2.0) == datetime(2000, 1, 2, tzinfo=timezone.utc)
        assert jd_to_datetime(start + 60.0) == datetime(2000, 2, 29, tzinfo=timezone.utc)


class TestJulianDate:

    def test_j2000_constant(self):
        assert J2000.jd == 2451545.0
        assert J2000.years_since_j2000 == 0.0
        assert J2000.decimal_year == 2000.0

    def test_from_datetime(self):
        jd = JulianDate.from_datetime(datetime(2000, 1, 1, 12, tzinfo=timezone.utc))
        assert jd == J2000

    def test_from_date_alias(self):
        dt = datetime(2018, 11, 5, tzinfo=timezone.utc)
        assert JulianDate.from_date(dt) == JulianDate.from_datetime(dt)
        assert JulianDate.from_date(dt).to_date() == dt

    def test_decimal_year_round_trip(self):
        assert abs(JulianDate.from_decimal_year(2012.65).decimal_year - 2012.65) < 1e-9

    def test_years_since_j2000(self):
        jd = JulianDate.from_years_since_j2000(-22.5)
        assert abs(jd.years_since_j2000 + 22.5) < 1e-12
        assert jd.jd < J2000.jd

    def test_days_since_j2000(self):
        assert J2000.add_days(10.5).days_since_j2000 == 10.5

    def test_ordering(self):
        assert JulianDate(2451545.0) < JulianDate(2451546.0)
        assert max(JulianDate(1.0), JulianDate(3.0), JulianDate(2.0)).jd == 3.0

    def test_subtraction_gives_days(self):
        assert JulianDate(2451600.0) - JulianDate(2451545.0) == 55.0

    def test_float_conversion(self):
        assert float(JulianDate(2451545.25)) == 2451545.25

    def test_frozen(self):
        with pytest.raises(AttributeError):
            J2000.jd = 0.0


class TestAsJulianDate:

    def test_passthrough(self):
        assert as_julian_date(J2000) is J2000

    def test_datetime(self):
        dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        assert as_julian_date(dt) == J2000

    def test_float_is_julian_date(self):
        assert as_julian_date(2451545.0) == J2000
