# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Julian Date value object: the common time axis for the model layer.

Calendar conversions count days on the proleptic Gregorian calendar of the
datetime module, which agrees with Meeus (Astronomical Algorithms, Ch. 7) for
every date after the 1582 reform. Only day-level resolution matters for the
visualization, but the round trip is accurate to well under a second.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from heliosim.domain.constants import HelioConstants

_DAYS_PER_YEAR = HelioConstants.DAYS_PER_JULIAN_YEAR
_J2000_JD = HelioConstants.J2000_JD

# 0001-01-01T00:00 UTC, day one of date.toordinal()
_ORDINAL_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)
_ORDINAL_EPOCH_JD = 1721425.5
_ONE_DAY = timedelta(days=1)


def datetime_to_jd(dt: datetime) -> float:
    """Convert a UTC datetime to Julian Date.

    Naive datetimes are treated as UTC; aware ones are converted to UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    midnight = dt.replace(hour=0, minute=0, second=0, microsecond=0)
    return dt.toordinal() - 1 + _ORDINAL_EPOCH_JD + (dt - midnight) / _ONE_DAY


def jd_to_datetime(jd: float) -> datetime:
    """Convert Julian Date back to a UTC datetime.

    Inverse of datetime_to_jd, rounded to the microsecond.
    """
    return _ORDINAL_EPOCH + timedelta(days=jd - _ORDINAL_EPOCH_JD)


@dataclass(frozen=True, order=True)
class JulianDate:
    """Continuous time as a Julian Date (days).

    Monotonic with calendar time. Passed as the sole time parameter to
    ephemeris, trajectory and boundary functions.
    """

    jd: float

    # -- Construction ------------------------------------------------------- #

    @staticmethod
    def from_datetime(dt: datetime) -> "JulianDate":
        """Create from a datetime. Naive datetimes are treated as UTC."""
        return JulianDate(datetime_to_jd(dt))

    @staticmethod
    def from_decimal_year(year: float) -> "JulianDate":
        """Create from a decimal Julian year (2000.0 = J2000.0)."""
        return JulianDate(_J2000_JD + (year - 2000.0) * _DAYS_PER_YEAR)

    @staticmethod
    def from_years_since_j2000(years: float) -> "JulianDate":
        return JulianDate(_J2000_JD + years * _DAYS_PER_YEAR)

    # -- Conversion --------------------------------------------------------- #

    def to_datetime(self) -> datetime:
        """UTC datetime for this Julian Date."""
        return jd_to_datetime(self.jd)

    @property
    def days_since_j2000(self) -> float:
        return self.jd - _J2000_JD

    @property
    def years_since_j2000(self) -> float:
        """Julian years (365.25 d) since J2000.0, negative before it."""
        return (self.jd - _J2000_JD) / _DAYS_PER_YEAR

    @property
    def decimal_year(self) -> float:
        """Decimal Julian year, e.g. 2012.65."""
        return 2000.0 + self.years_since_j2000

    # -- Arithmetic --------------------------------------------------------- #

    def add_days(self, days: float) -> "JulianDate":
        return JulianDate(self.jd + days)

    def __sub__(self, other: "JulianDate") -> float:
        """Difference in days."""
        return self.jd - other.jd

    def __float__(self) -> float:
        return self.jd

    from_date = from_datetime
    to_date = to_datetime


J2000 = JulianDate(_J2000_JD)
"""J2000.0 epoch, 2000-01-01T12:00."""


def as_julian_date(t: "JulianDate | datetime | float") -> JulianDate:
    """Coerce a JulianDate, datetime or raw JD float to JulianDate."""
    if isinstance(t, JulianDate):
        return t
    if isinstance(t, datetime):
        return JulianDate.from_datetime(t)
    return JulianDate(float(t))
