# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar cycle phase and activity.

Piecewise cycle model on the observed minima (NOAA/SWPC), with an
asymmetric rise/decay profile: activity climbs from 0 at minimum to 1 at
maximum over the rise time and decays over the remainder of the cycle.
Outside the table the mean 11-year period is extrapolated.

The activity level drives the heliosphere "breathing": higher solar-wind
ram pressure near maximum pushes the boundaries outward.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from heliosim.domain.time_systems import JulianDate, as_julian_date

_MEAN_CYCLE_YEARS = 11.0
_MEAN_RISE_YEARS = 4.5


@dataclass(frozen=True)
class SolarCycleParams:
    """Parameters for a single solar cycle."""
    number: int
    start_year: float  # Decimal year of cycle minimum
    rise_time: float   # Years from minimum to maximum
    duration: float    # Years to the next minimum


SOLAR_CYCLES: tuple[SolarCycleParams, ...] = (
    SolarCycleParams(number=21, start_year=1976.2, rise_time=3.3, duration=10.5),
    SolarCycleParams(number=22, start_year=1986.7, rise_time=2.9, duration=9.7),
    SolarCycleParams(number=23, start_year=1996.4, rise_time=4.0, duration=12.5),
    SolarCycleParams(number=24, start_year=2008.9, rise_time=5.4, duration=11.0),
    SolarCycleParams(number=25, start_year=2019.9, rise_time=4.6, duration=11.0),
    SolarCycleParams(number=26, start_year=2030.9, rise_time=4.5, duration=11.0),
)


@dataclass(frozen=True)
class SolarCycleState:
    """Where an epoch falls within the solar cycle.

    phase: [0, 1), 0 at minimum.
    activity_level: [0, 1], 1 at maximum.
    """
    cycle_number: int
    phase: float
    activity_level: float


def _locate_cycle(year: float) -> tuple[int, float, float, float]:
    """(cycle number, cycle start year, rise years, duration) containing year."""
    first = SOLAR_CYCLES[0]
    last = SOLAR_CYCLES[-1]
    if year < first.start_year:
        back = math.ceil((first.start_year - year) / _MEAN_CYCLE_YEARS)
        return (first.number - back,
                first.start_year - back * _MEAN_CYCLE_YEARS,
                _MEAN_RISE_YEARS, _MEAN_CYCLE_YEARS)
    for cycle in SOLAR_CYCLES:
        if cycle.start_year <= year < cycle.start_year + cycle.duration:
            return cycle.number, cycle.start_year, cycle.rise_time, cycle.duration
    end = last.start_year + last.duration
    forward = int((year - end) // _MEAN_CYCLE_YEARS)
    return (last.number + 1 + forward,
            end + forward * _MEAN_CYCLE_YEARS,
            _MEAN_RISE_YEARS, _MEAN_CYCLE_YEARS)


def solar_cycle_state(t: "JulianDate | datetime | float") -> SolarCycleState:
    """Cycle number, phase and activity level at t (JD floats accepted)."""
    year = as_julian_date(t).decimal_year
    number, start, rise, duration = _locate_cycle(year)
    phase = min(max((year - start) / duration, 0.0), math.nextafter(1.0, 0.0))
    rise_fraction = rise / duration
    if phase < rise_fraction:
        activity = math.sin(0.5 * math.pi * phase / rise_fraction) ** 2
    else:
        decay = (phase - rise_fraction) / (1.0 - rise_fraction)
        activity = math.cos(0.5 * math.pi * decay) ** 2
    return SolarCycleState(cycle_number=number, phase=phase, activity_level=activity)


def solar_cycle_phase(t: "JulianDate | datetime | float") -> float:
    """Phase within the current cycle, in [0, 1)."""
    return solar_cycle_state(t).phase


def solar_activity_level(t: "JulianDate | datetime | float") -> float:
    """Normalized activity, 0 at minimum and 1 at maximum."""
    return solar_cycle_state(t).activity_level


def solar_cycle_scale(t: "JulianDate | datetime | float", amplitude: float = 0.05) -> float:
    """Boundary breathing factor in [1 - amplitude, 1 + amplitude]."""
    return 1.0 + amplitude * (2.0 * solar_activity_level(t) - 1.0)
