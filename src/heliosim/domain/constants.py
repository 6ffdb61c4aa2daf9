# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Physical and astronomical constants shared across the model layer.

Pure values, no behaviour. Distances are in AU unless a name says otherwise.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class _HelioConstants:
    """Standard constants (IAU 2012 / CODATA 2018 values)."""
    AU_M: float = 1.495978707e11            # m — astronomical unit
    AU_KM: float = 1.495978707e8            # km
    SPEED_OF_LIGHT_KM_S: float = 299_792.458
    SECONDS_PER_DAY: float = 86_400.0
    DAYS_PER_JULIAN_YEAR: float = 365.25
    J2000_JD: float = 2_451_545.0           # JD of 2000-01-01T12:00 TT
    PROTON_MASS_KG: float = 1.67262192e-27
    BOLTZMANN_J_K: float = 1.380649e-23
    MU0: float = 4.0e-7 * math.pi           # vacuum permeability, H/m
    SOLAR_ROTATION_DAYS: float = 27.3       # synodic, equatorial
    ECLIPTIC_TILT_DEG: float = 23.44        # obliquity of the ecliptic


HelioConstants: _HelioConstants = _HelioConstants()

AU_PER_DAY_TO_KM_S: float = HelioConstants.AU_KM / HelioConstants.SECONDS_PER_DAY
"""Multiply a speed in AU/day by this to get km/s."""
