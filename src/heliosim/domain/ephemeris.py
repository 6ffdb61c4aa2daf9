# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simplified planetary ephemeris.

Circular, coplanar orbits laid on the x–z plane and tilted by the
obliquity of the ecliptic about Z. Each body starts at phase 0 at J2000.0
and advances uniformly with its sidereal period; use_mean_longitude=True
offsets the phase by the body's J2000 mean longitude for real-sky placement. The Moon rides
a secondary circular orbit around Earth's computed position, so it tracks
Earth wherever Earth is placed.

Not a precision ephemeris: radii are semi-major axes, eccentricity and
inclination are ignored. Positions are heliocentric, in AU.
"""
import math
from dataclasses import dataclass
from datetime import datetime

from heliosim.domain.coordinates import ECLIPTIC_TILT, Vec3, rotate_about_z
from heliosim.domain.constants import HelioConstants
from heliosim.domain.errors import InvalidBodyError
from heliosim.domain.time_systems import JulianDate


@dataclass(frozen=True)
class PlanetaryBody:
    """Static orbital and display record for a solar-system body."""
    name: str
    orbital_radius_au: float
    period_years: float
    radius_km: float
    color: int  # 0xRRGGBB display hint
    mean_longitude_j2000_deg: float = 0.0


# Semi-major axes and sidereal periods: JPL "Approximate Positions of the
# Planets" (Standish). Mean longitudes at J2000.0 from the same table.
PLANETS: tuple[PlanetaryBody, ...] = (
    PlanetaryBody("Mercury", 0.38710, 0.240846, 2_439.7, 0xbfb7ae, 252.2503),
    PlanetaryBody("Venus", 0.72333, 0.615198, 6_051.8, 0xe6d8b0, 181.9791),
    PlanetaryBody("Earth", 1.00000, 1.000017, 6_371.0, 0x7fbfff, 100.4645),
    PlanetaryBody("Mars", 1.52371, 1.880816, 3_389.5, 0xd36b4d, 355.4533),
    PlanetaryBody("Jupiter", 5.20289, 11.862615, 69_911.0, 0xd9c3a5, 34.3964),
    PlanetaryBody("Saturn", 9.53668, 29.447498, 58_232.0, 0xd8c7a6, 49.9554),
    PlanetaryBody("Uranus", 19.18916, 84.016846, 25_362.0, 0x9fd4e8, 313.2381),
    PlanetaryBody("Neptune", 30.06992, 164.79132, 24_622.0, 0x88a6f2, 304.8800),
)

MOON: PlanetaryBody = PlanetaryBody(
    "Moon",
    orbital_radius_au=384_400.0 / HelioConstants.AU_KM,
    period_years=27.321661 / HelioConstants.DAYS_PER_JULIAN_YEAR,
    radius_km=1_737.4,
    color=0xcfcfcf,
    mean_longitude_j2000_deg=218.3165,
)

_BODIES: dict[str, PlanetaryBody] = {b.name: b for b in PLANETS + (MOON,)}

BODY_NAMES: tuple[str, ...] = tuple(_BODIES)


def get_body(name: str) -> PlanetaryBody:
    """Look up a body by name.

    Raises:
        InvalidBodyError: If the name is not in the static table.
    """
    try:
        return _BODIES[name]
    except KeyError:
        raise InvalidBodyError(name, BODY_NAMES) from None


def _resolve(body: "str | PlanetaryBody") -> PlanetaryBody:
    if isinstance(body, PlanetaryBody):
        # Only table bodies are valid; a hand-built record may carry period 0
        if _BODIES.get(body.name) != body:
            raise InvalidBodyError(body.name, BODY_NAMES)
        return body
    return get_body(body)


def _years_since_j2000(t: "JulianDate | datetime | float") -> float:
    """Floats are Julian years since J2000.0; JulianDate/datetime converted."""
    if isinstance(t, JulianDate):
        return t.years_since_j2000
    if isinstance(t, datetime):
        return JulianDate.from_datetime(t).years_since_j2000
    return float(t)


def wrap_period(x: float, period: float) -> float:
    """Wrap x into [0, period), correct for negative x."""
    return ((x % period) + period) % period


def orbital_phase_rad(
    body: "str | PlanetaryBody",
    t: "JulianDate | datetime | float",
    use_mean_longitude: bool = False,
) -> float:
    """
    Orbital phase angle θ of a body at time t.

        θ = 2π · wrap(years, P) / P           (+ λ₀ with use_mean_longitude)

    Args:
        body: Table name or PlanetaryBody.
        t: JulianDate, datetime, or float years since J2000.0.
        use_mean_longitude: Offset by the J2000 mean longitude λ₀.
    """
    b = _resolve(body)
    normalized_year = wrap_period(_years_since_j2000(t), b.period_years)
    theta = 2.0 * math.pi * (normalized_year / b.period_years)
    if use_mean_longitude:
        theta += math.radians(b.mean_longitude_j2000_deg)
    return theta


def _circular_orbit_point(radius: float, theta: float) -> Vec3:
    return rotate_about_z(
        (math.cos(theta) * radius, 0.0, math.sin(theta) * radius),
        ECLIPTIC_TILT,
    )


def position_at(
    body: "str | PlanetaryBody",
    t: "JulianDate | datetime | float",
    use_mean_longitude: bool = False,
) -> Vec3:
    """
    Heliocentric position of a body (AU).

    Position is (R cos θ, 0, R sin θ) rotated by the ecliptic tilt about Z.
    "Moon" is delegated to moon_position().

    Args:
        body: Table name or PlanetaryBody.
        t: JulianDate, datetime, or float years since J2000.0 (may be
            negative).
        use_mean_longitude: Start from the J2000 mean longitude instead of
            phase 0.

    Returns:
        (x, y, z) in AU.

    Raises:
        InvalidBodyError: If body is not in the static table.
    """
    b = _resolve(body)
    if b.name == MOON.name:
        return moon_position(t, use_mean_longitude)
    return _circular_orbit_point(
        b.orbital_radius_au, orbital_phase_rad(b, t, use_mean_longitude),
    )


def moon_position(
    t: "JulianDate | datetime | float",
    use_mean_longitude: bool = False,
) -> Vec3:
    """
    Heliocentric Moon position (AU): an orbit of an orbit.

    Earth's computed position plus a circular lunar orbit with the same
    tilt transform.
    """
    earth = position_at("Earth", t, use_mean_longitude)
    offset = _circular_orbit_point(
        MOON.orbital_radius_au, orbital_phase_rad(MOON, t, use_mean_longitude),
    )
    return (earth[0] + offset[0], earth[1] + offset[1], earth[2] + offset[2])


def planetary_positions(
    t: "JulianDate | datetime | float",
    use_mean_longitude: bool = False,
) -> dict[str, Vec3]:
    """Positions of every table body at t, in table order (planets, then Moon)."""
    return {name: position_at(name, t, use_mean_longitude) for name in BODY_NAMES}


def orbit_path(
    body: "str | PlanetaryBody",
    n_points: int = 256,
    t: "JulianDate | datetime | float | None" = None,
) -> list[Vec3]:
    """
    Sample an orbit ring for drawing orbit lines.

    The Moon's ring is centred on Earth's position at t (origin when t is
    None); planet rings are centred on the Sun.

    Raises:
        ValueError: If n_points < 3.
    """
    if n_points < 3:
        raise ValueError(f"n_points must be >= 3, got {n_points}")
    b = _resolve(body)
    center: Vec3 = (0.0, 0.0, 0.0)
    if b.name == MOON.name and t is not None:
        center = position_at("Earth", t)
    points = []
    for i in range(n_points):
        p = _circular_orbit_point(b.orbital_radius_au, 2.0 * math.pi * i / n_points)
        points.append((center[0] + p[0], center[1] + p[1], center[2] + p[2]))
    return points
