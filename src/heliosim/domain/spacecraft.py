# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Voyager 1 / Voyager 2 trajectory model.

Each spacecraft is described by a compiled-in table of heliocentric
keypoints (launch, planetary encounters, boundary crossings, recent
distances). A trajectory is sampled once from launch to a fixed end date:

    distance  — monotone piecewise cubic Hermite (Fritsch–Carlson), so the
                heliocentric distance never overshoots between keypoints
    direction — ecliptic longitude/latitude interpolated linearly
    velocity  — finite differences of the sampled positions

Beyond the last keypoint the spacecraft coasts radially at its asymptotic
escape speed. Queries against a built trajectory are pure reads with
linear interpolation between bracketing samples.

Floats passed as times in this module are Julian Dates.
"""
import logging
import math
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

from heliosim.domain.constants import AU_PER_DAY_TO_KM_S, HelioConstants
from heliosim.domain.coordinates import Vec3, ecliptic_to_scene
from heliosim.domain.errors import InvalidBodyError, OutOfRangeDateError
from heliosim.domain.time_systems import JulianDate, as_julian_date

logger = logging.getLogger(__name__)

_DAYS_PER_YEAR = HelioConstants.DAYS_PER_JULIAN_YEAR

TRAJECTORY_END = JulianDate.from_datetime(datetime(2030, 1, 1, tzinfo=timezone.utc))
"""Default end of the sampled span; later queries extrapolate."""

DEFAULT_STEP_DAYS = 30.0


@dataclass(frozen=True)
class TrajectoryKeypoint:
    """Heliocentric ecliptic (J2000) state anchor."""
    date: datetime
    distance_au: float
    ecliptic_lon_deg: float  # unwrapped: may exceed 360 or go negative
    ecliptic_lat_deg: float
    label: str = ""


@dataclass(frozen=True)
class SpacecraftSpec:
    """Static description of a spacecraft's flight."""
    name: str
    launch: datetime
    escape_speed_au_per_year: float
    keypoints: tuple[TrajectoryKeypoint, ...]

    @property
    def launch_jd(self) -> JulianDate:
        return JulianDate.from_datetime(self.launch)


def _utc(y: int, m: int, d: int) -> datetime:
    return datetime(y, m, d, tzinfo=timezone.utc)


# Encounter distances from the JPL Voyager mission pages; crossing distances
# from Stone et al. (2005, 2008, 2013, 2019). Longitudes are unwrapped so
# they increase along the prograde transfer arcs.
VOYAGER_1 = SpacecraftSpec(
    name="Voyager 1",
    launch=_utc(1977, 9, 5),
    escape_speed_au_per_year=3.6,
    keypoints=(
        TrajectoryKeypoint(_utc(1977, 9, 5), 1.008, -17.0, 0.0, "launch"),
        TrajectoryKeypoint(_utc(1979, 3, 5), 5.20, 126.0, 0.8, "Jupiter"),
        TrajectoryKeypoint(_utc(1980, 11, 12), 9.54, 186.0, 1.5, "Saturn"),
        TrajectoryKeypoint(_utc(1983, 1, 1), 15.5, 225.0, 20.0),
        TrajectoryKeypoint(_utc(1990, 2, 14), 40.5, 250.0, 32.0, "Pale Blue Dot"),
        TrajectoryKeypoint(_utc(1998, 2, 17), 69.4, 253.5, 34.3),
        TrajectoryKeypoint(_utc(2004, 12, 16), 94.0, 254.5, 34.5, "termination shock"),
        TrajectoryKeypoint(_utc(2012, 8, 25), 121.6, 255.2, 34.7, "heliopause"),
        TrajectoryKeypoint(_utc(2024, 1, 1), 162.5, 255.8, 35.0),
    ),
)

VOYAGER_2 = SpacecraftSpec(
    name="Voyager 2",
    launch=_utc(1977, 8, 20),
    escape_speed_au_per_year=3.3,
    keypoints=(
        TrajectoryKeypoint(_utc(1977, 8, 20), 1.011, -33.0, 0.0, "launch"),
        TrajectoryKeypoint(_utc(1979, 7, 9), 5.25, 131.0, 1.0, "Jupiter"),
        TrajectoryKeypoint(_utc(1981, 8, 26), 9.60, 195.0, 2.5, "Saturn"),
        TrajectoryKeypoint(_utc(1986, 1, 24), 19.2, 252.0, 0.5, "Uranus"),
        TrajectoryKeypoint(_utc(1989, 8, 25), 30.1, 282.0, -1.0, "Neptune"),
        TrajectoryKeypoint(_utc(1995, 1, 1), 45.0, 286.0, -20.0),
        TrajectoryKeypoint(_utc(2007, 8, 30), 84.0, 289.0, -30.5, "termination shock"),
        TrajectoryKeypoint(_utc(2018, 11, 5), 119.0, 290.5, -35.5, "heliopause"),
        TrajectoryKeypoint(_utc(2024, 1, 1), 135.7, 291.0, -35.7),
    ),
)

SPACECRAFT: dict[str, SpacecraftSpec] = {
    VOYAGER_1.name: VOYAGER_1,
    VOYAGER_2.name: VOYAGER_2,
}

SPACECRAFT_NAMES: tuple[str, ...] = tuple(SPACECRAFT)


def get_spacecraft(name: str) -> SpacecraftSpec:
    """Look up a spacecraft by name.

    Raises:
        InvalidBodyError: If the name is not in the static table.
    """
    try:
        return SPACECRAFT[name]
    except KeyError:
        raise InvalidBodyError(name, SPACECRAFT_NAMES) from None


# --------------------------------------------------------------------------- #
# Trajectory construction
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, eq=False)
class SpacecraftTrajectory:
    """Time-indexed samples from launch onward.

    times_jd is non-decreasing; positions_au and velocities_au_per_day are
    N×3 read-only arrays aligned with it (scene frame, heliocentric).
    """
    name: str
    launch_jd: float
    times_jd: tuple[float, ...]
    positions_au: np.ndarray
    velocities_au_per_day: np.ndarray

    @property
    def end_jd(self) -> float:
        return self.times_jd[-1]

    @property
    def sample_count(self) -> int:
        return len(self.times_jd)


@dataclass(frozen=True)
class SpacecraftState:
    """Derived, read-only quantities at a query time."""
    name: str
    jd: float
    position_au: Vec3
    velocity_au_per_day: Vec3
    distance_au: float
    speed_km_s: float
    light_time_hours: float


def _monotone_tangents(x: np.ndarray, y: np.ndarray, end_slope: float) -> np.ndarray:
    """Fritsch–Carlson tangents for a monotone cubic Hermite interpolant."""
    h = np.diff(x)
    delta = np.diff(y) / h
    m = np.empty_like(y)
    m[0] = delta[0]
    m[-1] = end_slope
    for k in range(1, len(y) - 1):
        if delta[k - 1] * delta[k] <= 0.0:
            m[k] = 0.0
        else:
            m[k] = 0.5 * (delta[k - 1] + delta[k])

    for k in range(len(delta)):
        if delta[k] == 0.0:
            m[k] = 0.0
            m[k + 1] = 0.0
            continue
        a = m[k] / delta[k]
        b = m[k + 1] / delta[k]
        s = a * a + b * b
        if s > 9.0:
            tau = 3.0 / math.sqrt(s)
            m[k] = tau * a * delta[k]
            m[k + 1] = tau * b * delta[k]
    return m


def _hermite_evaluate(
    x: np.ndarray, y: np.ndarray, m: np.ndarray, xq: np.ndarray,
) -> np.ndarray:
    """Evaluate a cubic Hermite spline at xq (all inside [x0, xn])."""
    idx = np.clip(np.searchsorted(x, xq, side="right") - 1, 0, len(x) - 2)
    h = x[idx + 1] - x[idx]
    t = (xq - x[idx]) / h
    t2 = t * t
    t3 = t2 * t
    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h10 = t3 - 2.0 * t2 + t
    h01 = -2.0 * t3 + 3.0 * t2
    h11 = t3 - t2
    return h00 * y[idx] + h10 * h * m[idx] + h01 * y[idx + 1] + h11 * h * m[idx + 1]


def _keypoint_arrays(spec: SpacecraftSpec) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    kp = spec.keypoints
    times = np.array([JulianDate.from_datetime(k.date).jd for k in kp])
    dist = np.array([k.distance_au for k in kp])
    lon = np.array([k.ecliptic_lon_deg for k in kp])
    lat = np.array([k.ecliptic_lat_deg for k in kp])
    return times, dist, lon, lat


def generate_trajectory(
    name: str,
    end: "JulianDate | datetime | float" = TRAJECTORY_END,
    step_days: float = DEFAULT_STEP_DAYS,
) -> SpacecraftTrajectory:
    """
    Build the full historical trajectory of a spacecraft.

    Args:
        name: Spacecraft name ("Voyager 1" or "Voyager 2").
        end: Last sample time (JulianDate, datetime or JD float).
        step_days: Sample spacing in days.

    Returns:
        SpacecraftTrajectory sampled from launch to end inclusive.

    Raises:
        InvalidBodyError: Unknown spacecraft.
        ValueError: If step_days <= 0 or end precedes launch.
    """
    spec = get_spacecraft(name)
    if step_days <= 0:
        raise ValueError(f"step_days must be positive, got {step_days}")
    end_jd = as_julian_date(end).jd
    launch_jd = spec.launch_jd.jd
    if end_jd < launch_jd:
        raise ValueError(f"end JD {end_jd:.3f} precedes launch of {name}")

    kp_t, kp_r, kp_lon, kp_lat = _keypoint_arrays(spec)
    escape_au_per_day = spec.escape_speed_au_per_year / _DAYS_PER_YEAR
    tangents = _monotone_tangents(kp_t, kp_r, escape_au_per_day)

    times = np.arange(launch_jd, end_jd, step_days)
    if times.size == 0 or times[-1] < end_jd:
        times = np.append(times, end_jd)

    last_t = kp_t[-1]
    inside = np.minimum(times, last_t)
    distance = _hermite_evaluate(kp_t, kp_r, tangents, inside)
    distance = distance + np.maximum(times - last_t, 0.0) * escape_au_per_day
    lon = np.radians(np.interp(times, kp_t, kp_lon))
    lat = np.radians(np.interp(times, kp_t, kp_lat))

    positions = np.array([
        ecliptic_to_scene(float(lo), float(la), float(r))
        for lo, la, r in zip(lon, lat, distance)
    ])
    if len(times) > 1:
        velocities = np.gradient(positions, times, axis=0)
    else:
        velocities = np.zeros_like(positions)
    positions.setflags(write=False)
    velocities.setflags(write=False)

    return SpacecraftTrajectory(
        name=spec.name,
        launch_jd=launch_jd,
        times_jd=tuple(float(t) for t in times),
        positions_au=positions,
        velocities_au_per_day=velocities,
    )


_CACHED_TRAJECTORIES: dict[str, SpacecraftTrajectory] = {}


def get_trajectory(name: str) -> SpacecraftTrajectory:
    """Return the default trajectory for name, building it on first use."""
    cached = _CACHED_TRAJECTORIES.get(name)
    if cached is not None:
        return cached
    trajectory = generate_trajectory(name)
    _CACHED_TRAJECTORIES[name] = trajectory
    logger.info("Built trajectory for %s (%d samples)", name, trajectory.sample_count)
    return trajectory


# --------------------------------------------------------------------------- #
# Queries
# --------------------------------------------------------------------------- #


def _bracket(trajectory: SpacecraftTrajectory, jd: float, clamp: bool) -> tuple[int, float]:
    """Index of the sample at or before jd, and the effective jd.

    Returns index -1 when jd lies past the last sample.
    """
    if jd < trajectory.launch_jd:
        if not clamp:
            raise OutOfRangeDateError(trajectory.name, jd, trajectory.launch_jd)
        jd = trajectory.launch_jd
    times = trajectory.times_jd
    if jd >= times[-1]:
        return -1, jd
    return max(bisect_right(times, jd) - 1, 0), jd


def interpolate(
    trajectory: SpacecraftTrajectory,
    t: "JulianDate | datetime | float",
    clamp: bool = False,
) -> Vec3:
    """
    Position (AU) at time t, linear between bracketing samples.

    Past the last sample the position is extrapolated along the final
    velocity. Before launch an OutOfRangeDateError is raised unless clamp is
    set, in which case the launch position is returned.
    """
    jd = as_julian_date(t).jd
    i, jd = _bracket(trajectory, jd, clamp)
    pos = trajectory.positions_au
    times = trajectory.times_jd
    if i < 0:
        dt = jd - times[-1]
        if dt > 0:
            logger.debug("Extrapolating %s %.1f days past last sample", trajectory.name, dt)
        p = pos[-1] + trajectory.velocities_au_per_day[-1] * dt
    else:
        frac = (jd - times[i]) / (times[i + 1] - times[i])
        p = pos[i] + (pos[i + 1] - pos[i]) * frac
    return (float(p[0]), float(p[1]), float(p[2]))


def interpolate_velocity(
    trajectory: SpacecraftTrajectory,
    t: "JulianDate | datetime | float",
    clamp: bool = False,
) -> Vec3:
    """Velocity (AU/day) at time t; constant past the last sample."""
    jd = as_julian_date(t).jd
    i, jd = _bracket(trajectory, jd, clamp)
    vel = trajectory.velocities_au_per_day
    if i < 0:
        v = vel[-1]
    else:
        times = trajectory.times_jd
        frac = (jd - times[i]) / (times[i + 1] - times[i])
        v = vel[i] + (vel[i + 1] - vel[i]) * frac
    return (float(v[0]), float(v[1]), float(v[2]))


def spacecraft_state(
    trajectory: SpacecraftTrajectory,
    t: "JulianDate | datetime | float",
    clamp: bool = False,
) -> SpacecraftState:
    """Distance, speed and one-way light time from the Sun at time t."""
    jd = as_julian_date(t).jd
    position = interpolate(trajectory, jd, clamp=clamp)
    velocity = interpolate_velocity(trajectory, jd, clamp=clamp)
    distance = math.sqrt(sum(c * c for c in position))
    speed_au_day = math.sqrt(sum(c * c for c in velocity))
    light_time_s = distance * HelioConstants.AU_KM / HelioConstants.SPEED_OF_LIGHT_KM_S
    return SpacecraftState(
        name=trajectory.name,
        jd=jd,
        position_au=position,
        velocity_au_per_day=velocity,
        distance_au=distance,
        speed_km_s=speed_au_day * AU_PER_DAY_TO_KM_S,
        light_time_hours=light_time_s / 3600.0,
    )


def trail_points(
    trajectory: SpacecraftTrajectory,
    start: "JulianDate | datetime | float",
    end: "JulianDate | datetime | float",
    n_points: int = 200,
) -> list[Vec3]:
    """
    Evenly spaced positions between start and end for trail rendering.

    A start before launch is moved up to launch.

    Raises:
        ValueError: If n_points < 2 or end precedes start.
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    start_jd = max(as_julian_date(start).jd, trajectory.launch_jd)
    end_jd = as_julian_date(end).jd
    if end_jd < start_jd:
        raise ValueError(
            f"Trail end JD {end_jd:.3f} precedes start JD {start_jd:.3f}"
        )
    return [interpolate(trajectory, float(jd))
            for jd in np.linspace(start_jd, end_jd, n_points)]
