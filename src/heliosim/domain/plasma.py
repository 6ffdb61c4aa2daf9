# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Heliospheric plasma physics.

Closed-form solar-wind and interstellar-medium (ISM) quantities and the
boundary distances of a simplified pressure-balance heliosphere.

Pressure balance:
    The termination shock (TS) sits where the solar-wind ram pressure,
    falling as 1/r², equals the total ISM pressure (plasma and neutral
    ram, thermal, magnetic):

        r_TS,nose = 1 AU · sqrt(P_sw(1 AU) / P_ISM)

    The heliopause (HP) nose is a fixed multiple of the TS nose.

Anisotropy:
    With u = 1 - cos(angle to nose), u ∈ [0, 2]

        r(u) = r_nose · (1 + a·u + b·u²),  a, b ≥ 0

    so the nose is compressed and the tail elongated. The coefficients are
    fixed model parameters.

Bow shock:
    Exists only when the ISM flow is super-fast-magnetosonic. With the
    IBEX-era inflow speed (23.2 km/s, McComas et al. 2012) the Mach number
    is below 1 and the bow shock distance is 0 in every direction.

Units: distances in AU, densities in cm⁻³, speeds in km/s, pressures in nPa.
"""
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from heliosim.domain.constants import HelioConstants
from heliosim.domain.coordinates import APEX_DIR, Vec3, dot, ecliptic_to_scene, normalize
from heliosim.domain.solar_cycle import solar_cycle_scale
from heliosim.domain.time_systems import JulianDate

_C = HelioConstants


@dataclass(frozen=True)
class HeliosphereParameters:
    """Model parameters. Defaults reproduce TS ≈ 89 AU, HP ≈ 119 AU at the nose."""
    # Solar wind at 1 AU
    sw_density_1au_cm3: float = 6.0
    sw_speed_km_s: float = 400.0
    density_floor_au: float = 0.01
    # Local interstellar medium
    ism_speed_km_s: float = 23.2
    ism_proton_density_cm3: float = 0.07
    ism_neutral_density_cm3: float = 0.10
    ism_temperature_k: float = 6300.0
    ism_field_nt: float = 0.3
    adiabatic_index: float = 5.0 / 3.0
    # Boundary geometry
    hp_to_ts_ratio: float = 4.0 / 3.0
    ts_shape_a: float = 0.10
    ts_shape_b: float = 0.15
    hp_shape_a: float = 0.05
    hp_shape_b: float = 0.35
    shock_compression: float = 2.5
    # Breathing with the solar cycle
    solar_cycle_amplitude: float = 0.05


DEFAULT_PARAMETERS = HeliosphereParameters()


class PlasmaRegion(Enum):
    SUPERSONIC_WIND = "supersonic_wind"
    HELIOSHEATH = "heliosheath"
    INTERSTELLAR = "interstellar"


@dataclass(frozen=True)
class PlasmaFieldSample:
    """Plasma state at a distance along a direction."""
    distance_au: float
    density_cm3: float
    velocity_km_s: float
    pressure_npa: float
    region: PlasmaRegion


def _params(params: HeliosphereParameters | None) -> HeliosphereParameters:
    return DEFAULT_PARAMETERS if params is None else params


# --------------------------------------------------------------------------- #
# Pressures and characteristic speeds
# --------------------------------------------------------------------------- #


def dynamic_pressure(density_cm3: float, velocity_km_s: float) -> float:
    """Proton ram pressure ρv² in nPa."""
    rho = _C.PROTON_MASS_KG * density_cm3 * 1e6
    v = velocity_km_s * 1e3
    return rho * v * v * 1e9


def solar_wind_pressure_1au(params: HeliosphereParameters | None = None) -> float:
    """Solar-wind ram pressure at 1 AU (nPa)."""
    p = _params(params)
    return dynamic_pressure(p.sw_density_1au_cm3, p.sw_speed_km_s)


def ism_total_pressure(params: HeliosphereParameters | None = None) -> float:
    """
    Total ISM pressure confining the heliosphere (nPa).

    Plasma ram + neutral ram (charge-exchange coupled) + thermal
    (protons and electrons) + magnetic B²/2μ₀.
    """
    p = _params(params)
    ram = dynamic_pressure(p.ism_proton_density_cm3 + p.ism_neutral_density_cm3,
                           p.ism_speed_km_s)
    thermal = 2.0 * p.ism_proton_density_cm3 * 1e6 * _C.BOLTZMANN_J_K * p.ism_temperature_k
    b_tesla = p.ism_field_nt * 1e-9
    magnetic = b_tesla * b_tesla / (2.0 * _C.MU0)
    return ram + (thermal + magnetic) * 1e9


def fast_magnetosonic_speed(params: HeliosphereParameters | None = None) -> float:
    """Perpendicular fast-mode speed sqrt(c_s² + v_A²) of the ISM plasma (km/s)."""
    p = _params(params)
    cs2 = p.adiabatic_index * 2.0 * _C.BOLTZMANN_J_K * p.ism_temperature_k / _C.PROTON_MASS_KG
    rho = p.ism_proton_density_cm3 * 1e6 * _C.PROTON_MASS_KG
    b_tesla = p.ism_field_nt * 1e-9
    va2 = b_tesla * b_tesla / (_C.MU0 * rho)
    return math.sqrt(cs2 + va2) / 1e3


def ism_mach_number(params: HeliosphereParameters | None = None) -> float:
    """Fast-magnetosonic Mach number of the interstellar inflow."""
    p = _params(params)
    return p.ism_speed_km_s / fast_magnetosonic_speed(p)


def bow_shock_present(params: HeliosphereParameters | None = None) -> bool:
    return ism_mach_number(params) > 1.0


# --------------------------------------------------------------------------- #
# Boundary distances
# --------------------------------------------------------------------------- #


def _nose_cosine(direction: Vec3, nose: Vec3) -> float:
    c = dot(normalize(direction), normalize(nose))
    return max(-1.0, min(1.0, c))


def shape_factor(cos_angle, a: float, b: float):
    """Boundary shape 1 + a·u + b·u², u = 1 - cos(angle to nose).

    Elementwise on numpy arrays as well as plain floats.
    """
    u = 1.0 - cos_angle
    return 1.0 + a * u + b * u * u


def breathing_scale(
    jd: "JulianDate | datetime | float | None",
    params: HeliosphereParameters | None = None,
) -> float:
    """Solar-cycle size factor applied to every boundary; 1.0 without an epoch."""
    p = _params(params)
    if jd is None:
        return 1.0
    return solar_cycle_scale(jd, p.solar_cycle_amplitude)


def termination_shock_nose_distance(params: HeliosphereParameters | None = None) -> float:
    """TS standoff distance at the nose from pressure balance (AU)."""
    p = _params(params)
    return math.sqrt(solar_wind_pressure_1au(p) / ism_total_pressure(p))


def heliopause_nose_distance(params: HeliosphereParameters | None = None) -> float:
    """Heliopause standoff distance at the nose (AU)."""
    p = _params(params)
    return termination_shock_nose_distance(p) * p.hp_to_ts_ratio


def termination_shock_distance(
    direction: Vec3,
    nose: Vec3 = APEX_DIR,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> float:
    """
    Termination shock distance (AU) along direction.

    Args:
        direction: Look direction (any non-zero length).
        nose: Heliosphere nose direction, the solar apex by default.
        jd: Optional epoch; applies the solar-cycle breathing factor.
        params: Model parameters; defaults when None.

    Returns:
        Distance > 0, strictly increasing with angle from the nose.
    """
    p = _params(params)
    shape = shape_factor(_nose_cosine(direction, nose), p.ts_shape_a, p.ts_shape_b)
    return termination_shock_nose_distance(p) * shape * breathing_scale(jd, p)


def heliopause_distance(
    direction: Vec3,
    nose: Vec3 = APEX_DIR,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> float:
    """Heliopause distance (AU) along direction; always beyond the TS."""
    p = _params(params)
    shape = shape_factor(_nose_cosine(direction, nose), p.hp_shape_a, p.hp_shape_b)
    return heliopause_nose_distance(p) * shape * breathing_scale(jd, p)


def bow_shock_standoff_ratio(params: HeliosphereParameters | None = None) -> float:
    """
    Shock standoff Δ/R beyond the heliopause, or 0 when there is no shock.

    Farris & Russell (1994):
        Δ/R = 0.8 · ((γ-1)M² + 2) / ((γ+1)(M² - 1))
    """
    p = _params(params)
    m = ism_mach_number(p)
    if m <= 1.0:
        return 0.0
    g = p.adiabatic_index
    m2 = m * m
    return 0.8 * ((g - 1.0) * m2 + 2.0) / ((g + 1.0) * (m2 - 1.0))


def bow_shock_distance(
    direction: Vec3,
    nose: Vec3 = APEX_DIR,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> float:
    """
    Bow shock distance (AU) along direction.

    Returns 0.0 in every direction when the ISM inflow is sub-magnetosonic,
    which is the case for the default parameters. Callers treat an all-zero
    field as "feature absent".
    """
    p = _params(params)
    ratio = bow_shock_standoff_ratio(p)
    if ratio == 0.0:
        return 0.0
    return heliopause_distance(direction, nose, jd, p) * (1.0 + ratio)


# --------------------------------------------------------------------------- #
# Solar wind and ISM flow
# --------------------------------------------------------------------------- #


def solar_wind_density(
    distance_au: float,
    params: HeliosphereParameters | None = None,
) -> float:
    """
    Solar-wind proton density (cm⁻³), inverse-square falloff.

    Distances below the floor are clamped to it to avoid the singularity
    at r = 0.
    """
    p = _params(params)
    r = max(distance_au, p.density_floor_au)
    return p.sw_density_1au_cm3 / (r * r)


def solar_wind_velocity(
    distance_au: float,
    direction: Vec3 | None = None,
    nose: Vec3 = APEX_DIR,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> float:
    """
    Bulk flow speed (km/s) at a distance along a direction.

    Constant inside the termination shock; drops by the shock compression
    ratio across it, then decays linearly to the ISM speed at the
    heliopause. Non-increasing with distance. direction defaults to the
    nose, where the shock is closest.
    """
    p = _params(params)
    d = nose if direction is None else direction
    ts = termination_shock_distance(d, nose, jd, p)
    if distance_au < ts:
        return p.sw_speed_km_s
    hp = heliopause_distance(d, nose, jd, p)
    if distance_au >= hp:
        return p.ism_speed_km_s
    downstream = p.sw_speed_km_s / p.shock_compression
    frac = (distance_au - ts) / (hp - ts)
    return downstream + (p.ism_speed_km_s - downstream) * frac


def interstellar_wind_direction(nose: Vec3 = APEX_DIR) -> Vec3:
    """Unit flow direction of the ISM wind: from the nose toward the Sun."""
    n = normalize(nose)
    return (-n[0], -n[1], -n[2])


def ism_flow_velocity(
    nose: Vec3 = APEX_DIR,
    params: HeliosphereParameters | None = None,
) -> Vec3:
    """ISM wind velocity vector in km/s."""
    p = _params(params)
    d = interstellar_wind_direction(nose)
    return (d[0] * p.ism_speed_km_s, d[1] * p.ism_speed_km_s, d[2] * p.ism_speed_km_s)


def plasma_field_sample(
    distance_au: float,
    direction: Vec3 | None = None,
    nose: Vec3 = APEX_DIR,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> PlasmaFieldSample:
    """
    Density, speed and ram pressure at a point.

    Inside the heliosphere the density follows the inverse-square law,
    compressed by the shock ratio in the heliosheath; outside it is the ISM
    proton density. With jd, the solar-wind density is scaled by the square
    of the breathing factor so boundaries and pressure stay consistent.
    """
    p = _params(params)
    d = nose if direction is None else direction
    scale = breathing_scale(jd, p)
    ts = termination_shock_distance(d, nose, jd, p)
    hp = heliopause_distance(d, nose, jd, p)
    velocity = solar_wind_velocity(distance_au, d, nose, jd, p)

    if distance_au < ts:
        region = PlasmaRegion.SUPERSONIC_WIND
        density = solar_wind_density(distance_au, p) * scale * scale
    elif distance_au < hp:
        region = PlasmaRegion.HELIOSHEATH
        density = solar_wind_density(distance_au, p) * scale * scale * p.shock_compression
    else:
        region = PlasmaRegion.INTERSTELLAR
        density = p.ism_proton_density_cm3

    return PlasmaFieldSample(
        distance_au=distance_au,
        density_cm3=density,
        velocity_km_s=velocity,
        pressure_npa=dynamic_pressure(density, velocity),
        region=region,
    )


def solar_wind_conditions(
    jd: "JulianDate | datetime | float",
    distance_au: float = 1.0,
    params: HeliosphereParameters | None = None,
) -> PlasmaFieldSample:
    """Solar-wind state at distance_au toward the nose at epoch jd."""
    return plasma_field_sample(distance_au, None, APEX_DIR, jd, params)


# --------------------------------------------------------------------------- #
# Parker spiral
# --------------------------------------------------------------------------- #


def _solar_omega_rad_s() -> float:
    return 2.0 * math.pi / (_C.SOLAR_ROTATION_DAYS * _C.SECONDS_PER_DAY)


def parker_spiral_angle(
    distance_au: float,
    params: HeliosphereParameters | None = None,
) -> float:
    """Angle between the field line and the radial direction, tan ψ = Ωr/v (rad)."""
    p = _params(params)
    r_m = distance_au * _C.AU_M
    return math.atan2(_solar_omega_rad_s() * r_m, p.sw_speed_km_s * 1e3)


def parker_spiral_line(
    start_angle_rad: float,
    r_max_au: float = 150.0,
    step_au: float = 5.0,
    r_min_au: float = 0.1,
    params: HeliosphereParameters | None = None,
) -> list[Vec3]:
    """
    Points along a Parker spiral field line in the ecliptic plane.

    The footpoint longitude lags by Ω·r/v as the wind carries frozen-in
    field outward from the rotating Sun.

    Raises:
        ValueError: If step_au <= 0 or r_max_au <= r_min_au.
    """
    if step_au <= 0:
        raise ValueError(f"step_au must be positive, got {step_au}")
    if r_max_au <= r_min_au:
        raise ValueError("r_max_au must exceed r_min_au")
    p = _params(params)
    lag_per_au = _solar_omega_rad_s() * _C.AU_M / (p.sw_speed_km_s * 1e3)
    points = []
    r = r_min_au
    while r < r_max_au:
        points.append(ecliptic_to_scene(start_angle_rad - lag_per_au * r, 0.0, r))
        r += step_au
    return points
