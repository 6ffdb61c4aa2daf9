# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Heliosim

Heliosphere model for visualization and validation: simplified planetary
ephemerides, Voyager 1/2 trajectories, solar-wind and interstellar plasma
quantities, pressure-balance termination shock / heliopause / bow shock
distances with solar-cycle breathing, parametric boundary meshes, and
comparison against the Voyager boundary crossings.
"""

from heliosim.domain.constants import HelioConstants
from heliosim.domain.errors import InvalidBodyError, OutOfRangeDateError
from heliosim.domain.time_systems import (
    J2000,
    JulianDate,
    datetime_to_jd,
    jd_to_datetime,
)
from heliosim.domain.coordinates import (
    APEX_DIR,
    APEX_SCENE_DIR,
    Basis,
    basis_from_apex,
    radec_to_vec3,
)
from heliosim.domain.ephemeris import (
    MOON,
    PLANETS,
    PlanetaryBody,
    moon_position,
    planetary_positions,
    position_at,
)
from heliosim.domain.spacecraft import (
    SpacecraftState,
    SpacecraftTrajectory,
    generate_trajectory,
    get_trajectory,
    interpolate,
    spacecraft_state,
)
from heliosim.domain.solar_cycle import (
    SolarCycleState,
    solar_cycle_scale,
    solar_cycle_state,
)
from heliosim.domain.plasma import (
    HeliosphereParameters,
    PlasmaFieldSample,
    PlasmaRegion,
    bow_shock_distance,
    heliopause_distance,
    plasma_field_sample,
    solar_wind_density,
    solar_wind_velocity,
    termination_shock_distance,
)
from heliosim.domain.surfaces import (
    BoundaryKind,
    SurfaceMesh,
    generate_parametric_surface,
)
from heliosim.domain.scene_state import (
    ComponentVisibility,
    SceneState,
    update,
)
from heliosim.domain.crossings import (
    BoundaryCrossing,
    CrossingValidation,
    validate_voyager_crossings,
)

__all__ = [
    "APEX_DIR",
    "APEX_SCENE_DIR",
    "Basis",
    "BoundaryCrossing",
    "BoundaryKind",
    "ComponentVisibility",
    "CrossingValidation",
    "HelioConstants",
    "HeliosphereParameters",
    "InvalidBodyError",
    "J2000",
    "JulianDate",
    "MOON",
    "OutOfRangeDateError",
    "PLANETS",
    "PlanetaryBody",
    "PlasmaFieldSample",
    "PlasmaRegion",
    "SceneState",
    "SolarCycleState",
    "SpacecraftState",
    "SpacecraftTrajectory",
    "SurfaceMesh",
    "basis_from_apex",
    "bow_shock_distance",
    "datetime_to_jd",
    "generate_parametric_surface",
    "generate_trajectory",
    "get_trajectory",
    "heliopause_distance",
    "interpolate",
    "jd_to_datetime",
    "moon_position",
    "planetary_positions",
    "plasma_field_sample",
    "position_at",
    "radec_to_vec3",
    "solar_cycle_scale",
    "solar_cycle_state",
    "solar_wind_density",
    "solar_wind_velocity",
    "spacecraft_state",
    "termination_shock_distance",
    "update",
    "validate_voyager_crossings",
]
