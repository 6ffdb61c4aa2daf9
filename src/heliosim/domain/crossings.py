# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Voyager boundary-crossing validation.

Compares the boundary model against the in-situ crossings recorded by
Voyager 1 and 2: the spacecraft distance at each crossing date against the
model distance of the same boundary along the spacecraft's direction.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

from heliosim.domain.coordinates import APEX_DIR, scene_to_equatorial
from heliosim.domain.plasma import (
    HeliosphereParameters,
    heliopause_distance,
    termination_shock_distance,
)
from heliosim.domain.spacecraft import get_trajectory, interpolate
from heliosim.domain.surfaces import BoundaryKind
from heliosim.domain.time_systems import JulianDate


@dataclass(frozen=True)
class BoundaryCrossing:
    """An observed boundary crossing."""
    spacecraft: str
    boundary: BoundaryKind
    date: datetime
    observed_distance_au: float


@dataclass(frozen=True)
class CrossingValidation:
    """Model against observation for one crossing."""
    crossing: BoundaryCrossing
    trajectory_distance_au: float
    model_distance_au: float
    relative_error: float  # (model - observed) / observed


# Stone et al., Science 2005 / Nature 2008 / Science 2013 / Nat. Astron. 2019
VOYAGER_CROSSINGS: tuple[BoundaryCrossing, ...] = (
    BoundaryCrossing("Voyager 1", BoundaryKind.TERMINATION_SHOCK,
                     datetime(2004, 12, 16, tzinfo=timezone.utc), 94.0),
    BoundaryCrossing("Voyager 2", BoundaryKind.TERMINATION_SHOCK,
                     datetime(2007, 8, 30, tzinfo=timezone.utc), 84.0),
    BoundaryCrossing("Voyager 1", BoundaryKind.HELIOPAUSE,
                     datetime(2012, 8, 25, tzinfo=timezone.utc), 121.6),
    BoundaryCrossing("Voyager 2", BoundaryKind.HELIOPAUSE,
                     datetime(2018, 11, 5, tzinfo=timezone.utc), 119.0),
)


def validate_crossing(
    crossing: BoundaryCrossing,
    params: HeliosphereParameters | None = None,
) -> CrossingValidation:
    """Evaluate the model boundary along the spacecraft direction at the crossing date."""
    jd = JulianDate.from_datetime(crossing.date)
    position = interpolate(get_trajectory(crossing.spacecraft), jd)
    trajectory_distance = math.sqrt(sum(c * c for c in position))
    # apex is equatorial; trajectories live in the tilted ecliptic scene frame
    direction = scene_to_equatorial(position)

    if crossing.boundary is BoundaryKind.TERMINATION_SHOCK:
        model = termination_shock_distance(direction, APEX_DIR, jd, params)
    elif crossing.boundary is BoundaryKind.HELIOPAUSE:
        model = heliopause_distance(direction, APEX_DIR, jd, params)
    else:
        raise ValueError(f"No recorded crossings for {crossing.boundary.value}")

    observed = crossing.observed_distance_au
    return CrossingValidation(
        crossing=crossing,
        trajectory_distance_au=trajectory_distance,
        model_distance_au=model,
        relative_error=(model - observed) / observed,
    )


def validate_voyager_crossings(
    params: HeliosphereParameters | None = None,
) -> list[CrossingValidation]:
    """Validate every recorded Voyager crossing, in chronological table order."""
    return [validate_crossing(c, params) for c in VOYAGER_CROSSINGS]
