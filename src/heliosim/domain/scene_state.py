# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Explicit animation state for a scene driver.

Renderers own their scene graph; this module owns only the numbers that
change between frames. update() takes the previous SceneState and returns
a new one together with planet positions, so there are no hidden
module-level counters and identical inputs give identical outputs.
"""
from dataclasses import dataclass, fields, replace

from heliosim.domain.coordinates import Vec3
from heliosim.domain.ephemeris import PLANETS, position_at

TIME_EASING = 0.15
SOLAR_DRIFT_SPEED = 0.008   # scene units per update
STAR_DRIFT_SPEED = 0.0015


@dataclass(frozen=True)
class ComponentVisibility:
    """Which scene layers are shown. Fixed shape: one flag per layer."""
    heliosphere: bool = True
    termination_shock: bool = True
    heliopause: bool = True
    bow_shock: bool = False
    solar_wind: bool = True
    interstellar_wind: bool = True
    planets: bool = True
    orbits: bool = True
    spacecraft: bool = True
    trajectories: bool = True
    stars: bool = True
    coordinate_grid: bool = False
    distance_markers: bool = True
    data_overlay: bool = True

    @classmethod
    def layer_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_component(self, name: str, visible: bool) -> "ComponentVisibility":
        """Copy with one layer toggled.

        Raises:
            ValueError: If name is not a known layer.
        """
        if name not in self.layer_names():
            raise ValueError(
                f"Unknown scene layer '{name}'; expected one of: "
                f"{', '.join(self.layer_names())}"
            )
        return replace(self, **{name: visible})


@dataclass(frozen=True)
class SceneState:
    """Per-frame animation state.

    logical_time: eased time in Earth years since J2000.0.
    drift_x: sideways offset of the solar system inside the heliosphere.
    star_drift_x: starfield offset, drawn opposite the drift for parallax.
    """
    logical_time: float = 0.5
    drift_x: float = 0.0
    star_drift_x: float = 0.0


def update(
    state: SceneState,
    norm_time: float,
    direction: int,
    motion_enabled: bool,
) -> tuple[SceneState, dict[str, Vec3]]:
    """
    Advance the animation by one frame.

    Logical time eases toward norm_time so scrubbing stays smooth; drift
    offsets advance only when motion is enabled, signed by direction.

    Args:
        state: Previous frame's state.
        norm_time: Target time in Earth years since J2000.0.
        direction: +1 or -1.
        motion_enabled: Whether drift advances this frame.

    Returns:
        (new state, planet positions in AU keyed by name).

    Raises:
        ValueError: If direction is not +1 or -1.
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction}")

    logical_time = state.logical_time + (norm_time - state.logical_time) * TIME_EASING
    drift_x = state.drift_x
    star_drift_x = state.star_drift_x
    if motion_enabled:
        drift_x += SOLAR_DRIFT_SPEED * direction
        star_drift_x += STAR_DRIFT_SPEED * direction

    positions = {p.name: position_at(p, logical_time) for p in PLANETS}
    return SceneState(logical_time, drift_x, star_drift_x), positions
