# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Parametric boundary surfaces.

Turns the scalar boundary distance functions into a sampled mesh. The grid
is laid out in the heliosphere frame, where the nose is +X:

    θ ∈ [0, π]   angle from the nose (rows)
    φ ∈ [0, 2π]  azimuth about the nose axis (columns)
    direction = (cos θ, sin θ cos φ, sin θ sin φ)
    vertex    = direction · distance(direction)

A resolution of n gives (n+1)² vertices and 2n² triangles. Rotating into
the scene frame shared with planets and spacecraft is a separate step:
mesh.to_world(basis_from_apex(APEX_SCENE_DIR)).

A boundary whose distance is zero everywhere (the absent bow shock) still
yields a full-size mesh, collapsed onto the origin and flagged
is_degenerate, so renderers can hide it instead of handling an error.
"""
import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Callable

import numpy as np

from heliosim.domain.coordinates import Basis, WORLD_X
from heliosim.domain.plasma import (
    DEFAULT_PARAMETERS,
    HeliosphereParameters,
    bow_shock_distance,
    bow_shock_standoff_ratio,
    breathing_scale,
    heliopause_distance,
    heliopause_nose_distance,
    shape_factor,
    termination_shock_distance,
    termination_shock_nose_distance,
)
from heliosim.domain.time_systems import JulianDate, as_julian_date

logger = logging.getLogger(__name__)

_NORMAL_EPS = 1e-12


class BoundaryKind(Enum):
    TERMINATION_SHOCK = "terminationShock"
    HELIOPAUSE = "heliopause"
    BOW_SHOCK = "bowShock"


_DISTANCE_FUNCTIONS: dict[BoundaryKind, Callable[..., float]] = {
    BoundaryKind.TERMINATION_SHOCK: termination_shock_distance,
    BoundaryKind.HELIOPAUSE: heliopause_distance,
    BoundaryKind.BOW_SHOCK: bow_shock_distance,
}


def _termination_shock_profile(p: HeliosphereParameters) -> tuple[float, float, float]:
    return termination_shock_nose_distance(p), p.ts_shape_a, p.ts_shape_b


def _heliopause_profile(p: HeliosphereParameters) -> tuple[float, float, float]:
    return heliopause_nose_distance(p), p.hp_shape_a, p.hp_shape_b


def _bow_shock_profile(p: HeliosphereParameters) -> tuple[float, float, float]:
    ratio = bow_shock_standoff_ratio(p)
    if ratio == 0.0:
        return 0.0, p.hp_shape_a, p.hp_shape_b
    return heliopause_nose_distance(p) * (1.0 + ratio), p.hp_shape_a, p.hp_shape_b


# (nose distance, a, b) of each boundary; matches _DISTANCE_FUNCTIONS
_PROFILES: dict[BoundaryKind, Callable[[HeliosphereParameters], tuple[float, float, float]]] = {
    BoundaryKind.TERMINATION_SHOCK: _termination_shock_profile,
    BoundaryKind.HELIOPAUSE: _heliopause_profile,
    BoundaryKind.BOW_SHOCK: _bow_shock_profile,
}


@dataclass(frozen=True, eq=False)
class SurfaceMesh:
    """Sampled boundary surface.

    vertices and normals are (N, 3) float arrays; triangles is (M, 3) int
    indices into vertices, wound counter-clockwise seen from outside.
    """
    kind: BoundaryKind
    jd: float
    resolution: int
    vertices: np.ndarray
    normals: np.ndarray
    triangles: np.ndarray

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0])

    @property
    def radii_au(self) -> np.ndarray:
        return np.linalg.norm(self.vertices, axis=1)

    @property
    def max_radius_au(self) -> float:
        return float(self.radii_au.max())

    @property
    def is_degenerate(self) -> bool:
        """True when every vertex sits at the origin (feature absent)."""
        return self.max_radius_au == 0.0

    def to_world(self, basis: Basis) -> "SurfaceMesh":
        """Rotate from the heliosphere frame into world coordinates.

        Use basis_from_apex(APEX_SCENE_DIR) to land in the frame of
        position_at and interpolate.
        """
        m = basis.as_matrix()
        return replace(self, vertices=self.vertices @ m.T, normals=self.normals @ m.T)

    def scaled(self, factor: float) -> "SurfaceMesh":
        """Uniformly scaled copy (e.g. AU → scene units)."""
        return replace(self, vertices=self.vertices * factor)


def _coerce_kind(kind: "BoundaryKind | str") -> BoundaryKind:
    if isinstance(kind, BoundaryKind):
        return kind
    return BoundaryKind(kind)


def boundary_distance(
    kind: "BoundaryKind | str",
    direction: tuple[float, float, float],
    nose: tuple[float, float, float] = WORLD_X,
    jd: "JulianDate | datetime | float | None" = None,
    params: HeliosphereParameters | None = None,
) -> float:
    """Distance (AU) to the given boundary along direction.

    Raises:
        ValueError: If kind is not a BoundaryKind value.
    """
    return _DISTANCE_FUNCTIONS[_coerce_kind(kind)](direction, nose, jd, params)


def grid_directions(resolution: int) -> np.ndarray:
    """Unit directions of the (resolution+1)² θ/φ grid, nose along +X.

    Returns:
        Array of shape (resolution+1, resolution+1, 3).
    """
    theta = np.linspace(0.0, np.pi, resolution + 1)
    phi = np.linspace(0.0, 2.0 * np.pi, resolution + 1)
    th, ph = np.meshgrid(theta, phi, indexing="ij")
    return np.stack(
        [np.cos(th), np.sin(th) * np.cos(ph), np.sin(th) * np.sin(ph)], axis=-1,
    )


def _grid_triangles(resolution: int) -> np.ndarray:
    cols = resolution + 1
    i, j = np.meshgrid(np.arange(resolution), np.arange(resolution), indexing="ij")
    a = (i * cols + j).ravel()
    b = a + cols
    first = np.stack([a, b, a + 1], axis=1)
    second = np.stack([a + 1, b, b + 1], axis=1)
    return np.concatenate([first, second]).astype(np.int64)


def _grid_normals(points: np.ndarray, directions: np.ndarray) -> np.ndarray:
    """Outward normals from grid tangents; radial where the grid collapses."""
    d_theta = np.gradient(points, axis=0)
    d_phi = np.gradient(points, axis=1)
    n = np.cross(d_theta, d_phi)
    length = np.linalg.norm(n, axis=-1, keepdims=True)
    collapsed = length[..., 0] < _NORMAL_EPS
    n = np.where(collapsed[..., None], directions, n / np.maximum(length, _NORMAL_EPS))
    inward = np.sum(n * directions, axis=-1) < 0.0
    n[inward] *= -1.0
    return n


def generate_parametric_surface(
    kind: "BoundaryKind | str",
    jd: "JulianDate | datetime | float",
    resolution: int,
    params: HeliosphereParameters | None = None,
) -> SurfaceMesh:
    """
    Build a boundary mesh in the heliosphere frame.

    Args:
        kind: Boundary to sample; strings must be a BoundaryKind value.
        jd: Epoch (JulianDate, datetime or JD float) for solar-cycle
            breathing.
        resolution: Grid divisions per axis, >= 1.
        params: Model parameters; defaults when None.

    Returns:
        SurfaceMesh with (resolution+1)² vertices. Degenerate (all zero)
        for a boundary that is absent under the given parameters.

    Raises:
        ValueError: If resolution < 1 or kind is unknown.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    boundary = _coerce_kind(kind)
    epoch = as_julian_date(jd)
    p = DEFAULT_PARAMETERS if params is None else params
    nose_distance, a, b = _PROFILES[boundary](p)

    directions = grid_directions(resolution)
    # nose is +X, so cos(angle to nose) is the x component
    cos_angle = np.clip(directions[..., 0], -1.0, 1.0)
    radii = nose_distance * shape_factor(cos_angle, a, b) * breathing_scale(epoch, p)

    points = directions * radii[..., None]
    normals = _grid_normals(points, directions)

    if not np.any(radii):
        logger.debug("%s absent at JD %.1f; returning degenerate surface",
                     boundary.value, epoch.jd)

    return SurfaceMesh(
        kind=boundary,
        jd=epoch.jd,
        resolution=resolution,
        vertices=points.reshape(-1, 3),
        normals=normals.reshape(-1, 3),
        triangles=_grid_triangles(resolution),
    )
