# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coordinate conversions and the heliosphere-fixed basis.

Reference frames:
    Equatorial — unit vectors from right ascension / declination
    Scene      — ecliptic plane mapped to x–z, tilted by the obliquity
                 about the Z axis (the frame planets and spacecraft use)
    Heliosphere — orthonormal basis whose X axis is the solar apex, so the
                 heliosphere nose always points along +X

The apex is the direction of the Sun's motion through the local
interstellar medium, taken as RA 18h, Dec +30°. APEX_DIR is equatorial;
APEX_SCENE_DIR is the same direction in the scene frame, and is the nose to
use when heliosphere geometry is drawn together with bodies.
"""
import math
from dataclasses import dataclass

import numpy as np

from heliosim.domain.constants import HelioConstants

Vec3 = tuple[float, float, float]

WORLD_X: Vec3 = (1.0, 0.0, 0.0)
WORLD_Y: Vec3 = (0.0, 1.0, 0.0)
WORLD_Z: Vec3 = (0.0, 0.0, 1.0)

# Above this |cos| the apex is too close to the up helper for a stable cross product
_PARALLEL_THRESHOLD = 0.95


def vec_norm(v: Vec3) -> float:
    """Euclidean length of a 3-vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Vec3) -> Vec3:
    """Scale v to unit length.

    Raises:
        ValueError: If v has zero length.
    """
    n = vec_norm(v)
    if n == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return (v[0] / n, v[1] / n, v[2] / n)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def angle_between(a: Vec3, b: Vec3) -> float:
    """Angle between two non-zero vectors in radians, in [0, π]."""
    cos_angle = dot(normalize(a), normalize(b))
    return math.acos(max(-1.0, min(1.0, cos_angle)))


def radec_to_vec3(ra: float, dec: float) -> Vec3:
    """
    Convert right ascension / declination to a Cartesian unit vector.

        x = cos(dec)·cos(ra)
        y = cos(dec)·sin(ra)
        z = sin(dec)

    Args:
        ra: Right ascension in radians (any value, periodic).
        dec: Declination in radians.

    Returns:
        Unit vector (x, y, z).
    """
    x = math.cos(dec) * math.cos(ra)
    y = math.cos(dec) * math.sin(ra)
    z = math.sin(dec)
    length = math.sqrt(x * x + y * y + z * z) or 1.0
    return (x / length, y / length, z / length)


APEX_RA: float = (18.0 / 24.0) * 2.0 * math.pi
"""Right ascension of the solar apex (18h) in radians."""

APEX_DEC: float = math.radians(30.0)
"""Declination of the solar apex (+30°) in radians."""

APEX_DIR: Vec3 = radec_to_vec3(APEX_RA, APEX_DEC)
"""Unit vector toward the solar apex, the heliosphere nose."""

ECLIPTIC_TILT: float = math.radians(HelioConstants.ECLIPTIC_TILT_DEG)
"""Obliquity of the ecliptic in radians."""


@dataclass(frozen=True)
class Basis:
    """Orthonormal frame. x_axis is the supplied direction (the nose)."""
    x_axis: Vec3
    y_axis: Vec3
    z_axis: Vec3

    def as_matrix(self) -> np.ndarray:
        """3×3 rotation matrix with the axes as columns (local → world)."""
        return np.column_stack([self.x_axis, self.y_axis, self.z_axis])

    def to_world(self, v: Vec3) -> Vec3:
        """Rotate a vector expressed in this basis into world coordinates."""
        x, y, z = v
        return (
            x * self.x_axis[0] + y * self.y_axis[0] + z * self.z_axis[0],
            x * self.x_axis[1] + y * self.y_axis[1] + z * self.z_axis[1],
            x * self.x_axis[2] + y * self.y_axis[2] + z * self.z_axis[2],
        )

    def to_local(self, v: Vec3) -> Vec3:
        """Express a world vector in this basis (inverse of to_world)."""
        return (dot(v, self.x_axis), dot(v, self.y_axis), dot(v, self.z_axis))


def basis_from_apex(apex: Vec3 = APEX_DIR) -> Basis:
    """
    Build an orthonormal basis whose X axis is the apex direction.

    The up helper is world Y. When the apex is nearly parallel to it
    (|dot| > 0.95) the helper switches to world Z so the cross product
    never collapses.

        X = apex
        Z = normalize(X × up)
        Y = normalize(Z × X)

    Args:
        apex: Direction for the X axis; normalized here.

    Returns:
        Basis with mutually perpendicular unit axes.
    """
    x_axis = normalize(apex)
    up = WORLD_Y
    if abs(dot(x_axis, up)) > _PARALLEL_THRESHOLD:
        up = WORLD_Z
    z_axis = normalize(cross(x_axis, up))
    y_axis = normalize(cross(z_axis, x_axis))
    return Basis(x_axis=x_axis, y_axis=y_axis, z_axis=z_axis)


def rotate_about_z(v: Vec3, angle_rad: float) -> Vec3:
    """
    Rotate v about the Z axis by angle_rad (right-handed).

        [x']   [cos -sin 0] [x]
        [y'] = [sin  cos 0] [y]
        [z']   [ 0    0  1] [z]
    """
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return (c * v[0] - s * v[1], s * v[0] + c * v[1], v[2])


def ecliptic_to_scene(lon_rad: float, lat_rad: float, r: float) -> Vec3:
    """
    Map heliocentric ecliptic spherical coordinates to the scene frame.

    The ecliptic plane is laid on x–z (y is ecliptic north), then tilted
    by the obliquity about Z, matching the planetary orbit construction.

    Args:
        lon_rad: Ecliptic longitude (radians).
        lat_rad: Ecliptic latitude (radians).
        r: Distance (any unit; the result carries it).
    """
    cos_lat = math.cos(lat_rad)
    base = (
        r * cos_lat * math.cos(lon_rad),
        r * math.sin(lat_rad),
        r * cos_lat * math.sin(lon_rad),
    )
    return rotate_about_z(base, ECLIPTIC_TILT)


def scene_to_ecliptic(v: Vec3) -> tuple[float, float, float]:
    """Inverse of ecliptic_to_scene: (lon_rad, lat_rad, r).

    Raises:
        ValueError: If v has zero length.
    """
    x, y, z = rotate_about_z(v, -ECLIPTIC_TILT)
    r = vec_norm(v)
    if r == 0.0:
        raise ValueError("Direction of a zero-length vector is undefined")
    return math.atan2(z, x), math.asin(max(-1.0, min(1.0, y / r))), r


def ecliptic_to_equatorial(lon_rad: float, lat_rad: float) -> Vec3:
    """
    Ecliptic longitude/latitude to an equatorial unit vector.

    Rotation about the equinox (X) axis by the obliquity ε:
        x = cos β cos λ
        y = cos ε cos β sin λ − sin ε sin β
        z = sin ε cos β sin λ + cos ε sin β
    """
    cos_b = math.cos(lat_rad)
    sin_b = math.sin(lat_rad)
    cos_e = math.cos(ECLIPTIC_TILT)
    sin_e = math.sin(ECLIPTIC_TILT)
    return (
        cos_b * math.cos(lon_rad),
        cos_e * cos_b * math.sin(lon_rad) - sin_e * sin_b,
        sin_e * cos_b * math.sin(lon_rad) + cos_e * sin_b,
    )


def scene_to_equatorial(v: Vec3) -> Vec3:
    """Unit equatorial direction of a scene-frame vector (same frame as APEX_DIR)."""
    lon, lat, _ = scene_to_ecliptic(v)
    return ecliptic_to_equatorial(lon, lat)


def equatorial_to_scene(v: Vec3) -> Vec3:
    """
    Unit scene-frame direction of an equatorial vector (inverse of
    scene_to_equatorial).

    Rotation about the equinox axis by -ε gives ecliptic components:
        x_ecl = x
        y_ecl =  cos ε · y + sin ε · z
        z_ecl = -sin ε · y + cos ε · z

    Raises:
        ValueError: If v has zero length.
    """
    x, y, z = normalize(v)
    cos_e = math.cos(ECLIPTIC_TILT)
    sin_e = math.sin(ECLIPTIC_TILT)
    y_ecl = cos_e * y + sin_e * z
    z_ecl = -sin_e * y + cos_e * z
    lon = math.atan2(y_ecl, x)
    lat = math.asin(max(-1.0, min(1.0, z_ecl)))
    return ecliptic_to_scene(lon, lat, 1.0)


APEX_SCENE_DIR: Vec3 = equatorial_to_scene(APEX_DIR)
"""Solar apex in the scene frame; basis_from_apex(APEX_SCENE_DIR) places
nose-frame geometry alongside planets and spacecraft."""
