# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for parametric boundary surface generation."""
from datetime import datetime, timezone

import numpy as np
import pytest

from heliosim.domain.coordinates import (
    APEX_DIR,
    APEX_SCENE_DIR,
    WORLD_X,
    basis_from_apex,
    scene_to_equatorial,
)
from heliosim.domain.plasma import (
    HeliosphereParameters,
    heliopause_distance,
    termination_shock_distance,
)
from heliosim.domain.spacecraft import get_trajectory, interpolate
from heliosim.domain.surfaces import (
    BoundaryKind,
    SurfaceMesh,
    boundary_distance,
    generate_parametric_surface,
    grid_directions,
)
from heliosim.domain.time_systems import J2000, JulianDate

JD = JulianDate.from_decimal_year(2012.65)


class TestBoundaryKind:

    def test_values(self):
        assert BoundaryKind.TERMINATION_SHOCK.value == "terminationShock"
        assert BoundaryKind.HELIOPAUSE.value == "heliopause"
        assert BoundaryKind.BOW_SHOCK.value == "bowShock"

    def test_dispatch(self):
        d = (0.2, 0.7, -0.1)
        assert boundary_distance("heliopause", d, WORLD_X, JD) == pytest.approx(
            heliopause_distance(d, WORLD_X, JD))
        assert boundary_distance(BoundaryKind.TERMINATION_SHOCK, d) == pytest.approx(
            termination_shock_distance(d, WORLD_X))

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            boundary_distance("magnetopause", WORLD_X)


class TestGridDirections:

    def test_shape(self):
        assert grid_directions(6).shape == (7, 7, 3)

    def test_unit_vectors(self):
        d = grid_directions(10)
        assert np.allclose(np.linalg.norm(d, axis=-1), 1.0)

    def test_first_row_is_nose_last_row_is_tail(self):
        d = grid_directions(8)
        assert np.allclose(d[0], [1.0, 0.0, 0.0])
        assert np.allclose(d[-1], [-1.0, 0.0, 0.0])


class TestGenerateParametricSurface:

    def test_counts(self):
        mesh = generate_parametric_surface("terminationShock", JD, 8)
        assert isinstance(mesh, SurfaceMesh)
        assert mesh.vertex_count == 81
        assert mesh.triangle_count == 128
        assert mesh.vertices.shape == (81, 3)
        assert mesh.normals.shape == (81, 3)

    def test_indices_in_range(self):
        mesh = generate_parametric_surface(BoundaryKind.HELIOPAUSE, JD, 12)
        assert mesh.triangles.min() >= 0
        assert mesh.triangles.max() < mesh.vertex_count

    def test_vertices_on_boundary(self):
        mesh = generate_parametric_surface(BoundaryKind.TERMINATION_SHOCK, JD, 6)
        for v in mesh.vertices[::5]:
            d = (float(v[0]), float(v[1]), float(v[2]))
            assert np.linalg.norm(v) == pytest.approx(
                termination_shock_distance(d, WORLD_X, JD))

    @pytest.mark.parametrize("kind", list(BoundaryKind))
    def test_every_vertex_matches_distance_function(self, kind):
        params = HeliosphereParameters(ism_speed_km_s=60.0)
        mesh = generate_parametric_surface(kind, JD, 8, params)
        directions = grid_directions(8).reshape(-1, 3)
        expected = [
            boundary_distance(kind, tuple(float(c) for c in d), WORLD_X, JD, params)
            for d in directions
        ]
        assert list(mesh.radii_au) == pytest.approx(expected, rel=1e-9, abs=1e-9)

    def test_nose_vertex(self):
        mesh = generate_parametric_surface("heliopause", JD, 4)
        expected = heliopause_distance(WORLD_X, WORLD_X, JD)
        assert np.allclose(mesh.vertices[0], [expected, 0.0, 0.0])

    def test_tail_farther_than_nose(self):
        mesh = generate_parametric_surface("heliopause", JD, 4)
        assert mesh.vertices[-1][0] < -mesh.vertices[0][0]

    def test_normals_unit_and_outward(self):
        mesh = generate_parametric_surface("terminationShock", JD, 10)
        assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0)
        assert np.all(np.sum(mesh.normals * mesh.vertices, axis=1) > 0.0)

    def test_metadata(self):
        mesh = generate_parametric_surface("heliopause", JD, 5)
        assert mesh.kind is BoundaryKind.HELIOPAUSE
        assert mesh.jd == JD.jd
        assert mesh.resolution == 5
        assert not mesh.is_degenerate

    def test_accepts_jd_float(self):
        a = generate_parametric_surface("heliopause", JD.jd, 3)
        b = generate_parametric_surface("heliopause", JD, 3)
        assert np.array_equal(a.vertices, b.vertices)

    def test_breathes_with_solar_cycle(self):
        minimum = generate_parametric_surface("heliopause", JulianDate.from_decimal_year(2008.9), 4)
        maximum = generate_parametric_surface("heliopause", JulianDate.from_decimal_year(2014.3), 4)
        assert maximum.max_radius_au > minimum.max_radius_au

    def test_resolution_does_not_change_distances(self):
        coarse = generate_parametric_surface("terminationShock", JD, 2)
        fine = generate_parametric_surface("terminationShock", JD, 8)
        # row 1 of the coarse grid (θ = π/2) is row 4 of the fine grid
        assert coarse.radii_au[3] == pytest.approx(fine.radii_au[4 * 9])
        assert coarse.radii_au[0] == pytest.approx(fine.radii_au[0])

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            generate_parametric_surface("heliopause", JD, 0)

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            generate_parametric_surface("astropause", JD, 4)


class TestBowShockSurface:

    def test_degenerate_with_defaults(self):
        mesh = generate_parametric_surface(BoundaryKind.BOW_SHOCK, J2000, 6)
        assert mesh.is_degenerate
        assert mesh.vertex_count == 49
        assert np.all(mesh.vertices == 0.0)
        assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0)

    def test_present_when_supersonic(self):
        params = HeliosphereParameters(ism_speed_km_s=60.0)
        bow = generate_parametric_surface("bowShock", J2000, 6, params)
        hp = generate_parametric_surface("heliopause", J2000, 6, params)
        assert not bow.is_degenerate
        assert np.all(bow.radii_au > hp.radii_au)


class TestSurfaceTransforms:

    def test_to_world_puts_nose_on_apex(self):
        mesh = generate_parametric_surface("terminationShock", JD, 4)
        world = mesh.to_world(basis_from_apex(APEX_DIR))
        r = np.linalg.norm(mesh.vertices[0])
        assert np.allclose(world.vertices[0], np.array(APEX_DIR) * r)

    def test_to_world_preserves_radii(self):
        mesh = generate_parametric_surface("heliopause", JD, 4)
        world = mesh.to_world(basis_from_apex(APEX_DIR))
        assert np.allclose(world.radii_au, mesh.radii_au)
        assert np.array_equal(world.triangles, mesh.triangles)

    def test_scaled(self):
        mesh = generate_parametric_surface("heliopause", JD, 3)
        assert np.allclose(mesh.scaled(0.01).vertices, mesh.vertices * 0.01)
        assert np.array_equal(mesh.scaled(0.01).normals, mesh.normals)


class TestSceneFrameAlignment:
    """World-frame meshes share the frame of planets and spacecraft."""

    def _voyager_1_at_heliopause(self):
        jd = JulianDate.from_datetime(datetime(2012, 8, 25, tzinfo=timezone.utc))
        position = np.array(interpolate(get_trajectory("Voyager 1"), jd))
        mesh = generate_parametric_surface("heliopause", jd, 64).to_world(
            basis_from_apex(APEX_SCENE_DIR))
        unit = mesh.vertices / mesh.radii_au[:, None]
        nearest = int(np.argmax(unit @ (position / np.linalg.norm(position))))
        return jd, position, mesh, nearest

    def test_voyager_1_meets_world_heliopause(self):
        _, position, mesh, nearest = self._voyager_1_at_heliopause()
        assert abs(mesh.radii_au[nearest] - np.linalg.norm(position)) < 3.0

    def test_world_mesh_matches_crossing_model(self):
        jd, position, mesh, nearest = self._voyager_1_at_heliopause()
        direction = scene_to_equatorial(tuple(float(c) for c in position))
        expected = heliopause_distance(direction, APEX_DIR, jd)
        assert mesh.radii_au[nearest] == pytest.approx(expected, abs=0.5)

    def test_nose_vertex_on_scene_apex(self):
        mesh = generate_parametric_surface("heliopause", JD, 4).to_world(
            basis_from_apex(APEX_SCENE_DIR))
        direction = mesh.vertices[0] / np.linalg.norm(mesh.vertices[0])
        assert np.allclose(direction, APEX_SCENE_DIR)
