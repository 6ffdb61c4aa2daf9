# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for Voyager trajectory generation and interpolation."""
import math
from datetime import datetime, timezone

import numpy as np
import pytest

from heliosim.domain.constants import AU_PER_DAY_TO_KM_S, HelioConstants
from heliosim.domain.errors import InvalidBodyError, OutOfRangeDateError
from heliosim.domain.spacecraft import (
    SPACECRAFT_NAMES,
    TRAJECTORY_END,
    VOYAGER_1,
    VOYAGER_2,
    SpacecraftTrajectory,
    generate_trajectory,
    get_spacecraft,
    get_trajectory,
    interpolate,
    interpolate_velocity,
    spacecraft_state,
    trail_points,
)
from heliosim.domain.time_systems import JulianDate


def _utc(y, m, d):
    return datetime(y, m, d, tzinfo=timezone.utc)


def _norm(v):
    return math.sqrt(sum(c * c for c in v))


class TestSpacecraftTable:

    def test_names(self):
        assert SPACECRAFT_NAMES == ("Voyager 1", "Voyager 2")

    def test_keypoints_chronological(self):
        for spec in (VOYAGER_1, VOYAGER_2):
            dates = [k.date for k in spec.keypoints]
            assert dates == sorted(dates)
            assert dates[0] == spec.launch

    def test_keypoint_distances_increase(self):
        for spec in (VOYAGER_1, VOYAGER_2):
            dist = [k.distance_au for k in spec.keypoints]
            assert all(b > a for a, b in zip(dist, dist[1:]))

    def test_unknown_spacecraft(self):
        with pytest.raises(InvalidBodyError):
            get_spacecraft("Pioneer 10")


class TestGenerateTrajectory:

    def test_spans_launch_to_end(self):
        traj = generate_trajectory("Voyager 1")
        assert isinstance(traj, SpacecraftTrajectory)
        assert traj.times_jd[0] == VOYAGER_1.launch_jd.jd
        assert traj.end_jd == TRAJECTORY_END.jd

    def test_times_non_decreasing(self):
        traj = generate_trajectory("Voyager 2")
        assert all(b >= a for a, b in zip(traj.times_jd, traj.times_jd[1:]))

    def test_array_shapes(self):
        traj = generate_trajectory("Voyager 1", step_days=60.0)
        assert traj.positions_au.shape == (traj.sample_count, 3)
        assert traj.velocities_au_per_day.shape == (traj.sample_count, 3)

    def test_starts_near_earth_orbit(self):
        traj = generate_trajectory("Voyager 1")
        assert abs(_norm(traj.positions_au[0]) - 1.008) < 1e-9

    def test_distance_monotone(self):
        for name in SPACECRAFT_NAMES:
            traj = generate_trajectory(name, step_days=10.0)
            dist = np.linalg.norm(traj.positions_au, axis=1)
            assert np.all(np.diff(dist) >= -1e-9)

    def test_custom_end(self):
        end = _utc(1990, 1, 1)
        traj = generate_trajectory("Voyager 2", end=end)
        assert traj.end_jd == JulianDate.from_datetime(end).jd

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            generate_trajectory("Voyager 1", step_days=0.0)

    def test_end_before_launch(self):
        with pytest.raises(ValueError):
            generate_trajectory("Voyager 1", end=_utc(1970, 1, 1))

    def test_unknown_name(self):
        with pytest.raises(InvalidBodyError):
            generate_trajectory("Cassini")


class TestGetTrajectory:

    def test_cached(self):
        assert get_trajectory("Voyager 1") is get_trajectory("Voyager 1")

    def test_unknown_name(self):
        with pytest.raises(InvalidBodyError):
            get_trajectory("New Horizons")

    def test_cached_positions_read_only(self):
        traj = get_trajectory("Voyager 1")
        with pytest.raises(ValueError):
            traj.positions_au[0, 0] = 1.0
        with pytest.raises(ValueError):
            traj.positions_au *= 2.0

    def test_cached_velocities_read_only(self):
        traj = get_trajectory("Voyager 2")
        with pytest.raises(ValueError):
            traj.velocities_au_per_day[-1] = 0.0

    def test_interpolation_unaffected_by_copy_edits(self):
        traj = get_trajectory("Voyager 1")
        before = interpolate(traj, traj.times_jd[3])
        scratch = traj.positions_au.copy()
        scratch[:] = 0.0
        assert interpolate(get_trajectory("Voyager 1"), traj.times_jd[3]) == before


class TestInterpolate:

    @pytest.mark.parametrize("name,date,distance", [
        ("Voyager 1", _utc(2004, 12, 16), 94.0),
        ("Voyager 1", _utc(2012, 8, 25), 121.6),
        ("Voyager 2", _utc(2007, 8, 30), 84.0),
        ("Voyager 2", _utc(2018, 11, 5), 119.0),
    ])
    def test_boundary_crossing_distances(self, name, date, distance):
        pos = interpolate(get_trajectory(name), date)
        assert abs(_norm(pos) - distance) < 0.5

    def test_at_sample_returns_sample(self):
        traj = get_trajectory("Voyager 2")
        k = 100
        pos = interpolate(traj, traj.times_jd[k])
        assert np.allclose(pos, traj.positions_au[k], atol=1e-12)

    def test_between_samples_is_linear(self):
        traj = get_trajectory("Voyager 1")
        k = 50
        mid = 0.5 * (traj.times_jd[k] + traj.times_jd[k + 1])
        expected = 0.5 * (traj.positions_au[k] + traj.positions_au[k + 1])
        assert np.allclose(interpolate(traj, mid), expected, atol=1e-12)

    def test_continuous_at_sample(self):
        traj = get_trajectory("Voyager 2")
        k = 200
        approach = interpolate(traj, traj.times_jd[k] - 1e-6)
        assert np.allclose(approach, traj.positions_au[k], atol=1e-6)

    def test_before_launch_raises(self):
        traj = get_trajectory("Voyager 1")
        with pytest.raises(OutOfRangeDateError) as exc_info:
            interpolate(traj, _utc(1976, 1, 1))
        assert exc_info.value.name == "Voyager 1"

    def test_before_launch_is_value_error(self):
        with pytest.raises(ValueError):
            interpolate(get_trajectory("Voyager 2"), _utc(1960, 1, 1))

    def test_before_launch_clamped(self):
        traj = get_trajectory("Voyager 1")
        pos = interpolate(traj, _utc(1976, 1, 1), clamp=True)
        assert np.allclose(pos, traj.positions_au[0], atol=1e-12)

    def test_extrapolates_past_end(self):
        traj = get_trajectory("Voyager 1")
        at_end = _norm(interpolate(traj, traj.end_jd))
        later = _norm(interpolate(traj, traj.end_jd + 3652.5))
        assert abs((later - at_end) - 36.0) < 0.01

    def test_float_is_julian_date(self):
        traj = get_trajectory("Voyager 1")
        jd = JulianDate.from_datetime(_utc(2000, 1, 1))
        assert interpolate(traj, jd.jd) == interpolate(traj, jd)


class TestSpacecraftState:

    def test_light_time_consistent(self):
        state = spacecraft_state(get_trajectory("Voyager 1"), _utc(2012, 8, 25))
        expected_h = (state.distance_au * HelioConstants.AU_KM
                      / HelioConstants.SPEED_OF_LIGHT_KM_S / 3600.0)
        assert abs(state.light_time_hours - expected_h) < 1e-9
        assert 16.0 < state.light_time_hours < 17.5

    def test_cruise_speed_after_last_keypoint(self):
        """Past the table the spacecraft coasts radially at its escape speed."""
        state = spacecraft_state(get_trajectory("Voyager 1"), _utc(2035, 1, 1))
        expected = 3.6 / 365.25 * AU_PER_DAY_TO_KM_S
        assert abs(state.speed_km_s - expected) < 0.05

    def test_velocity_matches_state(self):
        traj = get_trajectory("Voyager 2")
        t = _utc(1995, 6, 1)
        v = interpolate_velocity(traj, t)
        state = spacecraft_state(traj, t)
        assert state.velocity_au_per_day == v
        assert abs(state.speed_km_s - _norm(v) * AU_PER_DAY_TO_KM_S) < 1e-9

    def test_voyager_speeds_plausible(self):
        for name in SPACECRAFT_NAMES:
            state = spacecraft_state(get_trajectory(name), _utc(2020, 1, 1))
            assert 10.0 < state.speed_km_s < 25.0

    def test_before_launch_raises(self):
        with pytest.raises(OutOfRangeDateError):
            spacecraft_state(get_trajectory("Voyager 2"), _utc(1977, 1, 1))


class TestTrailPoints:

    def test_count(self):
        traj = get_trajectory("Voyager 1")
        pts = trail_points(traj, _utc(1980, 1, 1), _utc(2000, 1, 1), n_points=50)
        assert len(pts) == 50

    def test_start_moved_to_launch(self):
        traj = get_trajectory("Voyager 2")
        pts = trail_points(traj, _utc(1970, 1, 1), _utc(1990, 1, 1), n_points=10)
        assert np.allclose(pts[0], traj.positions_au[0], atol=1e-12)

    def test_end_before_start(self):
        with pytest.raises(ValueError):
            trail_points(get_trajectory("Voyager 1"), _utc(2000, 1, 1), _utc(1990, 1, 1))

    def test_too_few_points(self):
        with pytest.raises(ValueError):
            trail_points(get_trajectory("Voyager 1"), _utc(1990, 1, 1), _utc(2000, 1, 1), 1)
