"""
Tests for track time interpolation
"""

import numpy as np
import pytest

from route_animator.errors import InvalidArgumentError
from route_animator.tracks.interpolation import interpolate, find_bracket_index
from route_animator.tracks.models import GeoPoint, InterpolatedPosition, Track
from route_animator.tracks.samples import sample_tracks


def _track(rows, name="Test"):
    """Build a track from (lat, lon, time_ms, elevation) rows"""
    points = [GeoPoint(latitude=lat, longitude=lon, elevation_m=ele, time_offset_ms=t) for lat, lon, t, ele in rows]
    return Track(id=name.lower(), name=name, color="#000000", points=tuple(points))


@pytest.fixture
def morning_ride():
    return sample_tracks()[0]


@pytest.fixture
def straight_north():
    """Two points 1 second apart heading due north"""
    return _track([(40.0, -74.0, 0, 100.0), (40.01, -74.0, 1000, 110.0)])


class TestClamping:
    """Query times outside the track timeline"""

    def test_before_start_returns_first_point(self, morning_ride):
        """Test negative time clamps to the first point"""
        assert interpolate(morning_ride, -500) == morning_ride.points[0].position

    def test_at_start_returns_first_point(self, morning_ride):
        """Test time equal to the first offset returns the first point"""
        assert interpolate(morning_ride, 0) == morning_ride.points[0].position

    def test_at_end_returns_last_point(self, morning_ride):
        """Test time equal to the last offset returns the last point"""
        assert interpolate(morning_ride, 4000) == morning_ride.points[-1].position

    def test_after_end_returns_last_point(self, morning_ride):
        """Test time past the end clamps to the last point"""
        assert interpolate(morning_ride, 1_000_000) == morning_ride.points[-1].position

    def test_single_point_track(self):
        """Test a single-point track always returns its point"""
        track = _track([(10.0, 20.0, 0, 5.0)])
        for t in (-10, 0, 10, 10_000):
            assert interpolate(track, t) == InterpolatedPosition(10.0, 20.0, 5.0)

    def test_track_starting_after_zero(self):
        """Test clamp uses the first point's offset, not zero"""
        track = _track([(1.0, 1.0, 500, 0.0), (2.0, 2.0, 1500, 0.0)])
        assert interpolate(track, 200) == InterpolatedPosition(1.0, 1.0, 0.0)


class TestLinearInterpolation:
    """Positions inside a bracketing segment"""

    def test_midpoint_scenario(self, straight_north):
        """Test halfway between two points"""
        pos = interpolate(straight_north, 500)
        assert pos.latitude == pytest.approx(40.005)
        assert pos.longitude == -74.0
        assert pos.elevation_m == pytest.approx(105.0)

    def test_exact_hit_at_segment_start(self, morning_ride):
        """Test progress 0 reproduces each point exactly"""
        for point in morning_ride.points:
            assert interpolate(morning_ride, point.time_offset_ms) == point.position

    def test_strictly_between_just_before_next_point(self, morning_ride):
        """Test one millisecond before the next point lies strictly inside the segment"""
        points = morning_ride.points
        for a, b in zip(points, points[1:]):
            pos = interpolate(morning_ride, b.time_offset_ms - 1)
            assert a.latitude < pos.latitude < b.latitude
            assert a.longitude < pos.longitude < b.longitude
            assert a.elevation_m < pos.elevation_m < b.elevation_m

    def test_quarter_progress(self):
        """Test all three components use the same progress"""
        track = _track([(0.0, 0.0, 0, 0.0), (4.0, -8.0, 400, 40.0)])
        pos = interpolate(track, 100)
        assert pos.latitude == pytest.approx(1.0)
        assert pos.longitude == pytest.approx(-2.0)
        assert pos.elevation_m == pytest.approx(10.0)

    def test_idempotent(self, morning_ride):
        """Test repeated calls return identical results"""
        assert interpolate(morning_ride, 1234) == interpolate(morning_ride, 1234)

    def test_accepts_point_sequence(self, straight_north):
        """Test a plain list of points works like a Track"""
        assert interpolate(list(straight_north.points), 250) == interpolate(straight_north, 250)

    def test_fractional_query_time(self, straight_north):
        """Test non-integer query times interpolate"""
        pos = interpolate(straight_north, 250.5)
        assert pos.latitude == pytest.approx(40.0 + 0.01 * 0.2505)


class TestDegenerateSegments:
    """Equal timestamps (e.g. a paused GPS device)"""

    @pytest.fixture
    def tied_track(self):
        return _track([
            (0.0, 0.0, 0, 0.0),
            (1.0, 1.0, 1000, 0.0),
            (5.0, 5.0, 1000, 0.0),
            (10.0, 10.0, 2000, 0.0),
        ])

    def test_tie_resolves_to_last_point_of_run(self, tied_track):
        """Test query at a tied timestamp brackets from the final tied point"""
        assert interpolate(tied_track, 1000).latitude == 5.0

    def test_segment_after_tie(self, tied_track):
        """Test interpolation continues from the last tied point"""
        assert interpolate(tied_track, 1500).latitude == pytest.approx(7.5)

    def test_segment_before_tie(self, tied_track):
        """Test interpolation before the tie uses the first segment"""
        pos = interpolate(tied_track, 999)
        assert 0.0 < pos.latitude < 1.0

    def test_all_points_same_time(self):
        """Test a zero-duration track does not divide by zero"""
        track = _track([(1.0, 1.0, 0, 0.0), (2.0, 2.0, 0, 0.0), (3.0, 3.0, 0, 0.0)])
        assert interpolate(track, 0) == InterpolatedPosition(1.0, 1.0, 0.0)
        assert interpolate(track, 50) == InterpolatedPosition(3.0, 3.0, 0.0)

    def test_nan_coordinates_pass_through(self):
        """Test NaN input is not interpreted"""
        track = _track([(float("nan"), 1.0, 0, 0.0), (2.0, 2.0, 1000, 0.0)])
        pos = interpolate(track, 500)
        assert np.isnan(pos.latitude)
        assert pos.longitude == pytest.approx(1.5)


class TestInvalidInput:

    def test_empty_sequence_raises(self):
        """Test empty points fail fast"""
        with pytest.raises(InvalidArgumentError):
            interpolate([], 0)

    def test_empty_track_raises(self):
        """Test an empty Track fails fast"""
        with pytest.raises(InvalidArgumentError):
            interpolate(Track(id="e", name="Empty", color="#fff"), 100)

    def test_invalid_argument_is_value_error(self):
        """Test callers catching ValueError also catch the core error"""
        with pytest.raises(ValueError):
            interpolate([], 0)


class TestFindBracketIndex:

    def test_before_first(self):
        assert find_bracket_index(np.array([100, 200]), 50) is None

    def test_inside(self):
        assert find_bracket_index(np.array([0, 100, 200]), 150) == 1

    def test_exact_match(self):
        assert find_bracket_index(np.array([0, 100, 200]), 100) == 1

    def test_past_end(self):
        assert find_bracket_index(np.array([0, 100, 200]), 900) == 2

    def test_ties(self):
        assert find_bracket_index(np.array([0, 100, 100, 100, 200]), 100) == 3
