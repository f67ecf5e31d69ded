"""
Time interpolation of track positions.

Given a track's ordered points and a playback time, find the bracketing
pair of points and linearly interpolate latitude, longitude and elevation.
Query times outside the track's timeline are clamped to its first/last point.
"""

from typing import Optional, Sequence, Union

import numpy as np

from ..errors import InvalidArgumentError
from .models import GeoPoint, InterpolatedPosition, Track

PointsLike = Union[Track, Sequence[GeoPoint]]


def _as_points_and_times(points: PointsLike):
    if isinstance(points, Track):
        return points.points, points.times
    pts = tuple(points)
    times = np.fromiter((p.time_offset_ms for p in pts), dtype=np.int64, count=len(pts))
    return pts, times


def find_bracket_index(times: np.ndarray, query_time_ms: float) -> Optional[int]:
    """
    Index of the bracketing point for a query time.

    Returns the index i with times[i] <= query and times[i + 1] > query (or i
    being the last index). For a non-decreasing timeline that is the last
    index whose time does not exceed the query, so equal timestamps resolve
    to the final point of the tied run. Returns None when the query is
    before the first point.
    """
    idx = int(np.searchsorted(times, query_time_ms, side="right")) - 1
    if idx < 0:
        return None
    return idx


def interpolate(points: PointsLike, query_time_ms: float) -> InterpolatedPosition:
    """
    Interpolated position of a track at a query time.

    Args:
        points: Non-empty ordered GeoPoints (or a Track)
        query_time_ms: Playback time relative to the track start

    Returns:
        InterpolatedPosition on the segment bracketing the query time

    Raises:
        InvalidArgumentError: if there are no points
    """
    pts, times = _as_points_and_times(points)
    if len(pts) == 0:
        raise InvalidArgumentError("Cannot interpolate an empty point sequence")

    first = pts[0]
    if query_time_ms <= first.time_offset_ms:
        return first.position

    idx = find_bracket_index(times, query_time_ms)
    if idx is None:
        return first.position

    current = pts[idx]
    if idx + 1 >= len(pts):
        return current.position

    nxt = pts[idx + 1]
    span = nxt.time_offset_ms - current.time_offset_ms
    if span == 0:
        # Zero-duration segment
        return current.position

    progress = (query_time_ms - current.time_offset_ms) / span

    return InterpolatedPosition(
        latitude=current.latitude + (nxt.latitude - current.latitude) * progress,
        longitude=current.longitude + (nxt.longitude - current.longitude) * progress,
        elevation_m=current.elevation_m + (nxt.elevation_m - current.elevation_m) * progress
    )
