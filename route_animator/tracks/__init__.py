"""
Track data, collections and time interpolation
"""

from .models import GeoPoint, Track, InterpolatedPosition, new_track_id, random_track_color
from .collection import TrackCollection
from .interpolation import interpolate, find_bracket_index
from .samples import sample_tracks

__all__ = [
    'GeoPoint',
    'Track',
    'InterpolatedPosition',
    'new_track_id',
    'random_track_color',
    'TrackCollection',
    'interpolate',
    'find_bracket_index',
    'sample_tracks',
]
