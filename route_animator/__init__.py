"""
Route Animator
Animates GPS tracks over a shared timeline: time interpolation of track
positions, viewport projection and a tick-driven playback clock.
"""

from .errors import InvalidArgumentError, TrackLoadError
from .tracks import GeoPoint, Track, InterpolatedPosition, TrackCollection, interpolate, sample_tracks
from .playback import PlaybackClock, PlaybackState, PlaybackStatus
from .visualization import Viewport, ViewportTransform, compute_transform, compute_shared_transform
from .animation import Animator

__version__ = "1.0.0"

__all__ = [
    'InvalidArgumentError',
    'TrackLoadError',
    'GeoPoint',
    'Track',
    'InterpolatedPosition',
    'TrackCollection',
    'interpolate',
    'sample_tracks',
    'PlaybackClock',
    'PlaybackState',
    'PlaybackStatus',
    'Viewport',
    'ViewportTransform',
    'compute_transform',
    'compute_shared_transform',
    'Animator',
]
