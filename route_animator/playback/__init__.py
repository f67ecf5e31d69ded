"""
Playback timeline control
"""

from .clock import PlaybackClock, PlaybackState, PlaybackStatus

__all__ = [
    'PlaybackClock',
    'PlaybackState',
    'PlaybackStatus',
]
