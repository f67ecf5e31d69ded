"""
Ordered collection of tracks sharing one playback timeline.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional

from ..errors import InvalidArgumentError
from .models import Track

logger = logging.getLogger(__name__)


class TrackCollection:
    """
    Tracks in insertion (display) order, keyed by unique id.

    The shared timeline bound, max_duration_ms, is recomputed whenever the
    set of tracks changes. Listeners registered with add_listener are called
    with the collection after every change.
    """

    def __init__(self, tracks: Optional[List[Track]] = None):
        self._tracks: Dict[str, Track] = {}
        self._max_duration_ms = 0
        self._listeners: List[Callable[["TrackCollection"], None]] = []
        for track in tracks or []:
            self.add(track)

    def add(self, track: Track) -> Track:
        """
        Append a track.

        Raises:
            InvalidArgumentError: if a track with the same id is present
        """
        if track.id in self._tracks:
            raise InvalidArgumentError(f"Duplicate track id: {track.id}")
        self._tracks[track.id] = track
        self._recompute()
        logger.info(f"Added track '{track.name}' ({track.point_count} points, {track.duration_ms} ms)")
        return track

    def remove(self, track_id: str) -> Track:
        """Remove and return a track. Raises KeyError for unknown ids."""
        track = self._tracks.pop(track_id)
        self._recompute()
        logger.info(f"Removed track '{track.name}'")
        return track

    def clear(self) -> None:
        self._tracks.clear()
        self._recompute()

    def add_listener(self, callback: Callable[["TrackCollection"], None]) -> None:
        """Register a callback run after every add, remove or clear"""
        self._listeners.append(callback)

    def get(self, track_id: str) -> Track:
        return self._tracks[track_id]

    def _recompute(self) -> None:
        self._max_duration_ms = max((t.duration_ms for t in self._tracks.values()), default=0)
        for callback in self._listeners:
            callback(self)

    @property
    def max_duration_ms(self) -> int:
        """Longest track duration, 0 when empty"""
        return self._max_duration_ms

    @property
    def tracks(self) -> List[Track]:
        return list(self._tracks.values())

    @property
    def ids(self) -> List[str]:
        return list(self._tracks.keys())

    def __contains__(self, track_id: object) -> bool:
        return track_id in self._tracks

    def __iter__(self) -> Iterator[Track]:
        return iter(list(self._tracks.values()))

    def __len__(self) -> int:
        return len(self._tracks)
