"""
Per-frame drawing geometry handed to renderers.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from ..tracks.models import InterpolatedPosition
from .projection import Viewport


@dataclass
class TrackFrame:
    """Projected path and current-position marker of one track"""
    track_id: str
    name: str
    color: str
    path: np.ndarray  # (N, 2) x, y
    path_data: str
    marker: Tuple[float, float]
    position: InterpolatedPosition

    def to_dict(self) -> dict:
        return {
            "track_id": self.track_id,
            "name": self.name,
            "color": self.color,
            "path": self.path.tolist(),
            "path_data": self.path_data,
            "marker": {"x": self.marker[0], "y": self.marker[1]},
            "position": self.position.to_dict(),
        }


@dataclass
class AnimationFrame:
    """Everything needed to draw the animation at one playback time"""
    time_ms: int
    max_duration_ms: int
    viewport: Viewport
    tracks: List[TrackFrame] = field(default_factory=list)
    skipped_track_ids: List[str] = field(default_factory=list)

    def get(self, track_id: str) -> Optional[TrackFrame]:
        for track_frame in self.tracks:
            if track_frame.track_id == track_id:
                return track_frame
        return None

    def to_dict(self) -> dict:
        return {
            "time_ms": self.time_ms,
            "max_duration_ms": self.max_duration_ms,
            "viewport": {
                "width": self.viewport.width,
                "height": self.viewport.height,
                "padding": self.viewport.padding,
            },
            "tracks": [t.to_dict() for t in self.tracks],
            "skipped_track_ids": list(self.skipped_track_ids),
        }
