"""
Animation session: one track collection, one playback clock.

Keeps the clock's timeline bound in step with the collection and turns the
current playback time into per-track positions and projected geometry.
"""

import logging
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from ..config.config import Config, get_config
from ..errors import InvalidArgumentError
from ..playback.clock import PlaybackClock, PlaybackState
from ..tracks.collection import TrackCollection
from ..tracks.interpolation import interpolate
from ..tracks.models import Track
from ..tracks.samples import sample_tracks
from ..utils.time_format import format_time
from ..visualization.frames import AnimationFrame, TrackFrame
from ..visualization.projection import (
    Viewport,
    ViewportTransform,
    compute_shared_transform,
    compute_transform,
)

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "id", "name", "color", "points", "duration_ms", "duration_text",
    "latitude", "longitude", "elevation_m",
]


class Animator:
    """
    Owns the tracks and the playback clock of one animation.

    The clock listens to the collection, so it is reclamped immediately
    whenever the longest duration changes, including changes made directly
    on self.collection. Speeds outside [MIN_SPEED, MAX_SPEED] are rejected.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        shared_frame: Optional[bool] = None,
        speed_multiplier: Optional[float] = None
    ):
        self.config = config or get_config()
        self.clock = PlaybackClock(
            speed_multiplier=self._check_speed_range(
                speed_multiplier if speed_multiplier is not None else self.config.DEFAULT_SPEED
            )
        )
        self.collection = TrackCollection()
        self.collection.add_listener(lambda _collection: self._sync_bounds())
        self.shared_frame = self.config.SHARED_FRAME if shared_frame is None else shared_frame

    # --- track management -------------------------------------------------

    def add_track(self, track: Track) -> Track:
        return self.collection.add(track)

    def add_tracks(self, tracks: List[Track]) -> List[Track]:
        return [self.add_track(t) for t in tracks]

    def remove_track(self, track_id: str) -> Track:
        return self.collection.remove(track_id)

    def clear_tracks(self) -> None:
        self.collection.clear()

    def load_samples(self) -> List[Track]:
        """Register the built-in sample routes"""
        return self.add_tracks(sample_tracks())

    def _sync_bounds(self) -> None:
        before = self.clock.current_time_ms
        self.clock.set_max_duration(self.collection.max_duration_ms)
        if self.clock.current_time_ms != before:
            logger.info(f"Playback time reclamped {before} -> {self.clock.current_time_ms} ms")

    # --- playback passthrough --------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self.clock.state

    def play(self) -> PlaybackState:
        return self.clock.play()

    def pause(self) -> PlaybackState:
        return self.clock.pause()

    def toggle(self) -> PlaybackState:
        return self.clock.toggle()

    def reset(self) -> PlaybackState:
        return self.clock.reset()

    def seek(self, time_ms: float) -> PlaybackState:
        return self.clock.seek(time_ms)

    def set_speed(self, multiplier: float) -> PlaybackState:
        return self.clock.set_speed(self._check_speed_range(multiplier))

    def _check_speed_range(self, multiplier: float) -> float:
        """
        Reject speeds outside the configured range.

        Raises:
            InvalidArgumentError: below MIN_SPEED or above MAX_SPEED
        """
        try:
            value = float(multiplier)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Speed multiplier must be a number, got {multiplier!r}")
        if not self.config.MIN_SPEED <= value <= self.config.MAX_SPEED:
            raise InvalidArgumentError(
                f"Speed multiplier must be between {self.config.MIN_SPEED:g} and "
                f"{self.config.MAX_SPEED:g}, got {multiplier!r}"
            )
        return value

    def tick(self, elapsed_wall_ms: Optional[float] = None) -> PlaybackState:
        """Advance by elapsed wall time (defaults to the configured tick interval)"""
        if elapsed_wall_ms is None:
            elapsed_wall_ms = self.config.TICK_INTERVAL_MS
        return self.clock.tick(elapsed_wall_ms)

    # --- per-frame geometry -----------------------------------------------

    def default_viewport(self) -> Viewport:
        return self.config.viewport()

    def frame(self, viewport: Optional[Viewport] = None) -> AnimationFrame:
        """
        Project every track at the current playback time.

        Empty tracks are skipped (and logged); the remaining tracks are
        still drawn.

        Args:
            viewport: Target drawing area, config default when omitted

        Returns:
            AnimationFrame with one TrackFrame per non-empty track
        """
        viewport = viewport or self.default_viewport()
        time_ms = self.clock.current_time_ms
        frame = AnimationFrame(
            time_ms=time_ms,
            max_duration_ms=self.clock.max_duration_ms,
            viewport=viewport
        )

        shared: Optional[ViewportTransform] = None
        if self.shared_frame and any(not t.is_empty for t in self.collection):
            shared = compute_shared_transform(
                self.collection, viewport.width, viewport.height, viewport.padding
            )

        for track in self.collection:
            if track.is_empty:
                logger.warning(f"Skipping track '{track.name}' ({track.id}): no points")
                frame.skipped_track_ids.append(track.id)
                continue

            transform = shared or compute_transform(
                track, viewport.width, viewport.height, viewport.padding
            )
            position = interpolate(track, time_ms)
            frame.tracks.append(TrackFrame(
                track_id=track.id,
                name=track.name,
                color=track.color,
                path=transform.apply_points(track),
                path_data=transform.path_data(track),
                marker=transform.apply_position(position),
                position=position
            ))

        return frame

    # --- sidebar / stats --------------------------------------------------

    def summary_frame(self) -> pd.DataFrame:
        """One row per track with its current interpolated position"""
        time_ms = self.clock.current_time_ms
        rows = []
        for track in self.collection:
            if track.is_empty:
                lat = lon = ele = np.nan
            else:
                position = interpolate(track, time_ms)
                lat, lon, ele = position.latitude, position.longitude, position.elevation_m
            rows.append({
                "id": track.id,
                "name": track.name,
                "color": track.color,
                "points": track.point_count,
                "duration_ms": track.duration_ms,
                "duration_text": format_time(track.duration_ms),
                "latitude": lat,
                "longitude": lon,
                "elevation_m": ele,
            })
        return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)

    def stats(self) -> Dict:
        state = self.clock.state
        return {
            "active_routes": len(self.collection),
            "current_time": format_time(state.current_time_ms),
            "total_time": format_time(self.clock.max_duration_ms),
            "progress": self.clock.progress_fraction,
            "speed": f"{state.speed_multiplier:g}x",
            "status": state.status.value,
        }
