"""
Playback clock for the shared animation timeline.

The clock owns no timer. A driving collaborator calls tick() with the wall
time that elapsed since its previous call; the clock scales it by the speed
multiplier and stops itself at the end of the timeline.
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


class PlaybackStatus(str, Enum):
    STOPPED = "stopped"
    PAUSED = "paused"
    PLAYING = "playing"


@dataclass(frozen=True)
class PlaybackState:
    """Snapshot of the playback timeline"""
    current_time_ms: int = 0
    status: PlaybackStatus = PlaybackStatus.STOPPED
    speed_multiplier: float = 1.0

    @property
    def is_playing(self) -> bool:
        return self.status == PlaybackStatus.PLAYING

    def to_dict(self) -> dict:
        return {
            "current_time_ms": self.current_time_ms,
            "status": self.status.value,
            "is_playing": self.is_playing,
            "speed_multiplier": self.speed_multiplier,
        }


def _validate_speed(multiplier: float) -> float:
    try:
        value = float(multiplier)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Speed multiplier must be a number, got {multiplier!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidArgumentError(f"Speed multiplier must be > 0, got {multiplier!r}")
    return value


def _validate_time(time_ms: float, label: str) -> float:
    try:
        value = float(time_ms)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{label} must be a number, got {time_ms!r}")
    if math.isnan(value):
        raise InvalidArgumentError(f"{label} must not be NaN")
    return value


class PlaybackClock:
    """
    Drives current_time_ms through [0, max_duration_ms].

    Every operation replaces the immutable PlaybackState and returns it.
    """

    def __init__(self, max_duration_ms: int = 0, speed_multiplier: float = 1.0):
        if max_duration_ms < 0:
            raise InvalidArgumentError(f"max_duration_ms must be >= 0, got {max_duration_ms}")
        self._max_duration_ms = int(max_duration_ms)
        self._state = PlaybackState(speed_multiplier=_validate_speed(speed_multiplier))

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def max_duration_ms(self) -> int:
        return self._max_duration_ms

    @property
    def current_time_ms(self) -> int:
        return self._state.current_time_ms

    @property
    def is_playing(self) -> bool:
        return self._state.is_playing

    @property
    def progress_fraction(self) -> float:
        """Position on the timeline as 0..1 (0 when the timeline is empty)"""
        if self._max_duration_ms <= 0:
            return 0.0
        return self._state.current_time_ms / self._max_duration_ms

    def _clamp(self, time_ms: float) -> int:
        return int(min(max(time_ms, 0), self._max_duration_ms))

    def play(self) -> PlaybackState:
        if not self._state.is_playing:
            self._state = replace(self._state, status=PlaybackStatus.PLAYING)
        return self._state

    def pause(self) -> PlaybackState:
        if self._state.is_playing:
            self._state = replace(self._state, status=PlaybackStatus.PAUSED)
        return self._state

    def toggle(self) -> PlaybackState:
        """Play when paused or stopped, pause when playing"""
        if self._state.is_playing:
            return self.pause()
        return self.play()

    def reset(self) -> PlaybackState:
        self._state = replace(self._state, current_time_ms=0, status=PlaybackStatus.STOPPED)
        return self._state

    def set_speed(self, multiplier: float) -> PlaybackState:
        """
        Change the speed multiplier without touching play state.

        Raises:
            InvalidArgumentError: for non-positive or non-finite values
        """
        self._state = replace(self._state, speed_multiplier=_validate_speed(multiplier))
        return self._state

    def seek(self, time_ms: float) -> PlaybackState:
        """
        Jump to a time, clamped to the timeline.

        Playing and paused clocks keep their status. A stopped clock moved
        away from 0 becomes paused, so STOPPED always means time 0.

        Raises:
            InvalidArgumentError: for NaN or non-numeric times
        """
        clamped = self._clamp(_validate_time(time_ms, "Seek time"))
        status = self._state.status
        if status == PlaybackStatus.STOPPED and clamped > 0:
            status = PlaybackStatus.PAUSED
        self._state = replace(self._state, current_time_ms=clamped, status=status)
        return self._state

    def tick(self, elapsed_wall_ms: float) -> PlaybackState:
        """
        Advance playback by elapsed wall time scaled by the speed multiplier.

        Only effective while playing. Reaching the end of the timeline clamps
        to max_duration_ms and pauses.

        Raises:
            InvalidArgumentError: for negative, infinite or NaN elapsed time
        """
        elapsed_wall_ms = _validate_time(elapsed_wall_ms, "Elapsed time")
        if not math.isfinite(elapsed_wall_ms) or elapsed_wall_ms < 0:
            raise InvalidArgumentError(f"Elapsed time must be a finite value >= 0, got {elapsed_wall_ms}")
        if not self._state.is_playing:
            return self._state

        advanced = self._state.current_time_ms + int(round(elapsed_wall_ms * self._state.speed_multiplier))
        if advanced >= self._max_duration_ms:
            self._state = replace(
                self._state,
                current_time_ms=self._max_duration_ms,
                status=PlaybackStatus.PAUSED
            )
            logger.info(f"Reached end of timeline at {self._max_duration_ms} ms, pausing")
        else:
            self._state = replace(self._state, current_time_ms=advanced)
        return self._state

    def set_max_duration(self, max_duration_ms: int) -> PlaybackState:
        """Update the timeline bound and reclamp the current time"""
        if max_duration_ms < 0:
            raise InvalidArgumentError(f"max_duration_ms must be >= 0, got {max_duration_ms}")
        if max_duration_ms != self._max_duration_ms:
            logger.debug(f"Timeline bound {self._max_duration_ms} -> {max_duration_ms} ms")
        self._max_duration_ms = int(max_duration_ms)
        clamped = self._clamp(self._state.current_time_ms)
        if clamped != self._state.current_time_ms:
            self._state = replace(self._state, current_time_ms=clamped)
        return self._state
