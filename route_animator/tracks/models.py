"""
Track data models.

GeoPoint, Track and InterpolatedPosition value types shared by the
interpolation, projection and playback layers.
"""

import random
import uuid
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

# Column layout used for tabular track interchange
POINT_COLUMNS = ["latitude", "longitude", "elevation_m", "time_offset_ms"]


def new_track_id() -> str:
    """Generate an opaque unique track identifier"""
    return uuid.uuid4().hex


def random_track_color(rng: Optional[random.Random] = None) -> str:
    """Pick a display color for an uploaded track (random hue, fixed saturation/lightness)"""
    rng = rng or random
    hue = rng.random() * 360
    return f"hsl({hue:.0f}, 70%, 60%)"


@dataclass(frozen=True)
class InterpolatedPosition:
    """Position of a track at a query time. Recomputed on every query."""
    latitude: float
    longitude: float
    elevation_m: float

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation_m": self.elevation_m,
        }


@dataclass(frozen=True)
class GeoPoint:
    """A timestamped geographic sample, time relative to the track start"""
    latitude: float
    longitude: float
    elevation_m: float = 0.0
    time_offset_ms: int = 0

    @property
    def position(self) -> InterpolatedPosition:
        return InterpolatedPosition(self.latitude, self.longitude, self.elevation_m)

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "elevation_m": self.elevation_m,
            "time_offset_ms": self.time_offset_ms,
        }


@dataclass(frozen=True)
class Track:
    """
    One GPS recording: an ordered, read-only sequence of GeoPoints plus
    display metadata.

    Time offsets are cached as a numpy array so lookups can index into the
    point tuple instead of searching the objects themselves.
    """
    id: str
    name: str
    color: str
    points: Tuple[GeoPoint, ...] = ()
    _times: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Accept any iterable of points, store an immutable tuple
        points = tuple(self.points)
        object.__setattr__(self, "points", points)
        times = np.fromiter((p.time_offset_ms for p in points), dtype=np.int64, count=len(points))
        times.setflags(write=False)
        object.__setattr__(self, "_times", times)

    @classmethod
    def create(
        cls,
        name: str,
        points: Iterable[GeoPoint],
        color: Optional[str] = None,
        track_id: Optional[str] = None
    ) -> "Track":
        """Build a track, generating an id and color when not supplied"""
        return cls(
            id=track_id or new_track_id(),
            name=name,
            color=color or random_track_color(),
            points=tuple(points)
        )

    @property
    def times(self) -> np.ndarray:
        """Read-only array of point time offsets (ms)"""
        return self._times

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def duration_ms(self) -> int:
        """Time offset of the last point, 0 for an empty track"""
        if not self.points:
            return 0
        return int(self.points[-1].time_offset_ms)

    @property
    def first_point(self) -> Optional[GeoPoint]:
        return self.points[0] if self.points else None

    @property
    def last_point(self) -> Optional[GeoPoint]:
        return self.points[-1] if self.points else None

    def to_dataframe(self) -> pd.DataFrame:
        """Convert points to a DataFrame with POINT_COLUMNS"""
        return pd.DataFrame(
            [p.to_dict() for p in self.points],
            columns=POINT_COLUMNS
        )

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        name: str,
        color: Optional[str] = None,
        track_id: Optional[str] = None
    ) -> "Track":
        """
        Create a Track from a DataFrame of points.

        Args:
            df: Frame with latitude, longitude and time_offset_ms columns;
                elevation_m is optional and defaults to 0
            name: Display name
            color: Display color (random if omitted)
            track_id: Identifier (generated if omitted)

        Returns:
            Track with one point per row, in row order
        """
        missing = [c for c in ("latitude", "longitude", "time_offset_ms") if c not in df.columns]
        if missing:
            raise KeyError(f"Missing point columns: {missing}")

        if "elevation_m" in df.columns:
            elevation = df["elevation_m"].fillna(0.0).to_numpy(dtype=float)
        else:
            elevation = np.zeros(len(df))

        points: List[GeoPoint] = [
            GeoPoint(
                latitude=float(lat),
                longitude=float(lon),
                elevation_m=float(ele),
                time_offset_ms=int(t)
            )
            for lat, lon, ele, t in zip(
                df["latitude"].to_numpy(dtype=float),
                df["longitude"].to_numpy(dtype=float),
                elevation,
                df["time_offset_ms"].to_numpy(dtype=np.int64)
            )
        ]
        return cls.create(name, points, color=color, track_id=track_id)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "duration_ms": self.duration_ms,
            "points": [p.to_dict() for p in self.points],
        }
