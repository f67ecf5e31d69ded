"""
Geographic to viewport projection.

A linear (equirectangular) scaling of a track's lon/lat bounding box into a
padded viewport, y axis flipped so north is up on a top-left origin screen.
No geodesic correction is applied.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

from ..errors import InvalidArgumentError
from ..tracks.models import GeoPoint, InterpolatedPosition, Track

PointsLike = Union[Track, Sequence[GeoPoint]]


@dataclass(frozen=True)
class Viewport:
    """Drawable area in pixels"""
    width: float = 600
    height: float = 300
    padding: float = 50


@dataclass(frozen=True)
class GeoBounds:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def to_dict(self) -> dict:
        return {
            "min_lat": self.min_lat,
            "max_lat": self.max_lat,
            "min_lon": self.min_lon,
            "max_lon": self.max_lon,
        }


@dataclass(frozen=True)
class ViewportTransform:
    """
    Affine lon/lat -> x/y mapping for a fixed bounding box.

    A zero-extent axis gets scale 0, pinning every point to the padding
    line of that axis (x = padding, y = height - padding).
    """
    bounds: GeoBounds
    scale_x: float
    scale_y: float
    width: float
    height: float
    padding: float

    def apply(self, lon: float, lat: float) -> Tuple[float, float]:
        x = (lon - self.bounds.min_lon) * self.scale_x + self.padding
        y = self.height - ((lat - self.bounds.min_lat) * self.scale_y + self.padding)
        return float(x), float(y)

    def apply_position(self, position: Union[InterpolatedPosition, GeoPoint]) -> Tuple[float, float]:
        return self.apply(position.longitude, position.latitude)

    def apply_arrays(self, lons: np.ndarray, lats: np.ndarray) -> np.ndarray:
        """Project coordinate arrays, returning an (N, 2) array of x, y"""
        lons = np.asarray(lons, dtype=float)
        lats = np.asarray(lats, dtype=float)
        xs = (lons - self.bounds.min_lon) * self.scale_x + self.padding
        ys = self.height - ((lats - self.bounds.min_lat) * self.scale_y + self.padding)
        return np.column_stack((xs, ys))

    def apply_points(self, points: PointsLike) -> np.ndarray:
        lats, lons = _coordinate_arrays(points)
        return self.apply_arrays(lons, lats)

    def path_data(self, points: PointsLike) -> str:
        """SVG path 'd' attribute ("M x y L x y ...") for the points"""
        coords = self.apply_points(points)
        return " ".join(
            f"{'M' if i == 0 else 'L'} {x:.2f} {y:.2f}"
            for i, (x, y) in enumerate(coords)
        )


def _coordinate_arrays(points: PointsLike) -> Tuple[np.ndarray, np.ndarray]:
    pts = points.points if isinstance(points, Track) else tuple(points)
    lats = np.fromiter((p.latitude for p in pts), dtype=float, count=len(pts))
    lons = np.fromiter((p.longitude for p in pts), dtype=float, count=len(pts))
    return lats, lons


def compute_bounds(points: PointsLike) -> GeoBounds:
    """
    Lat/lon bounding box of a point sequence.

    Raises:
        InvalidArgumentError: if there are no points
    """
    lats, lons = _coordinate_arrays(points)
    if len(lats) == 0:
        raise InvalidArgumentError("Cannot compute bounds of an empty point sequence")
    return GeoBounds(
        min_lat=float(np.min(lats)),
        max_lat=float(np.max(lats)),
        min_lon=float(np.min(lons)),
        max_lon=float(np.max(lons))
    )


def transform_for_bounds(
    bounds: GeoBounds,
    viewport_width: float,
    viewport_height: float,
    padding_px: float
) -> ViewportTransform:
    lon_range = bounds.max_lon - bounds.min_lon
    lat_range = bounds.max_lat - bounds.min_lat

    available_width = viewport_width - 2 * padding_px
    available_height = viewport_height - 2 * padding_px

    scale_x = available_width / lon_range if lon_range != 0 else 0.0
    scale_y = available_height / lat_range if lat_range != 0 else 0.0

    return ViewportTransform(
        bounds=bounds,
        scale_x=float(scale_x),
        scale_y=float(scale_y),
        width=viewport_width,
        height=viewport_height,
        padding=padding_px
    )


def compute_transform(
    points: PointsLike,
    viewport_width: float,
    viewport_height: float,
    padding_px: float
) -> ViewportTransform:
    """
    Transform that fits one track's bounding box into the padded viewport.

    Each track is scaled independently, so overlaid tracks do not share an
    absolute scale. Use compute_shared_transform for a common frame.

    Raises:
        InvalidArgumentError: if there are no points
    """
    return transform_for_bounds(compute_bounds(points), viewport_width, viewport_height, padding_px)


def compute_shared_transform(
    tracks: Iterable[Track],
    viewport_width: float,
    viewport_height: float,
    padding_px: float
) -> ViewportTransform:
    """
    One transform for several tracks, from the union of their bounding boxes.

    Empty tracks are ignored.

    Raises:
        InvalidArgumentError: if no track has points
    """
    boxes = [compute_bounds(t) for t in tracks if not t.is_empty]
    if not boxes:
        raise InvalidArgumentError("Cannot compute a shared frame without any points")
    bounds = GeoBounds(
        min_lat=min(b.min_lat for b in boxes),
        max_lat=max(b.max_lat for b in boxes),
        min_lon=min(b.min_lon for b in boxes),
        max_lon=max(b.max_lon for b in boxes)
    )
    return transform_for_bounds(bounds, viewport_width, viewport_height, padding_px)
