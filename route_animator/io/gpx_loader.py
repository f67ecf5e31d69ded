"""
GPX file loading.

Turns GPX track points into a Track. Point order is preserved and nothing is
validated beyond what gpxpy requires to parse the document.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import gpxpy
import gpxpy.gpx

from ..errors import TrackLoadError
from ..tracks.models import GeoPoint, Track, new_track_id, random_track_color

logger = logging.getLogger(__name__)

# Spacing used when a file carries no (or incomplete) timestamps
FALLBACK_POINT_INTERVAL_MS = 1000


def _collect_points(gpx: gpxpy.gpx.GPX) -> List[gpxpy.gpx.GPXTrackPoint]:
    points = []
    for track in gpx.tracks:
        for segment in track.segments:
            points.extend(segment.points)
    return points


def _time_offsets(raw_points: List[gpxpy.gpx.GPXTrackPoint]) -> List[int]:
    if raw_points and all(p.time is not None for p in raw_points):
        start = raw_points[0].time
        return [int(round((p.time - start).total_seconds() * 1000)) for p in raw_points]
    return [i * FALLBACK_POINT_INTERVAL_MS for i in range(len(raw_points))]


def parse_gpx(
    content: str,
    name: str,
    color: Optional[str] = None,
    track_id: Optional[str] = None,
    source: str = "<string>"
) -> Track:
    """
    Parse GPX text into a Track.

    Args:
        content: GPX XML document
        name: Display name for the track
        color: Display color (random hue if omitted)
        track_id: Identifier (generated if omitted)
        source: Label used in error messages

    Returns:
        Track with one GeoPoint per <trkpt>

    Raises:
        TrackLoadError: if the document cannot be parsed or its timestamps mix
            timezone-aware and naive values
    """
    try:
        gpx = gpxpy.parse(content)
    except gpxpy.gpx.GPXException as e:
        raise TrackLoadError(source, str(e)) from e

    raw_points = _collect_points(gpx)
    try:
        offsets = _time_offsets(raw_points)
    except TypeError as e:
        # mixing timezone-aware and naive timestamps
        raise TrackLoadError(source, f"inconsistent timestamps: {e}") from e

    points = [
        GeoPoint(
            latitude=float(p.latitude),
            longitude=float(p.longitude),
            elevation_m=float(p.elevation) if p.elevation is not None else 0.0,
            time_offset_ms=offset
        )
        for p, offset in zip(raw_points, offsets)
    ]

    if not points:
        logger.warning(f"No track points found in {source}")

    return Track(
        id=track_id or new_track_id(),
        name=name,
        color=color or random_track_color(),
        points=tuple(points)
    )


def load_gpx_file(path: Union[str, Path], color: Optional[str] = None) -> Track:
    """Load a .gpx file, naming the track after the file"""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise TrackLoadError(str(path), str(e)) from e

    name = path.name[:-4] if path.name.lower().endswith(".gpx") else path.name
    track = parse_gpx(content, name=name, color=color, source=str(path))
    logger.info(f"Loaded {track.point_count} points from {path.name}")
    return track


def load_gpx_files(
    paths: List[Union[str, Path]],
    allowed_extensions: Optional[Iterable[str]] = None
) -> List[Track]:
    """
    Load several files; a file that fails is logged and skipped.

    Args:
        paths: Files to load, in display order
        allowed_extensions: Suffixes to accept, such as ".gpx" (all when omitted)
    """
    allowed = {ext.lower() for ext in allowed_extensions} if allowed_extensions is not None else None
    tracks = []
    for path in paths:
        suffix = Path(path).suffix.lower()
        if allowed is not None and suffix not in allowed:
            logger.warning(f"Skipping {path}: extension {suffix or '(none)'} not in {sorted(allowed)}")
            continue
        try:
            tracks.append(load_gpx_file(path))
        except TrackLoadError as e:
            logger.error(str(e))
    return tracks
