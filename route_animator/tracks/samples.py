"""
Built-in sample routes, registered when no files have been loaded.
"""

from typing import List

from .models import GeoPoint, Track

# (name, color, [(lat, lon, time_ms, elevation_m), ...])
SAMPLE_ROUTES = [
    (
        "Morning Ride",
        "#FF6B6B",
        [
            (40.7128, -74.0060, 0, 10),
            (40.7138, -74.0050, 1000, 12),
            (40.7148, -74.0040, 2000, 15),
            (40.7158, -74.0030, 3000, 18),
            (40.7168, -74.0020, 4000, 20),
        ],
    ),
    (
        "Evening Route",
        "#4ECDC4",
        [
            (40.7108, -74.0080, 0, 8),
            (40.7118, -74.0070, 1200, 10),
            (40.7128, -74.0060, 2400, 12),
            (40.7138, -74.0050, 3600, 14),
            (40.7148, -74.0040, 4800, 16),
        ],
    ),
]


def sample_tracks() -> List[Track]:
    """Fresh Track instances for the sample routes, ids "sample-1", "sample-2", ..."""
    tracks = []
    for i, (name, color, rows) in enumerate(SAMPLE_ROUTES, start=1):
        points = [
            GeoPoint(latitude=lat, longitude=lon, elevation_m=float(ele), time_offset_ms=t)
            for lat, lon, t, ele in rows
        ]
        tracks.append(Track(id=f"sample-{i}", name=name, color=color, points=tuple(points)))
    return tracks
