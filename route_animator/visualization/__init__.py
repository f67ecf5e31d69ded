"""
Visualization module for track animation
Contains the viewport projection, frame geometry and SVG frame rendering
"""

from .projection import (
    Viewport,
    GeoBounds,
    ViewportTransform,
    compute_bounds,
    compute_transform,
    compute_shared_transform,
)
from .frames import AnimationFrame, TrackFrame
from .frame_svg import FrameRenderer, FrameStyle

__all__ = [
    'Viewport',
    'GeoBounds',
    'ViewportTransform',
    'compute_bounds',
    'compute_transform',
    'compute_shared_transform',
    'AnimationFrame',
    'TrackFrame',
    'FrameRenderer',
    'FrameStyle',
]
