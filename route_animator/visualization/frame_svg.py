"""
Animation Frame Rendering
Draws projected track paths and current-position markers as SVG.

One SVG document per AnimationFrame; the renderer only formats geometry the
projection layer already computed.
"""

from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import Optional

from ..utils.time_format import format_time
from .frames import AnimationFrame, TrackFrame


@dataclass
class FrameStyle:
    """Configuration for frame rendering"""
    background_color: str = "#ecfdf5"
    grid_color: str = "#e5e7eb"
    grid_size: int = 20
    path_width: float = 2
    path_opacity: float = 0.5
    dashed_width: float = 3
    dashed_opacity: float = 0.8
    dash_pattern: str = "5,5"
    marker_radius: float = 6
    marker_stroke: str = "white"
    marker_stroke_width: float = 2
    label_color: str = "#4b5563"
    show_grid: bool = True
    show_time_label: bool = True


class FrameRenderer:
    """
    Renders AnimationFrames to SVG.

    Each track gets a faint full path, a dashed overlay of the same path and
    a circle at its interpolated position.
    """

    def __init__(self, style: FrameStyle = None):
        self.style = style or FrameStyle()

    def render_svg(self, frame: AnimationFrame, title: Optional[str] = None) -> str:
        """
        Render a frame as SVG.

        Args:
            frame: Projected frame geometry
            title: Optional caption drawn in the top-left corner

        Returns:
            SVG string
        """
        width = frame.viewport.width
        height = frame.viewport.height

        svg = self._build_svg_header(width, height)
        svg += f'<rect width="{width}" height="{height}" fill="{self.style.background_color}"/>\n'

        if self.style.show_grid:
            svg += self._build_grid(width, height)

        for track_frame in frame.tracks:
            svg += self._build_track(track_frame)

        if self.style.show_time_label:
            svg += self._build_time_label(frame)

        if title:
            svg += self._build_title(title)

        svg += '</svg>'
        return svg

    def save_svg(self, filepath: str, frame: AnimationFrame, title: Optional[str] = None) -> Path:
        """Save frame as SVG file"""
        path = Path(filepath)
        path.write_text(self.render_svg(frame, title))
        return path

    def _build_svg_header(self, width: float, height: float) -> str:
        return f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
'''

    def _build_grid(self, width: float, height: float) -> str:
        size = self.style.grid_size
        return f'''<defs>
    <pattern id="grid" width="{size}" height="{size}" patternUnits="userSpaceOnUse">
        <path d="M {size} 0 L 0 0 0 {size}" fill="none" stroke="{self.style.grid_color}" stroke-width="1"/>
    </pattern>
</defs>
<rect width="{width}" height="{height}" fill="url(#grid)"/>
'''

    def _build_track(self, track_frame: TrackFrame) -> str:
        color = escape(track_frame.color, quote=True)
        svg = f'<g class="track" data-track-id="{escape(track_frame.track_id, quote=True)}">\n'

        if track_frame.path_data:
            svg += (
                f'<path d="{track_frame.path_data}" stroke="{color}" '
                f'stroke-width="{self.style.path_width}" fill="none" opacity="{self.style.path_opacity}"/>\n'
            )
            svg += (
                f'<path d="{track_frame.path_data}" stroke="{color}" '
                f'stroke-width="{self.style.dashed_width}" fill="none" '
                f'stroke-dasharray="{self.style.dash_pattern}" opacity="{self.style.dashed_opacity}"/>\n'
            )

        x, y = track_frame.marker
        svg += (
            f'<circle cx="{x:.2f}" cy="{y:.2f}" r="{self.style.marker_radius}" fill="{color}" '
            f'stroke="{self.style.marker_stroke}" stroke-width="{self.style.marker_stroke_width}"/>\n'
        )
        svg += '</g>\n'
        return svg

    def _build_time_label(self, frame: AnimationFrame) -> str:
        x = frame.viewport.width - 10
        y = frame.viewport.height - 10
        text = f"{format_time(frame.time_ms)} / {format_time(frame.max_duration_ms)}"
        return f'<text x="{x}" y="{y}" text-anchor="end" fill="{self.style.label_color}" font-size="11" font-family="sans-serif">{text}</text>\n'

    def _build_title(self, title: str) -> str:
        return f'<text x="10" y="20" fill="{self.style.label_color}" font-size="14" font-weight="bold" font-family="sans-serif">{escape(title)}</text>\n'
