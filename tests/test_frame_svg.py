"""
Tests for SVG frame rendering
"""

import pytest

from route_animator.animation.session import Animator
from route_animator.config.config import TestConfig
from route_animator.visualization.frame_svg import FrameRenderer, FrameStyle


@pytest.fixture
def frame():
    animator = Animator(config=TestConfig)
    animator.load_samples()
    animator.seek(1500)
    return animator.frame()


@pytest.fixture
def renderer():
    return FrameRenderer()


class TestFrameStyle:

    def test_default_style(self):
        """Test default marker and path settings"""
        style = FrameStyle()
        assert style.marker_radius == 6
        assert style.dash_pattern == "5,5"
        assert style.show_grid


class TestFrameRenderer:

    def test_render_svg_basic(self, renderer, frame):
        """Test output is a complete SVG document"""
        svg = renderer.render_svg(frame)
        assert svg.startswith('<svg')
        assert svg.endswith('</svg>')
        assert 'viewBox="0 0 600 300"' in svg

    def test_two_paths_and_marker_per_track(self, renderer, frame):
        svg = renderer.render_svg(frame)
        assert svg.count('<g class="track"') == 2
        assert svg.count('stroke-dasharray="5,5"') == 2
        assert svg.count('<circle') == 2

    def test_track_colors_used(self, renderer, frame):
        svg = renderer.render_svg(frame)
        assert 'stroke="#FF6B6B"' in svg
        assert 'fill="#4ECDC4"' in svg

    def test_marker_coordinates(self, renderer, frame):
        """Test the circle is drawn at the projected position"""
        svg = renderer.render_svg(frame)
        x, y = frame.tracks[0].marker
        assert f'cx="{x:.2f}" cy="{y:.2f}"' in svg

    def test_path_data_embedded(self, renderer, frame):
        svg = renderer.render_svg(frame)
        assert frame.tracks[0].path_data in svg

    def test_grid_toggle(self, frame):
        assert 'pattern id="grid"' in FrameRenderer().render_svg(frame)
        assert 'pattern id="grid"' not in FrameRenderer(FrameStyle(show_grid=False)).render_svg(frame)

    def test_time_label(self, renderer, frame):
        assert "00:00:01 / 00:00:04" in renderer.render_svg(frame)

    def test_title_escaped(self, renderer, frame):
        svg = renderer.render_svg(frame, title="Ride <1>")
        assert "Ride &lt;1&gt;" in svg

    def test_empty_frame(self, renderer):
        """Test a frame without tracks still renders a background"""
        frame = Animator(config=TestConfig).frame()
        svg = renderer.render_svg(frame)
        assert '<circle' not in svg
        assert '</svg>' in svg

    def test_save_svg(self, renderer, frame, tmp_path):
        path = renderer.save_svg(str(tmp_path / "frame.svg"), frame)
        assert path.exists()
        assert path.read_text().startswith('<svg')
