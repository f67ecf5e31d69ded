"""
Configuration module for Route Animator
Environment-based configuration with per-environment overrides
"""

import os
from pathlib import Path
from typing import Optional

from ..visualization.projection import Viewport

PROJECT_ROOT = Path(__file__).resolve().parents[2]  # go up two levels from route_animator/config
DATA_ROOT = PROJECT_ROOT / "data"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Main configuration class with environment variable overrides"""

    # Viewport the tracks are projected into
    VIEWPORT_WIDTH = int(os.getenv('VIEWPORT_WIDTH', 600))
    VIEWPORT_HEIGHT = int(os.getenv('VIEWPORT_HEIGHT', 300))
    VIEWPORT_PADDING = int(os.getenv('VIEWPORT_PADDING', 50))

    # Overlay all tracks in one geographic frame instead of fitting each track
    SHARED_FRAME = _env_bool('SHARED_FRAME', 'false')

    # Playback
    TICK_INTERVAL_MS = int(os.getenv('TICK_INTERVAL_MS', 100))
    DEFAULT_SPEED = float(os.getenv('DEFAULT_SPEED', 1.0))
    MIN_SPEED = float(os.getenv('MIN_SPEED', 0.1))
    MAX_SPEED = float(os.getenv('MAX_SPEED', 5.0))

    # Track sources
    LOAD_SAMPLES = _env_bool('LOAD_SAMPLES', 'true')
    ALLOWED_EXTENSIONS = {'.gpx'}

    # Output
    OUTPUT_DIR = os.getenv('OUTPUT_DIR', str(DATA_ROOT / 'frames'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def viewport(cls) -> Viewport:
        return Viewport(
            width=cls.VIEWPORT_WIDTH,
            height=cls.VIEWPORT_HEIGHT,
            padding=cls.VIEWPORT_PADDING
        )

    @classmethod
    def init_app(cls):
        """Create output directories"""
        Path(cls.OUTPUT_DIR).mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_output_path(cls, filename: str) -> Path:
        """Get full path for a file in the output directory"""
        return Path(cls.OUTPUT_DIR) / filename


class DevelopmentConfig(Config):
    """Development-specific configuration"""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')


class TestConfig(Config):
    """Test-specific configuration"""
    VIEWPORT_WIDTH = 600
    VIEWPORT_HEIGHT = 300
    VIEWPORT_PADDING = 50
    SHARED_FRAME = False
    DEFAULT_SPEED = 1.0
    LOAD_SAMPLES = False
    OUTPUT_DIR = '/tmp/route_animator_test_frames'


# Configuration selection
config_map = {
    'development': DevelopmentConfig,
    'testing': TestConfig,
    'default': Config
}


def get_config(config_name: Optional[str] = None) -> Config:
    """Get configuration class based on environment"""
    if config_name is None:
        config_name = os.getenv('ANIMATOR_ENV', 'default')

    return config_map.get(config_name, Config)
