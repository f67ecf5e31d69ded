from .config import Config, DevelopmentConfig, TestConfig, get_config

__all__ = ['Config', 'DevelopmentConfig', 'TestConfig', 'get_config']
