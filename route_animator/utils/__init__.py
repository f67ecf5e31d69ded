from .time_format import format_time

__all__ = ['format_time']
