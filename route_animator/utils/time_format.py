"""
Time display helpers
"""


def format_time(ms: float) -> str:
    """Format a millisecond offset as HH:MM:SS (floored to whole seconds)"""
    seconds = int(ms // 1000)
    minutes = seconds // 60
    hours = minutes // 60
    return f"{hours:02d}:{minutes % 60:02d}:{seconds % 60:02d}"
