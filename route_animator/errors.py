"""
Exceptions raised by the route animator core.
"""


class InvalidArgumentError(ValueError):
    """Bad input to a core operation (empty track, non-positive speed, ...)"""


class TrackLoadError(ValueError):
    """A track file could not be turned into a Track"""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load track from {source}: {reason}")
