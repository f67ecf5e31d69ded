"""
Animation session tying tracks, playback and projection together
"""

from .session import Animator

__all__ = ['Animator']
