"""Live playback of animations against caller-supplied clock time."""

from .playback import Playback
from .group import PlaybackGroup

__all__ = ['Playback', 'PlaybackGroup']
