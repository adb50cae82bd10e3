"""
Enumerations for FlowTree domain.
"""

from enum import Enum


class ViewPhase(str, Enum):
    """Which variant of the navigation state is active."""
    AT_ROOT = "at_root"      # Root alone, zoom level 0
    VIEWING = "viewing"      # A layer below the root is displayed
    DRILLING = "drilling"    # Forward animation into a node is running


class NavAction(str, Enum):
    """User-facing controls that map onto navigation transitions."""
    HOME = "home"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    PREVIOUS = "previous"
    NEXT = "next"
