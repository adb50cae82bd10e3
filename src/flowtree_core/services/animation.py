"""
Animation controller for FlowTree.

Drives the fixed-length drill-in transition. Progress is a pure function
of (elapsed, duration); the controller only counts frames.
"""

import logging
from typing import Optional

from ..domain.models import AnimationFrame, IDLE_FRAME
from ..domain.settings import AnimationSettings

logger = logging.getLogger(__name__)


def frame_at(elapsed: float, duration: float, grow: float = 0.7) -> AnimationFrame:
    """
    Interpolate the drill-in transition.

    With ``t = elapsed / duration``: the pivot scales ``1 + grow*t`` and fades
    ``1 - t``; children scale and fade in with ``t``. At ``t >= 1`` every
    value snaps to its terminal value of 1.

    Raises:
        ValueError: If duration is not positive
    """
    if duration <= 0:
        raise ValueError(f"duration must be positive, got {duration}")

    t = max(0.0, elapsed / duration)
    if t >= 1.0:
        return AnimationFrame(scale=1.0, fade=1.0, children_scale=1.0,
                              children_fade=1.0, finished=True)
    return AnimationFrame(
        scale=1.0 + grow * t,
        fade=1.0 - t,
        children_scale=t,
        children_fade=t,
        finished=False,
    )


class AnimationController:
    """
    Frame counter for one drill-in at a time.

    ``start()`` resets progress to zero (restarting any transition already in
    flight); ``advance()`` is called once per display frame.
    """

    def __init__(self, settings: Optional[AnimationSettings] = None):
        self._settings = settings or AnimationSettings()
        self._frame = 0
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def frame_index(self) -> int:
        return self._frame

    @property
    def total_frames(self) -> int:
        return self._settings.total_frames

    @property
    def current(self) -> AnimationFrame:
        """Frame to draw now (idle values when nothing is running)."""
        if not self._active:
            return IDLE_FRAME
        return frame_at(self._frame, self._settings.total_frames, self._settings.grow)

    def start(self) -> None:
        if self._active:
            logger.debug(f"Restarting animation at frame {self._frame}")
        self._frame = 0
        self._active = True

    def stop(self) -> None:
        self._frame = 0
        self._active = False

    def advance(self) -> AnimationFrame:
        """
        Step one frame.

        Returns:
            The new frame; ``finished`` is True on the last step, after
            which the controller is idle.
        """
        if not self._active:
            return IDLE_FRAME
        self._frame += 1
        frame = frame_at(self._frame, self._settings.total_frames, self._settings.grow)
        if frame.finished:
            self._active = False
            self._frame = 0
        return frame
