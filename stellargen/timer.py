"""Frame pacing at a fixed frame rate."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class Timer:
    """Sleeps so that successive frames are at least one frame time apart."""

    def __init__(self, fps: float) -> None:
        self._last_frame = time.perf_counter()
        self.fps = fps
        logger.debug("Timer created")

    @property
    def fps(self) -> float:
        """Target frames per second."""
        return self._fps

    @fps.setter
    def fps(self, fps: float) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self._fps = fps
        self._delta_time = 1000.0 / fps

    @property
    def delta_time(self) -> float:
        """Target frame time in milliseconds."""
        return self._delta_time

    def wait(self) -> None:
        """Sleep for what remains of the frame time since the last call."""
        current = time.perf_counter()
        elapsed_ms = (current - self._last_frame) * 1000.0
        if elapsed_ms < self._delta_time:
            time.sleep((self._delta_time - elapsed_ms) / 1000.0)
        self._last_frame = current