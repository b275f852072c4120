"""
Tick driver that paces a SearchEngine for visualization.

The engine itself has no notion of time. This driver calls step() once per
frame, waits frame_delay / speed milliseconds between frames, and stops as
soon as the run finishes or cancel() is requested.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import TYPE_CHECKING, Callable

from graphalgo.config import DEFAULT_FRAME_DELAY_MS, SPEED_OPTIONS

if TYPE_CHECKING:
    from graphalgo.search.engine import SearchEngine
    from graphalgo.search.state import SearchResult, SearchStep

logger = logging.getLogger(__name__)


class TickDriver:
    """
    Drives an already-started engine one frame at a time.

    cancel() may be called from another thread or a signal handler; the
    loop notices before its next tick and cancels the engine run.
    """

    def __init__(
        self,
        engine: SearchEngine,
        frame_delay_ms: float = DEFAULT_FRAME_DELAY_MS,
        speed: float = 1.0,
        on_step: Callable[[SearchStep], None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the driver.

        Args:
            engine: Engine to drive (start() it before run())
            frame_delay_ms: Delay between frames at speed 1
            speed: Playback speed multiplier
            on_step: Called with each step record after it happens
            sleep: Sleep function taking seconds (injectable for tests)
        """
        if frame_delay_ms < 0:
            raise ValueError(f"Frame delay must be >= 0, got {frame_delay_ms}")
        self._engine = engine
        self._frame_delay_ms = frame_delay_ms
        self.speed = speed
        self._on_step = on_step
        self._sleep = sleep
        self._cancelled = threading.Event()

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"Speed must be positive, got {value}")
        self._speed = value

    @property
    def frame_interval_s(self) -> float:
        """Seconds to wait between frames at the current speed."""
        return self._frame_delay_ms / self._speed / 1000

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def _speed_index(self) -> int:
        return min(
            range(len(SPEED_OPTIONS)),
            key=lambda i: abs(SPEED_OPTIONS[i] - self._speed),
        )

    def change_speed(self, delta: int) -> float:
        """Move delta places along the speed ladder, clamped to its ends."""
        index = min(max(self._speed_index() + delta, 0), len(SPEED_OPTIONS) - 1)
        self._speed = SPEED_OPTIONS[index]
        logger.debug(f"Speed set to {self._speed}x")
        return self._speed

    def speed_up(self) -> float:
        return self.change_speed(1)

    def slow_down(self) -> float:
        return self.change_speed(-1)

    def cancel(self) -> None:
        """Request the run to stop before the next frame."""
        self._cancelled.set()

    def tick(self) -> SearchStep | None:
        """Advance one frame. Returns None once the run is over or cancelled."""
        if self.cancelled or not self._engine.is_running:
            return None
        step = self._engine.step()
        if self._on_step is not None:
            self._on_step(step)
        return step

    def run(self) -> SearchResult | None:
        """
        Tick until the engine finishes or cancel() is called.

        Returns:
            The finished run's result, or None if it was cancelled
        """
        self._cancelled.clear()
        while self.tick() is not None:
            if not self._engine.is_running:
                break
            self._sleep(self.frame_interval_s)

        if self.cancelled:
            self._engine.cancel()
            return None
        return self._engine.result()
