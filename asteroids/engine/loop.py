"""Variable timestep game loop."""
from __future__ import annotations

import time
from typing import Callable

MIN_FRAME_TIME = 1e-4


class FrameLoop:
    """Runs one update per rendered frame with the measured elapsed time."""

    def __init__(
        self,
        update: Callable[[float], bool],
        process_events: Callable[[], None],
        max_frame_time: float = 0.25,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.update = update
        self.process_events = process_events
        self.max_frame_time = max_frame_time
        self._clock = clock
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def clamp(self, frame_time: float) -> float:
        if frame_time > self.max_frame_time:
            return self.max_frame_time
        return max(MIN_FRAME_TIME, frame_time)

    def run(self) -> None:
        self._running = True
        last_time = self._clock()
        while self._running:
            now = self._clock()
            frame_time = self.clamp(now - last_time)
            last_time = now
            self.process_events()
            if not self._running:
                break
            if not self.update(frame_time):
                self._running = False


__all__ = ["FrameLoop", "MIN_FRAME_TIME"]
