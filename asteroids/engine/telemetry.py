"""Lightweight runtime telemetry for the collision pass."""
from __future__ import annotations

from dataclasses import dataclass

from asteroids.engine.logger import ChannelLogger

LOG_INTERVAL = 2.5


@dataclass
class CollisionTelemetrySnapshot:
    frame: int
    asteroids: int
    bullets: int
    tested: int
    hits: int
    fragments: int


@dataclass
class CollisionTelemetry:
    """Aggregates collision statistics per frame."""

    frame: int = -1
    asteroids: int = 0
    bullets: int = 0
    tested: int = 0
    hits: int = 0
    fragments: int = 0
    _log_accumulator: float = 0.0

    def begin_frame(self, frame: int, asteroids: int, bullets: int) -> None:
        if frame != self.frame:
            self.frame = frame
            self.asteroids = asteroids
            self.bullets = bullets
            self.tested = 0
            self.hits = 0
            self.fragments = 0

    def record_tested(self, count: int = 1) -> None:
        self.tested += count

    def record_hit(self, fragments: int) -> None:
        self.hits += 1
        self.fragments += fragments

    def advance_time(self, dt: float, logger: ChannelLogger | None = None) -> None:
        self._log_accumulator += dt
        if self._log_accumulator >= LOG_INTERVAL:
            self._log_accumulator = 0.0
            if logger and logger.enabled:
                logger.info(
                    "Collisions: asteroids=%d bullets=%d tested=%d hits=%d fragments=%d",
                    self.asteroids,
                    self.bullets,
                    self.tested,
                    self.hits,
                    self.fragments,
                )

    def snapshot(self) -> CollisionTelemetrySnapshot:
        return CollisionTelemetrySnapshot(
            frame=self.frame,
            asteroids=self.asteroids,
            bullets=self.bullets,
            tested=self.tested,
            hits=self.hits,
            fragments=self.fragments,
        )


__all__ = ["CollisionTelemetry", "CollisionTelemetrySnapshot", "LOG_INTERVAL"]
