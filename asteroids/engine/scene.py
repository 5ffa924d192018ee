"""Per-frame callback contract between the host loop and a game scene."""
from __future__ import annotations

import pygame


class Scene:
    """Initialised once by the host, then driven once per rendered frame."""

    def __init__(self) -> None:
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    def start(self, **context) -> None:
        if self._started:
            raise RuntimeError(f"{type(self).__name__} is already running")
        self.on_create(**context)
        self._started = True

    def on_create(self, **context) -> None:  # pragma: no cover - hook
        pass

    def handle_event(self, event: pygame.event.Event) -> None:
        pass

    def frame(self, dt: float) -> bool:
        """Run one update; returns False once the scene wants the loop to stop."""

        if not self._started:
            raise RuntimeError(f"{type(self).__name__} must be started before updating")
        return self.update(dt)

    def update(self, dt: float) -> bool:
        return True

    def render(self, surface: pygame.Surface) -> None:
        pass


__all__ = ["Scene"]
