"""Pixel-grid drawing surface with toroidal wrapping."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

import pygame

from asteroids.math.geometry import wrap_position

Color = Tuple[int, int, int]

COLORS: dict[str, Color] = {
    "bg": (0, 0, 0),
    "ship": (255, 255, 255),
    "asteroid": (255, 0, 0),
    "bullet": (255, 255, 255),
    "ui": (255, 255, 255),
}

TEXT_SIZE = 10


class Canvas(Protocol):
    """Drawing primitives the renderer needs from the host."""

    width: int
    height: int

    def fill(self, color: Color) -> None:
        ...

    def draw_point(self, x: float, y: float, color: Color) -> None:
        ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        ...

    def draw_text(self, x: int, y: int, text: str, color: Color) -> None:
        ...


def _wrap_shifts(low: float, high: float, extent: int) -> tuple[int, ...]:
    shifts = [0]
    if low < 0:
        shifts.append(extent)
    if high >= extent:
        shifts.append(-extent)
    return tuple(shifts)


class PygameCanvas:
    """Canvas backed by a field-sized pygame surface."""

    def __init__(self, surface: pygame.Surface, font: Optional[pygame.font.Font] = None) -> None:
        self.surface = surface
        self.width, self.height = surface.get_size()
        self._font = font

    @classmethod
    def create(cls, width: int, height: int) -> "PygameCanvas":
        return cls(pygame.Surface((width, height)))

    def fill(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_point(self, x: float, y: float, color: Color) -> None:
        wx, wy = wrap_position(int(x), int(y), self.width, self.height)
        if 0 <= wx < self.width and 0 <= wy < self.height:
            self.surface.set_at((int(wx), int(wy)), color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        # A segment crossing an edge is drawn again shifted by one field extent
        # so the part outside the grid reappears on the opposite side.
        for dx in _wrap_shifts(min(x0, x1), max(x0, x1), self.width):
            for dy in _wrap_shifts(min(y0, y1), max(y0, y1), self.height):
                pygame.draw.line(self.surface, color, (x0 + dx, y0 + dy), (x1 + dx, y1 + dy))

    def draw_text(self, x: int, y: int, text: str, color: Color) -> None:
        font = self._get_font()
        if font is None:
            return
        self.surface.blit(font.render(text, False, color), (x, y))

    def _get_font(self) -> Optional[pygame.font.Font]:
        if self._font is None and pygame.font.get_init():
            self._font = pygame.font.Font(None, TEXT_SIZE)
        return self._font

    def present(self, target: pygame.Surface) -> None:
        """Scale the pixel grid up onto the window surface."""

        if target.get_size() == self.surface.get_size():
            target.blit(self.surface, (0, 0))
            return
        target.blit(pygame.transform.scale(self.surface, target.get_size()), (0, 0))


__all__ = ["COLORS", "Canvas", "Color", "PygameCanvas", "TEXT_SIZE"]
