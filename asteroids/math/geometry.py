"""2D transform helpers for wireframe models on a toroidal field."""
from __future__ import annotations

import math
from typing import Iterator, Sequence, Tuple

from pygame.math import Vector2

Point = Tuple[float, float]


def wrap(pos: float, extent: float) -> float:
    """Fold ``pos`` back onto ``[0, extent)`` after crossing one edge."""

    if pos < 0.0:
        pos += extent
    if pos >= extent:
        pos -= extent
    return pos


def wrap_position(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    return wrap(x, width), wrap(y, height)


def transform_polygon(
    template: Sequence[Point],
    x: float,
    y: float,
    angle: float = 0.0,
    scale: float = 1.0,
) -> list[Vector2]:
    """Rotate, scale, then translate every template vertex.

    The template is never modified; a new list is produced on every call.
    """

    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    points: list[Vector2] = []
    for vx, vy in template:
        rx = vx * cos_a - vy * sin_a
        ry = vx * sin_a + vy * cos_a
        points.append(Vector2(rx * scale + x, ry * scale + y))
    return points


def closed_polygon_segments(points: Sequence[Vector2]) -> Iterator[tuple[Vector2, Vector2]]:
    """Yield ``N + 1`` segments that close the loop through ``points``."""

    count = len(points)
    if count == 0:
        return
    for index in range(count + 1):
        yield points[index % count], points[(index + 1) % count]


__all__ = ["Point", "closed_polygon_segments", "transform_polygon", "wrap", "wrap_position"]
