"""Turns world entities into wireframe draw calls on a canvas."""
from __future__ import annotations

from typing import Sequence

from pygame.math import Vector2

from asteroids.math.geometry import Point, closed_polygon_segments, transform_polygon
from asteroids.render.canvas import COLORS, Canvas, Color
from asteroids.world.entities import SpaceObject
from asteroids.world.models import ModelSet

SCORE_POSITION = (2, 2)


def draw_closed_polygon(canvas: Canvas, points: Sequence[Vector2], color: Color) -> None:
    for start, end in closed_polygon_segments(points):
        canvas.draw_line(int(start.x), int(start.y), int(end.x), int(end.y), color)


def draw_wireframe_model(
    canvas: Canvas,
    model: Sequence[Point],
    x: float,
    y: float,
    angle: float = 0.0,
    scale: float = 1.0,
    color: Color = COLORS["ship"],
) -> None:
    draw_closed_polygon(canvas, transform_polygon(model, x, y, angle, scale), color)


class WireframeRenderer:
    """Read-only view of the world that draws it onto a canvas."""

    def __init__(self, canvas: Canvas, models: ModelSet) -> None:
        self.canvas = canvas
        self.models = models

    def clear(self) -> None:
        self.canvas.fill(COLORS["bg"])

    def draw_ship(self, ship: SpaceObject) -> None:
        draw_wireframe_model(self.canvas, self.models.ship, ship.x, ship.y, ship.angle, 1.0, COLORS["ship"])

    def draw_asteroid(self, asteroid: SpaceObject) -> None:
        draw_wireframe_model(
            self.canvas,
            self.models.asteroid,
            asteroid.x,
            asteroid.y,
            asteroid.angle,
            float(asteroid.size),
            COLORS["asteroid"],
        )

    def draw_bullet(self, bullet: SpaceObject) -> None:
        self.canvas.draw_point(bullet.x, bullet.y, COLORS["bullet"])

    def draw_score(self, score: int) -> None:
        x, y = SCORE_POSITION
        self.canvas.draw_text(x, y, f"SCORE:{score}", COLORS["ui"])


__all__ = ["SCORE_POSITION", "WireframeRenderer", "draw_closed_polygon", "draw_wireframe_model"]
