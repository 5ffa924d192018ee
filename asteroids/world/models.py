"""Wireframe outlines shared by every ship and asteroid."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from asteroids.math.geometry import Point

SHIP_MODEL: tuple[Point, ...] = (
    (0.0, -5.0),
    (-2.5, 2.5),
    (2.5, 2.5),
)

ASTEROID_VERTICES = 20
ASTEROID_JAGGEDNESS = (0.8, 1.2)


def build_asteroid_model(
    rng: Optional[random.Random] = None,
    vertices: int = ASTEROID_VERTICES,
) -> tuple[Point, ...]:
    """Lay vertices around a unit circle with a random radius per vertex."""

    rng = rng or random.Random()
    low, high = ASTEROID_JAGGEDNESS
    points: list[Point] = []
    for index in range(vertices):
        radius = rng.uniform(low, high)
        theta = index / vertices * 2.0 * math.pi
        points.append((radius * math.sin(theta), radius * math.cos(theta)))
    return tuple(points)


@dataclass(frozen=True)
class ModelSet:
    ship: tuple[Point, ...]
    asteroid: tuple[Point, ...]

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "ModelSet":
        return cls(ship=SHIP_MODEL, asteroid=build_asteroid_model(rng))


__all__ = ["ASTEROID_JAGGEDNESS", "ASTEROID_VERTICES", "ModelSet", "SHIP_MODEL", "build_asteroid_model"]
