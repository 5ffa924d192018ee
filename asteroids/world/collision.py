"""Circle overlap tests and the asteroid split rule."""
from __future__ import annotations

import math
import random

from asteroids.world.entities import SpaceObject, make_asteroid

MIN_SPLIT_SIZE = 4
FRAGMENT_COUNT = 2
FRAGMENT_SPEED = 10.0
HIT_SCORE = 100


def overlaps(cx: float, cy: float, radius: float, px: float, py: float) -> bool:
    """Return True when the point lies strictly inside the circle."""

    return math.hypot(px - cx, py - cy) < radius


def fragment(asteroid: SpaceObject, rng: random.Random) -> list[SpaceObject]:
    """Return the children produced by shooting ``asteroid``.

    Asteroids at or below the minimum size break up without children.
    """

    if asteroid.size <= MIN_SPLIT_SIZE:
        return []
    child_size = asteroid.size >> 1
    children: list[SpaceObject] = []
    for _ in range(FRAGMENT_COUNT):
        theta = rng.random() * 2.0 * math.pi
        children.append(
            make_asteroid(
                asteroid.x,
                asteroid.y,
                FRAGMENT_SPEED * math.sin(theta),
                FRAGMENT_SPEED * math.cos(theta),
                size=child_size,
            )
        )
    return children


__all__ = ["FRAGMENT_COUNT", "FRAGMENT_SPEED", "HIT_SCORE", "MIN_SPLIT_SIZE", "fragment", "overlaps"]
