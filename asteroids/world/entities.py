"""Plain data records for the ship, asteroids and bullets."""
from __future__ import annotations

import math
from dataclasses import dataclass

from asteroids.math.geometry import wrap_position

ASTEROID_START_SIZE = 16
BULLET_SPEED = 50.0


@dataclass
class SpaceObject:
    """Anything that moves across the field."""

    x: float
    y: float
    dirx: float = 0.0
    diry: float = 0.0
    size: int = 0
    angle: float = 0.0
    alive: bool = True

    def integrate(self, dt: float, width: float, height: float) -> None:
        self.x += self.dirx * dt
        self.y += self.diry * dt
        self.x, self.y = wrap_position(self.x, self.y, width, height)

    def kill(self) -> None:
        self.alive = False


def make_player(x: float, y: float) -> SpaceObject:
    return SpaceObject(x=x, y=y)


def make_asteroid(x: float, y: float, dirx: float, diry: float, size: int = ASTEROID_START_SIZE) -> SpaceObject:
    return SpaceObject(x=x, y=y, dirx=dirx, diry=diry, size=size)


def make_bullet(player: SpaceObject, speed: float = BULLET_SPEED) -> SpaceObject:
    """Spawn a bullet at the ship travelling along its facing."""

    return SpaceObject(
        x=player.x,
        y=player.y,
        dirx=speed * math.sin(player.angle),
        diry=-speed * math.cos(player.angle),
    )


__all__ = [
    "ASTEROID_START_SIZE",
    "BULLET_SPEED",
    "SpaceObject",
    "make_asteroid",
    "make_bullet",
    "make_player",
]
