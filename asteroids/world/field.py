"""World simulation container: one session of the asteroids game."""
from __future__ import annotations

import math
import random
from typing import List, Optional, TYPE_CHECKING

from asteroids.engine.input import ShipControls
from asteroids.engine.logger import ChannelLogger, GameLogger
from asteroids.engine.telemetry import CollisionTelemetry
from asteroids.math.geometry import wrap_position
from asteroids.world.collision import HIT_SCORE, fragment, overlaps
from asteroids.world.entities import (
    ASTEROID_START_SIZE,
    SpaceObject,
    make_asteroid,
    make_bullet,
    make_player,
)

if TYPE_CHECKING:  # pragma: no cover - only used for typing
    from asteroids.render.wireframe import WireframeRenderer


TURN_RATE = 5.0
THRUST = 20.0
ASTEROID_SPIN = 0.5
ASTEROID_SPEED = 10.0
WAVE_BONUS = 1000
INITIAL_WAVE = 2
SPAWN_OFFSET_RANGE = (31.0, 40.0)
BULLET_CULL_MARGIN = 1

# Per-asteroid (sin offset, cos offset, velocity sign) applied to the
# player's angle when laying out a wave.
_WAVE_PATTERN: tuple[tuple[float, float, float], ...] = (
    (-math.pi / 2.0, -math.pi / 2.0, 1.0),
    (math.pi / 2.0, math.pi / 2.0, -1.0),
    (-math.pi / 4.0, math.pi / 4.0, 1.0),
    (math.pi / 6.0, -math.pi / 6.0, -1.0),
)
WAVE_SIZES = (2, 3, 4)


def wave_size_for_score(score: int) -> int:
    """Return how many asteroids the next wave holds at ``score``."""

    if score <= 5000:
        return 2
    if score < 10000:
        return 3
    return 4


class AsteroidsWorld:
    def __init__(
        self,
        width: int,
        height: int,
        logger: GameLogger,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.logger = logger
        self.rng = rng or random.Random()
        self.player: SpaceObject = make_player(width / 2.0, height / 2.0)
        self.asteroids: List[SpaceObject] = []
        self.bullets: List[SpaceObject] = []
        self.score = 0
        self.dead = False
        self.frame = 0
        self.waves_cleared = 0
        self.telemetry = CollisionTelemetry()
        self._lifecycle: ChannelLogger = logger.channel("lifecycle")
        self._combat: ChannelLogger = logger.channel("combat")
        self._physics: ChannelLogger = logger.channel("physics")
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.asteroids.clear()
        self.bullets.clear()
        self.player.x = self.width / 2.0
        self.player.y = self.height / 2.0
        self.player.dirx = 0.0
        self.player.diry = 0.0
        self.player.angle = 0.0
        self.spawn_wave(INITIAL_WAVE)
        self.dead = False
        self.score = 0
        self.waves_cleared = 0
        self._lifecycle.info("Game reset: %d asteroids", len(self.asteroids))

    def spawn_wave(self, count: int) -> List[SpaceObject]:
        """Place ``count`` asteroids around the player, fanned out by its facing."""

        if count not in WAVE_SIZES:
            raise ValueError(f"Unsupported wave size {count}; expected one of {WAVE_SIZES}")
        sin_offset = self.rng.uniform(*SPAWN_OFFSET_RANGE)
        cos_offset = self.rng.uniform(*SPAWN_OFFSET_RANGE)
        angle = self.player.angle
        spawned: List[SpaceObject] = []
        for sin_shift, cos_shift, heading in _WAVE_PATTERN[:count]:
            x, y = wrap_position(
                self.player.x + sin_offset * math.sin(angle + sin_shift),
                self.player.y + cos_offset * math.cos(angle + cos_shift),
                self.width,
                self.height,
            )
            asteroid = make_asteroid(
                x,
                y,
                ASTEROID_SPEED * math.sin(heading * angle),
                ASTEROID_SPEED * math.cos(heading * angle),
                size=ASTEROID_START_SIZE,
            )
            spawned.append(asteroid)
        self.asteroids.extend(spawned)
        return spawned

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def step(
        self,
        dt: float,
        controls: ShipControls,
        renderer: Optional["WireframeRenderer"] = None,
    ) -> bool:
        """Advance the game by ``dt`` seconds and draw the frame.

        A collision with the player only raises the death flag; the reset
        happens at the start of the following frame so the fatal frame is
        still drawn.
        """

        if self.dead:
            self.reset()
        self.frame += 1

        if renderer:
            renderer.clear()

        self._update_player(dt, controls)
        if renderer:
            renderer.draw_ship(self.player)
            renderer.draw_score(self.score)

        for asteroid in self.asteroids:
            if overlaps(asteroid.x, asteroid.y, asteroid.size, self.player.x, self.player.y):
                if not self.dead:
                    self._lifecycle.info("Ship destroyed at score %d", self.score)
                self.dead = True

        for asteroid in self.asteroids:
            asteroid.integrate(dt, self.width, self.height)
            asteroid.angle += ASTEROID_SPIN * dt
            if renderer:
                renderer.draw_asteroid(asteroid)

        for bullet in self.bullets:
            bullet.integrate(dt, self.width, self.height)
            if renderer:
                renderer.draw_bullet(bullet)

        fragments = self._resolve_hits()
        self.asteroids.extend(fragments)

        self.bullets[:] = [bullet for bullet in self.bullets if self._bullet_in_play(bullet)]
        self.asteroids[:] = [asteroid for asteroid in self.asteroids if asteroid.alive]

        if not self.asteroids:
            self.score += WAVE_BONUS
            self.waves_cleared += 1
            count = wave_size_for_score(self.score)
            self.spawn_wave(count)
            self._lifecycle.info(
                "Wave %d cleared: score=%d next wave=%d", self.waves_cleared, self.score, count
            )

        self.telemetry.advance_time(dt, self._physics)
        return True

    def _update_player(self, dt: float, controls: ShipControls) -> None:
        player = self.player
        if controls.rotate_left:
            player.angle -= TURN_RATE * dt
        if controls.rotate_right:
            player.angle += TURN_RATE * dt
        if controls.thrust:
            player.dirx += math.sin(player.angle) * THRUST * dt
            player.diry -= math.cos(player.angle) * THRUST * dt
        if controls.fire_released:
            self.bullets.append(make_bullet(player))
        player.integrate(dt, self.width, self.height)

    def _resolve_hits(self) -> List[SpaceObject]:
        """Test every live bullet against every live asteroid.

        Children are returned rather than appended so the asteroid list is not
        modified while it is being scanned.
        """

        self.telemetry.begin_frame(self.frame, len(self.asteroids), len(self.bullets))
        fragments: List[SpaceObject] = []
        for bullet in self.bullets:
            for asteroid in self.asteroids:
                if not bullet.alive:
                    break
                if not asteroid.alive:
                    continue
                self.telemetry.record_tested()
                if not overlaps(asteroid.x, asteroid.y, asteroid.size, bullet.x, bullet.y):
                    continue
                children = fragment(asteroid, self.rng)
                fragments.extend(children)
                bullet.kill()
                asteroid.kill()
                self.score += HIT_SCORE
                self.telemetry.record_hit(len(children))
                self._combat.debug(
                    "Hit asteroid size=%d at (%.1f, %.1f): %d fragments",
                    asteroid.size,
                    asteroid.x,
                    asteroid.y,
                    len(children),
                )
        return fragments

    def _bullet_in_play(self, bullet: SpaceObject) -> bool:
        if not bullet.alive:
            return False
        margin = BULLET_CULL_MARGIN
        return (
            margin <= bullet.x < self.width - margin
            and margin <= bullet.y < self.height - margin
        )


__all__ = [
    "AsteroidsWorld",
    "BULLET_CULL_MARGIN",
    "WAVE_BONUS",
    "WAVE_SIZES",
    "wave_size_for_score",
]
