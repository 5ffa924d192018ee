"""Playfield scene hosting a single asteroids session."""
from __future__ import annotations

import random

import pygame

from asteroids.engine.input import InputMapper
from asteroids.engine.logger import GameLogger
from asteroids.engine.scene import Scene
from asteroids.engine.settings import GameSettings
from asteroids.render.canvas import PygameCanvas
from asteroids.render.wireframe import WireframeRenderer
from asteroids.world.field import AsteroidsWorld
from asteroids.world.models import ModelSet


class AsteroidsScene(Scene):
    def __init__(self) -> None:
        super().__init__()
        self.settings: GameSettings | None = None
        self.input: InputMapper | None = None
        self.logger: GameLogger | None = None
        self.world: AsteroidsWorld | None = None
        self.canvas: PygameCanvas | None = None
        self.renderer: WireframeRenderer | None = None

    def on_create(self, **context) -> None:
        self.settings = context.get("settings") or GameSettings()
        self.input = context["input"]
        self.logger = context["logger"]
        rng = context.get("rng") or random.Random(self.settings.seed)
        self.canvas = context.get("canvas") or PygameCanvas.create(self.settings.width, self.settings.height)
        self.renderer = WireframeRenderer(self.canvas, ModelSet.generate(rng))
        self.world = AsteroidsWorld(self.settings.width, self.settings.height, self.logger, rng=rng)

    def handle_event(self, event: pygame.event.Event) -> None:
        if not self.input:
            return
        self.input.handle_event(event)
        if self.input.consume_release("quit"):
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    def update(self, dt: float) -> bool:
        return self.world.step(dt, self.input.controls(), self.renderer)

    def render(self, surface: pygame.Surface) -> None:
        if self.canvas:
            self.canvas.present(surface)


__all__ = ["AsteroidsScene"]
