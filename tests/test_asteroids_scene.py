import logging
import random

import pygame

from asteroids.engine.input import InputMapper
from asteroids.engine.logger import GameLogger, LoggerConfig
from asteroids.engine.settings import GameSettings
from asteroids.ui.asteroids_scene import AsteroidsScene


def _make_scene() -> AsteroidsScene:
    scene = AsteroidsScene()
    scene.start(
        settings=GameSettings(field_size=(120, 80), pixel_scale=2),
        input=InputMapper(),
        logger=GameLogger(LoggerConfig(level=logging.CRITICAL, channels={})),
        rng=random.Random(4),
    )
    return scene


def test_scene_builds_world_for_configured_field() -> None:
    scene = _make_scene()
    assert isinstance(scene, AsteroidsScene)
    assert (scene.world.width, scene.world.height) == (120, 80)
    assert scene.canvas.surface.get_size() == (120, 80)
    assert len(scene.world.asteroids) == 2


def test_scene_feeds_input_to_world_and_draws() -> None:
    scene = _make_scene()
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    scene.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))

    assert scene.frame(0.01) is True
    assert len(scene.world.bullets) == 1

    window = pygame.Surface((240, 160))
    scene.render(window)
    nose = (int(scene.world.player.x) * 2, (int(scene.world.player.y) - 5) * 2)
    assert tuple(window.get_at(nose))[:3] == (255, 255, 255)


def test_quit_binding_posts_quit_event(monkeypatch) -> None:
    posted: list[pygame.event.Event] = []
    monkeypatch.setattr(pygame.event, "post", posted.append)
    scene = _make_scene()
    scene.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert posted == []
    scene.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE))
    assert [event.type for event in posted] == [pygame.QUIT]
