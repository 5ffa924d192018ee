"""Entry point for the wireframe asteroids game."""
from __future__ import annotations

from pathlib import Path

import pygame

from asteroids.engine.input import InputBindings, InputMapper
from asteroids.engine.logger import init_logger
from asteroids.engine.loop import FrameLoop
from asteroids.engine.settings import GameSettings
from asteroids.ui.asteroids_scene import AsteroidsScene


SETTINGS_PATH = Path("settings.json")


def main() -> None:
    settings = GameSettings.load(SETTINGS_PATH)
    logger = init_logger(SETTINGS_PATH)
    pygame.init()

    screen = pygame.display.set_mode(settings.window_size)
    pygame.display.set_caption("Asteroids")
    clock = pygame.time.Clock()

    input_mapper = InputMapper(InputBindings.load(SETTINGS_PATH), logger.channel("input"))

    scene = AsteroidsScene()
    scene.start(settings=settings, input=input_mapper, logger=logger)

    def process_events() -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
                return
            scene.handle_event(event)

    def update(dt: float) -> bool:
        running = scene.frame(dt)
        scene.render(screen)
        pygame.display.flip()
        clock.tick(settings.max_fps)
        return running

    loop = FrameLoop(update, process_events)

    try:
        loop.run()
    finally:
        pygame.quit()
        print("\nUsage: Left/Right rotate, Up thrust, Space fire (on release), Esc quit.")


if __name__ == "__main__":
    main()
