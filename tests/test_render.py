import random

import pygame

from asteroids.render.canvas import COLORS, PygameCanvas
from asteroids.render.wireframe import WireframeRenderer, draw_closed_polygon, draw_wireframe_model
from asteroids.world.entities import SpaceObject
from asteroids.world.models import SHIP_MODEL, ModelSet


class _LineRecorder:
    width = 200
    height = 120

    def __init__(self) -> None:
        self.lines: list[tuple[int, int, int, int]] = []
        self.points: list[tuple[float, float]] = []
        self.filled = None

    def fill(self, color) -> None:
        self.filled = color

    def draw_point(self, x, y, color) -> None:
        self.points.append((x, y))

    def draw_line(self, x0, y0, x1, y1, color) -> None:
        self.lines.append((x0, y0, x1, y1))

    def draw_text(self, x, y, text, color) -> None:
        pass


def _rgb(canvas: PygameCanvas, x: int, y: int) -> tuple[int, int, int]:
    return tuple(canvas.surface.get_at((x, y)))[:3]


def test_closed_polygon_truncates_to_pixel_grid() -> None:
    recorder = _LineRecorder()
    points = [pygame.math.Vector2(1.9, 1.2), pygame.math.Vector2(5.7, 1.2), pygame.math.Vector2(5.7, 4.8)]
    draw_closed_polygon(recorder, points, COLORS["ship"])
    assert recorder.lines == [(1, 1, 5, 1), (5, 1, 5, 4), (5, 4, 1, 1), (1, 1, 5, 1)]


def test_ship_model_is_drawn_at_entity_position() -> None:
    recorder = _LineRecorder()
    draw_wireframe_model(recorder, SHIP_MODEL, 100.0, 60.0)
    assert recorder.lines[0] == (100, 55, 97, 62)


def test_renderer_scales_asteroids_by_size() -> None:
    recorder = _LineRecorder()
    models = ModelSet(ship=SHIP_MODEL, asteroid=((0.0, 1.0), (1.0, 0.0), (0.0, -1.0)))
    renderer = WireframeRenderer(recorder, models)
    renderer.draw_asteroid(SpaceObject(x=50.0, y=50.0, size=8))
    assert recorder.lines[0] == (50, 58, 58, 50)
    assert len(recorder.lines) == 4


def test_renderer_draws_bullets_as_points_and_clears_black() -> None:
    recorder = _LineRecorder()
    renderer = WireframeRenderer(recorder, ModelSet.generate(random.Random(2)))
    renderer.clear()
    renderer.draw_bullet(SpaceObject(x=12.5, y=7.0))
    assert recorder.filled == COLORS["bg"]
    assert recorder.points == [(12.5, 7.0)]


def test_canvas_wraps_points() -> None:
    canvas = PygameCanvas.create(200, 120)
    canvas.fill(COLORS["bg"])
    canvas.draw_point(-1, 5, COLORS["bullet"])
    canvas.draw_point(200, 119, COLORS["bullet"])
    assert _rgb(canvas, 199, 5) == (255, 255, 255)
    assert _rgb(canvas, 0, 119) == (255, 255, 255)


def test_canvas_lines_wrap_across_the_edge() -> None:
    canvas = PygameCanvas.create(200, 120)
    canvas.fill(COLORS["bg"])
    canvas.draw_line(195, 10, 205, 10, COLORS["asteroid"])
    assert _rgb(canvas, 198, 10) == (255, 0, 0)
    assert _rgb(canvas, 3, 10) == (255, 0, 0)
    assert _rgb(canvas, 100, 10) == (0, 0, 0)


def test_canvas_present_scales_to_window() -> None:
    canvas = PygameCanvas.create(20, 10)
    canvas.fill(COLORS["bg"])
    canvas.draw_point(1, 1, COLORS["ship"])
    window = pygame.Surface((80, 40))
    canvas.present(window)
    assert tuple(window.get_at((5, 5)))[:3] == (255, 255, 255)
    assert tuple(window.get_at((20, 20)))[:3] == (0, 0, 0)
