import math

import pytest

from asteroids.math.geometry import closed_polygon_segments, transform_polygon, wrap, wrap_position
from asteroids.world.models import SHIP_MODEL, build_asteroid_model


def test_wrap_examples_on_200_wide_field() -> None:
    assert wrap(-1.0, 200) == 199.0
    assert wrap(200.0, 200) == 0.0
    assert wrap(0.0, 200) == 0.0
    assert wrap(199.5, 200) == 199.5


def test_wrap_lands_inside_field_and_is_idempotent() -> None:
    extent = 120.0
    p = -extent
    while p < 2 * extent:
        wrapped = wrap(p, extent)
        assert 0.0 <= wrapped < extent
        assert wrap(wrapped, extent) == wrapped
        p += 7.25


def test_wrap_position_wraps_axes_independently() -> None:
    assert wrap_position(-2.0, 130.0, 200, 120) == (198.0, 10.0)
    assert wrap_position(50.0, 60.0, 200, 120) == (50.0, 60.0)


def test_transform_polygon_rotates_scales_then_translates() -> None:
    points = transform_polygon(SHIP_MODEL, 100.0, 60.0, math.pi / 2.0, 2.0)
    nose = points[0]
    # (0, -5) rotated a quarter turn clockwise on screen points right.
    assert nose.x == pytest.approx(110.0)
    assert nose.y == pytest.approx(60.0)


def test_transform_polygon_identity_keeps_template_offsets() -> None:
    points = transform_polygon(SHIP_MODEL, 0.0, 0.0)
    assert [(p.x, p.y) for p in points] == [pytest.approx(v) for v in SHIP_MODEL]


def test_transform_polygon_returns_fresh_points_and_leaves_template_alone() -> None:
    template = [(1.0, 0.0), (0.0, 1.0)]
    first = transform_polygon(template, 5.0, 5.0, 1.0, 3.0)
    first[0].x = 999.0
    second = transform_polygon(template, 5.0, 5.0, 1.0, 3.0)
    assert template == [(1.0, 0.0), (0.0, 1.0)]
    assert second[0].x != 999.0


def test_closed_polygon_segments_closes_the_loop() -> None:
    points = transform_polygon(SHIP_MODEL, 0.0, 0.0)
    segments = list(closed_polygon_segments(points))
    assert len(segments) == len(points) + 1
    assert segments[2] == (points[2], points[0])
    assert segments[0] == segments[-1]


def test_closed_polygon_segments_empty() -> None:
    assert list(closed_polygon_segments([])) == []


def test_asteroid_model_is_jagged_circle() -> None:
    import random

    model = build_asteroid_model(random.Random(3))
    assert len(model) == 20
    for x, y in model:
        assert 0.8 <= math.hypot(x, y) <= 1.2 + 1e-9
    assert model == build_asteroid_model(random.Random(3))
