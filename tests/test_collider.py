import copy
import math

import pytest

from scorpsim.collider import CircularCollider
from scorpsim.vec2d import Vec2d

WORLD = 100.0


def body(x, y, r):
    return CircularCollider(Vec2d(x, y), r, world_size=WORLD)


def test_identical_bodies_collide_and_contain_each_other():
    b1 = body(1, 1, 2)
    b2 = copy.copy(b1)
    assert b1.is_colliding(b2)
    assert b2.is_colliding(b1)
    assert b1 | b2
    assert b2 | b1
    assert b1.is_circular_collider_inside(b2)
    assert b2.is_circular_collider_inside(b1)
    assert b1 > b2
    assert b2 > b1


def test_bodies_not_overlapping():
    b1 = body(1, 1, 0.5)
    b2 = body(-1, -1, 0.5)
    assert not b1.is_colliding(b2)
    assert not b2.is_colliding(b1)
    assert not (b1 | b2)
    assert not (b2 | b1)
    assert not b1.is_circular_collider_inside(b2)
    assert not b2.is_circular_collider_inside(b1)
    assert not (b1 > b2)
    assert not (b2 > b1)


def test_overlapping_but_not_inside():
    b1 = body(0, 0, 2)
    b2 = body(3, 0, 2)
    assert b1.is_colliding(b2)
    assert b2.is_colliding(b1)
    assert b1 | b2
    assert not b1.is_circular_collider_inside(b2)
    assert not b2.is_circular_collider_inside(b1)
    assert not (b1 > b2)
    assert not (b2 > b1)


def test_body_inside_another():
    b1 = body(0, 0, 5)
    b2 = body(0, 0, 1)
    assert b1.is_colliding(b2)
    assert b2.is_colliding(b1)
    assert b1.is_circular_collider_inside(b2)
    assert b1 > b2
    assert not b2.is_circular_collider_inside(b1)
    assert not (b2 > b1)


def test_points_inside_and_outside():
    b = body(0, 0, 5)
    p1 = Vec2d(0, 0)
    p2 = Vec2d(6, 0)
    assert b.is_point_inside(p1)
    assert not b.is_point_inside(p2)
    assert b > p1
    assert not (b > p2)


def test_moves_correctly():
    b = body(1, 2, 2)
    b.move(Vec2d(1, 0))
    assert b.position == Vec2d(2, 2)
    b += Vec2d(-2, -2)
    assert b.position == Vec2d(0, 0)


def test_can_be_copied():
    b = body(1, 2, 2)
    c = copy.copy(b)
    assert c.position == b.position
    assert c.radius == b.radius
    other = body(3, 4, 5)
    other = copy.copy(b)
    assert other.position == b.position
    assert other.radius == b.radius


def test_negative_radius_rejected():
    with pytest.raises(ValueError):
        body(0, 0, -1)


def test_str_format():
    assert str(body(1, 2, 2)) == "CircularCollider : position = (1 , 2), radius = 2"


@pytest.fixture
def toric_bodies():
    return {
        1: body(1, 1, 2),
        2: body(1, -1, 2),
        3: body(-1, 1, 2),
        4: body(-1, -1, 2),
        5: body(-4, 2, 2),
    }


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, True), (1, 3, True), (1, 4, True), (1, 5, False),
        (2, 3, True), (2, 4, True), (2, 5, False),
        (3, 4, True), (3, 5, True), (4, 5, False),
    ],
)
def test_toric_collisions(toric_bodies, a, b, expected):
    assert toric_bodies[a].is_colliding(toric_bodies[b]) is expected
    assert toric_bodies[b].is_colliding(toric_bodies[a]) is expected


def test_toric_none_inside_but_itself(toric_bodies):
    for i in range(1, 6):
        assert toric_bodies[i].is_circular_collider_inside(toric_bodies[i])
        for j in range(i + 1, 6):
            assert not toric_bodies[i].is_circular_collider_inside(toric_bodies[j])


@pytest.mark.parametrize(
    "point, expected",
    [
        ((1, 1), True), ((3, 1), True), ((2, 2), True), ((3, 3), False),
        ((-1, 1), True), ((1, -1), True), ((-0.25, -0.25), True),
        ((-0.5, -0.5), False), ((-2, -2), False),
    ],
)
def test_toric_point_inside(toric_bodies, point, expected):
    assert toric_bodies[1].is_point_inside(Vec2d(*point)) is expected


def test_toric_inside():
    b1 = body(1, 1, 5)
    b2 = body(-1, -1, 1)
    assert b1.is_colliding(b2)
    assert b1.is_circular_collider_inside(b2)


def test_toric_distance_and_direction():
    b = body(1, 1, 1)
    x = Vec2d(-1, 1)
    y = body(1, -1, 1)
    z = Vec2d(-1, -1)
    u = body(2, 2, 1)
    v = Vec2d(2, 1)
    w = Vec2d(1, 2)

    assert b.distance_to(u) == pytest.approx(math.sqrt(2))
    assert b.distance_to(v) == pytest.approx(1)
    assert b.distance_to(w) == pytest.approx(1)
    assert b.distance_to(x) == pytest.approx(2)
    assert b.distance_to(y) == pytest.approx(2)
    assert b.distance_to(z) == pytest.approx(math.sqrt(8))

    assert b.direction_to(u) == Vec2d(1, 1)
    assert b.direction_to(v) == Vec2d(1, 0)
    assert b.direction_to(w) == Vec2d(0, 1)
    assert b.direction_to(x) == Vec2d(-2, 0)
    assert b.direction_to(y) == Vec2d(0, -2)
    assert b.direction_to(z) == Vec2d(-2, -2)


def test_clamp_wraps_position():
    b = body(-1, 101, 1)
    assert b.position == Vec2d(99, 1)