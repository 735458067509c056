import math
import random

import pytest

from game.asteroids import GameConfig, PowerUpType, Spawner


@pytest.fixture
def spawner():
    return Spawner(GameConfig(), random.Random(7))


def test_obstacle_shape(spawner):
    for _ in range(200):
        o = spawner.spawn_obstacle((40.0, 60.0))
        assert 6 <= len(o.points) <= 9
        assert 15 <= o.radius < 45
        assert o.hp == math.ceil(o.radius / 10)
        for px, py in o.points:
            r = math.hypot(px, py)
            assert 0.7 * o.radius - 1e-9 <= r <= 1.3 * o.radius + 1e-9


def test_obstacle_points_go_round_evenly(spawner):
    o = spawner.spawn_obstacle((40.0, 60.0))
    sides = len(o.points)
    for i, (px, py) in enumerate(o.points):
        expected = (i / sides) * math.pi * 2
        angle = math.atan2(py, px) % (math.pi * 2)
        assert angle == pytest.approx(expected, abs=1e-9)


def test_obstacle_motion(spawner):
    for _ in range(200):
        o = spawner.spawn_obstacle((90.0, 130.0))
        assert 0 <= o.x < 480
        assert o.y == -40
        assert 90 <= o.vy <= 130
        assert 0 <= o.rotation < math.pi * 2
        assert -0.75 <= o.spin <= 0.75
        assert o.alive


def test_side_counts_cover_range(spawner):
    counts = {len(spawner.spawn_obstacle((40.0, 60.0)).points) for _ in range(300)}
    assert counts == {6, 7, 8, 9}


def test_power_up(spawner):
    kinds = set()
    for _ in range(200):
        p = spawner.spawn_power_up()
        assert 30 <= p.x < 450
        assert p.y == -20
        assert p.vy == 100
        assert p.size == 12
        kinds.add(p.kind)
    assert kinds == set(PowerUpType)


def test_roll_power_up_uses_chance():
    always = Spawner(GameConfig(power_up_chance=1.0), random.Random(0))
    never = Spawner(GameConfig(power_up_chance=0.0), random.Random(0))
    assert all(always.roll_power_up() for _ in range(50))
    assert not any(never.roll_power_up() for _ in range(50))


def test_same_seed_same_obstacles():
    a = Spawner(GameConfig(), random.Random(3)).spawn_obstacle((40.0, 60.0))
    b = Spawner(GameConfig(), random.Random(3)).spawn_obstacle((40.0, 60.0))
    assert a == b
