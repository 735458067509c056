"""Shared fixtures for the asteroid shooter tests"""

import math
import random

import pytest

from game.asteroids import GameConfig, Obstacle, Projectile, Simulation


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def sim(config):
    return Simulation(config, random.Random(1234))


@pytest.fixture
def run(sim):
    """Easy run with spawning pushed far into the future"""
    state = sim.new_run("easy")
    state.spawn_timer = 1e9
    return state


def make_obstacle(x, y, radius=20.0, vy=0.0, spin=0.0):
    return Obstacle(
        x=x,
        y=y,
        vy=vy,
        rotation=0.0,
        spin=spin,
        points=[(radius, 0.0), (0.0, radius), (-radius, 0.0), (0.0, -radius)],
        radius=radius,
        hp=math.ceil(radius / 10),
    )


def make_projectile(x, y):
    return Projectile(x=x, y=y)


class FakeClock:
    """Manually advanced clock in seconds"""

    def __init__(self, now=100.0):
        self.now = now

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now
