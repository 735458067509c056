"""
Procedural generation of obstacles and power-ups
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional, Tuple

from .config import GameConfig
from .entities import Obstacle, PowerUp, PowerUpType

logger = logging.getLogger(__name__)

POWER_UP_TYPES = tuple(PowerUpType)


class Spawner:
    """Creates new entities at the top edge of the playfield"""

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def spawn_obstacle(self, speed_range: Tuple[float, float]) -> Obstacle:
        """
        Build a jagged polygon asteroid above the visible area.

        The polygon has 6-9 vertices at even angles, each at a radius
        jittered around a random base radius. The base radius (not the
        jittered one) drives collisions and hit-points.
        """
        cfg = self.config
        rng = self.rng

        sides = rng.randint(*cfg.obstacle_sides)
        r_min, r_max = cfg.obstacle_radius
        radius = r_min + rng.random() * (r_max - r_min)

        j_min, j_max = cfg.obstacle_jitter
        points = []
        for i in range(sides):
            angle = (i / sides) * math.pi * 2
            r = radius * (j_min + rng.random() * (j_max - j_min))
            points.append((math.cos(angle) * r, math.sin(angle) * r))

        speed_min, speed_max = speed_range
        obstacle = Obstacle(
            x=rng.random() * cfg.width,
            y=cfg.obstacle_spawn_y,
            vy=speed_min + rng.random() * (speed_max - speed_min),
            rotation=rng.random() * math.pi * 2,
            spin=(rng.random() - 0.5) * 2 * cfg.obstacle_max_spin,
            points=points,
            radius=radius,
            hp=math.ceil(radius / cfg.hp_per_radius),
        )
        logger.debug("Spawned obstacle at x=%.1f r=%.1f hp=%d", obstacle.x, radius, obstacle.hp)
        return obstacle

    def spawn_power_up(self) -> PowerUp:
        """Drop a booster of a random type, kept inside the side margins"""
        cfg = self.config
        inset = cfg.power_up_inset
        power_up = PowerUp(
            x=inset + self.rng.random() * (cfg.width - 2 * inset),
            y=cfg.power_up_spawn_y,
            kind=self.rng.choice(POWER_UP_TYPES),
            vy=cfg.power_up_speed,
            size=cfg.power_up_size,
        )
        logger.debug("Spawned %s power-up at x=%.1f", power_up.kind.value, power_up.x)
        return power_up

    def roll_power_up(self) -> bool:
        """Whether an obstacle spawn also drops a power-up"""
        return self.rng.random() < self.config.power_up_chance
