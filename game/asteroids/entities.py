"""
Game entity dataclasses
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class PowerUpType(str, Enum):
    """Booster kinds; values match the names used by the HUD"""
    FIRE_RATE = "fireRate"
    SHIELD = "shield"
    SCORE = "score"


@dataclass
class Ship:
    """Player ship; (x, y) is the top-left corner"""
    x: float
    y: float
    width: float = 36.0
    height: float = 28.0

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def muzzle(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y


@dataclass
class Projectile:
    """Shot fired by the ship"""
    x: float
    y: float
    vy: float = -400.0
    alive: bool = True


@dataclass
class Obstacle:
    """Falling asteroid; points are polygon offsets from (x, y)"""
    x: float
    y: float
    vy: float
    rotation: float
    spin: float  # rad/s
    points: List[Tuple[float, float]]
    radius: float  # unjittered base radius, used for collisions
    hp: int
    alive: bool = True


@dataclass
class PowerUp:
    """Falling booster picked up by touching it with the ship"""
    x: float
    y: float
    kind: PowerUpType
    vy: float = 100.0
    size: float = 12.0
    alive: bool = True


@dataclass
class RunState:
    """Everything that belongs to a single run"""
    difficulty: str
    ship: Ship
    fire_interval_ms: float
    spawn_interval: float
    speed_range: Tuple[float, float]
    projectiles: List[Projectile] = field(default_factory=list)
    obstacles: List[Obstacle] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)
    score: int = 0
    running: bool = True
    spawn_timer: float = 0.0  # first tick spawns
    last_fire_ms: float = -math.inf  # first shot is never gated
    shield_active: bool = False
    shield_timer: float = 0.0
