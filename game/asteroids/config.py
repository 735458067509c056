"""
Game configuration for the asteroid shooter
Tunable constants for the playfield, entities and power-ups
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, asdict, replace
from typing import Any, Dict, Tuple

# Gymnasium environment parameters
ENV_CONFIG = {
    "difficulty": "easy",
    "dt": 1 / 30,
    "max_steps": 1800,  # 60s at 30 FPS
    "k_obstacles": 5,
    "m_power_ups": 2,
}


@dataclass(frozen=True)
class GameConfig:
    """Every tunable constant of the simulation"""
    width: int = 480
    height: int = 640
    max_dt: float = 0.04

    ship_width: float = 36.0
    ship_height: float = 28.0
    ship_bottom_offset: float = 60.0
    ship_margin: float = 10.0
    ship_speed: float = 220.0

    projectile_speed: float = 400.0
    projectile_exit_y: float = -10.0

    obstacle_spawn_y: float = -40.0
    obstacle_exit_margin: float = 40.0
    obstacle_sides: Tuple[int, int] = (6, 9)
    obstacle_radius: Tuple[float, float] = (15.0, 45.0)
    obstacle_jitter: Tuple[float, float] = (0.7, 1.3)
    obstacle_max_spin: float = 0.75
    hp_per_radius: float = 10.0
    hit_scale: float = 0.6
    kill_bonus: int = 10

    power_up_chance: float = 0.2
    power_up_spawn_y: float = -20.0
    power_up_speed: float = 100.0
    power_up_size: float = 12.0
    power_up_inset: float = 30.0
    power_up_exit_margin: float = 20.0
    pickup_tolerance: float = 20.0
    fire_rate_step_ms: float = 80.0
    min_fire_interval_ms: float = 80.0
    shield_duration: float = 5.0
    score_bonus: int = 50

    @property
    def ship_min_x(self) -> float:
        return self.ship_margin

    @property
    def ship_max_x(self) -> float:
        return self.width - self.ship_margin - self.ship_width

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """
        Build a config from the defaults with ``data`` applied on top.

        Raises:
            ValueError: if ``data`` is not a mapping or contains a key that is
                not a config field
        """
        if not isinstance(data, dict):
            raise ValueError(f"Config overrides must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        # JSON gives lists where the dataclass expects pairs
        overrides = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in data.items()
        }
        return replace(cls(), **overrides)

    @classmethod
    def from_json(cls, path: str) -> "GameConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Simulation defaults as a plain dict, alongside ENV_CONFIG
GAME_CONFIG: Dict[str, Any] = GameConfig().to_dict()
