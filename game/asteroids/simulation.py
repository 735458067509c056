"""
Simulation step for the asteroid shooter
----------------------------------------
One call to Simulation.step advances a RunState by dt seconds:

1. move the ship and clamp it to the playfield
2. fire if the trigger is held and the fire interval has elapsed
3. move projectiles / spawn / move obstacles / move power-ups
4. projectile vs obstacle and obstacle vs ship collisions
5. power-up pickups and shield decay

Entities are removed by clearing their ``alive`` flag and compacting the
list afterwards, so each entity is removed at most once per tick.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig
from .difficulty import get_difficulty
from .entities import Projectile, PowerUpType, RunState, Ship
from .input import InputState
from .spawner import Spawner
from .utils import clamp, squared_distance, within_box

logger = logging.getLogger(__name__)


@dataclass
class StepEvents:
    """What happened during one tick"""
    shots: int = 0
    hits: int = 0
    kills: int = 0
    pickups: List[PowerUpType] = field(default_factory=list)
    score_changed: bool = False
    game_over: bool = False


def apply_power_up(state: RunState, kind: PowerUpType, config: GameConfig) -> bool:
    """
    Apply a booster effect to the run.

    Returns True if the score changed.
    """
    if kind is PowerUpType.FIRE_RATE:
        state.fire_interval_ms = max(
            config.min_fire_interval_ms,
            state.fire_interval_ms - config.fire_rate_step_ms,
        )
        return False
    elif kind is PowerUpType.SHIELD:
        # refresh, never extend past the full duration
        state.shield_active = True
        state.shield_timer = config.shield_duration
        return False
    elif kind is PowerUpType.SCORE:
        state.score += config.score_bonus
        return True
    else:
        raise ValueError(f"Unknown power-up type: {kind!r}")


class Simulation:
    """Owns the rules; the state it mutates is passed in on every call"""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config if config is not None else GameConfig()
        self.spawner = Spawner(self.config, rng)

    def new_run(self, difficulty: str) -> RunState:
        """Fresh state for a run; raises UnknownDifficultyError on bad ids"""
        settings = get_difficulty(difficulty)
        cfg = self.config
        ship = Ship(
            x=cfg.width / 2,
            y=cfg.height - cfg.ship_bottom_offset,
            width=cfg.ship_width,
            height=cfg.ship_height,
        )
        return RunState(
            difficulty=difficulty,
            ship=ship,
            fire_interval_ms=settings.fire_interval_ms,
            spawn_interval=settings.spawn_interval,
            speed_range=settings.speed_range,
        )

    def step(self, state: RunState, inputs: InputState, dt: float, now_ms: float) -> StepEvents:
        events = StepEvents()
        if not state.running:
            return events

        self._move_ship(state, inputs, dt)
        self._fire(state, inputs, now_ms, events)
        self._update_projectiles(state, dt)
        self._spawn_logic(state, dt)
        self._update_obstacles(state, dt)
        self._update_power_ups(state, dt)

        self._handle_collisions(state, events)
        if not state.running:
            return events

        self._handle_pickups(state, events)
        self._update_shield(state, dt)
        return events

    # ----------------------------
    # Movement / firing
    # ----------------------------

    def _move_ship(self, state: RunState, inputs: InputState, dt: float):
        ship = state.ship
        if inputs.left:
            ship.x -= self.config.ship_speed * dt
        if inputs.right:
            ship.x += self.config.ship_speed * dt
        ship.x = clamp(ship.x, self.config.ship_min_x, self.config.ship_max_x)

    def _fire(self, state: RunState, inputs: InputState, now_ms: float, events: StepEvents):
        # held trigger re-fires every interval
        if not inputs.fire or now_ms - state.last_fire_ms <= state.fire_interval_ms:
            return
        mx, my = state.ship.muzzle
        state.projectiles.append(Projectile(x=mx, y=my, vy=-self.config.projectile_speed))
        state.last_fire_ms = now_ms
        events.shots += 1

    # ----------------------------
    # Integration / spawning
    # ----------------------------

    def _update_projectiles(self, state: RunState, dt: float):
        for p in state.projectiles:
            p.y += p.vy * dt
        state.projectiles = [p for p in state.projectiles if p.y > self.config.projectile_exit_y]

    def _spawn_logic(self, state: RunState, dt: float):
        state.spawn_timer -= dt
        if state.spawn_timer > 0:
            return
        state.spawn_timer = state.spawn_interval
        state.obstacles.append(self.spawner.spawn_obstacle(state.speed_range))
        if self.spawner.roll_power_up():
            state.power_ups.append(self.spawner.spawn_power_up())

    def _update_obstacles(self, state: RunState, dt: float):
        for o in state.obstacles:
            o.y += o.vy * dt
            o.rotation += o.spin * dt
        limit = self.config.height + self.config.obstacle_exit_margin
        state.obstacles = [o for o in state.obstacles if o.y < limit]

    def _update_power_ups(self, state: RunState, dt: float):
        for p in state.power_ups:
            p.y += p.vy * dt
        limit = self.config.height + self.config.power_up_exit_margin
        state.power_ups = [p for p in state.power_ups if p.y < limit]

    # ----------------------------
    # Collisions / effects
    # ----------------------------

    def _handle_collisions(self, state: RunState, events: StepEvents):
        cfg = self.config
        cx, cy = state.ship.center

        # newest first on both lists
        for o in reversed(state.obstacles):
            hit_r2 = o.radius * o.radius * cfg.hit_scale
            for p in reversed(state.projectiles):
                if not p.alive:
                    continue
                if squared_distance(o.x, o.y, p.x, p.y) < hit_r2:
                    p.alive = False
                    o.hp -= 1
                    events.hits += 1
                    if o.hp <= 0:
                        o.alive = False
                        state.score += cfg.kill_bonus
                        events.kills += 1
                        events.score_changed = True
                    break

            if o.alive and not state.shield_active and within_box(o.x, o.y, cx, cy, o.radius):
                state.running = False
                events.game_over = True
                logger.info("Ship hit, run over with score %d", state.score)
                break

        state.obstacles = [o for o in state.obstacles if o.alive]
        state.projectiles = [p for p in state.projectiles if p.alive]

    def _handle_pickups(self, state: RunState, events: StepEvents):
        cx, cy = state.ship.center
        for p in reversed(state.power_ups):
            if within_box(p.x, p.y, cx, cy, self.config.pickup_tolerance):
                p.alive = False
                events.pickups.append(p.kind)
                if apply_power_up(state, p.kind, self.config):
                    events.score_changed = True
        state.power_ups = [p for p in state.power_ups if p.alive]

    def _update_shield(self, state: RunState, dt: float):
        if not state.shield_active:
            return
        state.shield_timer -= dt
        if state.shield_timer <= 0:
            state.shield_active = False
            state.shield_timer = 0.0
