"""
AsteroidsEnv - the asteroid shooter as a Gymnasium environment
--------------------------------------------------------------
- Same Simulation as the playable game, stepped with a fixed dt
- Simulated clock, so fire cooldowns follow game time, not wall time
- MultiDiscrete action space: [move(3), fire(2)]
- Vector observation: ship state + top-K nearest obstacles + top-M nearest power-ups
- Episode terminates when the ship is hit

Quick test:
    python play.py --random-agent
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, GameConfig
from .entities import PowerUpType
from .input import InputState
from .simulation import Simulation, StepEvents
from .utils import clamp

_POWER_UP_CODES = {
    PowerUpType.FIRE_RATE: -1.0,
    PowerUpType.SHIELD: 0.0,
    PowerUpType.SCORE: 1.0,
}


class AsteroidsEnv(gym.Env):
    """Asteroid shooter environment on top of Simulation"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        difficulty: str = ENV_CONFIG["difficulty"],
        dt: float = ENV_CONFIG["dt"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_obstacles: int = ENV_CONFIG["k_obstacles"],
        m_power_ups: int = ENV_CONFIG["m_power_ups"],
        config: Optional[GameConfig] = None,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode

        self.config = config if config is not None else GameConfig()
        self.difficulty = difficulty
        self.dt = dt
        self.max_steps = max_steps
        self.k_obstacles = k_obstacles
        self.m_power_ups = m_power_ups

        self._rng = random.Random()
        self.simulation = Simulation(self.config, self._rng)
        # fail fast on a bad difficulty before the first reset
        self.run = self.simulation.new_run(difficulty)

        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Ship: x(1) shield(1) fire ready(1)
        # Each obstacle: rel pos(2) vy(1) radius(1)
        # Each power-up: rel pos(2) type(1)
        obs_dim = 3 + (self.k_obstacles * 4) + (self.m_power_ups * 3)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._elapsed = 0.0
        self._events = StepEvents()

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is not None:
            self._rng.seed(seed)

        self.run = self.simulation.new_run(self.difficulty)
        self._step_count = 0
        self._elapsed = 0.0
        self._events = StepEvents()

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, fire = int(action[0]), int(action[1])
        inputs = InputState(left=move == 1, right=move == 2, fire=fire == 1)

        self._elapsed += self.dt
        self._events = self.simulation.step(self.run, inputs, self.dt, self._elapsed * 1000.0)

        reward = self._compute_reward()
        terminated = not self.run.running
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        cfg = self.config
        ship = self.run.ship
        sx, sy = ship.center

        since_shot = self._elapsed * 1000.0 - self.run.last_fire_ms
        ready = clamp(since_shot / max(1e-6, self.run.fire_interval_ms), 0.0, 1.0)

        obs_parts = [
            (ship.x - cfg.ship_min_x) / max(1e-6, cfg.ship_max_x - cfg.ship_min_x) * 2 - 1,
            1.0 if self.run.shield_active else -1.0,
            ready * 2 - 1,
        ]

        # Obstacles: top-K nearest
        obstacles_sorted = sorted(
            self.run.obstacles,
            key=lambda o: (o.x - sx) ** 2 + (o.y - sy) ** 2
        )
        speed_cap = max(1e-6, self.run.speed_range[1])
        radius_cap = max(1e-6, cfg.obstacle_radius[1])
        for i in range(self.k_obstacles):
            if i < len(obstacles_sorted):
                o = obstacles_sorted[i]
                obs_parts += [
                    clamp((o.x - sx) / cfg.width, -1, 1),
                    clamp((o.y - sy) / cfg.height, -1, 1),
                    clamp(o.vy / speed_cap, -1, 1),
                    clamp(o.radius / radius_cap, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        # Power-ups: top-M nearest
        power_ups_sorted = sorted(
            self.run.power_ups,
            key=lambda p: (p.x - sx) ** 2 + (p.y - sy) ** 2
        )
        for i in range(self.m_power_ups):
            if i < len(power_ups_sorted):
                p = power_ups_sorted[i]
                obs_parts += [
                    clamp((p.x - sx) / cfg.width, -1, 1),
                    clamp((p.y - sy) / cfg.height, -1, 1),
                    _POWER_UP_CODES[p.kind],
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        R_HIT = 0.1
        R_KILL = 1.0
        R_PICKUP = 0.5
        R_SHOT = 0.01
        R_ALIVE = 0.001
        R_DEATH = 5.0

        reward = R_ALIVE
        reward += R_HIT * self._events.hits
        reward += R_KILL * self._events.kills
        reward += R_PICKUP * len(self._events.pickups)
        reward -= R_SHOT * self._events.shots

        if self._events.game_over:
            reward -= R_DEATH

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.run.score,
            "shield": self.run.shield_active,
            "fire_interval_ms": self.run.fire_interval_ms,
            "num_obstacles": len(self.run.obstacles),
            "num_power_ups": len(self.run.power_ups),
            "num_projectiles": len(self.run.projectiles),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode != "human":
            return None

        if self._window is None:
            # arcade opens a display on import; only load it when asked to draw
            from .window import AsteroidsWindow
            self._window = AsteroidsWindow(self.config, title="AsteroidsEnv - Arcade")

        self._window.render(self.run)
        self._window.score_changed(self.run.score)
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def run_random_episode(
    difficulty: str = "easy",
    render: bool = False,
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None,
) -> Dict[str, Any]:
    """Play one episode with uniformly random actions"""
    env = AsteroidsEnv(
        render_mode="human" if render else None, difficulty=difficulty, config=config
    )
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0
    rewards: List[float] = []

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        rewards.append(reward)
        total += reward

    env.close()
    return {
        "return": total,
        "length": len(rewards),
        "score": info["score"],
        "terminated": terminated,
    }
