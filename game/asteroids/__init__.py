"""Asteroid shooter game module - simulation engine, frame loop and Gymnasium env"""

from .config import GameConfig
from .difficulty import DIFFICULTIES, Difficulty, UnknownDifficultyError, cycle_difficulty, get_difficulty
from .entities import Obstacle, PowerUp, PowerUpType, Projectile, RunState, Ship
from .input import InputState, InputTracker, zone_at
from .loop import FrameLoop, LoopState, QueueScheduler
from .simulation import Simulation, StepEvents, apply_power_up
from .spawner import Spawner
from .env import AsteroidsEnv, run_random_episode

__all__ = [
    'GameConfig',
    'DIFFICULTIES', 'Difficulty', 'UnknownDifficultyError', 'cycle_difficulty', 'get_difficulty',
    'Obstacle', 'PowerUp', 'PowerUpType', 'Projectile', 'RunState', 'Ship',
    'InputState', 'InputTracker', 'zone_at',
    'FrameLoop', 'LoopState', 'QueueScheduler',
    'Simulation', 'StepEvents', 'apply_power_up',
    'Spawner',
    'AsteroidsEnv', 'run_random_episode',
]
