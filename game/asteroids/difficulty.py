"""
Difficulty table: obstacle speed range, spawn interval and starting fire interval
"""

from dataclasses import dataclass
from typing import Dict, Tuple


class UnknownDifficultyError(ValueError):
    """Raised when a run is requested with a difficulty that is not in the table"""


@dataclass(frozen=True)
class Difficulty:
    """Tuning for one difficulty level"""
    speed_min: float  # px/s
    speed_max: float  # px/s
    spawn_interval: float  # seconds between obstacle spawns
    fire_interval_ms: float  # starting time between shots

    @property
    def speed_range(self) -> Tuple[float, float]:
        return self.speed_min, self.speed_max


DIFFICULTIES: Dict[str, Difficulty] = {
    "easy": Difficulty(speed_min=40.0, speed_max=60.0, spawn_interval=1.6, fire_interval_ms=250.0),
    "medium": Difficulty(speed_min=60.0, speed_max=90.0, spawn_interval=1.0, fire_interval_ms=200.0),
    "hard": Difficulty(speed_min=90.0, speed_max=130.0, spawn_interval=0.7, fire_interval_ms=150.0),
}


def get_difficulty(name: str) -> Difficulty:
    """Look up a difficulty by id, failing fast on unknown ids"""
    try:
        return DIFFICULTIES[name]
    except KeyError:
        raise UnknownDifficultyError(
            f"Unknown difficulty: {name!r} (expected one of {', '.join(DIFFICULTIES)})"
        ) from None


def cycle_difficulty(name: str, step: int) -> str:
    """Difficulty ``step`` places after ``name`` in table order, wrapping around"""
    names = list(DIFFICULTIES)
    get_difficulty(name)
    return names[(names.index(name) + step) % len(names)]
